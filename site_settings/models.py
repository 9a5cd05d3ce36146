from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models, transaction


def default_return_percentage():
    return Decimal(str(getattr(settings, 'DEFAULT_RETURN_PERCENTAGE', '2.00')))


class SiteSettings(models.Model):
    """
    Global configuration row. There is at most one; callers go through
    load() / upsert() and never assume it exists.
    """

    SINGLETON_PK = 1

    default_return_percentage = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=default_return_percentage,
        validators=[MinValueValidator(0), MaxValueValidator(100)]
    )
    admin_email = models.EmailField(blank=True, null=True)
    admin_contact_info = models.TextField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Settings"
        verbose_name_plural = "Settings"

    def __str__(self):
        return f"Settings - {self.default_return_percentage}%"

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_PK
        if self._state.adding and self.created_at is None:
            # A fresh instance updates the stored row in place, keep its creation time
            self.created_at = (
                type(self).objects.filter(pk=self.pk)
                .values_list('created_at', flat=True).first()
            )
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        """Return the settings row, or None if it has never been written"""
        return cls.objects.filter(pk=cls.SINGLETON_PK).first()

    @classmethod
    def get_default_return_percentage(cls):
        instance = cls.load()
        if instance is None:
            return default_return_percentage()
        return instance.default_return_percentage

    @classmethod
    def upsert(cls, **fields):
        """Create the row on first write, otherwise update only the given fields"""
        with transaction.atomic():
            instance = cls.objects.select_for_update().filter(pk=cls.SINGLETON_PK).first()
            if instance is None:
                instance = cls(**fields)
                instance.save()
                return instance

            for name, value in fields.items():
                setattr(instance, name, value)
            instance.save()
            return instance
