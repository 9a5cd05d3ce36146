import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models

from .utils.calculations import derive_payout


class Investment(models.Model):
    """An investor's registered capital placement and its payout terms"""

    TYPE_DAILY = 'Daily'
    TYPE_MONTHLY = 'Monthly'
    TYPE_ONE_TIME = 'One-time'

    TYPE_CHOICES = [
        (TYPE_DAILY, 'Daily'),
        (TYPE_MONTHLY, 'Monthly'),
        (TYPE_ONE_TIME, 'One-time'),
    ]

    STATUS_ACTIVE = 'Active'
    STATUS_INACTIVE = 'Inactive'

    STATUS_CHOICES = [
        (STATUS_ACTIVE, 'Active'),
        (STATUS_INACTIVE, 'Inactive'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Investor details
    name = models.CharField(max_length=200)
    email = models.EmailField()
    phone_number = models.CharField(max_length=20)

    # Investment terms
    invested_amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    investment_date = models.DateField()
    investment_type = models.CharField(max_length=10, choices=TYPE_CHOICES, default=TYPE_MONTHLY)
    return_percentage = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=[MinValueValidator(0), MaxValueValidator(100)]
    )
    # Stored snapshot, only refreshed when the record is saved with new terms
    monthly_payout = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal('0.00'))

    # Payment details
    upi_transaction_id = models.CharField(max_length=100, blank=True)
    total_paid_out = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    notes = models.TextField(blank=True)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_ACTIVE)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status'], name='investment_status_idx'),
        ]

    def __str__(self):
        return f"{self.name} - {self.invested_amount} - {self.status}"

    @property
    def is_active(self):
        return self.status == self.STATUS_ACTIVE

    def refresh_monthly_payout(self):
        """Recalculate the stored monthly payout from the current terms"""
        self.monthly_payout = derive_payout(self.invested_amount, self.return_percentage)
        return self.monthly_payout
