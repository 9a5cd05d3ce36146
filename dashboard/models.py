from decimal import Decimal

from django.db import models


class Earnings(models.Model):
    """What the operation earned in a month, entered by the operator"""

    month_year = models.CharField(max_length=7, unique=True)  # YYYY-MM
    total_earnings = models.DecimalField(max_digits=16, decimal_places=2, default=Decimal('0.00'))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-month_year']
        verbose_name_plural = "Earnings"

    def __str__(self):
        return f"{self.month_year} - {self.total_earnings}"
