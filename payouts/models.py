import uuid

from django.db import models

from investments.models import Investment


class Payout(models.Model):
    """One month's payout obligation for one investment"""

    STATUS_PAID = 'Paid'
    STATUS_NOT_PAID = 'Not Paid'

    STATUS_CHOICES = [
        (STATUS_PAID, 'Paid'),
        (STATUS_NOT_PAID, 'Not Paid'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    investment = models.ForeignKey(Investment, on_delete=models.CASCADE, related_name='payouts')
    month_year = models.CharField(max_length=7)  # YYYY-MM

    # Copied from the investment when the row is generated
    payout_amount = models.DecimalField(max_digits=14, decimal_places=2)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_NOT_PAID)
    date_paid = models.DateField(null=True, blank=True)
    notes = models.TextField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['investment', 'month_year'],
                name='unique_payout_per_investment_month'
            ),
        ]
        indexes = [
            models.Index(fields=['month_year', 'status'], name='payout_month_status_idx'),
        ]

    def __str__(self):
        return f"{self.investment.name} - {self.month_year} - {self.status}"
