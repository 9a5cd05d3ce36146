import logging
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Sum, Count, Q
from django.utils import timezone

from investments.models import Investment
from ..models import Payout
from ..utils.months import validate_month_key

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')


class PayoutService:
    """Monthly payout generation, status changes and summaries"""

    def ensure_payouts_for_month(self, month_key):
        """
        Make sure every Active investment has exactly one payout row for the
        month. Existing rows are left alone; new ones copy the investment's
        monthly payout and start as Not Paid. Returns the number created.
        """
        validate_month_key(month_key)

        with transaction.atomic():
            active = list(
                Investment.objects.filter(status=Investment.STATUS_ACTIVE)
                .values_list('id', 'monthly_payout')
            )
            if not active:
                return 0

            month_payouts = Payout.objects.filter(month_year=month_key)
            before = month_payouts.count()

            # The unique (investment, month_year) constraint turns duplicates into no-ops
            Payout.objects.bulk_create(
                [
                    Payout(
                        investment_id=investment_id,
                        month_year=month_key,
                        payout_amount=monthly_payout,
                        status=Payout.STATUS_NOT_PAID,
                    )
                    for investment_id, monthly_payout in active
                ],
                ignore_conflicts=True,
            )
            created = month_payouts.count() - before

        if created:
            logger.info("Generated %s payouts for %s", created, month_key)
        return created

    def list_for_month(self, month_key, generate=True):
        """Payouts for the month with their investor, newest first"""
        validate_month_key(month_key)
        if generate:
            self.ensure_payouts_for_month(month_key)
        return (
            Payout.objects.filter(month_year=month_key)
            .select_related('investment')
            .order_by('-created_at')
        )

    def set_payout_status(self, payout_id, new_status, date_paid=None, notes=None):
        """
        Move a payout between Paid and Not Paid. Marking paid stamps
        date_paid (today unless given), undoing clears it. Notes are only
        overwritten when passed. Raises Payout.DoesNotExist for unknown ids.
        """
        if new_status not in (Payout.STATUS_PAID, Payout.STATUS_NOT_PAID):
            raise ValidationError(f"Invalid payout status '{new_status}'", code='invalid_status')

        payout = Payout.objects.get(pk=payout_id)
        payout.status = new_status

        if new_status == Payout.STATUS_PAID:
            payout.date_paid = date_paid or timezone.localdate()
        else:
            payout.date_paid = None

        update_fields = ['status', 'date_paid', 'updated_at']
        if notes is not None:
            payout.notes = notes
            update_fields.append('notes')

        payout.save(update_fields=update_fields)
        logger.info("Payout %s marked %s", payout.id, new_status)
        return payout

    def mark_paid(self, payout_id, date_paid=None, notes=None):
        return self.set_payout_status(payout_id, Payout.STATUS_PAID, date_paid, notes)

    def undo_paid(self, payout_id, notes=None):
        return self.set_payout_status(payout_id, Payout.STATUS_NOT_PAID, notes=notes)

    def summarize(self, month_key):
        """Totals and counts for a month, from a single aggregate query"""
        validate_month_key(month_key)

        paid = Q(status=Payout.STATUS_PAID)
        totals = Payout.objects.filter(month_year=month_key).aggregate(
            total_required=Sum('payout_amount'),
            total_paid=Sum('payout_amount', filter=paid),
            paid_count=Count('id', filter=paid),
            unpaid_count=Count('id', filter=~paid),
        )

        total_required = totals['total_required'] or ZERO
        total_paid = totals['total_paid'] or ZERO

        return {
            'month': month_key,
            'total_required': total_required,
            'total_paid': total_paid,
            'pending_payouts': total_required - total_paid,
            'paid_count': totals['paid_count'],
            'unpaid_count': totals['unpaid_count'],
        }
