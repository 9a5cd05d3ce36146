import uuid
from datetime import date
from decimal import Decimal
from unittest import mock

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.test import TestCase

from investments.models import Investment
from payouts.models import Payout
from payouts.services.payout_service import PayoutService
from .factories import make_investment


class EnsurePayoutsTest(TestCase):
    def setUp(self):
        self.service = PayoutService()
        self.aarav = make_investment('Aarav Sharma')
        self.priya = make_investment('Priya Nair', invested_amount='250000.00', return_percentage='2.50')

    def test_creates_one_row_per_active_investment(self):
        created = self.service.ensure_payouts_for_month('2026-10')

        self.assertEqual(created, 2)
        amounts = dict(
            Payout.objects.filter(month_year='2026-10').values_list('investment_id', 'payout_amount')
        )
        self.assertEqual(amounts, {
            self.aarav.id: Decimal('2000.00'),
            self.priya.id: Decimal('6250.00'),
        })
        self.assertFalse(Payout.objects.exclude(status=Payout.STATUS_NOT_PAID).exists())
        self.assertFalse(Payout.objects.exclude(date_paid=None).exists())

    def test_is_idempotent(self):
        self.service.ensure_payouts_for_month('2026-10')
        first = list(
            Payout.objects.order_by('id').values_list('id', 'investment_id', 'payout_amount', 'status')
        )

        created = self.service.ensure_payouts_for_month('2026-10')

        self.assertEqual(created, 0)
        second = list(
            Payout.objects.order_by('id').values_list('id', 'investment_id', 'payout_amount', 'status')
        )
        self.assertEqual(first, second)

    def test_existing_rows_are_not_overwritten(self):
        self.service.ensure_payouts_for_month('2026-10')
        payout = Payout.objects.get(investment=self.aarav, month_year='2026-10')
        self.service.mark_paid(payout.id, date_paid=date(2026, 10, 3))
        Investment.objects.filter(pk=self.aarav.pk).update(monthly_payout=Decimal('9999.99'))

        self.service.ensure_payouts_for_month('2026-10')

        payout.refresh_from_db()
        self.assertEqual(payout.payout_amount, Decimal('2000.00'))
        self.assertEqual(payout.status, Payout.STATUS_PAID)
        self.assertEqual(payout.date_paid, date(2026, 10, 3))

    def test_new_investment_picked_up_on_next_call(self):
        self.service.ensure_payouts_for_month('2026-10')
        rohan = make_investment('Rohan Mehta', invested_amount='50000.00')

        created = self.service.ensure_payouts_for_month('2026-10')

        self.assertEqual(created, 1)
        self.assertTrue(Payout.objects.filter(investment=rohan, month_year='2026-10').exists())
        self.assertEqual(Payout.objects.filter(month_year='2026-10').count(), 3)

    def test_months_are_independent(self):
        self.service.ensure_payouts_for_month('2026-09')
        self.service.ensure_payouts_for_month('2026-10')

        self.assertEqual(Payout.objects.filter(investment=self.aarav).count(), 2)

    def test_inactive_investments_are_excluded(self):
        self.service.ensure_payouts_for_month('2026-09')
        self.priya.status = Investment.STATUS_INACTIVE
        self.priya.save()

        self.service.ensure_payouts_for_month('2026-10')

        self.assertFalse(Payout.objects.filter(investment=self.priya, month_year='2026-10').exists())
        # History from the active period is kept
        self.assertTrue(Payout.objects.filter(investment=self.priya, month_year='2026-09').exists())

    def test_no_active_investments_is_a_noop(self):
        Investment.objects.update(status=Investment.STATUS_INACTIVE)

        self.assertEqual(self.service.ensure_payouts_for_month('2026-10'), 0)
        self.assertFalse(Payout.objects.exists())

    def test_rejects_malformed_month(self):
        with self.assertRaises(ValidationError):
            self.service.ensure_payouts_for_month('2026-1')
        self.assertFalse(Payout.objects.exists())

    def test_store_failure_propagates_and_rolls_back(self):
        with mock.patch.object(Payout.objects, 'bulk_create', side_effect=IntegrityError('boom')):
            with self.assertRaises(IntegrityError):
                self.service.ensure_payouts_for_month('2026-10')
        self.assertFalse(Payout.objects.exists())

    def test_database_rejects_duplicate_pair(self):
        self.service.ensure_payouts_for_month('2026-10')

        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Payout.objects.create(
                    investment=self.aarav,
                    month_year='2026-10',
                    payout_amount=Decimal('1.00'),
                )


class PayoutStatusTest(TestCase):
    def setUp(self):
        self.service = PayoutService()
        make_investment('Aarav Sharma')
        self.service.ensure_payouts_for_month('2026-10')
        self.payout = Payout.objects.get()

    def test_mark_paid_with_date(self):
        payout = self.service.set_payout_status(
            self.payout.id, Payout.STATUS_PAID, date_paid=date(2026, 10, 4)
        )

        self.assertEqual(payout.status, Payout.STATUS_PAID)
        self.assertEqual(payout.date_paid, date(2026, 10, 4))

    def test_mark_paid_defaults_to_today(self):
        with mock.patch('payouts.services.payout_service.timezone.localdate', return_value=date(2026, 10, 17)):
            payout = self.service.mark_paid(self.payout.id)

        payout.refresh_from_db()
        self.assertEqual(payout.date_paid, date(2026, 10, 17))

    def test_round_trip_keeps_notes(self):
        self.service.mark_paid(self.payout.id, date_paid=date(2026, 10, 4), notes='Paid via UPI')

        payout = self.service.undo_paid(self.payout.id)

        payout.refresh_from_db()
        self.assertEqual(payout.status, Payout.STATUS_NOT_PAID)
        self.assertIsNone(payout.date_paid)
        self.assertEqual(payout.notes, 'Paid via UPI')

    def test_notes_overwritten_when_supplied(self):
        self.service.mark_paid(self.payout.id, notes='first')
        self.service.undo_paid(self.payout.id, notes='')

        self.payout.refresh_from_db()
        self.assertEqual(self.payout.notes, '')

    def test_unknown_payout(self):
        with self.assertRaises(Payout.DoesNotExist):
            self.service.set_payout_status(uuid.uuid4(), Payout.STATUS_PAID)

    def test_invalid_status(self):
        with self.assertRaises(ValidationError):
            self.service.set_payout_status(self.payout.id, 'Pending')


class SummarizeTest(TestCase):
    def setUp(self):
        self.service = PayoutService()

    def test_empty_month(self):
        summary = self.service.summarize('2026-10')

        self.assertEqual(summary['total_required'], Decimal('0.00'))
        self.assertEqual(summary['total_paid'], Decimal('0.00'))
        self.assertEqual(summary['pending_payouts'], Decimal('0.00'))
        self.assertEqual(summary['paid_count'], 0)
        self.assertEqual(summary['unpaid_count'], 0)

    def test_totals_are_consistent(self):
        make_investment('Aarav Sharma', invested_amount='333.33', return_percentage='2.50')
        make_investment('Priya Nair', invested_amount='1000.10', return_percentage='1.10')
        make_investment('Rohan Mehta', invested_amount='100000.00')
        self.service.ensure_payouts_for_month('2026-10')
        aarav_payout = Payout.objects.get(investment__name='Aarav Sharma')
        self.service.mark_paid(aarav_payout.id)
        # Another month must not leak into the totals
        self.service.ensure_payouts_for_month('2026-09')

        summary = self.service.summarize('2026-10')

        payouts = list(Payout.objects.filter(month_year='2026-10'))
        self.assertEqual(summary['total_required'], sum(p.payout_amount for p in payouts))
        self.assertEqual(summary['total_required'], Decimal('2019.33'))
        self.assertEqual(summary['total_paid'], Decimal('8.33'))
        self.assertEqual(summary['pending_payouts'], Decimal('2011.00'))
        self.assertEqual(summary['total_paid'] + summary['pending_payouts'], summary['total_required'])
        self.assertEqual(summary['paid_count'], 1)
        self.assertEqual(summary['unpaid_count'], 2)
        self.assertEqual(summary['paid_count'] + summary['unpaid_count'], len(payouts))
