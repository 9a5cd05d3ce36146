from datetime import date
from unittest import mock

from django.core.exceptions import ValidationError
from django.test import SimpleTestCase, override_settings

from payouts.models import Payout
from payouts.utils.months import (
    current_month_key,
    format_month_key,
    is_overdue,
    month_options,
    shift_month_key,
    validate_month_key,
)


class MonthKeyTest(SimpleTestCase):
    def test_current_month_key(self):
        self.assertEqual(current_month_key(date(2026, 3, 9)), '2026-03')

    def test_current_month_key_uses_local_date(self):
        with mock.patch('payouts.utils.months.timezone.localdate', return_value=date(2026, 12, 31)):
            self.assertEqual(current_month_key(), '2026-12')

    def test_validate_month_key(self):
        self.assertEqual(validate_month_key('2026-10'), '2026-10')
        for bad in ['2026-13', '2026-00', '2026-1', '26-10', '2026/10', '2026-10\n', ' 2026-10', '', None]:
            with self.assertRaises(ValidationError):
                validate_month_key(bad)

    def test_shift_across_years(self):
        self.assertEqual(shift_month_key('2026-01', -1), '2025-12')
        self.assertEqual(shift_month_key('2025-11', 3), '2026-02')
        self.assertEqual(shift_month_key('2026-10', -12), '2025-10')

    def test_format_month_key(self):
        self.assertEqual(format_month_key('2026-10'), 'October 2026')
        self.assertEqual(format_month_key('2026-10', short=True), 'Oct 2026')


class MonthOptionsTest(SimpleTestCase):
    def test_window_is_ascending_and_bounded(self):
        options = month_options(date(2026, 10, 17))

        self.assertEqual(len(options), 16)
        self.assertEqual(options[0], {'value': '2025-10', 'label': 'October 2025'})
        self.assertEqual(options[-1], {'value': '2027-01', 'label': 'January 2027'})
        values = [option['value'] for option in options]
        self.assertEqual(values, sorted(values))
        self.assertIn('2026-10', values)


class IsOverdueTest(SimpleTestCase):
    def test_not_overdue_up_to_cutoff(self):
        for day in range(1, 6):
            self.assertFalse(is_overdue(Payout.STATUS_NOT_PAID, '2026-10', date(2026, 10, day)))

    def test_overdue_after_cutoff(self):
        self.assertTrue(is_overdue(Payout.STATUS_NOT_PAID, '2026-10', date(2026, 10, 6)))
        self.assertTrue(is_overdue(Payout.STATUS_NOT_PAID, '2026-10', date(2026, 10, 31)))

    def test_paid_is_never_overdue(self):
        self.assertFalse(is_overdue(Payout.STATUS_PAID, '2026-10', date(2026, 10, 20)))

    def test_past_months_are_never_overdue(self):
        self.assertFalse(is_overdue(Payout.STATUS_NOT_PAID, '2026-09', date(2026, 10, 20)))
        self.assertFalse(is_overdue(Payout.STATUS_PAID, '2025-01', date(2026, 10, 20)))

    @override_settings(PAYOUT_OVERDUE_CUTOFF_DAY=10)
    def test_cutoff_is_configurable(self):
        self.assertFalse(is_overdue(Payout.STATUS_NOT_PAID, '2026-10', date(2026, 10, 8)))
        self.assertTrue(is_overdue(Payout.STATUS_NOT_PAID, '2026-10', date(2026, 10, 11)))
