from decimal import Decimal

from django.test import SimpleTestCase

from investments.utils.calculations import derive_payout


class DerivePayoutTest(SimpleTestCase):
    def test_whole_amount(self):
        self.assertEqual(derive_payout(100000, Decimal('2.00')), Decimal('2000.00'))

    def test_zero_amount(self):
        self.assertEqual(derive_payout(0, Decimal('5.00')), Decimal('0.00'))

    def test_rounds_to_two_places(self):
        # 333.33 * 2.5 / 100 = 8.33325
        self.assertEqual(derive_payout(Decimal('333.33'), Decimal('2.50')), Decimal('8.33'))

    def test_rounds_half_up(self):
        # 0.5 * 1 / 100 = 0.005
        self.assertEqual(derive_payout(Decimal('0.50'), 1), Decimal('0.01'))

    def test_accepts_floats_and_strings(self):
        self.assertEqual(derive_payout(333.33, 2.5), Decimal('8.33'))
        self.assertEqual(derive_payout('100000', '2'), Decimal('2000.00'))
