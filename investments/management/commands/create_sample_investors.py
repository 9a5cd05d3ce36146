from datetime import date
from decimal import Decimal

from django.core.management.base import BaseCommand

from investments.models import Investment
from investments.utils.calculations import derive_payout
from site_settings.models import SiteSettings


class Command(BaseCommand):
    help = 'Create sample investors'

    def handle(self, *args, **options):
        default_rate = SiteSettings.get_default_return_percentage()

        # Sample investor data
        investors_data = [
            {
                'name': 'Aarav Sharma',
                'email': 'aarav.sharma@example.com',
                'phone_number': '+91 98200 11111',
                'invested_amount': Decimal('100000.00'),
                'investment_date': date(2025, 4, 12),
                'investment_type': Investment.TYPE_MONTHLY,
                'upi_transaction_id': 'UPI4512300001',
            },
            {
                'name': 'Priya Nair',
                'email': 'priya.nair@example.com',
                'phone_number': '+91 98450 22222',
                'invested_amount': Decimal('250000.00'),
                'investment_date': date(2025, 7, 3),
                'investment_type': Investment.TYPE_MONTHLY,
                'return_percentage': Decimal('2.50'),
                'upi_transaction_id': 'UPI4512300002',
            },
            {
                'name': 'Rohan Mehta',
                'email': 'rohan.mehta@example.com',
                'phone_number': '+91 99300 33333',
                'invested_amount': Decimal('50000.00'),
                'investment_date': date(2025, 11, 20),
                'investment_type': Investment.TYPE_ONE_TIME,
                'upi_transaction_id': 'UPI4512300003',
                'notes': 'Referred by Aarav',
            },
            {
                'name': 'Smith, "Bob"',
                'email': 'bob.smith@example.com',
                'phone_number': '+91 90040 44444',
                'invested_amount': Decimal('75000.00'),
                'investment_date': date(2026, 1, 8),
                'investment_type': Investment.TYPE_DAILY,
                'upi_transaction_id': 'UPI4512300004',
                'status': Investment.STATUS_INACTIVE,
            },
        ]

        # Create investors
        created_count = 0
        for investor_data in investors_data:
            rate = investor_data.pop('return_percentage', default_rate)

            investment, created = Investment.objects.get_or_create(
                email=investor_data['email'],
                defaults={
                    **investor_data,
                    'return_percentage': rate,
                    'monthly_payout': derive_payout(investor_data['invested_amount'], rate),
                }
            )

            if created:
                created_count += 1
                self.stdout.write(
                    self.style.SUCCESS(f'Created investor: {investment.name}')
                )
            else:
                self.stdout.write(
                    self.style.WARNING(f'Investor already exists: {investment.name}')
                )

        self.stdout.write(
            self.style.SUCCESS(f'Successfully created {created_count} new investors')
        )
