from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from payouts.services.payout_service import PayoutService
from payouts.utils.months import current_month_key


class Command(BaseCommand):
    help = 'Create missing payout rows for every active investment in a month.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--month',
            help='Month to generate, as YYYY-MM. Defaults to the current month.',
        )

    def handle(self, *args, **options):
        month = options.get('month') or current_month_key()
        service = PayoutService()

        try:
            created = service.ensure_payouts_for_month(month)
        except ValidationError as e:
            raise CommandError(e.messages[0])

        summary = service.summarize(month)
        self.stdout.write(self.style.SUCCESS(
            f"Created {created} payouts for {month} "
            f"({summary['paid_count'] + summary['unpaid_count']} total, "
            f"{summary['total_required']} required)."
        ))
