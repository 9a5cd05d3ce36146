from decimal import Decimal

from django.db.models import Sum, Count, Q

from investments.models import Investment
from payouts.utils.months import current_month_key, shift_month_key, format_month_key, month_key_for
from ..models import Earnings

ZERO = Decimal('0.00')

CHART_MONTHS = 6


def dashboard_stats(today=None):
    """Headline numbers for the dashboard cards"""
    month = current_month_key(today)

    totals = Investment.objects.aggregate(
        total_users=Count('id'),
        active_investments=Count('id', filter=Q(status=Investment.STATUS_ACTIVE)),
        total_investment_received=Sum('invested_amount'),
        total_payout_this_month=Sum('monthly_payout'),
    )
    earnings = Earnings.objects.filter(month_year=month).first()
    monthly_earnings = earnings.total_earnings if earnings else ZERO
    total_payout = totals['total_payout_this_month'] or ZERO

    return {
        'month': month,
        'total_users': totals['total_users'],
        'active_investments': totals['active_investments'],
        'total_investment_received': totals['total_investment_received'] or ZERO,
        'total_payout_this_month': total_payout,
        'monthly_earnings': monthly_earnings,
        'total_profit_retained': monthly_earnings - total_payout,
    }


def chart_data(today=None):
    """
    Last six months, oldest first: cumulative invested amount up to each
    month and that month's recorded earnings.
    """
    current = current_month_key(today)
    months = [shift_month_key(current, -offset) for offset in range(CHART_MONTHS - 1, -1, -1)]

    earnings = dict(
        Earnings.objects.filter(month_year__in=months).values_list('month_year', 'total_earnings')
    )
    invested = [
        (month_key_for(investment_date), amount)
        for investment_date, amount in Investment.objects.values_list('investment_date', 'invested_amount')
    ]

    data = []
    for month in months:
        total_investment = sum((amount for key, amount in invested if key <= month), ZERO)
        data.append({
            'month': format_month_key(month, short=True),
            'month_year': month,
            'total_investment': total_investment,
            'monthly_earnings': earnings.get(month, ZERO),
        })
    return data
