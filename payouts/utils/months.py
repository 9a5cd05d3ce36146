"""
Helpers for ``YYYY-MM`` month keys.

"Today" always comes from timezone.localdate(), i.e. the TIME_ZONE setting,
so operators and report consumers agree on which month is current.
"""
import re
from datetime import date

from django.conf import settings
from django.core.exceptions import ValidationError
from django.utils import timezone

from ..models import Payout

MONTH_KEY_RE = re.compile(r'(\d{4})-(0[1-9]|1[0-2])')

MONTHS_BACK = 12
MONTHS_FORWARD = 3


def validate_month_key(month_key):
    if not isinstance(month_key, str) or not MONTH_KEY_RE.fullmatch(month_key):
        raise ValidationError(
            f"Invalid month '{month_key}', expected YYYY-MM",
            code='invalid_month',
        )
    return month_key


def parse_month_key(month_key):
    """Return (year, month) for a valid key"""
    match = MONTH_KEY_RE.fullmatch(validate_month_key(month_key))
    return int(match.group(1)), int(match.group(2))


def month_key_for(day):
    return f"{day.year:04d}-{day.month:02d}"


def current_month_key(today=None):
    return month_key_for(today or timezone.localdate())


def shift_month_key(month_key, months):
    year, month = parse_month_key(month_key)
    index = year * 12 + (month - 1) + months
    return f"{index // 12:04d}-{index % 12 + 1:02d}"


def format_month_key(month_key, short=False):
    """'2026-10' -> 'October 2026' (or 'Oct 2026' when short)"""
    year, month = parse_month_key(month_key)
    return date(year, month, 1).strftime('%b %Y' if short else '%B %Y')


def month_options(today=None):
    """Months from a year back to three months ahead, oldest first"""
    current = current_month_key(today)
    options = []
    for offset in range(-MONTHS_BACK, MONTHS_FORWARD + 1):
        key = shift_month_key(current, offset)
        options.append({'value': key, 'label': format_month_key(key)})
    return options


def is_overdue(status, month_key, today=None):
    """
    A payout is overdue when it is unpaid, belongs to the current month and
    the cutoff day has passed. Past months are never flagged.
    """
    today = today or timezone.localdate()
    cutoff = getattr(settings, 'PAYOUT_OVERDUE_CUTOFF_DAY', 5)
    return (
        status == Payout.STATUS_NOT_PAID
        and month_key == current_month_key(today)
        and today.day > cutoff
    )
