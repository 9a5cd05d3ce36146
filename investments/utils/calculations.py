from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal('0.01')


def to_decimal(value):
    """Convert int/float/str/Decimal to Decimal without float artefacts"""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def derive_payout(invested_amount, return_percentage):
    """
    Monthly payout for an investment: invested_amount * return_percentage / 100,
    rounded half-up to 2 decimal places.

    Range checks (negative amounts, percentages outside 0-100) are done by the
    serializer before this is called.
    """
    amount = to_decimal(invested_amount)
    rate = to_decimal(return_percentage)
    return (amount * rate / Decimal(100)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
