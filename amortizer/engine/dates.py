"""Payment date stepping for the supported frequencies.

Month arithmetic goes through dateutil's relativedelta, which clamps to the
last day of shorter months (Jan 31 + 1 month = Feb 28).
"""

from datetime import date

from dateutil.relativedelta import relativedelta

from amortizer.errors import InvalidAttributes, InvalidFrequency

SEMI_MONTHLY = 24

# Payment frequency -> calendar offset for a single step
_STEP_OFFSETS = {
    1: relativedelta(years=1),
    2: relativedelta(months=6),
    4: relativedelta(months=3),
    6: relativedelta(months=2),
    12: relativedelta(months=1),
    26: relativedelta(weeks=2),
    52: relativedelta(weeks=1),
}


def next_date(reference: date, payment_frequency: int, step: int) -> date:
    """Date of payment number ``step`` counted from ``reference``.

    Every step is computed from the reference rather than from the previous
    payment date, so month-end clamping never accumulates.
    """
    if step < 1:
        raise InvalidAttributes(f"Payment step must be at least 1, got {step}", field="step")
    if payment_frequency == SEMI_MONTHLY:
        return _semi_monthly_date(reference, step)
    try:
        offset = _STEP_OFFSETS[payment_frequency]
    except KeyError:
        raise InvalidFrequency("payment_frequency", payment_frequency) from None
    return reference + offset * step


def _semi_monthly_date(reference: date, step: int) -> date:
    """Twice a month: the reference day, and 14 days either side of it.

    References after the 28th are moved to the 1st of the next month so every
    month has both payment days.
    """
    if reference.day > 28:
        reference = reference.replace(day=1) + relativedelta(months=1)

    if step % 2 == 0:
        return reference + relativedelta(months=step // 2)

    midpoint = reference + relativedelta(months=(step - 1) // 2)
    if reference.day < 15:
        return midpoint + relativedelta(days=14)
    return midpoint - relativedelta(days=14) + relativedelta(months=1)


def days_between(start: date, end: date) -> int:
    return (end - start).days
