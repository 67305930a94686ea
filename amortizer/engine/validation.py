"""Input checks and the working copy each public operation computes from.

The caller's LoanAttributes is never modified: ``sanitize`` returns a new
frozen copy with money coerced to Decimal and the preferred payment defaulted.
"""

import logging
from dataclasses import replace
from decimal import Decimal, InvalidOperation

from amortizer.engine.frequencies import check_compounding_periods, payment_frequency
from amortizer.engine.rounding import MAX_ADJUSTED_EXPONENT
from amortizer.errors import InvalidAttributes, InvalidFrequency
from amortizer.models.loan import LoanAttributes

logger = logging.getLogger(__name__)


def _reject(message: str, field: str) -> InvalidAttributes:
    logger.warning("Rejected loan attributes: %s", message)
    return InvalidAttributes(message, field=field)


def _to_decimal(value, field: str) -> Decimal | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise _reject(f"{field} must be a number, got {value!r}", field)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise _reject(f"{field} must be a number, got {value!r}", field) from None
    if not amount.is_finite():
        raise _reject(f"{field} must be finite, got {value!r}", field)
    if amount and amount.adjusted() > MAX_ADJUSTED_EXPONENT:
        raise _reject(f"{field} is too large, got {value!r}", field)
    return amount


def _require(attrs: LoanAttributes, *fields: str) -> None:
    for name in fields:
        if getattr(attrs, name) is None:
            raise _reject(f"{name} is required", name)


def _require_int(value, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _reject(f"{field} must be a whole number, got {value!r}", field)
    return value


def sanitize(attrs: LoanAttributes) -> LoanAttributes:
    """Working copy: Decimal money, preferred payment defaulted to zero."""
    preferred = attrs.preferred_payment
    if preferred is None:
        preferred = attrs.regular_payment
    return replace(
        attrs,
        loan_amount=_to_decimal(attrs.loan_amount, "loan_amount"),
        interest_rate=_to_decimal(attrs.interest_rate, "interest_rate"),
        preferred_payment=_to_decimal(preferred, "preferred_payment") or Decimal("0"),
        regular_payment=None,
    )


def for_per_diem(attrs: LoanAttributes) -> LoanAttributes:
    loan = sanitize(attrs)
    _require(loan, "loan_amount", "interest_rate")
    if loan.loan_amount <= 0:
        raise _reject(f"loan_amount must be positive, got {loan.loan_amount}", "loan_amount")
    if loan.interest_rate < 0:
        raise _reject(f"interest_rate cannot be negative, got {loan.interest_rate}", "interest_rate")
    return loan


def for_periodic_payment(attrs: LoanAttributes) -> LoanAttributes:
    loan = for_per_diem(attrs)
    _require(loan, "payment_frequency")
    try:
        payment_frequency(loan.payment_frequency)
        if not loan.interest_only:
            _require(loan, "compounding_periods_per_year")
            check_compounding_periods(loan.compounding_periods_per_year)
    except InvalidFrequency as e:
        logger.warning("Rejected loan attributes: %s", e)
        raise

    if not loan.interest_only:
        _require(loan, "amortization_period_months", "term_in_months")
        _require_int(loan.amortization_period_months, "amortization_period_months")
        _check_term(loan)
    return loan


def for_schedule(attrs: LoanAttributes) -> LoanAttributes:
    loan = for_periodic_payment(attrs)
    _require(loan, "start_date", "adjustment_date", "term_in_months")
    _check_term(loan)
    if loan.adjustment_date < loan.start_date:
        raise _reject(
            f"adjustment_date {loan.adjustment_date} is before start_date {loan.start_date}",
            "adjustment_date",
        )
    if loan.preferred_payment < 0:
        raise _reject(
            f"preferred_payment cannot be negative, got {loan.preferred_payment}",
            "preferred_payment",
        )
    return loan


def _check_term(loan: LoanAttributes) -> None:
    if _require_int(loan.term_in_months, "term_in_months") <= 0:
        raise _reject(f"term_in_months must be positive, got {loan.term_in_months}", "term_in_months")
