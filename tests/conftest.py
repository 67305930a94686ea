"""Canonical test fixtures used across the engine and API tests.

Fixture: $10,000 loan at 10% nominal, 20-year amortization, 1-year term.
"""

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from amortizer.models.loan import LoanAttributes


@pytest.fixture
def interest_only_loan() -> LoanAttributes:
    """Monthly interest-only loan funded 5 days before amortization starts."""
    return LoanAttributes(
        loan_amount=Decimal("10000"),
        interest_rate=Decimal("10"),
        start_date=date(2018, 1, 10),
        adjustment_date=date(2018, 1, 15),
        term_in_months=12,
        interest_only=True,
        payment_frequency=12,
        preferred_payment=Decimal("0"),
    )


@pytest.fixture
def amortized_loan() -> LoanAttributes:
    """Monthly payments, Canadian-style semi-annual compounding."""
    return LoanAttributes(
        loan_amount=Decimal("10000"),
        interest_rate=Decimal("10"),
        start_date=date(2018, 1, 1),
        adjustment_date=date(2018, 1, 1),
        term_in_months=12,
        interest_only=False,
        amortization_period_months=240,
        compounding_periods_per_year=2,
        payment_frequency=12,
        preferred_payment=Decimal("0"),
    )


@pytest.fixture
def semi_monthly_loan(amortized_loan) -> LoanAttributes:
    return replace(amortized_loan, payment_frequency=24)
