from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class LoanAttributes:
    """Loan terms as supplied by the caller.

    Everything is optional so a caller can pass only what an operation needs
    (a per diem lookup needs just the amount and rate). Each public operation
    validates the fields it uses.
    """
    # Principal
    loan_amount: Decimal | None = None
    interest_rate: Decimal | None = None  # Nominal annual, as a percent (10 = 10%)

    # Dates
    start_date: date | None = None  # Loan funds
    adjustment_date: date | None = None  # Amortization begins

    # Term and amortization
    term_in_months: int | None = None  # Schedule stops here, paid off or not
    interest_only: bool = False
    amortization_period_months: int | None = None  # < 1 means one bullet payment

    # Frequencies
    compounding_periods_per_year: int | None = None  # 2 = Canadian, 12 = US
    payment_frequency: int | None = None  # Payments per year

    # Extra payment; only used when above the required payment
    preferred_payment: Decimal | None = None
    regular_payment: Decimal | None = None  # Older name for preferred_payment


@dataclass(frozen=True)
class PaymentFrequency:
    periods_per_year: int
    label: str
    is_compounding_period: bool
