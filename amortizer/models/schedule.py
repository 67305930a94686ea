from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Payment:
    payment_number: int  # 0 = adjustment payment
    date: date
    interest: Decimal
    principal: Decimal
    balance: Decimal  # Remaining principal after this payment


@dataclass(frozen=True)
class YearlySummary:
    year: int
    interest: Decimal
    principal: Decimal
    ending_balance: Decimal


@dataclass(frozen=True)
class ScheduleSummary:
    periodic_payment: Decimal
    payment_count: int  # Regular payments only
    adjustment_interest: Decimal
    total_interest: Decimal  # Includes the adjustment interest
    total_principal: Decimal
    ending_balance: Decimal
    last_payment_date: date

    @property
    def total_paid(self) -> Decimal:
        return self.total_interest + self.total_principal

    @property
    def paid_off(self) -> bool:
        return self.ending_balance <= 0
