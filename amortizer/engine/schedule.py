"""Amortization schedule generation.

Pure functions: validated LoanAttributes in, list of Payment out. No I/O.
Entry 0 is the adjustment payment (interest accrued between funding and the
adjustment date); entries 1..N are the regular payments.
"""

import logging
from decimal import Decimal

from amortizer.engine.dates import days_between, next_date
from amortizer.engine.payments import (
    amortized_periodic_payment,
    interest_only_periodic_payment,
    per_diem,
)
from amortizer.engine.rates import period_rate
from amortizer.engine.rounding import TWO_PLACES, round_up
from amortizer.models.loan import LoanAttributes
from amortizer.models.schedule import Payment

logger = logging.getLogger(__name__)


def payments_in_term(loan: LoanAttributes) -> int:
    """Regular payments within the term. A partial final period is dropped."""
    return loan.term_in_months * loan.payment_frequency // 12


def adjustment_payment(loan: LoanAttributes) -> Payment:
    days = days_between(loan.start_date, loan.adjustment_date)
    return Payment(
        payment_number=0,
        date=loan.adjustment_date,
        interest=round_up(per_diem(loan.loan_amount, loan.interest_rate) * days),
        principal=Decimal("0"),
        balance=loan.loan_amount,
    )


def interest_only_payments(loan: LoanAttributes) -> list[Payment]:
    """Interest-only schedule: always one entry per period in the term.

    Interest is recomputed each period on the remaining amount, so any
    preferred payment above the interest due reduces the principal and with
    it the interest on every later payment.
    """
    payments = [adjustment_payment(loan)]
    remaining = loan.loan_amount

    for number in range(1, payments_in_term(loan) + 1):
        interest = interest_only_periodic_payment(
            remaining, loan.interest_rate, loan.payment_frequency
        )
        payment = max(loan.preferred_payment, interest)
        principal = min(payment - interest, remaining)
        remaining -= principal

        payments.append(Payment(
            payment_number=number,
            date=next_date(loan.adjustment_date, loan.payment_frequency, number),
            interest=interest,
            principal=principal,
            balance=remaining,
        ))

    return payments


def amortized_payments(loan: LoanAttributes) -> list[Payment]:
    """Amortized schedule. Stops early once the balance reaches zero."""
    pmt = max(loan.preferred_payment, amortized_periodic_payment(
        loan.loan_amount,
        loan.interest_rate,
        loan.compounding_periods_per_year,
        loan.payment_frequency,
        loan.amortization_period_months,
        loan.term_in_months,
    ))
    j = period_rate(loan.interest_rate, loan.compounding_periods_per_year, loan.payment_frequency)
    n_periods = payments_in_term(loan)

    payments = [adjustment_payment(loan)]
    balance = loan.loan_amount

    for number in range(1, n_periods + 1):
        if balance <= 0:
            logger.debug("Loan paid off after %d of %d payments", number - 1, n_periods)
            break

        interest = round_up(balance * j)
        principal_paid = pmt - interest

        # Final payment adjustment; an unrounded payment can leave less than a cent
        if balance - principal_paid < TWO_PLACES:
            principal_paid = balance

        balance -= principal_paid

        payments.append(Payment(
            payment_number=number,
            date=next_date(loan.adjustment_date, loan.payment_frequency, number),
            interest=interest,
            principal=principal_paid,
            balance=balance,
        ))

    return payments


def build_schedule(loan: LoanAttributes) -> list[Payment]:
    payments = interest_only_payments(loan) if loan.interest_only else amortized_payments(loan)
    logger.debug(
        "Built %s schedule: %d payments, ending balance %s",
        "interest-only" if loan.interest_only else "amortized",
        len(payments) - 1,
        payments[-1].balance,
    )
    return payments
