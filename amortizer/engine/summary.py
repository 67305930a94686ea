"""Schedule totals and calendar-year aggregation."""

from decimal import Decimal

from amortizer.models.schedule import Payment, ScheduleSummary, YearlySummary


def summarize_schedule(payments: list[Payment], periodic_payment: Decimal) -> ScheduleSummary:
    """Totals over a schedule built by ``build_schedule``.

    ``payments[0]`` must be the adjustment payment.
    """
    adjustment = payments[0]
    regular = payments[1:]
    return ScheduleSummary(
        periodic_payment=periodic_payment,
        payment_count=len(regular),
        adjustment_interest=adjustment.interest,
        total_interest=sum((p.interest for p in payments), Decimal("0")),
        total_principal=sum((p.principal for p in regular), Decimal("0")),
        ending_balance=payments[-1].balance,
        last_payment_date=payments[-1].date,
    )


def yearly_summary(payments: list[Payment]) -> list[YearlySummary]:
    """Aggregate a schedule by calendar year of the payment date.

    The adjustment payment counts toward the year it falls in.
    """
    yearly: list[YearlySummary] = []
    year_interest = Decimal("0")
    year_principal = Decimal("0")

    for i, p in enumerate(payments):
        year_interest += p.interest
        year_principal += p.principal

        is_last = i == len(payments) - 1
        if is_last or payments[i + 1].date.year != p.date.year:
            yearly.append(YearlySummary(
                year=p.date.year,
                interest=year_interest,
                principal=year_principal,
                ending_balance=p.balance,
            ))
            year_interest = Decimal("0")
            year_principal = Decimal("0")

    return yearly
