"""Amortization routes: periodic payment, per diem and full schedule."""

from fastapi import APIRouter, HTTPException

from amortizer.api.schemas import (
    LoanRequest,
    PaymentResponse,
    PerDiemResponse,
    PeriodicPaymentResponse,
    ScheduleResponse,
    ScheduleSummaryResponse,
    YearlySummaryResponse,
)
from amortizer.engine.calculator import (
    get_payments,
    get_per_diem,
    get_periodic_payment,
    get_schedule_summary,
)
from amortizer.engine.summary import yearly_summary
from amortizer.models.loan import LoanAttributes

router = APIRouter(prefix="/api/v1", tags=["schedule"])


def _to_attributes(req: LoanRequest) -> LoanAttributes:
    return LoanAttributes(**req.model_dump())


@router.post("/periodic-payment", response_model=PeriodicPaymentResponse)
def periodic_payment(req: LoanRequest):
    try:
        payment = get_periodic_payment(_to_attributes(req))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return PeriodicPaymentResponse(periodic_payment=payment)


@router.post("/per-diem", response_model=PerDiemResponse)
def per_diem(req: LoanRequest):
    try:
        amount = get_per_diem(_to_attributes(req))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return PerDiemResponse(per_diem=amount)


@router.post("/payments", response_model=ScheduleResponse)
def payments(req: LoanRequest):
    """Full schedule with totals and a per-year breakdown."""
    attrs = _to_attributes(req)
    try:
        schedule = get_payments(attrs)
        summary = get_schedule_summary(attrs)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ScheduleResponse(
        payments=[
            PaymentResponse(
                payment_number=p.payment_number,
                date=p.date,
                interest=p.interest,
                principal=p.principal,
                balance=p.balance,
            )
            for p in schedule
        ],
        summary=ScheduleSummaryResponse(
            periodic_payment=summary.periodic_payment,
            payment_count=summary.payment_count,
            adjustment_interest=summary.adjustment_interest,
            total_interest=summary.total_interest,
            total_principal=summary.total_principal,
            total_paid=summary.total_paid,
            ending_balance=summary.ending_balance,
            last_payment_date=summary.last_payment_date,
            paid_off=summary.paid_off,
        ),
        yearly=[
            YearlySummaryResponse(
                year=y.year,
                interest=y.interest,
                principal=y.principal,
                ending_balance=y.ending_balance,
            )
            for y in yearly_summary(schedule)
        ],
    )
