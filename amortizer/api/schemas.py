"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


# ---- Request schemas ----

class LoanRequest(BaseModel):
    """Loan terms. Which fields are required depends on the endpoint and mode;
    the engine reports anything missing as a 400."""
    loan_amount: Decimal | None = Field(None, description="Original principal")
    interest_rate: Decimal | None = Field(None, description="Nominal annual rate as a percent (10 = 10%)")

    start_date: date | None = Field(None, description="Date the loan funds")
    adjustment_date: date | None = Field(None, description="Date amortization begins")

    term_in_months: int | None = None
    interest_only: bool = False
    amortization_period_months: int | None = None

    compounding_periods_per_year: int | None = Field(None, description="2 = semi-annual, 12 = monthly")
    payment_frequency: int | None = Field(None, description="Payments per year: 1, 2, 4, 6, 12, 24, 26 or 52")

    preferred_payment: Decimal | None = Field(None, description="Extra payment, used when above the required payment")
    regular_payment: Decimal | None = None


# ---- Response schemas ----

class FrequencyResponse(BaseModel):
    periods_per_year: int
    label: str
    is_compounding_period: bool


class PeriodicPaymentResponse(BaseModel):
    periodic_payment: Decimal


class PerDiemResponse(BaseModel):
    per_diem: Decimal


class PaymentResponse(BaseModel):
    payment_number: int
    date: date
    interest: Decimal
    principal: Decimal
    balance: Decimal


class YearlySummaryResponse(BaseModel):
    year: int
    interest: Decimal
    principal: Decimal
    ending_balance: Decimal


class ScheduleSummaryResponse(BaseModel):
    periodic_payment: Decimal
    payment_count: int
    adjustment_interest: Decimal
    total_interest: Decimal
    total_principal: Decimal
    total_paid: Decimal
    ending_balance: Decimal
    last_payment_date: date
    paid_off: bool


class ScheduleResponse(BaseModel):
    payments: list[PaymentResponse]
    summary: ScheduleSummaryResponse
    yearly: list[YearlySummaryResponse]
