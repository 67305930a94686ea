"""Reference data routes."""

from fastapi import APIRouter

from amortizer.api.schemas import FrequencyResponse
from amortizer.engine.calculator import list_supported_payment_frequencies

router = APIRouter(prefix="/api/v1", tags=["reference"])


@router.get("/frequencies", response_model=list[FrequencyResponse])
def frequencies():
    """Supported payment frequencies, most frequent first."""
    return [
        FrequencyResponse(
            periods_per_year=f.periods_per_year,
            label=f.label,
            is_compounding_period=f.is_compounding_period,
        )
        for f in list_supported_payment_frequencies()
    ]
