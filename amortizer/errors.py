"""Validation errors raised by the amortization engine.

All are ValueErrors so callers that already guard numeric input with
``except ValueError`` keep working.
"""


class AmortizationError(ValueError):
    """Base class for rejected loan inputs."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class InvalidAttributes(AmortizationError):
    """A required loan attribute is missing or out of range."""


class InvalidFrequency(AmortizationError):
    """A payment or compounding frequency is not supported."""

    def __init__(self, field: str, value):
        super().__init__(f"Unsupported {field}: {value!r}", field=field)
        self.value = value
