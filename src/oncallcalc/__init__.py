"""On-call standby and overtime compensation calculator."""

from oncallcalc.domain.models import (
    CompensationRequest,
    CompensationResult,
    MalformedInputError,
    RateProfile,
    Rates,
    ShiftAssignment,
    ShiftVariant,
    WorkLogEntry,
)
from oncallcalc.engine.calculator import OnCallCalculator

__version__ = "0.1.0"

__all__ = [
    "CompensationRequest",
    "CompensationResult",
    "MalformedInputError",
    "OnCallCalculator",
    "RateProfile",
    "Rates",
    "ShiftAssignment",
    "ShiftVariant",
    "WorkLogEntry",
]
