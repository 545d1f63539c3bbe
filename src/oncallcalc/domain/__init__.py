"""Domain models and business rules for on-call compensation."""

from oncallcalc.domain.holidays import (
    CzechHolidayCalendar,
    HolidayCalendar,
    easter_sunday,
    holidays_for_year,
    is_holiday,
)
from oncallcalc.domain.models import (
    CompensationRequest,
    CompensationResult,
    MalformedInputError,
    RateProfile,
    Rates,
    ReconciliationResult,
    ShiftAssignment,
    ShiftVariant,
    WorkLogEntry,
    parse_date,
)
from oncallcalc.domain.policies import (
    DefaultRateTable,
    DefaultStandbyHoursPolicy,
    RateTable,
    StandbyHoursPolicy,
)

__all__ = [
    # Models
    "CompensationRequest",
    "CompensationResult",
    "MalformedInputError",
    "RateProfile",
    "Rates",
    "ReconciliationResult",
    "ShiftAssignment",
    "ShiftVariant",
    "WorkLogEntry",
    "parse_date",
    # Holidays
    "CzechHolidayCalendar",
    "HolidayCalendar",
    "easter_sunday",
    "holidays_for_year",
    "is_holiday",
    # Policies
    "DefaultRateTable",
    "DefaultStandbyHoursPolicy",
    "RateTable",
    "StandbyHoursPolicy",
]
