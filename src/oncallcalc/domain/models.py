"""Domain models for the on-call compensation calculator.

This module contains the core data structures shared by the engine, the
pay-period state and the output generators: shift assignments, work logs,
rate profiles and the computed compensation result.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union


class MalformedInputError(ValueError):
    """Raised when the core receives input it cannot interpret.

    Examples are an unknown shift variant tag or a date string that does not
    parse. Callers must not build a result after this is raised.
    """


class ShiftVariant(Enum):
    """Kind of on-call assignment for a single calendar day.

    Repeated toggling of the same day cycles FULL -> START -> END -> SPLIT
    and then removes the assignment.
    """

    FULL = "full"  # Whole standby block for the day
    START = "start"  # Taking over in the evening (or 09:00 on rest days)
    END = "end"  # Morning handoff, 00:00 - 09:00
    SPLIT = "split"  # 00:00 - 09:00 plus 17:00 - 24:00

    @classmethod
    def parse(cls, value: Union[str, "ShiftVariant"]) -> "ShiftVariant":
        """Parse a variant tag, raising MalformedInputError if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise MalformedInputError(f"Unknown shift variant: {value!r}")

    def next_variant(self) -> Optional["ShiftVariant"]:
        """Return the variant after this one in the toggle cycle.

        Returns None when the cycle is exhausted and the assignment should
        be removed.
        """
        return _TOGGLE_CYCLE.get(self)


_TOGGLE_CYCLE = {
    ShiftVariant.FULL: ShiftVariant.START,
    ShiftVariant.START: ShiftVariant.END,
    ShiftVariant.END: ShiftVariant.SPLIT,
    ShiftVariant.SPLIT: None,
}


class RateProfile(Enum):
    """Role profile selecting the standby and overtime multipliers."""

    DEVOPS_INFRA = "devops"
    OTHER_EMPLOYEE = "other"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: Union[str, "RateProfile"]) -> "RateProfile":
        """Parse a profile tag, raising MalformedInputError if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise MalformedInputError(f"Unknown rate profile: {value!r}")


def parse_date(value: Union[str, date, datetime]) -> date:
    """Reduce a date, datetime or ISO string to a calendar date.

    ISO datetime strings (``2024-04-01T10:00:00.000Z``) are cut to their
    date part; the time of day is never used.

    Raises:
        MalformedInputError: If the value cannot be parsed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise MalformedInputError(f"Cannot parse date from {value!r}")

    text = value.strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        raise MalformedInputError(f"Cannot parse date from {value!r}")


@dataclass(frozen=True)
class Rates:
    """Multipliers applied to the hourly wage.

    Attributes:
        standby: Fraction of the hourly wage paid per standby hour.
        ot_normal: Premium above the hourly wage for normal overtime.
        ot_holiday: Premium above the hourly wage for holiday overtime.
    """

    standby: float = 0.2
    ot_normal: float = 0.5
    ot_holiday: float = 1.5


@dataclass(frozen=True)
class ShiftAssignment:
    """An on-call assignment for one calendar day."""

    date: date
    variant: ShiftVariant = ShiftVariant.FULL

    def __post_init__(self):
        if not isinstance(self.variant, ShiftVariant):
            raise MalformedInputError(f"Unknown shift variant: {self.variant!r}")


@dataclass(frozen=True)
class WorkLogEntry:
    """Hours actually worked while on standby.

    Attributes:
        id: Opaque identifier, unique within a pay period.
        date: Day the work happened.
        hours: Worked hours (non-negative).
        holiday_override: Treat the day as a holiday even if the calendar
            does not. It can only upgrade a day, never downgrade one.
    """

    id: str
    date: date
    hours: float = 0.0
    holiday_override: bool = False


@dataclass
class CompensationRequest:
    """All inputs required to compute one month of on-call pay.

    Attributes:
        salary: Gross monthly salary.
        month: Any date inside the pay period month.
        monthly_hours_override: Explicit divisor for the hourly wage. None
            means use the standard contractual hours of the month.
        profile: Role profile selecting the rate table.
        custom_rates: Rates used only when profile is CUSTOM.
        assignments: Shift assignments keyed by date.
        work_logs: Worked-hours entries.
    """

    salary: float
    month: date
    monthly_hours_override: Optional[float] = None
    profile: RateProfile = RateProfile.DEVOPS_INFRA
    custom_rates: Rates = field(default_factory=Rates)
    assignments: dict[date, ShiftAssignment] = field(default_factory=dict)
    work_logs: list[WorkLogEntry] = field(default_factory=list)

    @classmethod
    def from_assignments(
        cls,
        salary: float,
        month: date,
        assignments: list[ShiftAssignment],
        **kwargs,
    ) -> "CompensationRequest":
        """Build a request from a list of assignments.

        Later assignments for the same date replace earlier ones.
        """
        keyed = {a.date: a for a in assignments}
        return cls(salary=salary, month=month, assignments=keyed, **kwargs)


@dataclass(frozen=True)
class ReconciliationResult:
    """Overtime buckets and the standby left after deducting worked time."""

    work_normal_hours: float
    work_holiday_hours: float
    total_worked_hours: float
    payable_standby_hours: float


@dataclass(frozen=True)
class CompensationResult:
    """Monetary result for one pay period.

    All amounts are unrounded; formatting belongs to the presentation layer.
    """

    payable_standby_hours: float
    work_normal_hours: float
    work_holiday_hours: float
    standby_fee: float
    overtime_normal_pay: float
    overtime_holiday_pay: float
    total_bonus: float
    hourly_wage: float

    def to_dict(self) -> dict[str, float]:
        """Return the result as a plain dictionary."""
        return {
            "payable_standby_hours": self.payable_standby_hours,
            "work_normal_hours": self.work_normal_hours,
            "work_holiday_hours": self.work_holiday_hours,
            "standby_fee": self.standby_fee,
            "overtime_normal_pay": self.overtime_normal_pay,
            "overtime_holiday_pay": self.overtime_holiday_pay,
            "total_bonus": self.total_bonus,
            "hourly_wage": self.hourly_wage,
        }
