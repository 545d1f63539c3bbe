"""Editable pay-period state.

The engine is stateless; this module owns the mutable side: the month being
edited, the assignment calendar and the work log list. It turns the state
into a CompensationRequest for each recomputation.
"""

import secrets
import string
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional

from oncallcalc.domain.models import (
    CompensationRequest,
    MalformedInputError,
    RateProfile,
    Rates,
    ShiftAssignment,
    ShiftVariant,
    WorkLogEntry,
    parse_date,
)

DEFAULT_SALARY = 80000.0

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_LENGTH = 9
_UPDATABLE_FIELDS = {"date", "hours", "holiday_override"}


def generate_log_id() -> str:
    """Generate a short random base-36 identifier for a work log."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


@dataclass
class PayPeriodState:
    """User-editable inputs for one pay period.

    Attributes:
        salary: Gross monthly salary.
        month: Any date inside the selected month.
        monthly_hours_override: Explicit monthly hours, None for standard.
        profile: Selected role profile.
        custom_rates: Rates used when profile is CUSTOM.
        assignments: On-call assignments keyed by date.
        work_logs: Worked-hours entries in insertion order.
    """

    salary: float = DEFAULT_SALARY
    month: date = field(default_factory=date.today)
    monthly_hours_override: Optional[float] = None
    profile: RateProfile = RateProfile.DEVOPS_INFRA
    custom_rates: Rates = field(default_factory=Rates)
    assignments: dict[date, ShiftAssignment] = field(default_factory=dict)
    work_logs: list[WorkLogEntry] = field(default_factory=list)

    def toggle_date(self, d: date) -> Optional[ShiftVariant]:
        """Cycle a day through FULL, START, END, SPLIT and back to none.

        Returns:
            The day's new variant, or None if the assignment was removed.
        """
        current = self.assignments.get(d)
        if current is None:
            self.assignments[d] = ShiftAssignment(d, ShiftVariant.FULL)
            return ShiftVariant.FULL

        next_variant = current.variant.next_variant()
        if next_variant is None:
            del self.assignments[d]
            return None

        self.assignments[d] = replace(current, variant=next_variant)
        return next_variant

    def add_work_log(
        self,
        d: Optional[date] = None,
        hours: float = 0.0,
        holiday_override: bool = False,
    ) -> WorkLogEntry:
        """Append a new work log entry (dated today unless given)."""
        entry = WorkLogEntry(
            id=generate_log_id(),
            date=d or date.today(),
            hours=hours,
            holiday_override=holiday_override,
        )
        self.work_logs.append(entry)
        return entry

    def update_work_log(self, log_id: str, **changes) -> WorkLogEntry:
        """Replace individual fields of a work log entry.

        Args:
            log_id: Identifier of the entry.
            **changes: Any of date, hours, holiday_override.

        Raises:
            KeyError: If no entry has the id.
            MalformedInputError: If a field cannot be updated.
        """
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise MalformedInputError(
                f"Cannot update work log field(s): {', '.join(sorted(unknown))}"
            )
        if "date" in changes:
            changes["date"] = parse_date(changes["date"])

        for i, entry in enumerate(self.work_logs):
            if entry.id == log_id:
                updated = replace(entry, **changes)
                self.work_logs[i] = updated
                return updated

        raise KeyError(log_id)

    def remove_work_log(self, log_id: str) -> bool:
        """Delete a work log entry. Returns False if the id was not found."""
        remaining = [entry for entry in self.work_logs if entry.id != log_id]
        removed = len(remaining) != len(self.work_logs)
        self.work_logs = remaining
        return removed

    def reset_monthly_hours_override(self) -> None:
        """Go back to the standard monthly hours."""
        self.monthly_hours_override = None

    def to_request(self) -> CompensationRequest:
        """Snapshot the state as an engine request."""
        return CompensationRequest(
            salary=self.salary,
            month=self.month,
            monthly_hours_override=self.monthly_hours_override,
            profile=self.profile,
            custom_rates=self.custom_rates,
            assignments=dict(self.assignments),
            work_logs=list(self.work_logs),
        )
