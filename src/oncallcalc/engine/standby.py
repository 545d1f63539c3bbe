"""Standby hour attribution for shift assignments."""

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Optional, Union

from oncallcalc.domain.holidays import HolidayCalendar, default_calendar
from oncallcalc.domain.models import ShiftAssignment
from oncallcalc.domain.policies import DefaultStandbyHoursPolicy, StandbyHoursPolicy
from oncallcalc.engine.hours import is_weekend

logger = logging.getLogger(__name__)


class ShiftAttributor:
    """Converts shift assignments into standby hour exposure.

    A day counts as a rest day when it is a weekend day or a public holiday;
    the standby hours policy decides how many hours each variant yields.

    Example:
        >>> attributor = ShiftAttributor()
        >>> attributor.attribute_standby_hours([
        ...     ShiftAssignment(date(2024, 4, 6), ShiftVariant.FULL),  # Saturday
        ... ])
        24
    """

    def __init__(
        self,
        standby_policy: Optional[StandbyHoursPolicy] = None,
        holiday_calendar: Optional[HolidayCalendar] = None,
    ):
        self.standby_policy = standby_policy or DefaultStandbyHoursPolicy()
        self.holiday_calendar = holiday_calendar or default_calendar()

    def is_rest_day(self, d: date) -> bool:
        """Check if a date is a weekend day or a public holiday."""
        return is_weekend(d) or self.holiday_calendar.is_holiday(d)

    def hours_for(self, assignment: ShiftAssignment) -> float:
        """Standby hours contributed by a single assignment."""
        return self.standby_policy.standby_hours(
            assignment.variant, self.is_rest_day(assignment.date)
        )

    def breakdown(
        self,
        assignments: Union[Mapping[date, ShiftAssignment], Iterable[ShiftAssignment]],
    ) -> list[tuple[ShiftAssignment, float]]:
        """Return (assignment, hours) pairs sorted by date."""
        items = _as_list(assignments)
        return [(a, self.hours_for(a)) for a in sorted(items, key=lambda a: a.date)]

    def attribute_standby_hours(
        self,
        assignments: Union[Mapping[date, ShiftAssignment], Iterable[ShiftAssignment]],
    ) -> float:
        """Sum standby hours over all assignments.

        Args:
            assignments: Assignments keyed by date, or any iterable of them.
                An iterable is keyed by date first, so a later assignment
                for the same date replaces an earlier one.

        Returns:
            Total standby hours, uncapped.
        """
        items = _as_list(assignments)
        total = sum(self.hours_for(a) for a in items)
        logger.debug("Attributed %s standby hours over %d assignments", total, len(items))
        return total


def _as_list(
    assignments: Union[Mapping[date, ShiftAssignment], Iterable[ShiftAssignment]],
) -> list[ShiftAssignment]:
    if isinstance(assignments, Mapping):
        return list(assignments.values())
    return list({a.date: a for a in assignments}.values())
