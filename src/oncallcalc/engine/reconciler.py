"""Reconciliation of worked hours against standby exposure.

Hours actually worked during on-call are paid as overtime. They are
deducted from the standby pool so the same hour is never paid twice. The
deduction is global over the pay period: work on one day can offset standby
accrued on another.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from oncallcalc.domain.holidays import HolidayCalendar, default_calendar
from oncallcalc.domain.models import ReconciliationResult, WorkLogEntry

logger = logging.getLogger(__name__)


class WorkLogReconciler:
    """Splits work logs into overtime buckets and nets standby hours."""

    def __init__(self, holiday_calendar: Optional[HolidayCalendar] = None):
        self.holiday_calendar = holiday_calendar or default_calendar()

    def is_holiday_work(self, entry: WorkLogEntry) -> bool:
        """Holiday status of a log entry.

        The override only ever adds holiday status; an auto-detected holiday
        stays a holiday when the override is off.
        """
        return self.holiday_calendar.is_holiday(entry.date) or entry.holiday_override

    def reconcile(
        self,
        entries: Iterable[WorkLogEntry],
        total_standby_hours: float,
    ) -> ReconciliationResult:
        """Bucket worked hours and compute payable standby.

        Args:
            entries: Work log entries for the period.
            total_standby_hours: Standby exposure from the shift attributor.

        Returns:
            ReconciliationResult with normal and holiday overtime, total
            worked hours and the payable standby (never negative).
        """
        work_normal = 0.0
        work_holiday = 0.0
        total_worked = 0.0

        for entry in entries:
            if self.is_holiday_work(entry):
                work_holiday += entry.hours
            else:
                work_normal += entry.hours
            total_worked += entry.hours

        payable_standby = max(0, total_standby_hours - total_worked)

        logger.debug(
            "Reconciled %s worked hours (%s normal, %s holiday) against %s standby",
            total_worked,
            work_normal,
            work_holiday,
            total_standby_hours,
        )

        return ReconciliationResult(
            work_normal_hours=work_normal,
            work_holiday_hours=work_holiday,
            total_worked_hours=total_worked,
            payable_standby_hours=payable_standby,
        )
