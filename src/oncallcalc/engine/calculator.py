"""Main calculator interface.

This module provides the high-level OnCallCalculator class that runs the
shift attributor, the work-log reconciler and the compensation engine in
order.
"""

from typing import Optional

from oncallcalc.domain.holidays import HolidayCalendar, default_calendar
from oncallcalc.domain.models import CompensationRequest, CompensationResult
from oncallcalc.domain.policies import (
    DefaultRateTable,
    DefaultStandbyHoursPolicy,
    RateTable,
    StandbyHoursPolicy,
)
from oncallcalc.engine.compensation import CompensationEngine
from oncallcalc.engine.hours import HOURS_PER_DAY
from oncallcalc.engine.reconciler import WorkLogReconciler
from oncallcalc.engine.standby import ShiftAttributor


class OnCallCalculator:
    """High-level calculator for one month of on-call pay.

    The calculator holds no per-request state; calling it twice with the
    same request gives identical results.

    Example:
        >>> calculator = OnCallCalculator()
        >>> request = CompensationRequest(
        ...     salary=80000,
        ...     month=date(2024, 4, 1),
        ...     assignments={d: ShiftAssignment(d) for d in [date(2024, 4, 9)]},
        ... )
        >>> result = calculator.calculate(request)
    """

    def __init__(
        self,
        standby_policy: Optional[StandbyHoursPolicy] = None,
        rate_table: Optional[RateTable] = None,
        holiday_calendar: Optional[HolidayCalendar] = None,
        hours_per_day: float = HOURS_PER_DAY,
    ):
        """Initialize calculator with policies.

        Args:
            standby_policy: Policy for standby hours per shift variant.
            rate_table: Policy mapping role profiles to rates.
            holiday_calendar: Public holiday calendar.
            hours_per_day: Contractual hours per weekday.
        """
        self.standby_policy = standby_policy or DefaultStandbyHoursPolicy()
        self.rate_table = rate_table or DefaultRateTable()
        self.holiday_calendar = holiday_calendar or default_calendar()

        self.attributor = ShiftAttributor(
            standby_policy=self.standby_policy,
            holiday_calendar=self.holiday_calendar,
        )
        self.reconciler = WorkLogReconciler(holiday_calendar=self.holiday_calendar)
        self.engine = CompensationEngine(
            rate_table=self.rate_table,
            hours_per_day=hours_per_day,
        )

    def calculate(self, request: CompensationRequest) -> CompensationResult:
        """Compute the compensation for a request.

        Raises:
            MalformedInputError: If an assignment carries an unknown variant.
        """
        result, _ = self.calculate_with_stats(request)
        return result

    def calculate_with_stats(
        self,
        request: CompensationRequest,
    ) -> tuple[CompensationResult, dict]:
        """Compute the compensation and return intermediate figures.

        Returns:
            Tuple of (result, stats) where stats holds the effective monthly
            hours, the resolved rates, total standby and total worked hours.
        """
        total_standby = self.attributor.attribute_standby_hours(request.assignments)
        reconciliation = self.reconciler.reconcile(request.work_logs, total_standby)

        effective_hours = self.engine.effective_monthly_hours(
            request.month, request.monthly_hours_override
        )
        rates = self.engine.resolve_rates(request.profile, request.custom_rates)

        result = self.engine.compute(
            salary=request.salary,
            effective_monthly_hours=effective_hours,
            rates=rates,
            payable_standby=reconciliation.payable_standby_hours,
            work_normal=reconciliation.work_normal_hours,
            work_holiday=reconciliation.work_holiday_hours,
        )

        stats = {
            "effective_monthly_hours": effective_hours,
            "rates": rates,
            "total_standby_hours": total_standby,
            "total_worked_hours": reconciliation.total_worked_hours,
            "assignment_count": len(request.assignments),
            "work_log_count": len(request.work_logs),
        }
        return result, stats
