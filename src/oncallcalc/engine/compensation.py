"""Monetary rollup of standby and overtime hours."""

import logging
from datetime import date
from typing import Optional

from oncallcalc.domain.models import CompensationResult, RateProfile, Rates
from oncallcalc.domain.policies import DefaultRateTable, RateTable
from oncallcalc.engine.hours import HOURS_PER_DAY, standard_monthly_hours

logger = logging.getLogger(__name__)


class CompensationEngine:
    """Turns hour buckets into money.

    The hourly wage is salary divided by the effective monthly hours. Standby
    hours are paid at a fraction of that wage, overtime at the wage plus a
    premium. Nothing is rounded here.

    Example:
        >>> engine = CompensationEngine()
        >>> result = engine.compute(80000, 176, Rates(0.2, 0.5, 1.5), 16, 0, 0)
        >>> round(result.standby_fee, 1)
        1454.5
    """

    def __init__(
        self,
        rate_table: Optional[RateTable] = None,
        hours_per_day: float = HOURS_PER_DAY,
    ):
        self.rate_table = rate_table or DefaultRateTable()
        self.hours_per_day = hours_per_day

    def resolve_rates(self, profile: RateProfile, custom_rates: Rates) -> Rates:
        """Get the rates for a profile (custom rates only apply to CUSTOM)."""
        return self.rate_table.rates_for(profile, custom_rates)

    def effective_monthly_hours(
        self,
        month: date,
        override: Optional[float] = None,
    ) -> float:
        """Return the override when given, else the month's standard hours."""
        if override is not None:
            return override
        return standard_monthly_hours(month, self.hours_per_day)

    @staticmethod
    def hourly_wage(salary: float, effective_monthly_hours: float) -> float:
        """Salary per hour, zero when the monthly hours are not positive."""
        if effective_monthly_hours > 0:
            return salary / effective_monthly_hours
        return 0

    def compute(
        self,
        salary: float,
        effective_monthly_hours: float,
        rates: Rates,
        payable_standby: float,
        work_normal: float,
        work_holiday: float,
    ) -> CompensationResult:
        """Compute the compensation result.

        Args:
            salary: Gross monthly salary.
            effective_monthly_hours: Divisor for the hourly wage.
            rates: Standby and overtime multipliers.
            payable_standby: Standby hours left after reconciliation.
            work_normal: Overtime hours on normal days.
            work_holiday: Overtime hours on holidays.

        Returns:
            CompensationResult with every amount unrounded.
        """
        wage = self.hourly_wage(salary, effective_monthly_hours)

        standby_fee = payable_standby * wage * rates.standby
        overtime_normal_pay = work_normal * wage * (1 + rates.ot_normal)
        overtime_holiday_pay = work_holiday * wage * (1 + rates.ot_holiday)
        total_bonus = standby_fee + overtime_normal_pay + overtime_holiday_pay

        logger.debug(
            "Computed bonus %s (standby %s, overtime %s + %s) at wage %s",
            total_bonus,
            standby_fee,
            overtime_normal_pay,
            overtime_holiday_pay,
            wage,
        )

        return CompensationResult(
            payable_standby_hours=payable_standby,
            work_normal_hours=work_normal,
            work_holiday_hours=work_holiday,
            standby_fee=standby_fee,
            overtime_normal_pay=overtime_normal_pay,
            overtime_holiday_pay=overtime_holiday_pay,
            total_bonus=total_bonus,
            hourly_wage=wage,
        )
