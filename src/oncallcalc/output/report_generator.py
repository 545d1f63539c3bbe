"""Text report output for compensation analysis.

This module creates a plain-text breakdown showing:
- The inputs (salary, monthly hours, rates)
- Standby hours per on-call day
- Work log classification into normal and holiday overtime
- The final monetary totals
"""

from pathlib import Path
from typing import Optional, Union

from oncallcalc.domain.models import CompensationRequest, CompensationResult
from oncallcalc.engine.calculator import OnCallCalculator


class ReportGenerator:
    """Generates text reports for a computed pay period.

    Example:
        >>> generator = ReportGenerator()
        >>> print(generator.generate_to_string(request))
    """

    def __init__(
        self,
        calculator: Optional[OnCallCalculator] = None,
        currency: str = "CZK",
    ):
        self.calculator = calculator or OnCallCalculator()
        self.currency = currency

    def generate(
        self,
        request: CompensationRequest,
        output_path: Union[str, Path],
    ) -> str:
        """Generate the report and save it to a file.

        Args:
            request: The request to compute and describe.
            output_path: Path to save the text file.

        Returns:
            The generated text content.
        """
        content = self._generate_content(request)
        Path(output_path).write_text(content)
        return content

    def generate_to_string(self, request: CompensationRequest) -> str:
        """Generate the report and return it as a string."""
        return self._generate_content(request)

    def _generate_content(self, request: CompensationRequest) -> str:
        """Generate the full report content."""
        result, stats = self.calculator.calculate_with_stats(request)
        rates = stats["rates"]
        lines = []

        # Header
        lines.append("=" * 72)
        lines.append(f"ON-CALL COMPENSATION - {request.month.strftime('%B %Y')}")
        lines.append("=" * 72)
        lines.append("")

        lines.append(f"Monthly Salary: {self._money(request.salary)}")
        hours_note = "override" if request.monthly_hours_override is not None else "standard"
        lines.append(f"Monthly Hours: {stats['effective_monthly_hours']:g} ({hours_note})")
        lines.append(f"Hourly Wage: {self._money(result.hourly_wage)}")
        lines.append(
            f"Profile: {request.profile.value} (standby {rates.standby:.0%}, "
            f"overtime +{rates.ot_normal:.0%}, holiday overtime +{rates.ot_holiday:.0%})"
        )
        lines.append("")

        lines.extend(self._shift_section(request))
        lines.extend(self._work_log_section(request))
        lines.extend(self._totals_section(request, result, stats))

        return "\n".join(lines) + "\n"

    def _shift_section(self, request: CompensationRequest) -> list[str]:
        attributor = self.calculator.attributor
        lines = ["-" * 72, "ON-CALL DAYS", "-" * 72]

        breakdown = attributor.breakdown(request.assignments)
        if not breakdown:
            lines.append("  (none)")
        for assignment, hours in breakdown:
            day_type = "rest day" if attributor.is_rest_day(assignment.date) else "workday"
            lines.append(
                f"  {assignment.date} {assignment.date.strftime('%a')}  "
                f"{assignment.variant.value:<6} {day_type:<9} {hours:>5g} h"
            )
        lines.append("")
        return lines

    def _work_log_section(self, request: CompensationRequest) -> list[str]:
        reconciler = self.calculator.reconciler
        lines = ["-" * 72, "WORK LOGS", "-" * 72]

        if not request.work_logs:
            lines.append("  (none)")
        for entry in sorted(request.work_logs, key=lambda e: e.date):
            if reconciler.holiday_calendar.is_holiday(entry.date):
                bucket = "holiday (auto)"
            elif entry.holiday_override:
                bucket = "holiday (override)"
            else:
                bucket = "normal"
            lines.append(f"  {entry.date} {entry.hours:>5g} h  {bucket}")
        lines.append("")
        return lines

    def _totals_section(
        self,
        request: CompensationRequest,
        result: CompensationResult,
        stats: dict,
    ) -> list[str]:
        return [
            "-" * 72,
            "TOTALS",
            "-" * 72,
            f"  Standby hours (gross):  {stats['total_standby_hours']:g}",
            f"  Worked hours:           {stats['total_worked_hours']:g}",
            f"  Payable standby hours:  {result.payable_standby_hours:g}",
            f"  Standby fee:            {self._money(result.standby_fee)}",
            f"  Overtime (normal):      {self._money(result.overtime_normal_pay)}"
            f"  [{result.work_normal_hours:g} h]",
            f"  Overtime (holiday):     {self._money(result.overtime_holiday_pay)}"
            f"  [{result.work_holiday_hours:g} h]",
            "",
            f"  TOTAL BONUS:            {self._money(result.total_bonus)}",
            f"  GROSS TOTAL:            "
            f"{self._money(request.salary + result.total_bonus)}",
        ]

    def _money(self, amount: float) -> str:
        return f"{amount:,.2f} {self.currency}"
