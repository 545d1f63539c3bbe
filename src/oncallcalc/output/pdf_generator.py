"""PDF generation for compensation statements.

This module creates a printable one-page statement showing:
- The pay period inputs and hourly wage
- A month calendar coloured by shift variant and holiday status
- Work logs and the final totals
"""

import calendar
from io import BytesIO
from pathlib import Path
from typing import Optional, Union

from oncallcalc.domain.models import CompensationRequest, CompensationResult, ShiftVariant
from oncallcalc.engine.calculator import OnCallCalculator
from oncallcalc.engine.hours import is_weekend

# Color definitions (RGB tuples, 0-1 scale)
COLORS = {
    ShiftVariant.FULL: (0.35, 0.45, 0.6),  # Slate blue
    ShiftVariant.START: (0.4, 0.75, 0.7),  # Teal
    ShiftVariant.END: (0.95, 0.65, 0.35),  # Orange
    ShiftVariant.SPLIT: (0.9, 0.5, 0.6),  # Rose
    "holiday": (0.98, 0.85, 0.85),  # Light red
    "weekend": (0.9, 0.92, 0.97),  # Light blue
    "workday": (1.0, 1.0, 1.0),  # White
}

WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


class PDFGenerator:
    """Generates printable compensation statements.

    Example:
        >>> generator = PDFGenerator()
        >>> generator.generate(request, "statement.pdf")
    """

    def __init__(
        self,
        calculator: Optional[OnCallCalculator] = None,
        page_width: float = 612,  # Letter portrait width (8.5")
        page_height: float = 792,  # Letter portrait height (11")
        margin: float = 48,
        currency: str = "CZK",
    ):
        self.calculator = calculator or OnCallCalculator()
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin
        self.currency = currency

    def generate(
        self,
        request: CompensationRequest,
        output_path: Union[str, Path],
    ) -> None:
        """Generate the statement and save it to a file.

        Args:
            request: The request to compute and render.
            output_path: Path to save the PDF.
        """
        try:
            from reportlab.pdfgen import canvas
        except ImportError:
            raise ImportError(
                "reportlab is required for PDF generation. "
                "Install with: pip install reportlab"
            )

        c = canvas.Canvas(str(output_path), pagesize=(self.page_width, self.page_height))
        self._draw_statement(c, request)
        c.save()

    def generate_to_buffer(self, request: CompensationRequest) -> BytesIO:
        """Generate the statement and return it as a bytes buffer."""
        try:
            from reportlab.pdfgen import canvas
        except ImportError:
            raise ImportError(
                "reportlab is required for PDF generation. "
                "Install with: pip install reportlab"
            )

        buffer = BytesIO()
        c = canvas.Canvas(buffer, pagesize=(self.page_width, self.page_height))
        self._draw_statement(c, request)
        c.save()
        buffer.seek(0)
        return buffer

    def _draw_statement(self, c, request: CompensationRequest) -> None:
        """Draw the whole statement page."""
        result, stats = self.calculator.calculate_with_stats(request)

        y = self.page_height - self.margin
        y = self._draw_header(c, request, result, stats, y)
        y = self._draw_calendar(c, request, y - 20)
        self._draw_legend(c, self.margin, y - 20)
        y = self._draw_work_logs(c, request, y - 50)
        self._draw_totals(c, request, result, stats, y - 20)

        c.setFont("Helvetica", 8)
        c.drawCentredString(
            self.page_width / 2,
            self.margin / 2,
            "Amounts are unrounded engine output shown to two decimals.",
        )
        c.showPage()

    def _draw_header(
        self,
        c,
        request: CompensationRequest,
        result: CompensationResult,
        stats: dict,
        y: float,
    ) -> float:
        """Draw title and inputs. Returns the next free y position."""
        c.setFont("Helvetica-Bold", 16)
        c.drawString(self.margin, y, f"On-Call Statement - {request.month.strftime('%B %Y')}")
        y -= 22

        rates = stats["rates"]
        c.setFont("Helvetica", 10)
        lines = [
            f"Monthly Salary: {self._money(request.salary)}",
            f"Monthly Hours: {stats['effective_monthly_hours']:g}    "
            f"Hourly Wage: {self._money(result.hourly_wage)}",
            f"Profile: {request.profile.value}  (standby {rates.standby:.0%}, "
            f"overtime +{rates.ot_normal:.0%}, holiday +{rates.ot_holiday:.0%})",
        ]
        for line in lines:
            c.drawString(self.margin, y, line)
            y -= 14
        return y

    def _draw_calendar(self, c, request: CompensationRequest, y: float) -> float:
        """Draw the month grid. Returns the y position below the grid."""
        attributor = self.calculator.attributor
        cell_width = (self.page_width - 2 * self.margin) / 7
        cell_height = 36

        c.setFont("Helvetica-Bold", 9)
        for i, label in enumerate(WEEKDAY_LABELS):
            c.drawCentredString(self.margin + (i + 0.5) * cell_width, y, label)
        y -= 6

        weeks = calendar.Calendar(firstweekday=0).monthdatescalendar(
            request.month.year, request.month.month
        )
        for week in weeks:
            y -= cell_height
            for i, day in enumerate(week):
                if day.month != request.month.month:
                    continue
                x = self.margin + i * cell_width
                assignment = request.assignments.get(day)

                if assignment is not None:
                    color = COLORS[assignment.variant]
                elif attributor.holiday_calendar.is_holiday(day):
                    color = COLORS["holiday"]
                elif is_weekend(day):
                    color = COLORS["weekend"]
                else:
                    color = COLORS["workday"]

                c.setFillColorRGB(*color)
                c.setStrokeColorRGB(0.7, 0.7, 0.7)
                c.rect(x, y, cell_width, cell_height, fill=1, stroke=1)

                c.setFillColorRGB(0, 0, 0)
                c.setFont("Helvetica", 9)
                c.drawString(x + 3, y + cell_height - 11, str(day.day))

                if assignment is not None:
                    hours = attributor.hours_for(assignment)
                    c.setFont("Helvetica-Bold", 7)
                    c.drawRightString(
                        x + cell_width - 3,
                        y + 4,
                        f"{assignment.variant.value} {hours:g}h",
                    )
        return y

    def _draw_legend(self, c, x: float, y: float) -> None:
        """Draw legend for colors."""
        c.setFont("Helvetica-Bold", 8)
        c.drawString(x, y, "Legend:")

        items = [
            (ShiftVariant.FULL, "Full"),
            (ShiftVariant.START, "Start"),
            (ShiftVariant.END, "End"),
            (ShiftVariant.SPLIT, "Split"),
            ("holiday", "Holiday"),
            ("weekend", "Weekend"),
        ]

        c.setFont("Helvetica", 7)
        current_x = x + 45

        for key, label in items:
            c.setFillColorRGB(*COLORS[key])
            c.rect(current_x, y - 2, 12, 10, fill=1, stroke=1)
            c.setFillColorRGB(0, 0, 0)
            c.drawString(current_x + 15, y, label)
            current_x += 65

    def _draw_work_logs(self, c, request: CompensationRequest, y: float) -> float:
        """Draw the work log table. Returns the next free y position."""
        reconciler = self.calculator.reconciler

        c.setFont("Helvetica-Bold", 12)
        c.drawString(self.margin, y, "Work Logs")
        y -= 16

        c.setFont("Helvetica", 9)
        if not request.work_logs:
            c.drawString(self.margin + 20, y, "No work logged during on-call.")
            return y - 14

        for entry in sorted(request.work_logs, key=lambda e: e.date):
            bucket = "holiday" if reconciler.is_holiday_work(entry) else "normal"
            c.drawString(
                self.margin + 20,
                y,
                f"{entry.date.strftime('%a %d.%m.')}   {entry.hours:g} h   {bucket}",
            )
            y -= 13
        return y

    def _draw_totals(
        self,
        c,
        request: CompensationRequest,
        result: CompensationResult,
        stats: dict,
        y: float,
    ) -> None:
        """Draw the totals block."""
        c.setFont("Helvetica-Bold", 12)
        c.drawString(self.margin, y, "Totals")
        y -= 16

        c.setFont("Helvetica", 10)
        rows = [
            ("Standby hours (gross)", f"{stats['total_standby_hours']:g}"),
            ("Payable standby hours", f"{result.payable_standby_hours:g}"),
            ("Standby fee", self._money(result.standby_fee)),
            ("Overtime (normal)", self._money(result.overtime_normal_pay)),
            ("Overtime (holiday)", self._money(result.overtime_holiday_pay)),
        ]
        for label, value in rows:
            c.drawString(self.margin + 20, y, label)
            c.drawRightString(self.margin + 320, y, value)
            y -= 14

        c.setFont("Helvetica-Bold", 11)
        c.drawString(self.margin + 20, y - 4, "Total bonus")
        c.drawRightString(self.margin + 320, y - 4, self._money(result.total_bonus))
        c.drawString(self.margin + 20, y - 20, "Gross total (salary + bonus)")
        c.drawRightString(
            self.margin + 320, y - 20, self._money(request.salary + result.total_bonus)
        )

    def _money(self, amount: float) -> str:
        return f"{amount:,.2f} {self.currency}"
