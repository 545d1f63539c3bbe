"""Contractual working hours for a month.

Only weekends are excluded. Holidays falling on a weekday still count as
contractual hours; holiday handling belongs to standby and overtime logic.
"""

import calendar
from datetime import date

HOURS_PER_DAY = 8


def is_weekend(d: date) -> bool:
    """Check if a date falls on Saturday or Sunday."""
    return d.weekday() >= 5


def month_days(d: date) -> list[date]:
    """Return every calendar day of the month containing ``d``."""
    _, days_in_month = calendar.monthrange(d.year, d.month)
    return [date(d.year, d.month, day) for day in range(1, days_in_month + 1)]


def standard_monthly_hours(d: date, hours_per_day: float = HOURS_PER_DAY) -> float:
    """Compute the standard working hours of the month containing ``d``.

    Args:
        d: Any date inside the month.
        hours_per_day: Contractual hours per weekday.

    Returns:
        Number of Monday-Friday days times hours_per_day.
    """
    working_days = sum(1 for day in month_days(d) if not is_weekend(day))
    return working_days * hours_per_day
