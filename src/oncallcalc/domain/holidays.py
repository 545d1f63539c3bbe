"""Public holiday resolution.

Holidays are derived, never stored: a fixed table of (month, day) pairs plus
the two Easter-relative days, Good Friday and Easter Monday. Easter Sunday
itself is not a public holiday here.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date, timedelta
from functools import lru_cache

logger = logging.getLogger(__name__)

# (month, day) pairs, valid for every year
FIXED_HOLIDAYS: tuple[tuple[int, int], ...] = (
    (1, 1),  # New Year's Day / Restoration Day
    (5, 1),  # Labour Day
    (5, 8),  # Liberation Day
    (7, 5),  # Saints Cyril and Methodius
    (7, 6),  # Jan Hus Day
    (9, 28),  # Statehood Day
    (10, 28),  # Independence Day
    (11, 17),  # Struggle for Freedom and Democracy Day
    (12, 24),  # Christmas Eve
    (12, 25),  # Christmas Day
    (12, 26),  # St. Stephen's Day
)

GOOD_FRIDAY_OFFSET = -2
EASTER_MONDAY_OFFSET = 1


@lru_cache(maxsize=None)
def easter_sunday(year: int) -> date:
    """Compute Easter Sunday for a Gregorian year.

    Uses the anonymous Gregorian algorithm (Meeus/Jones/Butcher).
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


class HolidayCalendar(ABC):
    """Abstract base class for public holiday calendars."""

    @abstractmethod
    def is_holiday(self, d: date) -> bool:
        """Check whether a date is a public holiday."""
        pass

    @abstractmethod
    def holidays_for_year(self, year: int) -> list[date]:
        """Return all public holidays of a year, sorted."""
        pass


class CzechHolidayCalendar(HolidayCalendar):
    """Czech public holidays: 11 fixed dates plus Good Friday and Easter Monday.

    Example:
        >>> calendar = CzechHolidayCalendar()
        >>> calendar.is_holiday(date(2024, 4, 1))
        True
        >>> calendar.is_holiday(date(2024, 3, 31))  # Easter Sunday
        False
    """

    def __init__(self, fixed_holidays: tuple[tuple[int, int], ...] = FIXED_HOLIDAYS):
        self.fixed_holidays = frozenset(fixed_holidays)

    def is_holiday(self, d: date) -> bool:
        if (d.month, d.day) in self.fixed_holidays:
            return True
        return d in self.movable_holidays(d.year)

    def movable_holidays(self, year: int) -> tuple[date, date]:
        """Return (Good Friday, Easter Monday) for the year."""
        sunday = easter_sunday(year)
        return (
            sunday + timedelta(days=GOOD_FRIDAY_OFFSET),
            sunday + timedelta(days=EASTER_MONDAY_OFFSET),
        )

    def holidays_for_year(self, year: int) -> list[date]:
        days = {date(year, month, day) for month, day in self.fixed_holidays}
        days.update(self.movable_holidays(year))
        logger.debug("Resolved %d holidays for %d", len(days), year)
        return sorted(days)


_default_calendar = CzechHolidayCalendar()


def is_holiday(d: date) -> bool:
    """Check a date against the default holiday calendar."""
    return _default_calendar.is_holiday(d)


def holidays_for_year(year: int) -> list[date]:
    """List the default calendar's holidays for a year."""
    return _default_calendar.holidays_for_year(year)


def default_calendar() -> HolidayCalendar:
    """Return the holiday calendar used when none is injected."""
    return _default_calendar
