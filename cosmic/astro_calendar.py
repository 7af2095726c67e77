"""
Calendar utilities for the profile engine.
Handles day-number arithmetic for the day pillar and day-of-year lookups
for the daily horoscope.
"""

from datetime import date, datetime
from typing import Union

import swisseph as swe


def julian_day_number(year: int, month: int, day: int) -> int:
    """
    Julian Day Number of a proleptic Gregorian calendar date.

    Overflowing values roll over: day 35 of January is February 4,
    month 13 is January of the next year, month 0 is December of the
    previous one.

    Example:
        julian_day_number(2000, 1, 1) == 2451545
    """
    # julday only handles months -8..14 consistently
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    # julday returns the JD at 00:00 UT, which is JDN - 0.5
    return int(round(swe.julday(year, month, day, 12.0, swe.GREG_CAL)))


def days_between(start: tuple, end: tuple) -> int:
    """
    Whole days from start to end, each given as (year, month, day).

    Negative when end is earlier than start.
    """
    return julian_day_number(*end) - julian_day_number(*start)


def day_of_year(when: Union[date, datetime, str]) -> int:
    """
    Day of year for a date: January 1 is 1, December 31 is 365 or 366.

    Args:
        when: date, datetime or ISO format string (YYYY-MM-DD)
    """
    if isinstance(when, str):
        when = datetime.fromisoformat(when)
    return days_between((when.year, 1, 0), (when.year, when.month, when.day))
