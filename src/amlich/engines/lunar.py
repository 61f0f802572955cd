"""
amlich.engines.lunar
--------------------
Gregorian -> Vietnamese lunar date conversion, driven by the New Year and
leap month tables.

Month lengths are not derived from new moons. They follow a fixed pattern:
months 2, 4, 6, 9 and 11 have 29 days, the others 30, and in a leap year the
leap month and the month after it have 30 days. This is an approximation;
around leap months a date can land one day away from an astronomical almanac.
Displayed dates depend on it, so it is kept as is.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Tuple, Union

from ..core.errors import LunarRangeError
from ..core.time import from_jdn, to_jdn, vietnam_civil_date
from ..core.types import LunarDate
from .tables import (
    FIRST_YEAR,
    LAST_YEAR,
    LEAP_MONTH_OFFSETS,
    LUNAR_NEW_YEAR_DATES,
    TABLE_END,
)

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]

SHORT_MONTHS = frozenset({2, 4, 6, 9, 11})
# Common lunar years run 353..355 days, leap years 383..385.
LEAP_YEAR_MIN_DAYS = 380

_NEW_YEAR_JDN: Tuple[int, ...] = tuple(
    to_jdn(date(*row)) for row in LUNAR_NEW_YEAR_DATES
) + (to_jdn(TABLE_END),)


def _index(year: int) -> int:
    if not FIRST_YEAR <= year <= LAST_YEAR:
        raise LunarRangeError(
            f"Lunar year {year} outside supported range {FIRST_YEAR}..{LAST_YEAR}"
        )
    return year - FIRST_YEAR


def new_year_date(year: int) -> date:
    """Gregorian date of the first day of lunar year `year`."""
    return date(*LUNAR_NEW_YEAR_DATES[_index(year)])


def lunar_year_bounds(year: int) -> Tuple[int, int]:
    """(JDN of the first day of `year`, JDN of the first day of the next year)."""
    i = _index(year)
    return _NEW_YEAR_JDN[i], _NEW_YEAR_JDN[i + 1]


def lunar_year_length(year: int) -> int:
    first, nxt = lunar_year_bounds(year)
    return nxt - first


def leap_month(year: int) -> int:
    """Month followed by the intercalary month, or 0 in a common year."""
    if lunar_year_length(year) <= LEAP_YEAR_MIN_DAYS:
        return 0
    return LEAP_MONTH_OFFSETS[_index(year)]


def _month_length(leap: int, month: int) -> int:
    if leap and month in (leap, leap + 1):
        return 30
    return 29 if month in SHORT_MONTHS else 30


def lunar_month_length(year: int, month: int, *, is_leap_month: bool = False) -> int:
    """Heuristic length of a lunar month (see module docstring)."""
    leap = leap_month(year)
    if is_leap_month:
        if month != leap:
            raise ValueError(f"Month {month} in year {year} is not a leap month.")
        # the intercalary month takes the length of the month after it
        month = leap + 1
    return _month_length(leap, month)


def _year_index(d: date, jdn: int) -> int:
    if d.year < FIRST_YEAR:
        logger.debug("rejecting %s: before lunar year %d", d, FIRST_YEAR)
        raise LunarRangeError(f"{d.isoformat()} is before the lunar New Year table")

    i = min(d.year, LAST_YEAR) - FIRST_YEAR
    if jdn < _NEW_YEAR_JDN[i]:
        # January / early February belong to the previous lunar year
        i -= 1

    if i < 0 or jdn >= _NEW_YEAR_JDN[i + 1]:
        logger.debug("rejecting %s: outside lunar years %d..%d", d, FIRST_YEAR, LAST_YEAR)
        raise LunarRangeError(
            f"{d.isoformat()} is outside lunar years {FIRST_YEAR}..{LAST_YEAR}"
        )
    return i


def to_lunar_date(value: DateLike) -> LunarDate:
    """
    Convert a civil date (or an instant, see `vietnam_civil_date`) to the
    Vietnamese lunar date.

    Raises LunarRangeError outside the New Year table.
    """
    d = vietnam_civil_date(value)
    jdn = to_jdn(d)
    i = _year_index(d, jdn)

    year = LUNAR_NEW_YEAR_DATES[i][0]
    day = jdn - _NEW_YEAR_JDN[i] + 1  # 1-based day of the lunar year
    leap = leap_month(year)

    month = 1
    is_leap = False
    leap_seen = False
    while day > _month_length(leap, month):
        day -= _month_length(leap, month)
        month += 1
        if leap and month == leap + 1 and not leap_seen:
            leap_seen = True
            length = _month_length(leap, leap + 1)
            if day > length:
                # step over the intercalary month, nominal number unchanged
                day -= length
            else:
                # inside the intercalary month: flagged here only, not on the months after it
                month = leap
                is_leap = True

    return LunarDate(day=day, month=month, year=year, is_leap_month=is_leap)


def format_lunar_date_label(value: DateLike) -> str:
    """
    Compact calendar-cell label: '1/7' on the first day of the 7th lunar month,
    otherwise just the lunar day, e.g. '15'.
    """
    lunar = to_lunar_date(value)
    if lunar.day == 1:
        return f"1/{lunar.month}"
    return str(lunar.day)


def lunar_month_days(year: int, month: int, *, is_leap_month: bool = False) -> List[date]:
    """Civil dates that carry the label (year, month, is_leap_month), in order."""
    if is_leap_month and leap_month(year) != month:
        raise ValueError(f"Month {month} in year {year} is not a leap month.")

    first, nxt = lunar_year_bounds(year)
    out: List[date] = []
    for jdn in range(first, nxt):
        d = from_jdn(jdn)
        lunar = to_lunar_date(d)
        if lunar.month == month and lunar.is_leap_month == is_leap_month:
            out.append(d)
    return out
