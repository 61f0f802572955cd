#!/usr/bin/env python3
"""
Per-year consistency report for the month-length heuristic.

For each lunar year the table length (New Year to New Year) is compared with
the number of days the heuristic months can hold. Any slack shows up as a
shortened twelfth month; a deficit would push the walk past month 12.
"""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Tuple

from amlich.core.time import from_jdn
from amlich.engines.lunar import (
    LEAP_YEAR_MIN_DAYS,
    leap_month,
    lunar_month_length,
    lunar_year_bounds,
    to_lunar_date,
)
from amlich.engines.tables import FIRST_YEAR, LAST_YEAR, LEAP_MONTH_OFFSETS


@dataclass(frozen=True)
class YearCheck:
    year: int
    length: int
    leap_month: int
    capacity: int
    last_day: int
    last_month: int
    issues: Tuple[str, ...]

    @property
    def ok(self) -> bool:
        return not self.issues


def check_year(Y: int) -> YearCheck:
    first, nxt = lunar_year_bounds(Y)
    length = nxt - first
    leap = leap_month(Y)
    offset = LEAP_MONTH_OFFSETS[Y - FIRST_YEAR]

    capacity = sum(lunar_month_length(Y, M) for M in range(1, 13))
    if leap:
        capacity += lunar_month_length(Y, leap, is_leap_month=True)

    last = to_lunar_date(from_jdn(nxt - 1))

    issues: List[str] = []
    if length > LEAP_YEAR_MIN_DAYS and offset == 0:
        issues.append("leap-length year without leap month")
    if length <= LEAP_YEAR_MIN_DAYS and offset != 0:
        issues.append(f"leap month {offset} listed for a common year")
    if capacity < length:
        issues.append(f"months hold {capacity} days, year has {length}")
    if last.month != 12:
        issues.append(f"year ends in month {last.month}")
    elif last.day < 29:
        issues.append(f"month 12 cut to {last.day} days")

    return YearCheck(
        year=Y,
        length=length,
        leap_month=leap,
        capacity=capacity,
        last_day=last.day,
        last_month=last.month,
        issues=tuple(issues),
    )


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Check the month-length heuristic against the New Year table.")
    p.add_argument("--from-year", type=int, default=FIRST_YEAR)
    p.add_argument("--to-year", type=int, default=LAST_YEAR)
    p.add_argument("--all", action="store_true", help="also list years without issues")
    args = p.parse_args(argv)

    checks = [check_year(Y) for Y in range(args.from_year, args.to_year + 1)]

    print(f"{'Year':<5} {'Days':>4} {'Leap':>4} {'Cap':>4} {'End':>6}  Issues")
    for c in checks:
        if c.ok and not args.all:
            continue
        leap = str(c.leap_month) if c.leap_month else "-"
        end = f"{c.last_day}/{c.last_month}"
        print(f"{c.year:<5} {c.length:>4} {leap:>4} {c.capacity:>4} {end:>6}  {'; '.join(c.issues)}")

    flagged = sum(1 for c in checks if not c.ok)
    print(f"\n{flagged} of {len(checks)} years flagged")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
