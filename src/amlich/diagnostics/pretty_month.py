from __future__ import annotations

from datetime import date
import argparse

import amlich
from amlich.engines.lunar import lunar_month_days


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def week_rows(days: list[date]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    for _ in range(days[0].weekday()):  # Monday=0
        wk.append(cell("", ""))
    for d in days:
        wk.append(cell(amlich.format_lunar_date_label(d), f"{d.month:02d}-{d.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def lunar_month_calendar(Y: int, M: int, is_leap: bool) -> int:
    days = lunar_month_days(Y, M, is_leap_month=is_leap)
    if not days:
        print(f"Y={Y} M={M}: no days carry this label")
        return 1

    leap_tag = " nhuận" if is_leap else ""
    year_name = amlich.year_stem_branch(Y).label()
    title = f"Tháng {M}{leap_tag} năm {year_name} ({Y})   ({days[0]} .. {days[-1]}, {len(days)} days)"
    print_grid(title, week_rows(days))
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a lunar month as a week grid (lunar label over MM-DD).")
    p.add_argument("year", type=int, help="lunar year")
    p.add_argument("month", type=int, help="lunar month 1..12")
    p.add_argument("--leap", action="store_true", help="the intercalary month")
    args = p.parse_args(argv)

    if not 1 <= args.month <= 12:
        raise SystemExit("month must be in 1..12")
    return lunar_month_calendar(args.year, args.month, args.leap)


if __name__ == "__main__":
    raise SystemExit(main())
