from __future__ import annotations

from datetime import date
import argparse

import amlich
from amlich.engines.lunar import leap_month, lunar_year_length, new_year_date
from amlich.engines.tables import FIRST_YEAR, LAST_YEAR


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the lunar New Year (Tết) table with year names and leap months."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the New Year column (default: iso).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")
    if Y0 < FIRST_YEAR or Y1 > LAST_YEAR:
        raise SystemExit(f"years must be within {FIRST_YEAR}..{LAST_YEAR}")

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    headers = ["Year", "Tết", "Can-Chi", "Days", "Leap"]
    colw = [5, 10, 10, 4, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        leap = leap_month(Y)
        row = [
            str(Y),
            fmt(new_year_date(Y)),
            amlich.year_stem_branch(Y).label(),
            str(lunar_year_length(Y)),
            str(leap) if leap else "-",
        ]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
