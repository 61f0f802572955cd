from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date '{s}' ({e})") from e


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def cmd_day(argv: list[str]) -> int:
    import amlich
    from amlich.attributes.sexagenary import cycle_index

    p = argparse.ArgumentParser(prog="amlich day", description="Gregorian -> Vietnamese lunar day")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("--attr", action="append", default=[], help=f"attribute name (repeatable): {', '.join(amlich.list_attributes())}")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    d = args.date
    try:
        info = amlich.day_info(d, attributes=tuple(args.attr))
    except amlich.LunarRangeError as e:
        print(f"amlich: {e}", file=sys.stderr)
        return 2

    lunar = info.lunar
    leap_tag = " nhuận" if lunar.is_leap_month else ""
    year_name = amlich.year_stem_branch(lunar.year).label()
    print(f"Dương lịch : {d.isoformat()}  (JDN {info.jdn})")
    print(f"Âm lịch    : ngày {lunar.day} tháng {lunar.month}{leap_tag} năm {year_name} ({lunar.year})")
    print(f"Nhãn       : {amlich.format_lunar_date_label(d)}")
    position = cycle_index(amlich.day_stem_branch(info.jdn)) + 1
    print(f"Can-Chi    : {amlich.day_stem_branch_label(d)}  ({position}/60)")
    for key, value in (info.attributes or {}).items():
        if isinstance(value, list):
            print(f"{key}:")
            for item in value:
                if isinstance(item, dict):
                    print(f"  - {item['name']}: {item['meaning']}")
                else:
                    print(f"  - {item}")
        else:
            print(f"{key}: {value}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `amlich YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="amlich", description="Vietnamese lunar calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    # day
    p_day = sub.add_parser("day", help="Gregorian -> Vietnamese lunar day")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    p_day.add_argument("--verbose", action="store_true")

    # diagnostics
    sub.add_parser("month", help="Print a lunar month as a week grid")
    sub.add_parser("new-years", help="Print the lunar New Year table")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["leap-months"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        day_argv = [args.date]
        for a in args.attr:
            day_argv += ["--attr", a]
        if args.verbose:
            day_argv += ["--verbose"]
        day_argv += rest
        return cmd_day(day_argv)

    if args.cmd == "month":
        modpath = "amlich.diagnostics.pretty_month"
    elif args.cmd == "new-years":
        modpath = "amlich.diagnostics.new_years_table"
    elif args.cmd == "diag":
        tool_map = {
            "leap-months": "amlich.diagnostics.leap_months",
        }
        modpath = tool_map[args.tool]
    else:
        raise RuntimeError("unreachable")

    from amlich.core.errors import LunarRangeError

    try:
        return _run_module_main(modpath, rest)
    except LunarRangeError as e:
        print(f"amlich: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
