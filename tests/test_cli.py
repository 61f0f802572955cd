# tests/test_cli.py

import pytest

from amlich.cli import main
from amlich.diagnostics.leap_months import check_year


def test_day_command(capsys):
    assert main(["day", "2024-02-10"]) == 0
    out = capsys.readouterr().out
    assert "Nhãn       : 1/1" in out
    assert "ngày 1 tháng 1 năm Giáp Thìn (2024)" in out
    assert "Ngày Giáp Thìn" in out


def test_date_shortcut_with_attributes(capsys):
    assert main(["2024-02-10", "--attr", "hours", "--attr", "stars"]) == 0
    out = capsys.readouterr().out
    assert "good_hours:" in out
    assert "  - Thìn (7-9)" in out
    assert "  - Thiên Y: Tốt cho chữa bệnh, sức khỏe" in out


def test_day_out_of_range(capsys):
    assert main(["day", "1850-01-01"]) == 2
    assert "1850-01-01" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        ["month", "2051", "1"],
        ["month", "1850", "1"],
        ["diag", "leap-months", "--from-year", "1850", "--to-year", "1850"],
    ],
)
def test_tools_report_out_of_range_years(argv, capsys):
    assert main(argv) == 2
    err = capsys.readouterr().err
    assert err.startswith("amlich: ")
    assert "outside supported range" in err


@pytest.mark.parametrize("argv", [["day", "2024-13-01"], ["2024-02-30"]])
def test_malformed_date_is_usage_error(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
    assert "invalid date" in capsys.readouterr().err


def test_day_shows_cycle_position(capsys):
    # Giáp Thìn is position 41 of the sixty-day cycle
    assert main(["day", "2024-02-10"]) == 0
    assert "Ngày Giáp Thìn  (41/60)" in capsys.readouterr().out


def test_leap_month_label(capsys):
    assert main(["day", "2023-03-23"]) == 0
    assert "tháng 2 nhuận" in capsys.readouterr().out


def test_new_years_table(capsys):
    assert main(["new-years", "--from-year", "2023", "--to-year", "2024"]) == 0
    out = capsys.readouterr().out
    assert "2023-01-22" in out
    assert "2024-02-10" in out
    assert "Quý Mão" in out
    assert "Giáp Thìn" in out


def test_month_grid(capsys):
    assert main(["month", "2023", "2", "--leap"]) == 0
    out = capsys.readouterr().out
    assert "Tháng 2 nhuận năm Quý Mão (2023)" in out
    assert "2023-03-23 .. 2023-04-21" in out


def test_leap_months_report(capsys):
    assert main(["diag", "leap-months", "--from-year", "2020", "--to-year", "2025"]) == 0
    out = capsys.readouterr().out
    assert "years flagged" in out


def test_heuristic_never_runs_past_month_12():
    for Y in range(1900, 2051):
        c = check_year(Y)
        assert c.capacity >= c.length
        assert c.last_month == 12


def test_check_year_2023():
    c = check_year(2023)
    assert c.length == 384
    assert c.leap_month == 2
    assert c.capacity == 386
    assert c.last_day == 28
    assert c.issues == ("month 12 cut to 28 days",)
