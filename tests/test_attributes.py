# tests/test_attributes.py

import pytest
from datetime import date

import amlich
from amlich import StemBranch, to_jdn
from amlich.attributes.almanac import (
    ALL_HOURS,
    HOANG_DAO_HOURS,
    bad_hours,
    bad_stars,
    good_hours,
    good_stars,
)
from amlich.attributes.sexagenary import BRANCHES, STEMS, cycle_index, day_stem_branch, year_stem_branch


@pytest.mark.parametrize(
    "d, stem, branch",
    [
        (date(1900, 1, 1), "Giáp", "Tuất"),
        (date(2000, 1, 1), "Mậu", "Ngọ"),
        (date(2024, 2, 10), "Giáp", "Thìn"),
    ],
)
def test_known_day_can_chi(d, stem, branch):
    assert day_stem_branch(to_jdn(d)) == StemBranch(stem, branch)
    assert amlich.day_stem_branch_label(d) == f"Ngày {stem} {branch}"


def test_sexagenary_period_is_60():
    start = to_jdn(date(2024, 1, 1))
    seen = set()
    for jdn in range(start, start + 60):
        sb = day_stem_branch(jdn)
        assert day_stem_branch(jdn + 60) == sb
        assert day_stem_branch(jdn - 600) == sb
        seen.add(sb)
    # all sixty pairs appear exactly once per cycle
    assert len(seen) == 60


def test_consecutive_days_advance_stem_and_branch():
    jdn = to_jdn(date(2024, 5, 17))
    for k in range(100):
        a, b = day_stem_branch(jdn + k), day_stem_branch(jdn + k + 1)
        assert STEMS.index(b.stem) == (STEMS.index(a.stem) + 1) % 10
        assert BRANCHES.index(b.branch) == (BRANCHES.index(a.branch) + 1) % 12


def test_cycle_index():
    assert cycle_index(StemBranch("Giáp", "Tý")) == 0
    assert cycle_index(StemBranch("Quý", "Hợi")) == 59
    for k in range(60):
        assert cycle_index(StemBranch(STEMS[k % 10], BRANCHES[k % 12])) == k
    with pytest.raises(ValueError):
        cycle_index(StemBranch("Giáp", "Sửu"))


def test_year_can_chi():
    assert year_stem_branch(2024).label() == "Giáp Thìn"
    assert year_stem_branch(2023).label() == "Quý Mão"
    assert year_stem_branch(1900).label() == "Canh Tý"
    assert year_stem_branch(1984).label() == "Giáp Tý"


@pytest.mark.parametrize("branch", BRANCHES)
def test_hours_partition_the_day(branch):
    good, bad = good_hours(branch), bad_hours(branch)
    assert len(good) == 6
    assert set(good).isdisjoint(bad)
    assert set(good) | set(bad) == set(ALL_HOURS)
    # canonical order preserved
    assert list(bad) == [h for h in ALL_HOURS if h in bad]


def test_opposite_branches_share_hours():
    for i, branch in enumerate(BRANCHES):
        opposite = BRANCHES[(i + 6) % 12]
        assert good_hours(branch) == good_hours(opposite)
        assert bad_hours(branch) == bad_hours(opposite)
    assert good_hours("Tý") == ("Tý (23-1)", "Sửu (1-3)", "Mão (5-7)", "Ngọ (11-13)", "Thân (15-17)", "Dậu (17-19)")


def test_unknown_branch():
    assert good_hours("X") == ()
    assert bad_hours("X") == ALL_HOURS
    assert good_stars("X") == ()
    assert bad_stars("X") == ()


def test_every_branch_has_stars():
    assert set(HOANG_DAO_HOURS) == set(BRANCHES)
    for branch in BRANCHES:
        assert good_stars(branch)
        assert bad_stars(branch)


def test_day_attributes():
    attrs = amlich.day_attributes(date(2024, 2, 10))  # Giáp Thìn
    assert attrs.stem_branch == StemBranch("Giáp", "Thìn")
    assert attrs.good_hours == good_hours("Thìn")
    assert attrs.bad_hours == ("Tý (23-1)", "Sửu (1-3)", "Mão (5-7)", "Ngọ (11-13)", "Mùi (13-15)", "Tuất (19-21)")
    assert [s.name for s in attrs.good_stars] == ["Thiên Y"]
    assert [s.name for s in attrs.bad_stars] == ["Hoang Vu"]
    assert amlich.day_attributes(date(2024, 2, 10)) == attrs


def test_day_attributes_outside_lunar_table():
    # the Can-Chi does not depend on the lunar tables
    attrs = amlich.day_attributes(date(1850, 6, 1))
    assert len(attrs.good_hours) == 6
    assert amlich.day_stem_branch_label(date(2100, 1, 1)).startswith("Ngày ")


def test_day_info_attributes():
    info = amlich.day_info(date(2024, 2, 10), attributes=["can_chi", "year_can_chi", "hours", "stars", "weekday"])
    assert info.jdn == to_jdn(date(2024, 2, 10))
    assert info.lunar.day == 1
    assert info.attributes["can_chi"] == "Giáp Thìn"
    assert info.attributes["year_can_chi"] == "Giáp Thìn"
    assert info.attributes["weekday"] == date(2024, 2, 10).weekday()
    assert info.attributes["good_hours"] == list(good_hours("Thìn"))
    assert info.attributes["good_stars"] == [{"name": "Thiên Y", "meaning": "Tốt cho chữa bệnh, sức khỏe"}]

    assert amlich.day_info(date(2024, 2, 10)).attributes is None
    assert "hours" in amlich.list_attributes()
    with pytest.raises(KeyError):
        amlich.day_info(date(2024, 2, 10), attributes=["nope"])
