"""
amlich.attributes.sexagenary
----------------------------
Heavenly Stems (Can) and Earthly Branches (Chi), and the sixty-day cycle
they form.
"""

from __future__ import annotations

from typing import Tuple

from ..core.types import StemBranch

# Traditional order (Giáp.., Tý..). Rotating these to Canh.. / Thân.. mislabels every day.
STEMS: Tuple[str, ...] = (
    "Giáp", "Ất", "Bính", "Đinh", "Mậu", "Kỷ", "Canh", "Tân", "Nhâm", "Quý",
)
BRANCHES: Tuple[str, ...] = (
    "Tý", "Sửu", "Dần", "Mão", "Thìn", "Tỵ", "Ngọ", "Mùi", "Thân", "Dậu", "Tuất", "Hợi",
)

CYCLE_LENGTH = 60


def day_stem_branch(jdn: int) -> StemBranch:
    """Can-Chi of the civil day with Julian Day Number `jdn`.

    JDN 2415021 (1900-01-01) is a Giáp Tuất day.
    """
    return StemBranch(stem=STEMS[(jdn + 9) % 10], branch=BRANCHES[(jdn + 1) % 12])


def year_stem_branch(lunar_year: int) -> StemBranch:
    """Can-Chi name of a lunar year, e.g. 2024 -> Giáp Thìn."""
    return StemBranch(stem=STEMS[(lunar_year + 6) % 10], branch=BRANCHES[(lunar_year + 8) % 12])


def cycle_index(sb: StemBranch) -> int:
    """Position 0..59 of a stem-branch pair in the cycle (Giáp Tý = 0)."""
    s = STEMS.index(sb.stem)
    b = BRANCHES.index(sb.branch)
    if (s - b) % 2:
        raise ValueError(f"'{sb.label()}' is not a valid stem-branch pair")
    # unique k in 0..59 with k % 10 == s and k % 12 == b
    return (6 * s - 5 * b) % CYCLE_LENGTH
