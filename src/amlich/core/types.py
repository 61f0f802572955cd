from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Tuple

@dataclass(frozen=True)
class LunarDate:
    day: int
    month: int
    year: int
    is_leap_month: bool = False

@dataclass(frozen=True)
class StemBranch:
    """Can-Chi pair, e.g. stem='Giáp', branch='Tý'."""
    stem: str
    branch: str

    def label(self) -> str:
        return f"{self.stem} {self.branch}"

@dataclass(frozen=True)
class Star:
    name: str
    meaning: str

@dataclass(frozen=True)
class DayAttributes:
    stem_branch: StemBranch
    good_hours: Tuple[str, ...]
    bad_hours: Tuple[str, ...]
    good_stars: Tuple[Star, ...] = ()
    bad_stars: Tuple[Star, ...] = ()

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    jdn: int
    lunar: LunarDate
    attributes: Optional[Dict[str, Any]] = None
