from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import List, Sequence, Union

from .attributes.almanac import day_attributes, day_stem_branch_label
from .attributes.registry import compute_attributes, list_attributes as _list_attributes
from .core.time import to_jdn, vietnam_civil_date
from .core.types import DayInfo
from .engines.lunar import format_lunar_date_label, to_lunar_date

DateLike = Union[date, datetime]

__all__ = [
    "to_lunar_date",
    "format_lunar_date_label",
    "day_attributes",
    "day_stem_branch_label",
    "day_info",
    "list_attributes",
]

def list_attributes() -> List[str]:
    return _list_attributes()

def day_info(d: DateLike, *, attributes: Sequence[str] = ()) -> DayInfo:
    """Civil date, JDN and lunar date of `d`, plus the named attribute sets."""
    civil = vietnam_civil_date(d)
    info = DayInfo(civil_date=civil, jdn=to_jdn(civil), lunar=to_lunar_date(civil))
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info
