"""amlich public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Register the standard attribute providers on import
from .attributes import standard as _standard  # noqa: F401

from .api import (
    to_lunar_date,
    format_lunar_date_label,
    day_attributes,
    day_stem_branch_label,
    day_info,
    list_attributes,
)
from .attributes.sexagenary import day_stem_branch, year_stem_branch
from .core.errors import AmlichError, LunarRangeError
from .core.time import to_jdn
from .core.types import DayAttributes, DayInfo, LunarDate, Star, StemBranch

__all__ = [
    "to_lunar_date",
    "format_lunar_date_label",
    "day_attributes",
    "day_stem_branch_label",
    "day_info",
    "list_attributes",
    "day_stem_branch",
    "year_stem_branch",
    "to_jdn",
    "AmlichError",
    "LunarRangeError",
    "DayAttributes",
    "DayInfo",
    "LunarDate",
    "Star",
    "StemBranch",
]
