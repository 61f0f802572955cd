from __future__ import annotations
from typing import Any, Dict

from .almanac import bad_hours, bad_stars, good_hours, good_stars
from .registry import register_attribute
from .sexagenary import day_stem_branch, year_stem_branch

def weekday(info) -> Dict[str, Any]:
    # 0=Mon..6=Sun, same as date.weekday()
    return {"weekday": info.jdn % 7}

def can_chi(info) -> Dict[str, Any]:
    return {"can_chi": day_stem_branch(info.jdn).label()}

def year_can_chi(info) -> Dict[str, Any]:
    return {"year_can_chi": year_stem_branch(info.lunar.year).label()}

def hours(info) -> Dict[str, Any]:
    branch = day_stem_branch(info.jdn).branch
    return {"good_hours": list(good_hours(branch)), "bad_hours": list(bad_hours(branch))}

def stars(info) -> Dict[str, Any]:
    branch = day_stem_branch(info.jdn).branch
    return {
        "good_stars": [{"name": s.name, "meaning": s.meaning} for s in good_stars(branch)],
        "bad_stars": [{"name": s.name, "meaning": s.meaning} for s in bad_stars(branch)],
    }

register_attribute("weekday", weekday)
register_attribute("can_chi", can_chi)
register_attribute("year_can_chi", year_can_chi)
register_attribute("hours", hours)
register_attribute("stars", stars)
