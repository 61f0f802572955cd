"""
amlich.attributes.almanac
-------------------------
Per-day almanac data keyed by the day's Earthly Branch: Hoàng Đạo
(auspicious) and Hắc Đạo (inauspicious) hours, and a representative set of
good and bad stars.

The star tables are a simplified model, one or two stars per branch.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Dict, Tuple, Union

from ..core.time import to_jdn, vietnam_civil_date
from ..core.types import DayAttributes, Star
from .sexagenary import day_stem_branch

DateLike = Union[date, datetime]

# The twelve two-hour periods, named after their branch, in canonical order.
ALL_HOURS: Tuple[str, ...] = (
    "Tý (23-1)", "Sửu (1-3)", "Dần (3-5)", "Mão (5-7)", "Thìn (7-9)", "Tỵ (9-11)",
    "Ngọ (11-13)", "Mùi (13-15)", "Thân (15-17)", "Dậu (17-19)", "Tuất (19-21)", "Hợi (21-23)",
)

_TY_NGO = ("Tý (23-1)", "Sửu (1-3)", "Mão (5-7)", "Ngọ (11-13)", "Thân (15-17)", "Dậu (17-19)")
_SUU_MUI = ("Dần (3-5)", "Mão (5-7)", "Tỵ (9-11)", "Thân (15-17)", "Tuất (19-21)", "Hợi (21-23)")
_DAN_THAN = ("Tý (23-1)", "Sửu (1-3)", "Thìn (7-9)", "Tỵ (9-11)", "Mùi (13-15)", "Tuất (19-21)")
_MAO_DAU = ("Tý (23-1)", "Dần (3-5)", "Mão (5-7)", "Ngọ (11-13)", "Mùi (13-15)", "Dậu (17-19)")
_THIN_TUAT = ("Dần (3-5)", "Thìn (7-9)", "Tỵ (9-11)", "Thân (15-17)", "Dậu (17-19)", "Hợi (21-23)")
_TY_HOI = ("Sửu (1-3)", "Thìn (7-9)", "Ngọ (11-13)", "Mùi (13-15)", "Tuất (19-21)", "Hợi (21-23)")

# Opposite branches share the same six Hoàng Đạo hours.
HOANG_DAO_HOURS: Dict[str, Tuple[str, ...]] = {
    "Tý": _TY_NGO, "Ngọ": _TY_NGO,
    "Sửu": _SUU_MUI, "Mùi": _SUU_MUI,
    "Dần": _DAN_THAN, "Thân": _DAN_THAN,
    "Mão": _MAO_DAU, "Dậu": _MAO_DAU,
    "Thìn": _THIN_TUAT, "Tuất": _THIN_TUAT,
    "Tỵ": _TY_HOI, "Hợi": _TY_HOI,
}

GOOD_STARS: Dict[str, Tuple[Star, ...]] = {
    "Tý": (Star("Thiên Quý", "May mắn, quý nhân phù trợ"), Star("Thiên Hỷ", "Tin vui, hỷ sự")),
    "Sửu": (Star("Thiên Quan", "Tốt cho công danh, thi cử"),),
    "Dần": (Star("Phúc Sinh", "Có phúc, may mắn"), Star("Giải Thần", "Hóa giải hung hiểm")),
    "Mão": (Star("Nguyệt Tài", "Tốt cho cầu tài, kinh doanh"),),
    "Thìn": (Star("Thiên Y", "Tốt cho chữa bệnh, sức khỏe"),),
    "Tỵ": (Star("Dịch Mã", "Tốt cho di chuyển, xuất hành"),),
    "Ngọ": (Star("Thiên Đức", "Được trời đất che chở"), Star("Phúc Đức", "Gặp nhiều may mắn")),
    "Mùi": (Star("Nguyệt Ân", "Phúc lộc, được giúp đỡ"),),
    "Thân": (Star("Thanh Long", "May mắn, thành công"),),
    "Dậu": (Star("Lộc Khố", "Tốt cho tài lộc, của cải"),),
    "Tuất": (Star("Thiên Giải", "Hóa giải tai ương"),),
    "Hợi": (Star("Nguyệt Đức", "Được quý nhân giúp đỡ"),),
}

BAD_STARS: Dict[str, Tuple[Star, ...]] = {
    "Tý": (Star("Thiên Lại", "Dễ vướng vào pháp luật"), Star("Đại Hao", "Tốn tiền, hao của")),
    "Sửu": (Star("Tiểu Hao", "Hao tài nhỏ"),),
    "Dần": (Star("Kiếp Sát", "Gặp chuyện không may"), Star("Câu Trận", "Gặp trở ngại, rắc rối")),
    "Mão": (Star("Thụ Tử", "Mọi việc đều xấu, tránh làm"),),
    "Thìn": (Star("Hoang Vu", "Công việc không thuận lợi"),),
    "Tỵ": (Star("Cô Thần", "Cảm thấy cô đơn, bất lợi"),),
    "Ngọ": (Star("Thiên Cương", "Dễ gặp tranh chấp, mâu thuẫn"),),
    "Mùi": (Star("Quả Tú", "Bất lợi cho tình duyên"),),
    "Thân": (Star("Bạch Hổ", "Đề phòng tai nạn, bệnh tật"),),
    "Dậu": (Star("Thiên Hỏa", "Đề phòng hỏa hoạn"),),
    "Tuất": (Star("Thổ Phủ", "Không tốt cho xây dựng, động thổ"),),
    "Hợi": (Star("Vãng Vong", "Dễ mất mát, thất lạc"),),
}


def good_hours(branch: str) -> Tuple[str, ...]:
    return HOANG_DAO_HOURS.get(branch, ())


def bad_hours(branch: str) -> Tuple[str, ...]:
    """Hắc Đạo hours: every period not in `good_hours`, canonical order."""
    good = set(good_hours(branch))
    return tuple(h for h in ALL_HOURS if h not in good)


def good_stars(branch: str) -> Tuple[Star, ...]:
    return GOOD_STARS.get(branch, ())


def bad_stars(branch: str) -> Tuple[Star, ...]:
    return BAD_STARS.get(branch, ())


def day_attributes(value: DateLike) -> DayAttributes:
    """Can-Chi, good/bad hours and good/bad stars of a civil day."""
    sb = day_stem_branch(to_jdn(vietnam_civil_date(value)))
    return DayAttributes(
        stem_branch=sb,
        good_hours=good_hours(sb.branch),
        bad_hours=bad_hours(sb.branch),
        good_stars=good_stars(sb.branch),
        bad_stars=bad_stars(sb.branch),
    )


def day_stem_branch_label(value: DateLike) -> str:
    """Header label such as 'Ngày Giáp Tý'."""
    sb = day_stem_branch(to_jdn(vietnam_civil_date(value)))
    return f"Ngày {sb.label()}"
