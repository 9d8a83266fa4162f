"""WordprocessingML namespaces and unit conversion"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

from lxml import etree

from opendocx.wordml.errors import InvalidUnit


# WordprocessingML namespaces
NS = {
    "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
    "wp": "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing",
    "a": "http://schemas.openxmlformats.org/drawingml/2006/main",
    "pic": "http://schemas.openxmlformats.org/drawingml/2006/picture",
}

XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"


def qname(prefix: str, local: str) -> etree.QName:
    """Namespaced QName"""
    return etree.QName(NS[prefix], local)


def attr(prefix: str, local: str) -> str:
    """Namespaced attribute name in Clark notation"""
    return f"{{{NS[prefix]}}}{local}"


def w_attr(local: str) -> str:
    return attr("w", local)


def is_tag(elem: etree._Element, prefix: str, local: str) -> bool:
    """Check an element's tag"""
    return elem.tag == f"{{{NS[prefix]}}}{local}"


def on_off(value: Any) -> str:
    """Boolean to the ST_OnOff token"""
    return "on" if to_bool(value) else "off"


def to_bool(value: Any) -> bool:
    """Loose truthiness; common "false" spellings count as false"""
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false", "off", "no", "none")
    return bool(value)


# Unit conversion constants
TWIPS_PER_INCH = 1440
TWIPS_PER_PT = 20
EIGHTHS_PER_POINT = 8
HALF_POINTS_PER_PT = 2
EMU_PER_INCH = 914400
EMU_PER_PIXEL = 9525  # 96 dpi


def _number(value: Any, allow_negative: bool = True) -> float:
    if isinstance(value, bool) or not isinstance(value, (Real, str)):
        raise InvalidUnit(value)
    try:
        number = float(value)
    except ValueError:
        raise InvalidUnit(value)
    if not math.isfinite(number):
        raise InvalidUnit(value)
    if number < 0 and not allow_negative:
        raise InvalidUnit(value, "must not be negative")
    return number


def inch_to_twip(value: Any, allow_negative: bool = True) -> int:
    """Inches to twips (1/1440 inch)"""
    return int(round(_number(value, allow_negative) * TWIPS_PER_INCH))


def pt_to_twip(value: Any, allow_negative: bool = True) -> int:
    """Points to twips (1/20 pt)"""
    return int(round(_number(value, allow_negative) * TWIPS_PER_PT))


def pt_to_eighths(value: Any) -> int:
    """Points to eighths of a point (border widths)"""
    return int(round(_number(value, allow_negative=False) * EIGHTHS_PER_POINT))


def pt_to_half_points(value: Any) -> int:
    """Points to half-points (font sizes)"""
    return int(round(_number(value, allow_negative=False) * HALF_POINTS_PER_PT))


def inch_to_emu(value: Any) -> int:
    """Inches to English Metric Units"""
    return int(round(_number(value, allow_negative=False) * EMU_PER_INCH))


def px_to_emu(value: Any) -> int:
    """Pixels (96 dpi) to English Metric Units"""
    return int(round(_number(value, allow_negative=False) * EMU_PER_PIXEL))
