"""Value coercers

Turn raw property values into validated primitives. Each coercer raises
InvalidPropertyValue; the element formatters attach the element kind.
"""

from __future__ import annotations

import math
import re
from numbers import Real
from typing import Any, Callable, Dict, Iterable, Optional

from opendocx.wordml.base import (
    inch_to_twip,
    pt_to_eighths,
    pt_to_half_points,
    pt_to_twip,
)
from opendocx.wordml.errors import InvalidPropertyValue, InvalidUnit


# Enumerated value sets
ALIGN_VALUES = (
    "both", "left", "right", "center", "start", "end", "distribute",
    "highKashida", "lowKashida", "mediumKashida", "thaiDistribute",
)
ALIGN_SYNONYMS = {"justify": "both"}

TABLE_LAYOUT_VALUES = ("autofit", "fixed")
TABLE_LAYOUT_SYNONYMS = {"auto": "autofit"}

TEXT_DIRECTION_VALUES = ("lrTb", "tbRl", "btLr", "lrTbV", "tbRlV", "tbLrV")
TEXT_DIRECTION_SYNONYMS = {"ltr": "lrTb", "horizontal": "lrTb", "vertical": "tbRl"}

TEXT_WRAP_VALUES = ("none", "allLines", "firstAndLastLine", "firstLineOnly", "lastLineOnly")

TEXT_ALIGNMENT_VALUES = ("top", "center", "baseline", "bottom", "auto")
CELL_VALIGN_VALUES = ("top", "center", "bottom", "both")
VERT_ALIGN_VALUES = ("baseline", "superscript", "subscript")
VERT_ALIGN_SYNONYMS = {"super": "superscript", "sub": "subscript"}

LINE_RULE_VALUES = ("auto", "exact", "atLeast")
BREAK_TYPE_VALUES = ("textWrapping", "page", "column")
TAB_VALUES = ("left", "right", "center", "decimal", "bar", "clear", "num", "start", "end")
TAB_LEADER_VALUES = ("none", "dot", "hyphen", "underscore", "heavy", "middleDot")

HEIGHT_RULE_VALUES = ("auto", "exact", "atLeast")
WIDTH_TYPE_VALUES = ("auto", "dxa", "nil", "pct")
VMERGE_VALUES = ("restart", "continue")
TABLE_OVERLAP_VALUES = ("never", "overlap")

HIGHLIGHT_VALUES = (
    "black", "blue", "cyan", "green", "magenta", "red", "yellow", "white",
    "darkBlue", "darkCyan", "darkGreen", "darkMagenta", "darkRed",
    "darkYellow", "darkGray", "lightGray", "none",
)

UNDERLINE_VALUES = (
    "single", "words", "double", "thick", "dotted", "dottedHeavy", "dash",
    "dashedHeavy", "dashLong", "dashLongHeavy", "dotDash", "dashDotHeavy",
    "dotDotDash", "dashDotDotHeavy", "wave", "wavyHeavy", "wavyDouble", "none",
)

SHADING_PATTERN_VALUES = (
    "nil", "clear", "solid", "horzStripe", "vertStripe", "reverseDiagStripe",
    "diagStripe", "horzCross", "diagCross", "thinHorzStripe", "thinVertStripe",
    "thinReverseDiagStripe", "thinDiagStripe", "thinHorzCross", "thinDiagCross",
    "pct5", "pct10", "pct12", "pct15", "pct20", "pct25", "pct30", "pct35",
    "pct37", "pct40", "pct45", "pct50", "pct55", "pct60", "pct62", "pct65",
    "pct70", "pct75", "pct80", "pct85", "pct87", "pct90", "pct95",
)

ANCHOR_VALUES = ("text", "margin", "page")
X_ALIGN_VALUES = ("left", "center", "right", "inside", "outside")
Y_ALIGN_VALUES = ("inline", "top", "center", "bottom", "inside", "outside")

# Per-property enums for the generic enum kind
ENUM_VALUES: Dict[str, Iterable[str]] = {
    "highlight": HIGHLIGHT_VALUES,
    "tblOverlap": TABLE_OVERLAP_VALUES,
}

_HEX_COLOR = re.compile(r"^[0-9A-Fa-f]{6}$")


def coerce_enum(
    name: str,
    value: Any,
    valid: Iterable[str],
    synonyms: Optional[Dict[str, str]] = None,
) -> str:
    """Normalize synonyms and validate membership"""
    valid = tuple(valid)
    if isinstance(value, str) and synonyms and value in synonyms:
        value = synonyms[value]
    if not isinstance(value, str) or value not in valid:
        raise InvalidPropertyValue(name, value, "Must be one of: " + ",".join(valid))
    return value


def coerce_decimal(name: str, value: Any) -> int:
    """Integral value"""
    if isinstance(value, bool):
        raise InvalidPropertyValue(name, value, "Must be a number")
    if isinstance(value, Real):
        if not math.isfinite(value) or value != int(value):
            raise InvalidPropertyValue(name, value, "Must be a whole number")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InvalidPropertyValue(name, value, "Must be a whole number")


def coerce_text(name: str, value: Any) -> str:
    if value is None or isinstance(value, (dict, list, tuple)):
        raise InvalidPropertyValue(name, value, "Must be a string")
    return str(value)


def coerce_color(name: str, value: Any) -> str:
    """'auto' or RRGGBB, optional leading '#'"""
    if isinstance(value, str):
        if value == "auto":
            return value
        hex_value = value[1:] if value.startswith("#") else value
        if _HEX_COLOR.match(hex_value):
            return hex_value.upper()
    raise InvalidPropertyValue(name, value, "Must be 'auto' or a hex color (RRGGBB)")


def _measure(converter: Callable[..., int], name: str, value: Any, **kwargs: Any) -> int:
    try:
        return converter(value, **kwargs)
    except InvalidUnit as e:
        raise InvalidPropertyValue(name, value, str(e))


def twips(name: str, value: Any, allow_negative: bool = True) -> int:
    """Inches to twips"""
    return _measure(inch_to_twip, name, value, allow_negative=allow_negative)


def pt_twips(name: str, value: Any, allow_negative: bool = True) -> int:
    """Points to twips"""
    return _measure(pt_to_twip, name, value, allow_negative=allow_negative)


def eighths(name: str, value: Any) -> int:
    """Points to eighths of a point"""
    return _measure(pt_to_eighths, name, value)


def half_points(name: str, value: Any) -> int:
    """Points to half-points"""
    return _measure(pt_to_half_points, name, value)


def as_mapping(name: str, value: Any) -> Dict[str, Any]:
    """Require a mapping value"""
    if not isinstance(value, dict):
        raise InvalidPropertyValue(name, value, "Must be a mapping")
    return value
