"""Property map registry

Maps public property names (and their aliases) to WordprocessingML names and
value kinds, per element kind. Static data, safe to share between threads.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Optional


class ValueKind(str, Enum):
    """Coercion routine selected for a property"""
    BOOL = "bool"
    DECIMAL = "decimal"
    TEXT = "text"
    ENUM = "enum"
    COLOR = "color"
    BORDER = "border"
    INDENT = "indent"
    SPACING = "spacing"
    TABS = "tabs"
    SHADING = "shading"
    RUN = "run"
    NUMBERING = "numbering"
    ALIGN = "align"
    TEXT_DIRECTION = "textdir"
    TEXT_WRAP = "textwrap"
    VALIGN = "valign"
    FONTS = "fonts"
    SIZE = "size"
    UNDERLINE = "underline"
    WIDTH = "width"
    MARGIN = "margin"
    LAYOUT = "layout"
    HEIGHT = "height"
    LOOK = "look"
    POSITION = "position"
    VMERGE = "vmerge"


# Shared by every element kind
SHARED_ALIASES: Dict[str, str] = {
    "align": "jc",
    "justify": "jc",
    "bgColor": "shd",
    "shading": "shd",
}

SHARED_MAP: Dict[str, ValueKind] = {
    "shd": ValueKind.SHADING,
}

PARAGRAPH_ALIASES = {
    "border": "pBdr",
    "indent": "ind",
    "outline": "outlineLvl",
    "style": "pStyle",
    "numbering": "numPr",
    "run": "rPr",
    "valign": "textAlignment",
}

PARAGRAPH_MAP = {
    "adjustRightInd": ValueKind.BOOL,
    "autoSpaceDE": ValueKind.BOOL,
    "autoSpaceDN": ValueKind.BOOL,
    "bidi": ValueKind.BOOL,
    "contextualSpacing": ValueKind.BOOL,
    "ind": ValueKind.INDENT,
    "jc": ValueKind.ALIGN,
    "keepLines": ValueKind.BOOL,
    "keepNext": ValueKind.BOOL,
    "kinsoku": ValueKind.BOOL,
    "mirrorIndents": ValueKind.BOOL,
    "numPr": ValueKind.NUMBERING,
    "outlineLvl": ValueKind.DECIMAL,
    "overflowPunct": ValueKind.BOOL,
    "pageBreakBefore": ValueKind.BOOL,
    "pBdr": ValueKind.BORDER,
    "pStyle": ValueKind.TEXT,
    "rPr": ValueKind.RUN,
    "shd": ValueKind.SHADING,
    "snapToGrid": ValueKind.BOOL,
    "spacing": ValueKind.SPACING,
    "suppressAutoHyphens": ValueKind.BOOL,
    "suppressLineNumbers": ValueKind.BOOL,
    "suppressOverlap": ValueKind.BOOL,
    "tabs": ValueKind.TABS,
    "textAlignment": ValueKind.VALIGN,
    "textboxTightWrap": ValueKind.TEXT_WRAP,
    "textDirection": ValueKind.TEXT_DIRECTION,
    "topLinePunct": ValueKind.BOOL,
    "widowControl": ValueKind.BOOL,
    "wordWrap": ValueKind.BOOL,
}

RUN_ALIASES = {
    "bold": "b",
    "italic": "i",
    "underline": "u",
    "strikethrough": "strike",
    "font": "rFonts",
    "fonts": "rFonts",
    "size": "sz",
    "style": "rStyle",
    "border": "bdr",
    "hidden": "vanish",
    "valign": "vertAlign",
    "language": "lang",
}

RUN_MAP = {
    "b": ValueKind.BOOL,
    "bCs": ValueKind.BOOL,
    "bdr": ValueKind.BORDER,
    "caps": ValueKind.BOOL,
    "color": ValueKind.COLOR,
    "cs": ValueKind.BOOL,
    "dstrike": ValueKind.BOOL,
    "emboss": ValueKind.BOOL,
    "highlight": ValueKind.ENUM,
    "i": ValueKind.BOOL,
    "iCs": ValueKind.BOOL,
    "imprint": ValueKind.BOOL,
    "kern": ValueKind.SIZE,
    "lang": ValueKind.TEXT,
    "noProof": ValueKind.BOOL,
    "outline": ValueKind.BOOL,
    "position": ValueKind.DECIMAL,
    "rFonts": ValueKind.FONTS,
    "rStyle": ValueKind.TEXT,
    "rtl": ValueKind.BOOL,
    "shadow": ValueKind.BOOL,
    "smallCaps": ValueKind.BOOL,
    "snapToGrid": ValueKind.BOOL,
    "spacing": ValueKind.DECIMAL,
    "specVanish": ValueKind.BOOL,
    "strike": ValueKind.BOOL,
    "sz": ValueKind.SIZE,
    "szCs": ValueKind.SIZE,
    "vanish": ValueKind.BOOL,
    "vertAlign": ValueKind.VALIGN,
    "w": ValueKind.DECIMAL,
    "webHidden": ValueKind.BOOL,
    "u": ValueKind.UNDERLINE,
}

TABLE_ALIASES = {
    "width": "tblW",
    "border": "tblBorders",
    "indent": "tblInd",
    "margin": "tblCellMar",
    "spacing": "tblCellSpacing",
    "layout": "tblLayout",
    "style": "tblStyle",
    "look": "tblLook",
    "position": "tblpPr",
    "overlap": "tblOverlap",
}

TABLE_MAP = {
    "bidiVisual": ValueKind.BOOL,
    "jc": ValueKind.ALIGN,
    "shd": ValueKind.SHADING,
    "tblBorders": ValueKind.BORDER,
    "tblCellMar": ValueKind.MARGIN,
    "tblCellSpacing": ValueKind.WIDTH,
    "tblInd": ValueKind.WIDTH,
    "tblLayout": ValueKind.LAYOUT,
    "tblLook": ValueKind.LOOK,
    "tblOverlap": ValueKind.ENUM,
    "tblpPr": ValueKind.POSITION,
    "tblStyle": ValueKind.TEXT,
    "tblStyleColBandSize": ValueKind.DECIMAL,
    "tblStyleRowBandSize": ValueKind.DECIMAL,
    "tblW": ValueKind.WIDTH,
}

ROW_ALIASES = {
    "skipBefore": "gridBefore",
    "skipAfter": "gridAfter",
    "height": "trHeight",
    "header": "tblHeader",
    "repeatHeader": "tblHeader",
    "keepTogether": "cantSplit",
}

ROW_MAP = {
    "cantSplit": ValueKind.BOOL,
    "gridAfter": ValueKind.DECIMAL,
    "gridBefore": ValueKind.DECIMAL,
    "hidden": ValueKind.BOOL,
    "jc": ValueKind.ALIGN,
    "tblCellSpacing": ValueKind.WIDTH,
    "tblHeader": ValueKind.BOOL,
    "trHeight": ValueKind.HEIGHT,
    "wAfter": ValueKind.WIDTH,
    "wBefore": ValueKind.WIDTH,
}

CELL_ALIASES = {
    "width": "tcW",
    "border": "tcBorders",
    "margin": "tcMar",
    "colspan": "gridSpan",
    "span": "gridSpan",
    "merge": "vMerge",
    "valign": "vAlign",
    "nowrap": "noWrap",
    "fit": "tcFitText",
}

CELL_MAP = {
    "gridSpan": ValueKind.DECIMAL,
    "hideMark": ValueKind.BOOL,
    "noWrap": ValueKind.BOOL,
    "shd": ValueKind.SHADING,
    "tcBorders": ValueKind.BORDER,
    "tcFitText": ValueKind.BOOL,
    "tcMar": ValueKind.MARGIN,
    "tcW": ValueKind.WIDTH,
    "textDirection": ValueKind.TEXT_DIRECTION,
    "vAlign": ValueKind.VALIGN,
    "vMerge": ValueKind.VMERGE,
}

_REGISTRY = {
    "paragraph": (PARAGRAPH_ALIASES, PARAGRAPH_MAP),
    "run": (RUN_ALIASES, RUN_MAP),
    "table": (TABLE_ALIASES, TABLE_MAP),
    "row": (ROW_ALIASES, ROW_MAP),
    "cell": (CELL_ALIASES, CELL_MAP),
}

ELEMENT_KINDS = tuple(_REGISTRY)


@lru_cache(maxsize=None)
def effective_aliases(element_kind: str) -> Mapping[str, str]:
    """Shared aliases overridden by the element kind's aliases"""
    aliases, _ = _REGISTRY[element_kind]
    merged = dict(SHARED_ALIASES)
    merged.update(aliases)
    return MappingProxyType(merged)


@lru_cache(maxsize=None)
def effective_map(element_kind: str) -> Mapping[str, ValueKind]:
    """Shared map overridden by the element kind's map"""
    _, kinds = _REGISTRY[element_kind]
    merged = dict(SHARED_MAP)
    merged.update(kinds)
    return MappingProxyType(merged)


def resolve_alias(element_kind: str, name: str) -> str:
    """Canonical name for a property (single hop)"""
    return effective_aliases(element_kind).get(name, name)


def lookup_kind(element_kind: str, canonical: str) -> Optional[ValueKind]:
    """Value kind for a canonical name, None when unrecognized"""
    return effective_map(element_kind).get(canonical)
