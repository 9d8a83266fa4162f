"""Table property formatters <w:tblPr>, <w:trPr>, <w:tcPr>"""

from __future__ import annotations

from typing import Any, Tuple

from lxml import etree

from opendocx.wordml.base import qname, to_bool, w_attr
from opendocx.wordml.coercers import (
    ANCHOR_VALUES,
    CELL_VALIGN_VALUES,
    HEIGHT_RULE_VALUES,
    TABLE_LAYOUT_SYNONYMS,
    TABLE_LAYOUT_VALUES,
    VMERGE_VALUES,
    WIDTH_TYPE_VALUES,
    X_ALIGN_VALUES,
    Y_ALIGN_VALUES,
    as_mapping,
    coerce_decimal,
    coerce_enum,
    coerce_text,
    twips,
)
from opendocx.wordml.components.shared.formatter import PropertyFormatter
from opendocx.wordml.errors import InvalidPropertyValue
from opendocx.wordml.properties import ValueKind

MARGIN_SIDES = ("top", "left", "start", "bottom", "right", "end")

LOOK_FLAGS = ("firstRow", "lastRow", "firstColumn", "lastColumn", "noHBand", "noVBand")

POSITION_DISTANCES = ("leftFromText", "rightFromText", "topFromText", "bottomFromText", "tblpX", "tblpY")
POSITION_ENUMS = {
    "horzAnchor": ANCHOR_VALUES,
    "vertAnchor": ANCHOR_VALUES,
    "tblpXSpec": X_ALIGN_VALUES,
    "tblpYSpec": Y_ALIGN_VALUES,
}

# Percentages are expressed in fiftieths of a percent
PCT_UNITS = 50

# Widths that may legitimately be negative
SIGNED_WIDTHS = ("tblInd",)


class TablePartFormatter(PropertyFormatter):
    """Handlers shared by table, row and cell properties"""

    def kind_handlers(self):
        handlers = super().kind_handlers()
        handlers.update({
            ValueKind.WIDTH: self.process_width,
            ValueKind.MARGIN: self.process_margin,
        })
        return handlers

    def process_width(self, name: str, val: Any, root: etree._Element) -> None:
        """Width in inches, "NN%" or "auto"; mappings pass w/type through"""
        width, width_type = self._width(name, val)
        node = etree.SubElement(root, qname("w", name))
        node.set(w_attr("w"), str(width))
        node.set(w_attr("type"), width_type)

    def _width(self, name: str, val: Any) -> Tuple[int, str]:
        if isinstance(val, dict):
            width_type = coerce_enum(f"{name}.type", val.get("type", "dxa"), WIDTH_TYPE_VALUES)
            return coerce_decimal(f"{name}.w", val.get("w", 0)), width_type

        if isinstance(val, str):
            text = val.strip()
            if text == "auto":
                return 0, "auto"
            if text.endswith("%"):
                try:
                    percent = float(text[:-1])
                except ValueError:
                    raise InvalidPropertyValue(name, val, "Invalid percentage")
                if percent < 0:
                    raise InvalidPropertyValue(name, val, "Percentage must not be negative")
                return int(round(percent * PCT_UNITS)), "pct"

        return twips(name, val, allow_negative=name in SIGNED_WIDTHS), "dxa"

    def process_margin(self, name: str, val: Any, root: etree._Element) -> None:
        """Cell margins in inches; a scalar applies to all four sides"""
        if not isinstance(val, dict):
            val = {"top": val, "left": val, "bottom": val, "right": val}

        prop = etree.SubElement(root, qname("w", name))
        for side, distance in val.items():
            if side not in MARGIN_SIDES:
                continue
            node = etree.SubElement(prop, qname("w", side))
            node.set(w_attr("w"), str(twips(f"{name}.{side}", distance, allow_negative=False)))
            node.set(w_attr("type"), "dxa")


class TableFormatter(TablePartFormatter):
    """Creates properties for Table <w:tbl>"""

    element_kind = "table"
    container = "tblPr"
    border_sides = ("top", "right", "bottom", "left", "insideH", "insideV")

    def kind_handlers(self):
        handlers = super().kind_handlers()
        handlers.update({
            ValueKind.LAYOUT: self.process_layout,
            ValueKind.LOOK: self.process_look,
            ValueKind.POSITION: self.process_position,
        })
        return handlers

    def process_layout(self, name: str, val: Any, root: etree._Element) -> None:
        value = coerce_enum(name, val, TABLE_LAYOUT_VALUES, TABLE_LAYOUT_SYNONYMS)
        prop = etree.SubElement(root, qname("w", name))
        prop.set(w_attr("type"), value)

    def process_look(self, name: str, val: Any, root: etree._Element) -> None:
        """Conditional formatting flags, or a raw hex bitmask"""
        prop = etree.SubElement(root, qname("w", name))
        if not isinstance(val, dict):
            prop.set(w_attr("val"), coerce_text(name, val))
            return
        for flag, enabled in val.items():
            if flag in LOOK_FLAGS:
                prop.set(w_attr(flag), "1" if to_bool(enabled) else "0")

    def process_position(self, name: str, val: Any, root: etree._Element) -> None:
        """Floating table position"""
        val = as_mapping(name, val)
        prop = etree.SubElement(root, qname("w", name))
        for k, v in val.items():
            if k in POSITION_DISTANCES:
                prop.set(w_attr(k), str(twips(f"{name}.{k}", v)))
            elif k in POSITION_ENUMS:
                prop.set(w_attr(k), coerce_enum(f"{name}.{k}", v, POSITION_ENUMS[k]))


class RowFormatter(TablePartFormatter):
    """Creates properties for table rows <w:tr>"""

    element_kind = "row"
    container = "trPr"

    def kind_handlers(self):
        handlers = super().kind_handlers()
        handlers[ValueKind.HEIGHT] = self.process_height
        return handlers

    def process_height(self, name: str, val: Any, root: etree._Element) -> None:
        """Row height in inches, at least that tall unless hRule says otherwise"""
        if not isinstance(val, dict):
            val = {"val": val}

        if "val" not in val:
            raise InvalidPropertyValue(name, val, "Row height requires 'val'")
        rule = coerce_enum(f"{name}.hRule", val.get("hRule", "atLeast"), HEIGHT_RULE_VALUES)

        prop = etree.SubElement(root, qname("w", name))
        prop.set(w_attr("val"), str(twips(f"{name}.val", val["val"], allow_negative=False)))
        prop.set(w_attr("hRule"), rule)


class CellFormatter(TablePartFormatter):
    """Creates properties for table cells <w:tc>"""

    element_kind = "cell"
    container = "tcPr"
    border_sides = ("top", "left", "start", "bottom", "right", "end",
                    "insideH", "insideV", "tl2br", "tr2bl")
    valign_values = CELL_VALIGN_VALUES

    def kind_handlers(self):
        handlers = super().kind_handlers()
        handlers[ValueKind.VMERGE] = self.process_vmerge
        return handlers

    def process_border(self, name: str, val: Any, root: etree._Element) -> None:
        # a scalar spreads to the outer edges and inner lines only
        if not isinstance(val, dict):
            val = {side: val for side in ("top", "left", "bottom", "right", "insideH", "insideV")}
        super().process_border(name, val, root)

    def process_vmerge(self, name: str, val: Any, root: etree._Element) -> None:
        """Vertical merge; True continues the merge started above"""
        if val is True:
            val = "continue"
        self.append_simple_value(root, name, coerce_enum(name, val, VMERGE_VALUES))
