"""Run property formatter <w:rPr>"""

from __future__ import annotations

from typing import Any

from lxml import etree

from opendocx.wordml.base import qname, to_bool, w_attr
from opendocx.wordml.coercers import (
    UNDERLINE_VALUES,
    VERT_ALIGN_SYNONYMS,
    VERT_ALIGN_VALUES,
    coerce_color,
    coerce_enum,
    coerce_text,
    half_points,
)
from opendocx.wordml.components.shared.formatter import PropertyFormatter
from opendocx.wordml.properties import ValueKind

FONT_ATTRS = ("ascii", "hAnsi", "eastAsia", "cs", "hint",
              "asciiTheme", "hAnsiTheme", "eastAsiaTheme", "cstheme")


class RunFormatter(PropertyFormatter):
    """Creates properties for runs <w:r>"""

    element_kind = "run"
    container = "rPr"
    valign_values = VERT_ALIGN_VALUES
    valign_synonyms = VERT_ALIGN_SYNONYMS

    def kind_handlers(self):
        handlers = super().kind_handlers()
        handlers.update({
            ValueKind.FONTS: self.process_fonts,
            ValueKind.SIZE: self.process_size,
            ValueKind.UNDERLINE: self.process_underline,
        })
        return handlers

    def process_border(self, name: str, val: Any, root: etree._Element) -> None:
        """Runs take a single border, not a side group"""
        node = etree.SubElement(root, qname("w", name))
        self.set_border_attrs(node, name, val)

    def process_fonts(self, name: str, val: Any, root: etree._Element) -> None:
        """A single font name applies to every script"""
        if not isinstance(val, dict):
            face = coerce_text(name, val)
            val = {"ascii": face, "hAnsi": face, "eastAsia": face, "cs": face}

        node = etree.SubElement(root, qname("w", name))
        for k, v in val.items():
            if k in FONT_ATTRS:
                node.set(w_attr(k), coerce_text(f"{name}.{k}", v))

    def process_size(self, name: str, val: Any, root: etree._Element) -> None:
        """Points to half-points"""
        self.append_simple_value(root, name, half_points(name, val))

    def process_underline(self, name: str, val: Any, root: etree._Element) -> None:
        if isinstance(val, bool):
            val = "single" if val else "none"
        elif isinstance(val, dict):
            style = coerce_enum(name, val.get("val", "single"), UNDERLINE_VALUES)
            node = self.append_simple_value(root, name, style)
            if "color" in val:
                node.set(w_attr("color"), coerce_color(f"{name}.color", val["color"]))
            return
        elif not isinstance(val, str):
            val = "single" if to_bool(val) else "none"
        self.append_simple_value(root, name, coerce_enum(name, val, UNDERLINE_VALUES))
