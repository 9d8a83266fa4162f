"""Paragraph property formatter <w:pPr>"""

from __future__ import annotations

from typing import Any, Optional

from lxml import etree

from opendocx.wordml.base import on_off, qname, w_attr
from opendocx.wordml.coercers import (
    LINE_RULE_VALUES,
    TAB_LEADER_VALUES,
    TAB_VALUES,
    TEXT_ALIGNMENT_VALUES,
    TEXT_WRAP_VALUES,
    as_mapping,
    coerce_decimal,
    coerce_enum,
    pt_twips,
    twips,
)
from opendocx.wordml.components.run.formatter import RunFormatter
from opendocx.wordml.components.shared.formatter import PropertyFormatter
from opendocx.wordml.errors import InvalidPropertyValue
from opendocx.wordml.properties import ValueKind

INDENT_SIDES = ("left", "right", "start", "end", "hanging", "firstLine")

# Line spacing multiples are expressed in 240ths of a line
LINE_UNITS = 240


class ParagraphFormatter(PropertyFormatter):
    """Creates properties for paragraphs <w:p>"""

    element_kind = "paragraph"
    container = "pPr"
    border_sides = ("top", "right", "bottom", "left", "between", "bar")
    valign_values = TEXT_ALIGNMENT_VALUES

    def __init__(self, run_formatter: Optional[RunFormatter] = None):
        self.run_formatter = run_formatter or RunFormatter()
        super().__init__()

    def kind_handlers(self):
        handlers = super().kind_handlers()
        handlers.update({
            ValueKind.INDENT: self.process_indent,
            ValueKind.SPACING: self.process_spacing,
            ValueKind.TABS: self.process_tabs,
            ValueKind.NUMBERING: self.process_numbering,
            ValueKind.RUN: self.process_run,
            ValueKind.TEXT_WRAP: self.process_textwrap,
        })
        return handlers

    def process_indent(self, name: str, val: Any, root: etree._Element) -> None:
        """Indentation in inches; a scalar sets left and right"""
        if not isinstance(val, dict):
            val = {"left": val, "right": val}

        prop = etree.SubElement(root, qname("w", name))
        for k, v in val.items():
            if k not in INDENT_SIDES:
                continue
            prop.set(w_attr(k), str(twips(f"{name}.{k}", v)))

    def process_spacing(self, name: str, val: Any, root: etree._Element) -> None:
        """Spacing; before/after in points, a scalar is a line multiple"""
        if not isinstance(val, dict):
            val = {"line": val, "lineRule": "auto"}

        rule = coerce_enum(f"{name}.lineRule", val.get("lineRule", "auto"), LINE_RULE_VALUES)

        prop = etree.SubElement(root, qname("w", name))
        for k, v in val.items():
            if k in ("before", "after"):
                v = pt_twips(f"{name}.{k}", v, allow_negative=False)
            elif k == "line":
                if rule == "auto":
                    v = self._line_multiple(f"{name}.{k}", v)
                else:
                    v = pt_twips(f"{name}.{k}", v, allow_negative=False)
            elif k == "lineRule":
                v = rule
            elif k in ("beforeAutospacing", "afterAutospacing"):
                v = on_off(v)
            elif k in ("beforeLines", "afterLines"):
                v = coerce_decimal(f"{name}.{k}", v)
            else:
                continue
            prop.set(w_attr(k), str(v))

    def _line_multiple(self, name: str, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise InvalidPropertyValue(name, value, "Must be a positive line multiple")
        return int(round(value * LINE_UNITS))

    def process_tabs(self, name: str, val: Any, root: etree._Element) -> None:
        """Tab stops; a scalar stop is a left tab at that position"""
        if not isinstance(val, (list, tuple)):
            val = [val]

        prop = etree.SubElement(root, qname("w", name))
        for stop in val:
            if not isinstance(stop, dict):
                stop = {"pos": stop}
            if "pos" not in stop:
                raise InvalidPropertyValue(name, stop, "Tab stop requires a position")

            kind = stop.get("val", stop.get("align", "left"))
            tab = etree.SubElement(prop, qname("w", "tab"))
            tab.set(w_attr("val"), coerce_enum(f"{name}.val", kind, TAB_VALUES))
            if "leader" in stop:
                tab.set(w_attr("leader"), coerce_enum(f"{name}.leader", stop["leader"], TAB_LEADER_VALUES))
            tab.set(w_attr("pos"), str(twips(f"{name}.pos", stop["pos"])))

    def process_numbering(self, name: str, val: Any, root: etree._Element) -> None:
        """List numbering reference; a scalar is the numbering id"""
        if not isinstance(val, dict):
            val = {"numId": val}

        num_id = val.get("numId", val.get("id"))
        if num_id is None:
            raise InvalidPropertyValue(name, val, "Numbering requires 'numId'")
        level = val.get("ilvl", val.get("level", 0))

        prop = etree.SubElement(root, qname("w", name))
        self.append_simple_value(prop, "ilvl", coerce_decimal(f"{name}.ilvl", level))
        self.append_simple_value(prop, "numId", coerce_decimal(f"{name}.numId", num_id))

    def process_run(self, name: str, val: Any, root: etree._Element) -> None:
        """Paragraph mark run properties"""
        self.run_formatter.format(as_mapping(name, val), root)

    def process_textwrap(self, name: str, val: Any, root: etree._Element) -> None:
        self.append_simple_value(root, name, coerce_enum(name, val, TEXT_WRAP_VALUES))
