"""Shared property formatter"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from lxml import etree

from opendocx.wordml.base import on_off, qname, to_bool, w_attr
from opendocx.wordml.coercers import (
    ALIGN_SYNONYMS,
    ALIGN_VALUES,
    ENUM_VALUES,
    SHADING_PATTERN_VALUES,
    TEXT_DIRECTION_SYNONYMS,
    TEXT_DIRECTION_VALUES,
    coerce_color,
    coerce_decimal,
    coerce_enum,
    coerce_text,
    eighths,
)
from opendocx.wordml.errors import InvalidPropertyValue
from opendocx.wordml.properties import ValueKind, effective_map, resolve_alias

logger = logging.getLogger(__name__)

Handler = Callable[[str, Any, etree._Element], None]

BORDER_ATTRS = (
    "val", "color", "themeColor", "themeTint", "themeShade",
    "sz", "space", "shadow", "frame",
)

SHADING_ATTRS = (
    "val", "color", "fill", "themeColor", "themeTint", "themeShade",
    "themeFill", "themeFillTint", "themeFillShade",
)


class PropertyFormatter:
    """Builds the property container of one element kind

    Subclasses name their element kind and container tag and may extend
    the kind handler table. Handlers are bound once per instance.
    """

    element_kind = ""
    container = ""
    border_sides: Tuple[str, ...] = ("top", "right", "bottom", "left")
    valign_values: Tuple[str, ...] = ()
    valign_synonyms: Dict[str, str] = {}

    def __init__(self):
        kind_handlers = self.kind_handlers()
        self._handlers: Dict[str, Handler] = {
            canonical: kind_handlers[kind]
            for canonical, kind in effective_map(self.element_kind).items()
        }

    def kind_handlers(self) -> Dict[ValueKind, Handler]:
        """Value kind -> handler"""
        return {
            ValueKind.BOOL: self.process_bool,
            ValueKind.DECIMAL: self.process_decimal,
            ValueKind.TEXT: self.process_text,
            ValueKind.ENUM: self.process_enum,
            ValueKind.COLOR: self.process_color,
            ValueKind.ALIGN: self.process_align,
            ValueKind.BORDER: self.process_border,
            ValueKind.SHADING: self.process_shading,
            ValueKind.TEXT_DIRECTION: self.process_textdir,
            ValueKind.VALIGN: self.process_valign,
        }

    def handler_for(self, name: str) -> Optional[Handler]:
        """Handler for a public or canonical property name"""
        return self._handlers.get(resolve_alias(self.element_kind, name))

    def format(self, properties: Optional[Mapping[str, Any]], parent: etree._Element) -> Optional[etree._Element]:
        """Append the property container to parent

        Returns the container, or None when no property produced markup.
        Unknown properties are skipped; the first invalid one raises.
        """
        if not properties:
            return None

        root = etree.Element(qname("w", self.container))
        for name, value in properties.items():
            canonical = resolve_alias(self.element_kind, name)
            handler = self._handlers.get(canonical)
            if handler is None:
                logger.debug("Skipping unknown %s property %r", self.element_kind, name)
                continue
            try:
                handler(canonical, value, root)
            except InvalidPropertyValue as e:
                if e.element is None:
                    raise e.with_element(self.element_kind) from None
                raise

        if len(root) == 0:
            return None
        parent.append(root)
        return root

    # Simple values

    def append_simple_value(self, root: etree._Element, name: str, value: Any) -> etree._Element:
        """Append <w:name w:val="value"/>"""
        node = etree.SubElement(root, qname("w", name))
        node.set(w_attr("val"), str(value))
        return node

    def process_bool(self, name: str, val: Any, root: etree._Element) -> None:
        node = etree.SubElement(root, qname("w", name))
        if not to_bool(val):
            node.set(w_attr("val"), "off")

    def process_decimal(self, name: str, val: Any, root: etree._Element) -> None:
        self.append_simple_value(root, name, coerce_decimal(name, val))

    def process_text(self, name: str, val: Any, root: etree._Element) -> None:
        self.append_simple_value(root, name, coerce_text(name, val))

    def process_enum(self, name: str, val: Any, root: etree._Element) -> None:
        self.append_simple_value(root, name, coerce_enum(name, val, ENUM_VALUES[name]))

    def process_color(self, name: str, val: Any, root: etree._Element) -> None:
        self.append_simple_value(root, name, coerce_color(name, val))

    def process_align(self, name: str, val: Any, root: etree._Element) -> None:
        self.append_simple_value(root, name, coerce_enum(name, val, ALIGN_VALUES, ALIGN_SYNONYMS))

    def process_textdir(self, name: str, val: Any, root: etree._Element) -> None:
        value = coerce_enum(name, val, TEXT_DIRECTION_VALUES, TEXT_DIRECTION_SYNONYMS)
        self.append_simple_value(root, name, value)

    def process_valign(self, name: str, val: Any, root: etree._Element) -> None:
        value = coerce_enum(name, val, self.valign_values, self.valign_synonyms)
        self.append_simple_value(root, name, value)

    # Composite values

    def process_border(self, name: str, val: Any, root: etree._Element) -> None:
        """Border group: one child per side

        A scalar applies to every side of this element kind. A mapping keeps
        the caller's side order; unknown sides are dropped.
        """
        prop = etree.SubElement(root, qname("w", name))

        if not isinstance(val, dict):
            val = {side: val for side in self.border_sides}

        for side, bdr in val.items():
            if side not in self.border_sides:
                continue
            node = etree.SubElement(prop, qname("w", side))
            self.set_border_attrs(node, f"{name}.{side}", bdr)

        if len(prop) == 0:
            root.remove(prop)

    def set_border_attrs(self, node: etree._Element, name: str, bdr: Any) -> None:
        """Border attributes on a single border node"""
        if not isinstance(bdr, dict):
            bdr = {"sz": bdr}

        # WordML requires the 'val' attribute to be present
        if "val" not in bdr:
            bdr = {"val": "single", **bdr}

        for k, v in bdr.items():
            if k not in BORDER_ATTRS:
                continue
            if k == "sz":
                v = eighths(f"{name}.{k}", v)   # Eighths of a point
            elif k in ("shadow", "frame"):
                v = on_off(v)
            elif k == "space":
                v = coerce_decimal(f"{name}.{k}", v)
            elif k == "color":
                v = coerce_color(f"{name}.{k}", v)
            else:
                v = coerce_text(f"{name}.{k}", v)
            node.set(w_attr(k), str(v))

    def process_shading(self, name: str, val: Any, root: etree._Element) -> None:
        """Shading; a scalar is the fill color"""
        if not isinstance(val, dict):
            val = {"fill": val}
        if "val" not in val:
            val = {"val": "clear", **val}

        node = etree.SubElement(root, qname("w", name))
        for k, v in val.items():
            if k not in SHADING_ATTRS:
                continue
            if k == "val":
                v = coerce_enum(f"{name}.{k}", v, SHADING_PATTERN_VALUES)
            elif k in ("color", "fill"):
                v = coerce_color(f"{name}.{k}", v)
            else:
                v = coerce_text(f"{name}.{k}", v)
            node.set(w_attr(k), v)
