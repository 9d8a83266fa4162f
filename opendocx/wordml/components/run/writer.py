"""Text run Writer"""

from __future__ import annotations

from typing import Optional

from lxml import etree

from opendocx.wordml.base import XML_SPACE, qname, w_attr
from opendocx.wordml.coercers import BREAK_TYPE_VALUES, coerce_enum
from opendocx.wordml.components.run.formatter import RunFormatter
from opendocx.wordml.errors import InvalidPropertyValue
from opendocx.wordml.models import LineBreak, Text


class TextWriter:
    """Builds <w:r> elements for text and breaks"""

    def __init__(self, formatter: Optional[RunFormatter] = None):
        self.formatter = formatter or RunFormatter()

    def build_run(self, text: Text) -> etree._Element:
        """Text to w:r; newlines become w:br and tabs w:tab"""
        run = etree.Element(qname("w", "r"))
        self.formatter.format(text.properties, run)

        lines = text.text.split("\n")
        for idx, line in enumerate(lines):
            if idx > 0:
                etree.SubElement(run, qname("w", "br"))
            for pos, part in enumerate(line.split("\t")):
                if pos > 0:
                    etree.SubElement(run, qname("w", "tab"))
                if part:
                    self.append_text_to_run(run, part)
        return run

    def build_break(self, br: LineBreak) -> etree._Element:
        """LineBreak to w:r/w:br"""
        try:
            break_type = coerce_enum("type", br.break_type, BREAK_TYPE_VALUES)
        except InvalidPropertyValue as e:
            raise e.with_element("break") from None

        run = etree.Element(qname("w", "r"))
        self.formatter.format(br.properties, run)
        node = etree.SubElement(run, qname("w", "br"))
        if break_type != "textWrapping":
            node.set(w_attr("type"), break_type)
        return run

    def append_text_to_run(self, run: etree._Element, text: str) -> etree._Element:
        t = etree.Element(qname("w", "t"))
        try:
            t.text = text
        except ValueError:
            raise InvalidPropertyValue(
                "text", text, "Must not contain XML-incompatible control characters", element="run"
            ) from None
        if text != text.strip():
            t.set(XML_SPACE, "preserve")
        run.append(t)
        return t
