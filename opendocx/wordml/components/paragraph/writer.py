"""Paragraph Writer"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from lxml import etree

from opendocx.wordml.base import qname
from opendocx.wordml.components.image.writer import ImageWriter
from opendocx.wordml.components.paragraph.formatter import ParagraphFormatter
from opendocx.wordml.components.run.writer import TextWriter
from opendocx.wordml.models import Element, Image, LineBreak, Paragraph, Text

if TYPE_CHECKING:
    from opendocx.wordml.writer import WordmlIdContext


class ParagraphWriter:
    """Builds <w:p> elements"""

    def __init__(
        self,
        formatter: Optional[ParagraphFormatter] = None,
        text_writer: Optional[TextWriter] = None,
        image_writer: Optional[ImageWriter] = None,
    ):
        self.formatter = formatter or ParagraphFormatter()
        self.text_writer = text_writer or TextWriter(self.formatter.run_formatter)
        self.image_writer = image_writer or ImageWriter()

    def build(self, para: Paragraph, context: "WordmlIdContext") -> etree._Element:
        """Paragraph to w:p"""
        return self.build_inline(para.elements, context, para.properties)

    def build_inline(
        self,
        elements: Iterable[Element],
        context: "WordmlIdContext",
        properties: Optional[dict] = None,
    ) -> etree._Element:
        """w:p holding inline elements"""
        p = etree.Element(qname("w", "p"))
        self.formatter.format(properties, p)

        for inline in elements:
            p.append(self.build_run(inline, context))
        return p

    def build_run(self, inline: Element, context: "WordmlIdContext") -> etree._Element:
        if isinstance(inline, Text):
            return self.text_writer.build_run(inline)
        if isinstance(inline, LineBreak):
            return self.text_writer.build_break(inline)
        if isinstance(inline, Image):
            return self.image_writer.build(inline, context)
        raise ValueError(f"Unsupported inline: {type(inline)}")
