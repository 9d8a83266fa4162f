"""WordprocessingML Writer

Serializes the document model into w:document markup. Each component
writer handles one element kind; this module walks the tree and combines
them.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Union

from lxml import etree

from opendocx.wordml.base import NS, qname, w_attr
from opendocx.wordml.coercers import twips
from opendocx.wordml.components import (
    ImageWriter,
    ParagraphFormatter,
    ParagraphWriter,
    RunFormatter,
    StyleWriter,
    TableFormatter,
    TableWriter,
    TextWriter,
)
from opendocx.wordml.errors import InvalidPropertyValue
from opendocx.wordml.models import (
    Document,
    Element,
    Image,
    Paragraph,
    Section,
    Style,
    Table,
)

logger = logging.getLogger(__name__)

PAGE_ORIENTATIONS = ("portrait", "landscape")
PAGE_MARGINS = ("top", "right", "bottom", "left", "header", "footer", "gutter")


class WordmlIdContext:
    """Per-pass ids for drawings and image relationships"""

    def __init__(self):
        self.drawing_id = 1
        self.media: Dict[str, Union[str, object]] = {}

    def next_drawing_id(self) -> int:
        did = self.drawing_id
        self.drawing_id += 1
        return did

    def add_media(self, image: Image) -> str:
        """Relationship id for an image source"""
        rel_id = f"rIdImg{len(self.media) + 1}"
        self.media[rel_id] = image.source
        return rel_id


class DocumentWriter:
    """Serializes a Document (or any element) to WordprocessingML"""

    def __init__(self, pretty_print: bool = False):
        self.pretty_print = pretty_print
        self.media: Dict[str, Union[str, object]] = {}

        run_formatter = RunFormatter()
        paragraph_formatter = ParagraphFormatter(run_formatter)
        table_formatter = TableFormatter()

        self._paragraph_writer = ParagraphWriter(
            paragraph_formatter,
            TextWriter(run_formatter),
            ImageWriter(),
        )
        self._table_writer = TableWriter(self.build_blocks, table_formatter)
        self._style_writer = StyleWriter(paragraph_formatter, run_formatter, table_formatter)

    def build(self, document: Document) -> etree._Element:
        """Document to a w:document root

        The first invalid property aborts the whole pass.
        """
        self.media = {}
        context = WordmlIdContext()
        root = etree.Element(qname("w", "document"), nsmap=NS)
        body = etree.SubElement(root, qname("w", "body"))

        for el in self.build_blocks(document.elements, context):
            body.append(el)

        if document.section is not None:
            body.append(self.build_section(document.section))

        self.media = dict(context.media)
        logger.debug("Serialized %d blocks, %d images", len(body), len(self.media))
        return root

    def serialize(self, element: Union[Document, Element]) -> etree._Element:
        """Markup for a document or a single element"""
        if isinstance(element, Document):
            return self.build(element)

        self.media = {}
        context = WordmlIdContext()
        if isinstance(element, Paragraph):
            node = self._paragraph_writer.build(element, context)
        elif isinstance(element, Table):
            node = self._table_writer.build(element, context)
        else:
            node = self._paragraph_writer.build_run(element, context)
        self.media = dict(context.media)
        return node

    def write(self, document: Document) -> bytes:
        """document.xml bytes"""
        return self.tostring(self.build(document))

    def build_blocks(self, elements: Iterable[Element], context: WordmlIdContext) -> List[etree._Element]:
        """Block-level markup; runs of inline elements share a paragraph"""
        blocks: List[etree._Element] = []
        pending: List[Element] = []

        def flush():
            if pending:
                blocks.append(self._paragraph_writer.build_inline(pending, context))
                pending.clear()

        for element in elements:
            if element.inline:
                pending.append(element)
                continue
            flush()
            if isinstance(element, Paragraph):
                blocks.append(self._paragraph_writer.build(element, context))
            elif isinstance(element, Table):
                blocks.append(self._table_writer.build(element, context))
            else:
                raise ValueError(f"Unsupported block: {type(element)}")
        flush()

        return blocks

    def build_section(self, section: Section) -> etree._Element:
        """Page size and margins"""
        sect_pr = etree.Element(qname("w", "sectPr"))
        try:
            pg_sz = etree.SubElement(sect_pr, qname("w", "pgSz"))
            pg_sz.set(w_attr("w"), str(twips("page_width", section.page_width, allow_negative=False)))
            pg_sz.set(w_attr("h"), str(twips("page_height", section.page_height, allow_negative=False)))
            if section.orientation not in PAGE_ORIENTATIONS:
                raise InvalidPropertyValue(
                    "orientation", section.orientation,
                    "Must be one of: " + ",".join(PAGE_ORIENTATIONS),
                )
            if section.orientation == "landscape":
                pg_sz.set(w_attr("orient"), "landscape")

            pg_mar = etree.SubElement(sect_pr, qname("w", "pgMar"))
            for side, distance in section.margins.items():
                if side in PAGE_MARGINS:
                    pg_mar.set(w_attr(side), str(twips(f"margins.{side}", distance)))
        except InvalidPropertyValue as e:
            raise e.with_element("section") from None
        return sect_pr

    def build_styles(self, styles: Union[Document, Iterable[Style]]) -> etree._Element:
        """styles.xml root"""
        if isinstance(styles, Document):
            styles = styles.styles
        return self._style_writer.build(styles)

    def write_styles(self, styles: Union[Document, Iterable[Style]]) -> bytes:
        return self.tostring(self.build_styles(styles))

    def tostring(self, root: etree._Element, pretty_print: Optional[bool] = None) -> bytes:
        if pretty_print is None:
            pretty_print = self.pretty_print
        return etree.tostring(
            root,
            xml_declaration=True,
            encoding="UTF-8",
            standalone=True,
            pretty_print=pretty_print,
        )
