"""Style Writer - styles.xml"""

from __future__ import annotations

from typing import Iterable

from lxml import etree

from opendocx.wordml.base import NS, qname, w_attr
from opendocx.wordml.components.paragraph.formatter import ParagraphFormatter
from opendocx.wordml.components.run.formatter import RunFormatter
from opendocx.wordml.components.table.formatter import TableFormatter
from opendocx.wordml.models import Style


class StyleWriter:
    """Builds <w:styles>"""

    def __init__(
        self,
        paragraph_formatter: ParagraphFormatter,
        run_formatter: RunFormatter,
        table_formatter: TableFormatter,
    ):
        self.paragraph_formatter = paragraph_formatter
        self.run_formatter = run_formatter
        self.table_formatter = table_formatter

    def build(self, styles: Iterable[Style]) -> etree._Element:
        """Styles to a w:styles root"""
        root = etree.Element(qname("w", "styles"), nsmap={"w": NS["w"]})
        for style in styles:
            root.append(self.build_style(style))
        return root

    def build_style(self, style: Style) -> etree._Element:
        node = etree.Element(qname("w", "style"))
        node.set(w_attr("type"), style.type)
        if style.default:
            node.set(w_attr("default"), "1")
        node.set(w_attr("styleId"), style.id)

        name = etree.SubElement(node, qname("w", "name"))
        name.set(w_attr("val"), style.name)
        if style.based_on:
            based_on = etree.SubElement(node, qname("w", "basedOn"))
            based_on.set(w_attr("val"), style.based_on)

        if style.type == "paragraph":
            self.paragraph_formatter.format(style.properties, node)
            self.run_formatter.format(style.run_properties, node)
        elif style.type == "character":
            self.run_formatter.format(style.properties, node)
        elif style.type == "table":
            self.run_formatter.format(style.run_properties, node)
            self.table_formatter.format(style.properties, node)

        return node
