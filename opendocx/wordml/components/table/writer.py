"""Table Writer"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional

from lxml import etree

from opendocx.wordml.base import qname, w_attr
from opendocx.wordml.coercers import twips
from opendocx.wordml.components.table.formatter import (
    CellFormatter,
    RowFormatter,
    TableFormatter,
)
from opendocx.wordml.errors import InvalidPropertyValue
from opendocx.wordml.models import Element, Table, TableCell, TableRow

if TYPE_CHECKING:
    from opendocx.wordml.writer import WordmlIdContext

BlockBuilder = Callable[[List[Element], "WordmlIdContext"], List[etree._Element]]


class TableWriter:
    """Builds <w:tbl> elements

    Cell content is handed to ``block_builder`` so cells may hold
    paragraphs, inline elements and nested tables.
    """

    def __init__(
        self,
        block_builder: BlockBuilder,
        table_formatter: Optional[TableFormatter] = None,
        row_formatter: Optional[RowFormatter] = None,
        cell_formatter: Optional[CellFormatter] = None,
    ):
        self.block_builder = block_builder
        self.table_formatter = table_formatter or TableFormatter()
        self.row_formatter = row_formatter or RowFormatter()
        self.cell_formatter = cell_formatter or CellFormatter()

    def build(self, table: Table, context: "WordmlIdContext") -> etree._Element:
        """Table to w:tbl: properties, grid, then rows"""
        tbl = etree.Element(qname("w", "tbl"))
        self.table_formatter.format(table.properties, tbl)

        tbl_grid = etree.SubElement(tbl, qname("w", "tblGrid"))
        for idx, width in enumerate(table.grid_columns):
            try:
                w = twips(f"gridCol[{idx}]", width, allow_negative=False)
            except InvalidPropertyValue as e:
                raise e.with_element("table") from None
            grid_col = etree.SubElement(tbl_grid, qname("w", "gridCol"))
            grid_col.set(w_attr("w"), str(w))

        for row in table.rows:
            tbl.append(self._build_row(row, context))

        return tbl

    def _build_row(self, row: TableRow, context: "WordmlIdContext") -> etree._Element:
        tr = etree.Element(qname("w", "tr"))
        self.row_formatter.format(row.properties, tr)
        for cell in row.cells:
            tr.append(self._build_cell(cell, context))
        return tr

    def _build_cell(self, cell: TableCell, context: "WordmlIdContext") -> etree._Element:
        tc = etree.Element(qname("w", "tc"))
        self.cell_formatter.format(cell.properties, tc)

        blocks = self.block_builder(cell.elements, context)
        for block in blocks:
            tc.append(block)

        # a cell must end with a paragraph
        if not blocks or blocks[-1].tag != qname("w", "p").text:
            etree.SubElement(tc, qname("w", "p"))

        return tc
