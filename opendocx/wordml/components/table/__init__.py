"""Table component (<w:tbl>, <w:tblPr>, <w:trPr>, <w:tcPr>)"""

from .formatter import CellFormatter, RowFormatter, TableFormatter
from .writer import TableWriter

__all__ = ["TableFormatter", "RowFormatter", "CellFormatter", "TableWriter"]
