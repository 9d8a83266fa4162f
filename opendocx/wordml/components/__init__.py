"""WordprocessingML components

Each component has a formatter (properties) and/or a writer (structure).
"""

from .shared import PropertyFormatter
from .run import RunFormatter, TextWriter
from .paragraph import ParagraphFormatter, ParagraphWriter
from .table import TableFormatter, RowFormatter, CellFormatter, TableWriter
from .image import ImageWriter
from .style import StyleWriter

__all__ = [
    # Shared
    "PropertyFormatter",
    # Run
    "RunFormatter", "TextWriter",
    # Paragraph
    "ParagraphFormatter", "ParagraphWriter",
    # Table
    "TableFormatter", "RowFormatter", "CellFormatter", "TableWriter",
    # Image
    "ImageWriter",
    # Style
    "StyleWriter",
]
