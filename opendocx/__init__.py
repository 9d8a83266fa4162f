"""
opendocx - WordprocessingML serializer for a document object model
"""

from opendocx.core import OpenDocx
from opendocx.wordml import (
    Document,
    DocumentWriter,
    Image,
    LineBreak,
    PageBreak,
    Paragraph,
    Section,
    Style,
    Table,
    Text,
)

__version__ = "0.1.0"
__all__ = [
    "OpenDocx",
    "Document",
    "DocumentWriter",
    "Image",
    "LineBreak",
    "PageBreak",
    "Paragraph",
    "Section",
    "Style",
    "Table",
    "Text",
]
