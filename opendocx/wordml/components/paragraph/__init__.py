"""Paragraph component (<w:p>, <w:pPr>)"""

from .formatter import ParagraphFormatter
from .writer import ParagraphWriter

__all__ = ["ParagraphFormatter", "ParagraphWriter"]
