"""Run component (<w:r>, <w:rPr>)"""

from .formatter import RunFormatter
from .writer import TextWriter

__all__ = ["RunFormatter", "TextWriter"]
