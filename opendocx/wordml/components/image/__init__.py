"""Image component (<w:drawing>)"""

from .writer import ImageWriter

__all__ = ["ImageWriter"]
