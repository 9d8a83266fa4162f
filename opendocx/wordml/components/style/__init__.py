"""Style component (styles.xml)"""

from .writer import StyleWriter

__all__ = ["StyleWriter"]
