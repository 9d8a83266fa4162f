"""Converters from external document descriptions"""

from opendocx.converter.json_loader import JsonDocumentLoader, load_document

__all__ = ["JsonDocumentLoader", "load_document"]
