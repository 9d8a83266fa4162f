"""WordprocessingML module

Document model and its serialization to WordprocessingML markup.

Layout:
- models.py: document model and table builder
- base.py: namespaces, unit conversion
- properties.py: property aliases and value kinds per element kind
- coercers.py: value validation/conversion
- writer.py: model -> markup
- components/: per-element formatters and writers
"""

from .errors import (
    OpenDocxError,
    InvalidPropertyValue,
    InvalidUnit,
    StructuralError,
    MetadataUnavailable,
    DocumentFormatError,
)
from .base import (
    NS,
    TWIPS_PER_INCH,
    EIGHTHS_PER_POINT,
    inch_to_twip,
    pt_to_eighths,
    pt_to_twip,
    pt_to_half_points,
    inch_to_emu,
    px_to_emu,
)
from .properties import ValueKind, resolve_alias, lookup_kind, effective_map
from .models import (
    Element,
    Text,
    LineBreak,
    PageBreak,
    Paragraph,
    Image,
    ImageMetadata,
    Table,
    TableContext,
    TableRow,
    TableCell,
    Style,
    Section,
    Document,
)
from .writer import DocumentWriter, WordmlIdContext

__all__ = [
    # Errors
    "OpenDocxError",
    "InvalidPropertyValue",
    "InvalidUnit",
    "StructuralError",
    "MetadataUnavailable",
    "DocumentFormatError",
    # Units
    "NS",
    "TWIPS_PER_INCH",
    "EIGHTHS_PER_POINT",
    "inch_to_twip",
    "pt_to_eighths",
    "pt_to_twip",
    "pt_to_half_points",
    "inch_to_emu",
    "px_to_emu",
    # Registry
    "ValueKind",
    "resolve_alias",
    "lookup_kind",
    "effective_map",
    # Model
    "Element",
    "Text",
    "LineBreak",
    "PageBreak",
    "Paragraph",
    "Image",
    "ImageMetadata",
    "Table",
    "TableContext",
    "TableRow",
    "TableCell",
    "Style",
    "Section",
    "Document",
    # Writer
    "DocumentWriter",
    "WordmlIdContext",
]
