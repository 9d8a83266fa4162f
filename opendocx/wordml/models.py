"""Document object model

Elements are built incrementally by the caller and handed to the writer,
which only reads them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from PIL import Image as PILImage

from opendocx.wordml.errors import InvalidPropertyValue, MetadataUnavailable, StructuralError

logger = logging.getLogger(__name__)

Properties = Dict[str, Any]
PropertiesLike = Optional[Mapping[str, Any]]


def create_properties(properties: PropertiesLike = None) -> Properties:
    """Copy a property mapping into a fresh ordered dict"""
    if properties is None:
        return {}
    if not isinstance(properties, Mapping):
        raise TypeError(f"Invalid properties object {properties!r}. Must be a mapping.")
    return dict(properties)


class Element:
    """Base document element"""

    kind = ""
    inline = False

    def __init__(self, properties: PropertiesLike = None):
        self.properties = create_properties(properties)

    @property
    def elements(self) -> List["Element"]:
        return []


def as_elements(elements: Any) -> List[Element]:
    """Normalize a value or list of values to elements; plain values become Text"""
    if elements is None:
        return []
    if not isinstance(elements, (list, tuple)):
        elements = [elements]
    return [e if isinstance(e, Element) else Text(e) for e in elements]


class Text(Element):
    """A run of text"""

    kind = "text"
    inline = True

    def __init__(self, text: Any = "", properties: PropertiesLike = None):
        super().__init__(properties)
        self.text = "" if text is None else str(text)

    def __repr__(self) -> str:
        return f"Text({self.text!r})"


class LineBreak(Element):
    """Break inside a run (textWrapping, page or column)"""

    kind = "break"
    inline = True
    break_type = "textWrapping"

    def __init__(self, break_type: Optional[str] = None, properties: PropertiesLike = None):
        super().__init__(properties)
        if break_type is not None:
            self.break_type = break_type


class PageBreak(LineBreak):
    break_type = "page"

    def __init__(self, properties: PropertiesLike = None):
        super().__init__(properties=properties)


class Paragraph(Element):
    """A paragraph of inline elements"""

    kind = "paragraph"

    def __init__(self, elements: Any = None, properties: PropertiesLike = None):
        super().__init__(properties)
        self._elements: List[Element] = []
        self.add(elements)

    @classmethod
    def create(cls, elements: Any = None, properties: PropertiesLike = None) -> "Paragraph":
        return cls(elements, properties)

    def add(self, elements: Any) -> "Paragraph":
        for e in as_elements(elements):
            if not e.inline:
                raise StructuralError(f"A paragraph cannot contain a {e.kind} element")
            self._elements.append(e)
        return self

    def prop(self, key: Union[str, Mapping[str, Any]], val: Any = None) -> "Paragraph":
        if isinstance(key, Mapping):
            self.properties = create_properties(key)
        else:
            self.properties[key] = val
        return self

    @property
    def elements(self) -> List[Element]:
        return self._elements


# Pillow mode -> bits per channel
MODE_BIT_DEPTH = {"1": 1, "I": 32, "F": 32}


@dataclass(frozen=True)
class ImageMetadata:
    """Image metadata read from the source"""
    width: int
    height: int
    mime_type: str
    bit_depth: int
    channels: int


class Image(Element):
    """A single inline image

    Metadata is read lazily with Pillow on first access and cached until the
    source is reassigned.
    """

    kind = "image"
    inline = True

    def __init__(self, source: Union[str, Path], properties: PropertiesLike = None):
        super().__init__(properties)
        self._cache: Optional[ImageMetadata] = None
        self.source = source

    @property
    def source(self) -> Union[str, Path]:
        return self._source

    @source.setter
    def source(self, source: Union[str, Path]) -> None:
        self._source = source
        self._cache = None

    def set_source(self, source: Union[str, Path]) -> "Image":
        self.source = source
        return self

    @property
    def metadata(self) -> ImageMetadata:
        if self._cache is None:
            self._cache = self._read_metadata()
        return self._cache

    def _read_metadata(self) -> ImageMetadata:
        """Update the image cache"""
        try:
            with PILImage.open(self._source) as img:
                width, height = img.size
                image_format = img.format
                mode = img.mode
                channels = len(img.getbands())
        except (OSError, ValueError, TypeError, AttributeError) as e:
            raise MetadataUnavailable(self._source, str(e)) from e

        mime_type = PILImage.MIME.get(image_format or "")
        if not mime_type:
            raise MetadataUnavailable(self._source, f"unknown format {image_format}")

        bit_depth = 16 if mode.startswith("I;16") else MODE_BIT_DEPTH.get(mode, 8)
        logger.debug("Read image metadata for %s: %sx%s %s", self._source, width, height, mime_type)
        return ImageMetadata(width, height, mime_type, bit_depth, channels)

    @property
    def width(self) -> int:
        return self.metadata.width

    @property
    def height(self) -> int:
        return self.metadata.height

    @property
    def content_type(self) -> str:
        return self.metadata.mime_type

    @property
    def bit_depth(self) -> int:
        return self.metadata.bit_depth

    @property
    def channels(self) -> int:
        return self.metadata.channels

    @property
    def extension(self) -> str:
        ext = self.content_type.rsplit("/", 1)[-1]
        if ext == "jpeg":
            ext = "jpg"
        return ext


class TableContext(IntEnum):
    """Table builder cursor mode"""
    TABLE = 0
    GRID = 1
    ROW = 2
    CELL = 3


@dataclass
class TableCell:
    properties: Properties = field(default_factory=dict)
    elements: List[Element] = field(default_factory=list)


@dataclass
class TableRow:
    properties: Properties = field(default_factory=dict)
    cells: List[TableCell] = field(default_factory=list)


class Table(Element):
    """A table with a chainable builder interface

        tbl = (Table.create({"border": 0.5})
               .grid(2, 2)
               .row()
                   .cell("one")
                   .cell("two")
               .row()
                   .cell("three"))

    The cursor tracks the active row and cell by index. Property calls and
    element additions go to whatever the cursor last opened.
    """

    kind = "table"

    def __init__(self, properties: PropertiesLike = None):
        super().__init__(properties)
        self._grid: List[Any] = []
        self._rows: List[TableRow] = []
        self._row_index: Optional[int] = None
        self._cell_index: Optional[int] = None
        self._context = TableContext.TABLE
        self._parent: Optional[Table] = None

    @classmethod
    def create(cls, properties: PropertiesLike = None) -> "Table":
        """Shortcut for chaining without assigning the table first"""
        return cls(properties)

    @property
    def context(self) -> TableContext:
        return self._context

    @property
    def parent(self) -> Optional["Table"]:
        return self._parent

    def table(self, properties: PropertiesLike = None) -> "Table":
        """Nested table in a new cell of the current row; call end() to return"""
        tbl = Table(properties)
        tbl._parent = self
        self.cell(tbl)
        return tbl

    def end(self, to_root: bool = False) -> "Table":
        """End the current nested table level

        Returns the parent table, or the outermost table when to_root is set.
        A table that is not nested returns itself.
        """
        if not to_root:
            return self._parent or self

        tbl = self
        while tbl._parent is not None:
            tbl = tbl._parent
        return tbl

    def grid(self, *widths: Any) -> "Table":
        """Enter grid context, defining a column for each width (inches)"""
        self._context = TableContext.GRID
        for width in widths:
            if isinstance(width, (list, tuple)):
                for w in width:
                    self.col(w)
            else:
                self.col(width)
        return self

    def col(self, width: Any) -> "Table":
        if self._context != TableContext.GRID:
            raise StructuralError("Not in grid context. Call grid() first")
        self._grid.append(width)
        return self

    def row(self, properties: PropertiesLike = None) -> "Table":
        self._context = TableContext.ROW
        self._rows.append(TableRow(create_properties(properties)))
        self._row_index = len(self._rows) - 1
        self._cell_index = None
        return self

    def cell(self, elements: Any = None, properties: PropertiesLike = None) -> "Table":
        # start a new row if it hasn't been started already
        if self._row_index is None:
            self.row()
        self._context = TableContext.CELL

        cells = self._rows[self._row_index].cells
        cells.append(TableCell(create_properties(properties)))
        self._cell_index = len(cells) - 1

        if elements is not None:
            self.add(elements)
        return self

    def add(self, elements: Any) -> "Table":
        """Append elements to the active cell"""
        if elements is None:
            return self
        cell = self._active_cell()
        if cell is None:
            raise StructuralError("No cells are defined. Call cell() first")
        cell.elements.extend(as_elements(elements))
        return self

    def skip_before(self, count: int) -> "Table":
        """Grid columns to skip before the first cell of the active row"""
        return self._skip("gridBefore", count)

    def skip_after(self, count: int) -> "Table":
        """Grid columns to leave after the last cell of the active row"""
        return self._skip("gridAfter", count)

    def _skip(self, name: str, count: int) -> "Table":
        if count:
            row = self._active_row()
            if row is None:
                raise StructuralError("No rows are defined. Call row() first")
            row.properties[name] = count
        return self

    def prop(self, key: Union[str, Mapping[str, Any]], val: Any = None) -> "Table":
        """Set a property on the table, active row or active cell

        Passing a mapping replaces that target's properties.
        """
        if self._context == TableContext.TABLE:
            target = self
        elif self._context == TableContext.ROW:
            target = self._active_row()
        elif self._context == TableContext.CELL:
            target = self._active_cell()
        elif self._context == TableContext.GRID:
            raise StructuralError("Table grids do not have properties")
        else:
            raise StructuralError(f"Unknown table context ({self._context})")

        if isinstance(key, Mapping):
            target.properties = create_properties(key)
        else:
            target.properties[key] = val
        return self

    def _active_row(self) -> Optional[TableRow]:
        if self._row_index is None:
            return None
        return self._rows[self._row_index]

    def _active_cell(self) -> Optional[TableCell]:
        row = self._active_row()
        if row is None or self._cell_index is None:
            return None
        return row.cells[self._cell_index]

    @property
    def grid_columns(self) -> Tuple[Any, ...]:
        return tuple(self._grid)

    @property
    def rows(self) -> Tuple[TableRow, ...]:
        return tuple(self._rows)

    @property
    def elements(self) -> List[Element]:
        return [e for row in self._rows for cell in row.cells for e in cell.elements]


STYLE_TYPES = ("paragraph", "character", "table", "numbering")


class Style:
    """A named style definition

    For paragraph and table styles ``properties`` hold the paragraph or
    table properties and ``run_properties`` the character formatting. For
    character styles ``properties`` are run properties.
    """

    def __init__(
        self,
        style_id: str,
        name: Optional[str] = None,
        style_type: str = "paragraph",
        properties: PropertiesLike = None,
        run_properties: PropertiesLike = None,
        based_on: Optional[str] = None,
        default: bool = False,
    ):
        if style_type not in STYLE_TYPES:
            raise InvalidPropertyValue(
                "type", style_type, "Must be one of: " + ",".join(STYLE_TYPES), element="style"
            )
        self.id = style_id
        self.name = name or style_id
        self.type = style_type
        self.properties = create_properties(properties)
        self.run_properties = create_properties(run_properties)
        self.based_on = based_on
        self.default = default


@dataclass
class Section:
    """Page setup, dimensions in inches"""
    page_width: float = 8.5
    page_height: float = 11.0
    orientation: str = "portrait"
    margins: Dict[str, float] = field(
        default_factory=lambda: {"top": 1.0, "right": 1.0, "bottom": 1.0, "left": 1.0}
    )


class Document:
    """Document body, styles and page setup"""

    def __init__(
        self,
        elements: Iterable[Element] = (),
        styles: Iterable[Style] = (),
        section: Optional[Section] = None,
    ):
        self._elements: List[Element] = []
        self._styles: List[Style] = list(styles)
        self.section = section
        self.add(list(elements))

    def add(self, elements: Any) -> "Document":
        for e in as_elements(elements):
            self._elements.append(e)
        return self

    def add_style(self, style: Style) -> "Document":
        self._styles.append(style)
        return self

    @property
    def elements(self) -> List[Element]:
        return self._elements

    @property
    def styles(self) -> List[Style]:
        return self._styles
