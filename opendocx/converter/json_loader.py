from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from opendocx.wordml.errors import DocumentFormatError, StructuralError
from opendocx.wordml.models import (
    Document,
    Element,
    Image,
    LineBreak,
    PageBreak,
    Paragraph,
    Section,
    Style,
    Table,
    Text,
)

logger = logging.getLogger(__name__)


class JsonDocumentLoader:
    """Build a Document from a JSON document description.

    Expected input:
    {
      "body": [
        {"type": "paragraph", "properties": {"align": "center"},
         "content": ["plain text", {"type": "text", "text": "bold", "properties": {"bold": true}}]},
        {"type": "table", "properties": {"border": 0.5}, "grid": [2, 2],
         "rows": [{"properties": {}, "cells": [{"properties": {}, "content": ["one"]}]}]},
        {"type": "image", "source": "chart.png", "properties": {"width": 3}}
      ],
      "styles": [
        {"id": "Heading1", "name": "heading 1", "type": "paragraph",
         "properties": {"spacing": {"before": 12}}, "run_properties": {"bold": true}}
      ],
      "section": {"page_width": 8.5, "page_height": 11, "orientation": "portrait",
                  "margins": {"top": 1, "bottom": 1}}
    }

    Content items are strings (text runs) or objects typed "text",
    "break", "page_break", "image", "paragraph" or "table". Relative
    image sources resolve against ``base_dir``.
    """

    def __init__(self, base_dir: Optional[Union[str, Path]] = None, confine: bool = False):
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.confine = confine

    def load(self, data: Any) -> Document:
        if not isinstance(data, dict):
            raise DocumentFormatError("Input must be an object")

        body = data.get("body", [])
        if not isinstance(body, list):
            raise DocumentFormatError("'body' must be an array")

        styles = data.get("styles", [])
        if not isinstance(styles, list):
            raise DocumentFormatError("'styles' must be an array")

        section = data.get("section")

        try:
            doc = Document(
                elements=[self._block(item, f"body[{i}]") for i, item in enumerate(body)],
                styles=[self._style(item, f"styles[{i}]") for i, item in enumerate(styles)],
                section=self._section(section) if section is not None else None,
            )
        except (StructuralError, TypeError) as e:
            raise DocumentFormatError(str(e)) from e

        logger.debug("Loaded %d blocks, %d styles", len(doc.elements), len(doc.styles))
        return doc

    def loads(self, text: Union[str, bytes]) -> Document:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DocumentFormatError(f"Invalid JSON: {e}") from e
        return self.load(data)

    def load_file(self, path: Union[str, Path]) -> Document:
        path = Path(path)
        if self.base_dir is None:
            self.base_dir = path.parent
        return self.loads(path.read_text(encoding="utf-8"))

    def _block(self, item: Any, where: str) -> Element:
        if isinstance(item, str):
            return Paragraph(Text(item))
        kind = self._type_of(item, where)
        if kind == "paragraph":
            return self._paragraph(item, where)
        if kind == "table":
            return self._table(item, where)
        # inline elements at block level are grouped into paragraphs by the writer
        return self._inline(item, where)

    def _paragraph(self, item: Dict[str, Any], where: str) -> Paragraph:
        content = self._list(item, "content", where)
        return Paragraph(
            [self._inline(c, f"{where}.content[{i}]") for i, c in enumerate(content)],
            self._properties(item, "properties", where),
        )

    def _inline(self, item: Any, where: str) -> Element:
        if isinstance(item, str):
            return Text(item)
        kind = self._type_of(item, where)
        if kind == "text":
            return Text(item.get("text", ""), self._properties(item, "properties", where))
        if kind == "break":
            return LineBreak(item.get("break_type"))
        if kind == "page_break":
            return PageBreak()
        if kind == "image":
            return self._image(item, where)
        raise DocumentFormatError(f"{where}: unsupported inline type {kind!r}")

    def _image(self, item: Dict[str, Any], where: str) -> Image:
        source = item.get("source")
        if not isinstance(source, str) or not source:
            raise DocumentFormatError(f"{where}: 'source' must be a non-empty string")
        path = Path(source)
        if self.confine:
            path = self._confined(path, where)
        elif not path.is_absolute() and self.base_dir is not None:
            path = self.base_dir / path
        return Image(path, self._properties(item, "properties", where))

    def _confined(self, path: Path, where: str) -> Path:
        """Relative path that stays inside base_dir"""
        if path.is_absolute():
            raise DocumentFormatError(f"{where}: image source must be a relative path")
        root = (self.base_dir or Path.cwd()).resolve()
        resolved = (root / path).resolve()
        try:
            resolved.relative_to(root)
        except ValueError:
            raise DocumentFormatError(f"{where}: image source is outside the media directory") from None
        return resolved

    def _table(self, item: Dict[str, Any], where: str) -> Table:
        table = Table(self._properties(item, "properties", where))

        grid = self._list(item, "grid", where)
        if grid:
            table.grid(grid)

        for r, row in enumerate(self._list(item, "rows", where)):
            row_where = f"{where}.rows[{r}]"
            if not isinstance(row, dict):
                raise DocumentFormatError(f"{row_where} must be an object")
            table.row(self._properties(row, "properties", row_where))

            for c, cell in enumerate(self._list(row, "cells", row_where)):
                cell_where = f"{row_where}.cells[{c}]"
                if isinstance(cell, str):
                    table.cell(Text(cell))
                    continue
                if not isinstance(cell, dict):
                    raise DocumentFormatError(f"{cell_where} must be an object or string")
                content = self._list(cell, "content", cell_where)
                table.cell(
                    [self._block(b, f"{cell_where}.content[{i}]") for i, b in enumerate(content)],
                    self._properties(cell, "properties", cell_where),
                )

        return table

    def _style(self, item: Any, where: str) -> Style:
        if not isinstance(item, dict):
            raise DocumentFormatError(f"{where} must be an object")
        style_id = item.get("id")
        if not isinstance(style_id, str) or not style_id:
            raise DocumentFormatError(f"{where}: 'id' must be a non-empty string")
        try:
            return Style(
                style_id,
                name=item.get("name"),
                style_type=item.get("type", "paragraph"),
                properties=self._properties(item, "properties", where),
                run_properties=self._properties(item, "run_properties", where),
                based_on=item.get("based_on"),
                default=bool(item.get("default", False)),
            )
        except ValueError as e:
            raise DocumentFormatError(f"{where}: {e}") from e

    def _section(self, item: Any) -> Section:
        if not isinstance(item, dict):
            raise DocumentFormatError("'section' must be an object")
        section = Section()
        for key in ("page_width", "page_height", "orientation"):
            if key in item:
                setattr(section, key, item[key])
        if "margins" in item:
            margins = item["margins"]
            if not isinstance(margins, dict):
                raise DocumentFormatError("'section.margins' must be an object")
            section.margins.update(margins)
        return section

    @staticmethod
    def _type_of(item: Any, where: str) -> str:
        if not isinstance(item, dict):
            raise DocumentFormatError(f"{where} must be an object or string")
        kind = item.get("type")
        if not isinstance(kind, str):
            raise DocumentFormatError(f"{where}: 'type' is required")
        return kind.lower()

    @staticmethod
    def _list(item: Mapping[str, Any], key: str, where: str) -> List[Any]:
        value = item.get(key, [])
        if value is None:
            return []
        if not isinstance(value, list):
            raise DocumentFormatError(f"{where}: '{key}' must be an array")
        return value

    @staticmethod
    def _properties(item: Mapping[str, Any], key: str, where: str) -> Dict[str, Any]:
        value = item.get(key) or {}
        if not isinstance(value, dict):
            raise DocumentFormatError(f"{where}: '{key}' must be an object")
        return value


def load_document(data: Any, base_dir: Optional[Union[str, Path]] = None) -> Document:
    """Document from a parsed JSON description"""
    return JsonDocumentLoader(base_dir).load(data)
