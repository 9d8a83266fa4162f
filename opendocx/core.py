"""
OpenDocx main class
"""

from pathlib import Path
from typing import Any, Optional, Union

from opendocx.converter.json_loader import JsonDocumentLoader
from opendocx.wordml.models import Document
from opendocx.wordml.writer import DocumentWriter


class OpenDocx:
    """Renders document descriptions to WordprocessingML"""

    def __init__(self, pretty_print: bool = False):
        """
        Args:
            pretty_print: indent the generated markup
        """
        self.pretty_print = pretty_print
        self._writer = DocumentWriter(pretty_print=pretty_print)

    @property
    def media(self) -> dict:
        """Image relationships collected by the last render"""
        return self._writer.media

    def render(self, document: Document) -> bytes:
        """Document to document.xml bytes"""
        return self._writer.write(document)

    def render_styles(self, document: Document) -> bytes:
        """Document styles to styles.xml bytes"""
        return self._writer.write_styles(document)

    def render_data(self, data: Any, base_dir: Optional[Union[str, Path]] = None) -> bytes:
        """
        Render a parsed JSON description

        Args:
            data: description dict (body, styles, section)
            base_dir: directory relative image sources resolve against

        Returns:
            document.xml bytes
        """
        return self.render(JsonDocumentLoader(base_dir).load(data))

    def convert(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
        styles_path: Optional[Union[str, Path]] = None,
    ) -> Path:
        """
        Render a JSON description file to document.xml

        Args:
            input_path: JSON description
            output_path: document.xml to write
            styles_path: optional styles.xml to write

        Returns:
            output path
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        # 1. load the description
        document = JsonDocumentLoader().load_file(input_path)

        # 2. serialize; nothing is written if this fails
        xml = self.render(document)
        styles_xml = self.render_styles(document) if styles_path else None

        output_path.write_bytes(xml)
        if styles_xml is not None:
            Path(styles_path).write_bytes(styles_xml)

        return output_path
