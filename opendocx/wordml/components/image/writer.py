"""Image Writer"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from lxml import etree

from opendocx.wordml.base import attr, inch_to_emu, px_to_emu, qname
from opendocx.wordml.errors import InvalidPropertyValue, InvalidUnit
from opendocx.wordml.models import Image

if TYPE_CHECKING:
    from opendocx.wordml.writer import WordmlIdContext


PICTURE_URI = "http://schemas.openxmlformats.org/drawingml/2006/picture"


class ImageWriter:
    """Builds inline drawings"""

    def build(self, image: Image, context: "WordmlIdContext") -> etree._Element:
        """Image to w:r/w:drawing/wp:inline"""
        cx, cy = self._extent(image)
        drawing_id = context.next_drawing_id()
        rel_id = context.add_media(image)
        name = f"Picture {drawing_id}"
        descr = str(image.properties.get("descr", image.properties.get("description", "")))

        run = etree.Element(qname("w", "r"))
        drawing = etree.SubElement(run, qname("w", "drawing"))

        inline = etree.SubElement(drawing, qname("wp", "inline"))
        for side in ("distT", "distB", "distL", "distR"):
            inline.set(side, "0")

        extent = etree.SubElement(inline, qname("wp", "extent"))
        extent.set("cx", str(cx))
        extent.set("cy", str(cy))

        doc_pr = etree.SubElement(inline, qname("wp", "docPr"))
        doc_pr.set("id", str(drawing_id))
        doc_pr.set("name", name)
        if descr:
            doc_pr.set("descr", descr)
        if "title" in image.properties:
            doc_pr.set("title", str(image.properties["title"]))

        frame_pr = etree.SubElement(inline, qname("wp", "cNvGraphicFramePr"))
        locks = etree.SubElement(frame_pr, qname("a", "graphicFrameLocks"))
        locks.set("noChangeAspect", "1")

        graphic = etree.SubElement(inline, qname("a", "graphic"))
        graphic_data = etree.SubElement(graphic, qname("a", "graphicData"))
        graphic_data.set("uri", PICTURE_URI)

        pic = etree.SubElement(graphic_data, qname("pic", "pic"))
        nv_pic_pr = etree.SubElement(pic, qname("pic", "nvPicPr"))
        c_nv_pr = etree.SubElement(nv_pic_pr, qname("pic", "cNvPr"))
        c_nv_pr.set("id", "0")
        c_nv_pr.set("name", f"image{drawing_id}.{image.extension}")
        etree.SubElement(nv_pic_pr, qname("pic", "cNvPicPr"))

        blip_fill = etree.SubElement(pic, qname("pic", "blipFill"))
        blip = etree.SubElement(blip_fill, qname("a", "blip"))
        blip.set(attr("r", "embed"), rel_id)
        stretch = etree.SubElement(blip_fill, qname("a", "stretch"))
        etree.SubElement(stretch, qname("a", "fillRect"))

        sp_pr = etree.SubElement(pic, qname("pic", "spPr"))
        xfrm = etree.SubElement(sp_pr, qname("a", "xfrm"))
        off = etree.SubElement(xfrm, qname("a", "off"))
        off.set("x", "0")
        off.set("y", "0")
        ext = etree.SubElement(xfrm, qname("a", "ext"))
        ext.set("cx", str(cx))
        ext.set("cy", str(cy))
        geom = etree.SubElement(sp_pr, qname("a", "prstGeom"))
        geom.set("prst", "rect")
        etree.SubElement(geom, qname("a", "avLst"))

        return run

    def _extent(self, image: Image) -> Tuple[int, int]:
        """Display size in EMU

        Explicit width/height (inches) win; a single one keeps the aspect
        ratio; otherwise the pixel size at 96 dpi.
        """
        width = image.properties.get("width")
        height = image.properties.get("height")

        if width is not None and height is not None:
            return self._emu("width", width), self._emu("height", height)
        if width is not None:
            cx = self._emu("width", width)
            return cx, int(round(cx * image.height / image.width))
        if height is not None:
            cy = self._emu("height", height)
            return int(round(cy * image.width / image.height)), cy

        return px_to_emu(image.width), px_to_emu(image.height)

    def _emu(self, name: str, value) -> int:
        try:
            return inch_to_emu(value)
        except InvalidUnit as e:
            raise InvalidPropertyValue(name, value, str(e), element="image")
