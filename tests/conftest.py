"""
Pytest configuration for opendocx
"""

import logging
import sys

import pytest
from lxml import etree
from PIL import Image as PILImage

from opendocx.wordml.base import NS


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset package logging between tests."""
    logger = logging.getLogger("opendocx")
    saved = list(logger.handlers)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.WARNING)
    logger.addHandler(handler)

    yield

    logger.handlers[:] = saved
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def xpath():
    """Namespaced XPath over an element."""
    def _xpath(element, path):
        return element.xpath(path, namespaces=NS)
    return _xpath


@pytest.fixture
def wattr():
    """Read a w: attribute."""
    def _wattr(element, local):
        return element.get(f"{{{NS['w']}}}{local}")
    return _wattr


@pytest.fixture
def parent():
    """Fresh element to format properties into."""
    return etree.Element(f"{{{NS['w']}}}p", nsmap={"w": NS["w"]})


@pytest.fixture
def sample_png(tmp_path):
    """200x100 RGB PNG."""
    path = tmp_path / "sample.png"
    PILImage.new("RGB", (200, 100), color=(255, 0, 0)).save(path, format="PNG")
    return path


@pytest.fixture
def sample_jpeg(tmp_path):
    """50x50 greyscale JPEG."""
    path = tmp_path / "sample.jpg"
    PILImage.new("L", (50, 50), color=128).save(path, format="JPEG")
    return path
