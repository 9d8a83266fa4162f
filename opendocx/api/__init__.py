"""API server module"""

from opendocx.api.server import app

__all__ = ["app"]
