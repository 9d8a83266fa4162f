"""Shared formatter base"""

from .formatter import PropertyFormatter

__all__ = ["PropertyFormatter"]
