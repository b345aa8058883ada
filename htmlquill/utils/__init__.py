"""
Utils module for htmlquill.

This module contains enumerations, numeric value parsing and logging setup.
"""

from .enums import FontWeight, NodeKind, TagKind
from .units import parse_float
from .rich_logger import setup_logging

__all__ = [
    "FontWeight",
    "NodeKind",
    "TagKind",
    "parse_float",
    "setup_logging",
]
