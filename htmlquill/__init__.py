"""
htmlquill - HTML and CSS to styled render node trees.

This package converts markup (optionally with external style sheet text) into a
forest of typed render nodes for a layout engine.

Features:
- Embedded ``<style>`` extraction and ordered rule parsing
- Cascade of user-agent defaults, matching rules and inline styles
- Tables, rows, cells, blocks, images, breaks and text runs
- Best-effort handling of unsupported tags and unbalanced markup
- JSON export and a command-line interface

Quick Start:
    from htmlquill import convert

    nodes = convert("<style>p { color: blue }</style><p>Hello</p>")
    nodes[0].styles["color"]  # "blue"
"""

from .version import __version__, __version_info__

from .exceptions import (
    HtmlQuillError,
    ParsingError,
    StyleError,
)
from .api import ParseSession, convert, convert_file
from .models import (
    RenderNode,
    TextNode,
    BreakNode,
    ImageNode,
    ContainerNode,
)
from .utils.enums import FontWeight, NodeKind, TagKind
from .export import JSONExporter

__all__ = [
    # Version
    "__version__",
    "__version_info__",

    # API
    "ParseSession",
    "convert",
    "convert_file",

    # Models
    "RenderNode",
    "TextNode",
    "BreakNode",
    "ImageNode",
    "ContainerNode",
    "FontWeight",
    "NodeKind",
    "TagKind",

    # Export
    "JSONExporter",

    # Exceptions
    "HtmlQuillError",
    "ParsingError",
    "StyleError",
]
