"""Common enumerations used across the render tree models."""

from __future__ import annotations

from enum import Enum


class NodeKind(str, Enum):
    """Render node variants handed to the layout engine."""

    TEXT = "text"
    BREAK = "break"
    IMAGE = "image"
    TABLE = "table"
    ROW = "row"
    CELL = "cell"
    BLOCK = "block"

    @property
    def is_container(self) -> bool:
        return self in (NodeKind.TABLE, NodeKind.ROW, NodeKind.CELL, NodeKind.BLOCK)


class TagKind(str, Enum):
    """Closed set of markup tag families understood by the node factory."""

    BREAK = "break"
    IMAGE = "image"
    TABLE = "table"
    TABLE_SECTION = "table_section"
    ROW = "row"
    CELL = "cell"
    BLOCK = "block"
    INLINE = "inline"
    STRONG = "strong"
    EMPHASIS = "emphasis"


class FontWeight(str, Enum):
    """Font weights supported by the style cascade."""

    NORMAL = "normal"
    BOLD = "bold"
