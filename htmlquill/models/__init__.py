"""Render node models handed to the layout engine."""

from .render_node import (
    StyleDict,
    RenderNode,
    TextNode,
    BreakNode,
    ImageNode,
    ContainerNode,
)

__all__ = [
    "StyleDict",
    "RenderNode",
    "TextNode",
    "BreakNode",
    "ImageNode",
    "ContainerNode",
]
