"""
Node factory mapping markup tags to render nodes.

Every supported tag belongs to one ``TagKind``; each kind has exactly one
builder. Tags outside ``TAG_KINDS`` are unsupported and produce no node.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from ..models.render_node import BreakNode, ContainerNode, ImageNode, RenderNode
from ..utils.enums import FontWeight, NodeKind, TagKind
from ..utils.units import parse_float

logger = logging.getLogger(__name__)

StyleDict = Dict[str, Any]

TAG_KINDS: Dict[str, TagKind] = {
    "br": TagKind.BREAK,
    "img": TagKind.IMAGE,
    "table": TagKind.TABLE,
    "thead": TagKind.TABLE_SECTION,
    "tbody": TagKind.TABLE_SECTION,
    "tr": TagKind.ROW,
    "td": TagKind.CELL,
    "th": TagKind.CELL,
    "h1": TagKind.BLOCK,
    "h2": TagKind.BLOCK,
    "h3": TagKind.BLOCK,
    "h4": TagKind.BLOCK,
    "h5": TagKind.BLOCK,
    "h6": TagKind.BLOCK,
    "p": TagKind.BLOCK,
    "div": TagKind.BLOCK,
    "span": TagKind.INLINE,
    "strong": TagKind.STRONG,
    "b": TagKind.STRONG,
    "em": TagKind.EMPHASIS,
    "i": TagKind.EMPHASIS,
}

# Elements that never take children and are never left open.
VOID_ELEMENTS = frozenset({"br", "img", "hr", "input"})


def lookup_tag_kind(tag: str) -> Optional[TagKind]:
    """Return the tag family, or None when the tag is unsupported."""
    return TAG_KINDS.get(tag)


def is_void_element(tag: str) -> bool:
    return tag in VOID_ELEMENTS


def _build_break(attributes: Mapping[str, str], styles: StyleDict) -> RenderNode:
    return BreakNode(NodeKind.BREAK, styles)


def _build_image(attributes: Mapping[str, str], styles: StyleDict) -> RenderNode:
    return ImageNode(NodeKind.IMAGE, styles, src=attributes.get("src"))


def _build_table(attributes: Mapping[str, str], styles: StyleDict) -> RenderNode:
    if attributes.get("width"):
        styles["width"] = attributes["width"]
    if attributes.get("cellpadding"):
        padding = parse_float(attributes["cellpadding"])
        if padding is not None:
            styles["padding"] = padding
    return ContainerNode(NodeKind.TABLE, styles)


def _build_row(attributes: Mapping[str, str], styles: StyleDict) -> RenderNode:
    return ContainerNode(NodeKind.ROW, styles)


def _build_cell(attributes: Mapping[str, str], styles: StyleDict) -> RenderNode:
    if attributes.get("align"):
        styles["text_align"] = attributes["align"]
    if attributes.get("width"):
        styles["width"] = attributes["width"]
    return ContainerNode(NodeKind.CELL, styles)


def _build_block(attributes: Mapping[str, str], styles: StyleDict) -> RenderNode:
    return ContainerNode(NodeKind.BLOCK, styles)


def _build_strong(attributes: Mapping[str, str], styles: StyleDict) -> RenderNode:
    styles["font_weight"] = FontWeight.BOLD
    return ContainerNode(NodeKind.BLOCK, styles)


# TODO: emphasis should set an italic font style once fonts carry a style axis.
_build_emphasis = _build_block


NODE_BUILDERS: Dict[TagKind, Callable[[Mapping[str, str], StyleDict], RenderNode]] = {
    TagKind.BREAK: _build_break,
    TagKind.IMAGE: _build_image,
    TagKind.TABLE: _build_table,
    TagKind.TABLE_SECTION: _build_block,
    TagKind.ROW: _build_row,
    TagKind.CELL: _build_cell,
    TagKind.BLOCK: _build_block,
    TagKind.INLINE: _build_block,
    TagKind.STRONG: _build_strong,
    TagKind.EMPHASIS: _build_emphasis,
}


def create_node(tag: str, attributes: Mapping[str, str], styles: StyleDict) -> Optional[RenderNode]:
    """
    Create the render node for one element.

    Args:
        tag: Lower-case tag name
        attributes: Element attributes
        styles: Resolved styles (copied, never modified)

    Returns:
        New render node, or None if the tag is unsupported
    """
    kind = lookup_tag_kind(tag)
    if kind is None:
        logger.debug(f"Unsupported tag <{tag}>")
        return None

    return NODE_BUILDERS[kind](attributes, dict(styles))
