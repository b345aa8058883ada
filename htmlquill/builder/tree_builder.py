"""
Tree builder turning a flat open/text/close event stream into render nodes.

The builder keeps a stack of open container nodes. Each open event resolves the
element's style and asks the node factory for a node; the node is appended to
the current stack top (or to the roots) and pushed unless the tag is void.
Close events pop without checking the tag name, so mismatched markup is handled
best-effort and never raises.
"""

from __future__ import annotations

import logging
import re
from typing import List, Mapping, Optional

from ..models.render_node import ContainerNode, RenderNode, TextNode
from ..styles.style_resolver import StyleResolver
from ..utils.enums import NodeKind
from .node_factory import create_node, is_void_element

logger = logging.getLogger(__name__)

_LINE_BREAKS = re.compile(r"[\n\r\t]+")
_WHITESPACE = re.compile(r"\s+")

STYLE_TAG = "style"


def collapse_whitespace(text: str) -> str:
    """Collapse line breaks, tabs and whitespace runs into single spaces."""
    return _WHITESPACE.sub(" ", _LINE_BREAKS.sub(" ", text))


class TreeBuilder:
    """Builds a render node forest from markup events."""

    def __init__(self, resolver: Optional[StyleResolver] = None):
        """
        Initialize tree builder.

        Args:
            resolver: Style resolver of the current conversion
        """
        self.resolver = resolver or StyleResolver()
        self.roots: List[RenderNode] = []
        self._stack: List[ContainerNode] = []

    @property
    def depth(self) -> int:
        """Number of currently open elements."""
        return len(self._stack)

    @property
    def current(self) -> Optional[ContainerNode]:
        return self._stack[-1] if self._stack else None

    def _attach(self, node: RenderNode) -> None:
        parent = self.current
        if parent is None:
            self.roots.append(node)
        else:
            parent.add_child(node)

    def open(self, tag: str, attributes: Optional[Mapping[str, str]] = None) -> Optional[RenderNode]:
        """
        Handle an open tag event.

        Returns:
            The created node, or None when the tag is unsupported
        """
        attributes = attributes or {}
        styles = self.resolver.resolve(tag, attributes)
        node = create_node(tag, attributes, styles)
        if node is None:
            return None

        self._attach(node)
        if not is_void_element(tag) and isinstance(node, ContainerNode):
            self._stack.append(node)
        return node

    def text(self, raw: str) -> Optional[TextNode]:
        """
        Handle a text event.

        Text outside any open element and whitespace-only text are discarded.
        """
        parent = self.current
        if parent is None:
            if raw.strip():
                logger.debug(f"Discarding root-level text: {raw.strip()[:40]!r}")
            return None

        cleaned = collapse_whitespace(raw)
        if not cleaned.strip():
            return None

        node = TextNode(NodeKind.TEXT, dict(parent.styles), text=cleaned)
        parent.add_child(node)
        return node

    def close(self, tag: str) -> None:
        """Handle a close tag event."""
        if is_void_element(tag) or tag == STYLE_TAG:
            return

        if not self._stack:
            logger.debug(f"Ignoring </{tag}> with no open element")
            return

        self._stack.pop()

    def finish(self) -> List[RenderNode]:
        """Return the root nodes; elements still open stay attached where they are."""
        if self._stack:
            logger.debug(f"{len(self._stack)} element(s) left open at end of input")
        return self.roots
