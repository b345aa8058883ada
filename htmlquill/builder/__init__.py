"""
Builder module for render tree construction.

This module contains the node factory mapping tags to render nodes and the
tree builder driving it from markup events.
"""

from .node_factory import TAG_KINDS, VOID_ELEMENTS, create_node, is_void_element, lookup_tag_kind
from .tree_builder import TreeBuilder, collapse_whitespace

__all__ = [
    "TAG_KINDS",
    "VOID_ELEMENTS",
    "create_node",
    "is_void_element",
    "lookup_tag_kind",
    "TreeBuilder",
    "collapse_whitespace",
]
