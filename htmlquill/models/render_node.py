"""
Render node models produced by the tree builder.

Every node carries a resolved style dictionary. Text, break and image nodes are
leaves; table, row, cell and block nodes own an ordered list of children which
is created empty and filled while the tree is built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from ..utils.enums import NodeKind

StyleDict = Dict[str, Any]


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


@dataclass(slots=True)
class RenderNode:
    """Base render node: a kind tag plus the resolved styles."""

    kind: NodeKind
    styles: StyleDict = field(default_factory=dict)

    @property
    def is_container(self) -> bool:
        return self.kind.is_container

    def iter_nodes(self) -> Iterator["RenderNode"]:
        """Walk this node and its descendants in document order."""
        yield self

    def get_text(self) -> str:
        return ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert node to a JSON-ready dictionary."""
        return {
            "type": self.kind.value,
            "styles": {key: _plain(value) for key, value in self.styles.items()},
        }


@dataclass(slots=True)
class TextNode(RenderNode):
    """Text run; styles are a snapshot of the enclosing element's styles."""

    text: str = ""

    def get_text(self) -> str:
        return self.text

    def to_dict(self) -> Dict[str, Any]:
        result = RenderNode.to_dict(self)
        result["text"] = self.text
        return result


@dataclass(slots=True)
class BreakNode(RenderNode):
    """Forced line break."""


@dataclass(slots=True)
class ImageNode(RenderNode):
    src: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = RenderNode.to_dict(self)
        result["src"] = self.src
        return result


@dataclass(slots=True)
class ContainerNode(RenderNode):
    """Table, row, cell or block node owning its children."""

    children: List[RenderNode] = field(default_factory=list)

    def add_child(self, node: RenderNode) -> None:
        self.children.append(node)

    def iter_nodes(self) -> Iterator[RenderNode]:
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def get_text(self) -> str:
        return "".join(child.get_text() for child in self.children)

    def to_dict(self) -> Dict[str, Any]:
        result = RenderNode.to_dict(self)
        result["children"] = [child.to_dict() for child in self.children]
        return result
