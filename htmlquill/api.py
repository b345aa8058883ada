"""
htmlquill - Simple High-Level API

Conversion of markup (and optional style sheet text) into render node trees.

Example:
    from htmlquill import convert

    nodes = convert("<h1>Title</h1><p class='lead'>Hello</p>", ".lead { color: #333 }")
    for node in nodes:
        print(node.kind, node.get_text())
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .builder.tree_builder import TreeBuilder
from .exceptions import ParsingError, StyleError
from .models.render_node import RenderNode
from .parser.html_tokenizer import tokenize
from .parser.stylesheet import StyleRule, combine_style_text, extract_style_blocks, parse_stylesheet
from .styles.style_resolver import StyleResolver

logger = logging.getLogger(__name__)


@dataclass
class ParseSession:
    """
    State of one conversion: its inputs and the ordered rule list.

    A session is created per ``convert`` call and discarded afterwards; it is
    never shared between conversions.
    """

    markup: str
    external_css: Optional[str] = None
    rules: List[StyleRule] = field(default_factory=list)

    @classmethod
    def create(cls, markup: str, external_css: Optional[str] = None) -> "ParseSession":
        """Extract embedded style blocks and parse them with the external style text."""
        css = combine_style_text(extract_style_blocks(markup), external_css)
        rules = parse_stylesheet(css)
        logger.debug(f"Parsed {len(rules)} style rule(s)")
        return cls(markup=markup, external_css=external_css, rules=rules)

    def build(self) -> List[RenderNode]:
        """Run the markup through the tokenizer and tree builder."""
        builder = TreeBuilder(StyleResolver(self.rules))
        if not tokenize(self.markup, builder):
            logger.warning("Markup was only partially converted")
        return builder.finish()


def convert(markup: str, external_css: Optional[str] = None) -> List[RenderNode]:
    """
    Convert markup into a forest of render nodes.

    Malformed markup or style sheets never raise; the best-effort tree is returned.

    Args:
        markup: Raw markup
        external_css: Style sheet text ranked after the embedded ``<style>`` blocks

    Returns:
        Root nodes in document order
    """
    if not isinstance(markup, str):
        raise ParsingError("Markup must be a string", type(markup).__name__)
    if external_css is not None and not isinstance(external_css, str):
        raise StyleError("Style sheet text must be a string", type(external_css).__name__)

    session = ParseSession.create(markup, external_css)
    nodes = session.build()
    logger.debug(f"Converted markup into {len(nodes)} root node(s)")
    return nodes


def convert_file(
    path: Union[str, Path],
    css_path: Optional[Union[str, Path]] = None,
    encoding: str = "utf-8",
) -> List[RenderNode]:
    """
    Convert a markup file, optionally with an external style sheet file.

    Args:
        path: Markup file path
        css_path: External style sheet path
        encoding: Encoding of both files

    Returns:
        Root nodes in document order
    """
    path = Path(path)
    try:
        markup = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise ParsingError(f"Cannot read markup file {path}", str(e)) from e

    external_css = None
    if css_path is not None:
        css_path = Path(css_path)
        try:
            external_css = css_path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise StyleError(f"Cannot read style sheet {css_path}", str(e)) from e

    return convert(markup, external_css)
