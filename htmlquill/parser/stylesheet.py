"""
Style sheet extraction and rule parsing.

Pulls the text of embedded ``<style>`` blocks out of raw markup and splits
style sheet text into an ordered list of ``selector { declarations }`` rules.

Both scanners are deliberately flat:

- a style block ends at the first closing ``</style`` after its opening tag, so
  a literal ``</style`` inside the block text truncates that block;
- rule blocks must not nest. A block whose body contains another ``{ ... }``
  (``@media`` and friends) is skipped as a whole.

Comments and at-rules are not recognised; their text simply ends up in a
selector that never matches.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..styles.declarations import split_declarations

logger = logging.getLogger(__name__)

_STYLE_OPEN = "<style"
_STYLE_CLOSE = "</style"


@dataclass(frozen=True)
class StyleRule:
    """One style sheet rule: a selector and its raw declarations."""

    selector: str
    declarations: Dict[str, str] = field(default_factory=dict)


def _is_tag_boundary(markup: str, index: int) -> bool:
    return index >= len(markup) or markup[index] in "> \t\r\n\f/"


def extract_style_blocks(markup: Optional[str]) -> str:
    """
    Concatenate the text of every embedded style block.

    Args:
        markup: Raw markup

    Returns:
        Block contents in document order, separated by newlines
    """
    if not markup:
        return ""

    lowered = markup.lower()
    blocks: List[str] = []
    position = 0

    while True:
        start = lowered.find(_STYLE_OPEN, position)
        if start == -1:
            break

        if not _is_tag_boundary(markup, start + len(_STYLE_OPEN)):
            position = start + len(_STYLE_OPEN)
            continue

        open_end = markup.find(">", start)
        if open_end == -1:
            break

        close_start = lowered.find(_STYLE_CLOSE, open_end + 1)
        if close_start == -1:
            logger.debug(f"Unterminated style block at offset {start}")
            break

        blocks.append(markup[open_end + 1:close_start])

        close_end = markup.find(">", close_start)
        position = len(markup) if close_end == -1 else close_end + 1

    return "\n".join(blocks)


def combine_style_text(embedded: str, external: Optional[str] = None) -> str:
    """Join embedded and external style text; external text comes last."""
    parts = [part for part in (embedded, external or "") if part.strip()]
    return "\n".join(parts)


def parse_stylesheet(css: Optional[str]) -> List[StyleRule]:
    """
    Split style sheet text into rules, preserving their order.

    Args:
        css: Style sheet text

    Returns:
        Ordered list of rules
    """
    rules: List[StyleRule] = []
    if not css:
        return rules

    depth = 0
    nested = False
    selector_start = 0
    body_start = 0
    selector = ""

    for index, char in enumerate(css):
        if char == "{":
            if depth == 0:
                selector = css[selector_start:index].strip()
                body_start = index + 1
                nested = False
            else:
                nested = True
            depth += 1

        elif char == "}":
            if depth == 0:
                # stray closing brace, discard the pending selector text
                selector_start = index + 1
                continue

            depth -= 1
            if depth > 0:
                continue

            body = css[body_start:index]
            selector_start = index + 1
            if nested:
                logger.debug(f"Skipping nested block for selector {selector!r}")
                continue
            if not selector:
                logger.debug("Skipping rule without selector")
                continue

            rules.append(StyleRule(selector, split_declarations(body)))

    if depth > 0:
        logger.debug(f"Unterminated rule block for selector {selector!r}")

    return rules
