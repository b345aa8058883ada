"""Style cascade for markup elements."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional


StyleDict = Dict[str, Any]


def merge_style_properties(base_style: StyleDict, override_style: Optional[StyleDict]) -> StyleDict:
    """Return a new dictionary where ``override_style`` wins per property."""
    result = dict(base_style)
    if override_style:
        result.update(override_style)
    return result


def cascade_styles(
    user_agent: StyleDict,
    matched_rules: Iterable[StyleDict] = (),
    inline: Optional[StyleDict] = None,
) -> StyleDict:
    """
    Compose the final style of an element from its three layers.

    Layers are applied in order, last write wins per property:

    1. ``user_agent`` - built-in defaults for the tag
    2. ``matched_rules`` - styles of every matching rule, in document order
    3. ``inline`` - the element's own ``style`` attribute

    None of the inputs are modified.
    """
    style = merge_style_properties({}, user_agent)

    for rule_style in matched_rules:
        style = merge_style_properties(style, rule_style)

    return merge_style_properties(style, inline)
