"""
Style declaration parsing.

Splits ``property: value`` lists (style attributes and rule bodies) and maps the
supported CSS properties onto typed style keys. Unknown properties are ignored.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from ..utils.enums import FontWeight
from ..utils.units import parse_float

logger = logging.getLogger(__name__)

StyleDict = Dict[str, Any]


def iter_declarations(text: Optional[str]) -> Iterator[Tuple[str, str]]:
    """
    Yield ``(property, value)`` pairs from declaration text in source order.

    Each declaration is split on its first ``:`` and both sides are trimmed.
    Declarations missing a property or a value are dropped.

    Args:
        text: Declaration text, e.g. ``"color: red; margin: 4px"``
    """
    if not text:
        return

    for declaration in text.split(";"):
        if ":" not in declaration:
            if declaration.strip():
                logger.debug(f"Dropping declaration without value: {declaration.strip()!r}")
            continue

        prop, value = declaration.split(":", 1)
        prop = prop.strip().lower()
        value = value.strip()
        if not prop or not value:
            logger.debug(f"Dropping incomplete declaration: {declaration.strip()!r}")
            continue

        yield prop, value


def split_declarations(text: Optional[str]) -> Dict[str, str]:
    """Collect declarations into a mapping; a repeated property keeps its last value."""
    return dict(iter_declarations(text))


def _numeric(*keys: str) -> Callable[[str, StyleDict], None]:
    def apply(value: str, styles: StyleDict) -> None:
        number = parse_float(value)
        if number is None:
            logger.debug(f"Ignoring non-numeric value {value!r} for {', '.join(keys)}")
            return
        for key in keys:
            styles[key] = number
    return apply


def _verbatim(key: str) -> Callable[[str, StyleDict], None]:
    def apply(value: str, styles: StyleDict) -> None:
        styles[key] = value
    return apply


def _font_weight(value: str, styles: StyleDict) -> None:
    styles["font_weight"] = FontWeight.BOLD if value == "bold" else FontWeight.NORMAL


PROPERTY_HANDLERS: Dict[str, Callable[[str, StyleDict], None]] = {
    "font-size": _numeric("font_size"),
    "color": _verbatim("color"),
    "text-align": _verbatim("text_align"),
    "font-weight": _font_weight,
    "margin-top": _numeric("margin_top"),
    "margin-bottom": _numeric("margin_bottom"),
    "margin": _numeric("margin_top", "margin_bottom"),
    "background-color": _verbatim("background_color"),
    "border-bottom": _verbatim("border_bottom"),
    "padding": _numeric("padding"),
    "width": _verbatim("width"),
}


def to_style_properties(
    declarations: Union[Mapping[str, str], Iterable[Tuple[str, str]]],
) -> StyleDict:
    """
    Convert raw declarations into typed style properties.

    Declarations are applied in order, so ``margin`` followed by ``margin-top``
    leaves the later ``margin-top`` value in place.

    Args:
        declarations: Property -> raw value mapping, or ``(property, value)`` pairs

    Returns:
        New style dictionary containing only supported properties
    """
    pairs = declarations.items() if isinstance(declarations, Mapping) else declarations

    styles: StyleDict = {}
    for prop, value in pairs:
        handler = PROPERTY_HANDLERS.get(prop)
        if handler is None:
            continue
        handler(value, styles)
    return styles


def parse_style_attribute(text: Optional[str]) -> StyleDict:
    """Parse an inline ``style`` attribute into typed style properties."""
    return to_style_properties(iter_declarations(text))
