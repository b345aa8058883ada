"""
Default (user-agent) styles for markup elements.

Handles the baseline style every element starts from and the per-tag overrides
for headings and paragraphs.
"""

from typing import Any, Dict

from ..utils.enums import FontWeight


BASE_STYLES: Dict[str, Any] = {
    "font_size": 12.0,
    "font_family": "body",
    "font_weight": FontWeight.NORMAL,
    "color": "#000000",
    "text_align": "left",
    "margin_top": 0.0,
    "margin_bottom": 0.0,
}

TAG_OVERRIDES: Dict[str, Dict[str, Any]] = {
    "h1": {"font_size": 24.0, "font_weight": FontWeight.BOLD, "margin_bottom": 10.0},
    "h2": {"font_size": 20.0, "font_weight": FontWeight.BOLD, "margin_bottom": 10.0},
    "h3": {"font_size": 18.0, "font_weight": FontWeight.BOLD, "margin_bottom": 8.0},
    "p": {"margin_bottom": 10.0},
}


def get_user_agent_styles(tag: str) -> Dict[str, Any]:
    """
    Get the user-agent style layer for a tag.

    Args:
        tag: Lower-case tag name

    Returns:
        New dictionary with the baseline merged with the tag's overrides
    """
    styles = dict(BASE_STYLES)
    overrides = TAG_OVERRIDES.get(tag)
    if overrides:
        styles.update(overrides)
    return styles
