"""
Styles module for element style resolution.

This module contains the user-agent defaults, declaration parsing, selector
matching and the cascade that combines them.
"""

from .defaults import get_user_agent_styles
from .declarations import parse_style_attribute, split_declarations, to_style_properties
from .selector import matches_selector
from .style_cascade_engine import cascade_styles, merge_style_properties
from .style_resolver import StyleResolver

__all__ = [
    "get_user_agent_styles",
    "parse_style_attribute",
    "split_declarations",
    "to_style_properties",
    "matches_selector",
    "cascade_styles",
    "merge_style_properties",
    "StyleResolver",
]
