"""
Style resolver for markup elements.

Implements style resolution for one conversion: user-agent defaults, then every
matching style sheet rule in document order, then the inline ``style`` attribute.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence
import logging

from .declarations import parse_style_attribute, to_style_properties
from .defaults import get_user_agent_styles
from .selector import matches_selector
from .style_cascade_engine import cascade_styles

if TYPE_CHECKING:
    from ..parser.stylesheet import StyleRule

logger = logging.getLogger(__name__)


class StyleResolver:
    """
    Resolves element styles against one ordered rule list.

    A resolver belongs to a single conversion; it holds no state beyond the rules
    it was created with and never modifies them.
    """

    def __init__(self, rules: Sequence[StyleRule] = ()):
        """
        Initialize style resolver.

        Args:
            rules: Style sheet rules in document order
        """
        self.rules: List[StyleRule] = list(rules)
        self._rule_styles: List[Dict[str, Any]] = [
            to_style_properties(rule.declarations) for rule in self.rules
        ]

    def matching_rule_styles(
        self,
        tag: str,
        class_list: Sequence[str],
        element_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Return the typed styles of every rule matching the element, in order."""
        return [
            styles
            for rule, styles in zip(self.rules, self._rule_styles)
            if matches_selector(rule.selector, tag, class_list, element_id)
        ]

    def resolve(
        self,
        tag: str,
        attributes: Mapping[str, str],
        class_list: Optional[Sequence[str]] = None,
        element_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Resolve the style of one element.

        Args:
            tag: Element tag name
            attributes: Element attributes
            class_list: Element classes (taken from ``class`` when omitted)
            element_id: Element id (taken from ``id`` when omitted)

        Returns:
            New resolved style dictionary
        """
        if class_list is None:
            class_list = (attributes.get("class") or "").split()
        if element_id is None:
            element_id = attributes.get("id")

        matched = self.matching_rule_styles(tag, class_list, element_id)
        inline = parse_style_attribute(attributes.get("style"))

        if matched:
            logger.debug(f"{len(matched)} rule(s) matched <{tag}>")

        return cascade_styles(get_user_agent_styles(tag), matched, inline)
