"""
Selector matching for style sheet rules.

Only three selector forms are understood: ``.class``, ``#id`` and a bare tag
name. There is no specificity; any other syntax never matches.
"""

from typing import Optional, Sequence


def matches_selector(
    selector: str,
    tag: str,
    class_list: Sequence[str],
    element_id: Optional[str] = None,
) -> bool:
    """
    Test one selector against an element.

    Args:
        selector: Selector text
        tag: Element tag name
        class_list: Element classes
        element_id: Element ``id`` attribute, if any

    Returns:
        True if the selector applies to the element
    """
    selector = selector.strip()
    if not selector:
        return False

    if selector.startswith("."):
        return selector[1:] in class_list

    if selector.startswith("#"):
        return element_id is not None and element_id == selector[1:]

    return selector == tag
