"""
Numeric value extraction for style declarations.

Handles leading-number parsing of CSS lengths such as ``12px``, ``1.5em`` or ``-3``.
Units are not converted; only the numeric prefix is kept.
"""

import re
from typing import Optional, Union
import logging

logger = logging.getLogger(__name__)

_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_float(value: Union[str, int, float, None]) -> Optional[float]:
    """
    Extract the leading number from a style value.

    Args:
        value: Raw value (e.g. ``"12px"``, ``"0.5"``, ``".75em"``)

    Returns:
        Parsed number, or None when the value does not start with a number
    """
    if value is None:
        return None

    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        return float(value)

    match = _NUMBER_PREFIX.match(value)
    if not match:
        logger.debug(f"Not a numeric value: {value!r}")
        return None

    return float(match.group(1))
