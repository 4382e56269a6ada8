"""
Numeric cell normalization.

Export cells hold prices like "$1,234.50", blanks, or free text ("n/a").
Everything is read as the leading decimal number of the cell; anything
that does not start with a number becomes 0.0. Results are never negative.
"""

import math
import re
from typing import Optional

# Leading decimal literal: 12, 12., 12.5, .5, 1e3, -4.2
_DECIMAL_PREFIX_RE = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')

# Currency symbol, thousands separators and any whitespace
_PRICE_NOISE_RE = re.compile(r'[$,\s]')


def try_parse_decimal(value: Optional[str]) -> Optional[float]:
    """
    Parse the leading decimal number of a cell.

    Returns:
        The number, or None for blank, non-numeric, negative or
        non-finite cells
    """
    if not value:
        return None

    match = _DECIMAL_PREFIX_RE.match(value.strip())
    if not match:
        return None

    number = float(match.group(0))
    if math.isnan(number) or math.isinf(number) or number < 0:
        return None
    return number


def try_clean_price(value: Optional[str]) -> Optional[float]:
    """Like try_parse_decimal, after stripping '$', ',' and whitespace."""
    if not value:
        return None
    return try_parse_decimal(_PRICE_NOISE_RE.sub('', value))


def parse_decimal(value: Optional[str]) -> float:
    """
    Parse a weight-style cell, falling back to 0.0.

    Example:
        >>> parse_decimal('2.5 lbs')
        2.5
        >>> parse_decimal('n/a')
        0.0
    """
    number = try_parse_decimal(value)
    return 0.0 if number is None else number


def clean_price(value: Optional[str]) -> float:
    """
    Normalize a price cell to a float, falling back to 0.0.

    Example:
        >>> clean_price('$1,234.50')
        1234.5
        >>> clean_price('')
        0.0
    """
    number = try_clean_price(value)
    return 0.0 if number is None else number
