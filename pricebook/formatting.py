"""
Display formatting for catalog values.

Formatting never touches the stored records; it only renders numbers
for people to read.
"""


def format_currency(value: float) -> str:
    """
    Render a price as US dollars.

    Example:
        >>> format_currency(1234.5)
        '$1,234.50'
        >>> format_currency(-3)
        '-$3.00'
    """
    if value < 0:
        return f"-${-value:,.2f}"
    return f"${value:,.2f}"


def format_weight(value: float) -> str:
    """Render a shipping weight in pounds, e.g. '2.500 lbs'."""
    return f"{value:.3f} lbs"
