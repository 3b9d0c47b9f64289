"""Human-readable number formatting helpers."""

from __future__ import annotations


def domain_format_count(value: int) -> str:
    """Format an integer count with comma thousands separators.

    Args:
        value: Count to format.

    Returns:
        str: Grouped digits, for example `1234567` -> `1,234,567`.

    Raises:
        TypeError: Raised when value is not an integer.
    """

    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("value must be an int")
    return f"{value:,}"
