"""Percentage formatting.

Percentages are rendered as strings with exactly two decimals and a
trailing "%", e.g. "42.50%". Values are computed exactly with Decimal and
rounded half-up. A zero denominator yields ZERO_PERCENT.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

ZERO_PERCENT = "0.00%"

_TWO_PLACES = Decimal("0.01")


def percent_value(part: int, total: int) -> Decimal:
    """Compute part/total * 100 rounded half-up to two decimals.

    Args:
        part: Size of the subgroup.
        total: Size of the base group.

    Returns:
        Rounded Decimal, Decimal("0.00") when total is not positive.
    """
    if total <= 0:
        return Decimal("0.00")
    ratio = Decimal(part) * 100 / Decimal(total)
    return ratio.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


def format_percent(part: int, total: int) -> str:
    """Format part/total as a two-decimal percentage string.

    Args:
        part: Size of the subgroup.
        total: Size of the base group.

    Returns:
        String such as "33.33%". ZERO_PERCENT when total is 0.
    """
    if total <= 0:
        return ZERO_PERCENT
    return f"{percent_value(part, total)}%"


def parse_percent(text: str) -> Decimal:
    """Parse a string produced by format_percent back into a Decimal."""
    if not text.endswith("%"):
        raise ValueError(f"Not a percentage: {text!r}")
    return Decimal(text[:-1])
