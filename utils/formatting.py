"""
Formatting utilities.
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal


def format_decimal(value: float, decimals: int = 2) -> str:
    """
    Format a number with a fixed number of decimal places.

    Ties round half up on the shortest decimal form of the value, so
    2.125 gives "2.13" (the `:.2f` format spec would give "2.12").

    Args:
        value: The number to format.
        decimals: Number of decimal places.

    Returns:
        Formatted string, e.g. "2350.00".
    """
    if not math.isfinite(value):
        return f"{value:.{decimals}f}"

    exact = Decimal(repr(float(value)))
    context = Context(prec=max(exact.adjusted(), 0) + decimals + 2)
    rounded = exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP, context=context)
    return format(rounded, "f")


def format_price(amount: int, currency: str = "HUF") -> str:
    """
    Format a whole-unit price for display, with thousands separators.

    Args:
        amount: The amount in whole units.
        currency: Currency code appended after the amount (default HUF).

    Returns:
        Formatted price string, e.g. "32,500,000 HUF".
    """
    return f"{amount:,} {currency}"
