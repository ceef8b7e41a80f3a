"""Display formatting for computed values."""

import math
from decimal import Decimal

# Decimal places kept on the display; hides binary floating-point noise
DISPLAY_PRECISION = 10

ERROR_TEXT = "Error"


def format_result(value: float) -> str:
    """
    Format a number for the display.

    Rounds to 10 decimal places, takes the shortest text that reads back
    as the rounded value, expands it without exponent notation and drops
    trailing zeros (and a dangling decimal point).

    Example:
        >>> format_result(0.1 + 0.2)
        '0.3'
        >>> format_result(1.5000000000)
        '1.5'
        >>> format_result(3)
        '3'
        >>> format_result(1e21)
        '1000000000000000000000'
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return ERROR_TEXT

    try:
        value = float(value)
    except OverflowError:
        return ERROR_TEXT

    if not math.isfinite(value):
        return ERROR_TEXT

    rounded = round(value, DISPLAY_PRECISION)
    formatted = format(Decimal(repr(rounded)), "f")

    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")

    if formatted == "-0":
        return "0"

    return formatted
