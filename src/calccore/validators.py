"""Input validation and parsing for typed operands."""

import math
import re
from typing import TypeVar

from calccore.exceptions import InvalidInputError
from calccore.models import ErrorKind, Failure, Success

T = TypeVar("T", int, float)

# Optional leading minus, digits, at most one decimal point, more digits.
NUMBER_INPUT_PATTERN = re.compile(r"-?[0-9]*\.?[0-9]*")

# Entries that match the grammar but do not denote a number yet.
INCOMPLETE_ENTRIES = frozenset({"", "-", ".", "-."})


def validate_number(value: T) -> T:
    """
    Validate that a value is a finite number.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is NaN, Inf, or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")

    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidInputError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidInputError(value, "Infinity is not allowed")

    return value


def matches_number_grammar(text: str) -> bool:
    """Return True if ``text`` is a valid (possibly incomplete) entry."""
    return isinstance(text, str) and NUMBER_INPUT_PATTERN.fullmatch(text) is not None


def validate_number_input(text: str, required: bool = True) -> Success | Failure:
    """
    Validate a typed operand against the entry grammar.

    Args:
        text: Raw entry text
        required: Whether a value must be present. With ``required=False``
            only the grammar is checked and the empty string is accepted.

    Returns:
        ``Success()`` if valid, otherwise ``Failure`` with
        ``EMPTY_INPUT`` or ``INVALID_INPUT``
    """
    if text == "":
        return Failure(ErrorKind.EMPTY_INPUT) if required else Success()

    if not matches_number_grammar(text):
        return Failure(ErrorKind.INVALID_INPUT)

    return Success()


def parse_number(text: str) -> float | None:
    """
    Parse entry text to a finite float.

    Returns None for incomplete entries (``""``, ``"-"``, ``"."``),
    for text outside the entry grammar, and for anything that does not
    parse to a finite number.
    """
    if text in INCOMPLETE_ENTRIES or not matches_number_grammar(text):
        return None

    try:
        parsed = float(text)
    except ValueError:
        return None

    if not math.isfinite(parsed):
        return None

    return parsed
