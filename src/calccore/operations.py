"""Arithmetic engine: one binary operation at a time, errors returned as data."""

import logging
import math

from calccore.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InvalidOperationError,
    NumberTooLargeError,
)
from calccore.models import CalculationResult, ErrorKind, Failure, Operator, Success
from calccore.validators import validate_number

logger = logging.getLogger(__name__)

# Largest integer a double represents exactly
MAX_SAFE_INTEGER = 2**53 - 1


def _check_result(result: float, operation: str, a: float, b: float) -> float:
    if not math.isfinite(result) or abs(result) > MAX_SAFE_INTEGER:
        raise NumberTooLargeError(operation, a, b)
    return result


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        InvalidInputError: If inputs are invalid
        NumberTooLargeError: If the sum leaves the safe range
    """
    validate_number(a)
    validate_number(b)
    return _check_result(a + b, "addition", a, b)


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0

    Raises:
        InvalidInputError: If inputs are invalid
        NumberTooLargeError: If the difference leaves the safe range
    """
    validate_number(a)
    validate_number(b)
    return _check_result(a - b, "subtraction", a, b)


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0

    Raises:
        InvalidInputError: If inputs are invalid
        NumberTooLargeError: If the product leaves the safe range
    """
    validate_number(a)
    validate_number(b)
    return _check_result(a * b, "multiplication", a, b)


def divide(a: float, b: float) -> float:
    """
    Divide a by b (true division).

    Raises:
        DivisionByZeroError: If b is zero
        InvalidInputError: If inputs are invalid
        NumberTooLargeError: If the quotient leaves the safe range
    """
    if b == 0:
        raise DivisionByZeroError(a)

    validate_number(a)
    validate_number(b)
    return _check_result(a / b, "division", a, b)


def power(base: float, exponent: float) -> float:
    """
    Raise base to the power of exponent.

    A zero base with a negative exponent and a negative base with a
    fractional exponent have no finite real result and are reported as
    too large, like any other non-finite result.

    Raises:
        InvalidInputError: If inputs are invalid
        NumberTooLargeError: If the result is not finite or too large
    """
    validate_number(base)
    validate_number(exponent)

    if base == 0 and exponent < 0:
        raise NumberTooLargeError("exponentiation", base, exponent)

    if base < 0 and not float(exponent).is_integer():
        raise NumberTooLargeError("exponentiation", base, exponent)

    try:
        result = math.pow(base, exponent)
    except OverflowError as e:
        raise NumberTooLargeError("exponentiation", base, exponent) from e

    return _check_result(result, "exponentiation", base, exponent)


def modulo(a: float, b: float) -> float:
    """
    Remainder of truncated division; the sign follows the dividend.

    Properties:
        - modulo(-17, 5) == -2
        - Reconstruction: a == math.trunc(a / b) * b + modulo(a, b) (integers)

    Raises:
        DivisionByZeroError: If b is zero
        InvalidInputError: If inputs are invalid
    """
    if b == 0:
        raise DivisionByZeroError(a)

    validate_number(a)
    validate_number(b)
    return _check_result(math.fmod(a, b), "modulo", a, b)


def apply_operator(first: float, second: float, operator: Operator) -> float:
    """Apply ``operator`` and return the raw value, raising on failure."""
    match operator:
        case Operator.ADD:
            return add(first, second)
        case Operator.SUBTRACT:
            return subtract(first, second)
        case Operator.MULTIPLY:
            return multiply(first, second)
        case Operator.DIVIDE:
            return divide(first, second)
        case Operator.POWER:
            return power(first, second)
        case Operator.MODULO:
            return modulo(first, second)
        case _:
            raise InvalidOperationError(operator)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def calculate(first: float, second: float, operator: Operator) -> CalculationResult:
    """
    Compute ``first <operator> second``.

    Rules, in order: division or modulo by zero, non-finite operands,
    the operation itself, then the result range check. Nothing is raised;
    the outcome is a ``Success`` with the value or a ``Failure`` with the
    error kind.

    Example:
        >>> calculate(5, 3, Operator.ADD)
        Success(value=8.0)
        >>> calculate(5, 0, Operator.DIVIDE)
        Failure(kind=<ErrorKind.DIVISION_BY_ZERO: 'Cannot divide by zero'>)
    """
    if operator in (Operator.DIVIDE, Operator.MODULO) and second == 0:
        logger.debug("Rejected %s %s %s: division by zero", first, operator, second)
        return Failure(ErrorKind.DIVISION_BY_ZERO)

    if not (_is_number(first) and _is_number(second)):
        logger.debug("Rejected non-numeric operands %r, %r", first, second)
        return Failure(ErrorKind.INVALID_INPUT)

    # Integers beyond the float range cannot be converted
    try:
        a, b = float(first), float(second)
    except OverflowError:
        logger.debug("Rejected operands outside the float range")
        return Failure(ErrorKind.NUMBER_TOO_LARGE)

    if not (math.isfinite(a) and math.isfinite(b)):
        logger.debug("Rejected non-finite operands %r, %r", first, second)
        return Failure(ErrorKind.INVALID_INPUT)

    try:
        value = apply_operator(a, b, operator)
    except CalculatorError as e:
        logger.debug("Calculation %s %s %s failed: %s", first, operator, second, e)
        return Failure(e.kind)
    except Exception:
        logger.exception("Unexpected failure applying %s to %r, %r", operator, first, second)
        return Failure(ErrorKind.INVALID_OPERATION)

    return Success(value)
