"""Custom exceptions for the calculation core.

The operator functions raise these; ``operations.calculate`` turns them
into ``Failure`` values, so they never reach the state machine.
"""

from typing import Any

from calccore.models import ErrorKind


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    kind = ErrorKind.INVALID_OPERATION

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class DivisionByZeroError(CalculatorError):
    """Raised when dividing or taking a remainder by zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class NumberTooLargeError(CalculatorError):
    """Raised when a result is not finite or exceeds the safe-integer bound."""

    kind = ErrorKind.NUMBER_TOO_LARGE

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__(f"Result too large in {operation}", operands)
        self.operation = operation
        self.operands = operands


class InvalidInputError(CalculatorError):
    """Raised when an operand or a key press is invalid (NaN, Inf, wrong type)."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class InvalidOperationError(CalculatorError):
    """Raised for an operator or action the core does not know."""

    kind = ErrorKind.INVALID_OPERATION

    def __init__(self, operation: Any) -> None:
        super().__init__("Unsupported operation", operation)
        self.operation = operation


class ConfigurationError(CalculatorError):
    """Raised when an environment setting cannot be understood."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Invalid value for {name}", value)
        self.name = name
