"""Value types shared by the engine, the parser and the state machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operator(str, Enum):
    """The six binary operators. Values are the symbols shown on the display."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"
    POWER = "^"
    MODULO = "%"

    def __str__(self) -> str:
        return self.value


class ErrorKind(str, Enum):
    """Domain error kinds. Values are the messages shown in place of a number."""

    DIVISION_BY_ZERO = "Cannot divide by zero"
    INVALID_INPUT = "Please enter valid numbers"
    EMPTY_INPUT = "Please enter both numbers"
    INVALID_OPERATION = "Invalid operation"
    NUMBER_TOO_LARGE = "Number too large"

    @property
    def message(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Success:
    """Successful outcome of a calculation or validation."""

    value: float | None = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying the error kind."""

    kind: ErrorKind

    @property
    def ok(self) -> bool:
        return False


CalculationResult = Success | Failure


@dataclass(frozen=True)
class CalculatorState:
    """
    Immutable snapshot of the calculator.

    Every action returns a new instance; fields are never mutated in place.

    Invariants:
        - error and result are never both set
        - operation is only set alongside previous_value
        - display_value is never empty
        - current_input, when non-empty, matches the entry grammar
    """

    current_input: str = ""
    previous_value: float | None = None
    operation: Operator | None = None
    display_value: str = "0"
    error: ErrorKind | None = None
    result: float | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def has_result(self) -> bool:
        return self.result is not None

    def __str__(self) -> str:
        pending = f" {self.previous_value} {self.operation}" if self.operation else ""
        return f"[{self.display_value}]{pending}"


INITIAL_STATE = CalculatorState()
