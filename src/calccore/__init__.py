"""
Calculation core for an immediate-execution arithmetic calculator.

The package provides:
- A pure arithmetic engine returning tagged results instead of raising
- Display formatting and entry validation/parsing
- A reducer-style state machine driven by key presses
- A ``Calculator`` session with history and undo
"""

from calccore.core import Calculator
from calccore.exceptions import (
    CalculatorError,
    ConfigurationError,
    DivisionByZeroError,
    InvalidInputError,
    InvalidOperationError,
    NumberTooLargeError,
)
from calccore.formatter import format_result
from calccore.keyboard import KEY_BINDINGS, press_key, resolve_key
from calccore.machine import (
    Action,
    calculate,
    clear,
    delete_last,
    dispatch,
    enter_decimal,
    enter_digit,
    select_operation,
    toggle_sign,
)
from calccore.models import (
    INITIAL_STATE,
    CalculationResult,
    CalculatorState,
    ErrorKind,
    Failure,
    Operator,
    Success,
)
from calccore.operations import (
    MAX_SAFE_INTEGER,
    add,
    divide,
    modulo,
    multiply,
    power,
    subtract,
)
from calccore.validators import parse_number, validate_number, validate_number_input

__all__ = [
    "INITIAL_STATE",
    "KEY_BINDINGS",
    "MAX_SAFE_INTEGER",
    "Action",
    "CalculationResult",
    "Calculator",
    "CalculatorError",
    "CalculatorState",
    "ConfigurationError",
    "DivisionByZeroError",
    "ErrorKind",
    "Failure",
    "InvalidInputError",
    "InvalidOperationError",
    "NumberTooLargeError",
    "Operator",
    "Success",
    "add",
    "calculate",
    "clear",
    "delete_last",
    "dispatch",
    "divide",
    "enter_decimal",
    "enter_digit",
    "format_result",
    "modulo",
    "multiply",
    "parse_number",
    "power",
    "press_key",
    "resolve_key",
    "select_operation",
    "subtract",
    "toggle_sign",
    "validate_number",
    "validate_number_input",
]

__version__ = "0.1.0"
