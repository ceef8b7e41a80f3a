"""
Calculator state machine.

Each action is a pure function taking the current ``CalculatorState`` and
returning a replacement. Evaluation is immediate: choosing a second
operator resolves the pending one first, left to right, with no operator
precedence.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum

from calccore import operations
from calccore.exceptions import InvalidInputError, InvalidOperationError
from calccore.formatter import format_result
from calccore.models import INITIAL_STATE, CalculatorState, ErrorKind, Failure, Operator
from calccore.validators import parse_number

logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789")


class Action(str, Enum):
    """Actions the UI layer can dispatch."""

    ENTER_DIGIT = "enter_digit"
    ENTER_DECIMAL = "enter_decimal"
    TOGGLE_SIGN = "toggle_sign"
    SELECT_OPERATION = "select_operation"
    CALCULATE = "calculate"
    CLEAR = "clear"
    DELETE_LAST = "delete_last"


def _fresh_entry(text: str) -> CalculatorState:
    return CalculatorState(current_input=text, display_value=text)


def _error_state(kind: ErrorKind) -> CalculatorState:
    return CalculatorState(display_value=kind.message, error=kind)


def _needs_fresh_entry(state: CalculatorState) -> bool:
    return state.error is not None or state.result is not None


def enter_digit(state: CalculatorState, digit: str) -> CalculatorState:
    """Append a digit, or start a new entry after an error or a result."""
    if not isinstance(digit, str) or digit not in DIGITS:
        raise InvalidInputError(digit, "Expected a single digit 0-9")

    if _needs_fresh_entry(state):
        return _fresh_entry(digit)

    text = state.current_input + digit
    return replace(state, current_input=text, display_value=text)


def enter_decimal(state: CalculatorState) -> CalculatorState:
    """Add a decimal point; at most one per entry."""
    if _needs_fresh_entry(state):
        return _fresh_entry("0.")

    if "." in state.current_input:
        return state

    if state.current_input == "":
        text = "0."
    else:
        text = state.current_input + "."
    return replace(state, current_input=text, display_value=text)


def toggle_sign(state: CalculatorState) -> CalculatorState:
    """Flip the sign of the entry being typed."""
    if _needs_fresh_entry(state):
        return _fresh_entry("-")

    if state.current_input.startswith("-"):
        text = state.current_input[1:]
        return replace(state, current_input=text, display_value=text or "0")

    text = "-" + state.current_input
    return replace(state, current_input=text, display_value=text)


def select_operation(state: CalculatorState, operation: Operator) -> CalculatorState:
    """
    Latch an operator.

    If an operation is already pending and a second operand has been typed,
    the pending operation is resolved first and its result becomes the new
    left operand. With nothing to operate on the state is returned unchanged.
    """
    if not isinstance(operation, Operator):
        raise InvalidOperationError(operation)

    if state.error is not None:
        return INITIAL_STATE

    current = parse_number(state.current_input)

    if current is None and state.previous_value is None:
        logger.debug("Ignoring %s: no operand entered", operation)
        return state

    if state.operation is not None and state.previous_value is not None and current is not None:
        outcome = operations.calculate(state.previous_value, current, state.operation)
        if isinstance(outcome, Failure):
            return _error_state(outcome.kind)

        return replace(
            state,
            previous_value=outcome.value,
            operation=operation,
            current_input="",
            display_value=format_result(outcome.value),
            result=None,
        )

    return replace(
        state,
        previous_value=current if current is not None else state.previous_value,
        operation=operation,
        current_input="",
        result=None,
    )


def calculate(state: CalculatorState) -> CalculatorState:
    """Resolve the pending operation (the equals key)."""
    if state.operation is None or state.previous_value is None:
        return state

    current = parse_number(state.current_input)
    if current is None:
        logger.debug("Ignoring equals: no second operand")
        return state

    outcome = operations.calculate(state.previous_value, current, state.operation)
    if isinstance(outcome, Failure):
        return _error_state(outcome.kind)

    formatted = format_result(outcome.value)
    return CalculatorState(
        current_input=formatted,
        display_value=formatted,
        result=outcome.value,
    )


def clear(state: CalculatorState | None = None) -> CalculatorState:
    """Reset to the initial state."""
    return INITIAL_STATE


def delete_last(state: CalculatorState) -> CalculatorState:
    """Remove the last typed character; a finished result or error is cleared."""
    if _needs_fresh_entry(state):
        return INITIAL_STATE

    if state.current_input == "":
        return state

    text = state.current_input[:-1]
    display = text if text not in ("", "-") else "0"
    return replace(state, current_input=text, display_value=display)


def dispatch(
    state: CalculatorState, action: Action, argument: str | Operator | None = None
) -> CalculatorState:
    """
    Reducer entry point: apply ``action`` to ``state``.

    ``argument`` is the digit for ``ENTER_DIGIT`` and the operator for
    ``SELECT_OPERATION``; other actions ignore it.

    Raises:
        InvalidOperationError: If the action is unknown
        InvalidInputError: If a digit argument is not 0-9
    """
    match action:
        case Action.ENTER_DIGIT:
            return enter_digit(state, argument)
        case Action.ENTER_DECIMAL:
            return enter_decimal(state)
        case Action.TOGGLE_SIGN:
            return toggle_sign(state)
        case Action.SELECT_OPERATION:
            return select_operation(state, argument)
        case Action.CALCULATE:
            return calculate(state)
        case Action.CLEAR:
            return clear(state)
        case Action.DELETE_LAST:
            return delete_last(state)
        case _:
            raise InvalidOperationError(action)
