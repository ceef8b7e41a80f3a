"""Key bindings: physical key names to state machine actions."""

from __future__ import annotations

from calccore.machine import Action, dispatch
from calccore.models import CalculatorState, Operator

KeyBinding = tuple[Action, str | Operator | None]

OPERATOR_KEYS: dict[str, Operator] = {
    "+": Operator.ADD,
    "-": Operator.SUBTRACT,
    "*": Operator.MULTIPLY,
    "/": Operator.DIVIDE,
    "^": Operator.POWER,
    "%": Operator.MODULO,
}

KEY_BINDINGS: dict[str, KeyBinding] = {
    **{digit: (Action.ENTER_DIGIT, digit) for digit in "0123456789"},
    ".": (Action.ENTER_DECIMAL, None),
    **{key: (Action.SELECT_OPERATION, op) for key, op in OPERATOR_KEYS.items()},
    "Enter": (Action.CALCULATE, None),
    "=": (Action.CALCULATE, None),
    "Escape": (Action.CLEAR, None),
    "Backspace": (Action.DELETE_LAST, None),
}


def resolve_key(key: str) -> KeyBinding | None:
    """Return the action bound to ``key``, or None if the key is unbound."""
    return KEY_BINDINGS.get(key)


def press_key(state: CalculatorState, key: str) -> CalculatorState:
    """Apply the action bound to ``key``; unbound keys leave the state as is."""
    binding = resolve_key(key)
    if binding is None:
        return state
    action, argument = binding
    return dispatch(state, action, argument)
