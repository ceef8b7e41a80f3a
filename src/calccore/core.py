"""Calculator session holding one state slot with history and undo."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from calccore import keyboard, machine
from calccore.exceptions import CalculatorError
from calccore.models import INITIAL_STATE, CalculatorState, Operator

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class Calculator:
    """
    A calculator session.

    Wraps the pure state machine with a single owned state and a history
    of prior states, so the caller does not have to thread the state by
    hand. Independent instances never share state.

    Example:
        >>> calc = Calculator()
        >>> calc.press_digit("5").select_operation(Operator.ADD).press_digit("3").equals().display
        '8'
        >>> calc.undo().display
        '3'
    """

    def __init__(self, state: CalculatorState = INITIAL_STATE) -> None:
        """
        Initialize a session.

        Args:
            state: Starting state (default: the initial state)
        """
        self._state = state
        self._history: list[CalculatorState] = []

    @property
    def state(self) -> CalculatorState:
        """Current state snapshot."""
        return self._state

    @property
    def display(self) -> str:
        """Text the display should show."""
        return self._state.display_value

    @property
    def history(self) -> list[CalculatorState]:
        """States preceding the current one, oldest first."""
        return self._history.copy()

    def _apply(self, transition: Callable[[CalculatorState], CalculatorState]) -> Calculator:
        """Replace the state and record the old one if anything changed."""
        new_state = transition(self._state)
        if new_state != self._state:
            self._history.append(self._state)
            self._state = new_state
            logger.debug("State -> %s", new_state)
        return self

    def press_digit(self, digit: str) -> Calculator:
        return self._apply(lambda s: machine.enter_digit(s, digit))

    def press_decimal(self) -> Calculator:
        return self._apply(machine.enter_decimal)

    def toggle_sign(self) -> Calculator:
        return self._apply(machine.toggle_sign)

    def select_operation(self, operation: Operator) -> Calculator:
        return self._apply(lambda s: machine.select_operation(s, operation))

    def equals(self) -> Calculator:
        """Resolve the pending operation."""
        return self._apply(machine.calculate)

    def clear(self) -> Calculator:
        """Reset to the initial state. The reset itself can be undone."""
        return self._apply(machine.clear)

    def backspace(self) -> Calculator:
        return self._apply(machine.delete_last)

    def press_key(self, key: str) -> Calculator:
        """Apply the action bound to a keyboard key name."""
        return self._apply(lambda s: keyboard.press_key(s, key))

    def undo(self) -> Calculator:
        """
        Undo the last state change.

        Returns:
            Self with previous state restored

        Raises:
            CalculatorError: If nothing to undo
        """
        if not self._history:
            raise CalculatorError("Nothing to undo")

        self._state = self._history.pop()
        return self

    def copy(self) -> Calculator:
        """Create an independent copy of this calculator."""
        new_calc = Calculator(self._state)
        new_calc._history = self._history.copy()
        return new_calc

    def __repr__(self) -> str:
        return f"Calculator(display={self.display!r}, history_len={len(self._history)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calculator):
            return NotImplemented
        return self._state == other._state

    def __hash__(self) -> int:
        return hash(self._state)
