"""Unit tests for the Calculator session."""

import pytest

from calccore import INITIAL_STATE, Calculator, CalculatorError, ErrorKind, Operator


class TestCalculator:
    def test_starts_at_initial_state(self, calculator):
        assert calculator.state == INITIAL_STATE
        assert calculator.display == "0"
        assert calculator.history == []

    def test_chained_session(self, calculator):
        calculator.press_digit("5").select_operation(Operator.ADD).press_digit("3").equals()
        assert calculator.display == "8"
        assert calculator.state.result == 8

    def test_decimal_and_sign(self, calculator):
        calculator.press_digit("2").press_decimal().press_digit("5").toggle_sign()
        assert calculator.display == "-2.5"

    def test_press_key(self, calculator):
        for key in "6^2=":
            calculator.press_key(key)
        assert calculator.display == "36"

    def test_backspace(self, calculator):
        calculator.press_digit("7").press_digit("8").backspace()
        assert calculator.display == "7"

    def test_error_then_recover(self, calculator):
        calculator.press_digit("1").select_operation(Operator.MODULO).press_digit("0").equals()
        assert calculator.state.error is ErrorKind.DIVISION_BY_ZERO
        calculator.press_digit("4")
        assert calculator.display == "4"
        assert calculator.state.error is None

    def test_clear(self, calculator):
        calculator.press_digit("3").select_operation(Operator.MULTIPLY).clear()
        assert calculator.state == INITIAL_STATE


class TestHistory:
    def test_records_changes_only(self, calculator):
        calculator.select_operation(Operator.ADD)
        assert calculator.history == []
        calculator.press_digit("1")
        assert calculator.history == [INITIAL_STATE]

    def test_undo(self, calculator):
        calculator.press_digit("5").select_operation(Operator.ADD).press_digit("3").equals()
        calculator.undo()
        assert calculator.display == "3"
        assert calculator.state.operation is Operator.ADD

    def test_undo_clear(self, calculator):
        calculator.press_digit("9").clear().undo()
        assert calculator.display == "9"

    def test_undo_empty_raises(self, calculator):
        with pytest.raises(CalculatorError):
            calculator.undo()

    def test_history_is_a_copy(self, calculator):
        calculator.press_digit("1")
        calculator.history.clear()
        assert len(calculator.history) == 1


class TestCopyAndEquality:
    def test_copy_is_independent(self, calculator):
        calculator.press_digit("4")
        other = calculator.copy()
        calculator.press_digit("2")
        assert other.display == "4"
        assert calculator.display == "42"
        assert len(other.history) == 1

    def test_equality_by_state(self):
        a = Calculator().press_digit("1")
        b = Calculator().press_digit("1")
        assert a == b
        assert hash(a) == hash(b)
        assert a != Calculator()

    def test_repr(self, calculator):
        assert repr(calculator.press_digit("3")) == "Calculator(display='3', history_len=1)"
