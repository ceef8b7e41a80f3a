"""Unit tests for display formatting."""

import pytest

from calccore import format_result


class TestFormatResult:
    """Tests for format_result function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (3, "3"),
            (1.5000000000, "1.5"),
            (19.75, "19.75"),
            (-2.5, "-2.5"),
            (100, "100"),
            (0, "0"),
            (0.1 + 0.2, "0.3"),
            (1 / 3, "0.3333333333"),
            (2 / 3, "0.6666666667"),
            (1e-10, "0.0000000001"),
            (1e21, "1000000000000000000000"),
            (999999999999999.3, "999999999999999.2"),
            (1e300, "1" + "0" * 300),
        ],
    )
    def test_formats(self, value, expected):
        assert format_result(value) == expected

    @pytest.mark.parametrize("value", [-0.0, -1e-12, 1e-12])
    def test_rounds_to_zero(self, value):
        assert format_result(value) == "0"

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite(self, value):
        assert format_result(value) == "Error"

    def test_int_too_large_for_float(self):
        assert format_result(2**1100) == "Error"

    def test_no_trailing_point(self):
        assert not format_result(4.0).endswith(".")
