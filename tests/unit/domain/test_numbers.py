"""Unit tests for amount conversion helpers."""

from decimal import Decimal

import pytest

from bexqr.domain.shared.numbers import format_number, to_number


class TestToNumber:
    """Test to_number function."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("10", 10),
            (" 7 ", 7),
            ("-3.75", -3.75),
            ("1e3", 1000.0),
            (".5", 0.5),
            ("5.", 5.0),
            (Decimal("2.0"), 2),
            (12, 12),
        ],
    )
    def test_numeric_values(self, value, expected) -> None:
        assert to_number(value) == expected

    def test_integral_text_is_int(self) -> None:
        assert isinstance(to_number("10"), int)

    @pytest.mark.parametrize(
        "value",
        ["1_000", "١٢", "１", "inf", "nan", "1e5x", "", ".", "e5"],
    )
    def test_non_ascii_or_non_decimal_text_raises(self, value) -> None:
        with pytest.raises(ValueError, match="is not a number"):
            to_number(value)

    @pytest.mark.parametrize("value", [True, None, [1], float("inf")])
    def test_non_numbers_raise(self, value) -> None:
        with pytest.raises(ValueError):
            to_number(value)


class TestFormatNumber:
    """Test format_number function."""

    @pytest.mark.parametrize(
        "value, expected", [(10, "10"), (10.0, "10"), (0.5, "0.5"), (-2, "-2")]
    )
    def test_format(self, value, expected) -> None:
        assert format_number(value) == expected
