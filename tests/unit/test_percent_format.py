"""
Тесты для Percent Formatter

Правило округления: half away from zero по точному двоичному значению float.
"""

import pytest

from src.core.codec import format_percent


class TestFormatPercent:
    """Тесты format_percent."""

    def test_zero(self) -> None:
        assert format_percent(0) == "0.00%"

    def test_pads_to_two_decimals(self) -> None:
        assert format_percent(3.1) == "3.10%"
        assert format_percent(7) == "7.00%"

    def test_value_not_scaled(self) -> None:
        """0.05 - это 0.05%, а не 5%."""
        assert format_percent(0.05) == "0.05%"

    def test_negative_keeps_sign(self) -> None:
        assert format_percent(-2.5) == "-2.50%"

    def test_no_grouping(self) -> None:
        assert format_percent(1234.5) == "1234.50%"

    def test_negative_zero_unsigned(self) -> None:
        assert format_percent(-0.0) == "0.00%"


class TestPercentRounding:
    """Граница .xx5: точные середины vs двоичное представление."""

    def test_binary_below_tie(self) -> None:
        """-1.005 хранится как -1.00499999... → "-1.00%"."""
        assert format_percent(-1.005) == "-1.00%"
        assert format_percent(1.005) == "1.00%"
        assert format_percent(2.675) == "2.67%"

    def test_exact_tie_away_from_zero(self) -> None:
        """0.125 - точная середина → от нуля (не banker's rounding)."""
        assert format_percent(0.125) == "0.13%"
        assert format_percent(-0.125) == "-0.13%"
        assert format_percent(0.375) == "0.38%"

    def test_tiny_negative_rounds_to_signed_zero(self) -> None:
        assert format_percent(-0.001) == "-0.00%"


class TestPercentNonFinite:
    """NaN/Inf рендерятся текстом с "%"."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (float("nan"), "NaN%"),
            (float("inf"), "Infinity%"),
            (float("-inf"), "-Infinity%"),
        ],
    )
    def test_non_finite(self, value, expected) -> None:
        assert format_percent(value) == expected
