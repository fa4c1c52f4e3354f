"""Tests for ratingcharts.formatting."""

import pytest

from ratingcharts.formatting import (
    deviation_color_value,
    format_number,
    get_sign,
    grayscale_rgb,
    plain_number,
)


class TestFormatNumber:
    def test_none_is_empty(self) -> None:
        assert format_number(None, 1) == ""
        assert format_number(None, 4) == ""

    @pytest.mark.parametrize(
        ("value", "length", "expected"),
        [
            (123.4, 3, "123"),
            (123.4, 4, "123.4"),
            (123.4, 5, "123.40"),
            (123.4567, 6, "123.456"),
            (12345.67, 4, "12e3"),
        ],
    )
    def test_positive_decimals(self, value: float, length: int, expected: str) -> None:
        assert format_number(value, length) == expected

    @pytest.mark.parametrize(
        ("value", "length", "expected"),
        [(1234, 3, "1e3"), (1234, 4, "1234"), (1234, 5, "1234.0")],
    )
    def test_positive_integers(self, value: float, length: int, expected: str) -> None:
        assert format_number(value, length) == expected

    @pytest.mark.parametrize(
        ("value", "length", "expected"),
        [(-123.4, 3, "-123"), (-123.4, 4, "-123.4"), (-123.4, 5, "-123.40")],
    )
    def test_negative_decimals(self, value: float, length: int, expected: str) -> None:
        assert format_number(value, length) == expected

    @pytest.mark.parametrize(
        ("value", "length", "expected"),
        [(-1234, 3, "-1e3"), (-1234, 4, "-1234"), (-1234, 5, "-1234.0")],
    )
    def test_negative_integers(self, value: float, length: int, expected: str) -> None:
        assert format_number(value, length) == expected

    def test_integral_float_prints_as_integer(self) -> None:
        assert format_number(1234.0, 5) == "1234.0"
        assert format_number(15.0, 4) == "15.00"

    def test_zero(self) -> None:
        assert format_number(0, 4) == "0.000"

    def test_small_decimal_padded(self) -> None:
        assert format_number(1.5, 4) == "1.500"


class TestSign:
    def test_negative(self) -> None:
        assert get_sign(-5) == "-"

    def test_non_negative(self) -> None:
        assert get_sign(0) == ""
        assert get_sign(5) == ""

    def test_plain_number(self) -> None:
        assert plain_number(-123.4) == "-123.4"
        assert plain_number(7.0) == "7"
        assert plain_number(0.25) == "0.25"


class TestDeviationColor:
    def test_zero_max_deviation(self) -> None:
        assert deviation_color_value(5, 0) == 0

    @pytest.mark.parametrize(
        ("deviation", "expected"),
        [(-2, 217.6), (0, 192), (5, 128), (10, 64), (15, 0)],
    )
    def test_ramp(self, deviation: float, expected: float) -> None:
        assert deviation_color_value(deviation, 10) == pytest.approx(expected)

    def test_rgb_clipped(self) -> None:
        assert grayscale_rgb(255) == (1.0, 1.0, 1.0)
        assert grayscale_rgb(-64) == (0.0, 0.0, 0.0)
        assert grayscale_rgb(300) == (1.0, 1.0, 1.0)
        r, g, b = grayscale_rgb(51)
        assert r == g == b == pytest.approx(0.2)
