"""Unit tests for intcalc.binary module."""

from __future__ import annotations

import pytest

from intcalc.binary import binary_digits_to_decimal, int_pow
from intcalc.errors import IntegerOverflowError, InvalidInputError
from intcalc.testing import reference_binary_value


class TestIntPow:
    """Tests for int_pow function."""

    @pytest.mark.parametrize(
        ("base", "exponent", "expected"),
        [
            (2, 0, 1),
            (2, 1, 2),
            (2, 10, 1024),
            (3, 5, 243),
            (10, 6, 1000000),
            (0, 0, 1),
            (0, 3, 0),
            (-2, 3, -8),
            (-2, 4, 16),
        ],
    )
    def test_values(self, base: int, exponent: int, expected: int) -> None:
        assert int_pow(base, exponent) == expected

    def test_large_exponent_is_exact(self) -> None:
        assert int_pow(2, 1000) == 2**1000
        assert int_pow(7, 333) == 7**333

    def test_negative_exponent(self) -> None:
        with pytest.raises(InvalidInputError, match="non-negative"):
            int_pow(2, -1)

    def test_float_argument(self) -> None:
        with pytest.raises(InvalidInputError, match="base must be an integer"):
            int_pow(2.0, 3)  # type: ignore[arg-type]
        with pytest.raises(InvalidInputError, match="exponent must be an integer"):
            int_pow(2, 0.5)  # type: ignore[arg-type]


class TestBinaryDigitsToDecimal:
    """Tests for binary_digits_to_decimal function."""

    @pytest.mark.parametrize(
        ("digits", "expected"),
        [
            ("0", 0),
            ("1", 1),
            ("10", 2),
            ("101", 5),
            ("1101001", 105),
            ("11111111", 255),
            ("0000", 0),
            ("00101", 5),
        ],
    )
    def test_text_digits(self, digits: str, expected: int) -> None:
        assert binary_digits_to_decimal(digits) == expected

    def test_integer_literal(self) -> None:
        """The original programs pass the digits as an integer literal."""
        assert binary_digits_to_decimal(1101001) == 105
        assert binary_digits_to_decimal(101) == 5
        assert binary_digits_to_decimal(1) == 1
        assert binary_digits_to_decimal(0) == 0

    def test_sequence_of_characters(self) -> None:
        assert binary_digits_to_decimal(["1", "0", "1"]) == 5
        assert binary_digits_to_decimal(("1", "1")) == 3

    def test_matches_reference(self) -> None:
        for value in (3, 17, 255, 1023, 123456789, 2**70 + 5):
            digits = format(value, "b")
            assert binary_digits_to_decimal(digits) == reference_binary_value(digits)
            assert binary_digits_to_decimal(digits) == value

    def test_long_sequence_is_exact(self) -> None:
        digits = "1" * 200
        assert binary_digits_to_decimal(digits) == 2**200 - 1


class TestBinaryValidation:
    """Tests for rejected digit sequences."""

    @pytest.mark.parametrize("digits", ["2", "102", "1101009", "10a1", " 101", "-101"])
    def test_invalid_text_digit(self, digits: str) -> None:
        with pytest.raises(InvalidInputError, match="Invalid binary digit"):
            binary_digits_to_decimal(digits)

    def test_invalid_digit_position(self) -> None:
        with pytest.raises(InvalidInputError, match="'2' at position 1"):
            binary_digits_to_decimal("121")

    @pytest.mark.parametrize("digits", [2, 1201, 1101009])
    def test_invalid_integer_digit(self, digits: int) -> None:
        with pytest.raises(InvalidInputError, match="Invalid binary digit"):
            binary_digits_to_decimal(digits)

    def test_empty(self) -> None:
        with pytest.raises(InvalidInputError, match="empty"):
            binary_digits_to_decimal("")

    def test_negative_integer(self) -> None:
        with pytest.raises(InvalidInputError, match="non-negative"):
            binary_digits_to_decimal(-101)

    @pytest.mark.parametrize("digits", [True, 1.5, None])
    def test_wrong_type(self, digits: object) -> None:
        with pytest.raises(InvalidInputError):
            binary_digits_to_decimal(digits)  # type: ignore[arg-type]

    def test_invalid_digit_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            binary_digits_to_decimal("3")


class TestBinaryWidths:
    """Tests for overflow detection with fixed widths."""

    def test_i32_boundary(self) -> None:
        assert binary_digits_to_decimal("1" * 31, "i32") == 2**31 - 1
        with pytest.raises(IntegerOverflowError, match="i32"):
            binary_digits_to_decimal("1" + "0" * 31, "i32")

    def test_u32_holds_32_bits(self) -> None:
        assert binary_digits_to_decimal("1" * 32, "u32") == 2**32 - 1

    def test_u64_boundary(self) -> None:
        assert binary_digits_to_decimal("1" * 64, "u64") == 2**64 - 1
        with pytest.raises(IntegerOverflowError):
            binary_digits_to_decimal("1" + "0" * 64, "u64")

    def test_unbounded(self) -> None:
        assert binary_digits_to_decimal("1" + "0" * 64, "unbounded") == 2**64

    def test_overflow_stops_conversion(self) -> None:
        """Overflow is raised before the remaining high digits are read."""
        digits = "2" + "1" * 40
        with pytest.raises(IntegerOverflowError, match="i32"):
            binary_digits_to_decimal(digits, "i32")
        with pytest.raises(InvalidInputError):
            binary_digits_to_decimal(digits, "unbounded")
