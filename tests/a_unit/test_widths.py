"""Unit tests for intcalc.widths module."""

from __future__ import annotations

import pytest

from intcalc.errors import IntegerOverflowError, InvalidInputError
from intcalc.fibonacci import fibonacci
from intcalc.widths import (
    I32,
    I64,
    U32,
    U64,
    UNBOUNDED,
    WIDTHS,
    IntWidth,
    get_width,
    max_fibonacci_index,
)


class TestIntWidth:
    """Tests for IntWidth ranges."""

    def test_i32_range(self) -> None:
        assert I32.min_value == -2147483648
        assert I32.max_value == 2147483647

    def test_u32_range(self) -> None:
        assert U32.min_value == 0
        assert U32.max_value == 4294967295

    def test_64_bit_ranges(self) -> None:
        assert I64.min_value == -(2**63)
        assert I64.max_value == 2**63 - 1
        assert U64.min_value == 0
        assert U64.max_value == 18446744073709551615

    def test_unbounded(self) -> None:
        assert not UNBOUNDED.bounded
        assert UNBOUNDED.min_value is None
        assert UNBOUNDED.max_value is None
        assert UNBOUNDED.contains(10**100)
        assert UNBOUNDED.contains(-(10**100))

    def test_contains(self) -> None:
        assert I32.contains(0)
        assert I32.contains(-2147483648)
        assert not I32.contains(2147483648)
        assert not U64.contains(-1)

    def test_check_returns_value(self) -> None:
        assert U64.check(42) == 42

    def test_check_raises(self) -> None:
        with pytest.raises(IntegerOverflowError, match="x = 2147483648 does not fit in i32"):
            I32.check(2**31, "x")

    def test_custom_width(self) -> None:
        u8 = IntWidth("u8", 8, signed=False)
        assert u8.max_value == 255
        assert u8.check(255) == 255
        with pytest.raises(IntegerOverflowError):
            u8.check(256)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            I32.bits = 16  # type: ignore[misc]


class TestGetWidth:
    """Tests for get_width function."""

    def test_by_name(self) -> None:
        for name, width in WIDTHS.items():
            assert get_width(name) is width

    def test_none_is_unbounded(self) -> None:
        assert get_width(None) is UNBOUNDED

    def test_instance_passthrough(self) -> None:
        custom = IntWidth("u16", 16, signed=False)
        assert get_width(custom) is custom

    def test_unknown_name(self) -> None:
        with pytest.raises(InvalidInputError, match="i32, u32, i64, u64, unbounded"):
            get_width("int")

    @pytest.mark.parametrize("width", [32, ["i32"], {"name": "i32"}])
    def test_non_string_name(self, width: object) -> None:
        with pytest.raises(InvalidInputError, match="must be a name"):
            get_width(width)  # type: ignore[arg-type]


class TestMaxFibonacciIndex:
    """Tests for the documented overflow boundaries."""

    @pytest.mark.parametrize(
        ("width", "expected"),
        [("i32", 46), ("u32", 47), ("i64", 92), ("u64", 93)],
    )
    def test_boundaries(self, width: str, expected: int) -> None:
        assert max_fibonacci_index(width) == expected

    def test_unbounded(self) -> None:
        assert max_fibonacci_index(UNBOUNDED) is None
        assert max_fibonacci_index(None) is None

    def test_boundary_agrees_with_fibonacci(self) -> None:
        for width in (I32, U32, I64, U64):
            n = max_fibonacci_index(width)
            assert width.contains(fibonacci(n))
            with pytest.raises(IntegerOverflowError):
                fibonacci(n + 1, width)
