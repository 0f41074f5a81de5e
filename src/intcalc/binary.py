"""Binary digit sequences to decimal integers.

A binary number is given either as text (``"1101001"``) or as an integer
whose decimal digits are all 0 or 1 (``1101001``). Both are read from the
least-significant digit upwards, each digit weighted by a power of two.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from intcalc.errors import InvalidInputError
from intcalc.widths import IntWidth, get_width

logger = logging.getLogger(__name__)


def int_pow(base: int, exponent: int) -> int:
    """Raise base to exponent by repeated squaring.

    Uses O(log exponent) multiplications and integer arithmetic only.

    Raises:
        InvalidInputError: If exponent is negative or an argument is not an int.
    """
    for name, value in (("base", base), ("exponent", exponent)):
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"{name} must be an integer, got {type(value).__name__}"
            raise InvalidInputError(msg)
    if exponent < 0:
        msg = f"exponent must be non-negative, got {exponent}"
        raise InvalidInputError(msg)

    if exponent == 0:
        return 1
    if exponent % 2 == 0:
        half = int_pow(base, exponent // 2)
        return half * half
    return base * int_pow(base, exponent - 1)


def _digits_from_int(value: int) -> Iterator[int]:
    # Least-significant decimal digit first
    if value == 0:
        yield 0
        return
    while value > 0:
        value, digit = divmod(value, 10)
        yield digit


def _digits_from_text(text: Sequence[str]) -> Iterator[int]:
    # Least-significant character first; positions reported from the left
    last = len(text) - 1
    for offset, char in enumerate(reversed(text)):
        if char not in ("0", "1"):
            msg = (
                f"Invalid binary digit {char!r} at position {last - offset} "
                f"in {text!r}"
            )
            raise InvalidInputError(msg)
        yield int(char)


def binary_digits_to_decimal(
    digits: str | Sequence[str] | int, width: IntWidth | str | None = None
) -> int:
    """Convert a binary digit sequence to the integer it encodes.

    Args:
        digits: Most-significant digit first, as a string or sequence of
            one-character strings, or a non-negative int whose decimal
            digits are 0 or 1.
        width: Integer width the result must fit in. Defaults to unbounded.

    Returns:
        Sum of digit * 2**position over all digits, position 0 being the
        rightmost digit.

    Raises:
        InvalidInputError: If the sequence is empty, negative, or contains a
            digit other than 0 or 1.
        IntegerOverflowError: If the result exceeds the given width.
    """
    if isinstance(digits, bool):
        msg = "Binary digits must be a string or an integer, got bool"
        raise InvalidInputError(msg)

    if isinstance(digits, int):
        if digits < 0:
            msg = f"Binary digits must be non-negative, got {digits}"
            raise InvalidInputError(msg)
        source = _digits_from_int(digits)
    elif isinstance(digits, Sequence):
        if len(digits) == 0:
            msg = "Binary digit sequence is empty"
            raise InvalidInputError(msg)
        source = _digits_from_text(digits)
    else:
        msg = (
            "Binary digits must be a string or an integer, "
            f"got {type(digits).__name__}"
        )
        raise InvalidInputError(msg)

    width = get_width(width)
    logger.debug("binary_digits_to_decimal(%r) with width %s", digits, width.name)

    result = 0
    position = 0
    for digit in source:
        if digit > 1:
            msg = (
                f"Invalid binary digit {digit} in {digits} "
                f"({position} digits from the right)"
            )
            raise InvalidInputError(msg)
        result += digit * int_pow(2, position)
        width.check(result, f"binary {digits}")
        position += 1

    return result
