"""Iterative Fibonacci numbers."""

from __future__ import annotations

import logging

from intcalc.errors import InvalidInputError
from intcalc.widths import IntWidth, get_width

logger = logging.getLogger(__name__)


def fibonacci(n: int, width: IntWidth | str | None = None) -> int:
    """Compute the n-th Fibonacci number with the linear recurrence.

    F(0) = 0, F(1) = 1, F(n) = F(n-1) + F(n-2). Runs in O(n) additions and
    constant space; the arithmetic is exact.

    Args:
        n: Index in the sequence (n >= 0).
        width: Integer width the result must fit in. Defaults to unbounded.

    Returns:
        The n-th Fibonacci number.

    Raises:
        InvalidInputError: If n is not a non-negative integer.
        IntegerOverflowError: If a value exceeds the given width.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        msg = f"Fibonacci index must be an integer, got {type(n).__name__}"
        raise InvalidInputError(msg)
    if n < 0:
        msg = f"Fibonacci index must be non-negative, got {n}"
        raise InvalidInputError(msg)

    width = get_width(width)
    logger.debug("fibonacci(%d) with width %s", n, width.name)

    a = 0
    b = 1
    if n == 0:
        return a

    for i in range(2, n + 1):
        c = a + b
        a = b
        b = width.check(c, f"fibonacci({i})")
    return b
