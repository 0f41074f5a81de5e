"""Integer widths for computed values.

Python integers never overflow, so results are exact by default (the
``unbounded`` width). A fixed width reproduces the range of a machine integer
type and turns any value outside that range into an ``IntegerOverflowError``
instead of a silent wrap-around.

Fibonacci overflow boundaries (largest n whose value fits):

    i32  46    u32  47    i64  92    u64  93
"""

from __future__ import annotations

from dataclasses import dataclass

from intcalc.errors import IntegerOverflowError, InvalidInputError


@dataclass(frozen=True)
class IntWidth:
    """Range of a (possibly unbounded) integer type.

    Attributes:
        name: Short identifier (e.g., "i32", "u64", "unbounded").
        bits: Number of bits, or None for arbitrary precision.
        signed: Whether the type is two's-complement signed.
    """

    name: str
    bits: int | None = None
    signed: bool = True

    @property
    def bounded(self) -> bool:
        return self.bits is not None

    @property
    def min_value(self) -> int | None:
        if self.bits is None:
            return None
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int | None:
        if self.bits is None:
            return None
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Return True if value is representable in this width."""
        if self.bits is None:
            return True
        return self.min_value <= value <= self.max_value

    def check(self, value: int, what: str = "value") -> int:
        """Return value unchanged, or raise if it does not fit.

        Args:
            value: Integer to check.
            what: Description of the value for the error message.

        Returns:
            The value itself.

        Raises:
            IntegerOverflowError: If value is outside [min_value, max_value].
        """
        if not self.contains(value):
            msg = (
                f"{what} = {value} does not fit in {self.name} "
                f"(range {self.min_value}..{self.max_value})"
            )
            raise IntegerOverflowError(msg)
        return value


I32 = IntWidth("i32", 32, signed=True)
U32 = IntWidth("u32", 32, signed=False)
I64 = IntWidth("i64", 64, signed=True)
U64 = IntWidth("u64", 64, signed=False)
UNBOUNDED = IntWidth("unbounded")

WIDTHS: dict[str, IntWidth] = {
    width.name: width for width in (I32, U32, I64, U64, UNBOUNDED)
}


def get_width(width: IntWidth | str | None) -> IntWidth:
    """Resolve a width name (or instance) to an IntWidth.

    None resolves to ``unbounded``.

    Raises:
        InvalidInputError: If the name is not a known width.
    """
    if width is None:
        return UNBOUNDED
    if isinstance(width, IntWidth):
        return width
    if not isinstance(width, str):
        msg = f"Integer width must be a name, got {type(width).__name__}"
        raise InvalidInputError(msg)
    try:
        return WIDTHS[width]
    except KeyError:
        known = ", ".join(WIDTHS)
        msg = f"Unknown integer width {width!r} (expected one of: {known})"
        raise InvalidInputError(msg) from None


def max_fibonacci_index(width: IntWidth | str | None) -> int | None:
    """Return the largest n such that fibonacci(n) fits in width.

    Returns None for the unbounded width.
    """
    width = get_width(width)
    if not width.bounded:
        return None

    # F(1) = 1 fits in every width we define
    a, b = 0, 1
    n = 1
    while width.contains(a + b):
        a, b = b, a + b
        n += 1
    return n
