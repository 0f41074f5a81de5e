"""Testing utilities for intcalc."""

from __future__ import annotations

from functools import lru_cache

from intcalc.programs import ProgramConfig, format_result, run_program


@lru_cache(maxsize=None)
def reference_fibonacci(n: int) -> int:
    """Compute F(n) straight from the defining recurrence.

    Args:
        n: Non-negative index.

    Returns:
        The n-th Fibonacci number.
    """
    if n < 2:
        return n
    return reference_fibonacci(n - 1) + reference_fibonacci(n - 2)


def reference_binary_value(digits: str | int) -> int:
    """Decode binary digits with Python's own base-2 parser.

    Args:
        digits: Binary digits as text, or an int whose decimal digits are 0/1.

    Returns:
        The decoded value.
    """
    return int(str(digits), 2)


def compare_outputs(config: ProgramConfig) -> tuple[str, str, bool]:
    """Compare a program's output with the output of the reference oracles.

    Args:
        config: Program configuration.

    Returns:
        Tuple of (reference_output, intcalc_output, match).
    """
    if config.function == "fibonacci":
        expected_value = reference_fibonacci(int(config.input))
    else:
        expected_value = reference_binary_value(config.input)

    reference_output = (
        format_result(expected_value, config.template) if config.print else ""
    )
    result = run_program(config)
    return reference_output, result.output, reference_output == result.output
