"""intcalc: exact Fibonacci numbers and binary-to-decimal conversion."""

from __future__ import annotations

import logging

from intcalc.binary import binary_digits_to_decimal, int_pow
from intcalc.errors import (
    IntcalcError,
    IntegerOverflowError,
    InvalidInputError,
    SuiteConfigError,
)
from intcalc.fibonacci import fibonacci
from intcalc.programs import (
    ProgramConfig,
    ProgramResult,
    ProgramSuite,
    format_result,
    load_program_suite,
    run_program,
    run_suite,
)
from intcalc.widths import IntWidth, get_width, max_fibonacci_index

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "IntWidth",
    "IntcalcError",
    "IntegerOverflowError",
    "InvalidInputError",
    "ProgramConfig",
    "ProgramResult",
    "ProgramSuite",
    "SuiteConfigError",
    "binary_digits_to_decimal",
    "fibonacci",
    "format_result",
    "get_width",
    "int_pow",
    "load_program_suite",
    "max_fibonacci_index",
    "run_program",
    "run_suite",
]
