"""Exceptions raised by intcalc."""

from __future__ import annotations


class IntcalcError(Exception):
    """Base class for all intcalc errors."""


class InvalidInputError(IntcalcError, ValueError):
    """An argument lies outside the domain of the computation.

    Raised for negative Fibonacci indices, digits other than 0/1, empty digit
    sequences, negative exponents and unknown width names.
    """


class IntegerOverflowError(IntcalcError, OverflowError):
    """A computed value does not fit in the requested integer width."""


class SuiteConfigError(IntcalcError):
    """A program suite file is missing or malformed."""
