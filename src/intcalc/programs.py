"""Program suite: the computations and how their results are printed.

A suite file lists program variants, each one computing a single number and
optionally printing it through an output template:

    name: intcalc-programs
    programs:
      - name: fib
        function: fibonacci
        input: 9
        width: i32
        template: "Result: {value}"
        expected: "Result: 34"

The runner evaluates every enabled program and reports the printed output,
comparing it with ``expected`` when given.

Binary inputs with leading zeros must be quoted (``input: "0101"``): YAML
reads an unquoted ``0101`` as the octal number 65.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from intcalc.binary import binary_digits_to_decimal
from intcalc.errors import IntcalcError, InvalidInputError, SuiteConfigError
from intcalc.fibonacci import fibonacci
from intcalc.widths import IntWidth, get_width

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "Result: {value}"

# Computations a program may run, by suite name
FUNCTIONS: dict[str, Callable[..., int]] = {
    "fibonacci": fibonacci,
    "binary_to_decimal": binary_digits_to_decimal,
}


@dataclass
class ProgramConfig:
    """Configuration for a single program variant.

    Attributes:
        name: Program identifier.
        function: Key into FUNCTIONS ("fibonacci" or "binary_to_decimal").
        input: Argument passed to the function.
        width: Integer width the result must fit in.
        print: Whether the result is printed.
        template: Output template, formatted with ``value``.
        expected: Expected printed output (optional).
        enabled: Whether the program is run.
    """

    name: str
    function: str
    input: int | str
    width: IntWidth
    print: bool = True
    template: str = DEFAULT_TEMPLATE
    expected: str | None = None
    enabled: bool = True


@dataclass
class ProgramSuite:
    """Collection of program configurations.

    Attributes:
        name: Suite name.
        programs: Program configurations, in file order.
        base_path: Directory containing the suite file.
    """

    name: str
    programs: list[ProgramConfig]
    base_path: Path


@dataclass
class ProgramResult:
    """Result of running one program.

    Attributes:
        name: Program name.
        function: Function that was evaluated.
        value: Computed value (None on error).
        output: Printed text (empty if printing is disabled or on error).
        expected: Expected printed output, copied from the configuration.
        error: Error message if the computation failed.
    """

    name: str
    function: str
    value: int | None
    output: str
    expected: str | None = None
    error: str | None = None

    @property
    def passed(self) -> bool:
        if self.error is not None:
            return False
        return self.expected is None or self.output == self.expected


def format_result(value: int, template: str = DEFAULT_TEMPLATE) -> str:
    """Render a computed value through an output template.

    >>> format_result(34)
    'Result: 34'
    >>> format_result(105, "Result {value}")
    'Result 105'
    """
    return template.format(value=value)


def check_template(template: Any) -> str:
    """Return template unchanged if it renders an integer value.

    Raises:
        InvalidInputError: If template is not a string, or refers to anything
            other than a plain ``{value}`` field.
    """
    if not isinstance(template, str):
        msg = f"Invalid template {template!r}: expected a string"
        raise InvalidInputError(msg)
    try:
        format_result(0, template)
    except (KeyError, IndexError, ValueError, TypeError, AttributeError) as e:
        msg = f"Invalid template {template!r}: {e}"
        raise InvalidInputError(msg) from e
    return template


def _parse_program(data: Any, index: int) -> ProgramConfig:
    if not isinstance(data, dict):
        msg = f"Program #{index} must be a mapping, got {type(data).__name__}"
        raise SuiteConfigError(msg)

    for key in ("name", "function", "input"):
        if key not in data:
            msg = f"Program #{index} is missing required key {key!r}"
            raise SuiteConfigError(msg)

    name = str(data["name"])
    function = data["function"]
    if not isinstance(function, str) or function not in FUNCTIONS:
        known = ", ".join(FUNCTIONS)
        msg = f"Program {name!r}: unknown function {function!r} (expected one of: {known})"
        raise SuiteConfigError(msg)

    try:
        width = get_width(data.get("width"))
        template = check_template(data.get("template", DEFAULT_TEMPLATE))
    except InvalidInputError as e:
        msg = f"Program {name!r}: {e}"
        raise SuiteConfigError(msg) from e

    expected = data.get("expected")
    return ProgramConfig(
        name=name,
        function=function,
        input=data["input"],
        width=width,
        print=bool(data.get("print", True)),
        template=template,
        expected=None if expected is None else str(expected),
        enabled=bool(data.get("enabled", True)),
    )


def load_program_suite(config_path: Path | str) -> ProgramSuite:
    """Load a program suite from YAML.

    Args:
        config_path: Path to the suite file.

    Returns:
        ProgramSuite configuration.

    Raises:
        SuiteConfigError: If the file cannot be read or is malformed.
    """
    config_path = Path(config_path)
    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
    except OSError as e:
        msg = f"Cannot read suite file {config_path}: {e}"
        raise SuiteConfigError(msg) from e
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {config_path}: {e}"
        raise SuiteConfigError(msg) from e

    if not isinstance(data, dict):
        msg = f"Suite file {config_path} must contain a mapping"
        raise SuiteConfigError(msg)

    programs_data = data.get("programs") or []
    if not isinstance(programs_data, list):
        msg = (
            f"Suite file {config_path}: 'programs' must be a list, "
            f"got {type(programs_data).__name__}"
        )
        raise SuiteConfigError(msg)

    programs = [
        _parse_program(program_data, index)
        for index, program_data in enumerate(programs_data, start=1)
    ]
    logger.debug("Loaded %d program(s) from %s", len(programs), config_path)

    return ProgramSuite(
        name=data.get("name", "programs"),
        programs=programs,
        base_path=config_path.parent,
    )


def run_program(config: ProgramConfig) -> ProgramResult:
    """Evaluate one program.

    Computation errors are recorded on the result rather than raised, so one
    failing program does not stop the rest of a suite.
    """
    func = FUNCTIONS[config.function]
    logger.debug("Running %s: %s(%r)", config.name, config.function, config.input)

    try:
        value = func(config.input, config.width)
    except IntcalcError as e:
        logger.debug("Program %s failed: %s", config.name, e)
        return ProgramResult(
            name=config.name,
            function=config.function,
            value=None,
            output="",
            expected=config.expected,
            error=str(e),
        )

    output = format_result(value, config.template) if config.print else ""
    return ProgramResult(
        name=config.name,
        function=config.function,
        value=value,
        output=output,
        expected=config.expected,
    )


def run_suite(
    suite: ProgramSuite, program_filter: str | None = None
) -> list[ProgramResult]:
    """Run all enabled programs of a suite, in order.

    Args:
        suite: Suite to run.
        program_filter: If given, only run the program with this name.

    Returns:
        One result per program run.
    """
    results = []
    for config in suite.programs:
        if not config.enabled:
            continue
        if program_filter and config.name != program_filter:
            continue
        results.append(run_program(config))
    return results


def format_results_table(results: list[ProgramResult]) -> str:
    """Format program results as a table.

    Args:
        results: Results to display.

    Returns:
        Formatted table string.
    """
    lines = []
    lines.append("=" * 80)
    lines.append("PROGRAM RESULTS")
    lines.append("=" * 80)
    lines.append(f"{'Program':<24} {'Function':<18} {'Value':>20}  Status")
    lines.append("-" * 80)

    for result in results:
        value = "-" if result.value is None else str(result.value)
        if result.error is not None:
            status = f"ERROR: {result.error}"
        elif result.passed:
            status = "ok"
        else:
            status = f"MISMATCH: got {result.output!r}, expected {result.expected!r}"
        lines.append(f"{result.name:<24} {result.function:<18} {value:>20}  {status}")

    lines.append("-" * 80)
    passed = sum(1 for r in results if r.passed)
    lines.append(f"Total: {len(results)} program(s), {passed} passed")
    return "\n".join(lines)
