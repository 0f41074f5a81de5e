"""Command-line interface for intcalc.

Provides the `intcalc` command with subcommands for:
- Computing a Fibonacci number
- Converting binary digits to decimal
- Running a program suite
- Showing integer widths and their overflow boundaries
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from intcalc.binary import binary_digits_to_decimal
from intcalc.errors import IntcalcError
from intcalc.fibonacci import fibonacci
from intcalc.programs import (
    DEFAULT_TEMPLATE,
    check_template,
    format_result,
    format_results_table,
    load_program_suite,
    run_suite,
)
from intcalc.widths import WIDTHS, max_fibonacci_index

# Default paths
DEFAULT_SUITE_PATH = (
    Path(__file__).parent.parent.parent / "programs" / "suite.yaml"
)

logger = logging.getLogger(__name__)


def _print_value(value: int, args: argparse.Namespace) -> None:
    if not args.quiet:
        print(format_result(value, args.template))


def cmd_fib(args: argparse.Namespace) -> int:
    """Compute a Fibonacci number."""
    try:
        check_template(args.template)
        value = fibonacci(args.n, args.width)
    except IntcalcError as e:
        print(f"Error: {e}")
        return 1

    _print_value(value, args)
    return 0


def cmd_bin(args: argparse.Namespace) -> int:
    """Convert binary digits to decimal."""
    try:
        check_template(args.template)
        value = binary_digits_to_decimal(args.digits, args.width)
    except IntcalcError as e:
        print(f"Error: {e}")
        return 1

    _print_value(value, args)
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    """Run a program suite."""
    suite_path = Path(args.suite) if args.suite else DEFAULT_SUITE_PATH

    if not suite_path.exists():
        print(f"Error: Suite configuration not found: {suite_path}")
        print("Create programs/suite.yaml or specify --suite path")
        return 1

    try:
        suite = load_program_suite(suite_path)
    except IntcalcError as e:
        print(f"Error loading suite configuration: {e}")
        return 1

    logger.info("Running suite %s from %s", suite.name, suite_path)
    results = run_suite(suite, program_filter=args.program)

    if args.program and not results:
        if any(p.name == args.program for p in suite.programs):
            print(f"Error: Program {args.program!r} is disabled in suite {suite.name}")
        else:
            print(f"Error: Program {args.program!r} not found in suite {suite.name}")
        return 1

    if args.show_output:
        for result in results:
            if result.output:
                print(result.output)
        print()

    print(format_results_table(results))
    return 0 if all(r.passed for r in results) else 1


def cmd_widths(args: argparse.Namespace) -> int:
    """Show integer widths."""
    print("Integer Widths")
    print("=" * 70)
    print(f"{'Name':<10} {'Min':>22} {'Max':>22} {'Max fib n':>12}")
    print("-" * 70)

    for name, width in WIDTHS.items():
        min_value = "-" if width.min_value is None else str(width.min_value)
        max_value = "-" if width.max_value is None else str(width.max_value)
        max_n = max_fibonacci_index(width)
        max_n_str = "unlimited" if max_n is None else str(max_n)
        print(f"{name:<10} {min_value:>22} {max_value:>22} {max_n_str:>12}")

    return 0


def _add_value_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--width",
        choices=list(WIDTHS),
        default="unbounded",
        help="Integer width the result must fit in (default: unbounded)",
    )
    parser.add_argument(
        "--template",
        default=DEFAULT_TEMPLATE,
        help="Output template with a {value} placeholder (default: 'Result: {value}')",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Compute the value without printing it",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="intcalc",
        description="Fibonacci numbers and binary-to-decimal conversion",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # fib command
    fib_parser = subparsers.add_parser("fib", help="Compute the n-th Fibonacci number")
    fib_parser.add_argument(
        "n",
        type=int,
        help="Index in the Fibonacci sequence (n >= 0)",
    )
    _add_value_options(fib_parser)
    fib_parser.set_defaults(func=cmd_fib)

    # bin command
    bin_parser = subparsers.add_parser("bin", help="Convert binary digits to decimal")
    bin_parser.add_argument(
        "digits",
        help="Binary digits, most significant first (e.g. 1101001)",
    )
    _add_value_options(bin_parser)
    bin_parser.set_defaults(func=cmd_bin)

    # run command
    run_parser = subparsers.add_parser("run", help="Run a program suite")
    run_parser.add_argument(
        "--suite",
        help="Path to suite.yaml configuration (default: programs/suite.yaml)",
    )
    run_parser.add_argument(
        "--program",
        help="Run only the specified program",
    )
    run_parser.add_argument(
        "--show-output",
        action="store_true",
        help="Print each program's output before the results table",
    )
    run_parser.set_defaults(func=cmd_run)

    # widths command
    widths_parser = subparsers.add_parser("widths", help="Show integer widths")
    widths_parser.set_defaults(func=cmd_widths)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
