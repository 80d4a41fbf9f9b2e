#!/usr/bin/env python3
# run_truth_table.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Command-line interface for truth table generation with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from colorama import just_fix_windows_console

from logic.truth_table import TruthTable, VariableLimitError, truth_table_for
from parser.exceptions import ParseError, EvaluationError
from utils.logger import configure_logging, get_logger
from utils.table_renderer import render_csv, render_json, render_table

DEFAULT_MAX_VARIABLES = 16

RENDERERS = {
    "table": render_table,
    "csv": render_csv,
    "json": render_json,
}


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula as string

    Raises:
        FileNotFoundError: If formula file doesn't exist
        ValueError: If formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}") from e

    if not content:
        raise ValueError("Formula file is empty")

    return content


def render(table: TruthTable, output_format: str, color: bool) -> str:
    """Render a truth table in the requested output format."""
    if output_format == "table":
        return render_table(table, color=color)
    return RENDERERS[output_format](table)


def describe(table: TruthTable) -> str:
    """Classify a formula from its truth table."""
    if table.is_tautology:
        return "tautology"
    if table.is_contradiction:
        return "contradiction"
    return "satisfiable"


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Veritas propositional logic truth table generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_truth_table.py "(a&b)|((!a)&(!b))"
  python run_truth_table.py "a & (b | (!c))" --steps
  python run_truth_table.py -f formula.txt --format csv
  python run_truth_table.py "p => q" --summary --color

Operators:
  !  not      &  and      |  or
  => implies  <=> iff     <!=> xor

Different binary operators must be separated with parentheses:
  "a & b | c" is rejected, "(a & b) | c" is accepted.
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("formula", nargs="?", help="Formula to evaluate")
    source.add_argument(
        "-f", "--file", type=Path, help="Path to a file containing the formula"
    )

    parser.add_argument(
        "-s",
        "--steps",
        action="store_true",
        help="Add a column for every intermediate sub-expression",
    )

    parser.add_argument(
        "--format",
        choices=sorted(RENDERERS),
        default="table",
        help="Output format (default: table)",
    )

    parser.add_argument(
        "--color", action="store_true", help="Colour true/false cells in table output"
    )

    parser.add_argument(
        "--max-vars",
        type=int,
        default=DEFAULT_MAX_VARIABLES,
        help=f"Refuse formulas with more variables (default: {DEFAULT_MAX_VARIABLES})",
    )

    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print whether the formula is a tautology, contradiction or satisfiable",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for truth table generation.

    Args:
        argv: Command line arguments (defaults to ``sys.argv[1:]``)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        formula = args.formula if args.file is None else read_formula_file(args.file)

        table = truth_table_for(
            formula, include_steps=args.steps, max_variables=args.max_vars
        )

        if table.is_empty:
            logger.warning("Formula has no variables, nothing to display")
            return 0

        if args.color:
            just_fix_windows_console()

        print(render(table, args.format, args.color))

        if args.summary:
            print(f"\n{table.source}: {describe(table)}")

        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except VariableLimitError as e:
        logger.error(f"Too many variables: {e}")
        return 4

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return 3

    except EvaluationError as e:
        logger.error(f"Evaluation error: {e}")
        return 5

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 5


if __name__ == "__main__":
    sys.exit(main())
