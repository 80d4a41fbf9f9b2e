# logic/__init__.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Truth table generation public API

"""Exhaustive evaluation of propositional formulas.

This package provides:
  • BitCartesian: lazy, restartable enumeration of boolean vectors
  • TruthTable / TruthTableRow: evaluated rows with optional step columns
  • build_truth_table: evaluate a parsed expression over all assignments
  • truth_table_for: parse a formula and build its table in one call
  • VariableLimitError: raised when a formula has too many variables
"""

from .bit_cartesian import BitCartesian
from .truth_table import (
    TruthTable,
    TruthTableRow,
    VariableLimitError,
    build_truth_table,
    truth_table_for,
)

__all__ = [
    "BitCartesian",
    "TruthTable",
    "TruthTableRow",
    "VariableLimitError",
    "build_truth_table",
    "truth_table_for",
]
