# utils/table_renderer.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Text, CSV and JSON rendering of computed truth tables

"""Presentation layer for truth tables.

Consumes an already computed TruthTable and renders it as a boxed text
table (optionally coloured with colorama), as CSV, or as JSON. Cell values
are written as ``true``/``false``. Without rows the text and CSV forms are
empty strings: a formula without variables has nothing to display.
"""

import csv
import io
import json
from typing import List

from colorama import Fore, Style

from logic.truth_table import TruthTable


def _cell(value: bool) -> str:
    return "true" if value else "false"


def _table_cells(table: TruthTable) -> List[List[str]]:
    cells = []
    for row in table.rows:
        values = [*row.assignment.values(), *row.steps, row.result]
        cells.append([_cell(v) for v in values])
    return cells


def _colorize(text: str, padded: str) -> str:
    color = Fore.GREEN if text == "true" else Fore.RED
    return f"{color}{padded}{Style.RESET_ALL}"


def render_table(table: TruthTable, color: bool = False) -> str:
    """Render a truth table as a boxed text table.

    Args:
        table: Computed truth table
        color: Colour true cells green and false cells red

    Returns:
        Multi-line table text, or an empty string for an empty table
    """
    if table.is_empty:
        return ""

    headers = table.headers
    body = _table_cells(table)
    widths = [
        max(len(header), *(len(row[i]) for row in body))
        for i, header in enumerate(headers)
    ]

    separator = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def line(values: List[str], colorize: bool) -> str:
        parts = []
        for value, width in zip(values, widths):
            padded = value.ljust(width)
            parts.append(_colorize(value, padded) if colorize else padded)
        return "| " + " | ".join(parts) + " |"

    lines = [separator, line(headers, False), separator]
    lines.extend(line(row, color) for row in body)
    lines.append(separator)
    return "\n".join(lines)


def render_csv(table: TruthTable) -> str:
    """Render a truth table as CSV with a header row."""
    if table.is_empty:
        return ""

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(table.headers)
    writer.writerows(_table_cells(table))
    return buffer.getvalue().rstrip("\n")


def render_json(table: TruthTable) -> str:
    """Render a truth table as a JSON document.

    The document lists the formula, its variables, the step texts and one
    object per row holding the assignment, step values and result.
    """
    document = {
        "formula": table.source,
        "variables": table.variables,
        "steps": [str(step) for step in table.steps],
        "rows": [
            {
                "assignment": row.assignment,
                "steps": list(row.steps),
                "result": row.result,
            }
            for row in table.rows
        ],
    }
    return json.dumps(document, indent=2)
