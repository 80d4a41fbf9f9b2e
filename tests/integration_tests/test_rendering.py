# tests/integration_tests/test_rendering.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Test suite for text, CSV and JSON truth table rendering

"""Tests for the truth table presentation layer."""

import json

from colorama import Fore, Style

from logic import truth_table_for
from utils.table_renderer import render_csv, render_json, render_table


class TestTableRendering:
    """Test cases for boxed text tables."""

    def test_plain_table(self):
        table = truth_table_for("a & b")

        assert render_table(table) == "\n".join(
            [
                "+-------+-------+-------+",
                "| a     | b     | a & b |",
                "+-------+-------+-------+",
                "| false | false | false |",
                "| false | true  | false |",
                "| true  | false | false |",
                "| true  | true  | true  |",
                "+-------+-------+-------+",
            ]
        )

    def test_step_columns(self):
        table = truth_table_for("a | !a", include_steps=True)
        lines = render_table(table).splitlines()

        assert lines[1] == "| a     | (!a)  | a | !a |"
        assert lines[3] == "| false | true  | true   |"

    def test_colored_cells(self):
        table = truth_table_for("!p")
        text = render_table(table, color=True)

        assert f"{Fore.GREEN}true {Style.RESET_ALL}" in text
        assert f"{Fore.RED}false{Style.RESET_ALL}" in text
        # Header stays uncoloured
        assert text.splitlines()[1] == "| p     | !p    |"

    def test_plain_table_has_no_escape_codes(self):
        assert "\x1b" not in render_table(truth_table_for("a => b"))


class TestMachineReadableRendering:
    """Test cases for CSV and JSON output."""

    def test_csv(self):
        table = truth_table_for("a <!=> b")

        assert render_csv(table).splitlines() == [
            "a,b,a <!=> b",
            "false,false,false",
            "false,true,true",
            "true,false,true",
            "true,true,false",
        ]

    def test_csv_header_uses_source_text(self):
        table = truth_table_for("  a|b ")
        assert render_csv(table).splitlines()[0] == "a,b,a|b"

    def test_json(self):
        table = truth_table_for("A & (B | !C)", include_steps=True)
        document = json.loads(render_json(table))

        assert document["formula"] == "A & (B | !C)"
        assert document["variables"] == ["A", "B", "C"]
        assert document["steps"] == ["(!C)", "(B|(!C))"]
        assert len(document["rows"]) == 8
        assert document["rows"][0] == {
            "assignment": {"A": False, "B": False, "C": False},
            "steps": [True, True],
            "result": False,
        }
