# tests/parser_tests/test_parser_basic.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Test suite for basic formula parser functionality and round-trip integrity

"""Test suite for basic formula parser functionality and AST integrity.

This module tests the parser's ability to correctly parse valid formulas and
maintain structural integrity through parse -> stringify -> parse cycles.
Ensures AST string representations are syntactically correct and unambiguous.
"""

import pytest
from parser import parse
from parser.ast_nodes import (
    And,
    Biconditional,
    Implication,
    Not,
    Or,
    Var,
    Xor,
)
from utils.logger import get_logger


class TestFormulaParserBasic:
    """Test cases for basic parser functionality and round-trip integrity."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    VALID_FORMULAS = [
        # Basic variables and operators
        "p",
        "!q",
        "p & q",
        "p | r",
        "p => q",
        "p <=> q",
        "p <!=> q",
        # Chains of one operator
        "a & b & c",
        "a | b | c",
        "a => b => c",
        "a <=> b <=> c",
        "a <!=> b <!=> c",
        "!!!p",
        # Parentheses and grouping
        "p & (q | r)",
        "!(p & q)",
        "((p))",
        "(p & q) | (r & s)",
        "(a => b) <=> ((!b) => (!a))",
        # Complex nested expressions
        "!((p | q) & (r | s))",
        "a & (b | (c & (d | (e & f))))",
        "(a <!=> b) & (!(a <=> b))",
        # Whitespace handling
        " p\n& q ",
        # Identifier patterns
        "variable123",
        "123",
        "CamelCase",
    ]

    @pytest.mark.parametrize("formula", VALID_FORMULAS)
    def test_round_trip_ast_integrity(self, formula):
        """Test that parse -> stringify -> parse preserves AST structure.

        Args:
            formula: Valid formula string
        """
        self.logger.debug(f"Testing round-trip integrity for: {formula}")

        original_ast = parse(formula)
        stringified = str(original_ast)
        reparsed_ast = parse(stringified)

        assert original_ast == reparsed_ast, (
            f"AST structure changed during round-trip:\n"
            f"Original: {formula!r}\n"
            f"Stringified: {stringified!r}"
        )

    # Test cases: (input_formula, expected_ast_structure)
    STRUCTURE_CASES = [
        ("abc", Var("abc")),
        ("!abc", Not(Var("abc"))),
        ("a&b", And(Var("a"), Var("b"))),
        ("a|b", Or(Var("a"), Var("b"))),
        ("a=>b", Implication(Var("a"), Var("b"))),
        ("a<=>b", Biconditional(Var("a"), Var("b"))),
        ("a<!=>b", Xor(Var("a"), Var("b"))),
        ("a&(!b)", And(Var("a"), Not(Var("b")))),
        ("a&!b", And(Var("a"), Not(Var("b")))),
        ("!a&b", And(Not(Var("a")), Var("b"))),
        ("!!a", Not(Not(Var("a")))),
        ("!(a|b)", Not(Or(Var("a"), Var("b")))),
        ("(abc)", Var("abc")),
        (
            "(a&b)|((!a)&(!b))",
            Or(
                And(Var("a"), Var("b")),
                And(Not(Var("a")), Not(Var("b"))),
            ),
        ),
    ]

    @pytest.mark.parametrize("formula, expected", STRUCTURE_CASES)
    def test_parse_structure(self, formula, expected):
        """Test that formulas produce exactly the expected trees.

        Args:
            formula: Formula string
            expected: Expected AST
        """
        assert parse(formula) == expected

    # Chains fold to the left: a op b op c => (a op b) op c
    ASSOCIATIVITY_CASES = [
        ("a&b&c", And(And(Var("a"), Var("b")), Var("c"))),
        ("a|b|c|d", Or(Or(Or(Var("a"), Var("b")), Var("c")), Var("d"))),
        ("a=>b=>c", Implication(Implication(Var("a"), Var("b")), Var("c"))),
        ("a<=>b<=>c", Biconditional(Biconditional(Var("a"), Var("b")), Var("c"))),
        ("a<!=>b<!=>c", Xor(Xor(Var("a"), Var("b")), Var("c"))),
        ("a&(b&c)", And(Var("a"), And(Var("b"), Var("c")))),
    ]

    @pytest.mark.parametrize("formula, expected", ASSOCIATIVITY_CASES)
    def test_left_associative_chains(self, formula, expected):
        """Test that operator chains fold to the left.

        Args:
            formula: Chained formula string
            expected: Expected left-folded AST
        """
        assert parse(formula) == expected

    def test_string_representation(self, step_example):
        """Textual forms are fully parenthesized and contain no spaces."""
        assert str(step_example) == "(A&(B|(!C)))"
        assert str(parse("a => b")) == "(a=>b)"
        assert str(parse("a <=> b")) == "(a<=>b)"
        assert str(parse("a <!=> b")) == "(a<!=>b)"
        assert str(parse("x")) == "x"

    def test_whitespace_insensitivity(self):
        """Test that spacing never changes the parsed tree."""
        whitespace_cases = [
            ("a & b", "a&b"),
            ("  p  ", "p"),
            ("p\t&\nq", "p&q"),
            (" ( a | b ) & ! c ", "(a|b)&!c"),
            ("a <=> b", "a<=>b"),
        ]

        for input_formula, expected_base in whitespace_cases:
            self.logger.debug(f"Testing whitespace handling: {input_formula!r}")
            assert parse(input_formula) == parse(expected_base)

    def test_spaces_inside_identifiers_are_removed(self):
        """All whitespace is stripped before tokenizing, even inside names."""
        assert parse("ab c") == Var("abc")
        assert parse("a b & c\nd") == And(Var("ab"), Var("cd"))

    def test_case_sensitive_identifiers(self):
        """Identifiers differing only in case are different variables."""
        assert parse("A&a") == And(Var("A"), Var("a"))

    def test_fresh_parser_per_call(self):
        """A failing parse does not affect later calls."""
        from parser import ParseError

        with pytest.raises(ParseError):
            parse("a & b | c")
        assert parse("a | b") == Or(Var("a"), Var("b"))
