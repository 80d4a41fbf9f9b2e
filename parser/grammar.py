# parser/grammar.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implemented with the SLY parser generator.

This module defines the grammar rules and parsing logic for propositional
formulas. The parser constructs Abstract Syntax Trees from token streams
provided by the lexer.

Grammar Features:
- Binary connectives are written as chains of ONE repeated operator, folded
  to the left: ``a & b & c`` is ``((a & b) & c)``
- Different binary operators cannot share a nesting level; parentheses are
  the only way to combine them, so ``a & b | c`` is rejected
- Negation applies to a single factor: an identifier, a parenthesized
  expression or another negation

Operators: & (and), | (or), => (implication), <=> (biconditional),
<!=> (exclusive or), ! (not)
"""

from sly import Parser
from .lexer import FormulaLexer
from .ast_nodes import (
    Expr,
    Var,
    Not,
    And,
    Or,
    Implication,
    Biconditional,
    Xor,
)
from .exceptions import ParseError
from utils.logger import get_logger

# Token type of each binary operator and the text shown in error messages
OPERATOR_SYMBOLS = {
    "AND": "&",
    "OR": "|",
    "IMPLIES": "=>",
    "IFF": "<=>",
    "XOR": "<!=>",
}

_WHITESPACE = str.maketrans("", "", " \t\r\n")


def normalize(text: str) -> str:
    """Strip every whitespace character from a formula.

    Spacing is never significant, so ``"a b"`` is the identifier ``ab``.

    Args:
        text: Raw formula text

    Returns:
        Formula text without spaces, tabs or line breaks
    """
    return text.translate(_WHITESPACE)


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    Each operator chain is its own nonterminal, which keeps the grammar free
    of precedence declarations: a chain can only be continued by its own
    operator, and any other binary operator after it is a syntax error.

    Attributes:
        tokens: Token types from FormulaLexer
    """

    tokens = FormulaLexer.tokens

    # Operator chained before the most recent binary operator, at its depth
    _previous_operator = None

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: complete formula is a single expression."""
        return p.expr

    @_("and_chain", "or_chain", "implies_chain", "iff_chain", "xor_chain", "factor")
    def expr(self, p) -> Expr:
        """An expression is a single operator chain or a lone factor."""
        return p[0]

    @_("factor AND factor")
    def and_chain(self, p) -> Expr:
        """Conjunction of two factors."""
        return And(p.factor0, p.factor1)

    @_("and_chain AND factor")
    def and_chain(self, p) -> Expr:
        """Left-associative extension of a conjunction chain."""
        return And(p.and_chain, p.factor)

    @_("factor OR factor")
    def or_chain(self, p) -> Expr:
        """Disjunction of two factors."""
        return Or(p.factor0, p.factor1)

    @_("or_chain OR factor")
    def or_chain(self, p) -> Expr:
        """Left-associative extension of a disjunction chain."""
        return Or(p.or_chain, p.factor)

    @_("factor IMPLIES factor")
    def implies_chain(self, p) -> Expr:
        """Material implication between two factors."""
        return Implication(p.factor0, p.factor1)

    @_("implies_chain IMPLIES factor")
    def implies_chain(self, p) -> Expr:
        """Left-associative extension of an implication chain."""
        return Implication(p.implies_chain, p.factor)

    @_("factor IFF factor")
    def iff_chain(self, p) -> Expr:
        """Biconditional between two factors."""
        return Biconditional(p.factor0, p.factor1)

    @_("iff_chain IFF factor")
    def iff_chain(self, p) -> Expr:
        """Left-associative extension of a biconditional chain."""
        return Biconditional(p.iff_chain, p.factor)

    @_("factor XOR factor")
    def xor_chain(self, p) -> Expr:
        """Exclusive disjunction of two factors."""
        return Xor(p.factor0, p.factor1)

    @_("xor_chain XOR factor")
    def xor_chain(self, p) -> Expr:
        """Left-associative extension of an exclusive-or chain."""
        return Xor(p.xor_chain, p.factor)

    @_("NOT factor")
    def factor(self, p) -> Expr:
        """Negation operator."""
        return Not(p.factor)

    @_("LPAREN expr RPAREN")
    def factor(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("ID")
    def factor(self, p) -> Expr:
        """Identifier as propositional variable."""
        return Var(p.ID)

    def parse(self, text: str) -> Expr:
        """Parse formula text into AST.

        Strips all whitespace, tokenizes the remainder and constructs an
        Abstract Syntax Tree. The whole input must be consumed.

        Args:
            text: Propositional formula string to parse

        Returns:
            Root AST node representing the parsed formula

        Raises:
            ParseError: If formula is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        source = normalize(text)
        if not source:
            raise ParseError("Input formula is empty.")

        self._previous_operator = None

        try:
            tokens = self._track_operators(FormulaLexer().tokenize(source))
            ast_result = super().parse(tokens)

            if ast_result is None:
                raise ParseError("Failed to parse formula (syntax error).")

            logger.debug(
                f"Successfully parsed formula into {type(ast_result).__name__}"
            )
            return ast_result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def _track_operators(self, tokens):
        """Pass tokens through while remembering operators per nesting level.

        Before each binary operator is handed to the parser, the operator
        previously seen at the same parenthesis depth is stored so that
        ``error`` can tell a mixed chain from other syntax errors. An
        operator that does not follow an operand is never a mixing
        candidate: its real problem is the missing operand.
        """
        levels = [None]
        previous_type = None
        for token in tokens:
            if token.type == "LPAREN":
                levels.append(None)
            elif token.type == "RPAREN" and len(levels) > 1:
                levels.pop()
            elif token.type in OPERATOR_SYMBOLS:
                if previous_type in ("ID", "RPAREN"):
                    self._previous_operator = levels[-1]
                else:
                    self._previous_operator = None
                levels[-1] = token.type
            previous_type = token.type
            yield token

    def error(self, token):
        """Handle syntax errors during parsing.

        Called automatically by SLY when encountering tokens that don't
        match any grammar rule. A binary operator that differs from the
        operator already chained at the same nesting level is reported as a
        mixed-operator error.

        Args:
            token: Problematic token or None for EOF errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token is None:
            raise ParseError("Syntax error: Unexpected end of formula")

        previous = self._previous_operator
        if (
            token.type in OPERATOR_SYMBOLS
            and previous is not None
            and token.type != previous
        ):
            raise ParseError(
                f"Cannot mix '{OPERATOR_SYMBOLS[previous]}' and "
                f"'{token.value}' without parentheses at position {token.index}"
            )

        raise ParseError(
            f"Syntax error near '{token.value}' "
            f"(type: {token.type}) at position {token.index}"
        )
