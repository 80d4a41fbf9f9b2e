# parser/__init__.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Formula parsing components and the propositional expression model

"""Propositional formula parsing and expression trees.

This module converts textual formula representations into immutable
abstract syntax trees. The trees carry the operations needed to build a
truth table: free-variable discovery, evaluation under an assignment,
intermediate step extraction and exhaustive evaluation.

Core Functions:
    parse: Converts formula strings into Abstract Syntax Trees

Supported Logic:
    - Negation (!)
    - Conjunction (&) and disjunction (|)
    - Material implication (=>) and biconditional (<=>)
    - Exclusive or (<!=>)
    - Alphanumeric propositional variables

Grammar Features:
    - Whitespace is stripped before parsing and never significant
    - Chains of one repeated binary operator fold to the left
    - Different binary operators must be separated by parentheses

Example:
    >>> from parser import parse
    >>> expr = parse("(a & b) | ((!a) & (!b))")
    >>> expr.get_vars()
    ['a', 'b']
"""

from .exceptions import ParseError, EvaluationError, UnboundVariableError
from .grammar import _FormulaParser
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
from utils.logger import get_logger


def parse(source: str) -> Expr:
    """Parse a propositional formula string into an Abstract Syntax Tree.

    Uses a fresh parser instance for each invocation to ensure stateless
    operation. The entire input must be consumed; no partial tree is ever
    returned.

    Args:
        source: Propositional formula string to parse

    Returns:
        Root AST node representing the parsed formula structure

    Raises:
        ParseError: Formula is empty, malformed or mixes operators without
            parentheses

    Example:
        >>> parse("a & b & c")
        And(left=And(left=Var(name='a'), right=Var(name='b')), right=Var(name='c'))
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = _FormulaParser()

    try:
        result = parser.parse(source)
        logger.debug(
            f"Formula parsed successfully into AST with type: {type(result).__name__}"
        )
        return result

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "parse",
    "ParseError",
    "EvaluationError",
    "UnboundVariableError",
    "Expr",
    "Var",
    "Not",
    "And",
    "Or",
    "Implication",
    "Biconditional",
    "Xor",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing and expression trees"
