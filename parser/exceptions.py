# parser/exceptions.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Custom exceptions for formula parsing and evaluation

"""Domain-specific exceptions for propositional formula processing.

This module defines exceptions that can be raised while parsing a formula
or evaluating its syntax tree against a truth assignment. Parse failures are
user-facing; evaluation failures indicate an assignment that does not cover
the formula's free variables.
"""


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Indicates that the input formula does not conform to the grammar, is
    empty, contains illegal characters, or mixes different binary operators
    without parentheses. No partial tree is ever returned alongside it.
    """

    pass


class EvaluationError(RuntimeError):
    """Base class for failures while evaluating an expression tree."""

    pass


class UnboundVariableError(EvaluationError, KeyError):
    """Raised when a variable has no value in the supplied assignment.

    Attributes:
        name: The variable that could not be resolved
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unbound variable '{name}' in assignment")

    def __str__(self) -> str:
        return self.args[0]
