# parser/evaluation.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Visitors for variable discovery, evaluation and step extraction

"""Semantic operations over propositional syntax trees.

This module implements the traversals behind the ``Expr`` methods as
visitors over the closed set of node variants:

1. VariableCollector: first-occurrence ordered free variables
2. Evaluator: truth value under a total assignment
3. StepCollector: post-order list of non-leaf sub-expressions

``evaluate_all`` drives the Evaluator across every assignment produced by
the bit-cartesian enumerator.
"""

from __future__ import annotations
from typing import Dict, List, Mapping, Tuple
from . import ast_nodes as ast
from .exceptions import UnboundVariableError
from logic.bit_cartesian import BitCartesian
from utils.logger import get_logger


class VariableCollector(ast.Visitor):
    """Collects distinct variable names in left-to-right depth-first order."""

    def __init__(self):
        self._seen: Dict[str, None] = {}

    def collect(self, root: ast.Expr) -> List[str]:
        self._seen.clear()
        root.accept(self)
        return list(self._seen)

    def visit_var(self, n: ast.Var) -> None:
        self._seen.setdefault(n.name, None)

    def visit_not(self, n: ast.Not) -> None:
        n.operand.accept(self)

    def _visit_binary(self, n: ast.BinaryExpr) -> None:
        n.left.accept(self)
        n.right.accept(self)

    visit_and = _visit_binary
    visit_or = _visit_binary
    visit_implication = _visit_binary
    visit_biconditional = _visit_binary
    visit_xor = _visit_binary


class Evaluator(ast.Visitor):
    """Evaluates a tree against a fixed assignment.

    Binary connectives always evaluate both operands before combining them,
    so a lookup failure on either side fails the whole evaluation.

    Attributes:
        assignment: Mapping from variable name to truth value
    """

    def __init__(self, assignment: Mapping[str, bool]):
        self.assignment = assignment

    def visit_var(self, n: ast.Var) -> bool:
        try:
            return bool(self.assignment[n.name])
        except KeyError:
            raise UnboundVariableError(n.name) from None

    def visit_not(self, n: ast.Not) -> bool:
        return not n.operand.accept(self)

    def _operands(self, n: ast.BinaryExpr) -> Tuple[bool, bool]:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return left, right

    def visit_and(self, n: ast.And) -> bool:
        left, right = self._operands(n)
        return left and right

    def visit_or(self, n: ast.Or) -> bool:
        left, right = self._operands(n)
        return left or right

    def visit_implication(self, n: ast.Implication) -> bool:
        left, right = self._operands(n)
        return (not left) or right

    def visit_biconditional(self, n: ast.Biconditional) -> bool:
        left, right = self._operands(n)
        return left == right

    def visit_xor(self, n: ast.Xor) -> bool:
        left, right = self._operands(n)
        return left != right


class StepCollector(ast.Visitor):
    """Collects non-leaf sub-expressions in post-order.

    No deduplication is applied: equal sub-expressions found at different
    positions each produce their own entry.
    """

    def __init__(self):
        self._steps: List[ast.Expr] = []

    def collect(self, root: ast.Expr) -> List[ast.Expr]:
        self._steps = []
        root.accept(self)
        return self._steps

    def visit_var(self, n: ast.Var) -> None:
        pass

    def visit_not(self, n: ast.Not) -> None:
        n.operand.accept(self)
        self._steps.append(n)

    def _visit_binary(self, n: ast.BinaryExpr) -> None:
        n.left.accept(self)
        n.right.accept(self)
        self._steps.append(n)

    visit_and = _visit_binary
    visit_or = _visit_binary
    visit_implication = _visit_binary
    visit_biconditional = _visit_binary
    visit_xor = _visit_binary


def evaluate_all(root: ast.Expr) -> List[Tuple[Dict[str, bool], bool]]:
    """Evaluate an expression under every assignment of its free variables.

    Args:
        root: Expression to evaluate

    Returns:
        Ordered (assignment, result) rows, empty when there are no variables

    Raises:
        EvaluationError: Evaluation failed for some assignment
    """
    logger = get_logger()

    variables = root.get_vars()
    combinations = BitCartesian(len(variables))
    logger.debug(
        f"Enumerating {combinations.count} assignments over variables {variables}"
    )

    rows = []
    for values in combinations:
        assignment = dict(zip(variables, values))
        rows.append((assignment, root.evaluate(assignment)))

    return rows
