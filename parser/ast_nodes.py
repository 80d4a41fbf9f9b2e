# parser/ast_nodes.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional logic formulas. Each node exclusively owns
its children, so trees can be freely shared and compared by value.

Node Types:
    Var: Propositional variables (free boolean inputs)
    Not: Unary negation
    And, Or, Implication, Biconditional, Xor: Binary connectives

All nodes support the visitor design pattern for traversal, and expose the
truth-table operations (variable discovery, evaluation, step extraction and
exhaustive evaluation) as methods.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Dict, List, Mapping, Protocol, Tuple


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal of the closed set of node variants.
    """

    def visit_var(self, n: Var): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_implication(self, n: Implication): ...

    def visit_biconditional(self, n: Biconditional): ...

    def visit_xor(self, n: Xor): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. All concrete node types inherit from this class and must implement
    the accept method for visitor dispatch and __str__ for string representation.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError

    def get_vars(self) -> List[str]:
        """Return the free variables of this expression.

        Names are deduplicated and kept in first-occurrence order of a
        left-to-right, depth-first traversal. This order fixes the column
        order of any truth table built from the expression.

        Returns:
            List of distinct variable names
        """
        from .evaluation import VariableCollector

        return VariableCollector().collect(self)

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        """Compute the truth value of this expression.

        Args:
            assignment: Total mapping from variable name to boolean value

        Returns:
            Boolean value of the expression under the assignment

        Raises:
            UnboundVariableError: A variable is missing from the assignment
        """
        from .evaluation import Evaluator

        return self.accept(Evaluator(assignment))

    def get_steps(self) -> List[Expr]:
        """Return every non-leaf sub-expression in post-order.

        Children are listed before the node containing them and structurally
        identical sub-expressions at different positions are all kept. The
        last element is the expression itself unless it is a bare variable.

        Returns:
            List of sub-expressions, innermost first
        """
        from .evaluation import StepCollector

        return StepCollector().collect(self)

    def evaluate_all(self) -> List[Tuple[Dict[str, bool], bool]]:
        """Evaluate this expression under every assignment of its variables.

        Assignments are produced in binary counting order with the first
        discovered variable as the most significant bit. An expression
        without variables yields no rows.

        Returns:
            Ordered list of (assignment, result) pairs

        Raises:
            EvaluationError: Evaluation failed for some assignment
        """
        from .evaluation import evaluate_all

        return evaluate_all(self)


@dataclass(frozen=True, slots=True)
class Var(Expr):
    """Propositional variable in a formula.

    Represents leaf nodes in the AST tree. Names are case-sensitive and two
    leaves with the same name denote the same logical variable.

    Attributes:
        name: The identifier string for this variable
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_var(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation operator for Boolean expressions.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"(!{self.operand})"


@dataclass(frozen=True, slots=True)
class BinaryExpr(Expr):
    """Common shape of the binary connectives.

    Attributes:
        left: Left operand
        right: Right operand
        symbol: Operator text used in the textual form
    """

    symbol: ClassVar[str] = ""

    left: Expr
    right: Expr

    def __str__(self) -> str:
        return f"({self.left}{self.symbol}{self.right})"


@dataclass(frozen=True, slots=True)
class And(BinaryExpr):
    """Logical conjunction, true when both operands are true."""

    symbol: ClassVar[str] = "&"

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(BinaryExpr):
    """Logical disjunction, true when at least one operand is true."""

    symbol: ClassVar[str] = "|"

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class Implication(BinaryExpr):
    """Material implication, false only for a true antecedent and false consequent."""

    symbol: ClassVar[str] = "=>"

    def accept(self, v: Visitor):
        return v.visit_implication(self)


@dataclass(frozen=True, slots=True)
class Biconditional(BinaryExpr):
    """Logical equivalence, true when both operands have the same value."""

    symbol: ClassVar[str] = "<=>"

    def accept(self, v: Visitor):
        return v.visit_biconditional(self)


@dataclass(frozen=True, slots=True)
class Xor(BinaryExpr):
    """Exclusive disjunction, true when the operands differ."""

    symbol: ClassVar[str] = "<!=>"

    def accept(self, v: Visitor):
        return v.visit_xor(self)
