# logic/truth_table.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Truth table assembly from parsed expressions

"""Truth table construction for propositional formulas.

A truth table pairs every assignment of the formula's free variables with
the value of the whole formula and, optionally, the values of its
intermediate steps. Rows follow the enumeration order of the bit-cartesian
product, and columns follow first-occurrence variable order.

The root step is dropped from the step columns since the result column
already shows it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from parser import parse
from parser.ast_nodes import Expr
from utils.logger import get_logger


class VariableLimitError(ValueError):
    """Raised when a formula has more variables than the caller allows.

    Attributes:
        count: Number of free variables in the formula
        limit: Maximum number of variables accepted
    """

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Formula has {count} variables, limit is {limit} "
            f"({1 << count} rows would be generated)"
        )


@dataclass(frozen=True)
class TruthTableRow:
    """A single assignment and the values it produces.

    Attributes:
        assignment: Variable values in column order
        result: Value of the whole formula
        steps: Value of each displayed step, in step order
    """

    assignment: Dict[str, bool]
    result: bool
    steps: Tuple[bool, ...] = ()


@dataclass
class TruthTable:
    """Complete truth table of a formula.

    Attributes:
        source: Display text of the formula, used as the result header
        expression: Parsed expression tree
        variables: Free variables in column order
        steps: Intermediate sub-expressions shown as extra columns
        rows: One row per assignment in enumeration order
    """

    source: str
    expression: Expr
    variables: List[str]
    steps: List[Expr] = field(default_factory=list)
    rows: List[TruthTableRow] = field(default_factory=list)

    @property
    def headers(self) -> List[str]:
        """Column titles: variables, step texts, then the formula itself."""
        return [*self.variables, *(str(step) for step in self.steps), self.source]

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to display (no variables)."""
        return not self.rows

    @property
    def is_tautology(self) -> bool:
        return not self.is_empty and all(row.result for row in self.rows)

    @property
    def is_contradiction(self) -> bool:
        return not self.is_empty and not any(row.result for row in self.rows)

    @property
    def is_satisfiable(self) -> bool:
        return any(row.result for row in self.rows)


def build_truth_table(
    expression: Expr, source: Optional[str] = None, include_steps: bool = False
) -> TruthTable:
    """Evaluate an expression over all assignments and collect the rows.

    Args:
        expression: Parsed expression tree
        source: Display text for the result column (defaults to ``str(expression)``)
        include_steps: Add a column for every non-root step

    Returns:
        Populated TruthTable

    Raises:
        EvaluationError: Evaluation failed for some assignment
    """
    logger = get_logger()

    steps = expression.get_steps()[:-1] if include_steps else []
    table = TruthTable(
        source=str(expression) if source is None else source,
        expression=expression,
        variables=expression.get_vars(),
        steps=steps,
    )

    for assignment, result in expression.evaluate_all():
        step_values = tuple(step.evaluate(assignment) for step in steps)
        table.rows.append(TruthTableRow(assignment, result, step_values))

    logger.table_built(len(table.rows), len(steps))
    return table


def truth_table_for(
    formula: str, include_steps: bool = False, max_variables: Optional[int] = None
) -> TruthTable:
    """Parse a formula and build its truth table.

    Args:
        formula: Formula text, also used as the result column header
        include_steps: Add a column for every non-root step
        max_variables: Refuse formulas with more free variables than this

    Returns:
        Populated TruthTable

    Raises:
        ParseError: Formula is malformed
        VariableLimitError: Formula exceeds ``max_variables``
    """
    expression = parse(formula)

    variables = expression.get_vars()
    if max_variables is not None and len(variables) > max_variables:
        raise VariableLimitError(len(variables), max_variables)

    get_logger().formula_parsed(formula, str(expression), variables)
    return build_truth_table(expression, formula.strip(), include_steps)
