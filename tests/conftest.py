# tests/conftest.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Veritas tests.

This module provides pytest configuration, fixtures, and utilities for testing
the truth table generator. It ensures proper module path setup and provides
common formulas and trees for all test modules.

The configuration handles:
- Python path setup for module imports
- Logger creation before any output capturing fixture is active
- Common fixtures for expressions and formulas
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Initialize test environment and verify module availability.

    Creates the global logger once for the session so that its handler is
    bound to the session-wide stream rather than a per-test capture.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import logic
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    from utils.logger import get_logger

    get_logger()

    yield


@pytest.fixture
def step_example():
    """Provide the tree for ``A & (B | !C)``.

    Returns:
        Expr: And(Var(A), Or(Var(B), Not(Var(C))))
    """
    from parser.ast_nodes import And, Or, Not, Var

    return And(Var("A"), Or(Var("B"), Not(Var("C"))))


@pytest.fixture
def xnor_formula():
    """Provide the equivalence-by-cases formula used by the demo program.

    Returns:
        str: Formula true exactly when a and b agree
    """
    return "(a&b)|((!a)&(!b))"
