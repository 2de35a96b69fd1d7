# logic/__init__.py

"""Evaluation and satisfiability of parsed formulas.

This package provides:
  • evaluate: truth value of a tree under an assignment
  • is_satisfiable / find_model / iter_models: brute-force model search
  • is_tautology: true under every assignment
  • Formula: parsed formula wrapper with the above as methods
  • Verdict: TAUTOLOGY, CONTINGENT or UNSATISFIABLE
"""

from .evaluator import Evaluator, collect_literals, evaluate
from .satisfiability import (
    find_model,
    is_satisfiable,
    is_tautology,
    iter_assignments,
    iter_models,
)
from .formula import Formula
from .verdict import Verdict

__all__ = [
    "Evaluator",
    "collect_literals",
    "evaluate",
    "find_model",
    "is_satisfiable",
    "is_tautology",
    "iter_assignments",
    "iter_models",
    "Formula",
    "Verdict",
]
