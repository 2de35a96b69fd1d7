# logic/formula.py

"""
Encapsulates a parsed propositional formula together with its literals.

The wrapper keeps the source text for reporting and offers the evaluation
and satisfiability operations as methods.
"""

from dataclasses import dataclass
from typing import Iterator, List, Mapping
from formula import parse, render
from formula.ast_nodes import Node
from formula.symbols import Literal
from .evaluator import evaluate
from .satisfiability import Assignment, find_model, is_tautology, iter_models
from .verdict import Verdict


@dataclass(frozen=True)
class Formula:
    """
    Wraps the root of a parsed formula tree.

    Attributes:
        source: The text the formula was parsed from.
        root: The root node of the tree.
        literals: Distinct literals in first-occurrence order.
    """
    source: str
    root: Node
    literals: List[Literal]

    @classmethod
    def from_text(cls, text: str) -> "Formula":
        """Parse text into a Formula; raises ParseError when malformed."""
        tree, literals = parse(text)
        return cls(text, tree, literals)

    def literal(self, name: str) -> Literal:
        """Look up one of this formula's literals by name."""
        for literal in self.literals:
            if literal.name == name:
                return literal
        raise KeyError(name)

    def evaluate(self, assignment: Mapping[Literal, bool]) -> bool:
        return evaluate(self.root, assignment)

    def models(self) -> Iterator[Assignment]:
        return iter_models(self.root, self.literals)

    def is_satisfiable(self) -> bool:
        return find_model(self.root, self.literals) is not None

    def verdict(self) -> Verdict:
        if not self.is_satisfiable():
            return Verdict.UNSATISFIABLE
        if is_tautology(self.root, self.literals):
            return Verdict.TAUTOLOGY
        return Verdict.CONTINGENT

    def __str__(self) -> str:
        return render(self.root)
