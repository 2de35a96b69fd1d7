# logic/evaluator.py
# This file is part of Propsat - A Propositional Formula Checker
#
# Truth evaluation of formula trees under an assignment

"""Truth evaluation of formula trees.

An assignment maps each ``Literal`` to a truth value. Evaluation only reads
the tree; a literal missing from the assignment is an error, never a silent
default. Nodes are visited in post-order against a value stack, so deeply
nested formulas evaluate without recursion.
"""

from __future__ import annotations
from typing import Dict, List, Mapping
from formula import ast_nodes as ast
from formula.exceptions import EvaluationError
from formula.symbols import Literal


class Evaluator(ast.Visitor):
    """Evaluates a tree under one fixed assignment.

    Attributes:
        assignment: Truth value for every literal the tree references
    """

    def __init__(self, assignment: Mapping[Literal, bool]):
        self.assignment = assignment
        self._values: List[bool] = []

    def evaluate(self, tree: ast.Node) -> bool:
        self._values = []
        for node in ast.iter_postorder(tree):
            if node is None:
                raise EvaluationError("Evaluating an incomplete formula")
            node.accept(self)
        return self._values.pop()

    def visit_literal(self, n: ast.LiteralNode):
        try:
            self._values.append(bool(self.assignment[n.literal]))
        except KeyError:
            raise EvaluationError(
                f"No truth value assigned to literal '{n.literal.name}'"
            ) from None

    def visit_negation(self, n: ast.NegationNode):
        self._values.append(not self._values.pop())

    def visit_connective(self, n: ast.ConnectiveNode):
        right = self._values.pop()
        left = self._values.pop()
        self._values.append(n.connective.apply(left, right))

    def visit_group(self, n: ast.GroupNode):
        # The head's value is already on the stack
        if not n.closed:
            raise EvaluationError("Evaluating an unclosed group")


class _LiteralCollector:
    """Visitor gathering distinct literals in first-occurrence order."""

    def __init__(self):
        self.seen: Dict[Literal, None] = {}

    def collect(self, tree: ast.Node) -> List[Literal]:
        for node in ast.iter_postorder(tree):
            if node is not None:
                node.accept(self)
        return list(self.seen)

    def visit_literal(self, n: ast.LiteralNode):
        self.seen.setdefault(n.literal, None)

    def visit_negation(self, n: ast.NegationNode):
        pass

    def visit_connective(self, n: ast.ConnectiveNode):
        pass

    def visit_group(self, n: ast.GroupNode):
        pass


def evaluate(tree: ast.Node, assignment: Mapping[Literal, bool]) -> bool:
    """Evaluate a formula tree under an assignment.

    Args:
        tree: Complete formula tree
        assignment: Truth value for each literal referenced by the tree

    Returns:
        Truth value of the formula

    Raises:
        EvaluationError: A referenced literal has no value, or the tree is
            incomplete
    """
    return Evaluator(assignment).evaluate(tree)


def collect_literals(tree: ast.Node) -> List[Literal]:
    """Distinct literals referenced by a tree, in first-occurrence order."""
    return _LiteralCollector().collect(tree)
