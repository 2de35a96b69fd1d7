# logic/satisfiability.py
# This file is part of Propsat - A Propositional Formula Checker
#
# Brute-force satisfiability search over literal assignments

"""Satisfiability by truth-table enumeration.

For a tree over k distinct literals all 2^k assignments are tried until one
makes the formula true. This is meant for human-written formulas with few
literals; the search is exponential in k and makes no attempt to be clever.
Each assignment is evaluated independently against the immutable tree.
"""

from itertools import product
from typing import Dict, Iterator, Optional, Sequence
from formula.ast_nodes import Node
from formula.symbols import Literal
from utils.logger import get_logger
from .evaluator import collect_literals, evaluate


Assignment = Dict[Literal, bool]


def iter_assignments(literals: Sequence[Literal]) -> Iterator[Assignment]:
    """Yield every assignment over the given literals.

    Args:
        literals: Distinct literals to assign

    Yields:
        Dict mapping each literal to a truth value, 2^k dicts in total
    """
    for values in product((True, False), repeat=len(literals)):
        yield dict(zip(literals, values))


def iter_models(
    tree: Node, literals: Optional[Sequence[Literal]] = None
) -> Iterator[Assignment]:
    """Yield every assignment under which the tree is true.

    Args:
        tree: Complete formula tree
        literals: Literals to enumerate; defaults to those in the tree

    Yields:
        Satisfying assignments
    """
    logger = get_logger()
    if literals is None:
        literals = collect_literals(tree)

    for assignment in iter_assignments(literals):
        result = evaluate(tree, assignment)
        logger.assignment_checked(assignment, result)
        if result:
            yield assignment


def find_model(
    tree: Node, literals: Optional[Sequence[Literal]] = None
) -> Optional[Assignment]:
    """Return the first satisfying assignment found, or None."""
    return next(iter_models(tree, literals), None)


def is_satisfiable(tree: Node, literals: Optional[Sequence[Literal]] = None) -> bool:
    """Decide whether some assignment makes the tree true.

    Stops at the first satisfying assignment.

    Args:
        tree: Complete formula tree
        literals: Literals to enumerate; defaults to those in the tree

    Returns:
        True if the formula is satisfiable
    """
    model = find_model(tree, literals)
    get_logger().debug(
        f"Satisfiability search {'found' if model is not None else 'found no'} model"
    )
    return model is not None


def is_tautology(tree: Node, literals: Optional[Sequence[Literal]] = None) -> bool:
    """Decide whether every assignment makes the tree true.

    Stops at the first falsifying assignment.
    """
    if literals is None:
        literals = collect_literals(tree)
    return all(evaluate(tree, assignment) for assignment in iter_assignments(literals))
