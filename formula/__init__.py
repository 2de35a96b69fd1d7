# formula/__init__.py
# This file is part of Propsat - A Propositional Formula Checker
#
# Formula parsing components for propositional logic expressions

"""Propositional formula parsing.

This module turns textual propositional formulas into syntax trees in a
single forward pass: characters are classified into tokens, each token is
checked against the class of the token before it, and then folded straight
into the tree under construction. Malformed input is rejected at the first
problem with a position-tagged ``ParseError``.

Core Functions:
    parse: Converts a formula string into a tree and its literal list
    render: Converts a tree back into formula text
    dump_tree: Indented debug view of a tree

Supported Syntax:
    - Literals: runs of letters (``A``, ``Rain``), case-sensitive
    - Negation: ``~``
    - Connectives: ``/\\`` AND, ``\\/`` OR, ``->`` IMPLIES, ``<->`` IFF
    - Parenthetical grouping

Grouping:
    A connective always takes everything built so far at its bracket level
    as its left operand, so unbracketed chains group to the left:
    ``A -> B -> C`` is ``(A -> B) -> C`` and ``A \\/ B /\\ C`` is
    ``(A \\/ B) /\\ C``. Use brackets to group otherwise.

Example:
    >>> from formula import parse
    >>> tree, literals = parse("~A /\\ (B -> A)")
    >>> [literal.name for literal in literals]
    ['A', 'B']
"""

from typing import Optional
from .ast_nodes import dump_tree, render
from .exceptions import (
    BracketError,
    EvaluationError,
    GrammarError,
    IncompleteFormulaError,
    LexicalError,
    ParseError,
    StructureError,
)
from .grammar import ParsedFormula, _PropParser
from utils.logger import get_logger


def parse(source: Optional[str]) -> ParsedFormula:
    """Parse a propositional formula into a tree and its literals.

    Uses a fresh parser instance for each invocation, so calls never share
    state and independent parses may run on different threads.

    Args:
        source: Formula string to parse

    Returns:
        ParsedFormula ``(tree, literals)``; literals are distinct and in
        first-occurrence order

    Raises:
        ParseError: Formula is absent, empty or malformed. The concrete
            subclass tells which rule was broken.

    Example:
        >>> parse("A /\\ A").literals
        [Literal(name='A')]
    """
    logger = get_logger()

    parser = _PropParser()

    try:
        result = parser.parse(source)
        logger.debug(
            f"Formula parsed with {len(result.literals)} distinct literal(s)"
        )
        return result

    except ParseError as exc:
        logger.parse_failed(exc.message, exc.position)
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(f"Parse failed: {exc}", source, 0) from exc


__all__ = [
    "parse",
    "render",
    "dump_tree",
    "ParsedFormula",
    "ParseError",
    "LexicalError",
    "GrammarError",
    "StructureError",
    "BracketError",
    "IncompleteFormulaError",
    "EvaluationError",
]

__version__ = "1.0.0"
__description__ = "Single-pass propositional formula parser"
