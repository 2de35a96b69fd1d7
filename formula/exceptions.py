# formula/exceptions.py
# This file is part of Propsat - A Propositional Formula Checker
#
# Custom exceptions for formula parsing and evaluation

"""Domain-specific exceptions for propositional formula processing.

Parsing is fail-fast: the first problem found aborts the whole parse and is
reported as one of the ``ParseError`` subclasses below, tagged with the
character offset it was found at and a rendered caret illustration.

Hierarchy:
    ParseError
        LexicalError            unrecognized character or misspelled connective
        GrammarError            token not allowed after the previous token
            StructureError      tree builder refused an insertion
        BracketError            unopened ')' or unclosed '('
        IncompleteFormulaError  input ended while an operand was still required
    EvaluationError             assignment misses a literal, or tree incomplete
"""

from typing import Optional


def render_snippet(source: Optional[str], position: int) -> str:
    """Render the source line holding ``position`` with a caret under it.

    Args:
        source: Full formula text (may be None or empty)
        position: Character offset to point at; may equal ``len(source)``

    Returns:
        Two lines: the offending line and the caret line
    """
    if not isinstance(source, str) or not source:
        return "\n^"

    position = max(0, min(position, len(source)))
    line_start = source.rfind("\n", 0, position) + 1
    line_end = source.find("\n", position)
    if line_end == -1:
        line_end = len(source)

    line = source[line_start:line_end]
    column = position - line_start
    # Keep tabs so the caret lines up under terminals that expand them
    padding = "".join(ch if ch == "\t" else " " for ch in line[:column])
    return f"{line}\n{padding}^"


class ParseError(RuntimeError):
    """Exception raised when a formula is not well formed.

    Attributes:
        message: Human-readable description of the problem
        position: Character offset of the offending token
        source: The formula text being parsed
        snippet: Offending line plus a caret pointing at ``position``
    """

    def __init__(self, message: str, source: Optional[str] = None, position: int = 0):
        self.message = message
        self.source = source
        self.position = position
        self.snippet = render_snippet(source, position)
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.message} (position {self.position})\n{self.snippet}"


class LexicalError(ParseError):
    """Unrecognized character or incomplete multi-character connective."""

    pass


class GrammarError(ParseError):
    """Token class not allowed after the previously accepted token."""

    pass


class StructureError(GrammarError):
    """The tree builder cannot attach a node at the current frontier."""

    pass


class BracketError(ParseError):
    """Closing bracket without an opener, or opener never closed."""

    pass


class IncompleteFormulaError(ParseError):
    """Input ended while the formula still required an operand."""

    pass


class EvaluationError(RuntimeError):
    """Raised when a tree cannot be evaluated under an assignment."""

    pass
