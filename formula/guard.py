# formula/guard.py
# This file is part of Propsat - A Propositional Formula Checker
#
# Token-order state machine and bracket balance tracking

"""Grammar guard: decides whether a token class may follow the previous one.

The guard is a small state machine over the class of the previously accepted
token. It also keeps the bracket-balance stack and the "incomplete clause"
flag, which together decide whether the formula may legally end.

Legality table (current token is legal only if previous is listed):

    LITERAL     START, NEGATION, LBRACKET, CONNECTIVE
    NEGATION    START, NEGATION, LBRACKET, CONNECTIVE
    LBRACKET    START, NEGATION, LBRACKET, CONNECTIVE
    RBRACKET    LITERAL, RBRACKET
    CONNECTIVE  LITERAL, RBRACKET
"""

from typing import Dict, FrozenSet, List, Optional
from .exceptions import BracketError, GrammarError, IncompleteFormulaError
from .symbols import TokenKind
from utils.logger import get_logger


_OPERAND_START = frozenset(
    {TokenKind.START, TokenKind.NEGATION, TokenKind.LBRACKET, TokenKind.CONNECTIVE}
)
_OPERAND_END = frozenset({TokenKind.LITERAL, TokenKind.RBRACKET})

LEGAL_PREDECESSORS: Dict[TokenKind, FrozenSet[TokenKind]] = {
    TokenKind.LITERAL: _OPERAND_START,
    TokenKind.NEGATION: _OPERAND_START,
    TokenKind.LBRACKET: _OPERAND_START,
    TokenKind.RBRACKET: _OPERAND_END,
    TokenKind.CONNECTIVE: _OPERAND_END,
}

# After these classes the formula still needs an operand before it may end
_INCOMPLETE_AFTER = frozenset(
    {TokenKind.START, TokenKind.NEGATION, TokenKind.LBRACKET, TokenKind.CONNECTIVE}
)


class GrammarGuard:
    """Validates token order and bracket balance for one parse.

    Attributes:
        source: Formula text, used to tag errors with a snippet
        previous: Class of the last accepted token
        incomplete_clause: True while the formula cannot legally end
    """

    def __init__(self, source: str):
        self.source = source
        self.previous = TokenKind.START
        self.incomplete_clause = True
        # Offsets of the currently open left brackets, innermost last
        self._open_brackets: List[int] = []

    @property
    def depth(self) -> int:
        """Number of currently open brackets."""
        return len(self._open_brackets)

    def accept(self, kind: TokenKind, position: int) -> None:
        """Accept the next token or fail at its offset.

        Args:
            kind: Class of the incoming token
            position: Character offset of the token

        Raises:
            GrammarError: Token class not allowed after the previous one
            BracketError: Closing bracket with nothing open
        """
        if self.previous not in LEGAL_PREDECESSORS[kind]:
            get_logger().debug(
                f"Guard rejected {kind.name} after {self.previous.name} at {position}"
            )
            raise GrammarError(f"{kind.label} not allowed here", self.source, position)

        if kind is TokenKind.LBRACKET:
            self._open_brackets.append(position)
        elif kind is TokenKind.RBRACKET:
            if not self._open_brackets:
                raise BracketError("Unopened closing bracket", self.source, position)
            self._open_brackets.pop()

        self.previous = kind
        self.incomplete_clause = kind in _INCOMPLETE_AFTER

    def finish(self, end: Optional[int] = None) -> None:
        """Check that the formula may end here.

        Args:
            end: Offset of the end of input (defaults to the source length)

        Raises:
            IncompleteFormulaError: Nothing accepted, or an operand is missing
            BracketError: An opening bracket was never closed
        """
        if end is None:
            end = len(self.source or "")

        if self.previous is TokenKind.START:
            raise IncompleteFormulaError(
                "Propositional logic formula can't be empty", self.source, end
            )
        if self.incomplete_clause:
            raise IncompleteFormulaError("Incomplete clause", self.source, end)
        if self._open_brackets:
            raise BracketError(
                "Unclosed opening bracket", self.source, self._open_brackets[-1]
            )
