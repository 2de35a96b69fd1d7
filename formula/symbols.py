# formula/symbols.py
# This file is part of Propsat - A Propositional Formula Checker
#
# Symbol model: literals, negation, connectives, brackets and token classes

"""Value types for the symbols of propositional formulas.

Symbols are immutable and compared structurally. Literals are interned per
parse call by the parser's literal pool, so every tree node naming the same
proposition references one ``Literal`` object.

Connective ranking (tightest first):
    ~    (NOT, unary)   5
    /\\   (AND)          4
    \\/   (OR)           3
    ->   (IMPLIES)      2
    <->  (IFF)          1

The tree builder attaches every new connective as the root over the tree
built so far at its bracket level, so all binary connectives behave as
left-associative and the ranks are descriptive metadata.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto


NEGATION_PRECEDENCE = 5


class Associativity(Enum):
    """Grouping direction for chains of binary connectives.

    The tree builder groups every chain to the left, so LEFT is the only
    direction a connective can carry.
    """

    LEFT = auto()


@dataclass(frozen=True, slots=True)
class Literal:
    """Atomic named proposition.

    Identity is by name, case-sensitive.

    Attributes:
        name: The proposition name as written in the formula
    """

    name: str

    def __str__(self) -> str:
        return self.name


class Negation(Enum):
    """Unary NOT marker. Carries no data, so a single member suffices."""

    NOT = "~"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def precedence(self) -> int:
        return NEGATION_PRECEDENCE

    def __str__(self) -> str:
        return self.value


class Connective(Enum):
    """Binary logical connectives with spelling, rank and associativity."""

    AND = ("/\\", 4, Associativity.LEFT)
    OR = ("\\/", 3, Associativity.LEFT)
    IMPLIES = ("->", 2, Associativity.LEFT)
    IFF = ("<->", 1, Associativity.LEFT)

    def __init__(self, symbol: str, precedence: int, associativity: Associativity):
        self.symbol = symbol
        self.precedence = precedence
        self.associativity = associativity

    def apply(self, left: bool, right: bool) -> bool:
        """Apply the connective's truth table to two operand values."""
        if self is Connective.AND:
            return left and right
        if self is Connective.OR:
            return left or right
        if self is Connective.IMPLIES:
            return (not left) or right
        return left == right

    @classmethod
    def from_symbol(cls, symbol: str) -> Connective:
        """Look up a connective by its textual spelling.

        Raises:
            KeyError: If the spelling names no connective
        """
        for connective in cls:
            if connective.symbol == symbol:
                return connective
        raise KeyError(symbol)

    def __str__(self) -> str:
        return self.symbol


class Bracket(Enum):
    """Grouping bracket spellings, used when rendering groups."""

    LEFT = "("
    RIGHT = ")"

    def __str__(self) -> str:
        return self.value


class TokenKind(Enum):
    """Classes of accepted tokens, used by the grammar guard.

    START is the pseudo-class in effect before the first token.
    """

    START = auto()
    LITERAL = auto()
    NEGATION = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    CONNECTIVE = auto()

    @property
    def label(self) -> str:
        return _TOKEN_LABELS[self]


_TOKEN_LABELS = {
    TokenKind.START: "Start of formula",
    TokenKind.LITERAL: "Literal",
    TokenKind.NEGATION: "Negation",
    TokenKind.LBRACKET: "Left bracket",
    TokenKind.RBRACKET: "Right bracket",
    TokenKind.CONNECTIVE: "Connective",
}
