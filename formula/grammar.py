# formula/grammar.py
# This file is part of Propsat - A Propositional Formula Checker
#
# Single-pass parser driving the lexer, grammar guard and tree builder

"""Single-pass parser for propositional formulas.

Grammar (informal EBNF):

    formula    := expr
    expr       := operand (CONNECTIVE operand)*
    operand    := NEGATION* (LITERAL | '(' expr ')')
    CONNECTIVE := '/\\' | '\\/' | '->' | '<->'
    LITERAL    := letter+

Each token is pulled from the lexer, checked by the grammar guard against
the class of the previous token, and folded into the tree immediately. The
first problem aborts the parse; there is no error recovery.
"""

from typing import List, NamedTuple, Optional
from .ast_nodes import Node
from .builder import TreeBuilder
from .exceptions import IncompleteFormulaError
from .guard import GrammarGuard
from .lexer import PropLexer, TOKEN_KINDS
from .symbols import Literal
from utils.logger import get_logger


class ParsedFormula(NamedTuple):
    """Result of a successful parse.

    Attributes:
        tree: Root node of the formula
        literals: Distinct literals in first-occurrence order
    """

    tree: Node
    literals: List[Literal]


class _PropParser:
    """One-shot parser: lexer, guard and builder for a single formula.

    A fresh instance is used per formula, so no state leaks between parses
    and parses on different threads share nothing.
    """

    def __init__(self):
        self.lexer = PropLexer()

    def parse(self, text: Optional[str]) -> ParsedFormula:
        """Parse formula text into a tree and its literal list.

        Args:
            text: Formula string to parse

        Returns:
            ParsedFormula with the tree and its distinct literals

        Raises:
            ParseError: If the formula is absent or malformed
        """
        logger = get_logger()

        if text is None:
            raise IncompleteFormulaError(
                "Propositional logic formula can't be null", None, 0
            )

        logger.debug(f"Parsing formula: {text}")
        guard = GrammarGuard(text)
        builder = TreeBuilder(text)

        for token in self.lexer.tokenize(text):
            kind = TOKEN_KINDS[token.type]
            guard.accept(kind, token.index)
            builder.fold(kind, token.value, token.index)
            logger.token_accepted(kind.name, token.value, token.index)

        guard.finish(len(text))
        tree = builder.finish(len(text))

        logger.debug(f"Successfully parsed formula into {type(tree).__name__}")
        return ParsedFormula(tree, builder.literals)
