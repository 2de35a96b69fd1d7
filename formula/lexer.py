# formula/lexer.py
# This file is part of Propsat - A Propositional Formula Checker
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

Tokens are produced lazily, one per ``next()`` on the generator returned by
``tokenize``, so the parser classifies, guards and builds in a single
forward pass over the text.

Supported Tokens:
- Negation: ~
- Brackets: ( )
- Connectives: /\\ (AND), \\/ (OR), -> (IMPLIES), <-> (IFF)
- Literals: maximal runs of letters
- Whitespace: ignored during tokenization

A connective that is started but not finished (a lone ``/``, ``\\``, ``-``
or a ``<`` not followed by ``->``) is rejected on the spot with a message
naming the connective that was probably intended.
"""

from sly import Lexer
from .exceptions import LexicalError
from .symbols import Connective, TokenKind
from utils.logger import get_logger


# Hints for characters that can only start a connective
_CONNECTIVE_HINTS = {
    "/": f"do you mean {Connective.AND.symbol} (AND)?",
    "\\": (
        f'do you mean "{Connective.OR.symbol}" (OR) or "{Connective.AND.symbol}" (AND)?'
    ),
    "-": f"do you mean {Connective.IMPLIES.symbol} (IMPLIES)?",
    "<": f"do you mean {Connective.IFF.symbol} (IFF)?",
}


class PropLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "LITERAL",
        "NEGATION",
        "LBRACKET",
        "RBRACKET",
        "AND",
        "OR",
        "IMPLIES",
        "IFF",
    }

    ignore = " \t\r\n"

    NEGATION = r"~"
    LBRACKET = r"\("
    RBRACKET = r"\)"

    # Connectives: each starts with a distinct character
    IFF = r"<->"
    IMPLIES = r"->"
    AND = r"/\\"
    OR = r"\\/"

    # Letters only: no digits, no underscore
    LITERAL = r"[^\W\d_]+"

    def tokenize(self, text, lineno=1, index=0):
        """Tokenize ``text`` lazily, remembering it for error snippets."""
        self.source = text
        return Lexer.tokenize(self, text, lineno, index)

    def error(self, t):
        """Handle characters that start no valid token.

        Args:
            t: SLY token whose value is the unconsumed remainder of the text

        Raises:
            LexicalError: Always, tagged with the offending offset
        """
        logger = get_logger()

        bad_char = t.value[0]
        hint = _CONNECTIVE_HINTS.get(bad_char)
        if hint:
            message = f'Invalid character: "{bad_char}", {hint}'
        else:
            message = f'Invalid character: "{bad_char}"'

        logger.debug(f"{message} at position {t.index}")
        raise LexicalError(message, self.source, t.index)


# Lexer token type -> grammar-guard token class
TOKEN_KINDS = {
    "LITERAL": TokenKind.LITERAL,
    "NEGATION": TokenKind.NEGATION,
    "LBRACKET": TokenKind.LBRACKET,
    "RBRACKET": TokenKind.RBRACKET,
    "AND": TokenKind.CONNECTIVE,
    "OR": TokenKind.CONNECTIVE,
    "IMPLIES": TokenKind.CONNECTIVE,
    "IFF": TokenKind.CONNECTIVE,
}
