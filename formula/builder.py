# formula/builder.py
# This file is part of Propsat - A Propositional Formula Checker
#
# Incremental tree builder folding one token at a time into the AST

"""Incremental construction of the formula tree.

The builder receives tokens in input order and threads each one into the
tree as it arrives; there is no separate parse-then-rebalance step.

Folding rules for ``insert(target, node)``:
- empty target: the node becomes the target (a connective cannot, since it
  would have no left operand);
- open group: insert into its head;
- incomplete negation or connective: insert into the missing operand slot;
- complete target: a connective becomes the new root with the whole target
  as its left operand; anything else would be implicit concatenation and is
  rejected.

Because connectives always take the whole current tree as their left
operand, chains group to the left regardless of connective rank:
``A \\/ B /\\ C`` builds ``(A \\/ B) /\\ C``.

One open ``GroupNode`` acts as the box for each bracket level, the top level
included. ``(`` suspends the current box and starts a new one; ``)`` closes
the current box and inserts it into the suspended one.
"""

from dataclasses import replace
from typing import Dict, List, Optional
from .ast_nodes import ConnectiveNode, GroupNode, LiteralNode, NegationNode, Node
from .exceptions import BracketError, IncompleteFormulaError, StructureError
from .symbols import Connective, Literal, TokenKind
from utils.logger import get_logger


def _describe(node: Node, inserted: bool = False) -> str:
    match node:
        case LiteralNode():
            return "Literal"
        case NegationNode():
            return "Negation"
        case ConnectiveNode():
            return "Connective"
        case GroupNode() if inserted:
            return "Bracketed group"
        case GroupNode():
            return "Right bracket"
    return type(node).__name__


def _slot(node: Node) -> Optional[Node]:
    """The child on the right frontier, where the next operand goes."""
    match node:
        case GroupNode():
            return node.head
        case NegationNode():
            return node.operand
        case ConnectiveNode():
            return node.right
    return None


def _refill(parent: Node, child: Node) -> Node:
    """Copy of ``parent`` with ``child`` in its frontier slot."""
    match parent:
        case GroupNode():
            return GroupNode(child, parent.closed)
        case NegationNode():
            return NegationNode(child)
        case ConnectiveNode():
            return ConnectiveNode(parent.connective, parent.left, child)
    raise StructureError(f"Cannot insert below {_describe(parent)}")


def insert(target: Optional[Node], node: Node) -> Node:
    """Fold ``node`` into ``target`` and return the resulting tree.

    Neither argument is modified; changed nodes along the right frontier are
    rebuilt.

    Args:
        target: Tree built so far at this level (None when empty)
        node: Newly read node; a connective arrives without operands

    Returns:
        The new tree

    Raises:
        StructureError: The node cannot attach at the target's frontier
    """
    path: List[Node] = []
    # Below an incomplete negation or connective the frontier is incomplete
    # too, so completeness is only checked once per open group.
    pending = False
    while True:
        match target:
            case GroupNode(closed=False):
                pending = False
            case NegationNode() | ConnectiveNode() if pending or not target.complete:
                pending = True
            case _:
                break
        path.append(target)
        target = _slot(target)

    match target, node:
        case None, ConnectiveNode():
            raise StructureError("Connective has no left operand")
        case None, _:
            tree = node
        case _, ConnectiveNode():
            tree = replace(node, left=target)
        case _:
            inserted = _describe(node, inserted=True)
            raise StructureError(
                f"Inserting {inserted} immediately after {_describe(target)}"
            )

    for parent in reversed(path):
        tree = _refill(parent, tree)
    return tree


class TreeBuilder:
    """Builds one formula tree from a stream of classified tokens.

    A builder serves a single parse. It owns the literal pool, so each name
    maps to one ``Literal`` however often it occurs.

    Attributes:
        source: Formula text, used to tag errors with a snippet
        current: Open box for the innermost bracket level
    """

    def __init__(self, source: Optional[str] = None):
        self.source = source
        self.current = GroupNode()
        self._suspended: List[GroupNode] = []
        self._pool: Dict[str, Literal] = {}

    @property
    def literals(self) -> List[Literal]:
        """Distinct literals in first-occurrence order."""
        return list(self._pool.values())

    @property
    def depth(self) -> int:
        return len(self._suspended)

    def fold(self, kind: TokenKind, lexeme: str, position: int) -> None:
        """Fold one accepted token into the tree.

        Args:
            kind: Token class
            lexeme: Token text (literal name or connective spelling)
            position: Character offset of the token

        Raises:
            StructureError: Token cannot attach at the current frontier
            BracketError: Closing bracket with no open group
        """
        match kind:
            case TokenKind.LITERAL:
                self._attach(LiteralNode(self._intern(lexeme)), position)
            case TokenKind.NEGATION:
                self._attach(NegationNode(), position)
            case TokenKind.CONNECTIVE:
                self._attach(ConnectiveNode(Connective.from_symbol(lexeme)), position)
            case TokenKind.LBRACKET:
                self._suspended.append(self.current)
                self.current = GroupNode()
            case TokenKind.RBRACKET:
                if not self._suspended:
                    raise BracketError("Unopened closing bracket", self.source, position)
                closed = self.current.close()
                self.current = self._suspended.pop()
                self._attach(closed, position)
            case _:
                raise StructureError(f"Cannot fold {kind.name}", self.source, position)

        get_logger().tree_folded(kind.name, lexeme, self.depth, self.current.head)

    def finish(self, end: Optional[int] = None) -> Node:
        """Return the finished tree.

        Args:
            end: Offset of the end of input, for error reporting

        Raises:
            BracketError: A group is still open
            IncompleteFormulaError: Empty input or a missing operand
        """
        if end is None:
            end = len(self.source or "")
        if self._suspended:
            raise BracketError("Unclosed opening bracket", self.source, end)

        tree = self.current.head
        if tree is None:
            raise IncompleteFormulaError(
                "Propositional logic formula can't be empty", self.source, end
            )
        if not tree.complete:
            raise IncompleteFormulaError("Incomplete clause", self.source, end)
        return tree

    def _intern(self, name: str) -> Literal:
        literal = self._pool.get(name)
        if literal is None:
            literal = Literal(name)
            self._pool[name] = literal
        return literal

    def _attach(self, node: Node, position: int) -> None:
        try:
            self.current = insert(self.current, node)
        except StructureError as exc:
            raise StructureError(exc.message, self.source, position) from None
