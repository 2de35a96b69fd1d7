# formula/ast_nodes.py
# This file is part of Propsat - A Propositional Formula Checker
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

Nodes are immutable and hashable. The tree builder grows a tree by returning
modified copies (``dataclasses.replace``), never by mutating a node, so a
finished tree can be shared and evaluated freely.

Node Types:
    LiteralNode: Reference to a named proposition
    NegationNode: Unary NOT over one operand
    ConnectiveNode: Binary AND / OR / IMPLIES / IFF
    GroupNode: Bracketed sub-formula with its closed flag

While a formula is being built a child may still be missing (a connective
without its right operand, a negation without its operand, an empty group).
Such nodes report ``complete == False`` and are rejected by the evaluator.

All nodes support the visitor design pattern for traversal.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Protocol, Tuple, Union
from .symbols import Bracket, Connective, Literal, Negation


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type.
    """

    def visit_literal(self, n: LiteralNode): ...

    def visit_negation(self, n: NegationNode): ...

    def visit_connective(self, n: ConnectiveNode): ...

    def visit_group(self, n: GroupNode): ...


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes of a propositional formula."""

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    @property
    def children(self) -> Tuple[Optional[Node], ...]:
        """Child slots in left-to-right order, None where a child is missing."""
        raise NotImplementedError

    @property
    def complete(self) -> bool:
        """True when no required child is missing anywhere below this node.

        The left operand of a connective is only ever a finished tree, so
        only the right frontier is followed: negation operand, connective
        right operand, group head.
        """
        node = self
        while True:
            match node:
                case LiteralNode():
                    return True
                case NegationNode():
                    node = node.operand
                case ConnectiveNode() if node.left is not None:
                    node = node.right
                case GroupNode(closed=True):
                    node = node.head
                case _:
                    return False

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, slots=True)
class LiteralNode(Node):
    """Leaf node referring to a proposition.

    Several nodes may share one ``Literal`` when a name occurs more than once.

    Attributes:
        literal: The proposition this leaf stands for
    """

    literal: Literal

    def accept(self, v: Visitor):
        return v.visit_literal(self)

    @property
    def name(self) -> str:
        return self.literal.name

    @property
    def children(self) -> Tuple[Optional[Node], ...]:
        return ()


@dataclass(frozen=True, slots=True)
class NegationNode(Node):
    """Logical negation of the immediately following operand.

    Attributes:
        operand: Negated literal, negation or group (None while building)
    """

    operand: Optional[Node] = None

    def accept(self, v: Visitor):
        return v.visit_negation(self)

    @property
    def marker(self) -> Negation:
        return Negation.NOT

    @property
    def children(self) -> Tuple[Optional[Node], ...]:
        return (self.operand,)


@dataclass(frozen=True, slots=True)
class ConnectiveNode(Node):
    """Binary connective over a left and a right operand.

    A missing right operand is the "incomplete clause" state the parser is in
    right after reading a connective.

    Attributes:
        connective: Which binary connective this node applies
        left: Everything built before the connective at this bracket level
        right: The operand that followed the connective
    """

    connective: Connective
    left: Optional[Node] = None
    right: Optional[Node] = None

    def accept(self, v: Visitor):
        return v.visit_connective(self)

    @property
    def children(self) -> Tuple[Optional[Node], ...]:
        return (self.left, self.right)


@dataclass(frozen=True, slots=True)
class GroupNode(Node):
    """Bracketed sub-formula.

    An open group is the box the builder fills for one bracket level. Once
    closed, only a connective may attach to it, and it does so by becoming
    the group's parent.

    Attributes:
        head: Root of the bracketed sub-tree
        closed: Whether the matching right bracket has been read
    """

    head: Optional[Node] = None
    closed: bool = False

    def accept(self, v: Visitor):
        return v.visit_group(self)

    @property
    def children(self) -> Tuple[Optional[Node], ...]:
        return (self.head,)

    def close(self) -> GroupNode:
        """Return a closed copy of this group.

        Raises:
            ValueError: If the group is already closed
        """
        if self.closed:
            raise ValueError("This group is already closed")
        return GroupNode(self.head, closed=True)


def iter_postorder(tree: Optional[Node]) -> Iterator[Optional[Node]]:
    """Yield every node of a tree, children before their parent.

    Missing children are yielded as None. Left chains grow one level per
    connective, so the walk keeps its own stack instead of recursing.
    """
    stack: List[Tuple[Optional[Node], bool]] = [(tree, False)]
    while stack:
        node, expanded = stack.pop()
        if node is None or expanded:
            yield node
            continue
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(node.children))


class _Renderer:
    """Visitor producing canonical formula text.

    Groups are reproduced as written and no brackets are added, so the text
    reparses into an identical tree. Nodes arrive in post-order; each visit
    pops the texts of its children and returns its own.
    """

    def __init__(self):
        self._parts: List[Tuple[str, Optional[Node]]] = []

    def render(self, tree: Node) -> str:
        for node in iter_postorder(tree):
            if node is None:
                # Missing children only occur in trees still under construction
                self._parts.append(("?", None))
            else:
                self._parts.append((node.accept(self), node))
        text, _ = self._parts.pop()
        return text

    def visit_literal(self, n: LiteralNode) -> str:
        return n.literal.name

    def visit_negation(self, n: NegationNode) -> str:
        return f"{n.marker}{self._operand()}"

    def visit_connective(self, n: ConnectiveNode) -> str:
        right = self._operand()
        left, _ = self._parts.pop()
        return f"{left} {n.connective} {right}"

    def visit_group(self, n: GroupNode) -> str:
        head, _ = self._parts.pop()
        closing = str(Bracket.RIGHT) if n.closed else ""
        return f"{Bracket.LEFT}{head}{closing}"

    def _operand(self) -> str:
        text, child = self._parts.pop()
        # Parsed trees never hold a bare connective in operand position;
        # hand-built ones get brackets so the text keeps their meaning.
        if isinstance(child, ConnectiveNode):
            return f"{Bracket.LEFT}{text}{Bracket.RIGHT}"
        return text


class _TreeDumper:
    """Visitor producing an indented one-node-per-line view of a tree."""

    def __init__(self, indent: str = "  "):
        self.indent = indent
        self.depth = 0
        self.lines: List[str] = []
        # Nodes, missing children (None) and closing brackets still to emit
        self._pending: List[Tuple[Union[Node, str, None], int]] = []

    def dump(self, tree: Node) -> str:
        self._pending.append((tree, 0))
        while self._pending:
            item, self.depth = self._pending.pop()
            if item is None:
                self._emit("?")
            elif isinstance(item, str):
                self._emit(item)
            else:
                item.accept(self)
        return "\n".join(self.lines)

    def visit_literal(self, n: LiteralNode):
        self._emit(n.literal.name)

    def visit_negation(self, n: NegationNode):
        self._emit(str(n.marker))
        self._nested(n.operand)

    def visit_connective(self, n: ConnectiveNode):
        self._emit(f"{n.connective} ({n.connective.name})")
        self._nested(n.left, n.right)

    def visit_group(self, n: GroupNode):
        self._emit(str(Bracket.LEFT))
        if n.closed:
            self._pending.append((str(Bracket.RIGHT), self.depth))
        self._nested(n.head)

    def _emit(self, text: str):
        self.lines.append(f"{self.indent * self.depth}{text}")

    def _nested(self, *children: Optional[Node]):
        for child in reversed(children):
            self._pending.append((child, self.depth + 1))


def render(tree: Node) -> str:
    """Render a tree as formula text that reparses to the same tree.

    Args:
        tree: Root node of the formula

    Returns:
        Canonical text, e.g. ``~A /\\ (B -> C)``
    """
    return _Renderer().render(tree)


def dump_tree(tree: Node, indent: str = "  ") -> str:
    """Render a tree one node per line, children indented under parents.

    Args:
        tree: Root node of the formula
        indent: Indentation unit per tree level

    Returns:
        Multi-line debug view of the tree
    """
    return _TreeDumper(indent).dump(tree)
