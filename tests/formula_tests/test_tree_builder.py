# tests/formula_tests/test_tree_builder.py
# This file is part of Propsat - A Propositional Formula Checker
#
# Test suite for incremental tree construction

"""Test suite for the incremental tree builder.

Covers the folding rules of ``insert`` one frontier/node combination at a
time, and the bracket-level bookkeeping of ``TreeBuilder`` without the lexer
or the grammar guard in front of it.
"""

import pytest
from formula.ast_nodes import ConnectiveNode, GroupNode, LiteralNode, NegationNode
from formula.builder import TreeBuilder, insert
from formula.exceptions import BracketError, IncompleteFormulaError, StructureError
from formula.symbols import Connective, Literal, TokenKind
from utils.logger import LogLevel, get_logger


A = LiteralNode(Literal("A"))
B = LiteralNode(Literal("B"))


def closed(head):
    return GroupNode(head, closed=True)


class TestInsert:
    """Test cases for single insertions."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_operand_into_empty(self):
        assert insert(None, A) is A

    def test_connective_into_empty_fails(self):
        with pytest.raises(StructureError):
            insert(None, ConnectiveNode(Connective.AND))

    def test_connective_becomes_root_over_literal(self):
        tree = insert(A, ConnectiveNode(Connective.OR))
        assert tree == ConnectiveNode(Connective.OR, A, None)
        assert not tree.complete

    def test_operand_fills_missing_right(self):
        tree = insert(ConnectiveNode(Connective.OR, A), B)
        assert tree == ConnectiveNode(Connective.OR, A, B)
        assert tree.complete

    def test_connective_becomes_root_over_complete_connective(self):
        lower = ConnectiveNode(Connective.IFF, A, B)
        tree = insert(lower, ConnectiveNode(Connective.AND))
        assert tree.left is lower
        assert tree.connective is Connective.AND

    def test_connective_into_incomplete_connective_fails(self):
        with pytest.raises(StructureError):
            insert(ConnectiveNode(Connective.OR, A), ConnectiveNode(Connective.AND))

    def test_negation_chain_descends(self):
        tree = insert(NegationNode(), NegationNode())
        tree = insert(tree, A)
        assert tree == NegationNode(NegationNode(A))
        assert tree.complete

    def test_operand_descends_into_right_negation(self):
        tree = ConnectiveNode(Connective.AND, A, NegationNode())
        tree = insert(tree, B)
        assert tree == ConnectiveNode(Connective.AND, A, NegationNode(B))

    def test_connective_into_dangling_negation_fails(self):
        with pytest.raises(StructureError):
            insert(NegationNode(), ConnectiveNode(Connective.AND))

    def test_connective_escapes_closed_group(self):
        group = closed(A)
        tree = insert(group, ConnectiveNode(Connective.IMPLIES))
        assert tree == ConnectiveNode(Connective.IMPLIES, group, None)

    @pytest.mark.parametrize(
        "node, label",
        [(B, "Literal"), (NegationNode(), "Negation"), (closed(B), "Bracketed group")],
    )
    def test_operand_after_closed_group_fails(self, node, label):
        with pytest.raises(StructureError) as exc_info:
            insert(closed(A), node)
        assert label in exc_info.value.message
        assert exc_info.value.message.endswith("after Right bracket")

    def test_operand_after_literal_fails(self):
        with pytest.raises(StructureError) as exc_info:
            insert(A, B)
        assert "Literal immediately after Literal" in exc_info.value.message

    def test_open_group_receives_into_head(self):
        tree = insert(GroupNode(), A)
        tree = insert(tree, ConnectiveNode(Connective.AND))
        tree = insert(tree, B)
        assert tree == GroupNode(ConnectiveNode(Connective.AND, A, B), closed=False)

    def test_insert_does_not_mutate_target(self):
        target = ConnectiveNode(Connective.OR, A)
        insert(target, B)
        assert target.right is None

    def test_close_twice_fails(self):
        with pytest.raises(ValueError):
            closed(A).close()


class TestTreeBuilder:
    """Test cases for token folding across bracket levels."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def _build(self, *tokens):
        builder = TreeBuilder()
        for position, (kind, lexeme) in enumerate(tokens):
            builder.fold(kind, lexeme, position)
        return builder

    def test_negated_group(self):
        builder = self._build(
            (TokenKind.NEGATION, "~"),
            (TokenKind.LBRACKET, "("),
            (TokenKind.LITERAL, "A"),
            (TokenKind.CONNECTIVE, "/\\"),
            (TokenKind.LITERAL, "B"),
            (TokenKind.RBRACKET, ")"),
        )
        tree = builder.finish()

        assert tree == NegationNode(closed(ConnectiveNode(Connective.AND, A, B)))

    def test_group_then_connective(self):
        builder = self._build(
            (TokenKind.LBRACKET, "("),
            (TokenKind.LITERAL, "A"),
            (TokenKind.RBRACKET, ")"),
            (TokenKind.CONNECTIVE, "->"),
            (TokenKind.LITERAL, "B"),
        )

        assert builder.finish() == ConnectiveNode(Connective.IMPLIES, closed(A), B)

    def test_literal_pool_interns_names(self):
        builder = self._build(
            (TokenKind.LITERAL, "A"),
            (TokenKind.CONNECTIVE, "\\/"),
            (TokenKind.LITERAL, "B"),
            (TokenKind.CONNECTIVE, "/\\"),
            (TokenKind.LITERAL, "A"),
        )
        tree = builder.finish()

        assert [lit.name for lit in builder.literals] == ["A", "B"]
        assert tree.right.literal is tree.left.left.literal

    def test_depth_tracks_open_groups(self):
        builder = self._build((TokenKind.LBRACKET, "("), (TokenKind.LBRACKET, "("))
        assert builder.depth == 2

    def test_unopened_closing_bracket(self):
        builder = self._build((TokenKind.LITERAL, "A"))
        with pytest.raises(BracketError) as exc_info:
            builder.fold(TokenKind.RBRACKET, ")", 1)
        assert exc_info.value.position == 1

    def test_structure_error_carries_position(self):
        builder = self._build((TokenKind.LITERAL, "A"))
        with pytest.raises(StructureError) as exc_info:
            builder.fold(TokenKind.LITERAL, "B", 2)
        assert exc_info.value.position == 2

    def test_finish_with_open_group(self):
        builder = self._build((TokenKind.LBRACKET, "("), (TokenKind.LITERAL, "A"))
        with pytest.raises(BracketError):
            builder.finish()

    def test_finish_empty(self):
        with pytest.raises(IncompleteFormulaError):
            TreeBuilder().finish()

    def test_finish_incomplete(self):
        builder = self._build((TokenKind.LITERAL, "A"), (TokenKind.CONNECTIVE, "<->"))
        with pytest.raises(IncompleteFormulaError):
            builder.finish()

    def test_fold_log_shows_tree_at_current_level(self, caplog):
        self.logger.logger.addHandler(caplog.handler)
        self.logger.set_level(LogLevel.DEBUG)
        try:
            self._build(
                (TokenKind.LBRACKET, "("),
                (TokenKind.LITERAL, "A"),
                (TokenKind.RBRACKET, ")"),
                (TokenKind.CONNECTIVE, "/\\"),
                (TokenKind.LITERAL, "B"),
            )
        finally:
            self.logger.logger.removeHandler(caplog.handler)
            self.logger.set_level(LogLevel.INFO)

        folds = [message for message in caplog.messages if "folded" in message]

        assert [fold.rsplit(": ", 1)[1] for fold in folds] == [
            "(empty)",
            "A",
            "(A)",
            "(A) /\\ ?",
            "(A) /\\ B",
        ]
