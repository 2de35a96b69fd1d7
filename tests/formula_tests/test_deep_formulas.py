# tests/formula_tests/test_deep_formulas.py
# This file is part of Propsat - A Propositional Formula Checker
#
# Test suite for long chains and deeply nested formulas

"""Test suite for formulas nested far beyond the interpreter's recursion limit.

Chains group to the left, so every connective adds one level to the tree.
Parsing, rendering and dumping must cope with thousands of levels.
"""

import pytest
from formula import IncompleteFormulaError, dump_tree, parse, render
from formula.ast_nodes import ConnectiveNode, GroupNode, LiteralNode, NegationNode
from formula.symbols import Connective, Literal
from utils.logger import get_logger


CHAIN_TERMS = 2000
NEGATIONS = 1200
BRACKET_DEPTH = 1200


def chain(terms: int, symbol: str = "/\\") -> str:
    names = ["A", "B", "C"]
    return f" {symbol} ".join(names[i % 3] for i in range(terms))


class TestDeepFormulas:
    """Test cases for long chains, negation runs and bracket nesting."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_long_chain_parses_left_grouped(self):
        tree, literals = parse(chain(CHAIN_TERMS))

        depth, node = 0, tree
        while isinstance(node, ConnectiveNode):
            assert node.connective is Connective.AND
            depth += 1
            node = node.left

        assert depth == CHAIN_TERMS - 1
        assert node.literal == Literal("A")
        assert [lit.name for lit in literals] == ["A", "B", "C"]
        assert tree.complete

    def test_long_mixed_chain_parses(self):
        text = " -> ".join(chain(4, symbol="\\/") for _ in range(CHAIN_TERMS // 4))

        tree = parse(text).tree

        assert tree.connective is Connective.IMPLIES
        assert tree.complete

    def test_stacked_negations(self):
        tree = parse("~" * NEGATIONS + "A").tree

        count, node = 0, tree
        while isinstance(node, NegationNode):
            count += 1
            node = node.operand

        assert count == NEGATIONS
        assert isinstance(node, LiteralNode)
        assert tree.complete

    def test_deep_brackets(self):
        tree = parse("(" * BRACKET_DEPTH + "A" + ")" * BRACKET_DEPTH).tree

        count, node = 0, tree
        while isinstance(node, GroupNode):
            assert node.closed
            count += 1
            node = node.head

        assert count == BRACKET_DEPTH
        assert tree.complete

    def test_render_long_chain(self):
        text = chain(CHAIN_TERMS)

        assert render(parse(text).tree) == text

    def test_render_negations_and_brackets(self):
        text = "~" * NEGATIONS + "(" * BRACKET_DEPTH + "A" + ")" * BRACKET_DEPTH

        assert render(parse(text).tree) == text

    def test_dump_long_chain(self):
        lines = dump_tree(parse(chain(CHAIN_TERMS)).tree).splitlines()

        # One line per connective and per literal
        assert len(lines) == 2 * CHAIN_TERMS - 1
        assert lines[0] == "/\\ (AND)"
        assert lines[CHAIN_TERMS - 1] == "  " * (CHAIN_TERMS - 1) + "A"

    def test_dangling_connective_after_long_chain(self):
        text = chain(CHAIN_TERMS) + " <->"

        with pytest.raises(IncompleteFormulaError) as exc_info:
            parse(text)

        assert exc_info.value.position == len(text)
        assert exc_info.value.message == "Incomplete clause"
