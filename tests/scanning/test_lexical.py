"""Tests for lexical operator/operand counting."""

from collections import Counter

import pytest

from halstead_insight.scanning.lexical import LexicalCounts, count_tokens, tally_tokens


class TestCountTokens:
    def test_simple_assignment(self):
        counts = count_tokens("a = b + c;")
        assert counts == LexicalCounts(
            distinct_operators=2,
            distinct_operands=3,
            total_operators=2,
            total_operands=3,
        )

    def test_operator_runs_are_single_tokens(self):
        """`==`, `&&` and `->` are one occurrence each, not two."""
        operators, _ = tally_tokens("x == y && y -> z")
        assert operators == Counter({"==": 1, "&&": 1, "->": 1})

    def test_repeated_tokens(self):
        counts = count_tokens("i++; i++; j--")
        assert counts.distinct_operators == 2
        assert counts.total_operators == 3
        assert counts.distinct_operands == 2
        assert counts.total_operands == 3

    def test_keywords_and_literals_are_operands(self):
        _, operands = tally_tokens("return 42 + count_1;")
        assert operands == Counter({"return": 1, "42": 1, "count_1": 1})

    def test_comments_are_not_excluded(self):
        """`//` is itself an operator token; comment words are operands."""
        operators, operands = tally_tokens("// total + x")
        assert operators == Counter({"//": 1, "+": 1})
        assert operands == Counter({"total": 1, "x": 1})

    def test_string_literal_contents_count(self):
        _, operands = tally_tokens('puts("hello world");')
        assert operands == Counter({"puts": 1, "hello": 1, "world": 1})

    def test_block_comment_delimiters(self):
        operators, _ = tally_tokens("/* note */")
        assert operators == Counter({"/*": 1, "*/": 1})

    def test_operators_span_lines_only_when_adjacent(self):
        operators, _ = tally_tokens("a +\n= b")
        assert operators == Counter({"+": 1, "=": 1})

    @pytest.mark.parametrize("text", ["", "   \n\t", "();{}[],.!?"])
    def test_no_tokens(self, text):
        assert count_tokens(text) == LexicalCounts(0, 0, 0, 0)

    def test_only_operands(self):
        counts = count_tokens("alpha beta alpha")
        assert counts.distinct_operators == 0
        assert counts.total_operators == 0
        assert counts.distinct_operands == 2
        assert counts.total_operands == 3

    def test_sample_file_counts_are_consistent(self, shapes_source):
        operators, operands = tally_tokens(shapes_source)
        counts = count_tokens(shapes_source)
        assert counts.distinct_operators == len(operators)
        assert counts.total_operators == sum(operators.values())
        assert counts.distinct_operands == len(operands)
        assert counts.total_operands == sum(operands.values())
        assert operands["double"] == 4
