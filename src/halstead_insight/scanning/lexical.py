"""Lexical operator/operand counting for Halstead metrics.

Tokens come from two fixed character-class patterns run over the whole
file text. Nothing is excluded: keywords and literals are operands, and
tokens inside comments or string literals count like any other.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass

# Maximal run of operator characters: "==", "&&", "->" are one token each.
OPERATOR_PATTERN = re.compile(r"[+\-*/%=<>&|]+")
OPERAND_PATTERN = re.compile(r"\b\w+\b")


@dataclass(frozen=True)
class LexicalCounts:
    """Halstead base counts for one file.

    Attributes:
        distinct_operators: n1
        distinct_operands: n2
        total_operators: N1
        total_operands: N2
    """

    distinct_operators: int
    distinct_operands: int
    total_operators: int
    total_operands: int

    @classmethod
    def from_tallies(cls, operators: Counter, operands: Counter) -> LexicalCounts:
        return cls(
            distinct_operators=len(operators),
            distinct_operands=len(operands),
            total_operators=sum(operators.values()),
            total_operands=sum(operands.values()),
        )


def tally_tokens(content: str) -> tuple[Counter, Counter]:
    """Occurrence counts per distinct operator and operand token."""
    operators = Counter(m.group() for m in OPERATOR_PATTERN.finditer(content))
    operands = Counter(m.group() for m in OPERAND_PATTERN.finditer(content))
    return operators, operands


def count_tokens(content: str) -> LexicalCounts:
    """Count operators and operands across the whole text."""
    operators, operands = tally_tokens(content)
    return LexicalCounts.from_tallies(operators, operands)
