"""Halstead software-science metrics: length, vocabulary, volume, difficulty, effort.

Arithmetic follows IEEE float rules. Degenerate counts (no distinct
operands, empty vocabulary) yield inf/nan instead of raising, and those
values are passed through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..config import DEFAULT_EFFORT_DIVISOR
from ..scanning.lexical import LexicalCounts


class Halstead:
    """Halstead formulas over plain counts."""

    @staticmethod
    def difficulty(n1: int, n2: int, N2: int) -> float:
        """D = (n1 / 2) * (N2 / n2)."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(n1) / 2.0 * (np.float64(N2) / np.float64(n2)))

    @staticmethod
    def volume(program_length: int, vocabulary: int) -> float:
        """V = N * log2(n). log2(0) is -inf, so an empty vocabulary gives nan."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(program_length) * np.log2(np.float64(vocabulary)))

    @staticmethod
    def effort(difficulty: float, volume: float, divisor: float = DEFAULT_EFFORT_DIVISOR) -> float:
        """E = D * V / divisor."""
        with np.errstate(invalid="ignore", over="ignore"):
            return float(np.float64(difficulty) * np.float64(volume) / np.float64(divisor))


@dataclass(frozen=True)
class HalsteadMetrics:
    """Metrics derived from one file's LexicalCounts."""

    program_length: int
    vocabulary: int
    volume: float
    difficulty: float
    effort: float

    @property
    def is_finite(self) -> bool:
        return bool(np.isfinite([self.volume, self.difficulty, self.effort]).all())


def compute_halstead(
    counts: LexicalCounts, effort_divisor: float = DEFAULT_EFFORT_DIVISOR
) -> HalsteadMetrics:
    """Derive Halstead metrics from lexical counts. Pure; never raises on degenerate input."""
    n1 = counts.distinct_operators
    n2 = counts.distinct_operands
    N1 = counts.total_operators
    N2 = counts.total_operands

    program_length = N1 + N2
    vocabulary = n1 + n2
    volume = Halstead.volume(program_length, vocabulary)
    difficulty = Halstead.difficulty(n1, n2, N2)

    return HalsteadMetrics(
        program_length=program_length,
        vocabulary=vocabulary,
        volume=volume,
        difficulty=difficulty,
        effort=Halstead.effort(difficulty, volume, effort_divisor),
    )
