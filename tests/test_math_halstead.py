"""Tests for Halstead metric formulas."""

import math
import warnings

import pytest

from halstead_insight.math.halstead import Halstead, HalsteadMetrics, compute_halstead
from halstead_insight.scanning.lexical import LexicalCounts, count_tokens


class TestHalsteadFormulas:
    def test_difficulty(self):
        # (n1 / 2) * (N2 / n2) = (4 / 2) * (10 / 5)
        assert Halstead.difficulty(4, 5, 10) == pytest.approx(4.0)

    def test_volume(self):
        # N * log2(n) = 8 * log2(4)
        assert Halstead.volume(8, 4) == pytest.approx(16.0)

    def test_effort(self):
        assert Halstead.effort(2.0, 48.11) == pytest.approx(2.0)
        assert Halstead.effort(3.0, 4.0, divisor=1.0) == pytest.approx(12.0)


class TestComputeHalstead:
    def test_known_counts(self):
        metrics = compute_halstead(count_tokens("a = b + c;"))
        volume = 5 * math.log2(5)
        assert metrics.program_length == 5
        assert metrics.vocabulary == 5
        assert metrics.difficulty == pytest.approx(1.0)
        assert metrics.volume == pytest.approx(volume)
        assert metrics.effort == pytest.approx(volume / 48.11)
        assert metrics.is_finite

    def test_custom_divisor(self):
        counts = LexicalCounts(4, 5, 6, 10)
        metrics = compute_halstead(counts, effort_divisor=1.0)
        assert metrics.effort == pytest.approx(metrics.difficulty * metrics.volume)

    def test_no_operators_gives_zero(self):
        metrics = compute_halstead(LexicalCounts(0, 2, 0, 3))
        assert metrics.difficulty == 0.0
        assert metrics.volume == pytest.approx(3.0)
        assert metrics.effort == 0.0

    def test_empty_file_is_nan_not_error(self):
        metrics = compute_halstead(count_tokens(""))
        assert math.isnan(metrics.difficulty)
        assert math.isnan(metrics.volume)
        assert math.isnan(metrics.effort)
        assert not metrics.is_finite

    def test_no_operands_propagates_non_finite(self):
        metrics = compute_halstead(count_tokens("+ - *"))
        assert metrics.volume == pytest.approx(3 * math.log2(3))
        assert not math.isfinite(metrics.difficulty)
        assert not math.isfinite(metrics.effort)

    def test_degenerate_input_emits_no_runtime_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            compute_halstead(LexicalCounts(0, 0, 0, 0))
            compute_halstead(LexicalCounts(3, 0, 3, 0))

    def test_results_are_plain_floats(self):
        metrics = compute_halstead(LexicalCounts(1, 1, 1, 1))
        assert type(metrics.difficulty) is float
        assert type(metrics.volume) is float
        assert type(metrics.effort) is float

    def test_is_frozen(self):
        metrics = compute_halstead(LexicalCounts(1, 1, 1, 1))
        with pytest.raises(AttributeError):
            metrics.effort = 0.0
        assert isinstance(metrics, HalsteadMetrics)
