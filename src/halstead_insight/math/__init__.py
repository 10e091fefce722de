"""Mathematical utilities for source metrics."""

from .halstead import Halstead, HalsteadMetrics, compute_halstead

__all__ = [
    "Halstead",
    "HalsteadMetrics",
    "compute_halstead",
]
