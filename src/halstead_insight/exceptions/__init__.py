"""Exception hierarchy for Halstead Insight."""

from .analysis import (
    AnalysisError,
    DirectoryUnreadableError,
    FileUnreadableError,
)
from .base import HalsteadInsightError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidRootError,
)

__all__ = [
    "HalsteadInsightError",
    "AnalysisError",
    "FileUnreadableError",
    "DirectoryUnreadableError",
    "ConfigurationError",
    "InvalidRootError",
    "InvalidConfigError",
]
