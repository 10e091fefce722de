"""Configuration exceptions: scan root and settings."""

from pathlib import Path
from typing import Any, Optional

from .base import HalsteadInsightError


class ConfigurationError(HalsteadInsightError):
    """Unusable configuration: unreadable TOML, unknown keys, bad values."""


class InvalidRootError(ConfigurationError):
    """The scan root is missing or is not a directory."""

    def __init__(self, root: Path, reason: str):
        super().__init__(f"Cannot scan {root}: {reason}", root=root)
        self.root = root
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """A single setting has a value it cannot take.

    ``source`` names where the value came from (an environment variable or
    a config file) when it did not come from code.
    """

    def __init__(self, key: str, value: Any, reason: str, source: Optional[str] = None):
        super().__init__(
            f"Invalid value for {key}: {value!r}", reason=reason, source=source
        )
        self.key = key
        self.value = value
        self.reason = reason
        self.source = source
