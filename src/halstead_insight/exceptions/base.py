"""Root of the Halstead Insight error hierarchy."""

from typing import Dict


class HalsteadInsightError(Exception):
    """Base exception for all Halstead Insight errors.

    Keyword arguments become ``details``. Values are stored as text so a
    Path, a number and a string all print the same way; ``None`` values are
    left out.
    """

    def __init__(self, message: str, **details: object):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, str] = {
            key: str(value) for key, value in details.items() if value is not None
        }

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({extra})"
