"""Analysis-related exceptions: unreadable files and directories."""

from pathlib import Path

from .base import HalsteadInsightError


class AnalysisError(HalsteadInsightError):
    """Base class for analysis-related errors."""


class FileUnreadableError(AnalysisError):
    """A file exists but cannot be read or decoded.

    Recoverable: the analyzer records a SkippedFile and carries on.
    """

    def __init__(self, filepath: Path, reason: str):
        super().__init__(f"Unable to read file: {filepath}", filepath=filepath, reason=reason)
        self.filepath = filepath
        self.reason = reason


class DirectoryUnreadableError(AnalysisError):
    """A directory cannot be listed. Aborts the run."""

    def __init__(self, dirpath: Path, reason: str):
        super().__init__(f"Unable to list directory: {dirpath}", dirpath=dirpath, reason=reason)
        self.dirpath = dirpath
        self.reason = reason
