"""Depth-first directory traversal and file reading.

Entries are visited in sorted name order so repeated runs over the same
tree see files in the same order. Directories that cannot be listed abort
the walk; files that cannot be read are reported per file by the caller.
FIFOs and sockets are passed over. Every other entry that is not a
directory is yielded, broken symlinks included, so the read reports it.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

from ..exceptions import DirectoryUnreadableError, FileUnreadableError
from ..logging_config import get_logger
from .models import SourceFile

logger = get_logger(__name__)


def should_skip_file(relative_path: Path, exclude_patterns: list[str]) -> bool:
    """
    Check if a file should be skipped based on exclusion patterns.

    Args:
        relative_path: File path relative to the scan root
        exclude_patterns: List of glob patterns to exclude

    Returns:
        True if file should be skipped
    """
    for pattern in exclude_patterns:
        if relative_path.match(pattern):
            return True
    return False


class TreeWalker:
    """Recursive, depth-first file iterator rooted at one directory."""

    def __init__(
        self,
        root_dir: Path,
        exclude_patterns: Optional[list[str]] = None,
        follow_symlinks: bool = False,
        ignore: Optional[set[Path]] = None,
    ):
        """
        Initialize walker.

        Args:
            root_dir: Directory to walk
            exclude_patterns: Glob patterns (relative to root) to leave out
            follow_symlinks: Descend into symlinked directories
            ignore: Resolved file paths never to yield (e.g. the report itself)
        """
        self.root_dir = Path(root_dir)
        self.exclude_patterns = exclude_patterns or []
        self.follow_symlinks = follow_symlinks
        self.ignore = {_real_path(p) for p in (ignore or set())}

    def walk(self) -> Iterator[Path]:
        """
        Yield every file under the root, depth-first, in sorted order.

        Raises:
            DirectoryUnreadableError: If the root or a subdirectory cannot be listed
        """
        if not self.root_dir.is_dir():
            raise DirectoryUnreadableError(self.root_dir, "not a directory")

        visited: set[Path] = set()
        yield from self._walk_dir(self.root_dir, visited)

    def _walk_dir(self, directory: Path, visited: set[Path]) -> Iterator[Path]:
        real = directory.resolve()
        if real in visited:
            logger.debug(f"Skipped (symlink loop): {directory}")
            return
        visited.add(real)

        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise DirectoryUnreadableError(directory, e.strerror or str(e))

        for entry in entries:
            if _is_dir(entry):
                if entry.is_symlink() and not self.follow_symlinks:
                    logger.debug(f"Skipped (symlinked dir): {entry}")
                    continue
                yield from self._walk_dir(entry, visited)
                continue

            if _is_fifo_or_socket(entry):
                logger.debug(f"Skipped (special file): {entry}")
                continue

            if _real_path(entry) in self.ignore:
                logger.debug(f"Skipped (report output): {entry}")
                continue

            if should_skip_file(entry.relative_to(self.root_dir), self.exclude_patterns):
                logger.debug(f"Skipped (pattern): {entry}")
                continue

            yield entry


def read_source_file(filepath: Path) -> SourceFile:
    """
    Read a whole file as UTF-8 text.

    Bytes are decoded without newline translation so ``\\r\\n`` files keep
    their line structure.

    Raises:
        FileUnreadableError: If the file cannot be opened or is not valid UTF-8
    """
    try:
        data = filepath.read_bytes()
    except OSError as e:
        raise FileUnreadableError(filepath, e.strerror or str(e))

    try:
        content = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FileUnreadableError(filepath, f"not valid UTF-8 ({e.reason} at byte {e.start})")

    return SourceFile.from_text(filepath, content)


def walk_files(root_dir: Path, **kwargs) -> Iterator[Path]:
    """Shortcut for ``TreeWalker(root_dir, **kwargs).walk()``."""
    return TreeWalker(root_dir, **kwargs).walk()


# ── Private helpers ──────────────────────────────────────────────────


def _is_dir(path: Path) -> bool:
    # Entries that cannot be stat'ed are treated as files so the read reports them.
    try:
        return path.is_dir()
    except OSError:
        return False


def _is_fifo_or_socket(path: Path) -> bool:
    try:
        mode = path.stat().st_mode
    except OSError:
        return False
    return stat.S_ISFIFO(mode) or stat.S_ISSOCK(mode)


def _real_path(path: Path) -> Path:
    """Resolved path; does not raise on dangling or looping symlinks."""
    return Path(os.path.realpath(path))
