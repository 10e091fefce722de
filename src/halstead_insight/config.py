"""Configuration loading and management for Halstead Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in ReportConfig)
    2. Global config (~/.halstead-insight.toml)
    3. Project config (./halstead-insight.toml)
    4. Explicit config file
    5. Environment variables (HALSTEAD_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(root="/srv/code", verbose=True)
    >>> config.verbosity
    'verbose'
    >>> config.output_file
    PosixPath('/srv/code/output.html')
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Literal, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

DEFAULT_OUTPUT_NAME = "output.html"

# Divisor applied to difficulty * volume when deriving Halstead effort.
DEFAULT_EFFORT_DIVISOR = 48.11


def default_root() -> Path:
    """Directory containing the running program.

    Falls back to the current directory when ``sys.argv[0]`` is not a file,
    as in an interactive session or ``python -c``.
    """
    program = sys.argv[0] if sys.argv else ""
    if program and Path(program).is_file():
        return Path(program).resolve().parent
    return Path.cwd()


@dataclass(frozen=True)
class ReportConfig:
    """Configuration for a report run.

    Attributes:
        Scan target:
            root: Directory to scan (None = directory of the running program)
            exclude_patterns: Glob patterns for files to leave out of the report
            follow_symlinks: Descend into symlinked directories. Symlinked
                files are always read.

        Output:
            output_name: File name written into the root when output_path is unset
            output_path: Explicit output file, overrides root/output_name

        Metrics:
            effort_divisor: Divisor in effort = difficulty * volume / divisor

        Logging:
            verbosity: quiet / normal / verbose
            log_file: Also append log records (INFO and up) to this file
    """

    # Scan target
    root: Optional[str] = None
    exclude_patterns: list[str] = field(default_factory=list)
    follow_symlinks: bool = False

    # Output
    output_name: str = DEFAULT_OUTPUT_NAME
    output_path: Optional[str] = None

    # Metrics
    effort_divisor: float = DEFAULT_EFFORT_DIVISOR

    # Logging
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.output_name or "/" in self.output_name or "\\" in self.output_name:
            raise InvalidConfigError(
                "output_name", self.output_name, "must be a bare file name"
            )
        if self.effort_divisor <= 0:
            raise InvalidConfigError(
                "effort_divisor", self.effort_divisor, "must be positive"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )
        if not isinstance(self.exclude_patterns, list):
            raise InvalidConfigError(
                "exclude_patterns", self.exclude_patterns, "must be a list of glob patterns"
            )

    @property
    def root_dir(self) -> Path:
        """Resolved scan root."""
        if self.root is None:
            return default_root()
        return Path(self.root).expanduser().resolve()

    @property
    def output_file(self) -> Path:
        """Where the HTML report is written."""
        if self.output_path is not None:
            return Path(self.output_path).expanduser().resolve()
        return self.root_dir / self.output_name


def load_config(config_file: Optional[Path] = None, **overrides) -> ReportConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``verbose``
            and ``quiet`` booleans are folded into ``verbosity``; ``None``
            values are ignored.

    Returns:
        Validated ReportConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".halstead-insight.toml"
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global config"))

    project_config = Path.cwd() / "halstead-insight.toml"
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "config file"))

    merged.update(_load_env_vars())

    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update(overrides)

    for key in ("root", "output_path", "log_file"):
        if isinstance(merged.get(key), Path):
            merged[key] = str(merged[key])

    try:
        return ReportConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _read_config_file(path: Path, label: str) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")
    except OSError as e:
        raise ConfigurationError(f"Cannot read {label} '{path}': {e.strerror or e}")


def _parse_bool(value: str) -> bool:
    lower = value.strip().lower()
    if lower in ("true", "1", "yes", "on"):
        return True
    if lower in ("false", "0", "no", "off"):
        return False
    raise ValueError("expected true/false")


def _parse_patterns(value: str) -> list[str]:
    """Comma-separated globs: ``"*.o, vendor/*"`` -> ``["*.o", "vendor/*"]``."""
    return [part.strip() for part in value.split(",") if part.strip()]


def _parse_divisor(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValueError("expected a number")


# HALSTEAD_<FIELD> -> parser for that ReportConfig field
_ENV_PARSERS: dict[str, Callable[[str], Any]] = {
    "root": str,
    "exclude_patterns": _parse_patterns,
    "follow_symlinks": _parse_bool,
    "output_name": str,
    "output_path": str,
    "effort_divisor": _parse_divisor,
    "verbosity": str,
    "log_file": str,
}


def _load_env_vars() -> dict[str, Any]:
    """Read HALSTEAD_ROOT, HALSTEAD_EXCLUDE_PATTERNS, HALSTEAD_FOLLOW_SYMLINKS,
    HALSTEAD_OUTPUT_NAME, HALSTEAD_OUTPUT_PATH, HALSTEAD_EFFORT_DIVISOR,
    HALSTEAD_VERBOSITY and HALSTEAD_LOG_FILE.

    Raises:
        InvalidConfigError: If a value cannot be parsed for its field
    """
    result: dict[str, Any] = {}
    for field_name, parse in _ENV_PARSERS.items():
        env_key = f"HALSTEAD_{field_name.upper()}"
        raw = os.environ.get(env_key)
        if raw is None:
            continue
        try:
            result[field_name] = parse(raw)
        except ValueError as e:
            raise InvalidConfigError(field_name, raw, str(e), source=env_key)
    return result
