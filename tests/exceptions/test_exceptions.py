"""Tests for the exception hierarchy."""

from pathlib import Path

from halstead_insight.exceptions import (
    AnalysisError,
    ConfigurationError,
    DirectoryUnreadableError,
    FileUnreadableError,
    HalsteadInsightError,
    InvalidConfigError,
    InvalidRootError,
)


class TestHierarchy:
    def test_analysis_errors(self):
        assert issubclass(FileUnreadableError, AnalysisError)
        assert issubclass(DirectoryUnreadableError, AnalysisError)
        assert issubclass(AnalysisError, HalsteadInsightError)

    def test_config_errors(self):
        assert issubclass(InvalidRootError, ConfigurationError)
        assert issubclass(InvalidConfigError, ConfigurationError)
        assert issubclass(ConfigurationError, HalsteadInsightError)


class TestMessages:
    def test_plain_message(self):
        err = HalsteadInsightError("boom")
        assert str(err) == "boom"
        assert err.details == {}

    def test_details_are_stringified(self):
        err = HalsteadInsightError("boom", path=Path("/x/a.c"), count=3, missing=None)
        assert err.details == {"path": "/x/a.c", "count": "3"}
        assert str(err) == "boom (path=/x/a.c, count=3)"

    def test_details_are_appended(self):
        err = FileUnreadableError(Path("/x/blob.bin"), "not valid UTF-8")
        assert str(err) == (
            "Unable to read file: /x/blob.bin (filepath=/x/blob.bin, reason=not valid UTF-8)"
        )
        assert err.filepath == Path("/x/blob.bin")
        assert err.reason == "not valid UTF-8"

    def test_directory_error(self):
        err = DirectoryUnreadableError(Path("/x"), "Permission denied")
        assert err.details == {"dirpath": "/x", "reason": "Permission denied"}

    def test_invalid_root(self):
        err = InvalidRootError(Path("/nope"), "does not exist")
        assert str(err) == "Cannot scan /nope: does not exist (root=/nope)"
        assert err.reason == "does not exist"

    def test_invalid_config(self):
        err = InvalidConfigError("effort_divisor", 0, "must be positive")
        assert err.key == "effort_divisor"
        assert err.source is None
        assert str(err) == "Invalid value for effort_divisor: 0 (reason=must be positive)"

    def test_invalid_config_names_its_source(self):
        err = InvalidConfigError(
            "follow_symlinks", "maybe", "expected true/false", source="HALSTEAD_FOLLOW_SYMLINKS"
        )
        assert err.details["source"] == "HALSTEAD_FOLLOW_SYMLINKS"
        assert "'maybe'" in str(err)
