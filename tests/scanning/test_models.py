"""Tests for scanning data models."""

from pathlib import Path

import pytest

from halstead_insight.scanning.models import SourceFile, split_lines


class TestSplitLines:
    @pytest.mark.parametrize(
        "content, expected",
        [
            ("", ()),
            ("one", ("one",)),
            ("one\n", ("one",)),
            ("one\ntwo", ("one", "two")),
            ("one\n\n", ("one", "")),
            ("\n", ("",)),
            ("a\r\nb\r\n", ("a", "b")),
        ],
    )
    def test_segments(self, content, expected):
        assert split_lines(content) == expected

    def test_other_separators_are_not_line_breaks(self):
        """Only \\n splits; form feeds and unicode separators stay in the line."""
        assert split_lines("a\x0cb c\n") == ("a\x0cb c",)


class TestSourceFile:
    def test_from_text(self):
        src = SourceFile.from_text(Path("/tmp/demo.c"), "int x;\nint y;\n")
        assert src.name == "demo.c"
        assert src.line_count == 2
        assert src.lines == ("int x;", "int y;")
        assert src.content == "int x;\nint y;\n"

    def test_is_frozen(self):
        src = SourceFile.from_text(Path("a.c"), "x")
        with pytest.raises(AttributeError):
            src.content = "y"

    def test_sample_line_count(self, shapes_path, shapes_source):
        assert SourceFile.from_text(shapes_path, shapes_source).line_count == 20
