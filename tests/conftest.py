"""Shared test fixtures for Halstead Insight tests."""

import os
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path_factory):
    """Keep user/project config files and HALSTEAD_* variables out of tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(home)
    for key in [k for k in list(os.environ) if k.startswith("HALSTEAD_")]:
        monkeypatch.delenv(key)
    return home


@pytest.fixture
def shapes_path():
    """C++ sample with one documented class and three functions."""
    return FIXTURES_DIR / "shapes.cpp"


@pytest.fixture
def shapes_source(shapes_path):
    return shapes_path.read_text(encoding="utf-8")


@pytest.fixture
def source_tree(tmp_path, shapes_source):
    """Small tree: two readable files at different depths plus one binary blob.

    root/
        blob.bin          (invalid UTF-8)
        lib/
            shapes.cpp
        main.c
    """
    root = tmp_path / "project"
    (root / "lib").mkdir(parents=True)
    (root / "lib" / "shapes.cpp").write_text(shapes_source, encoding="utf-8")
    (root / "main.c").write_text(
        "// entry point\nint main(void)\n{\n    return 0;\n}\n", encoding="utf-8"
    )
    (root / "blob.bin").write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe\x00\x80binary")
    return root
