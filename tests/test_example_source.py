"""Tests for example snippet lookup."""

import logging
from pathlib import Path

import pytest

from xmldoc2md.example_source import ExampleSource


def test_disabled() -> None:
    """Test that no directory means no examples."""
    source = ExampleSource(None)
    assert source.path_for("T:MyLib.Foo") is None
    assert source.try_read("T:MyLib.Foo") is None


def test_read_example(tmp_path: Path) -> None:
    """Test reading an example and a missing one."""
    (tmp_path / "T:MyLib.Foo.md").write_text("Use it well.", encoding="utf-8")
    source = ExampleSource(tmp_path)
    assert source.try_read("T:MyLib.Foo") == "Use it well."
    assert source.try_read("T:MyLib.Baz") is None


def test_unreadable_example_logs_warning(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Test that an undecodable example is skipped with a warning."""
    (tmp_path / "T:MyLib.Foo.md").write_bytes(b"\xff\xfe\xfa")
    source = ExampleSource(tmp_path)
    with caplog.at_level(logging.WARNING):
        assert source.try_read("T:MyLib.Foo") is None
    assert "Could not read example" in caplog.text
