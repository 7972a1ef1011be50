# =============================================================================
# test_document.py - Document and Configuration Tests
# =============================================================================
# Tests for the in-memory document, the cursor helpers and ToolConfig.
# =============================================================================

import logging

import pytest

from hp35s_sdk.config import ToolConfig
from hp35s_sdk.document import (
    TextDocument,
    iter_lines,
    location_of,
    preserve_cursor,
    restored_cursor,
)
from hp35s_sdk.errors import SourceLocation


# =============================================================================
# TextDocument Tests
# =============================================================================

class TestTextDocument:
    """Test the list-of-lines document."""

    def test_from_text(self):
        document = TextDocument.from_text("LBL A\nx2\nRTN\n")
        assert document.lines == ("LBL A", "x2", "RTN")
        assert document.line_count() == 3

    def test_text_round_trip(self):
        text = "LBL A\n\n# note\nRTN\n"
        assert TextDocument.from_text(text).text == text

    def test_from_file(self, sample_file, sample_lines):
        document = TextDocument.from_file(sample_file)
        assert list(document.lines) == sample_lines
        assert document.name == str(sample_file)

    def test_read_line(self, sample):
        assert sample.read_line(2) == "LBL A"
        with pytest.raises(IndexError):
            sample.read_line(0)
        with pytest.raises(IndexError):
            sample.read_line(15)

    def test_cursor(self, sample):
        assert sample.cursor_line() == 1
        sample.set_cursor_line(6)
        assert sample.read_current_line() == "x2"

    def test_cursor_past_end(self, make_doc):
        document = make_doc("LBL A", "RTN", cursor=3)
        assert document.read_current_line() == ""
        with pytest.raises(IndexError):
            document.set_cursor_line(4)

    def test_insert_line(self, make_doc):
        document = make_doc("LBL A", "RTN", cursor=2)
        document.insert_line("x2")
        assert document.lines == ("LBL A", "x2", "RTN")
        assert document.cursor_line() == 3
        assert document.read_current_line() == "RTN"

    def test_insert_into_empty(self):
        document = TextDocument()
        document.insert_line("LBL A")
        assert document.lines == ("LBL A",)
        assert document.cursor_line() == 2

    def test_files_use_encoding(self, tmp_path):
        document = TextDocument(encoding="latin-1")
        path = tmp_path / "out.txt"
        document.write_file(path, "R/S ÷\n")
        assert path.read_bytes() == "R/S ÷\n".encode("latin-1")
        assert document.read_file(path) == "R/S ÷\n"


# =============================================================================
# Helper Tests
# =============================================================================

class TestHelpers:
    """Test iteration and cursor helpers."""

    def test_iter_lines(self, make_doc):
        assert list(iter_lines(make_doc("a", "b"))) == [(1, "a"), (2, "b")]

    def test_location_of(self, sample):
        assert location_of(sample, 4) == SourceLocation("<buffer>", 4)
        assert str(location_of(sample, 4)) == "<buffer>:4"

    def test_preserve_cursor_restores_on_error(self, sample):
        sample.set_cursor_line(5)
        with pytest.raises(RuntimeError):
            with preserve_cursor(sample):
                sample.set_cursor_line(9)
                raise RuntimeError("boom")
        assert sample.cursor_line() == 5

    def test_preserve_cursor_keeps_move_on_success(self, sample):
        with preserve_cursor(sample) as origin:
            assert origin == 1
            sample.set_cursor_line(9)
        assert sample.cursor_line() == 9

    def test_restored_cursor(self, sample):
        sample.set_cursor_line(5)
        with restored_cursor(sample):
            sample.set_cursor_line(9)
        assert sample.cursor_line() == 5


# =============================================================================
# Configuration Tests
# =============================================================================

class TestToolConfig:
    """Test defaults and environment overrides."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("HP35S_ENCODING", "HP35S_LOG_LEVEL",
                     "HP35S_SOURCE_SUFFIX", "HP35S_EXPORT_SUFFIX"):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        config = ToolConfig.from_env()
        assert config == ToolConfig()
        assert config.encoding == "utf-8"
        assert config.source_suffix == ".35s"
        assert config.export_suffix == ".txt"
        assert config.logging_level == logging.WARNING

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("HP35S_ENCODING", "latin-1")
        monkeypatch.setenv("HP35S_LOG_LEVEL", "debug")
        monkeypatch.setenv("HP35S_EXPORT_SUFFIX", ".hp")
        config = ToolConfig.from_env()
        assert config.encoding == "latin-1"
        assert config.log_level == "DEBUG"
        assert config.logging_level == logging.DEBUG
        assert config.export_suffix == ".hp"

    def test_invalid_values_ignored(self, monkeypatch):
        monkeypatch.setenv("HP35S_ENCODING", "no-such-codec")
        monkeypatch.setenv("HP35S_LOG_LEVEL", "LOUD")
        monkeypatch.setenv("HP35S_SOURCE_SUFFIX", "35s")
        assert ToolConfig.from_env() == ToolConfig()
