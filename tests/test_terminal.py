"""Tests for cmdhelp.terminal — output width detection."""

import io
import os

import pytest

from cmdhelp.terminal import DEFAULT_WIDTH, guess_width


class FakeTTY(io.StringIO):
    """A stream that claims to be a terminal."""

    def isatty(self):
        return True

    def fileno(self):
        return 99


class TestGuessWidth:
    """Terminal size, then $COLUMNS, then the default."""

    def test_default_for_plain_stream(self, monkeypatch):
        monkeypatch.delenv("COLUMNS", raising=False)
        assert guess_width(io.StringIO()) == DEFAULT_WIDTH

    def test_custom_default(self, monkeypatch):
        monkeypatch.delenv("COLUMNS", raising=False)
        assert guess_width(io.StringIO(), default=100) == 100

    def test_columns_env(self, monkeypatch):
        monkeypatch.setenv("COLUMNS", "132")
        assert guess_width(io.StringIO()) == 132

    @pytest.mark.parametrize("value", ["", "0", "-5", "wide", "80.5"])
    def test_bad_columns_env_ignored(self, monkeypatch, value):
        monkeypatch.setenv("COLUMNS", value)
        assert guess_width(io.StringIO()) == DEFAULT_WIDTH

    def test_terminal_size_wins(self, monkeypatch):
        monkeypatch.setenv("COLUMNS", "132")
        monkeypatch.setattr(os, "get_terminal_size",
                            lambda fd: os.terminal_size((57, 24)))
        assert guess_width(FakeTTY()) == 57

    def test_zero_terminal_size_falls_through(self, monkeypatch):
        monkeypatch.setenv("COLUMNS", "90")
        monkeypatch.setattr(os, "get_terminal_size",
                            lambda fd: os.terminal_size((0, 0)))
        assert guess_width(FakeTTY()) == 90

    def test_terminal_query_failure(self, monkeypatch):
        monkeypatch.delenv("COLUMNS", raising=False)

        def fail(fd):
            raise OSError("not a terminal")
        monkeypatch.setattr(os, "get_terminal_size", fail)
        assert guess_width(FakeTTY()) == DEFAULT_WIDTH

    def test_stream_without_isatty(self, monkeypatch):
        monkeypatch.delenv("COLUMNS", raising=False)
        assert guess_width(object()) == DEFAULT_WIDTH

    def test_closed_stream(self, monkeypatch):
        monkeypatch.delenv("COLUMNS", raising=False)
        stream = io.StringIO()
        stream.close()
        assert guess_width(stream) == DEFAULT_WIDTH
