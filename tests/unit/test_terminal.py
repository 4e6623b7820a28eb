"""Tests for terminal width detection."""

import os
from unittest.mock import patch

import pytest

from tablestream.terminal import DEFAULT_TERMINAL_WIDTH, detect_terminal_width


class TestDetectTerminalWidth:
    """Tests for detect_terminal_width()."""

    def test_columns_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """COLUMNS overrides the real terminal size."""
        monkeypatch.setenv("COLUMNS", "132")
        assert detect_terminal_width() == 132

    def test_reported_size(self) -> None:
        """The terminal's reported width is returned."""
        size = os.terminal_size((120, 40))
        with patch("tablestream.terminal.shutil.get_terminal_size", return_value=size):
            assert detect_terminal_width() == 120

    def test_zero_width_falls_back(self) -> None:
        """A terminal reporting zero columns uses the default."""
        size = os.terminal_size((0, 0))
        with patch("tablestream.terminal.shutil.get_terminal_size", return_value=size):
            assert detect_terminal_width() == DEFAULT_TERMINAL_WIDTH
            assert detect_terminal_width(default=60) == 60

    def test_fallback_passed_through(self) -> None:
        """The default is what shutil falls back to when there is no terminal."""
        with patch("tablestream.terminal.shutil.get_terminal_size") as get_size:
            get_size.return_value = os.terminal_size((99, 24))
            detect_terminal_width(default=99)

        get_size.assert_called_once_with(fallback=(99, 24))
