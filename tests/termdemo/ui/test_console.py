"""Tests for termdemo.ui.console module."""

import os
from io import StringIO
from unittest.mock import MagicMock, patch

import pytest

from termdemo.ui.console import (
    Console,
    _is_interactive,
    get_console,
    should_use_color,
)


class TestIsInteractive:
    """Tests for _is_interactive function."""

    def test_tty(self):
        """Test returns True for a TTY."""
        stream = MagicMock()
        stream.isatty.return_value = True
        assert _is_interactive(stream) is True

    def test_buffer(self):
        """Test returns False for an in-memory stream."""
        assert _is_interactive(StringIO()) is False

    def test_no_isatty(self):
        """Test returns False for objects without isatty()."""
        assert _is_interactive(object()) is False  # type: ignore[arg-type]


class TestShouldUseColor:
    """Tests for should_use_color function."""

    def test_no_color_env(self):
        """Test NO_COLOR disables color even on a TTY."""
        stream = MagicMock()
        stream.isatty.return_value = True
        with patch.dict(os.environ, {"NO_COLOR": "1"}, clear=True):
            assert should_use_color(stream) is False

    def test_force_color_env(self):
        """Test FORCE_COLOR enables color on a pipe."""
        with patch.dict(os.environ, {"FORCE_COLOR": "1"}, clear=True):
            assert should_use_color(StringIO()) is True

    def test_follows_tty(self):
        """Test color follows the terminal when neither is set."""
        with patch.dict(os.environ, {}, clear=True):
            assert should_use_color(StringIO()) is False


@pytest.mark.unit
class TestConsole:
    """Tests for the Console wrapper."""

    def test_print_markup(self, console, output):
        """Test markup is rendered, not printed."""
        console.print("[bold]hello[/bold]")
        assert output.getvalue() == "hello\n"

    def test_error_escapes_markup(self, console, output):
        """Test user text with brackets is printed literally."""
        console.print_error("bad [value]")
        assert output.getvalue() == "Error: bad [value]\n"

    def test_warning_and_success(self, console, output):
        """Test helper prefixes."""
        console.print_warning("careful")
        console.print_success("done")
        assert output.getvalue() == "Warning: careful\ndone\n"

    def test_rule_title(self, console, output):
        """Test rule() prints its title across the width."""
        console.rule("Items", align="left")
        line = output.getvalue().rstrip("\n")
        assert line.startswith("Items ")
        assert "─" in line

    def test_properties(self, console, output):
        """Test exposed collaborators."""
        assert console.file is output
        assert console.is_interactive is False
        assert console.rich.width == 100

    def test_lock_reentrant(self, console, output):
        """Test printing while holding the lock does not deadlock."""
        with console.lock:
            console.print("inside")
        assert "inside" in output.getvalue()

    def test_get_console_no_color(self):
        """Test --no-color forces plain output."""
        assert get_console(no_color=True).rich.no_color is True

    def test_plain_console_default_file(self):
        """Test the default file is stdout."""
        with patch("sys.stdout", new=StringIO()) as fake:
            assert Console().file is fake
