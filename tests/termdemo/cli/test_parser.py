"""Tests for the raising argument parser and help formatter."""

import argparse
from io import StringIO

import pytest

from termdemo.cli.args import DefaultsHelpFormatter
from termdemo.cli.parser import CommandParser, HelpRequested
from termdemo.errors import InvalidArgumentError


@pytest.fixture
def out():
    return StringIO()


@pytest.fixture
def parser(out):
    parser = CommandParser(prog="demo", output=out)
    parser.add_argument("--count", type=int, default=2, help="how many")
    parser.add_argument("--verbose", action="store_true", help="chatty")
    parser.add_argument("--tags", nargs="+", default=[], help="labels")
    parser.add_argument("--name", help="who")
    return parser


@pytest.mark.unit
class TestCommandParser:
    """Test CommandParser error and exit handling."""

    def test_error_raises(self, parser):
        """Test parse errors raise instead of exiting."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            parser.parse_args(["--count", "many"])
        assert "invalid int value" in exc_info.value.message
        assert exc_info.value.context == {"command": "demo"}

    def test_help_raises_help_requested(self, parser, out):
        """Test --help prints to the configured output and raises."""
        with pytest.raises(HelpRequested) as exc_info:
            parser.parse_args(["--help"])
        assert exc_info.value.status == 0
        assert out.getvalue().startswith("usage: demo")

    def test_exit_message_written(self, parser, out):
        """Test exit() writes its message before raising."""
        with pytest.raises(HelpRequested) as exc_info:
            parser.exit(2, "bye\n")
        assert exc_info.value.status == 2
        assert out.getvalue() == "bye\n"

    def test_default_formatter(self, parser):
        """Test the defaults formatter is used unless overridden."""
        assert parser.formatter_class is DefaultsHelpFormatter


@pytest.mark.unit
class TestDefaultsHelpFormatter:
    """Test which defaults appear in help."""

    def test_value_default_shown(self, parser):
        """Test plain defaults are appended."""
        assert "how many (default: 2)" in parser.format_help()

    def test_switch_default_hidden(self, parser):
        """Test store_true flags do not show False."""
        assert "(default: False)" not in parser.format_help()

    def test_empty_and_none_hidden(self, parser):
        """Test empty list and None defaults are not shown."""
        text = parser.format_help()
        assert "(default: [])" not in text
        assert "(default: None)" not in text

    def test_list_default_joined(self):
        """Test list defaults are shown comma separated."""
        parser = argparse.ArgumentParser(formatter_class=DefaultsHelpFormatter)
        parser.add_argument("--items", nargs="+", default=["a", "b"], help="items")
        assert "items (default: a,b)" in parser.format_help()
