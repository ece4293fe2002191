"""
Tests for command options.

Tests key options features including:
- Defaults and immutability
- Validation of each command's constraints
- List value splitting and the fallback list
"""

import dataclasses

import pytest

from termdemo.constants import FALLBACK_ITEMS
from termdemo.errors import ValidationError
from termdemo.options import (
    CommandOptions,
    GreetOptions,
    InfoOptions,
    ListOptions,
    ProgressOptions,
)

# =============================================================================
# Test ProgressOptions
# =============================================================================


@pytest.mark.unit
class TestProgressOptions:
    """Test ProgressOptions defaults and validation."""

    def test_default_duration(self):
        """Test default duration is three seconds."""
        assert ProgressOptions().duration_seconds == 3

    def test_valid_duration_passes(self):
        """Test positive duration validates and is kept."""
        options = ProgressOptions(duration_seconds=5)
        options.validate()
        assert options.duration_seconds == 5

    def test_zero_duration_rejected(self):
        """Test zero duration raises ValidationError naming the field."""
        with pytest.raises(ValidationError) as exc_info:
            ProgressOptions(duration_seconds=0).validate()

        assert exc_info.value.field == "duration_seconds"
        assert "Duration must be greater than 0." in str(exc_info.value)

    def test_negative_duration_rejected(self):
        """Test negative duration raises ValidationError."""
        with pytest.raises(ValidationError):
            ProgressOptions(duration_seconds=-1).validate()

    def test_options_are_immutable(self):
        """Test options cannot be changed after construction."""
        options = ProgressOptions(duration_seconds=2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.duration_seconds = 4  # type: ignore[misc]


# =============================================================================
# Test GreetOptions
# =============================================================================


@pytest.mark.unit
class TestGreetOptions:
    """Test GreetOptions defaults and validation."""

    def test_defaults(self):
        """Test default name and count."""
        options = GreetOptions()
        assert options.name == "World"
        assert options.count == 1
        options.validate()

    @pytest.mark.parametrize("name", ["", "   ", "\t"])
    def test_blank_name_rejected(self, name):
        """Test blank names are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            GreetOptions(name=name).validate()
        assert exc_info.value.field == "name"

    @pytest.mark.parametrize("count", [0, -3])
    def test_count_below_one_rejected(self, count):
        """Test counts below one are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            GreetOptions(count=count).validate()
        assert exc_info.value.field == "count"


# =============================================================================
# Test ListOptions
# =============================================================================


@pytest.mark.unit
class TestListOptions:
    """Test ListOptions construction from raw flag values."""

    def test_none_gives_empty_items(self):
        """Test missing values produce an empty item tuple."""
        assert ListOptions.from_values(None).items == ()

    def test_splits_comma_separated_values(self):
        """Test comma-separated and repeated values accumulate in order."""
        options = ListOptions.from_values(["a,b", "c", "d, e"])
        assert options.items == ("a", "b", "c", "d", "e")

    def test_single_string_value(self):
        """Test a single string is split too."""
        assert ListOptions.from_values("x,y").items == ("x", "y")

    def test_blank_entries_dropped(self):
        """Test empty entries between commas are dropped."""
        assert ListOptions.from_values([",a,,b,", " "]).items == ("a", "b")

    def test_fallback_items_when_empty(self):
        """Test empty items fall back to the fruit list."""
        options = ListOptions.from_values([])
        assert options.effective_items == FALLBACK_ITEMS
        assert options.effective_items[0] == "Apple"
        assert len(options.effective_items) == 5

    def test_given_items_replace_fallback(self):
        """Test explicit items are shown instead of the fallback."""
        assert ListOptions.from_values(["one"]).effective_items == ("one",)


# =============================================================================
# Test Base Options
# =============================================================================


@pytest.mark.unit
class TestBaseOptions:
    """Test options without constraints."""

    def test_base_validate_accepts(self):
        """Test base class validation is a no-op."""
        assert CommandOptions().validate() is None

    def test_info_options_have_no_fields(self):
        """Test InfoOptions declares no fields."""
        assert dataclasses.fields(InfoOptions()) == ()
        InfoOptions().validate()
