"""
Tests for draw target resolution
"""

import pytest

from src.core.errors import ValidationError
from src.services.roulette import GroupName, RouletteId, parse_target


class TestParseTarget:
    """All-digit input is an ID, anything else is a group name"""

    def test_digits_are_roulette_id(self):
        assert parse_target("12") == RouletteId(12)

    def test_surrounding_spaces_ignored(self):
        assert parse_target("  7 ") == RouletteId(7)

    def test_text_is_group_name(self):
        assert parse_target("lunch") == GroupName("lunch")

    def test_mixed_is_group_name(self):
        assert parse_target("12a") == GroupName("12a")
        assert parse_target("-3") == GroupName("-3")

    def test_non_ascii_digits_are_group_name(self):
        assert parse_target("١٢") == GroupName("١٢")

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_blank_rejected(self, raw):
        with pytest.raises(ValidationError):
            parse_target(raw)
