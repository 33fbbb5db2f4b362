"""
Tests for comma-separated input parsing and message truncation
"""

from src.utils.text import parse_ids, split_items, truncate


class TestSplitItems:
    """Option list parsing"""

    def test_trims_and_keeps_order(self):
        assert split_items("a, b ,c") == ["a", "b", "c"]

    def test_drops_empty_pieces(self):
        assert split_items("a,, ,b,") == ["a", "b"]

    def test_only_separators_is_empty(self):
        assert split_items(",,,") == []

    def test_empty_and_none(self):
        assert split_items("") == []
        assert split_items(None) == []

    def test_keeps_repeats(self):
        assert split_items("x, x, y") == ["x", "x", "y"]


class TestParseIds:
    """Roulette ID list parsing"""

    def test_parses_in_order_with_repeats(self):
        assert parse_ids("3, 1, 3") == [3, 1, 3]

    def test_drops_unparseable_tokens(self):
        assert parse_ids("1, abc, , 2") == [1, 2]

    def test_reads_leading_number(self):
        assert parse_ids("7x, x7") == [7]

    def test_nothing_valid(self):
        assert parse_ids("a,b") == []
        assert parse_ids("") == []


class TestTruncate:
    """Discord message length limit"""

    def test_short_text_untouched(self):
        assert truncate("hello", limit=10) == "hello"

    def test_long_text_cut_with_ellipsis(self):
        result = truncate("x" * 20, limit=10)
        assert len(result) == 10
        assert result.endswith("…")
