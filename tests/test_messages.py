"""
Tests for roulette reply text
"""

from src.services.database import Roulette, RouletteGroup
from src.services.roulette import GroupDetail, GroupDraw, GroupDrawEntry, GroupDrawRejected, RouletteDraw
from src.services.roulette import messages
from src.services.roulette.service import paginate


class TestListMessages:
    """Paginated listings"""

    def test_roulette_page(self):
        roulettes = [Roulette(id=i, items=("a", "b")) for i in range(1, 26)]

        text = messages.roulette_page_message(paginate(roulettes, 3))

        assert "ID: 21 | Options: 2" in text
        assert "ID: 25 | Options: 2" in text
        assert "ID: 20 " not in text
        assert text.endswith("Page 3 of 3")

    def test_long_option_lists_keep_footer(self):
        items = tuple(f"option number {n}" for n in range(300))
        roulettes = [Roulette(id=i, items=items) for i in range(1, 11)]

        text = messages.roulette_page_message(paginate(roulettes, 1))

        assert len(text) <= 2000
        assert "ID: 10 | Options: 300" in text
        assert text.endswith("Page 1 of 1")

    def test_roulette_page_out_of_range(self):
        text = messages.roulette_page_message(paginate([Roulette(id=1, items=("a",))], 2))

        assert text == "No roulettes found."

    def test_group_page(self):
        groups = [RouletteGroup(id=1, name="lunch", items=(1, 2, 2))]

        text = messages.group_page_message(paginate(groups, 1))

        assert "ID: 1 | Name: lunch | Roulettes: 3" in text
        assert text.endswith("Page 1 of 1")

    def test_group_page_empty(self):
        assert messages.group_page_message(paginate([], 1)) == "No roulette groups found."


class TestDetailMessages:
    """Roulette and group detail"""

    def test_roulette_detail_is_numbered_from_one(self):
        text = messages.roulette_detail_message(Roulette(id=4, items=("x", "y")))

        assert "Roulette ID: 4" in text
        assert "Options: 2" in text
        assert text.endswith("1. x\n2. y")

    def test_group_detail_marks_deleted(self):
        detail = GroupDetail(
            group=RouletteGroup(id=9, name="g", items=(1, 2)),
            members=((1, Roulette(id=1, items=("a", "b", "c"))), (2, None)),
        )

        text = messages.group_detail_message(detail)

        assert "Roulette ID 1: 3 options" in text
        assert "Roulette ID 2: deleted" in text


class TestDrawMessages:
    """Draw results"""

    def test_single_draw_decorated(self):
        text = messages.roulette_draw_message(RouletteDraw(roulette_id=3, results=("tacos",)))

        assert text.endswith("🎉 tacos 🎉")

    def test_multiple_draws_numbered(self):
        text = messages.roulette_draw_message(RouletteDraw(roulette_id=3, results=("a", "a", "b")))

        assert "1. a\n2. a\n3. b" in text
        assert "🎉" not in text

    def test_group_draw_tagged_by_id(self):
        draw = GroupDraw(group_name="g", entries=(
            GroupDrawEntry(roulette_id=5, result="x"),
            GroupDrawEntry(roulette_id=2, result="(no options)"),
        ))

        text = messages.group_draw_message(draw)

        assert "1. [Roulette ID: 5] x" in text
        assert "2. [Roulette ID: 2] (no options)" in text

    def test_group_draw_rejected(self):
        text = messages.group_draw_rejected_message(GroupDrawRejected(group_name="g", requested_count=3))

        assert "do not support a draw count" in text

    def test_group_draw_rejected_shows_requested_count(self):
        text = messages.group_draw_rejected_message(GroupDrawRejected(group_name="g", requested_count=15))

        assert "(got 15)" in text


class TestDeleteMessage:
    """Delete outcomes"""

    def test_outcomes(self):
        assert messages.delete_message(True) == "Roulette deleted."
        assert messages.delete_message(False) == "Roulette not found."
        assert messages.delete_message(False, group=True) == "Roulette group not found."
