"""RouletteBot - Utils Package."""

from src.utils.permissions import is_elevated
from src.utils.responses import safe_send
from src.utils.text import parse_ids, split_items, truncate

__all__ = [
    "is_elevated",
    "safe_send",
    "parse_ids",
    "split_items",
    "truncate",
]
