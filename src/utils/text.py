"""
RouletteBot - Text Utilities
============================

Shared text processing functions.

Author: حَـــــنَّـــــا
"""

import re
from typing import List

from src.core.constants import ITEM_SEPARATOR, MESSAGE_MAX_LENGTH


# Leading integer of a token, e.g. "12abc" -> 12
_LEADING_INT = re.compile(r"[+-]?\d+", re.ASCII)


def split_items(text: str) -> List[str]:
    """
    Split comma-separated text into trimmed, non-empty pieces.

    Order is preserved and repeats are kept.

    Example:
        split_items("a, b ,c") -> ["a", "b", "c"]
    """
    if not text:
        return []
    return [piece.strip() for piece in text.split(ITEM_SEPARATOR) if piece.strip()]


def parse_ids(text: str) -> List[int]:
    """
    Parse comma-separated integers, dropping tokens without a leading number.

    A token is read up to its first non-digit, so "7x" gives 7 and
    "x7" is dropped.
    """
    if not text:
        return []
    ids = []
    for token in text.split(ITEM_SEPARATOR):
        match = _LEADING_INT.match(token.strip())
        if match:
            ids.append(int(match.group()))
    return ids


def truncate(text: str, limit: int = MESSAGE_MAX_LENGTH) -> str:
    """Cut text to fit a Discord message, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit - 1] + "…"
