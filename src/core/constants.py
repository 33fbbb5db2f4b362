"""
RouletteBot - Shared Constants
==============================

Centralized constants for the entire codebase.
Import from here instead of defining locally.

Author: حَـــــنَّـــــا
"""


# =============================================================================
# Pagination
# =============================================================================

PAGE_SIZE = 10  # Records per list page


# =============================================================================
# Draw Limits
# =============================================================================

MIN_DRAW_COUNT = 1
MAX_DRAW_COUNT = 10
DEFAULT_DRAW_COUNT = 1


# =============================================================================
# Input Parsing
# =============================================================================

ITEM_SEPARATOR = ","
TARGET_ID_PATTERN = r"^\d+$"


# =============================================================================
# Response Markers
# =============================================================================

NO_OPTIONS_MARKER = "(no options)"
DELETED_MARKER = "deleted"
DRAW_DECORATION = "🎉"


# =============================================================================
# Discord Limits
# =============================================================================

MESSAGE_MAX_LENGTH = 2000


# =============================================================================
# SQLite Limits
# =============================================================================

SQLITE_MAX_INTEGER = 2 ** 63 - 1  # Largest value an INTEGER column can bind
