"""
RouletteBot - Roulette Messages
===============================

Plain-text reply builders for roulette commands.

Author: حَـــــنَّـــــا
"""

from src.core.constants import DELETED_MARKER, DRAW_DECORATION, MESSAGE_MAX_LENGTH
from src.services.database import Roulette, RouletteGroup
from src.utils.text import truncate

from .service import GroupDetail, GroupDraw, GroupDrawRejected, Page, RouletteDraw


OPTION_JOINER = ", "
PREVIEW_MAX_LENGTH = 150  # Per-roulette option preview in listings


# =============================================================================
# Create
# =============================================================================

def roulette_created_message(roulette: Roulette) -> str:
    return truncate(
        f"Roulette created! ID: {roulette.id}\n"
        f"Options: {OPTION_JOINER.join(roulette.items)}"
    )


def group_created_message(group: RouletteGroup) -> str:
    return truncate(
        "Roulette group created!\n"
        f"Name: {group.name}\n"
        f"ID: {group.id}\n"
        f"Roulettes: {OPTION_JOINER.join(str(i) for i in group.items)}"
    )


# =============================================================================
# Lists
# =============================================================================

def _with_footer(body: str, page: Page) -> str:
    """Append the page footer, cutting the body so the footer always fits."""
    footer = f"Page {page.page} of {page.total_pages}"
    return truncate(body, MESSAGE_MAX_LENGTH - len(footer) - 1) + "\n" + footer


def roulette_page_message(page: Page[Roulette]) -> str:
    """Roulette listing with option previews, or an empty notice."""
    if page.is_empty:
        return "No roulettes found."

    lines = ["Roulettes:"]
    for roulette in page.records:
        lines.append(f"ID: {roulette.id} | Options: {roulette.item_count}")
        lines.append(truncate(OPTION_JOINER.join(roulette.items), PREVIEW_MAX_LENGTH) + "\n")
    return _with_footer("\n".join(lines), page)


def group_page_message(page: Page[RouletteGroup]) -> str:
    """Group listing, or an empty notice."""
    if page.is_empty:
        return "No roulette groups found."

    lines = ["Roulette groups:"]
    for group in page.records:
        lines.append(f"ID: {group.id} | Name: {group.name} | Roulettes: {group.item_count}")
    lines.append("")
    return _with_footer("\n".join(lines), page)


# =============================================================================
# Detail
# =============================================================================

def roulette_detail_message(roulette: Roulette) -> str:
    options = "\n".join(f"{index}. {item}" for index, item in enumerate(roulette.items, start=1))
    return truncate(
        f"Roulette ID: {roulette.id}\n"
        f"Options: {roulette.item_count}\n"
        f"Option list:\n{options}"
    )


def group_detail_message(detail: GroupDetail) -> str:
    """Group summary; deleted members are marked instead of failing."""
    lines = [
        f"Roulette group: {detail.group.name}",
        f"ID: {detail.group.id}",
        f"Roulettes: {detail.group.item_count}",
        "Roulette list:",
    ]
    for roulette_id, roulette in detail.members:
        if roulette is None:
            lines.append(f"  - Roulette ID {roulette_id}: {DELETED_MARKER}")
        else:
            lines.append(f"  - Roulette ID {roulette_id}: {roulette.item_count} options")
    return truncate("\n".join(lines))


# =============================================================================
# Draws
# =============================================================================

def roulette_draw_message(draw: RouletteDraw) -> str:
    """A single result is decorated, several are numbered."""
    header = f"Roulette ID: {draw.roulette_id}\nResult:\n"
    if len(draw.results) == 1:
        return truncate(f"{header}{DRAW_DECORATION} {draw.results[0]} {DRAW_DECORATION}")
    numbered = "\n".join(f"{index}. {result}" for index, result in enumerate(draw.results, start=1))
    return truncate(header + numbered)


def group_draw_message(draw: GroupDraw) -> str:
    lines = [
        f"Roulette group: {draw.group_name}",
        f"Results (one from each of {len(draw.entries)} roulettes):",
        "",
    ]
    for index, entry in enumerate(draw.entries, start=1):
        lines.append(f"{index}. [Roulette ID: {entry.roulette_id}] {entry.result}")
    return truncate("\n".join(lines))


def group_draw_rejected_message(rejected: GroupDrawRejected) -> str:
    return (
        f"Group draws do not support a draw count (got {rejected.requested_count}). "
        f'Each roulette in "{rejected.group_name}" is drawn exactly once.'
    )


# =============================================================================
# Delete
# =============================================================================

def delete_message(deleted: bool, group: bool = False) -> str:
    noun = "Roulette group" if group else "Roulette"
    return f"{noun} deleted." if deleted else f"{noun} not found."


__all__ = [
    "roulette_created_message",
    "group_created_message",
    "roulette_page_message",
    "group_page_message",
    "roulette_detail_message",
    "group_detail_message",
    "roulette_draw_message",
    "group_draw_message",
    "group_draw_rejected_message",
    "delete_message",
]
