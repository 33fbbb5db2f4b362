"""
RouletteBot - Roulette Service
==============================

Validation, pagination and random draws over the roulette store.
Raises typed errors from src.core.errors; the command layer turns
them into replies.

Author: حَـــــنَّـــــا
"""

import asyncio
import math
import random
from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar, Union

from src.core.constants import (
    DEFAULT_DRAW_COUNT,
    MAX_DRAW_COUNT,
    MIN_DRAW_COUNT,
    NO_OPTIONS_MARKER,
    PAGE_SIZE,
)
from src.core.errors import ConflictError, NotFoundError, ValidationError
from src.core.logger import logger
from src.services.database import Database, Roulette, RouletteGroup
from src.utils.text import parse_ids, split_items

from .targets import DrawTarget, GroupName, RouletteId


T = TypeVar("T")


# =============================================================================
# Result Types
# =============================================================================

@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a client-side paginated listing."""

    records: Tuple[T, ...]
    page: int
    total_pages: int
    total: int

    @property
    def is_empty(self) -> bool:
        return not self.records


@dataclass(frozen=True)
class RouletteDraw:
    """Results of drawing one or more times from a single roulette."""

    roulette_id: int
    results: Tuple[str, ...]


@dataclass(frozen=True)
class GroupDrawEntry:
    """One draw from a roulette inside a group."""

    roulette_id: int
    result: str


@dataclass(frozen=True)
class GroupDraw:
    """One entry per surviving roulette, in group order."""

    group_name: str
    entries: Tuple[GroupDrawEntry, ...]


@dataclass(frozen=True)
class GroupDrawRejected:
    """Group draws only support a single round."""

    group_name: str
    requested_count: int


@dataclass(frozen=True)
class GroupDetail:
    """A group plus each referenced roulette, None where it was deleted."""

    group: RouletteGroup
    members: Tuple[Tuple[int, Optional[Roulette]], ...]


DrawResult = Union[RouletteDraw, GroupDraw, GroupDrawRejected]
DetailResult = Union[Roulette, GroupDetail]


# =============================================================================
# Helpers
# =============================================================================

def clamp_draw_count(requested: Optional[int]) -> int:
    """Clamp a requested draw count into [1, 10]. None or 0 means the default."""
    count = requested or DEFAULT_DRAW_COUNT
    return min(max(MIN_DRAW_COUNT, count), MAX_DRAW_COUNT)


def paginate(records: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> Page[T]:
    """
    Slice one 1-indexed page out of records.

    Pages past the end come back empty instead of raising.
    """
    page = max(1, page)
    start = (page - 1) * page_size
    return Page(
        records=tuple(records[start:start + page_size]),
        page=page,
        total_pages=math.ceil(len(records) / page_size),
        total=len(records),
    )


# =============================================================================
# Service
# =============================================================================

class RouletteService:
    """Roulette and roulette group operations against an injected database."""

    def __init__(self, db: Database, rng: Optional[random.Random] = None) -> None:
        self.db = db
        self.rng = rng or random.Random()

    # =========================================================================
    # Roulettes
    # =========================================================================

    async def create_roulette(self, items_text: str) -> Roulette:
        """Create a roulette from comma-separated options."""
        items = split_items(items_text)
        if not items:
            raise ValidationError("At least one non-empty option is required.")
        return await asyncio.to_thread(self.db.create_roulette, items)

    async def list_roulettes(self, page: int = 1) -> Page[Roulette]:
        roulettes = await asyncio.to_thread(self.db.get_all_roulettes)
        return paginate(roulettes, page)

    async def get_roulette(self, roulette_id: int) -> Roulette:
        roulette = await asyncio.to_thread(self.db.get_roulette, roulette_id)
        if roulette is None:
            raise NotFoundError(f"Roulette ID `{roulette_id}` does not exist.")
        return roulette

    async def delete_roulette(self, roulette_id: int) -> bool:
        return await asyncio.to_thread(self.db.delete_roulette, roulette_id)

    # =========================================================================
    # Groups
    # =========================================================================

    async def create_group(self, name: str, ids_text: str) -> RouletteGroup:
        """
        Create a named group of existing roulettes.

        IDs are checked one by one in input order and the first missing
        one aborts the create. The name check is a lookup before insert;
        the unique index catches anything that slips between the two.
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Please enter a roulette group name.")

        roulette_ids = parse_ids(ids_text)
        if not roulette_ids:
            raise ValidationError("At least one valid roulette ID is required.")

        for roulette_id in roulette_ids:
            if await asyncio.to_thread(self.db.get_roulette, roulette_id) is None:
                raise NotFoundError(f"Roulette ID `{roulette_id}` does not exist.")

        existing = await asyncio.to_thread(self.db.get_group_by_name, name)
        if existing is not None:
            raise ConflictError(f"A roulette group named `{name}` already exists.")

        return await asyncio.to_thread(self.db.create_group, name, roulette_ids)

    async def list_groups(self, page: int = 1) -> Page[RouletteGroup]:
        groups = await asyncio.to_thread(self.db.get_all_groups)
        return paginate(groups, page)

    async def get_group(self, name: str) -> RouletteGroup:
        group = await asyncio.to_thread(self.db.get_group_by_name, name)
        if group is None:
            raise NotFoundError(f'Roulette group "{name}" does not exist.')
        return group

    async def get_group_detail(self, name: str) -> GroupDetail:
        """Look up a group and each roulette it references, in order."""
        group = await self.get_group(name)
        members = []
        for roulette_id in group.items:
            roulette = await asyncio.to_thread(self.db.get_roulette, roulette_id)
            members.append((roulette_id, roulette))
        return GroupDetail(group=group, members=tuple(members))

    async def delete_group(self, group_id: int) -> bool:
        return await asyncio.to_thread(self.db.delete_group, group_id)

    # =========================================================================
    # Detail
    # =========================================================================

    async def detail(self, target: DrawTarget) -> DetailResult:
        if isinstance(target, RouletteId):
            return await self.get_roulette(target.id)
        return await self.get_group_detail(target.name)

    # =========================================================================
    # Draws
    # =========================================================================

    def _pick(self, items: Sequence[str]) -> str:
        """One uniform pick over items, with replacement."""
        return items[self.rng.randrange(len(items))]

    async def draw(self, target: DrawTarget, count: Optional[int] = None) -> DrawResult:
        """Draw from a roulette or from every roulette in a group."""
        if isinstance(target, RouletteId):
            return await self.draw_roulette(target.id, count)
        if isinstance(target, GroupName):
            return await self.draw_group(target.name, count)
        raise TypeError(f"Unknown draw target: {target!r}")

    async def draw_roulette(self, roulette_id: int, count: Optional[int] = DEFAULT_DRAW_COUNT) -> RouletteDraw:
        """Draw count times from one roulette. Repeats across draws are allowed."""
        count = clamp_draw_count(count)
        roulette = await self.get_roulette(roulette_id)
        if not roulette.items:
            raise ValidationError(f"Roulette ID `{roulette_id}` has no options to draw from.")

        results = tuple(self._pick(roulette.items) for _ in range(count))
        logger.tree("Roulette Drawn", [
            ("Roulette ID", str(roulette_id)),
            ("Count", str(count)),
        ], emoji="🎲")
        return RouletteDraw(roulette_id=roulette_id, results=results)

    async def draw_group(self, name: str, count: Optional[int] = DEFAULT_DRAW_COUNT) -> Union[GroupDraw, GroupDrawRejected]:
        """
        Draw once from every surviving roulette in a group.

        Deleted roulettes are skipped; only a group with nothing left
        is an error. The count is clamped before the check, but the
        rejection reports it as requested.
        """
        if clamp_draw_count(count) != 1:
            return GroupDrawRejected(group_name=name, requested_count=count)

        group = await self.get_group(name)
        if not group.items:
            raise NotFoundError(f'Roulette group "{name}" does not contain any roulettes.')

        lookups = await asyncio.gather(*(
            asyncio.to_thread(self.db.get_roulette, roulette_id)
            for roulette_id in group.items
        ))
        survivors: List[Roulette] = [r for r in lookups if r is not None]
        if not survivors:
            raise NotFoundError(f'Every roulette in group "{name}" has been deleted.')

        entries = tuple(
            GroupDrawEntry(
                roulette_id=roulette.id,
                result=self._pick(roulette.items) if roulette.items else NO_OPTIONS_MARKER,
            )
            for roulette in survivors
        )

        logger.tree("Roulette Group Drawn", [
            ("Group", name[:50]),
            ("Roulettes", f"{len(survivors)}/{group.item_count}"),
        ], emoji="🎲")
        return GroupDraw(group_name=name, entries=entries)


__all__ = [
    "RouletteService",
    "Page",
    "RouletteDraw",
    "GroupDraw",
    "GroupDrawEntry",
    "GroupDrawRejected",
    "GroupDetail",
    "DrawResult",
    "DetailResult",
    "clamp_draw_count",
    "paginate",
]
