"""
RouletteBot - Draw Targets
==========================

A command target is either a roulette ID or a group name. It is
resolved once from the raw argument and then matched on by type.

Author: حَـــــنَّـــــا
"""

import re
from dataclasses import dataclass
from typing import Union

from src.core.constants import TARGET_ID_PATTERN
from src.core.errors import ValidationError


_ID_RE = re.compile(TARGET_ID_PATTERN, re.ASCII)


@dataclass(frozen=True)
class RouletteId:
    """Target a single roulette by ID."""

    id: int


@dataclass(frozen=True)
class GroupName:
    """Target a roulette group by exact name."""

    name: str


DrawTarget = Union[RouletteId, GroupName]


def parse_target(raw: str) -> DrawTarget:
    """
    Resolve a raw command argument.

    All-digit input is a roulette ID, anything else is a group name.

    Raises:
        ValidationError: If the argument is blank.
    """
    value = (raw or "").strip()
    if not value:
        raise ValidationError("Please enter a roulette ID (number) or a roulette group name.")
    if _ID_RE.match(value):
        return RouletteId(int(value))
    return GroupName(value)


__all__ = ["RouletteId", "GroupName", "DrawTarget", "parse_target"]
