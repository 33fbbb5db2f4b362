"""
RouletteBot - Roulette Feature
==============================

User-defined option lists ("roulettes"), named groups of them, and
random draws from either.

Author: حَـــــنَّـــــا
"""

from .service import (
    RouletteService,
    Page,
    RouletteDraw,
    GroupDraw,
    GroupDrawEntry,
    GroupDrawRejected,
    GroupDetail,
)
from .targets import DrawTarget, GroupName, RouletteId, parse_target

__all__ = [
    "RouletteService",
    "Page",
    "RouletteDraw",
    "GroupDraw",
    "GroupDrawEntry",
    "GroupDrawRejected",
    "GroupDetail",
    "DrawTarget",
    "GroupName",
    "RouletteId",
    "parse_target",
]
