"""
RouletteBot - Database Module
=============================

Modular SQLite database for the roulette feature.

Structure:
    - core.py: Base class with connection management and table init
    - roulettes.py: Roulette option lists
    - groups.py: Named roulette groups

Author: حَـــــنَّـــــا
"""

from .core import DatabaseCore, DatabaseUnavailableError
from .roulettes import Roulette, RoulettesMixin
from .groups import RouletteGroup, GroupsMixin


class Database(
    RoulettesMixin,
    GroupsMixin,
    DatabaseCore,
):
    """
    Complete database class combining all mixins.

    Inherits from all feature mixins and the core database class.
    The order matters - DatabaseCore must be last so its __init__ runs.
    """
    pass


__all__ = [
    "Database",
    "DatabaseUnavailableError",
    "Roulette",
    "RouletteGroup",
]
