"""
RouletteBot - Core Package
==========================

Framework essentials: config, constants, errors, and logging.

Author: حَـــــنَّـــــا
"""

from src.core.config import config
from src.core.logger import logger

__all__ = ["config", "logger"]
