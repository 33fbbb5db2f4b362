"""
RouletteBot - Configuration
===========================

Central configuration from environment variables.

Author: حَـــــنَّـــــا
"""

import os
from dataclasses import dataclass
from pathlib import Path


ROOT_DIR = Path(__file__).parent.parent.parent
DATA_DIR = ROOT_DIR / "data"
LOGS_DIR = ROOT_DIR / "logs"

DATA_DIR.mkdir(exist_ok=True)
LOGS_DIR.mkdir(exist_ok=True)


def _get_env_int(key: str, default: int) -> int:
    """Get environment variable as int with default."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class Config:
    """Bot configuration from environment variables."""

    # Bot settings
    TOKEN: str = os.getenv("ROULETTE_BOT_TOKEN", "")
    GUILD_ID: int = _get_env_int("ROULETTE_GUILD_ID", 0)  # 0 = sync commands globally
    OWNER_ID: int = _get_env_int("ROULETTE_OWNER_ID", 0)

    # Roles
    MOD_ROLE_ID: int = _get_env_int("ROULETTE_MOD_ROLE_ID", 0)

    # Logging
    TIMEZONE: str = os.getenv("ROULETTE_TIMEZONE", "UTC")

    # Database
    DATABASE_PATH: str = os.getenv("ROULETTE_DATABASE_PATH", str(DATA_DIR / "roulette.db"))


config = Config()
