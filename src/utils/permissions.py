"""
RouletteBot - Permission Utilities
==================================

Centralized privilege checks for roulette management commands.

Author: John Hamwi
"""

from typing import Union

import discord

from src.core.config import config


def is_elevated(user: Union[int, discord.Member, discord.User]) -> bool:
    """
    Check if a user may create or delete roulettes and groups.

    Elevated users:
    - Developer (OWNER_ID)
    - Moderators (MOD_ROLE_ID)
    - Members with Manage Server

    Args:
        user: User ID, Member, or User object

    Returns:
        True if user has elevated privileges
    """
    # Extract user_id
    user_id = user if isinstance(user, int) else user.id

    # Developer bypass
    if config.OWNER_ID and user_id == config.OWNER_ID:
        return True

    # Role and permission checks (only works with Member objects)
    if isinstance(user, discord.Member):
        if config.MOD_ROLE_ID and user.get_role(config.MOD_ROLE_ID):
            return True
        if user.guild_permissions.manage_guild:
            return True

    return False
