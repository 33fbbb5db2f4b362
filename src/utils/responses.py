"""
RouletteBot - Response Utilities
================================

Safe response helpers for Discord interactions.
Handles already-responded interactions gracefully.

Author: حَـــــنَّـــــا
"""

import discord

from src.core.logger import log
from src.utils.text import truncate


async def safe_send(
    interaction: discord.Interaction,
    content: str,
    ephemeral: bool = False,
) -> bool:
    """
    Safely send a text reply to an interaction.

    Handles cases where the interaction has already been responded to
    or has expired. Uses followup if already responded.

    Args:
        interaction: The Discord interaction
        content: Text content to send
        ephemeral: Whether the message should be ephemeral

    Returns:
        True if message was sent successfully, False otherwise
    """
    content = truncate(content)
    try:
        if not interaction.response.is_done():
            await interaction.response.send_message(content=content, ephemeral=ephemeral)
        else:
            await interaction.followup.send(content=content, ephemeral=ephemeral)
        return True
    except discord.HTTPException as e:
        log.tree("Response Failed", [
            ("User", f"{interaction.user.name}"),
            ("Error", str(e)[:50]),
        ], emoji="❌")
        return False
