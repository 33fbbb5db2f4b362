"""
RouletteBot - Main Bot
======================

Discord bot for roulette draws.

Author: حَـــــنَّـــــا
"""

from typing import Optional

import discord
from discord.ext import commands

from src.core.config import config
from src.core.logger import log
from src.services.database import Database
from src.services.roulette import RouletteService


class RouletteBot(commands.Bot):
    """Main bot class for RouletteBot."""

    def __init__(self, db: Optional[Database] = None):
        intents = discord.Intents.default()

        super().__init__(
            command_prefix="!",
            intents=intents,
            help_command=None,
        )

        # Services
        self.db: Database = db or Database()
        self.roulette_service = RouletteService(self.db)

    async def setup_hook(self) -> None:
        """Called when the bot is starting up."""
        self.db.require_healthy()

        # Load handlers
        await self.load_extension("src.handlers.ready")

        # Load commands
        await self.load_extension("src.commands.roulette")

        await self._sync_commands()

    async def _sync_commands(self) -> None:
        """Sync slash commands to the configured guild, or globally."""
        if config.GUILD_ID:
            guild = discord.Object(id=config.GUILD_ID)
            self.tree.copy_global_to(guild=guild)
            synced = await self.tree.sync(guild=guild)
            scope = f"Guild {config.GUILD_ID}"
        else:
            synced = await self.tree.sync()
            scope = "Global"

        log.tree("Commands Synced", [
            ("Scope", scope),
            ("Count", str(len(synced))),
        ], emoji="🔄")

    async def close(self) -> None:
        """Clean up when bot is shutting down."""
        log.info("Bot shutting down...")
        await super().close()
