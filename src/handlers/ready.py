"""
RouletteBot - Ready Handler
===========================

Logs the connection summary once the gateway is ready and shows the
draw command in the bot's presence.

Author: حَـــــنَّـــــا
"""

import discord
from discord.ext import commands

from src.core.logger import log


PRESENCE_TEXT = "/roulette draw"


class ReadyHandler(commands.Cog):
    """Startup summary and presence."""

    def __init__(self, bot: commands.Bot) -> None:
        self.bot = bot

    @commands.Cog.listener()
    async def on_ready(self) -> None:
        """Called on every (re)connect, so it must stay idempotent."""
        commands_registered = sorted(
            command.qualified_name for command in self.bot.tree.walk_commands()
        )
        db = getattr(self.bot, "db", None)

        log.tree("Bot Ready", [
            ("User", str(self.bot.user)),
            ("ID", str(self.bot.user.id)),
            ("Guilds", str(len(self.bot.guilds))),
            ("Commands", ", ".join(commands_registered) or "None"),
            ("Database", "Healthy" if db is not None and db.is_healthy else "Unavailable"),
        ], emoji="🚀")

        await self.bot.change_presence(
            activity=discord.Game(name=PRESENCE_TEXT)
        )


async def setup(bot: commands.Bot) -> None:
    await bot.add_cog(ReadyHandler(bot))
