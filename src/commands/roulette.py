"""
RouletteBot - Roulette Commands
===============================

Slash commands for creating roulettes and groups, listing them,
drawing from them, and deleting them.

Commands:
    /roulette create        Create a roulette from comma-separated options
    /roulette list          List roulettes (or groups with group:True)
    /roulette group-create  Create a named group of roulette IDs
    /roulette draw          Draw from a roulette ID or a group name
    /roulette delete        Delete a roulette (or group with group:True)
    /roulette detail        Show a roulette or group

Author: حَـــــنَّـــــا
"""

import sqlite3
from typing import Awaitable, Callable

import discord
from discord import app_commands
from discord.ext import commands

from src.core.constants import DEFAULT_DRAW_COUNT, MAX_DRAW_COUNT
from src.core.errors import RouletteError
from src.core.logger import log
from src.services.database import DatabaseUnavailableError, Roulette
from src.services.roulette import (
    GroupDrawRejected,
    RouletteDraw,
    RouletteService,
    parse_target,
)
from src.services.roulette import messages
from src.utils.permissions import is_elevated
from src.utils.responses import safe_send


class RouletteCog(commands.GroupCog, group_name="roulette", group_description="Random draws from option lists"):
    """Roulette management and draw commands."""

    def __init__(self, bot: commands.Bot, service: RouletteService) -> None:
        self.bot = bot
        self.service = service
        super().__init__()

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _respond(
        self,
        interaction: discord.Interaction,
        command: str,
        action: Callable[[], Awaitable[str]],
    ) -> None:
        """Run a command body and reply with its text or its error message."""
        try:
            message = await action()
        except RouletteError as e:
            log.tree(f"Roulette {command} Rejected", [
                ("User", f"{interaction.user.name}"),
                ("ID", str(interaction.user.id)),
                ("Reason", e.message[:100]),
            ], emoji="⚠️")
            message = e.message
        except (sqlite3.Error, OverflowError, DatabaseUnavailableError) as e:
            log.error_tree(f"Roulette {command} Failed", e, [
                ("User", f"{interaction.user.name}"),
                ("ID", str(interaction.user.id)),
            ])
            message = f"Operation failed: {e}"
        else:
            log.tree(f"Roulette {command}", [
                ("User", f"{interaction.user.name}"),
                ("ID", str(interaction.user.id)),
            ], emoji="🎰")

        await safe_send(interaction, message)

    async def _require_elevated(self, interaction: discord.Interaction, command: str) -> bool:
        """Reply with a denial and return False if the caller lacks privileges."""
        if is_elevated(interaction.user):
            return True

        log.tree(f"Roulette {command} Denied", [
            ("User", f"{interaction.user.name}"),
            ("ID", str(interaction.user.id)),
            ("Reason", "Not elevated"),
        ], emoji="🚫")
        await safe_send(
            interaction,
            "You need `Manage Server` permission or the moderator role to do this.",
            ephemeral=True,
        )
        return False

    # =========================================================================
    # Commands
    # =========================================================================

    @app_commands.command(name="create", description="Create a roulette (options separated by commas)")
    @app_commands.describe(items="Options separated by commas, e.g. pizza, sushi, tacos")
    async def create(self, interaction: discord.Interaction, items: str) -> None:
        """Create a roulette."""
        if not await self._require_elevated(interaction, "Create"):
            return

        async def action() -> str:
            roulette = await self.service.create_roulette(items)
            return messages.roulette_created_message(roulette)

        await self._respond(interaction, "Create", action)

    @app_commands.command(name="list", description="List roulettes or roulette groups")
    @app_commands.describe(page="Page number (default 1)", group="List roulette groups instead")
    async def list_(self, interaction: discord.Interaction, page: int = 1, group: bool = False) -> None:
        """List roulettes or groups."""
        async def action() -> str:
            if group:
                return messages.group_page_message(await self.service.list_groups(page))
            return messages.roulette_page_message(await self.service.list_roulettes(page))

        await self._respond(interaction, "List", action)

    @app_commands.command(name="group-create", description="Create a roulette group (IDs separated by commas)")
    @app_commands.describe(name="Unique group name", ids="Roulette IDs separated by commas, e.g. 1, 2, 5")
    async def group_create(self, interaction: discord.Interaction, name: str, ids: str) -> None:
        """Create a roulette group."""
        if not await self._require_elevated(interaction, "Group Create"):
            return

        async def action() -> str:
            group = await self.service.create_group(name, ids)
            return messages.group_created_message(group)

        await self._respond(interaction, "Group Create", action)

    @app_commands.command(name="draw", description="Draw from a roulette ID or a roulette group name")
    @app_commands.describe(
        target="Roulette ID (number) or roulette group name",
        count=f"Number of draws, 1-{MAX_DRAW_COUNT} (roulette IDs only)",
    )
    async def draw(
        self,
        interaction: discord.Interaction,
        target: str,
        count: int = DEFAULT_DRAW_COUNT,
    ) -> None:
        """Draw from a roulette or group."""
        async def action() -> str:
            result = await self.service.draw(parse_target(target), count)
            if isinstance(result, RouletteDraw):
                return messages.roulette_draw_message(result)
            if isinstance(result, GroupDrawRejected):
                return messages.group_draw_rejected_message(result)
            return messages.group_draw_message(result)

        await self._respond(interaction, "Draw", action)

    @app_commands.command(name="delete", description="Delete a roulette or roulette group")
    @app_commands.describe(roulette_id="ID to delete", group="Delete a roulette group instead")
    @app_commands.rename(roulette_id="id")
    async def delete(self, interaction: discord.Interaction, roulette_id: int, group: bool = False) -> None:
        """Delete a roulette or group by ID."""
        if not await self._require_elevated(interaction, "Delete"):
            return

        async def action() -> str:
            if group:
                deleted = await self.service.delete_group(roulette_id)
            else:
                deleted = await self.service.delete_roulette(roulette_id)
            return messages.delete_message(deleted, group=group)

        await self._respond(interaction, "Delete", action)

    @app_commands.command(name="detail", description="Show a roulette or roulette group")
    @app_commands.describe(target="Roulette ID (number) or roulette group name")
    async def detail(self, interaction: discord.Interaction, target: str) -> None:
        """Show roulette options or group members."""
        async def action() -> str:
            result = await self.service.detail(parse_target(target))
            if isinstance(result, Roulette):
                return messages.roulette_detail_message(result)
            return messages.group_detail_message(result)

        await self._respond(interaction, "Detail", action)


async def setup(bot: commands.Bot) -> None:
    """Add the cog to the bot."""
    await bot.add_cog(RouletteCog(bot, bot.roulette_service))
    log.tree("Command Loaded", [
        ("Name", "roulette"),
    ], emoji="✅")
