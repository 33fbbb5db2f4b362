"""
Tests for the elevated privilege check
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import discord
import pytest

from src.utils import permissions


@pytest.fixture
def settings(monkeypatch):
    """Owner 1, moderator role 500"""
    fake = SimpleNamespace(OWNER_ID=1, MOD_ROLE_ID=500)
    monkeypatch.setattr(permissions, "config", fake)
    return fake


def make_member(user_id=2, mod_role=False, manage_guild=False):
    member = MagicMock(spec=discord.Member)
    member.id = user_id
    member.get_role.side_effect = lambda role_id: object() if mod_role and role_id == 500 else None
    member.guild_permissions = SimpleNamespace(manage_guild=manage_guild)
    return member


class TestIsElevated:
    """Owner, moderators and server managers are elevated"""

    def test_owner_by_id(self, settings):
        assert permissions.is_elevated(1) is True

    def test_owner_member(self, settings):
        assert permissions.is_elevated(make_member(user_id=1)) is True

    def test_moderator_role(self, settings):
        assert permissions.is_elevated(make_member(mod_role=True)) is True

    def test_manage_guild(self, settings):
        assert permissions.is_elevated(make_member(manage_guild=True)) is True

    def test_regular_member(self, settings):
        assert permissions.is_elevated(make_member()) is False

    def test_plain_user_id(self, settings):
        assert permissions.is_elevated(99) is False

    def test_unset_owner_never_matches(self, monkeypatch):
        monkeypatch.setattr(permissions, "config", SimpleNamespace(OWNER_ID=0, MOD_ROLE_ID=0))

        assert permissions.is_elevated(0) is False
