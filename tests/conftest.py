"""
Shared fixtures for roulette tests
"""

import random
from unittest.mock import AsyncMock, MagicMock, Mock

import pytest

from src.services.database import Database
from src.services.roulette import RouletteService


@pytest.fixture
def db_path(tmp_path):
    """Path to a fresh SQLite file"""
    return str(tmp_path / "roulette.db")


@pytest.fixture
def db(db_path):
    """Database backed by a temporary file"""
    return Database(db_path)


@pytest.fixture
def service(db):
    """Service with a seeded random source"""
    return RouletteService(db, rng=random.Random(1234))


@pytest.fixture
def interaction():
    """Interaction that has not been responded to yet"""
    interaction = MagicMock()
    interaction.user.name = "tester"
    interaction.user.id = 42
    interaction.response.is_done = Mock(return_value=False)
    interaction.response.send_message = AsyncMock()
    interaction.followup.send = AsyncMock()
    return interaction
