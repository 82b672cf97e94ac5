"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.core.config import Settings
from src.db.memory_repository import InMemoryGameRepository
from src.db.seed import seed_games


@pytest.fixture
def seeded_repository() -> Generator[InMemoryGameRepository, None, None]:
    """Repository holding the 7 sample games. Emptied at teardown so tests stay independent."""
    repo = InMemoryGameRepository(seed_games())
    try:
        yield repo
    finally:
        repo.reset([])


@pytest.fixture
def test_settings() -> Settings:
    """Settings that do not depend on the environment of the machine running the tests."""
    return Settings(log_level="DEBUG")


@pytest.fixture
def client(
    test_settings: Settings, seeded_repository: InMemoryGameRepository
) -> Generator[TestClient, None, None]:
    """Client for an app built around the seeded repository (mounted at the root)."""
    app = create_app(settings=test_settings, repository=seeded_repository)
    with TestClient(app) as test_client:
        yield test_client
