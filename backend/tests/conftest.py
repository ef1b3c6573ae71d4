"""
GameStore Backend - Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_store:       AsyncMock implementing the GameStore interface
    ├── memory_store:     Seeded InMemoryGameStore (5 genres, 5 games)
    ├── sql_engine:       Async engine on a temporary SQLite file, genres seeded
    ├── sql_session:      AsyncSession on sql_engine
    ├── memory_client:    HTTPX AsyncClient → app on memory_store
    ├── sql_client:       HTTPX AsyncClient → app on sql_engine
    ├── client:           Parametrized over both of the above
    └── valid_game_body:  JSON body passing every field rule
"""

import os
import tempfile

# Override settings BEFORE any gamestore import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="gamestore_test_"), "default.db"
)
os.environ["STORE_BACKEND"] = "memory"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from gamestore.database import build_engine, build_session_factory, init_database
from gamestore.main import create_app
from gamestore.stores.base import GameStore
from gamestore.stores.memory import InMemoryGameStore
from gamestore.stores.providers import memory_store_provider, sql_store_provider


@pytest.fixture
def mock_store():
    """
    A mock store for service unit tests (no lists, no database).

    Usage:
        async def test_get_game(mock_store):
            mock_store.get_game.return_value = None
            with pytest.raises(NotFoundError):
                await service.get_game(mock_store, 1)
    """
    store = AsyncMock(spec=GameStore)
    store.name = "mock"
    return store


@pytest.fixture
def memory_store():
    """A fresh seeded in-memory store for each test."""
    return InMemoryGameStore()


@pytest_asyncio.fixture
async def sql_engine(tmp_path):
    """
    Async engine on a throwaway SQLite file with tables created and genres seeded.
    """
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'gamestore.db'}")
    await init_database(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def sql_session(sql_engine):
    session_factory = build_session_factory(sql_engine)
    async with session_factory() as session:
        yield session


def _client_for(provider):
    app = create_app(store_provider=provider)
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def memory_client(memory_store):
    """HTTPX AsyncClient talking to an app backed by `memory_store`."""
    async with _client_for(memory_store_provider(memory_store)) as client:
        yield client


@pytest_asyncio.fixture
async def sql_client(sql_engine):
    """HTTPX AsyncClient talking to an app backed by the temporary database."""
    provider = sql_store_provider(build_session_factory(sql_engine))
    async with _client_for(provider) as client:
        yield client


@pytest_asyncio.fixture(params=["memory", "sql"])
async def client(request, tmp_path):
    """
    The same API tests against both stores.

    Note: only the in-memory store starts with games; the SQL store starts
    with the seeded genres and an empty games table.
    """
    if request.param == "memory":
        provider = memory_store_provider(InMemoryGameStore())
        async with _client_for(provider) as http:
            yield http
        return

    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")
    await init_database(engine)
    try:
        provider = sql_store_provider(build_session_factory(engine))
        async with _client_for(provider) as http:
            yield http
    finally:
        await engine.dispose()


@pytest.fixture
def valid_game_body():
    """A create/update body that passes validation and references genre 1."""
    return {
        "name": "Tekken 8",
        "genreId": 1,
        "price": 69.99,
        "releaseDate": "2024-01-26",
    }
