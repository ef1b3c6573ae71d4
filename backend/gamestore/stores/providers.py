"""
GameStore Backend - Store Providers
=====================================

What:  Factories that hand each request a GameStore.
How:   A provider is a zero-argument callable returning an async context
       manager that yields a store. It is built once per process by the
       app factory and stored on app.state; the get_game_store dependency
       enters it for every request.

    memory_store_provider(store)       yields the same InMemoryGameStore
    sql_store_provider(session_factory) opens an AsyncSession per request,
                                        rolls back on error, always closes
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncGenerator, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from gamestore.config import Settings
from gamestore.stores.base import GameStore
from gamestore.stores.memory import InMemoryGameStore
from gamestore.stores.sql import SqlGameStore

logger = logging.getLogger(__name__)

StoreProvider = Callable[[], AsyncContextManager[GameStore]]


def memory_store_provider(store: Optional[InMemoryGameStore] = None) -> StoreProvider:
    """Provider sharing one in-memory store between all requests."""
    shared = store if store is not None else InMemoryGameStore()

    @asynccontextmanager
    async def provide() -> AsyncGenerator[GameStore, None]:
        yield shared

    return provide


def sql_store_provider(session_factory: async_sessionmaker[AsyncSession]) -> StoreProvider:
    """Provider opening one session (one unit of work) per request."""

    @asynccontextmanager
    async def provide() -> AsyncGenerator[GameStore, None]:
        async with session_factory() as session:
            try:
                yield SqlGameStore(session)
            except Exception:
                # Discard anything flushed but not committed
                await session.rollback()
                raise

    return provide


def build_store_provider(settings: Settings) -> StoreProvider:
    """
    Provider selected by settings.store_backend.

    The SQL provider uses the process-wide session factory from
    gamestore.database, bound to settings.database_url.
    """
    if settings.store_backend == "memory":
        logger.info("Using in-memory game store")
        return memory_store_provider()

    from gamestore.database import async_session_factory

    logger.info("Using SQL game store")
    return sql_store_provider(async_session_factory)
