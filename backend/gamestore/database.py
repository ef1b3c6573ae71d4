"""
GameStore Backend - Database Engine and Session Management
============================================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       startup routine that creates tables and seeds genres.
How:   One engine per process with connection pooling; sessions are opened
       per request by the SQL store provider (see gamestore.stores.providers).
Who:   Used by the app factory, the SQL store, Alembic and the test suite.
When:  The engine is created at module import; sessions are created per-request.

Connection Pooling:
    pool_size / max_overflow / pool_pre_ping come from settings and apply to
    server databases (PostgreSQL). SQLite URLs get SQLAlchemy's default pool
    for the dialect, so those options are not passed.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from gamestore.config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create an async engine for the given connection string.

    SQL statements are echoed only when log_level is DEBUG.
    """
    options = {"echo": settings.log_level == "DEBUG"}
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(database_url, **options)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to an engine.

    expire_on_commit=False keeps loaded attributes readable after commit,
    which the handlers rely on when mapping the committed entity to a DTO.
    """
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


# ── Process-wide engine and session factory ───────────────────────────────
engine = build_engine(settings.database_url)
async_session_factory = build_session_factory(engine)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares one metadata object between the models, create_all() and Alembic.
    """
    pass


async def init_database(bind: AsyncEngine) -> None:
    """
    Create missing tables and seed the genre reference data.

    What:    Idempotent schema bootstrap for development and tests.
    How:     metadata.create_all() skips existing tables; genres are only
             inserted when the genres table is empty.
    When:    App startup (when settings.db_auto_create is on) and test fixtures.
    """
    from gamestore.models.game import Genre
    from gamestore.models.seed import SEED_GENRES

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = build_session_factory(bind)
    async with session_factory() as session:
        count = await session.scalar(select(func.count(Genre.id)))
        if not count:
            session.add_all(Genre(id=genre_id, name=name) for genre_id, name in SEED_GENRES)
            await session.commit()
            logger.info("Seeded %d genres", len(SEED_GENRES))


async def dispose_engine() -> None:
    """Close all pooled connections. Called during application shutdown."""
    await engine.dispose()
