"""
GameStore Backend - SQL Store
===============================

What:  A GameStore over one async SQLAlchemy session.
How:   The session is the unit of work of a single request. Every write
       commits exactly once before returning, so a handler only reports
       success for committed data. Relationships are loaded eagerly
       (joinedload) because async sessions cannot lazy-load.
Who:   Built per request by sql_store_provider().

Error Handling:
    SQLAlchemyError is logged with its type and re-raised as DatabaseError
    (HTTP 500 with a generic message). The provider rolls the session back.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import delete, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from gamestore.exceptions import DatabaseError
from gamestore.models.game import Game, Genre
from gamestore.stores.base import GameStore

logger = logging.getLogger(__name__)


@contextmanager
def _database_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("Database error during %s: %s", operation, str(e), exc_info=True)
        raise DatabaseError(
            context={"operation": operation, "error_type": type(e).__name__},
        ) from e


class SqlGameStore(GameStore):
    """
    Relational store. Ids are assigned by the database (autoincrement).

    Args:
        session: The request's AsyncSession. The store never closes it.
    """

    name = "sql"

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_games(self) -> List[Game]:
        with _database_errors("list_games"):
            result = await self._session.execute(
                select(Game).options(joinedload(Game.genre)).order_by(Game.id)
            )
            return list(result.scalars().all())

    async def get_game(self, game_id: int) -> Optional[Game]:
        with _database_errors("get_game"):
            return await self._session.get(Game, game_id, options=[joinedload(Game.genre)])

    async def get_genre(self, genre_id: int) -> Optional[Genre]:
        with _database_errors("get_genre"):
            return await self._session.get(Genre, genre_id)

    async def list_genres(self) -> List[Genre]:
        with _database_errors("list_genres"):
            result = await self._session.execute(select(Genre).order_by(Genre.id))
            return list(result.scalars().all())

    async def create_game(self, game: Game) -> Game:
        with _database_errors("create_game"):
            self._session.add(game)
            await self._session.commit()
            return game

    async def update_game(self, game: Game) -> Game:
        with _database_errors("update_game"):
            # `game` is already tracked by this session; commit flushes the changes
            await self._session.commit()
            return game

    async def delete_game(self, game_id: int) -> bool:
        with _database_errors("delete_game"):
            result = await self._session.execute(delete(Game).where(Game.id == game_id))
            if result.rowcount == 0:
                return False
            await self._session.commit()
            return True

    async def ping(self) -> None:
        with _database_errors("ping"):
            await self._session.execute(text("SELECT 1"))
