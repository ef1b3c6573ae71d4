"""
GameStore Backend - In-Memory Store
=====================================

What:  A GameStore over plain Python lists owned by one instance.
How:   Games and genres are transient ORM objects (never attached to a
       session). Every method runs without awaiting anything in between
       reading and writing the lists, so on a single event loop no two
       requests interleave inside a method.
When:  store_backend="memory", and in tests that need a seeded catalog
       without a database.

Id assignment:
    Ids come from a counter that starts after the highest seeded id and
    only moves forward, so an id freed by a delete is never handed out again.
    Ids are not count + 1, which would reissue a deleted id (see DESIGN.md).
"""

import logging
from typing import List, Optional

from gamestore.models.game import Game, Genre
from gamestore.models.seed import SEED_GAMES, SEED_GENRES
from gamestore.stores.base import GameStore

logger = logging.getLogger(__name__)


class InMemoryGameStore(GameStore):
    """
    Process-local store. Contents are lost on restart.

    Args:
        seed: Load the starter genres and games on construction.
    """

    name = "memory"

    def __init__(self, seed: bool = True):
        self._genres: List[Genre] = []
        self._games: List[Game] = []
        self._next_id = 1

        if seed:
            self._seed()

    def _seed(self) -> None:
        self._genres = [Genre(id=genre_id, name=name) for genre_id, name in SEED_GENRES]
        genres_by_id = {genre.id: genre for genre in self._genres}

        for game_id, name, genre_id, price, release_date in SEED_GAMES:
            self._games.append(
                Game(
                    id=game_id,
                    name=name,
                    genre_id=genre_id,
                    genre=genres_by_id[genre_id],
                    price=price,
                    release_date=release_date,
                )
            )
        self._next_id = max((game.id for game in self._games), default=0) + 1
        logger.debug(
            "In-memory store seeded: %d genres, %d games",
            len(self._genres),
            len(self._games),
        )

    def _index_of(self, game_id: int) -> int:
        for index, game in enumerate(self._games):
            if game.id == game_id:
                return index
        return -1

    # ── GameStore ─────────────────────────────────────────────────────────

    async def list_games(self) -> List[Game]:
        return sorted(self._games, key=lambda game: game.id)

    async def get_game(self, game_id: int) -> Optional[Game]:
        index = self._index_of(game_id)
        return self._games[index] if index != -1 else None

    async def get_genre(self, genre_id: int) -> Optional[Genre]:
        return next((genre for genre in self._genres if genre.id == genre_id), None)

    async def list_genres(self) -> List[Genre]:
        return sorted(self._genres, key=lambda genre: genre.id)

    async def create_game(self, game: Game) -> Game:
        game.id = self._next_id
        self._next_id += 1
        self._games.append(game)
        return game

    async def update_game(self, game: Game) -> Game:
        index = self._index_of(game.id)
        if index == -1:
            # Only games returned by get_game() are updated
            raise KeyError(game.id)
        self._games[index] = game
        return game

    async def delete_game(self, game_id: int) -> bool:
        index = self._index_of(game_id)
        if index == -1:
            return False
        del self._games[index]
        return True

    async def ping(self) -> None:
        return None

    def __len__(self) -> int:
        return len(self._games)
