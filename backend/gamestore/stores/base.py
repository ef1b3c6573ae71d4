"""
GameStore Backend - Abstract Store Interface
==============================================

What:  The contract every persistence backend implements.
How:   Concrete stores inherit from GameStore and implement every coroutine.
Who:   GameService is the only caller; handlers receive a store through
       the get_game_store dependency and pass it along.

Implementations:
    - InMemoryGameStore: process-local list, seeded on construction
    - SqlGameStore:      async SQLAlchemy session (SQLite or PostgreSQL)
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from gamestore.models.game import Game, Genre


class GameStore(ABC):
    """
    Async persistence interface for games and genres.

    Contract:
        - Lookups return None for missing ids; they never raise for "absent"
        - Returned games have their genre relationship populated
        - Writes are durable when the coroutine returns
        - Backend failures surface as DatabaseError
    """

    # Short backend label reported by GET /health
    name: str = "abstract"

    @abstractmethod
    async def list_games(self) -> List[Game]:
        """All games ordered by id ascending, genre joined."""
        ...

    @abstractmethod
    async def get_game(self, game_id: int) -> Optional[Game]:
        """The game with this id, or None."""
        ...

    @abstractmethod
    async def get_genre(self, genre_id: int) -> Optional[Genre]:
        """The genre with this id, or None."""
        ...

    @abstractmethod
    async def list_genres(self) -> List[Genre]:
        """All genres ordered by id ascending."""
        ...

    @abstractmethod
    async def create_game(self, game: Game) -> Game:
        """
        Persist a new game and return it with its id assigned.

        The game's genre must already have been resolved through get_genre().
        """
        ...

    @abstractmethod
    async def update_game(self, game: Game) -> Game:
        """
        Persist a game previously returned by get_game() and mutated in place.
        """
        ...

    @abstractmethod
    async def delete_game(self, game_id: int) -> bool:
        """Remove the game. Returns False when no game had this id."""
        ...

    @abstractmethod
    async def ping(self) -> None:
        """
        Lightweight reachability check for GET /health.

        Raises when the backend cannot serve requests.
        """
        ...
