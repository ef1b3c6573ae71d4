"""
GameStore Backend - Game Service (Business Logic Orchestrator)
================================================================

What:  The workflow behind every /games and /genres route.
How:   validate body → resolve references → consult/mutate the store → map to DTOs.
Who:   Called by route handlers, which pass in the request's GameStore.

Error Strategy:
    ValidationError    body rules failed, raised before any store access
    NotFoundError      game id absent (GET/PUT/DELETE)
    InvalidGenreError  genreId does not resolve (POST/PUT)
    DatabaseError      raised by the SQL store, propagated untouched

    Every check happens before the first write, so a failing request
    leaves the store exactly as it found it.

Design:
    GameService is stateless; the store is an explicit argument of each
    call. The same instance serves the in-memory and SQL backends.
"""

import logging
from typing import List

from gamestore.exceptions import InvalidGenreError, NotFoundError, ValidationError
from gamestore.models.game import Genre
from gamestore.schemas.game import (
    CreateGameDto,
    FieldErrorDetail,
    GameDetailsDto,
    GameSummaryDto,
    GenreDto,
    UpdateGameDto,
)
from gamestore.services import mapping
from gamestore.services.validation import ID_MAX, validate_create_game, validate_update_game
from gamestore.stores.base import GameStore

logger = logging.getLogger(__name__)


def _raise_if_invalid(errors: List[FieldErrorDetail]) -> None:
    if errors:
        raise ValidationError(errors=[error.model_dump() for error in errors])


def _raise_if_out_of_range(game_id: int) -> None:
    # No stored game can carry an id the INTEGER column cannot hold
    if not 1 <= game_id <= ID_MAX:
        raise NotFoundError(resource="game", resource_id=game_id)


class GameService:
    """
    Business logic for the game catalog.

    Responsibilities:
        - list_games() / get_game(): read paths, mapped to summary/details DTOs
        - create_game(): validate, resolve genre, insert
        - update_game(): validate, find game, resolve genre, overwrite
        - delete_game(): remove or report not-found
        - list_genres(): reference data
    """

    async def list_games(self, store: GameStore) -> List[GameSummaryDto]:
        games = await store.list_games()
        return [mapping.to_summary_dto(game) for game in games]

    async def get_game(self, store: GameStore, game_id: int) -> GameDetailsDto:
        """
        Raises:
            NotFoundError: No game with this id (→ 404)
        """
        _raise_if_out_of_range(game_id)
        game = await store.get_game(game_id)
        if game is None:
            raise NotFoundError(resource="game", resource_id=game_id)
        return mapping.to_details_dto(game)

    async def create_game(self, store: GameStore, dto: CreateGameDto) -> GameDetailsDto:
        """
        Create a game from a POST body.

        Workflow Steps:
            1. Validate every field rule (no store access on failure)
            2. Resolve genreId to a Genre
            3. Map to a new Game and insert it (id assigned by the store)
            4. Return the details view of the stored game

        Raises:
            ValidationError:   One or more field rules failed (→ 400)
            InvalidGenreError: genreId does not exist (→ 400)
        """
        _raise_if_invalid(validate_create_game(dto))

        genre = await self._resolve_genre(store, dto.genre_id)
        game = await store.create_game(mapping.to_game(dto, genre))

        logger.info("Game created: id=%s name=%r genre=%s", game.id, game.name, genre.name)
        return mapping.to_details_dto(game)

    async def update_game(self, store: GameStore, game_id: int, dto: UpdateGameDto) -> None:
        """
        Replace every field of an existing game.

        Check order: body rules, then game existence, then genre. The
        entity is only mutated once all three pass.

        Raises:
            ValidationError:   One or more field rules failed (→ 400)
            NotFoundError:     No game with this id (→ 404)
            InvalidGenreError: genreId does not exist (→ 400)
        """
        _raise_if_invalid(validate_update_game(dto))
        _raise_if_out_of_range(game_id)

        game = await store.get_game(game_id)
        if game is None:
            raise NotFoundError(resource="game", resource_id=game_id)

        genre = await self._resolve_genre(store, dto.genre_id)
        await store.update_game(mapping.update_game(game, dto, genre))

        logger.info("Game updated: id=%s", game_id)

    async def delete_game(self, store: GameStore, game_id: int) -> None:
        """
        Raises:
            NotFoundError: No game with this id (→ 404)
        """
        _raise_if_out_of_range(game_id)
        if not await store.delete_game(game_id):
            raise NotFoundError(resource="game", resource_id=game_id)
        logger.info("Game deleted: id=%s", game_id)

    async def list_genres(self, store: GameStore) -> List[GenreDto]:
        genres = await store.list_genres()
        return [mapping.to_genre_dto(genre) for genre in genres]

    async def _resolve_genre(self, store: GameStore, genre_id: int) -> Genre:
        genre = await store.get_genre(genre_id)
        if genre is None:
            logger.warning("Rejected reference to unknown genre id %s", genre_id)
            raise InvalidGenreError(genre_id)
        return genre


# Stateless, shared by every request
game_service = GameService()
