"""
Entity <-> DTO mapping.

Pure functions grouped by entity. Inputs are assumed validated and
genre-resolved, so none of these can fail.
"""

from typing import Optional

from gamestore.models.game import Game, Genre
from gamestore.schemas.game import (
    CreateGameDto,
    GameDetailsDto,
    GameSummaryDto,
    GenreDto,
    UpdateGameDto,
)


def _genre_name(game: Game) -> str:
    genre: Optional[Genre] = game.genre
    return genre.name if genre is not None else ""


# ── Game ──────────────────────────────────────────────────────────────────

def to_game(dto: CreateGameDto, genre: Genre) -> Game:
    """New, unsaved Game built from a create body. The id stays unassigned."""
    return Game(
        name=dto.name,
        genre_id=genre.id,
        genre=genre,
        price=dto.price,
        release_date=dto.release_date,
    )


def update_game(game: Game, dto: UpdateGameDto, genre: Genre) -> Game:
    """Overwrite every field except the id. Mutates and returns `game`."""
    game.name = dto.name
    game.genre_id = genre.id
    game.genre = genre
    game.price = dto.price
    game.release_date = dto.release_date
    return game


def to_summary_dto(game: Game) -> GameSummaryDto:
    return GameSummaryDto(id=game.id, name=game.name, genre=_genre_name(game))


def to_details_dto(game: Game) -> GameDetailsDto:
    return GameDetailsDto(
        id=game.id,
        name=game.name,
        genre=_genre_name(game),
        price=game.price,
        release_date=game.release_date,
    )


# ── Genre ─────────────────────────────────────────────────────────────────

def to_genre_dto(genre: Genre) -> GenreDto:
    return GenreDto(id=genre.id, name=genre.name)
