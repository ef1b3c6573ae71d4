"""
GameStore Backend - Mapping Unit Tests
========================================

What:  Entity <-> DTO functions in gamestore.services.mapping.
"""

from datetime import date
from decimal import Decimal

from gamestore.models.game import Game, Genre
from gamestore.schemas.game import CreateGameDto, UpdateGameDto
from gamestore.services import mapping


def _game(genre=None):
    return Game(
        id=7,
        name="Minecraft",
        genre_id=genre.id if genre else 5,
        genre=genre,
        price=Decimal("26.95"),
        release_date=date(2011, 11, 18),
    )


class TestToGame:

    def test_copies_fields_and_links_genre(self):
        genre = Genre(id=2, name="Role Playing")
        dto = CreateGameDto(
            name="Final Fantasy XIV",
            genre_id=2,
            price=Decimal("59.99"),
            release_date=date(2010, 9, 30),
        )

        game = mapping.to_game(dto, genre)

        assert game.id is None
        assert game.name == "Final Fantasy XIV"
        assert game.genre_id == 2
        assert game.genre is genre
        assert game.price == Decimal("59.99")
        assert game.release_date == date(2010, 9, 30)


class TestUpdateGame:

    def test_overwrites_everything_but_id(self):
        game = _game(Genre(id=5, name="Sandbox"))
        sports = Genre(id=3, name="Sports")
        dto = UpdateGameDto(
            name="FIFA 24",
            genre_id=3,
            price=Decimal("49.99"),
            release_date=date(2023, 9, 29),
        )

        updated = mapping.update_game(game, dto, sports)

        assert updated is game
        assert game.id == 7
        assert game.name == "FIFA 24"
        assert game.genre_id == 3
        assert game.genre is sports
        assert game.price == Decimal("49.99")
        assert game.release_date == date(2023, 9, 29)


class TestToDtos:

    def test_summary_uses_genre_name(self):
        summary = mapping.to_summary_dto(_game(Genre(id=5, name="Sandbox")))
        assert summary.model_dump() == {"id": 7, "name": "Minecraft", "genre": "Sandbox"}

    def test_details_carries_price_and_date(self):
        details = mapping.to_details_dto(_game(Genre(id=5, name="Sandbox")))
        assert details.genre == "Sandbox"
        assert details.price == Decimal("26.95")
        assert details.release_date == date(2011, 11, 18)

    def test_unresolved_genre_maps_to_empty_name(self):
        assert mapping.to_summary_dto(_game()).genre == ""
        assert mapping.to_details_dto(_game()).genre == ""

    def test_details_json_uses_camel_case_and_numbers(self):
        details = mapping.to_details_dto(_game(Genre(id=5, name="Sandbox")))
        assert details.model_dump(mode="json", by_alias=True) == {
            "id": 7,
            "name": "Minecraft",
            "genre": "Sandbox",
            "price": 26.95,
            "releaseDate": "2011-11-18",
        }

    def test_genre_dto(self):
        assert mapping.to_genre_dto(Genre(id=1, name="Fighting")).model_dump() == {
            "id": 1,
            "name": "Fighting",
        }
