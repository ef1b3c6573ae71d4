"""
GameStore Backend - In-Memory Store Tests
===========================================

What:  InMemoryGameStore behavior: seeding, ordering, id assignment, writes.
"""

from datetime import date
from decimal import Decimal

import pytest

from gamestore.models.game import Game
from gamestore.stores.memory import InMemoryGameStore


def _new_game(genre, name="Tekken 8"):
    return Game(
        name=name,
        genre_id=genre.id,
        genre=genre,
        price=Decimal("69.99"),
        release_date=date(2024, 1, 26),
    )


class TestSeeding:

    @pytest.mark.asyncio
    async def test_seeded_catalog(self, memory_store):
        games = await memory_store.list_games()
        genres = await memory_store.list_genres()

        assert [game.id for game in games] == [1, 2, 3, 4, 5]
        assert [genre.name for genre in genres][:3] == ["Fighting", "Role Playing", "Sports"]

    @pytest.mark.asyncio
    async def test_seeded_game_has_genre(self, memory_store):
        game = await memory_store.get_game(1)

        assert game.name == "Street Fighter II"
        assert game.genre.name == "Fighting"
        assert game.price == Decimal("19.99")
        assert game.release_date == date(1992, 7, 15)

    @pytest.mark.asyncio
    async def test_unseeded_store_is_empty(self):
        store = InMemoryGameStore(seed=False)
        assert await store.list_games() == []
        assert await store.list_genres() == []


class TestLookups:

    @pytest.mark.asyncio
    async def test_missing_ids_return_none(self, memory_store):
        assert await memory_store.get_game(999) is None
        assert await memory_store.get_genre(999) is None


class TestWrites:

    @pytest.mark.asyncio
    async def test_create_assigns_next_id(self, memory_store):
        genre = await memory_store.get_genre(1)
        game = await memory_store.create_game(_new_game(genre))

        assert game.id == 6
        assert await memory_store.get_game(6) is game

    @pytest.mark.asyncio
    async def test_ids_are_not_reused_after_delete(self, memory_store):
        genre = await memory_store.get_genre(1)

        assert await memory_store.delete_game(4) is True
        assert await memory_store.delete_game(5) is True
        created = await memory_store.create_game(_new_game(genre))

        ids = [game.id for game in await memory_store.list_games()]
        assert created.id == 6
        assert len(ids) == len(set(ids))

    @pytest.mark.asyncio
    async def test_delete_missing_returns_false(self, memory_store):
        assert await memory_store.delete_game(42) is False
        assert len(memory_store) == 5

    @pytest.mark.asyncio
    async def test_update_replaces_stored_game(self, memory_store):
        game = await memory_store.get_game(2)
        game.name = "Final Fantasy XIV: Endwalker"

        await memory_store.update_game(game)

        assert (await memory_store.get_game(2)).name == "Final Fantasy XIV: Endwalker"
