"""
GameStore Backend - Validation Unit Tests
===========================================

What:  Field rules for create/update bodies.
How:   Builds DTOs directly; no store, no HTTP.

What we test:
    ✅ A valid body yields no errors
    ✅ Each rule on its own (name, genreId, price, releaseDate)
    ✅ Prices and ids that the SQL columns cannot hold exactly
    ✅ Errors accumulate: every failing field is reported
    ✅ Update bodies follow the same rules
"""

from datetime import date
from decimal import Decimal

import pytest

from gamestore.schemas.game import CreateGameDto, UpdateGameDto
from gamestore.services.validation import validate_create_game, validate_update_game


def _create(**overrides):
    fields = {
        "name": "Street Fighter II",
        "genre_id": 1,
        "price": Decimal("19.99"),
        "release_date": date(1992, 7, 15),
    }
    fields.update(overrides)
    return CreateGameDto(**fields)


def _fields(errors):
    return [error.field for error in errors]


class TestCreateGameValidation:
    """Rules applied to POST /games bodies."""

    def test_valid_body_has_no_errors(self):
        assert validate_create_game(_create()) == []

    def test_empty_name_rejected(self):
        assert _fields(validate_create_game(_create(name=""))) == ["name"]

    def test_whitespace_name_rejected(self):
        assert _fields(validate_create_game(_create(name="   "))) == ["name"]

    def test_name_at_limit_accepted(self):
        assert validate_create_game(_create(name="x" * 100)) == []

    def test_name_over_limit_rejected(self):
        errors = validate_create_game(_create(name="x" * 101))
        assert _fields(errors) == ["name"]
        assert "100" in errors[0].message

    @pytest.mark.parametrize("genre_id", [0, -3])
    def test_non_positive_genre_id_rejected(self, genre_id):
        assert _fields(validate_create_game(_create(genre_id=genre_id))) == ["genreId"]

    def test_zero_price_accepted(self):
        assert validate_create_game(_create(price=Decimal("0"))) == []

    def test_negative_price_rejected(self):
        assert _fields(validate_create_game(_create(price=Decimal("-0.01")))) == ["price"]

    def test_third_decimal_place_rejected(self):
        errors = validate_create_game(_create(price=Decimal("19.999")))
        assert _fields(errors) == ["price"]
        assert "decimal places" in errors[0].message

    def test_trailing_zero_decimal_accepted(self):
        assert validate_create_game(_create(price=Decimal("19.990"))) == []

    def test_price_beyond_column_range_rejected(self):
        assert _fields(validate_create_game(_create(price=Decimal("100000000")))) == ["price"]

    def test_largest_price_accepted(self):
        assert validate_create_game(_create(price=Decimal("99999999.99"))) == []

    def test_genre_id_beyond_integer_range_rejected(self):
        assert _fields(validate_create_game(_create(genre_id=2**31))) == ["genreId"]

    def test_largest_genre_id_accepted(self):
        assert validate_create_game(_create(genre_id=2**31 - 1)) == []

    def test_default_release_date_rejected(self):
        errors = validate_create_game(_create(release_date=date.min))
        assert _fields(errors) == ["releaseDate"]
        assert errors[0].message == "Release date is required."

    def test_all_errors_reported_together(self):
        errors = validate_create_game(
            _create(name="", price=Decimal("-1"), release_date=date.min)
        )
        assert sorted(_fields(errors)) == ["name", "price", "releaseDate"]


class TestUpdateGameValidation:
    """PUT /games/{id} bodies follow the create rules."""

    def test_valid_update_has_no_errors(self):
        dto = UpdateGameDto(
            name="Street Fighter II Turbo",
            genre_id=1,
            price=Decimal("24.99"),
            release_date=date(1993, 7, 11),
        )
        assert validate_update_game(dto) == []

    def test_invalid_update_reports_every_field(self):
        dto = UpdateGameDto(name="y" * 150, genre_id=0, price=Decimal("-5"), release_date=date.min)
        assert sorted(_fields(validate_update_game(dto))) == [
            "genreId",
            "name",
            "price",
            "releaseDate",
        ]
