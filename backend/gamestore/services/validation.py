"""
GameStore Backend - Request Body Validation
=============================================

What:  Field rules for CreateGameDto and UpdateGameDto.
How:   One explicit function per DTO type returns the list of every
       violated rule as FieldErrorDetail entries; an empty list means valid.
       Nothing here touches the store or raises.
Who:   Called by GameService before any store access.

Rules:
    name         non-empty, at most 100 characters
    genreId      positive integer within the INTEGER column range
    price        zero or more, at most two decimal places, below 100,000,000
    releaseDate  not the default date (date.min, 0001-01-01)
"""

from datetime import date
from decimal import Decimal
from typing import List, Union

from gamestore.schemas.game import CreateGameDto, FieldErrorDetail, UpdateGameDto

NAME_MAX_LENGTH = 100

# Largest id a 32-bit INTEGER primary or foreign key holds
ID_MAX = 2**31 - 1

# NUMERIC(10, 2)
PRICE_PLACES = 2
PRICE_STEP = Decimal("0.01")
PRICE_MAX = Decimal("99999999.99")

# date has no zero value; its minimum plays that role
DEFAULT_DATE = date.min


def _validate_game_fields(dto: Union[CreateGameDto, UpdateGameDto]) -> List[FieldErrorDetail]:
    errors: List[FieldErrorDetail] = []

    if not dto.name or not dto.name.strip():
        errors.append(FieldErrorDetail(field="name", message="The name field is required."))
    elif len(dto.name) > NAME_MAX_LENGTH:
        errors.append(
            FieldErrorDetail(
                field="name",
                message=f"The name field must be at most {NAME_MAX_LENGTH} characters.",
            )
        )

    if not 1 <= dto.genre_id <= ID_MAX:
        errors.append(
            FieldErrorDetail(
                field="genreId",
                message=f"The genreId field must be between 1 and {ID_MAX}.",
            )
        )

    if dto.price < 0:
        errors.append(
            FieldErrorDetail(field="price", message="The price field must be zero or more.")
        )
    elif dto.price > PRICE_MAX:
        errors.append(
            FieldErrorDetail(field="price", message=f"The price field must be at most {PRICE_MAX}.")
        )
    elif dto.price != dto.price.quantize(PRICE_STEP):
        errors.append(
            FieldErrorDetail(
                field="price",
                message=f"The price field must have at most {PRICE_PLACES} decimal places.",
            )
        )

    if dto.release_date == DEFAULT_DATE:
        errors.append(FieldErrorDetail(field="releaseDate", message="Release date is required."))

    return errors


def validate_create_game(dto: CreateGameDto) -> List[FieldErrorDetail]:
    """Validate a POST /games body. Returns every field error found."""
    return _validate_game_fields(dto)


def validate_update_game(dto: UpdateGameDto) -> List[FieldErrorDetail]:
    """Validate a PUT /games/{id} body. Same rules as create."""
    return _validate_game_fields(dto)
