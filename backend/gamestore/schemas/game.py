"""
GameStore Backend - Pydantic Request/Response Schemas (DTOs)
==============================================================

What:  The API contract: request bodies, response bodies and error shapes.
How:   FastAPI decodes request bodies into these models, serializes
       responses from them and generates the OpenAPI document.
When:  Constructed per request, never persisted.

Wire conventions:
    - JSON keys are camelCase (genreId, releaseDate); Python attributes
      are snake_case. Both spellings are accepted on input.
    - Prices are Decimal in Python and plain JSON numbers on the wire.
    - Dates are ISO 8601 calendar dates (YYYY-MM-DD).

Field rules (length, range, non-default date) are NOT declared here; they
live in gamestore.services.validation so every rule violation is reported
together as a field-level error list.
"""

from datetime import date
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Decimal in Python, number in JSON
JsonDecimal = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class CamelModel(BaseModel):
    """Base for every DTO: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ══════════════════════════════════════════════════════════════════════════
# Request Models - What the client sends
# ══════════════════════════════════════════════════════════════════════════


class CreateGameDto(CamelModel):
    """
    Body of POST /games. No id: the store assigns it.
    """
    name: str = Field(description="Game title (1-100 characters)")
    genre_id: int = Field(description="Id of an existing genre")
    price: JsonDecimal = Field(description="Price, zero or more")
    release_date: date = Field(description="Release date (YYYY-MM-DD)")


class UpdateGameDto(CamelModel):
    """
    Body of PUT /games/{id}. Replaces every field; the id comes from the path.
    """
    name: str = Field(description="Game title (1-100 characters)")
    genre_id: int = Field(description="Id of an existing genre")
    price: JsonDecimal = Field(description="Price, zero or more")
    release_date: date = Field(description="Release date (YYYY-MM-DD)")


# ══════════════════════════════════════════════════════════════════════════
# Response Models - What the API returns
# ══════════════════════════════════════════════════════════════════════════


class GameSummaryDto(CamelModel):
    """Compact game representation for GET /games."""
    id: int
    name: str
    genre: str = Field(description="Genre name (empty when unresolved)")


class GameDetailsDto(CamelModel):
    """Full game representation for GET /games/{id} and POST /games."""
    id: int
    name: str
    genre: str = Field(description="Genre name (empty when unresolved)")
    price: JsonDecimal
    release_date: date


# Single-item view under its older name
GameDto = GameDetailsDto


class GenreDto(CamelModel):
    """Genre reference data for GET /genres."""
    id: int
    name: str


# ══════════════════════════════════════════════════════════════════════════
# Error and Health Models
# ══════════════════════════════════════════════════════════════════════════


class FieldErrorDetail(BaseModel):
    """One failed rule on one body field, keyed by its wire name."""
    field: str = Field(description="JSON field name, e.g. 'releaseDate'")
    message: str = Field(description="Human-readable description of the rule")


class ErrorResponse(BaseModel):
    """
    Standardized error body for 400/500 responses.

    Example:
        {
            "error": "invalid_genre",
            "message": "Invalid genre id: 42",
            "details": null,
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    store: str = Field(description="Store backend and reachability, e.g. 'sql: connected'")
    uptime_seconds: float = Field(description="Seconds since service started")
