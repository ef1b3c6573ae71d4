"""
GameStore Backend - Games Route Handlers
==========================================

What:  The five catalog routes under /games.
How:   Each handler receives the request's GameStore through the
       get_game_store dependency and delegates to GameService. Errors are
       raised as application exceptions and turned into responses by the
       global handlers in main.py.

Route Inventory:
    GET    /games        → 200 [GameSummaryDto]
    GET    /games/{id}   → 200 GameDetailsDto | 404
    POST   /games        → 201 GameDetailsDto + Location | 400
    PUT    /games/{id}   → 204 | 400 | 404
    DELETE /games/{id}   → 204 | 404
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from gamestore.dependencies import get_game_store
from gamestore.schemas.game import (
    CreateGameDto,
    ErrorResponse,
    GameDetailsDto,
    GameSummaryDto,
    UpdateGameDto,
)
from gamestore.services.game_service import game_service
from gamestore.stores.base import GameStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/games", tags=["Games"])

_NOT_FOUND = {404: {"description": "Game not found (empty body)"}}
_BAD_REQUEST = {400: {"description": "Invalid body or unknown genre", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[GameSummaryDto],
    summary="List all games",
)
async def list_games(store: GameStore = Depends(get_game_store)) -> List[GameSummaryDto]:
    return await game_service.list_games(store)


@router.get(
    "/{game_id}",
    name="get_game",
    response_model=GameDetailsDto,
    responses=_NOT_FOUND,
    summary="Get a single game by ID",
)
async def get_game(
    game_id: int,
    store: GameStore = Depends(get_game_store),
) -> GameDetailsDto:
    return await game_service.get_game(store, game_id)


@router.post(
    "",
    status_code=201,
    response_model=GameDetailsDto,
    responses=_BAD_REQUEST,
    summary="Create a game",
    description=(
        "Creates a game in an existing genre. Responds 201 with the stored game "
        "and a Location header pointing at GET /games/{id}."
    ),
)
async def create_game(
    dto: CreateGameDto,
    request: Request,
    response: Response,
    store: GameStore = Depends(get_game_store),
) -> GameDetailsDto:
    """
    Create a game.

    The store has committed the new row by the time this returns, so the
    Location header always points at a readable resource.
    """
    game = await game_service.create_game(store, dto)
    response.headers["Location"] = str(request.url_for("get_game", game_id=game.id))
    return game


@router.put(
    "/{game_id}",
    status_code=204,
    response_class=Response,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Replace a game",
)
async def update_game(
    game_id: int,
    dto: UpdateGameDto,
    store: GameStore = Depends(get_game_store),
) -> Response:
    await game_service.update_game(store, game_id, dto)
    return Response(status_code=204)


@router.delete(
    "/{game_id}",
    status_code=204,
    response_class=Response,
    responses=_NOT_FOUND,
    summary="Delete a game",
)
async def delete_game(
    game_id: int,
    store: GameStore = Depends(get_game_store),
) -> Response:
    await game_service.delete_game(store, game_id)
    return Response(status_code=204)
