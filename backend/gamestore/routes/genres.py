"""
GameStore Backend - Genres Route
==================================

What:  GET /genres lists the genre reference data clients need to fill
       in genreId on create/update bodies.
"""

from typing import List

from fastapi import APIRouter, Depends

from gamestore.dependencies import get_game_store
from gamestore.schemas.game import GenreDto
from gamestore.services.game_service import game_service
from gamestore.stores.base import GameStore

router = APIRouter(prefix="/genres", tags=["Genres"])


@router.get("", response_model=List[GenreDto], summary="List all genres")
async def list_genres(store: GameStore = Depends(get_game_store)) -> List[GenreDto]:
    return await game_service.list_genres(store)
