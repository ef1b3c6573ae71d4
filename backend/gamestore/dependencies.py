"""
FastAPI dependencies shared by the route modules.
"""

from typing import AsyncGenerator

from fastapi import Request

from gamestore.stores.base import GameStore


async def get_game_store(request: Request) -> AsyncGenerator[GameStore, None]:
    """
    Yield the request's GameStore from the provider the app was built with.

    Example usage in a route:
        @router.get("/games")
        async def list_games(store: GameStore = Depends(get_game_store)):
            ...
    """
    provider = request.app.state.store_provider
    async with provider() as store:
        yield store
