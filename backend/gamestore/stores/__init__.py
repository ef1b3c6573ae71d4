# Stores package init
"""
GameStore Backend - Persistence Stores
========================================

What:  Everything that holds Game and Genre records.

Store Inventory:
    - base.py:      GameStore, the abstract async interface handlers depend on
    - memory.py:    InMemoryGameStore, a seeded list owned by one instance
    - sql.py:       SqlGameStore, one AsyncSession per request
    - providers.py: factories yielding a store per request, built once per process
"""

from gamestore.stores.base import GameStore
from gamestore.stores.memory import InMemoryGameStore
from gamestore.stores.providers import (
    StoreProvider,
    build_store_provider,
    memory_store_provider,
    sql_store_provider,
)
from gamestore.stores.sql import SqlGameStore

__all__ = [
    "GameStore",
    "InMemoryGameStore",
    "SqlGameStore",
    "StoreProvider",
    "build_store_provider",
    "memory_store_provider",
    "sql_store_provider",
]
