# Models package init
"""ORM models. Importing this package registers every table with Base.metadata."""

from gamestore.models.game import Game, Genre

__all__ = ["Game", "Genre"]
