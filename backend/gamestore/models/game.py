"""
GameStore Backend - Game and Genre SQLAlchemy Models
======================================================

What:  ORM models for the `genres` and `games` tables.
How:   Inherit from the shared DeclarativeBase; Alembic reads them for migrations.
Who:   Used by both stores. The in-memory store keeps transient (never
       session-attached) instances of the same classes.

Table Design:
    - Integer primary keys assigned by the database (autoincrement)
    - games.genre_id is a foreign key to genres.id; deleting a game never
      touches its genre
    - price is NUMERIC(10, 2): money is stored exactly, never as float
    - release_date is a DATE (no time component)
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gamestore.database import Base


class Genre(Base):
    """
    Reference data classifying a game. Seeded at startup, never deleted
    through the API.
    """

    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<Genre(id={self.id}, name='{self.name}')>"


class Game(Base):
    """
    A game in the catalog.

    Lifecycle:
        1. Built from a CreateGameDto by mapping.to_game() (id unassigned)
        2. Id assigned by the store on create
        3. Fields overwritten in place by mapping.update_game()
        4. Removed by DELETE /games/{id}
    """

    __tablename__ = "games"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    genre_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("genres.id"),
        nullable=False,
        index=True,
    )

    # Many-to-one, no backref: a genre does not track its games
    genre: Mapped[Optional[Genre]] = relationship(Genre)

    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    release_date: Mapped[date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<Game(id={self.id}, name='{self.name}', "
            f"genre_id={self.genre_id}, release_date='{self.release_date}')>"
        )
