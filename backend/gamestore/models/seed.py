"""
GameStore Backend - Seed Data
===============================

What:  Genre reference data and the starter game catalog.
Who:   Genres are inserted by database.init_database() and by Alembic
       revision 001; the in-memory store loads both lists on construction.
"""

from datetime import date
from decimal import Decimal

# (id, name)
SEED_GENRES = [
    (1, "Fighting"),
    (2, "Role Playing"),
    (3, "Sports"),
    (4, "Action-Adventure"),
    (5, "Sandbox"),
]

# (id, name, genre_id, price, release_date)
SEED_GAMES = [
    (1, "Street Fighter II", 1, Decimal("19.99"), date(1992, 7, 15)),
    (2, "Final Fantasy XIV", 2, Decimal("59.99"), date(2010, 9, 30)),
    (3, "FIFA 23", 3, Decimal("69.99"), date(2022, 9, 27)),
    (4, "The Legend of Zelda: Breath of the Wild", 4, Decimal("59.99"), date(2017, 3, 3)),
    (5, "Minecraft", 5, Decimal("26.95"), date(2011, 11, 18)),
]
