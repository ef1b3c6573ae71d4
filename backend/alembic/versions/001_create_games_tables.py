"""Create genres and games tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates `genres` and `games` and seeds the genre reference data.
How:   Portable column types only, so the same revision runs on SQLite
       and PostgreSQL. See gamestore/models/game.py for the model side.

Rollback: downgrade() drops both tables (all catalog data is lost).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    genres = op.create_table(
        "genres",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "games",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("genre_id", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("release_date", sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(["genre_id"], ["genres.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_games_genre_id", "games", ["genre_id"])

    # Frozen copy of gamestore.models.seed.SEED_GENRES at this revision
    op.bulk_insert(
        genres,
        [
            {"id": 1, "name": "Fighting"},
            {"id": 2, "name": "Role Playing"},
            {"id": 3, "name": "Sports"},
            {"id": 4, "name": "Action-Adventure"},
            {"id": 5, "name": "Sandbox"},
        ],
    )


def downgrade() -> None:
    op.drop_index("ix_games_genre_id", table_name="games")
    op.drop_table("games")
    op.drop_table("genres")
