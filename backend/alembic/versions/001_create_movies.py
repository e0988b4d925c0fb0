"""Create movies table.

Revision ID: 001_create_movies
Revises: None
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_movies"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "movies",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("year", sa.Integer, nullable=True),
        sa.UniqueConstraint("title", name="uq_movies_title"),
    )


def downgrade() -> None:
    op.drop_table("movies")
