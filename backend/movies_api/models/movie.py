"""Movie ORM — the single `movies` table.

Invariants:
    - id is an auto-generated integer primary key, but may be supplied explicitly (PUT upsert)
    - title is non-nullable and UNIQUE at the store level
    - year is nullable

Design Decisions:
    - UNIQUE constraint backs the application-level title check: a create that
      loses a race fails at insertion instead of duplicating a title
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from movies_api.db.base import Base


class Movie(Base):
    """A movie record."""
    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"Movie(id={self.id!r}, title={self.title!r}, year={self.year!r})"
