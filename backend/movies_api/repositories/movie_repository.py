"""Movie Repository — parameterized statements over the `movies` table.

Invariants:
    - get() always reloads from the store (populate_existing), never a stale identity-map row
    - insert() with an explicit id keeps the PostgreSQL id sequence ahead of MAX(id)
    - update()/delete() return the affected row count

Design Decisions:
    - insert() goes through add()+flush(): the generated id is read back the same
      way on every backend, MySQL included
    - update()/delete() as bulk statements: rowcount comes straight from the driver
"""

import logging
from typing import Any, Sequence

from sqlalchemy import delete, func, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from movies_api.core.domain_types import MovieId
from movies_api.models.movie import Movie

logger = logging.getLogger(__name__)

_SYNC_PG_SEQUENCE = text(
    "SELECT setval(pg_get_serial_sequence('movies', 'id'), :max_id)"
)


class SqlMovieRepository:
    """MovieRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> Sequence[Movie]:
        result = await self.db.execute(select(Movie).order_by(Movie.id))
        return result.scalars().all()

    async def get(self, movie_id: MovieId) -> Movie | None:
        result = await self.db.execute(
            select(Movie)
            .where(Movie.id == movie_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def exists(self, movie_id: MovieId) -> bool:
        result = await self.db.execute(
            select(Movie.id).where(Movie.id == movie_id),
        )
        return result.scalar_one_or_none() is not None

    async def title_taken(self, title: str, exclude_id: MovieId) -> bool:
        result = await self.db.execute(
            select(Movie.id)
            .where(Movie.title == title, Movie.id != exclude_id)
            .limit(1),
        )
        return result.scalar_one_or_none() is not None

    async def insert(
        self, title: str, year: int | None, movie_id: MovieId | None = None,
    ) -> MovieId:
        movie = Movie(title=title, year=year)
        if movie_id is not None:
            movie.id = movie_id
        self.db.add(movie)
        await self.db.flush()
        if movie_id is not None:
            await self._sync_id_sequence()
        return MovieId(movie.id)

    async def update(self, movie_id: MovieId, fields: dict[str, Any]) -> int:
        result = await self.db.execute(
            update(Movie).where(Movie.id == movie_id).values(**fields),
        )
        return result.rowcount

    async def delete(self, movie_id: MovieId) -> int:
        result = await self.db.execute(
            delete(Movie).where(Movie.id == movie_id),
        )
        return result.rowcount

    async def commit(self) -> None:
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()

    async def _sync_id_sequence(self) -> None:
        """Explicit ids bypass SERIAL; move the sequence past them on PostgreSQL."""
        if self.db.get_bind().dialect.name != "postgresql":
            return
        max_id = (await self.db.execute(select(func.max(Movie.id)))).scalar_one()
        await self.db.execute(_SYNC_PG_SEQUENCE, {"max_id": max_id})
        logger.debug(f"movies id sequence moved to {max_id}")
