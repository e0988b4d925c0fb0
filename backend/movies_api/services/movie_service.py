"""Movie Service — the six collection operations over the movies table.

Invariants:
    - Path ids arrive already parsed (MovieId); ids outside the INTEGER range are
      answered (404, or 400 for PUT) without a store round-trip
    - POST/PUT bodies arrive schema-validated; PATCH bodies are validated only after
      the existence check, so a missing row is 404 whatever the body holds
    - Title uniqueness is checked against the store right before every write that sets a title
    - Any SQLAlchemyError becomes StoreError with the operation's 1001-1006 code,
      after the session is rolled back
    - Client errors (validation, not found) are raised untouched — never wrapped as store errors
    - Each operation ends in exactly one commit (reads commit nothing)

Design Decisions:
    - Service talks to a MovieRepository protocol: tests can drive it with a fake
    - Check-then-write runs inside one session/transaction at the store's default
      isolation level; the UNIQUE index on title is the final guard against races
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Sequence

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from movies_api.core.domain_types import (
    MovieId, MovieOperation, OPERATION_ERROR_CODES,
)
from movies_api.core.errors import (
    InvalidMovieIdError, MovieNotFoundError, MovieValidationError,
    NoUpdatableFieldsError,
    RecordUnavailableError, StoreError,
)
from movies_api.core.movie_rules import (
    NO_EXCLUDED_ID, duplicate_title_error, field_errors_from_pydantic,
    is_storable_id, select_patch_fields,
)
from movies_api.core.repository_protocols import MovieLike, MovieRepository
from movies_api.schemas.movie import MoviePatch, MovieWrite

logger = logging.getLogger(__name__)


class MovieService:
    """Validates and executes movie collection operations."""

    def __init__(self, repo: MovieRepository):
        self.repo = repo

    async def list_movies(self) -> Sequence[MovieLike]:
        async with self._store_errors(MovieOperation.LIST):
            return await self.repo.list_all()

    async def get_movie(self, movie_id: MovieId) -> MovieLike:
        if not is_storable_id(movie_id):
            raise MovieNotFoundError(movie_id)
        async with self._store_errors(MovieOperation.GET, movie_id):
            movie = await self.repo.get(movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        return movie

    async def create_movie(self, body: MovieWrite) -> MovieLike:
        async with self._store_errors(MovieOperation.CREATE):
            await self._ensure_title_free(body.title, NO_EXCLUDED_ID)
            new_id = await self.repo.insert(body.title, body.year)
            await self.repo.commit()
            movie = await self.repo.get(new_id)
        if movie is None:
            raise RecordUnavailableError(
                "Movie created, but the record could not be retrieved.", new_id,
            )
        logger.info(
            f"Movie {new_id} created",
            extra={"movie_id": new_id, "operation": MovieOperation.CREATE.value},
        )
        return movie

    async def replace_movie(
        self, movie_id: MovieId, body: MovieWrite,
    ) -> tuple[MovieLike, bool]:
        """Upsert by id. Returns (movie, created)."""
        if not is_storable_id(movie_id):
            raise InvalidMovieIdError(str(movie_id))
        async with self._store_errors(MovieOperation.REPLACE, movie_id):
            await self._ensure_title_free(body.title, movie_id)
            if await self.repo.exists(movie_id):
                await self.repo.update(
                    movie_id, {"title": body.title, "year": body.year},
                )
                created = False
            else:
                await self.repo.insert(body.title, body.year, movie_id)
                created = True
            await self.repo.commit()
            movie = await self.repo.get(movie_id)
        if movie is None:
            raise RecordUnavailableError(
                "Movie saved, but the record could not be retrieved.", movie_id,
            )
        logger.info(
            f"Movie {movie_id} {'created' if created else 'replaced'}",
            extra={"movie_id": movie_id, "operation": MovieOperation.REPLACE.value},
        )
        return movie, created

    async def patch_movie(
        self, movie_id: MovieId, payload: Any,
    ) -> MovieLike:
        """Partial update. payload is the raw JSON body, validated once the row is known to exist."""
        if not is_storable_id(movie_id):
            raise MovieNotFoundError(movie_id)
        async with self._store_errors(MovieOperation.PATCH, movie_id):
            if not await self.repo.exists(movie_id):
                raise MovieNotFoundError(movie_id)
            body = _validate_patch(payload)
            fields = select_patch_fields(body.title, body.year)
            if not fields:
                raise NoUpdatableFieldsError()
            if "title" in fields:
                await self._ensure_title_free(fields["title"], movie_id)
            await self.repo.update(movie_id, fields)
            await self.repo.commit()
            movie = await self.repo.get(movie_id)
        if movie is None:
            raise MovieNotFoundError(
                movie_id, "Could not retrieve the updated movie",
            )
        logger.info(
            f"Movie {movie_id} patched: {sorted(fields)}",
            extra={"movie_id": movie_id, "operation": MovieOperation.PATCH.value},
        )
        return movie

    async def delete_movie(self, movie_id: MovieId) -> None:
        if not is_storable_id(movie_id):
            raise MovieNotFoundError(movie_id)
        async with self._store_errors(MovieOperation.DELETE, movie_id):
            if not await self.repo.exists(movie_id):
                raise MovieNotFoundError(movie_id)
            deleted = await self.repo.delete(movie_id)
            await self.repo.commit()
        if deleted == 0:
            raise RecordUnavailableError("Could not delete movie", movie_id)
        logger.info(
            f"Movie {movie_id} deleted",
            extra={"movie_id": movie_id, "operation": MovieOperation.DELETE.value},
        )

    async def _ensure_title_free(self, title: str, exclude_id: MovieId) -> None:
        if await self.repo.title_taken(title, exclude_id):
            raise MovieValidationError([duplicate_title_error(title)])

    @asynccontextmanager
    async def _store_errors(
        self, operation: MovieOperation, movie_id: MovieId | None = None,
    ) -> AsyncIterator[None]:
        """Map store failures to StoreError carrying the operation's code."""
        try:
            yield
        except SQLAlchemyError as e:
            code = OPERATION_ERROR_CODES[operation]
            cause = getattr(e, "orig", None) or e
            logger.error(
                f"Store error during {operation.value}: {cause}",
                extra={
                    "movie_id": movie_id,
                    "operation": operation.value,
                    "error_code": int(code),
                },
            )
            try:
                await self.repo.rollback()
            except SQLAlchemyError as rollback_error:
                logger.warning(f"Rollback after store error failed: {rollback_error}")
            raise StoreError(code, str(cause), operation) from e


def _validate_patch(payload: Any) -> MoviePatch:
    if payload is None:
        return MoviePatch()
    try:
        return MoviePatch.model_validate(payload)
    except ValidationError as e:
        raise MovieValidationError(field_errors_from_pydantic(e.errors())) from e
