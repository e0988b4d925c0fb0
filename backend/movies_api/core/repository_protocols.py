"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All store IO accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake with the same methods
    - Rows returned as MovieLike, not ORM classes, so core stays import-free of SQLAlchemy
"""

from typing import Any, Protocol, Sequence

from movies_api.core.domain_types import MovieId


class MovieLike(Protocol):
    """Structural contract for movie rows handed back by a repository."""
    id: int
    title: str
    year: int | None


class MovieRepository(Protocol):
    """Contract for movie persistence — implemented by shell."""
    async def list_all(self) -> Sequence[MovieLike]: ...
    async def get(self, movie_id: MovieId) -> MovieLike | None: ...
    async def exists(self, movie_id: MovieId) -> bool: ...
    async def title_taken(self, title: str, exclude_id: MovieId) -> bool: ...
    async def insert(
        self, title: str, year: int | None, movie_id: MovieId | None = None,
    ) -> MovieId: ...
    async def update(self, movie_id: MovieId, fields: dict[str, Any]) -> int: ...
    async def delete(self, movie_id: MovieId) -> int: ...
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
