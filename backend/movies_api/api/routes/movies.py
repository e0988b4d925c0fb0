"""Movies Routes — CRUD endpoints for the /movies collection.

Invariants:
    - Path ids are parsed by valid_movie_id before the body is read or the store is touched
    - Routes hold no business logic: they translate HTTP <-> MovieService calls
    - PATCH takes its body raw; the service validates it after the existence check
    - PUT answers 201 when it inserted, 200 when it replaced
    - DELETE answers 204 with an empty body

Design Decisions:
    - movie_id declared as str and parsed by a dependency: an int path type would
      surface FastAPI's validation body instead of {"message": "Invalid ID"}
    - MovieService built per request from the request's AsyncSession
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from movies_api.core.domain_types import MovieId
from movies_api.core.movie_rules import parse_movie_id
from movies_api.infrastructure.database import get_db
from movies_api.repositories.movie_repository import SqlMovieRepository
from movies_api.schemas.movie import MovieResponse, MovieWrite
from movies_api.services.movie_service import MovieService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/movies", tags=["movies"])


def valid_movie_id(movie_id: str) -> MovieId:
    """Path dependency — rejects non-integer ids with 400."""
    return parse_movie_id(movie_id)


def get_movie_service(db: AsyncSession = Depends(get_db)) -> MovieService:
    return MovieService(SqlMovieRepository(db))


@router.get("", response_model=list[MovieResponse])
async def list_movies(service: MovieService = Depends(get_movie_service)):
    """List every movie."""
    return await service.list_movies()


@router.get("/{movie_id}", response_model=MovieResponse)
async def get_movie(
    movie_id: MovieId = Depends(valid_movie_id),
    service: MovieService = Depends(get_movie_service),
):
    return await service.get_movie(movie_id)


@router.post(
    "", response_model=MovieResponse, status_code=status.HTTP_201_CREATED,
)
async def create_movie(
    body: MovieWrite, service: MovieService = Depends(get_movie_service),
):
    """Create a movie with a store-generated id."""
    return await service.create_movie(body)


@router.put("/{movie_id}", response_model=MovieResponse)
async def replace_movie(
    body: MovieWrite,
    response: Response,
    movie_id: MovieId = Depends(valid_movie_id),
    service: MovieService = Depends(get_movie_service),
):
    """Replace the movie at movie_id, or create it with exactly that id."""
    movie, created = await service.replace_movie(movie_id, body)
    if created:
        response.status_code = status.HTTP_201_CREATED
    return movie


@router.patch("/{movie_id}", response_model=MovieResponse)
async def patch_movie(
    payload: Any = Body(None),
    movie_id: MovieId = Depends(valid_movie_id),
    service: MovieService = Depends(get_movie_service),
):
    """Update only the supplied title/year."""
    return await service.patch_movie(movie_id, payload)


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movie(
    movie_id: MovieId = Depends(valid_movie_id),
    service: MovieService = Depends(get_movie_service),
):
    await service.delete_movie(movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
