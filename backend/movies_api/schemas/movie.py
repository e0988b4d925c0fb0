"""Movie Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - MovieWrite.title: required, 1-255 chars (not stripped — " " is a valid title)
    - title must be a JSON string; numbers are not coerced
    - year: int or null within the INTEGER column range; integral floats and
      numeric strings coerce, booleans are rejected
    - MoviePatch: every field optional, extra keys ignored; validated by the service
      only after the target row is known to exist
    - MovieResponse mirrors the `movies` row exactly (id, title, year)

Design Decisions:
    - Title uniqueness is NOT checked here: it needs the store, so services own it
    - One write schema for POST and PUT: both replace the full record
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from movies_api.core.domain_types import STORE_INT_MAX, STORE_INT_MIN
from movies_api.core.movie_rules import TITLE_MAX_LENGTH


def _reject_bool(v: Any) -> Any:
    if isinstance(v, bool):
        raise ValueError("year must be an integer")
    return v


class MovieWrite(BaseModel):
    """Full movie body — used by create (POST) and replace (PUT)."""
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    year: int | None = Field(None, ge=STORE_INT_MIN, le=STORE_INT_MAX)

    @field_validator("year", mode="before")
    @classmethod
    def year_not_bool(cls, v: Any) -> Any:
        return _reject_bool(v)


class MoviePatch(BaseModel):
    """Partial movie body — any subset of title/year."""
    title: str | None = Field(None, max_length=TITLE_MAX_LENGTH)
    year: int | None = Field(None, ge=STORE_INT_MIN, le=STORE_INT_MAX)

    @field_validator("year", mode="before")
    @classmethod
    def year_not_bool(cls, v: Any) -> Any:
        return _reject_bool(v)


class MovieResponse(BaseModel):
    """Public movie representation."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    year: int | None = None
