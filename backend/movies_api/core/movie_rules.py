"""Movie Rules — pure input rules shared by the collection operations.

Invariants:
    - parse_movie_id accepts only an optionally signed run of ASCII digits
    - is_storable_id bounds ids to the INTEGER column; out-of-range ids never reach the driver
    - select_patch_fields drops falsy values (empty title, year 0/None)
    - Pydantic error dicts map to FieldError with body-relative paths
    - No IO, no async — callers own the store round-trips

Design Decisions:
    - Regex over bare int(): int() also accepts "1_000" and surrounding unicode
      whitespace, neither of which is a valid path id here
    - Falsy-value semantics for PATCH are kept on purpose so a client can send
      {"title": "", "year": 2001} and only touch the year
"""

import re
from typing import Any

from movies_api.core.domain_types import MovieId, STORE_INT_MAX, STORE_INT_MIN
from movies_api.core.errors import FieldError, InvalidMovieIdError

_ID_PATTERN = re.compile(r"^[+-]?[0-9]+$")

TITLE_REQUIRED = "Title is required"
TITLE_NOT_STRING = "Title must be a string"
TITLE_MAX_LENGTH = 255
TITLE_TOO_LONG = f"Title must be at most {TITLE_MAX_LENGTH} characters"
TITLE_TAKEN = "Title already exists for another movie"
YEAR_NOT_INTEGER = "Year must be a valid integer"
MALFORMED_BODY = "Request body must be a JSON object"

# Exclusion id for creates: generated ids start at 1, so nothing is excluded.
NO_EXCLUDED_ID = MovieId(0)


def parse_movie_id(raw_id: str) -> MovieId:
    """Parse a path identifier or raise InvalidMovieIdError."""
    candidate = raw_id.strip()
    if not _ID_PATTERN.match(candidate):
        raise InvalidMovieIdError(raw_id)
    return MovieId(int(candidate))


def is_storable_id(movie_id: MovieId) -> bool:
    """Whether the id fits the INTEGER primary key; no row can exist outside it."""
    return STORE_INT_MIN <= movie_id <= STORE_INT_MAX


def select_patch_fields(title: str | None, year: int | None) -> dict[str, Any]:
    """Columns a partial update should write — only truthy values count."""
    fields: dict[str, Any] = {}
    if title:
        fields["title"] = title
    if year:
        fields["year"] = year
    return fields


def duplicate_title_error(title: str) -> FieldError:
    return FieldError(msg=TITLE_TAKEN, path="title", value=title)


def field_errors_from_pydantic(errors: list[dict]) -> list[FieldError]:
    """Convert Pydantic/FastAPI error dicts into FieldError entries."""
    result = []
    for e in errors:
        loc = [str(part) for part in e.get("loc", ())]
        if loc and loc[0] == "body":
            loc = loc[1:]
        err_type = e.get("type", "")
        if err_type == "json_invalid":
            result.append(FieldError(msg=MALFORMED_BODY, path=""))
            continue
        path = ".".join(loc)
        value = None if err_type == "missing" else e.get("input")
        result.append(FieldError(
            msg=_message_for(path, err_type, e.get("msg", "")),
            path=path, value=value,
        ))
    return result


def _message_for(path: str, err_type: str, default: str) -> str:
    if path == "title":
        if err_type in ("missing", "string_too_short"):
            return TITLE_REQUIRED
        if err_type == "string_type":
            return TITLE_NOT_STRING
        if err_type == "string_too_long":
            return TITLE_TOO_LONG
    if path == "year":
        return YEAR_NOT_INTEGER
    if path == "":
        return MALFORMED_BODY
    return default
