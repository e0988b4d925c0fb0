"""Error Hierarchy — typed, categorized exceptions for all Movies API failure modes.

Invariants:
    - Every error has an http_status, category (ErrorCategory) and severity (ErrorSeverity)
    - Client errors (400/404) are recoverable; store errors (500) are critical
    - to_response() produces the exact JSON body the client receives
    - StoreError attaches the underlying driver message unmodified

Design Decisions:
    - Single hierarchy with MoviesApiError base: one FastAPI handler catches all
    - Three body shapes ({message}, {error: [...]}, {code, message, error_message})
      chosen per subclass via to_response() overrides
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any

from movies_api.core.domain_types import (
    MovieOperation, StoreErrorCode, STORE_ERROR_MESSAGES,
)


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class FieldError:
    """One entry of a validation error list."""
    msg: str
    path: str
    value: Any = None
    type: str = "field"
    location: str = "body"

    def to_dict(self) -> dict:
        return asdict(self)


class MoviesApiError(Exception):
    """Base exception for all Movies API errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"message": self.message}


# ─── Client Errors (400/404) ────────────────────────────────────

class InvalidMovieIdError(MoviesApiError):
    """Path identifier is not an integer."""
    def __init__(self, raw_id: str):
        super().__init__(
            "Invalid ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.raw_id = raw_id


class MovieValidationError(MoviesApiError):
    """Request body failed field validation."""
    def __init__(self, errors: list[FieldError]):
        super().__init__(
            "; ".join(e.msg for e in errors) or "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, 400,
        )
        self.errors = errors

    def to_response(self) -> dict:
        return {"error": [e.to_dict() for e in self.errors]}


class NoUpdatableFieldsError(MoviesApiError):
    """Partial update carried neither a title nor a year."""
    def __init__(self):
        super().__init__(
            "No valid fields to update.", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


class MovieNotFoundError(MoviesApiError):
    """No movie row with the requested id."""
    def __init__(self, movie_id: int, message: str = "Movie not found"):
        super().__init__(
            message, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.movie_id = movie_id


# ─── Store Errors (500) ─────────────────────────────────────────

class RecordUnavailableError(MoviesApiError):
    """A write succeeded but its row could not be read back or removed."""
    def __init__(self, message: str, movie_id: int | None = None):
        super().__init__(
            message, ErrorCategory.DATABASE, ErrorSeverity.ERROR, 500,
        )
        self.movie_id = movie_id


class StoreError(MoviesApiError):
    """Store query or connection failed during a collection operation."""
    def __init__(
        self, code: StoreErrorCode, error_message: str,
        operation: MovieOperation | None = None,
    ):
        super().__init__(
            STORE_ERROR_MESSAGES[code], ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.code = code
        self.error_message = error_message
        self.operation = operation

    def to_response(self) -> dict:
        return {
            "code": int(self.code),
            "message": self.message,
            "error_message": self.error_message,
        }
