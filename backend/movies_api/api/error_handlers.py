"""Error Handlers — global exception handlers for the Movies API.

Invariants:
    - MoviesApiError → its own to_response() body and http_status
    - RequestValidationError → 400 {"error": [FieldError, ...]} (same shape as duplicate titles)
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (MoviesApiError), validation (Pydantic), catch-all (Exception)
    - 4xx logged at warning, 5xx at error: client mistakes are not incidents
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from movies_api.core.errors import MoviesApiError, MovieValidationError, StoreError
from movies_api.core.movie_rules import field_errors_from_pydantic

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Movies API domain/store error handler."""

    @app.exception_handler(MoviesApiError)
    async def movies_api_error_handler(request: Request, exc: MoviesApiError):
        """Handle all Movies API domain and store errors."""
        extra = {
            "path": request.url.path,
            "status_code": exc.http_status,
            "error_code": int(exc.code) if isinstance(exc, StoreError) else None,
        }
        if exc.http_status >= 500:
            logger.error(f"{type(exc).__name__}: {exc.message}", extra=extra)
        else:
            logger.warning(f"{type(exc).__name__}: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        error = MovieValidationError(field_errors_from_pydantic(exc.errors()))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "An unexpected error occurred"},
        )
