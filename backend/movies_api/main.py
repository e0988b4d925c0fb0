"""Movies API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MoviesApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database pool created and verified on startup; an unreachable store aborts startup
    - Pool disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - No degraded mode: a failed test connection raises out of the lifespan and
      uvicorn exits with a non-zero status
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movies_api.api.error_handlers import register_error_handlers
from movies_api.api.routes import health, movies, root
from movies_api.config import get_settings
from movies_api.infrastructure.database import close_db, init_db
from movies_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """Store unreachable at startup."""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.sqlalchemy_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
    )
    try:
        await manager.verify_connection()
    except Exception as e:
        logger.critical(
            f"Could not connect to the database, check credentials and server status: {e}",
        )
        await close_db()
        raise StartupError("database unreachable") from e
    logger.info("Database pool created and verified")
    logger.info(f"Movies API listening on port {settings.port}")
    yield
    await close_db()
    logger.info("Movies API shutting down")


app = FastAPI(title="Movies API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(root.router)
app.include_router(health.router)
app.include_router(movies.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    current = get_settings()
    uvicorn.run(
        "movies_api.main:app",
        host=current.host,
        port=current.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
