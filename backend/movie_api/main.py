"""Movies API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MovieApiError -> structured JSON responses
    - Database pool created on startup and disposed on shutdown via lifespan
    - Schema bootstrap failure aborts startup (the process exits)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movie_api.api.error_handlers import register_error_handlers
from movie_api.api.routes import health, movies
from movie_api.config import get_settings
from movie_api.infrastructure.database import close_db, create_schema, init_db
from movie_api.infrastructure.observability import log_requests, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_bootstrap_schema:
        try:
            await create_schema(manager.engine)
        except Exception:
            logger.critical("Schema bootstrap failed", exc_info=True)
            await close_db()
            raise
    logger.info("Movies API started")
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
app.middleware("http")(log_requests)

app.include_router(health.router)
app.include_router(movies.router)

register_error_handlers(app)
