"""DevConnect API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DevConnectError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: cleaner shutdown (engine disposed on exit)
    - Three error handler layers: DevConnectError (domain), RequestValidationError
      (Pydantic), Exception (catch-all) - never leaks internal details
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import devconnect.infrastructure.database as database
from devconnect.api.error_handlers import register_error_handlers
from devconnect.infrastructure.observability import setup_logging
from devconnect.config import get_settings
from devconnect.api.routes import health, profile, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("DevConnect API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("DevConnect API shutting down")


app = FastAPI(
    title="DevConnect API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(profile.router)

register_error_handlers(app)
