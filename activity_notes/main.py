"""Activity Notes API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ActivityNotesError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from activity_notes.api.error_handlers import register_error_handlers
from activity_notes.api.routes import dashboard, health, notes, preferences
from activity_notes.config import get_settings
from activity_notes.infrastructure import database
from activity_notes.infrastructure.observability import setup_logging

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
    logger.info("Activity Notes API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Activity Notes API shutting down")


app = FastAPI(
    title="Activity Notes API", version="1.0.0", lifespan=lifespan,
)

# CORS origins from settings
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes, registered explicitly
app.include_router(health.router)
app.include_router(notes.router)
app.include_router(preferences.router)
app.include_router(dashboard.router)

register_error_handlers(app)
