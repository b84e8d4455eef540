"""Projects API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to a JSON envelope (api/error_handlers.py)
    - CORS configured from settings (not hardcoded)
    - DatabaseSessionManager built on startup, kept on app.state, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Startup ping aborts the process when the store is unreachable
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api import __version__
from todo_api.api.error_handlers import register_error_handlers
from todo_api.api.routes import projects
from todo_api.config import get_settings
from todo_api.infrastructure.database import DatabaseSessionManager
from todo_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_check_on_startup and not await db_manager.health_check():
        await db_manager.close()
        raise RuntimeError("Database unreachable at startup")
    app.state.db_manager = db_manager
    logger.info("Projects API started")
    yield
    logger.info("Projects API shutting down")
    await db_manager.close()
    app.state.db_manager = None


app = FastAPI(
    title="Projects API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(projects.router)

register_error_handlers(app)
