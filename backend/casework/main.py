"""Casework API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CaseworkError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Storage initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - storage_backend="memory" puts the stores on app.state; routes are unchanged
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from casework.api.dependencies import use_memory_storage
from casework.api.error_handlers import register_error_handlers
from casework.api.routes import cases, health, root, tasks
from casework.config import get_settings
import casework.infrastructure.database as database
from casework.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.storage_backend == "memory":
        use_memory_storage(app)
    else:
        manager = database.init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_auto_create:
            await manager.create_schema()
    logger.info(
        f"Casework API started ({settings.storage_backend} storage)",
        extra={"operation": "startup"},
    )
    yield
    if database.db_manager is not None:
        await database.db_manager.dispose()
    logger.info("Casework API shutting down", extra={"operation": "shutdown"})


settings = get_settings()
app = FastAPI(
    title=settings.app_name, version=settings.app_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root.router)
app.include_router(health.router)
app.include_router(cases.router)
app.include_router(tasks.router)

register_error_handlers(app)
