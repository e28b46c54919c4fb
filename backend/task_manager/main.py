"""Task Manager API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Settings built once and passed into create_app(); the lifespan and
      handlers read it from app.state, never from module globals
    - Global error handlers map TaskManagerError → plain-text responses
    - Database unreachable at startup is fatal (lifespan raises)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Tables created with metadata.create_all when enabled; there is no
      migration tooling
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from task_manager.api.error_handlers import register_error_handlers
from task_manager.api.routes import health, index, tasks
from task_manager.config import Settings, get_settings
from task_manager.infrastructure.database import DatabaseSessionManager
from task_manager.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db_manager = DatabaseSessionManager(
            settings.get_database_url(),
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_create_tables:
            await db_manager.create_tables()
        app.state.db_manager = db_manager
        logger.info("Task Manager API started")
        yield
        logger.info("Task Manager API shutting down")
        await db_manager.dispose()

    return lifespan


def create_app(settings: Settings) -> FastAPI:
    """Build the FastAPI app for the given settings."""
    app = FastAPI(
        title="Task Manager API", version="1.0.0",
        lifespan=_build_lifespan(settings),
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(index.router)
    app.include_router(health.router)
    app.include_router(tasks.router, prefix=settings.tasks_path)

    register_error_handlers(app)
    return app


app = create_app(get_settings())


def run() -> None:
    """Console entry point: serve the module-level app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "task_manager.main:app", host=settings.host, port=settings.port,
    )
