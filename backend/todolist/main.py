"""ToDo List API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global catch-all handler maps unexpected exceptions → generic 500 JSON
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event
    - create_app() factory plus module-level app for `uvicorn todolist.main:app`
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todolist.api.error_handlers import register_error_handlers
from todolist.api.routes import health, todo_lists
from todolist.config import Settings, get_settings
from todolist.infrastructure.database import init_db
from todolist.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    handler = setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.create_schema_on_startup:
        await manager.create_schema()
    logger.info("ToDo list API started")
    yield
    logger.info("ToDo list API shutting down")
    await manager.dispose()
    logging.root.removeHandler(handler)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="ToDo List API", version=health.SERVICE_VERSION, lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(todo_lists.router)
    return app


app = create_app()
