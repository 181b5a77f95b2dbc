import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.config import get_settings
from app.interfaces.api.routes import register_routes
from app.infrastructure.database import initialize_database, engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the notification tables on startup and release the pool on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.getLogger("app").setLevel(level)


def create_app() -> FastAPI:
    """Build the FastAPI application for the notification service."""

    settings = get_settings()
    _configure_logging(settings.log_level)

    app = FastAPI(title="Fanevent Notifications", lifespan=lifespan)

    # Browser clients (overlay and notification center) call the API directly.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
