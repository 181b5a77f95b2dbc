from fastapi import FastAPI

from .notification_preferences import router as notification_preferences_router
from .notifications import router as notifications_router

API_PREFIX = "/api"


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(notifications_router, prefix=API_PREFIX)
    app.include_router(notification_preferences_router, prefix=API_PREFIX)
