"""Shared fixtures: a throwaway sqlite database and token helpers."""

from __future__ import annotations

import os
import sys
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "fanevent_notifications_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "UTC"

from app.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from app.domain.entities import Notification, payload_from_raw  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from app.infrastructure.repositories import NotificationRepository  # noqa: E402
from app.infrastructure.security import create_recipient_token  # noqa: E402

BASE_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure every test starts from empty tables."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def db_session():
    with SessionLocal() as session:
        yield session


@pytest.fixture
def seed_notifications(db_session):
    """Insert notifications directly, bypassing the preferences gate.

    Records get increasing timestamps one ``step`` apart starting at ``start``.
    """

    def _seed(
        recipient_id: str,
        count: int,
        *,
        start: datetime = BASE_TIME,
        step: timedelta = timedelta(seconds=1),
        read: bool = False,
        notification_type: str = "event-update",
    ) -> list[Notification]:
        repository = NotificationRepository(db_session)
        created = []
        for index in range(count):
            notification = repository.create(
                Notification(
                    id=None,
                    recipient_id=recipient_id,
                    type=notification_type,
                    data=payload_from_raw({"eventTitle": f"Event {index}"}),
                    created_at=start + step * index,
                )
            )
            if read:
                notification = repository.mark_read(notification.id, recipient_id=recipient_id)
            created.append(notification)
        return created

    return _seed


@pytest.fixture
def auth_headers():
    def _headers(recipient_id: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_recipient_token(recipient_id)}"}

    return _headers


@pytest.fixture
def fastapi_app():
    from main import create_app

    return create_app()
