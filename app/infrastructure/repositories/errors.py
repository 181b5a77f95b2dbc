"""Translate driver failures into domain storage errors."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import DisconnectionError, InterfaceError, OperationalError
from sqlalchemy.orm import Session

from app.domain.exceptions import TransientStorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_guard(session: Session, operation: str) -> Iterator[None]:
    """Roll back and raise :class:`TransientStorageError` when the DB is unreachable."""

    try:
        yield
    except (OperationalError, InterfaceError, DisconnectionError) as exc:
        session.rollback()
        logger.exception("Storage unavailable during %s", operation)
        raise TransientStorageError(f"Storage unavailable during {operation}") from exc


__all__ = ["storage_guard"]
