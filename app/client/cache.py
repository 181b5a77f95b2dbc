"""Shared in-memory notification cache with optimistic read marks."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import replace

from .api import NotificationsApiClient, NotificationsClientError
from .models import ClientNotification

logger = logging.getLogger(__name__)


class NotificationCache:
    """Client copy of a slice of the ledger.

    Read marks are applied in two phases: the local record flips to read
    right away, then the server call runs as a background task. A failed call
    is logged and the local state stays as it is (no rollback).
    """

    def __init__(self, api: NotificationsApiClient, *, page_size: int | None = None) -> None:
        self.api = api
        self.page_size = page_size
        self.items: list[ClientNotification] = []
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def unread_count(self) -> int:
        return sum(1 for item in self.items if not item.read)

    def get(self, notification_id: int) -> ClientNotification | None:
        for item in self.items:
            if item.id == notification_id:
                return item
        return None

    def mark_read(self, notification_id: int) -> asyncio.Task[None] | None:
        """Flip one record locally and send the mark in the background.

        Returns the background task, or ``None`` when the record is unknown or
        already read locally.
        """

        changed = False
        updated: list[ClientNotification] = []
        for item in self.items:
            if item.id == notification_id and not item.read:
                item = replace(item, read=True)
                changed = True
            updated.append(item)
        if not changed:
            return None
        self.items = updated
        self._on_local_change()
        return self._dispatch(
            lambda: self.api.mark_read(notification_id),
            f"mark notification {notification_id} read",
        )

    def mark_all_read(self) -> asyncio.Task[None]:
        """Flip every cached record locally and send the bulk mark in the background."""

        self.items = [item if item.read else replace(item, read=True) for item in self.items]
        self._on_local_change()
        return self._dispatch(self.api.mark_all_read, "mark all notifications read")

    async def drain(self) -> None:
        """Wait for every in-flight background call to settle."""

        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def _dispatch(
        self, call: Callable[[], Awaitable[object]], description: str
    ) -> asyncio.Task[None]:
        task = asyncio.get_running_loop().create_task(self._run_remote(call, description))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _run_remote(
        self, call: Callable[[], Awaitable[object]], description: str
    ) -> None:
        try:
            await call()
        except NotificationsClientError as exc:
            logger.warning("Could not %s: %s", description, exc)

    def _on_local_change(self) -> None:
        """Hook run after every local mutation."""


__all__ = ["NotificationCache"]
