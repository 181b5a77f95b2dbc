"""Transient notification overlay (dismiss-to-clear)."""

from __future__ import annotations

import asyncio
import logging

from .api import NotificationsApiClient, NotificationsClientError
from .cache import NotificationCache
from .models import ClientNotification

logger = logging.getLogger(__name__)


class NotificationOverlay(NotificationCache):
    """Bell overlay that compacts read notifications when it closes.

    Closing is a destructive step: read records are deleted server-side and
    the list is refetched. Only records already read through an explicit
    action (per item or "mark all") are removed; closing never marks
    anything read by itself.
    """

    def __init__(self, api: NotificationsApiClient, *, page_size: int | None = None) -> None:
        super().__init__(api, page_size=page_size)
        self.is_open = False
        self.loading = False
        self._generation = 0
        self._load_task: asyncio.Task[list[ClientNotification]] | None = None

    async def open(self) -> None:
        if self.is_open:
            return
        self.is_open = True
        self._generation += 1
        generation = self._generation
        self.loading = True

        task = asyncio.get_running_loop().create_task(self._fetch_first_page())
        self._load_task = task
        await asyncio.wait({task})

        if task.cancelled() or generation != self._generation:
            logger.debug("Discarding overlay page that resolved after close")
            return
        self.items = task.result()
        self.loading = False

    async def close(self) -> None:
        """Delete read notifications, then refetch; also used for outside clicks."""

        if not self.is_open:
            return
        self.is_open = False
        self.loading = False
        self._generation += 1
        if self._load_task is not None and not self._load_task.done():
            self._load_task.cancel()
        self._load_task = None

        # Read marks still in flight must land before the compaction runs.
        await self.drain()
        try:
            await self.api.delete_read()
        except NotificationsClientError as exc:
            logger.warning("Could not delete read notifications on close: %s", exc)

        generation = self._generation
        records = await self._fetch_first_page()
        if generation == self._generation:
            self.items = records

    async def clear_read(self) -> None:
        """Explicit "clear read" action while the overlay stays open."""

        try:
            await self.api.delete_read()
        except NotificationsClientError as exc:
            logger.warning("Could not clear read notifications: %s", exc)
            return
        self.items = [item for item in self.items if not item.read]

    async def _fetch_first_page(self) -> list[ClientNotification]:
        try:
            page = await self.api.list_notifications(limit=self.page_size)
        except NotificationsClientError as exc:
            logger.warning("Could not load notifications for the overlay: %s", exc)
            return []
        return page.records


__all__ = ["NotificationOverlay"]
