"""Persistent, cursor-paginated notification feed."""

from __future__ import annotations

import logging

from .api import NotificationsApiClient, NotificationsClientError
from .cache import NotificationCache
from .local_store import LocalNotificationStore

logger = logging.getLogger(__name__)

FEED_PAGE_SIZE = 25


class NotificationFeed(NotificationCache):
    """Notification center page.

    Only explicit read marks (per item or "mark all") mutate the feed; it
    never deletes. ``load_more`` appends to the items already shown.
    """

    def __init__(
        self,
        api: NotificationsApiClient,
        *,
        page_size: int = FEED_PAGE_SIZE,
        store: LocalNotificationStore | None = None,
        scope: str | None = None,
    ) -> None:
        super().__init__(api, page_size=page_size)
        self.store = store
        self.scope = scope
        self.loading = False
        self.has_more = True
        self._next_token: str | None = None
        self._next_cursor: str | None = None

    def restore(self) -> None:
        """Show the last saved snapshot until the first page arrives."""

        if self.store is not None:
            self.items = self.store.load(self.scope)

    async def load(self) -> None:
        """Fetch the first page, replacing whatever is shown."""

        await self._load(append=False)

    async def load_more(self) -> None:
        if not self.has_more or (self._next_token is None and self._next_cursor is None):
            return
        await self._load(append=True)

    async def _load(self, *, append: bool) -> None:
        if self.loading:
            return
        self.loading = True
        try:
            page = await self.api.list_notifications(
                limit=self.page_size,
                cursor=self._next_token if append else None,
                before=self._next_cursor if append else None,
            )
        except NotificationsClientError as exc:
            logger.warning("Could not load notifications for the feed: %s", exc)
            if not append:
                self.items = []
                self.has_more = False
            return
        finally:
            self.loading = False

        if append:
            known = {item.id for item in self.items}
            self.items = self.items + [record for record in page.records if record.id not in known]
        else:
            self.items = list(page.records)
        self.has_more = page.has_more
        if page.records:
            self._next_token = page.next_token
            self._next_cursor = page.next_cursor
        self._on_local_change()

    def _on_local_change(self) -> None:
        if self.store is not None:
            self.store.save(self.scope, self.items)


__all__ = ["FEED_PAGE_SIZE", "NotificationFeed"]
