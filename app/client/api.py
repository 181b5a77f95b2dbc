"""Async HTTP client for the notification endpoints."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from .models import ClientNotification

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class NotificationsClientError(Exception):
    """A notification request failed (transport error or non-2xx response)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotificationsUnauthorized(NotificationsClientError):
    """The server did not accept the bearer token."""


class NotificationsNotFound(NotificationsClientError):
    """The record does not exist for the signed-in user."""


@dataclass
class RemotePage:
    records: list[ClientNotification] = field(default_factory=list)
    next_cursor: str | None = None
    next_token: str | None = None
    has_more: bool = False


class NotificationsApiClient:
    """Thin wrapper over ``httpx.AsyncClient`` speaking the ``/api`` contract."""

    def __init__(self, http: httpx.AsyncClient, *, token: str | None = None) -> None:
        self._http = http
        self.token = token

    @classmethod
    def from_base_url(
        cls, base_url: str, *, token: str | None = None, timeout: float = DEFAULT_TIMEOUT
    ) -> "NotificationsApiClient":
        return cls(httpx.AsyncClient(base_url=base_url, timeout=timeout), token=token)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def list_notifications(
        self,
        *,
        limit: int | None = None,
        before: str | None = None,
        cursor: str | None = None,
    ) -> RemotePage:
        params: dict[str, Any] = {}
        if limit is not None:
            params["limit"] = limit
        if cursor:
            params["cursor"] = cursor
        elif before:
            params["before"] = before
        body = await self._request("GET", "/api/notifications", params=params)
        records = [ClientNotification.from_json(raw) for raw in body.get("notifications") or []]
        return RemotePage(
            records=records,
            next_cursor=body.get("next_cursor"),
            next_token=body.get("next_token"),
            has_more=bool(body.get("has_more")),
        )

    async def count(self) -> tuple[int, int]:
        body = await self._request("GET", "/api/notifications/count")
        return int(body.get("total", 0)), int(body.get("unread", 0))

    async def mark_read(self, notification_id: int) -> ClientNotification:
        body = await self._request("PATCH", f"/api/notifications/{notification_id}/read")
        try:
            return ClientNotification.from_json(body)
        except (KeyError, TypeError, ValueError) as exc:
            raise NotificationsClientError(
                f"Unexpected body when marking notification {notification_id} read"
            ) from exc

    async def mark_all_read(self) -> int:
        body = await self._request("POST", "/api/notifications/mark-all-read")
        return int(body.get("updated", 0))

    async def delete_read(self) -> int:
        body = await self._request("DELETE", "/api/notifications/read")
        return int(body.get("deleted", 0))

    async def get_preferences(self) -> dict[str, bool]:
        body = await self._request("GET", "/api/notification-preferences")
        return dict(body.get("settings") or {})

    async def update_preferences(self, partial: Mapping[str, bool]) -> dict[str, bool]:
        body = await self._request(
            "PATCH", "/api/notification-preferences", json=dict(partial)
        )
        return dict(body.get("settings") or {})

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        headers = dict(kwargs.pop("headers", None) or {})
        if self.token and "Authorization" not in headers:
            headers["Authorization"] = f"Bearer {self.token}"

        try:
            response = await self._http.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            raise NotificationsClientError(f"{method} {path} failed: {exc}") from exc

        if response.status_code in (401, 403):
            raise NotificationsUnauthorized(
                "Sign in required", status_code=response.status_code
            )
        if response.status_code == 404:
            raise NotificationsNotFound("Notification not found", status_code=404)
        if response.is_error:
            raise NotificationsClientError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}


__all__ = [
    "NotificationsApiClient",
    "NotificationsClientError",
    "NotificationsNotFound",
    "NotificationsUnauthorized",
    "RemotePage",
]
