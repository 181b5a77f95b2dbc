"""Owner-scoped local persistence for the client notification cache."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .models import ClientNotification

logger = logging.getLogger(__name__)

ANONYMOUS_SCOPE = "anonymous"
KEY_PREFIX = "notifications"


def scope_key(scope: str | None) -> str:
    """Return the storage key for ``scope`` (a recipient id or ``anonymous``)."""

    return f"{KEY_PREFIX}.{scope or ANONYMOUS_SCOPE}"


class LocalNotificationStore:
    """Small JSON key/value file with explicit ``load`` and ``save``.

    Read or write problems never reach the caller: an unreadable file loads
    as an empty list and a failed write is logged.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def load(self, scope: str | None) -> list[ClientNotification]:
        entries = self._read_all().get(scope_key(scope))
        if not isinstance(entries, list):
            return []
        records: list[ClientNotification] = []
        for raw in entries:
            try:
                records.append(ClientNotification.from_json(raw))
            except (KeyError, TypeError, ValueError):
                logger.debug("Skipping malformed cached notification in %s", self.path)
        return records

    def save(self, scope: str | None, records: Iterable[ClientNotification]) -> None:
        data = self._read_all()
        data[scope_key(scope)] = [record.to_json() for record in records]
        self._write_all(data)

    def clear(self, scope: str | None) -> None:
        data = self._read_all()
        if data.pop(scope_key(scope), None) is not None:
            self._write_all(data)

    def _read_all(self) -> dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError:
            logger.warning("Could not read notification cache %s", self.path)
            return {}
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Notification cache %s is corrupted; ignoring it", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(data, handle)
            os.replace(tmp_name, self.path)
        except OSError:
            logger.warning("Could not write notification cache %s", self.path)


__all__ = ["ANONYMOUS_SCOPE", "LocalNotificationStore", "scope_key"]
