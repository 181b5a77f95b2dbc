from __future__ import annotations

import json

from app.client import ClientNotification, LocalNotificationStore
from app.client.local_store import scope_key


def _record(notification_id: int, read: bool = False) -> ClientNotification:
    return ClientNotification(
        id=notification_id,
        type="event-update",
        created_at="2024-03-01T12:00:00+00:00",
        read=read,
        data={"eventTitle": "Tour"},
    )


def test_scope_key_falls_back_to_anonymous() -> None:
    assert scope_key("user-1") == "notifications.user-1"
    assert scope_key(None) == "notifications.anonymous"
    assert scope_key("") == "notifications.anonymous"


def test_save_and_load_are_scoped(tmp_path) -> None:
    store = LocalNotificationStore(tmp_path / "nested" / "cache.json")

    store.save("user-1", [_record(1), _record(2, read=True)])
    store.save(None, [_record(3)])

    assert [r.id for r in store.load("user-1")] == [1, 2]
    assert store.load("user-1")[1].read is True
    assert [r.id for r in store.load(None)] == [3]
    assert store.load("user-2") == []


def test_clear_removes_only_one_scope(tmp_path) -> None:
    store = LocalNotificationStore(tmp_path / "cache.json")
    store.save("user-1", [_record(1)])
    store.save("user-2", [_record(2)])

    store.clear("user-1")

    assert store.load("user-1") == []
    assert [r.id for r in store.load("user-2")] == [2]


def test_corrupted_file_loads_as_empty(tmp_path) -> None:
    path = tmp_path / "cache.json"
    path.write_text("{not json", encoding="utf-8")

    store = LocalNotificationStore(path)

    assert store.load("user-1") == []
    store.save("user-1", [_record(1)])
    assert [r.id for r in store.load("user-1")] == [1]


def test_malformed_entries_are_skipped(tmp_path) -> None:
    path = tmp_path / "cache.json"
    path.write_text(
        json.dumps({"notifications.user-1": [{"type": "missing-id"}, _record(4).to_json()]}),
        encoding="utf-8",
    )

    records = LocalNotificationStore(path).load("user-1")

    assert [r.id for r in records] == [4]
