"""Tests for ledger creation, read-state transitions and preferences."""

from __future__ import annotations

import pytest

from app.application.use_cases.notification_preferences import (
    get_notification_preferences,
    update_notification_preferences,
)
from app.application.use_cases.notifications import (
    create_notification,
    delete_read_notifications,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    notify,
    notify_many,
)
from app.domain.entities import NotificationPreferences, StructuredPayload, TextPayload
from app.domain.exceptions import (
    NotificationNotFoundError,
    PreferencesValidationError,
    TransientStorageError,
)
from app.infrastructure.repositories import NotificationRepository


def _all(session, recipient_id):
    return list_notifications(session, recipient_id, limit=100).records


def test_create_is_delivered_by_default(db_session) -> None:
    notification = create_notification(
        db_session,
        recipient_id="user-1",
        notification_type="group-invite",
        data={"groupName": "Swifties", "groupId": "g1"},
        link="/groups/g1",
    )

    assert notification is not None
    assert notification.id is not None
    assert notification.read is False
    assert notification.created_at is not None
    assert notification.data == StructuredPayload({"groupName": "Swifties", "groupId": "g1"})
    assert notification.link == "/groups/g1"


def test_create_keeps_text_payloads(db_session) -> None:
    notification = create_notification(
        db_session,
        recipient_id="user-1",
        notification_type="admin-warning",
        data="Please keep it civil.",
    )

    assert notification is not None
    stored = _all(db_session, "user-1")[0]
    assert stored.data == TextPayload("Please keep it civil.")


def test_disabled_type_creates_nothing(db_session) -> None:
    update_notification_preferences(db_session, "user-1", {"event-update": False})

    result = create_notification(
        db_session,
        recipient_id="user-1",
        notification_type="event-update",
        data={"eventTitle": "Tour"},
    )

    assert result is None
    assert _all(db_session, "user-1") == []


def test_disabling_a_type_keeps_existing_records(db_session, seed_notifications) -> None:
    seed_notifications("user-1", 3, notification_type="event-update")

    update_notification_preferences(db_session, "user-1", {"event-update": False})
    create_notification(db_session, recipient_id="user-1", notification_type="event-update")
    allowed = create_notification(
        db_session, recipient_id="user-1", notification_type="group-invite"
    )

    records = _all(db_session, "user-1")
    assert len(records) == 4
    assert allowed is not None
    assert records[0].id == allowed.id


def test_mark_read_is_idempotent(db_session, seed_notifications) -> None:
    (notification,) = seed_notifications("user-1", 1)

    first = mark_notification_read(db_session, "user-1", notification.id)
    second = mark_notification_read(db_session, "user-1", notification.id)

    assert first.read is True
    assert second.read is True
    assert second.id == first.id
    assert _all(db_session, "user-1")[0].read is True


def test_mark_read_hides_other_recipients_records(db_session, seed_notifications) -> None:
    (notification,) = seed_notifications("owner", 1)

    with pytest.raises(NotificationNotFoundError):
        mark_notification_read(db_session, "intruder", notification.id)
    with pytest.raises(NotificationNotFoundError):
        mark_notification_read(db_session, "owner", notification.id + 100)

    assert _all(db_session, "owner")[0].read is False


def test_mark_all_read_returns_transitioned_count(db_session, seed_notifications) -> None:
    seed_notifications("user-1", 3)
    seed_notifications("user-1", 2, read=True)
    seed_notifications("user-2", 4)

    assert mark_all_notifications_read(db_session, "user-1") == 3
    assert mark_all_notifications_read(db_session, "user-1") == 0

    assert all(record.read for record in _all(db_session, "user-1"))
    assert not any(record.read for record in _all(db_session, "user-2"))


def test_delete_read_keeps_unread_records(db_session, seed_notifications) -> None:
    unread = seed_notifications("user-1", 2)
    seed_notifications("user-1", 3, read=True)
    other = seed_notifications("user-2", 2, read=True)

    assert delete_read_notifications(db_session, "user-1") == 3

    remaining = _all(db_session, "user-1")
    assert {record.id for record in remaining} == {record.id for record in unread}
    assert not any(record.read for record in remaining)
    assert len(_all(db_session, "user-2")) == len(other)


def test_delete_read_with_nothing_read(db_session, seed_notifications) -> None:
    seed_notifications("user-1", 2)

    assert delete_read_notifications(db_session, "user-1") == 0
    assert len(_all(db_session, "user-1")) == 2


def test_preferences_default_to_all_enabled(db_session) -> None:
    preferences = get_notification_preferences(db_session, "nobody-yet")

    assert preferences.settings == {}
    assert preferences.allows("event-update")
    assert preferences.allows("something-new")


def test_preferences_merge_per_type(db_session) -> None:
    update_notification_preferences(
        db_session, "user-1", {"event-update": False, "group-invite": False}
    )
    merged = update_notification_preferences(db_session, "user-1", {"group-invite": True})

    assert merged.settings == {"event-update": False, "group-invite": True}
    assert get_notification_preferences(db_session, "user-1").settings == merged.settings


def test_preferences_reject_non_boolean_values(db_session) -> None:
    with pytest.raises(PreferencesValidationError):
        update_notification_preferences(db_session, "user-1", {"event-update": "no"})
    with pytest.raises(PreferencesValidationError):
        update_notification_preferences(db_session, "user-1", {"  ": True})

    assert get_notification_preferences(db_session, "user-1").settings == {}


def test_notify_swallows_storage_failures(db_session, monkeypatch) -> None:
    def _unavailable(self, notification):
        raise TransientStorageError("database is down")

    monkeypatch.setattr(NotificationRepository, "create", _unavailable)

    assert notify(db_session, "user-1", "event-update", data={"eventTitle": "Tour"}) is None


def test_notify_ignores_missing_recipient_or_type(db_session) -> None:
    assert notify(db_session, None, "event-update") is None
    assert notify(db_session, "user-1", "") is None
    assert _all(db_session, "user-1") == []


def test_notify_many_fans_out_once_per_recipient(db_session) -> None:
    update_notification_preferences(db_session, "muted", {"group-announcement": False})

    created = notify_many(
        db_session,
        ["a", "b", "a", None, "muted"],
        "group-announcement",
        data={"groupName": "Swifties", "message": "Meetup moved"},
    )

    assert sorted(n.recipient_id for n in created) == ["a", "b"]
    assert len(_all(db_session, "a")) == 1
    assert _all(db_session, "muted") == []


def test_json_looking_text_is_stored_verbatim(db_session) -> None:
    raw = '{"note": "hi"}'

    created = create_notification(
        db_session, recipient_id="user-1", notification_type="report-status", data=raw
    )

    assert created.data == TextPayload(raw)
    assert _all(db_session, "user-1")[0].data.to_raw() == raw


def test_preferences_merged_overwrites_only_given_types() -> None:
    preferences = NotificationPreferences(
        user_id="user-1", settings={"event-update": False, "welcome": False}
    )

    merged = preferences.merged({"welcome": True})

    assert merged.settings == {"event-update": False, "welcome": True}
    assert preferences.settings == {"event-update": False, "welcome": False}
