"""Integration tests for the notification and preference endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient


@pytest.fixture()
def client(fastapi_app):
    with TestClient(fastapi_app) as test_client:
        yield test_client


def test_requests_without_token_are_rejected(client: TestClient) -> None:
    assert client.get("/api/notifications").status_code == 401
    assert client.post("/api/notifications/mark-all-read").status_code == 401
    assert client.get("/api/notification-preferences").status_code == 401

    response = client.get(
        "/api/notifications", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401


def test_list_returns_envelope_and_cursor(client, auth_headers, seed_notifications) -> None:
    created = seed_notifications("user-1", 30)
    headers = auth_headers("user-1")

    first = client.get("/api/notifications", params={"limit": 25}, headers=headers)
    assert first.status_code == 200
    body = first.json()
    assert len(body["notifications"]) == 25
    assert body["has_more"] is True
    assert body["notifications"][0]["id"] == created[-1].id
    assert body["notifications"][0]["read"] is False
    assert body["notifications"][0]["data"] == {"eventTitle": "Event 29"}

    second = client.get(
        "/api/notifications",
        params={"limit": 25, "before": body["next_cursor"]},
        headers=headers,
    )
    second_body = second.json()
    assert [n["id"] for n in second_body["notifications"]] == [n.id for n in reversed(created[:5])]
    assert second_body["has_more"] is False

    by_token = client.get(
        "/api/notifications",
        params={"limit": 25, "cursor": body["next_token"]},
        headers=headers,
    )
    assert by_token.json()["notifications"] == second_body["notifications"]


def test_list_is_scoped_to_the_caller(client, auth_headers, seed_notifications) -> None:
    seed_notifications("user-1", 2)

    response = client.get("/api/notifications", headers=auth_headers("user-2"))

    assert response.status_code == 200
    assert response.json()["notifications"] == []
    assert response.json()["next_cursor"] is None


@pytest.mark.parametrize(
    "params",
    [
        {"limit": -1},
        {"limit": 0},
        {"cursor": "bogus"},
        {"before": "not-a-date"},
        {"before": "0001-01-01T00:00:00+05:00"},
    ],
)
def test_malformed_pagination_params(client, auth_headers, params) -> None:
    response = client.get("/api/notifications", params=params, headers=auth_headers("user-1"))

    assert response.status_code == 422


def test_mark_read_flow(client, auth_headers, seed_notifications) -> None:
    (notification,) = seed_notifications("user-1", 1)
    headers = auth_headers("user-1")

    response = client.patch(f"/api/notifications/{notification.id}/read", headers=headers)
    assert response.status_code == 200
    assert response.json()["read"] is True

    again = client.patch(f"/api/notifications/{notification.id}/read", headers=headers)
    assert again.status_code == 200
    assert again.json()["read"] is True


def test_mark_read_on_foreign_record_is_not_found(client, auth_headers, seed_notifications) -> None:
    (notification,) = seed_notifications("owner", 1)

    response = client.patch(
        f"/api/notifications/{notification.id}/read", headers=auth_headers("intruder")
    )

    assert response.status_code == 404
    assert "owner" not in response.text


def test_mark_all_read_and_delete_read(client, auth_headers, seed_notifications) -> None:
    seed_notifications("user-1", 4)
    headers = auth_headers("user-1")

    marked = client.post("/api/notifications/mark-all-read", headers=headers)
    assert marked.status_code == 200
    assert marked.json() == {"updated": 4}

    counts = client.get("/api/notifications/count", headers=headers).json()
    assert counts == {"total": 4, "unread": 0}

    deleted = client.delete("/api/notifications/read", headers=headers)
    assert deleted.status_code == 200
    assert deleted.json() == {"deleted": 4}
    assert client.get("/api/notifications", headers=headers).json()["notifications"] == []


def test_preferences_get_and_merge(client, auth_headers) -> None:
    headers = auth_headers("user-1")

    initial = client.get("/api/notification-preferences", headers=headers)
    assert initial.status_code == 200
    assert initial.json()["settings"] == {}

    client.patch(
        "/api/notification-preferences",
        json={"event-update": False, "group-invite": False},
        headers=headers,
    )
    merged = client.patch(
        "/api/notification-preferences", json={"group-invite": True}, headers=headers
    )

    assert merged.status_code == 200
    assert merged.json()["settings"] == {"event-update": False, "group-invite": True}


def test_preferences_reject_non_boolean(client, auth_headers) -> None:
    response = client.patch(
        "/api/notification-preferences",
        json={"event-update": "sometimes"},
        headers=auth_headers("user-1"),
    )

    assert response.status_code == 422


def test_create_respects_recipient_preferences(client, auth_headers) -> None:
    client.patch(
        "/api/notification-preferences",
        json={"event-update": False},
        headers=auth_headers("fan"),
    )
    organizer = auth_headers("organizer")

    gated = client.post(
        "/api/notifications",
        json={"recipient_id": "fan", "type": "event-update", "data": {"eventTitle": "Tour"}},
        headers=organizer,
    )
    delivered = client.post(
        "/api/notifications",
        json={"recipient_id": "fan", "type": "event-reminder", "link": "/events/7"},
        headers=organizer,
    )

    assert gated.status_code == 200
    assert gated.json() == {"notification": None}
    assert delivered.json()["notification"]["actor_id"] == "organizer"

    listed = client.get("/api/notifications", headers=auth_headers("fan")).json()
    assert [n["type"] for n in listed["notifications"]] == ["event-reminder"]


def test_text_payload_round_trips_unchanged(client, auth_headers) -> None:
    raw = '{"note": "hi"}'

    created = client.post(
        "/api/notifications",
        json={"recipient_id": "fan", "type": "report-status", "data": raw},
        headers=auth_headers("moderator"),
    )
    listed = client.get("/api/notifications", headers=auth_headers("fan")).json()

    assert created.json()["notification"]["data"] == raw
    assert listed["notifications"][0]["data"] == raw
