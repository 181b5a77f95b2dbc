"""Turn notification records into display-ready views."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

from app.domain.entities import NotificationPayload, StructuredPayload

from .models import ClientNotification

_MESSAGE_KEYS = ("adminMessage", "warningMessage", "note", "message")


@dataclass(frozen=True)
class NotificationView:
    title: str
    body: str
    tone: str = "gray"
    link: str | None = None
    is_warning: bool = False
    group_href: str | None = None
    event_href: str | None = None
    message_href: str | None = None
    details: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class _Rule:
    all_of: tuple[str, ...]
    tone: str
    title: str
    default_body: str
    any_of: tuple[str, ...] = ()
    subject: str | None = None


# First match wins; more specific keyword combinations come first.
_RULES: tuple[_Rule, ...] = (
    _Rule(("welcome",), "pink", "Welcome to Fanevent",
          "Welcome to Fanevent! Start exploring events and fandom groups tailored for you."),
    _Rule(("reminder",), "blue", "Event Reminder",
          "An event you are attending is coming up soon.", subject="event"),
    _Rule(("group", "warning"), "yellow", "Group Warning",
          "Your group received a warning from the moderators.", subject="group"),
    _Rule(("group",), "red", "Group Removed",
          "A group you belong to was removed.", any_of=("removed", "deleted"), subject="group"),
    _Rule(("group", "approved"), "green", "Group Approved",
          "Your group was approved and is now public.", subject="group"),
    _Rule(("group", "rejected"), "red", "Group Rejected",
          "Your group was not approved.", subject="group"),
    _Rule(("group", "invite"), "purple", "Group Invite",
          "You were invited to join a group.", subject="group"),
    _Rule(("user", "warning"), "yellow", "Account Warning",
          "Your account received a warning. Please review the community guidelines."),
    _Rule(("organizer", "warning"), "yellow", "Organizer Warning",
          "Your organizer account received a warning."),
    _Rule(("event", "warning"), "yellow", "Event Warning",
          "Your event received a warning from the moderators.", subject="event"),
    _Rule(("announcement",), "blue", "New Announcement",
          "There is a new announcement.", subject="group_or_event"),
    _Rule(("organizer", "application", "approved"), "green", "Organizer Application Approved",
          "Your organizer application was approved. You can now create events."),
    _Rule(("organizer", "application", "rejected"), "red", "Organizer Application Rejected",
          "Your organizer application was not approved. Please review the feedback "
          "and our guidelines before re-applying."),
    _Rule(("event",), "red", "Event Removed",
          "An event you follow was removed.", any_of=("removed", "deleted"), subject="event"),
    _Rule(("event", "approved"), "green", "Event Approved",
          "Your event was approved and is now visible.", subject="event"),
    _Rule(("event", "rejected"), "red", "Event Rejected",
          "Your event was not approved.", subject="event"),
    _Rule(("event", "update"), "blue", "Event Updated",
          "An event you are attending has new details.", subject="event"),
    _Rule(("report",), "purple", "Report Update",
          "There is an update on a report you submitted."),
    _Rule(("warning",), "yellow", "Warning", "You received a warning from the moderators."),
)


def _matches(rule: _Rule, type_name: str) -> bool:
    if not all(keyword in type_name for keyword in rule.all_of):
        return False
    return not rule.any_of or any(keyword in type_name for keyword in rule.any_of)


def _decoded(payload: NotificationPayload) -> NotificationPayload:
    """Read a text payload holding a JSON object as structured details."""

    if payload.kind != "text":
        return payload
    try:
        decoded = json.loads(payload.text)
    except ValueError:
        return payload
    if isinstance(decoded, dict):
        return StructuredPayload(decoded)
    return payload


def _fields(payload: NotificationPayload) -> Mapping[str, Any]:
    if payload.kind == "structured":
        return payload.fields
    return {}


def _message_text(payload: NotificationPayload) -> str:
    if payload.kind == "text":
        return payload.text
    for key in _MESSAGE_KEYS:
        value = payload.fields.get(key)
        if value:
            return str(value)
    return ""


def _subject_name(details: Mapping[str, Any], subject: str | None) -> str | None:
    event_title = details.get("eventTitle") or details.get("title") or details.get("name")
    group_name = details.get("groupName") or details.get("name") or details.get("group")
    if subject == "event":
        return event_title
    if subject == "group":
        return group_name
    if subject == "group_or_event":
        return details.get("groupName") or details.get("eventTitle") or event_title
    return None


def _message_href(details: Mapping[str, Any]) -> str | None:
    if details.get("messageUrl"):
        return str(details["messageUrl"])
    if details.get("messageId"):
        return f"/messages/{details['messageId']}"
    if details.get("threadId"):
        return f"/messages/thread/{details['threadId']}"
    return None


def shape_notification(notification: ClientNotification) -> NotificationView:
    """Pick title, body and tone for ``notification`` from its type keywords."""

    type_name = (notification.type or "").lower()
    payload = _decoded(notification.payload)
    details = _fields(payload)
    message = _message_text(payload)
    is_warning = "warning" in type_name or "warning" in str(details.get("kind", "")).lower()

    common: dict[str, Any] = {
        "link": notification.link,
        "is_warning": is_warning,
        "group_href": f"/groups/{details['groupId']}" if details.get("groupId") else None,
        "event_href": f"/events/{details['eventId']}" if details.get("eventId") else None,
        "message_href": _message_href(details),
        "details": details,
    }

    for rule in _RULES:
        if not _matches(rule, type_name):
            continue
        title = rule.title
        if rule.title == "Report Update" and notification.type:
            title = notification.type
        name = _subject_name(details, rule.subject)
        if name:
            title = f"{title} · {name}"
        return NotificationView(
            title=title, body=message or rule.default_body, tone=rule.tone, **common
        )

    return NotificationView(
        title=notification.type or "Notification", body=message, tone="gray", **common
    )


def time_ago(created_at: datetime | None, *, now: datetime | None = None) -> str:
    """Compact relative age such as ``5m ago``; older than a week shows the date."""

    if created_at is None:
        return ""
    current = now or datetime.now(timezone.utc)
    seconds = int((current - created_at).total_seconds())
    if seconds < 60:
        return f"{max(seconds, 0)}s ago"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    days = hours // 24
    if days < 7:
        return f"{days}d ago"
    return created_at.strftime("%Y-%m-%d %H:%M")


__all__ = ["NotificationView", "shape_notification", "time_ago"]
