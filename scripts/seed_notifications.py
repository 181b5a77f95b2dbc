"""Utility script to seed notifications for a recipient and print a dev token."""

from __future__ import annotations

import argparse

from app.application.use_cases.notifications import notify
from app.domain.entities import NotificationType
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.security import create_recipient_token


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for seeding."""

    parser = argparse.ArgumentParser(
        description="Create sample notifications for a recipient.",
    )
    parser.add_argument("recipient", help="Recipient (user) id that owns the notifications")
    parser.add_argument(
        "--count",
        type=int,
        default=30,
        help="Number of notifications to create (default: 30)",
    )
    parser.add_argument(
        "--type",
        dest="notification_type",
        default=NotificationType.EVENT_UPDATE,
        choices=NotificationType.ALL,
        help="Notification type to use (default: event-update)",
    )
    parser.add_argument(
        "--token",
        action="store_true",
        help="Also print a bearer token for the recipient.",
    )
    return parser.parse_args()


def main() -> None:
    """Create notifications using the provided command line arguments."""

    args = parse_args()
    if args.count <= 0:
        raise SystemExit("--count must be a positive number.")

    initialize_database()

    session = SessionLocal()
    created = 0
    try:
        for index in range(args.count):
            notification = notify(
                session,
                args.recipient,
                args.notification_type,
                data={"eventTitle": f"Sample event {index + 1}", "eventId": index + 1},
                link=f"/events/{index + 1}",
            )
            if notification is not None:
                created += 1
    finally:
        session.close()

    skipped = args.count - created
    print(f"Created {created} notifications for {args.recipient} ({skipped} skipped).")
    if args.token:
        print(create_recipient_token(args.recipient))


if __name__ == "__main__":
    main()
