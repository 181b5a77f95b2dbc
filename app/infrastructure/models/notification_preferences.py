"""SQLAlchemy model for per-user notification preferences."""

from sqlalchemy import Column, DateTime, JSON, String

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class NotificationPreferencesModel(Base):
    """One row of delivery settings per user."""

    __tablename__ = "notification_preferences"

    user_id = Column(String(64), primary_key=True)
    settings = Column(JSON, nullable=False, default=dict)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["NotificationPreferencesModel"]
