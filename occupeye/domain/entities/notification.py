"""
Notification Entity

A message delivered to one user's inbox.
"""

from datetime import UTC, datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from occupeye.domain.base import generate_uuid
from .enums import NotificationAudience, NotificationPriority


class Notification(SQLModel, table=True):
    """
    Notification entity.

    type is audience specific: success/warning/info for students,
    approval/occupancy/system/announcement for managers and
    new_user/room_assignment/system/announcement for admins.
    """

    __tablename__ = "notifications"

    id: str = Field(default_factory=generate_uuid, primary_key=True)

    user_id: str = Field(index=True, max_length=64)
    audience: NotificationAudience

    type: str = Field(max_length=32)
    title: str = Field(max_length=255)
    message: str
    priority: Optional[NotificationPriority] = Field(default=None)
    action: Optional[str] = Field(default=None, max_length=100)

    related_user_id: Optional[str] = Field(default=None, max_length=64)
    related_user_name: Optional[str] = Field(default=None, max_length=255)
    related_room_id: Optional[str] = Field(default=None, max_length=64)
    related_room_name: Optional[str] = Field(default=None, max_length=100)

    read: bool = Field(default=False)

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_notification_inbox", "user_id", "audience", "read"),)
