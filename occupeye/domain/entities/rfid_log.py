"""
RfidLog Entity

Immutable record of one RFID scan.
"""

from datetime import UTC, datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from occupeye.domain.base import generate_uuid
from .enums import AccessAction

UNKNOWN_IDENTITY = "Unknown"


class RfidLog(SQLModel, table=True):
    """
    RfidLog entity - one entry/exit/denied occurrence.

    Business Rules:
    - Created exactly once per scan, never updated or deleted
    - student_id is the identity reference (student id or user id),
      "Unknown" for denied scans of unregistered cards
    - user_assigned_* fields snapshot the identity at scan time
    """

    __tablename__ = "rfid_logs"

    id: str = Field(default_factory=generate_uuid, primary_key=True)

    student_id: str = Field(index=True, max_length=64)
    student_name: str = Field(default="", max_length=255)
    room: str = Field(max_length=100)
    building: Optional[str] = Field(default=None, max_length=255)
    dorm_id: Optional[str] = Field(default=None, max_length=64)
    dorm_name: Optional[str] = Field(default=None, max_length=255)

    action: AccessAction

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    # Snapshot of the identity at scan time
    user_assigned_room: Optional[str] = Field(default=None, max_length=100)
    user_assigned_building: Optional[str] = Field(default=None, max_length=255)
    user_room_application_status: Optional[str] = Field(default=None, max_length=32)

    user_id: Optional[str] = Field(default=None, max_length=64)

    __table_args__ = (
        Index("idx_rfid_log_timestamp", "timestamp"),
        Index("idx_rfid_log_room_action", "room", "action"),
    )
