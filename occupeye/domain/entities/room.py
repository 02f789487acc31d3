"""
Room Entity

A room inside a dorm. Scanners are installed per room, so a scan may carry
the room id.
"""

from datetime import UTC, datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from occupeye.domain.base import generate_uuid
from .enums import RoomStatus


class Room(SQLModel, table=True):
    __tablename__ = "rooms"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    name: str = Field(max_length=100)
    building: str = Field(default="", max_length=255)
    dorm_id: Optional[str] = Field(default=None, index=True, max_length=64)
    capacity: int = Field(default=1)
    current_occupants: int = Field(default=0)
    status: RoomStatus = Field(default=RoomStatus.available)
    rfid_enabled: bool = Field(default=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )
