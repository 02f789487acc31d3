"""
User Entity

An identity known to the access system: a student, a dorm manager or an
administrator.
"""

from datetime import UTC, datetime
from typing import List, Optional

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from occupeye.domain.base import generate_uuid
from .enums import UserRole, UserStatus


class User(SQLModel, table=True):
    """
    User entity - an identity that can badge in and out of dorm rooms.

    Business Rules:
    - Email must be unique across all users
    - rfid_card is unique; a scan is matched exactly against it
    - status mirrors the last recorded access action (entry/exit)
    - Managers are located by managed_dorm_id, not by their assigned room
    """

    __tablename__ = "users"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    first_name: str = Field(default="", max_length=100)
    last_name: str = Field(default="", max_length=100)
    email: str = Field(unique=True, index=True, max_length=255)
    contact_number: Optional[str] = Field(default=None, max_length=32)

    role: UserRole = Field(default=UserRole.student)
    status: UserStatus = Field(default=UserStatus.active)

    rfid_card: Optional[str] = Field(default=None, unique=True, index=True, max_length=64)
    student_id: Optional[str] = Field(default=None, index=True, max_length=32)
    manager_id: Optional[str] = Field(default=None, max_length=32)

    # Housing assignment
    assigned_room: Optional[str] = Field(default=None, max_length=100)
    assigned_building: Optional[str] = Field(default=None, max_length=255)
    room_application_status: Optional[str] = Field(default=None, max_length=32)

    # Manager scope
    managed_dorm_id: Optional[str] = Field(default=None, max_length=64)
    managed_buildings: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )
    last_updated: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_role", "role"),)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def identity_reference(self) -> str:
        """Reference stored on access logs: the student id when present"""
        return self.student_id or self.id
