"""
Administration Use Case DTOs (Data Transfer Objects)

Command and Response classes for identity, dorm and room administration.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field

from occupeye.app.use_cases.access.dtos import RoomInfo
from occupeye.app.use_cases.dtos import CamelModel
from occupeye.domain.entities import DormStatus, RoomStatus, UserRole, UserStatus


# ============================================================================
# Command DTOs
# ============================================================================


class CreateUserCommand(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    role: UserRole = UserRole.student
    contact_number: Optional[str] = None
    rfid_card: Optional[str] = None
    student_id: Optional[str] = None
    manager_id: Optional[str] = None
    assigned_room: Optional[str] = None
    assigned_building: Optional[str] = None
    managed_dorm_id: Optional[str] = None
    managed_buildings: List[str] = Field(default_factory=list)


class UpdateUserCommand(CamelModel):
    """Partial update; only fields present in the request are applied"""

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    contact_number: Optional[str] = None
    status: Optional[UserStatus] = None
    rfid_card: Optional[str] = None
    assigned_room: Optional[str] = None
    assigned_building: Optional[str] = None
    room_application_status: Optional[str] = None
    managed_dorm_id: Optional[str] = None
    managed_buildings: Optional[List[str]] = None


class CreateDormCommand(CamelModel):
    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    location: str = ""
    capacity: int = Field(0, ge=0)
    status: DormStatus = DormStatus.active
    sex: Optional[str] = None
    manager_ids: List[str] = Field(default_factory=list)


class CreateRoomCommand(CamelModel):
    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=100)
    building: Optional[str] = None
    dorm_id: Optional[str] = None
    capacity: int = Field(1, ge=1)
    status: RoomStatus = RoomStatus.available
    rfid_enabled: bool = True


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str
    contact_number: Optional[str] = None
    role: UserRole
    status: UserStatus
    rfid_card: Optional[str] = None
    student_id: Optional[str] = None
    manager_id: Optional[str] = None
    assigned_room: Optional[str] = None
    assigned_building: Optional[str] = None
    room_application_status: Optional[str] = None
    managed_dorm_id: Optional[str] = None
    managed_buildings: List[str] = Field(default_factory=list)
    created_at: datetime
    last_updated: Optional[datetime] = None


class CreateUserResponse(CamelModel):
    success: bool = True
    user_id: str
    student_id: Optional[str] = None
    manager_id: Optional[str] = None


class DormInfo(CamelModel):
    id: str
    name: str
    description: str
    location: str
    capacity: int
    status: DormStatus
    sex: Optional[str] = None
    manager_ids: List[str] = Field(default_factory=list)
    created_at: datetime


class DormListResponse(CamelModel):
    dorms: List[DormInfo]


class RoomListResponse(CamelModel):
    rooms: List[RoomInfo]
