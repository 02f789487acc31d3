"""
Access Use Case DTOs (Data Transfer Objects)

Command and Response classes for RFID access recording and log browsing.
"""

from datetime import datetime
from typing import List, Optional

from occupeye.app.use_cases.dtos import CamelModel
from occupeye.domain.entities import AccessAction, RoomStatus


# ============================================================================
# Command DTOs
# ============================================================================


class RecordAccessEventCommand(CamelModel):
    """A single RFID scan as received from a reader"""

    rfid_value: Optional[str] = None
    room_id: Optional[str] = None
    user_id: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class AccessUserInfo(CamelModel):
    """Trimmed identity projection returned after a scan"""

    id: str
    first_name: str
    last_name: str
    email: str
    student_id: Optional[str] = None
    rfid_card: Optional[str] = None
    role: str
    status: str


class RoomInfo(CamelModel):
    """Room resolved from the scan's roomId"""

    id: str
    name: str
    building: str
    dorm_id: Optional[str] = None
    capacity: int
    current_occupants: int
    status: RoomStatus
    rfid_enabled: bool


class RfidLogInfo(CamelModel):
    """Access log entry as written"""

    id: str
    student_id: str
    student_name: str
    room: str
    building: Optional[str] = None
    dorm_id: Optional[str] = None
    dorm_name: Optional[str] = None
    action: AccessAction
    timestamp: datetime
    user_assigned_room: Optional[str] = None
    user_assigned_building: Optional[str] = None
    user_room_application_status: Optional[str] = None
    user_id: Optional[str] = None


class RecordAccessEventResponse(CamelModel):
    """Response for record access event use case"""

    success: bool = True
    user: AccessUserInfo
    room: Optional[RoomInfo] = None
    log_entry: RfidLogInfo


class AccessLogItem(CamelModel):
    """Access log entry enriched with the owning user's current data"""

    id: str
    student_id: str
    student_name: str
    room: str
    building: Optional[str] = None
    dorm_id: Optional[str] = None
    dorm_name: Optional[str] = None
    action: str
    timestamp: str
    user_id: Optional[str] = None
    contact_number: Optional[str] = None
    assigned_room: Optional[str] = None
    assigned_building: Optional[str] = None
    room_application_status: Optional[str] = None
    user_assigned_room: Optional[str] = None
    user_assigned_building: Optional[str] = None
    user_room_application_status: Optional[str] = None


class AccessLogsResponse(CamelModel):
    """Response for get access logs use case"""

    logs: List[AccessLogItem]
