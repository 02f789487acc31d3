"""
OccupEye Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role of an identity"""

    student = "student"
    manager = "manager"
    admin = "admin"


class UserStatus(str, Enum):
    """
    Current status of an identity.

    entry/exit mirror the last recorded access event; the remaining values
    are legacy account states set by administrative edits.
    """

    entry = "entry"
    exit = "exit"
    active = "active"
    inactive = "inactive"
    suspended = "suspended"


class AccessAction(str, Enum):
    """Action recorded for a single RFID scan"""

    entry = "entry"
    exit = "exit"
    denied = "denied"


class DormStatus(str, Enum):
    active = "active"
    maintenance = "maintenance"
    inactive = "inactive"


class RoomStatus(str, Enum):
    available = "available"
    occupied = "occupied"
    maintenance = "maintenance"


class NotificationAudience(str, Enum):
    """Inbox a notification is delivered to"""

    student = "student"
    manager = "manager"
    admin = "admin"

    @classmethod
    def for_role(cls, role: str) -> "NotificationAudience":
        """Each role reads the inbox of the same name"""
        return cls(role)


class NotificationPriority(str, Enum):
    high = "high"
    normal = "normal"
    low = "low"
