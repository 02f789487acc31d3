"""
OccupEye Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    UserRole,
    UserStatus,
    AccessAction,
    DormStatus,
    RoomStatus,
    NotificationAudience,
    NotificationPriority,
)

# Export all entities
from .user import User
from .dorm import Dorm
from .room import Room
from .rfid_log import RfidLog, UNKNOWN_IDENTITY
from .notification import Notification

__all__ = [
    # Enums
    "UserRole",
    "UserStatus",
    "AccessAction",
    "DormStatus",
    "RoomStatus",
    "NotificationAudience",
    "NotificationPriority",
    # Entities
    "User",
    "Dorm",
    "Room",
    "RfidLog",
    "Notification",
    # Constants
    "UNKNOWN_IDENTITY",
]
