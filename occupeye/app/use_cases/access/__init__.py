"""
Access Use Cases

RFID access recording and access log browsing.
"""

from .record_access_event_use_case import RecordAccessEventUseCase
from .get_access_logs_use_case import GetAccessLogsUseCase
from .action_toggler import determine_next_action, next_action_after
from .context_resolver import AccessContext, AccessContextResolver
from .dtos import (
    RecordAccessEventCommand,
    RecordAccessEventResponse,
    AccessUserInfo,
    RoomInfo,
    RfidLogInfo,
    AccessLogItem,
    AccessLogsResponse,
)

__all__ = [
    # Use Cases
    "RecordAccessEventUseCase",
    "GetAccessLogsUseCase",
    # Components
    "determine_next_action",
    "next_action_after",
    "AccessContext",
    "AccessContextResolver",
    # DTOs - Commands
    "RecordAccessEventCommand",
    # DTOs - Responses
    "RecordAccessEventResponse",
    "AccessLogsResponse",
    # DTOs - Nested Models
    "AccessUserInfo",
    "RoomInfo",
    "RfidLogInfo",
    "AccessLogItem",
]
