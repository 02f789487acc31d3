"""
Administration Use Cases

Identity, dorm and room administration.
"""

from .create_user_use_case import CreateUserUseCase
from .update_user_use_case import UpdateUserUseCase
from .dorm_use_cases import CreateDormUseCase, ListDormsUseCase
from .room_use_cases import CreateRoomUseCase, ListRoomsUseCase
from .dtos import (
    CreateUserCommand,
    UpdateUserCommand,
    CreateDormCommand,
    CreateRoomCommand,
    CreateUserResponse,
    UserInfo,
    DormInfo,
    DormListResponse,
    RoomListResponse,
)

__all__ = [
    # Use Cases
    "CreateUserUseCase",
    "UpdateUserUseCase",
    "CreateDormUseCase",
    "ListDormsUseCase",
    "CreateRoomUseCase",
    "ListRoomsUseCase",
    # DTOs - Commands
    "CreateUserCommand",
    "UpdateUserCommand",
    "CreateDormCommand",
    "CreateRoomCommand",
    # DTOs - Responses
    "CreateUserResponse",
    "UserInfo",
    "DormInfo",
    "DormListResponse",
    "RoomListResponse",
]
