"""
Admin API Routes

Identity, dorm and room administration.
All endpoints require an admin API key (X-Admin-API-Key header).
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from config import ApplicationConfig
from occupeye.api.error import ClientError, ServerError
from occupeye.api.utils.admin_auth import verify_admin_api_key
from occupeye.app.services.notification_service import NotificationService
from occupeye.app.services.unit_of_work import UnitOfWork
from occupeye.app.use_cases.access import RoomInfo
from occupeye.app.use_cases.admin import (
    CreateDormCommand,
    CreateDormUseCase,
    CreateRoomCommand,
    CreateRoomUseCase,
    CreateUserCommand,
    CreateUserResponse,
    CreateUserUseCase,
    DormInfo,
    DormListResponse,
    ListDormsUseCase,
    ListRoomsUseCase,
    RoomListResponse,
    UpdateUserCommand,
    UpdateUserUseCase,
    UserInfo,
)
from occupeye.depends import get_unit_of_work

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(verify_admin_api_key)],
)

CONFLICT_CODES = (
    "EMAIL_ALREADY_EXISTS",
    "RFID_CARD_IN_USE",
    "DORM_ALREADY_EXISTS",
    "ROOM_ALREADY_EXISTS",
)
NOT_FOUND_CODES = ("USER_NOT_FOUND", "DORM_NOT_FOUND")


def _raise_for_error(error):
    if error.code == "VALIDATION_ERROR":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    if error.code in CONFLICT_CODES:
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    if error.code in NOT_FOUND_CODES:
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.post(
    "/users", status_code=status.HTTP_201_CREATED, response_model=CreateUserResponse
)
async def create_user(
    request: CreateUserCommand, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Create User

    Registers a student, manager or admin. Students and managers receive a
    generated student/manager id when none is supplied. Admins are notified.

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 409 Conflict: Email or RFID card already in use
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    service = NotificationService(uow, ApplicationConfig.DISPLAY_UTC_OFFSET_HOURS)
    result = await CreateUserUseCase(uow, service).execute(request)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.patch("/users/{user_id}", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def update_user(
    user_id: str,
    request: UpdateUserCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update User

    Applies only the fields present in the request body.

    Raises:
        - 400 Bad Request: Name, status or managed buildings set to null
        - 404 Not Found: Unknown user
        - 409 Conflict: RFID card belongs to another user
    """
    result = await UpdateUserUseCase(uow).execute(user_id, request)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.post("/dorms", status_code=status.HTTP_201_CREATED, response_model=DormInfo)
async def create_dorm(
    request: CreateDormCommand, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Create Dorm

    Raises:
        - 409 Conflict: Dorm name or id already in use
    """
    result = await CreateDormUseCase(uow).execute(request)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get("/dorms", status_code=status.HTTP_200_OK, response_model=DormListResponse)
async def list_dorms(uow: UnitOfWork = Depends(get_unit_of_work)):
    """List all dorms ordered by name"""
    result = await ListDormsUseCase(uow).execute()

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.post("/rooms", status_code=status.HTTP_201_CREATED, response_model=RoomInfo)
async def create_room(
    request: CreateRoomCommand, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Create Room

    Raises:
        - 404 Not Found: dormId names an unknown dorm
        - 409 Conflict: Room id already in use
    """
    result = await CreateRoomUseCase(uow).execute(request)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get("/rooms", status_code=status.HTTP_200_OK, response_model=RoomListResponse)
async def list_rooms(
    uow: UnitOfWork = Depends(get_unit_of_work),
    dorm_id: Optional[str] = Query(None, alias="dormId"),
):
    """List rooms, optionally only those of one dorm"""
    result = await ListRoomsUseCase(uow).execute(dorm_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value
