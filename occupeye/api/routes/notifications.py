"""
Notification API Routes

Inbox endpoints for the signed-in user and the dispatch endpoint used by
internal services.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from config import ApplicationConfig
from occupeye.libs.result import Error
from occupeye.api.error import ClientError, ServerError
from occupeye.api.utils.admin_auth import verify_admin_api_key
from occupeye.app.services.notification_service import NotificationService
from occupeye.app.services.unit_of_work import UnitOfWork
from occupeye.app.use_cases.notifications import (
    DeleteNotificationUseCase,
    GetNotificationsUseCase,
    GetUnreadCountUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationUseCase,
    NotificationsResponse,
    NotificationUpdatedResponse,
    SendNotificationResponse,
    SendNotificationUseCase,
    UnreadCountResponse,
)
from occupeye.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/notifications", tags=["Notifications"])


def _raise_for_error(error: Error):
    if error.code == "INVALID_ROLE":
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    if error.code == "NOTIFICATION_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if error.code in ("INVALID_NOTIFICATION_TYPE", "VALIDATION_ERROR"):
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    raise ServerError(error)


@router.get("", status_code=status.HTTP_200_OK, response_model=NotificationsResponse)
async def get_notifications(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List My Notifications

    Returns the caller's inbox (selected by the token's role), newest first.
    """
    use_case = GetNotificationsUseCase(uow)
    result = await use_case.execute(current_user["user_id"], current_user["role"])

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get("/unread-count", status_code=status.HTTP_200_OK, response_model=UnreadCountResponse)
async def get_unread_count(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Count My Unread Notifications

    Polled by clients to show the notification badge.
    """
    use_case = GetUnreadCountUseCase(uow)
    result = await use_case.execute(current_user["user_id"], current_user["role"])

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.post(
    "/read-all", status_code=status.HTTP_200_OK, response_model=NotificationUpdatedResponse
)
async def mark_all_read(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Mark every notification in my inbox as read"""
    use_case = MarkAllNotificationsReadUseCase(uow)
    result = await use_case.execute(current_user["user_id"], current_user["role"])

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.post(
    "/{notification_id}/read",
    status_code=status.HTTP_200_OK,
    response_model=NotificationUpdatedResponse,
)
async def mark_read(
    notification_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Mark Notification As Read

    Raises:
        - 404 Not Found: Notification does not exist or is not mine
    """
    use_case = MarkNotificationUseCase(uow)
    result = await use_case.execute(current_user["user_id"], notification_id, read=True)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.post(
    "/{notification_id}/unread",
    status_code=status.HTTP_200_OK,
    response_model=NotificationUpdatedResponse,
)
async def mark_unread(
    notification_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Mark Notification As Unread

    Raises:
        - 404 Not Found: Notification does not exist or is not mine
    """
    use_case = MarkNotificationUseCase(uow)
    result = await use_case.execute(current_user["user_id"], notification_id, read=False)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.delete(
    "/{notification_id}",
    status_code=status.HTTP_200_OK,
    response_model=NotificationUpdatedResponse,
)
async def delete_notification(
    notification_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Notification

    Raises:
        - 404 Not Found: Notification does not exist or is not mine
    """
    use_case = DeleteNotificationUseCase(uow)
    result = await use_case.execute(current_user["user_id"], notification_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=SendNotificationResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def send_notification(
    payload: Dict[str, Any] = Body(...),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Send Notification

    Body is `{ "type": ..., ...fields }`; the type selects the template and
    the recipients (single user, all managers, managers of a building).

    Raises:
        - 400 Bad Request: Unknown type or missing/invalid fields
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: Notification could not be created
    """
    data = dict(payload)
    notification_type = data.pop("type", None)

    service = NotificationService(uow, ApplicationConfig.DISPLAY_UTC_OFFSET_HOURS)
    use_case = SendNotificationUseCase(uow, service)
    result = await use_case.execute(notification_type, data)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value
