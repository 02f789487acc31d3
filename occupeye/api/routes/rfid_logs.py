"""
RFID Logs API Routes

Access log browsing for the admin and manager consoles.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from config import ApplicationConfig
from occupeye.api.error import ClientError, ServerError
from occupeye.app.services.unit_of_work import UnitOfWork
from occupeye.app.use_cases.access import AccessLogsResponse, GetAccessLogsUseCase
from occupeye.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/rfid-logs", tags=["RFID Logs"])


@router.get("", status_code=status.HTTP_200_OK, response_model=AccessLogsResponse)
async def get_rfid_logs(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    student_id: Optional[str] = Query(None, alias="studentId"),
    room: Optional[str] = Query(None),
    action: Optional[str] = Query(None, description="entry, exit or denied"),
    dorm_name: Optional[str] = Query(None, alias="dormName"),
    limit: int = Query(ApplicationConfig.RFID_LOGS_DEFAULT_LIMIT, ge=1, le=500),
):
    """
    Get RFID Access Logs

    Returns the most recent access logs, newest first, with timestamps in
    local display time and the owning user's current housing data.

    Raises:
        - 400 Bad Request: Unknown action filter
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: Caller is not an admin or manager
        - 500 Internal Server Error: Server error
    """
    use_case = GetAccessLogsUseCase(uow, ApplicationConfig.DISPLAY_UTC_OFFSET_HOURS)
    result = await use_case.execute(
        role=current_user["role"],
        student_id=student_id,
        room=room,
        action=action,
        dorm_name=dorm_name,
        limit=limit,
    )

    # Handle errors
    if result.is_err():
        error = result.error
        if error.code == "INSUFFICIENT_ROLE":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
