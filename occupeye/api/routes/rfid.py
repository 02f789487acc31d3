"""
RFID API Routes

Ingestion endpoint called by RFID readers for every scan.
"""

import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, status
from pydantic import Field

from config import ApplicationConfig
from occupeye.libs.result import Error
from occupeye.api.error import ClientError, ServerError
from occupeye.app.services.notification_service import NotificationService
from occupeye.app.services.unit_of_work import UnitOfWork
from occupeye.app.use_cases.access import (
    RecordAccessEventCommand,
    RecordAccessEventResponse,
    RecordAccessEventUseCase,
)
from occupeye.app.use_cases.dtos import CamelModel
from occupeye.depends import get_unit_of_work

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rfid", tags=["RFID"])


class RfidScanRequest(CamelModel):
    """
    RFID scan HTTP request payload

    rfidValue is optional at this layer so a missing value is reported as
    400 by the use case instead of a 422 schema error.
    """

    rfid_value: Optional[Union[str, int]] = Field(
        None, description="Scanned RFID card value; numeric values are matched as text"
    )
    room_id: Optional[str] = Field(None, description="Room the reader is installed in")
    user_id: Optional[str] = Field(None, description="User reference supplied by the reader")


@router.post("", status_code=status.HTTP_200_OK, response_model=RecordAccessEventResponse)
async def record_scan(
    request: RfidScanRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Record RFID Scan

    Matches the card to a user, toggles entry/exit against the user's last
    access log, writes the new log entry and updates the user's status.

    Raises:
        - 400 Bad Request: rfidValue missing
        - 404 Not Found: no user has this RFID card (a denied entry is
          logged when roomId is given)
        - 500 Internal Server Error: Server error
    """
    rfid_value = None if request.rfid_value is None else str(request.rfid_value)
    command = RecordAccessEventCommand(
        rfid_value=rfid_value, room_id=request.room_id, user_id=request.user_id
    )
    notifier = NotificationService(uow, ApplicationConfig.DISPLAY_UTC_OFFSET_HOURS)
    use_case = RecordAccessEventUseCase(uow, notifier)

    try:
        result = await use_case.execute(command)
    except Exception:
        logger.exception("Error processing RFID request")
        raise ServerError(Error("INTERNAL_ERROR", "Internal server error"))

    # Handle errors
    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == "RFID_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
