from datetime import datetime

import pytest

from occupeye.app.use_cases.access import GetAccessLogsUseCase
from occupeye.domain.entities import AccessAction, RfidLog, User


def make_log(**overrides):
    fields = dict(
        id="log-1",
        student_id="2024001",
        student_name="John Smith",
        room="Room 1",
        building="Building A",
        dorm_id="dorm-a",
        dorm_name="Building A",
        action=AccessAction.entry,
        timestamp=datetime(2024, 3, 1, 0, 15, 0),
    )
    fields.update(overrides)
    return RfidLog(**fields)


@pytest.mark.asyncio
@pytest.mark.parametrize("role", ["student", "", "superuser"])
async def test_only_admins_and_managers_may_read(mock_uow, role):
    result = await GetAccessLogsUseCase(mock_uow).execute(role=role)

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"
    mock_uow.rfid_logs.get_recent.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_action_filter_is_rejected(mock_uow):
    result = await GetAccessLogsUseCase(mock_uow).execute(role="admin", action="teleport")

    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_filters_are_passed_to_repository(mock_uow):
    result = await GetAccessLogsUseCase(mock_uow).execute(
        role="manager", student_id="2024001", room="Room 1", action="exit", limit=25
    )

    assert result.is_ok()
    mock_uow.rfid_logs.get_recent.assert_awaited_once_with(
        student_id="2024001", room="Room 1", action=AccessAction.exit, limit=25
    )


@pytest.mark.asyncio
async def test_logs_are_formatted_and_enriched(mock_uow):
    mock_uow.rfid_logs.get_recent.return_value = [make_log()]
    mock_uow.users.get_by_student_ids.return_value = [
        User(
            id="user-1",
            email="john@dorm.edu",
            student_id="2024001",
            contact_number="0917-000-0001",
            assigned_room="Room 3",
            assigned_building="Building B",
            room_application_status="approved",
        )
    ]

    result = await GetAccessLogsUseCase(mock_uow, utc_offset_hours=8).execute(role="admin")

    item = result.value.logs[0]
    assert item.timestamp == "2024-03-01 08:15:00"
    assert item.action == "entry"
    assert item.contact_number == "0917-000-0001"
    # Current assignment, not the snapshot taken at scan time
    assert item.assigned_room == "Room 3"
    assert item.assigned_building == "Building B"
    assert item.room_application_status == "approved"
    mock_uow.users.get_by_ids.assert_awaited_once_with([])


@pytest.mark.asyncio
async def test_logs_keyed_by_user_id_are_enriched(mock_uow):
    mock_uow.rfid_logs.get_recent.return_value = [make_log(student_id="user-m1")]
    mock_uow.users.get_by_ids.return_value = [
        User(id="user-m1", email="mark@dorm.edu", contact_number="0917-000-0009")
    ]

    result = await GetAccessLogsUseCase(mock_uow).execute(role="admin")

    assert result.value.logs[0].contact_number == "0917-000-0009"
    mock_uow.users.get_by_ids.assert_awaited_once_with(["user-m1"])


@pytest.mark.asyncio
async def test_denied_logs_are_not_enriched(mock_uow):
    mock_uow.rfid_logs.get_recent.return_value = [
        make_log(student_id="Unknown", action=AccessAction.denied)
    ]

    result = await GetAccessLogsUseCase(mock_uow).execute(role="admin")

    item = result.value.logs[0]
    assert item.action == "denied"
    assert item.contact_number is None
    assert item.assigned_room == ""
    mock_uow.users.get_by_student_ids.assert_not_awaited()


@pytest.mark.asyncio
async def test_enrichment_failure_returns_plain_logs(mock_uow):
    mock_uow.rfid_logs.get_recent.return_value = [make_log()]
    mock_uow.users.get_by_student_ids.side_effect = RuntimeError("boom")

    result = await GetAccessLogsUseCase(mock_uow).execute(role="admin")

    assert result.is_ok()
    assert result.value.logs[0].contact_number is None


@pytest.mark.asyncio
async def test_dorm_name_filter_matches_dorm_or_building(mock_uow):
    mock_uow.rfid_logs.get_recent.return_value = [
        make_log(id="log-1", dorm_name="Building A", building="Building A"),
        make_log(id="log-2", dorm_name=None, building="Building B"),
        make_log(id="log-3", dorm_name="Building B", building=None),
        make_log(id="log-4", dorm_name="Building C", building="Building C"),
    ]

    result = await GetAccessLogsUseCase(mock_uow).execute(role="manager", dorm_name="Building B")

    assert [item.id for item in result.value.logs] == ["log-2", "log-3"]


@pytest.mark.asyncio
async def test_invalid_stored_timestamp_is_replaced(mock_uow):
    log = make_log()
    log.timestamp = "not-a-date"
    mock_uow.rfid_logs.get_recent.return_value = [log]

    result = await GetAccessLogsUseCase(mock_uow).execute(role="admin")

    formatted = result.value.logs[0].timestamp
    assert datetime.strptime(formatted, "%Y-%m-%d %H:%M:%S")
