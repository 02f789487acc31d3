from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from occupeye.app.use_cases.access import determine_next_action, next_action_after
from occupeye.domain.entities import AccessAction, RfidLog


def make_log(action, timestamp):
    # timestamp is deliberately loose: stored logs may carry strings or epoch millis
    log = RfidLog(student_id="2024001", room="Room 1", action=action)
    log.timestamp = timestamp
    return log


def repository_returning(logs):
    repo = MagicMock()
    repo.get_by_student_id = AsyncMock(return_value=logs)
    return repo


@pytest.mark.parametrize(
    "last, expected",
    [
        (AccessAction.entry, AccessAction.exit),
        (AccessAction.exit, AccessAction.entry),
        (AccessAction.denied, AccessAction.entry),
        (None, AccessAction.entry),
        ("entry", AccessAction.exit),
    ],
)
def test_next_action_after(last, expected):
    assert next_action_after(last) == expected


@pytest.mark.asyncio
async def test_no_history_defaults_to_entry():
    repo = repository_returning([])

    assert await determine_next_action(repo, "2024001") == AccessAction.entry
    repo.get_by_student_id.assert_awaited_once_with("2024001")


@pytest.mark.asyncio
async def test_toggles_against_newest_log_regardless_of_storage_order():
    logs = [
        make_log(AccessAction.exit, datetime(2024, 3, 1, 10, 0, 0, tzinfo=UTC)),
        make_log(AccessAction.entry, "2024-03-01T12:00:00Z"),
        make_log(
            AccessAction.exit,
            int(datetime(2024, 3, 1, 9, 0, 0, tzinfo=UTC).timestamp() * 1000),
        ),
    ]

    # Newest is the 12:00 entry, stored as a string
    assert await determine_next_action(repository_returning(logs), "2024001") == AccessAction.exit


@pytest.mark.asyncio
async def test_latest_denied_resets_to_entry():
    logs = [
        make_log(AccessAction.entry, datetime(2024, 3, 1, 8, 0, 0)),
        make_log(AccessAction.denied, datetime(2024, 3, 1, 9, 0, 0)),
    ]

    assert await determine_next_action(repository_returning(logs), "2024001") == AccessAction.entry


@pytest.mark.asyncio
async def test_unparseable_timestamp_defaults_to_entry():
    logs = [
        make_log(AccessAction.entry, datetime(2024, 3, 1, 8, 0, 0)),
        make_log(AccessAction.entry, "garbage"),
    ]

    assert await determine_next_action(repository_returning(logs), "2024001") == AccessAction.entry


@pytest.mark.asyncio
async def test_repository_failure_defaults_to_entry():
    repo = MagicMock()
    repo.get_by_student_id = AsyncMock(side_effect=RuntimeError("store unavailable"))

    assert await determine_next_action(repo, "2024001") == AccessAction.entry
