import pytest
from unittest.mock import AsyncMock, MagicMock


def _repository(*getters, lists=(), writers=()):
    repo = MagicMock()
    for name in getters:
        setattr(repo, name, AsyncMock(return_value=None))
    for name in lists:
        setattr(repo, name, AsyncMock(return_value=[]))
    for name in writers:
        # Writers hand back the entity they were given, like the SQLModel repositories
        setattr(repo, name, AsyncMock(side_effect=lambda entity: entity))
    return repo


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = _repository(
        "get_by_id",
        "get_by_email",
        "get_by_rfid_card",
        "get_highest_student_id",
        lists=("get_by_student_ids", "get_by_ids", "get_by_role", "get_manager_ids"),
        writers=("create", "update"),
    )
    uow.dorms = _repository("get_by_id", "get_by_name", lists=("list_all",), writers=("create",))
    uow.rooms = _repository("get_by_id", lists=("list_rooms",), writers=("create",))
    uow.rfid_logs = _repository(
        lists=("get_by_student_id", "get_recent"), writers=("create",)
    )
    uow.notifications = _repository(
        "get_by_id",
        lists=("get_for_user",),
        writers=("create", "update"),
    )
    uow.notifications.count_unread = AsyncMock(return_value=0)
    uow.notifications.mark_all_read = AsyncMock(return_value=0)
    uow.notifications.delete = AsyncMock()

    return uow
