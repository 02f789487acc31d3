import pytest

from occupeye.app.use_cases.access import AccessContextResolver
from occupeye.domain.entities import Dorm, Room, User, UserRole


def make_user(**overrides):
    fields = dict(
        id="user-1",
        first_name="John",
        last_name="Smith",
        email="john@dorm.edu",
        student_id="2024001",
        rfid_card="CARD-1",
    )
    fields.update(overrides)
    return User(**fields)


@pytest.mark.asyncio
async def test_room_and_its_dorm(mock_uow):
    mock_uow.rooms.get_by_id.return_value = Room(
        id="R7", name="Room 7", building="Building A", dorm_id="dorm-a"
    )
    mock_uow.dorms.get_by_id.return_value = Dorm(id="dorm-a", name="Building A")

    context = await AccessContextResolver(mock_uow).resolve(make_user(), "R7")

    assert context.room.id == "R7"
    assert context.dorm_id == "dorm-a"
    assert context.dorm_name == "Building A"
    mock_uow.dorms.get_by_name.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_room_falls_back_to_assigned_building(mock_uow):
    mock_uow.dorms.get_by_name.return_value = Dorm(id="dorm-b", name="Building B")

    context = await AccessContextResolver(mock_uow).resolve(
        make_user(assigned_building="Building B"), "missing-room"
    )

    assert context.room is None
    assert context.dorm_id == "dorm-b"
    assert context.dorm_name == "Building B"


@pytest.mark.asyncio
async def test_assigned_building_without_matching_dorm(mock_uow):
    context = await AccessContextResolver(mock_uow).resolve(
        make_user(assigned_building="Annex"), None
    )

    assert context.dorm_id is None
    assert context.dorm_name is None


@pytest.mark.asyncio
async def test_managed_dorm_overrides_and_supplies_name(mock_uow):
    """A manager with no building is located at the dorm they manage"""
    mock_uow.dorms.get_by_id.return_value = Dorm(id="D9", name="Hall Nine")
    manager = make_user(role=UserRole.manager, student_id=None, managed_dorm_id="D9")

    context = await AccessContextResolver(mock_uow).resolve(manager, None)

    assert context.dorm_id == "D9"
    assert context.dorm_name == "Hall Nine"
    mock_uow.dorms.get_by_id.assert_awaited_once_with("D9")


@pytest.mark.asyncio
async def test_managed_dorm_keeps_name_found_earlier(mock_uow):
    mock_uow.dorms.get_by_name.return_value = Dorm(id="dorm-a", name="Building A")
    manager = make_user(
        role=UserRole.manager, assigned_building="Building A", managed_dorm_id="D9"
    )

    context = await AccessContextResolver(mock_uow).resolve(manager, None)

    assert context.dorm_id == "D9"
    assert context.dorm_name == "Building A"
    mock_uow.dorms.get_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_lookup_failures_yield_empty_context(mock_uow):
    mock_uow.rooms.get_by_id.side_effect = RuntimeError("boom")
    mock_uow.dorms.get_by_name.side_effect = RuntimeError("boom")

    context = await AccessContextResolver(mock_uow).resolve(
        make_user(assigned_building="Building A"), "R7"
    )

    assert context.room is None
    assert context.dorm_id is None
    assert context.dorm_name is None
