import pytest

from occupeye.app.services.notification_service import NotificationService
from occupeye.domain.entities import (
    NotificationAudience,
    NotificationPriority,
    User,
    UserRole,
)


def make_manager(user_id, buildings):
    return User(
        id=user_id,
        email=f"{user_id}@dorm.edu",
        role=UserRole.manager,
        managed_buildings=buildings,
    )


def created_notifications(mock_uow):
    return [call.args[0] for call in mock_uow.notifications.create.await_args_list]


@pytest.mark.asyncio
async def test_student_notification_returns_id(mock_uow):
    service = NotificationService(mock_uow)

    notification_id = await service.create_student_notification(
        "user-1", "Hello", "Welcome to the dorm", "info"
    )

    assert notification_id is not None
    [notification] = created_notifications(mock_uow)
    assert notification.id == notification_id
    assert notification.audience == NotificationAudience.student
    assert notification.read is False
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_failed_delivery_returns_none_and_rolls_back(mock_uow):
    mock_uow.notifications.create.side_effect = RuntimeError("write failed")

    notification_id = await NotificationService(mock_uow).create_student_notification(
        "user-1", "Hello", "Welcome", "info"
    )

    assert notification_id is None
    mock_uow.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_rfid_access_message(mock_uow):
    await NotificationService(mock_uow).notify_rfid_access(
        "user-1", "exit", "Room 1", "Building A"
    )

    [notification] = created_notifications(mock_uow)
    assert notification.title == "Room Exit Recorded"
    assert notification.message.startswith("You have exited Room 1 in Building A at ")
    assert notification.message.endswith(("AM.", "PM."))
    assert notification.type == "info"


@pytest.mark.asyncio
async def test_reservation_rejected_includes_reason(mock_uow):
    await NotificationService(mock_uow).notify_reservation_rejected(
        "user-1", "Room 1", "Building A", "2024-03-01", "10:00", "Mark Manager", "Room full"
    )

    [notification] = created_notifications(mock_uow)
    assert notification.type == "warning"
    assert notification.action == "Book Another Room"
    assert notification.message.endswith("Reason: Room full")


@pytest.mark.asyncio
async def test_building_managers_only_reach_that_building(mock_uow):
    mock_uow.users.get_by_role.return_value = [
        make_manager("m-1", ["Building A"]),
        make_manager("m-2", ["Building B"]),
        make_manager("m-3", ["Building A", "Building B"]),
    ]

    delivered = await NotificationService(mock_uow).notify_building_managers(
        "Building A", "Heads up", "Fire drill at noon", "announcement"
    )

    assert delivered is True
    assert [n.user_id for n in created_notifications(mock_uow)] == ["m-1", "m-3"]
    mock_uow.users.get_by_role.assert_awaited_once_with(UserRole.manager)


@pytest.mark.asyncio
async def test_reservation_request_is_high_priority(mock_uow):
    mock_uow.users.get_by_role.return_value = [make_manager("m-1", ["Building A"])]

    await NotificationService(mock_uow).create_reservation_request_notification(
        "Building A", "Room 1", "John Smith", "2024-03-01", "10:00", "res-1"
    )

    [notification] = created_notifications(mock_uow)
    assert notification.type == "approval"
    assert notification.priority == NotificationPriority.high
    assert "Requires your approval" in notification.message


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "percentage, priority",
    [(95.0, NotificationPriority.high), (90.0, NotificationPriority.normal)],
)
async def test_high_occupancy_priority_threshold(mock_uow, percentage, priority):
    mock_uow.users.get_by_role.return_value = [make_manager("m-1", ["Building A"])]

    await NotificationService(mock_uow).notify_high_occupancy("Building A", percentage)

    [notification] = created_notifications(mock_uow)
    assert notification.priority == priority
    assert notification.type == "occupancy"


@pytest.mark.asyncio
async def test_fan_out_failure_returns_false(mock_uow):
    mock_uow.users.get_by_role.side_effect = RuntimeError("boom")

    delivered = await NotificationService(mock_uow).notify_all_managers(
        "Heads up", "Fire drill", "announcement"
    )

    assert delivered is False
    mock_uow.notifications.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_admins_are_told_about_new_users(mock_uow):
    mock_uow.users.get_by_role.return_value = [
        User(id="admin-1", email="a1@dorm.edu", role=UserRole.admin),
        User(id="admin-2", email="a2@dorm.edu", role=UserRole.admin),
    ]
    new_user = User(id="user-9", first_name="Maria", last_name="Garcia", email="maria@dorm.edu")

    delivered = await NotificationService(mock_uow).notify_admins_new_user(new_user)

    assert delivered is True
    notifications = created_notifications(mock_uow)
    assert [n.user_id for n in notifications] == ["admin-1", "admin-2"]
    assert all(n.audience == NotificationAudience.admin for n in notifications)
    assert notifications[0].related_user_id == "user-9"
    assert notifications[0].related_user_name == "Maria Garcia"
