from datetime import UTC, datetime

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_admin_endpoints_require_key(client: AsyncClient):
    response = await client.get("/api/admin/dorms")

    assert response.status_code == 401
    assert response.json() == {
        "success": False,
        "error": "Admin API key required",
        "code": "UNAUTHORIZED",
    }


@pytest.mark.asyncio
async def test_create_student_generates_student_id(client: AsyncClient, admin_headers):
    year = datetime.now(UTC).year

    first = await client.post(
        "/api/admin/users",
        json={"firstName": "John", "lastName": "Smith", "email": "john@dorm.edu"},
        headers=admin_headers,
    )
    second = await client.post(
        "/api/admin/users",
        json={"firstName": "Maria", "lastName": "Garcia", "email": "maria@dorm.edu"},
        headers=admin_headers,
    )

    assert first.status_code == 201
    assert first.json()["success"] is True
    assert first.json()["studentId"] == f"{year}001"
    assert second.json()["studentId"] == f"{year}002"


@pytest.mark.asyncio
async def test_create_manager_generates_manager_id(client: AsyncClient, admin_headers):
    response = await client.post(
        "/api/admin/users",
        json={
            "firstName": "Mark",
            "lastName": "Manager",
            "email": "mark@dorm.edu",
            "role": "manager",
        },
        headers=admin_headers,
    )

    assert response.status_code == 201
    assert response.json()["managerId"] == "00001"
    assert response.json()["studentId"] is None


@pytest.mark.asyncio
async def test_create_user_conflicts(client: AsyncClient, seeded, admin_headers):
    same_email = await client.post(
        "/api/admin/users",
        json={"firstName": "J", "lastName": "S", "email": "john.smith@dorm.edu"},
        headers=admin_headers,
    )
    same_card = await client.post(
        "/api/admin/users",
        json={
            "firstName": "J",
            "lastName": "S",
            "email": "someone.else@dorm.edu",
            "rfidCard": "CARD-STUDENT-1",
        },
        headers=admin_headers,
    )

    assert same_email.status_code == 409
    assert same_email.json()["code"] == "EMAIL_ALREADY_EXISTS"
    assert same_card.status_code == 409
    assert same_card.json()["code"] == "RFID_CARD_IN_USE"


@pytest.mark.asyncio
async def test_invalid_email_is_unprocessable(client: AsyncClient, admin_headers):
    response = await client.post(
        "/api/admin/users",
        json={"firstName": "J", "lastName": "S", "email": "not-an-email"},
        headers=admin_headers,
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_user(client: AsyncClient, seeded, admin_headers):
    response = await client.patch(
        f"/api/admin/users/{seeded['student']}",
        json={"assignedRoom": "Room 7", "rfidCard": "CARD-NEW"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["assignedRoom"] == "Room 7"
    assert data["rfidCard"] == "CARD-NEW"
    assert data["assignedBuilding"] == "Building A"
    assert data["lastUpdated"] is not None

    # The new card is the one readers now match
    scan = await client.post("/api/rfid", json={"rfidValue": "CARD-NEW"})
    assert scan.status_code == 200
    assert scan.json()["user"]["id"] == seeded["student"]


@pytest.mark.asyncio
async def test_update_user_errors(client: AsyncClient, seeded, admin_headers):
    missing = await client.patch(
        "/api/admin/users/does-not-exist", json={"assignedRoom": "Room 7"}, headers=admin_headers
    )
    taken = await client.patch(
        f"/api/admin/users/{seeded['student']}",
        json={"rfidCard": "CARD-STUDENT-2"},
        headers=admin_headers,
    )

    assert missing.status_code == 404
    assert missing.json()["code"] == "USER_NOT_FOUND"
    assert taken.status_code == 409


@pytest.mark.asyncio
async def test_dorms_and_rooms(client: AsyncClient, seeded, admin_headers):
    dorms = await client.get("/api/admin/dorms", headers=admin_headers)
    rooms = await client.get(
        "/api/admin/rooms", params={"dormId": "dorm-b"}, headers=admin_headers
    )

    assert [d["name"] for d in dorms.json()["dorms"]] == ["Building A", "Building B", "Hall Nine"]
    [room] = rooms.json()["rooms"]
    assert room["id"] == "R12"
    assert room["building"] == "Building B"
    assert room["rfidEnabled"] is True


@pytest.mark.asyncio
async def test_dorm_and_room_conflicts(client: AsyncClient, seeded, admin_headers):
    dorm = await client.post(
        "/api/admin/dorms", json={"name": "Building A"}, headers=admin_headers
    )
    room = await client.post(
        "/api/admin/rooms", json={"id": "R7", "name": "Room 7 again"}, headers=admin_headers
    )
    orphan = await client.post(
        "/api/admin/rooms",
        json={"name": "Room 99", "dormId": "no-such-dorm"},
        headers=admin_headers,
    )

    assert dorm.status_code == 409
    assert room.status_code == 409
    assert orphan.status_code == 404
    assert orphan.json()["code"] == "DORM_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_user_rejects_null_name(client: AsyncClient, seeded, admin_headers):
    response = await client.patch(
        f"/api/admin/users/{seeded['student']}",
        json={"firstName": None},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"

    # The user is untouched and still scannable
    scan = await client.post("/api/rfid", json={"rfidValue": "CARD-STUDENT-1"})
    assert scan.json()["user"]["firstName"] == "John"
