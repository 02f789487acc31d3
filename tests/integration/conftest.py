import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from occupeye.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from occupeye.api.utils.jwt import generate_jwt
from occupeye.depends import get_unit_of_work
from tests.fixtures.json_loader import TestDataLoader


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from occupeye.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def admin_headers():
    return {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}


@pytest.fixture
def auth_headers():
    def make(user_id: str, role: str) -> dict:
        return {"Authorization": f"Bearer {generate_jwt(user_id, role)}"}

    return make


@pytest_asyncio.fixture
async def seeded(client: AsyncClient, admin_headers, test_data):
    """Dorms, rooms and users from test_data.json, created through the admin API

    Returns the created user ids keyed like test_data["users"].
    """
    for dorm in test_data.get_copy("dorms"):
        response = await client.post("/api/admin/dorms", json=dorm, headers=admin_headers)
        assert response.status_code == 201

    for room in test_data.get_copy("rooms"):
        response = await client.post("/api/admin/rooms", json=room, headers=admin_headers)
        assert response.status_code == 201

    user_ids = {}
    for key, user in test_data.get_copy("users").items():
        response = await client.post("/api/admin/users", json=user, headers=admin_headers)
        assert response.status_code == 201
        user_ids[key] = response.json()["userId"]

    return user_ids
