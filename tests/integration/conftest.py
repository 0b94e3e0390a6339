import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from src.depends import get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from config import ApplicationConfig


@pytest.fixture
def db_uri(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
def test_config(db_uri):
    class TestConfig(ApplicationConfig):
        DB_URI = db_uri
        API_PREFIX = "/api"
        JWT_SECRET = "test-secret"
        BCRYPT_ROUNDS = 4
        ENABLE_LOGGING_MIDDLEWARE = True
        AUTO_CREATE_TABLES = False

    return TestConfig


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine(db_uri):
    engine = create_async_engine(db_uri)
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
async def client(db_session, test_config):
    from httpx import ASGITransport
    from src.api.app import create_app

    app = create_app(test_config)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def login_as(client: AsyncClient, test_data):
    """Register the named test user and return bearer headers for them"""

    async def _login_as(name: str) -> dict:
        user = test_data.get_copy(name)
        response = await client.post("/api/users", json=user)
        assert response.status_code == 201

        response = await client.post("/api/auth", json=test_data.credentials(name))
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login_as


@pytest_asyncio.fixture
async def live_client(engine, test_config):
    """Client on an app using its own session factory, without overrides"""
    from httpx import ASGITransport
    from src.api.app import create_app

    app = create_app(test_config)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await app.state.engine.dispose()
