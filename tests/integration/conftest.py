import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.hashing import CredentialHasher
from src.depends import enable_sqlite_foreign_keys, get_hasher, get_unit_of_work
from src.domain.entities import User
from tests.fixtures.json_loader import TestDataLoader

test_hasher = CredentialHasher(rounds=4)


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    enable_sqlite_foreign_keys(engine)
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
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session, test_hasher)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_hasher] = lambda: test_hasher

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_user(db_session, test_data):
    admin = test_data.get("admin")
    user = User(
        email=admin["email"],
        full_name=admin["full_name"],
        password_hash=test_hasher.hash(admin["password"]),
    )
    db_session.add(user)
    await db_session.commit()
    return user


@pytest_asyncio.fixture
async def login_tokens(client, admin_user, test_data):
    admin = test_data.get("admin")
    response = await client.post(
        "/auth/login", json={"email": admin["email"], "password": admin["password"]}
    )
    assert response.status_code == 200
    return response.json()


@pytest_asyncio.fixture
async def auth_headers(login_tokens):
    return {"Authorization": f"Bearer {login_tokens['access_token']}"}
