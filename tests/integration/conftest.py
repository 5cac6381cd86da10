import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from tests.fixtures.mail_service import RecordingMailService
from accounts.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from accounts.app.security.hmac_hasher import HMACHasher
from accounts.app.security.password_hasher import PasswordHasher
from accounts.depends import get_mail_service, get_password_hasher, get_unit_of_work

hmac_hasher = HMACHasher("integration-test-hmac-key")
password_hasher = PasswordHasher("integration-test-pepper", rounds=4)


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
    Session = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def mail_service():
    return RecordingMailService()


@pytest_asyncio.fixture
async def client(db_session, mail_service):
    from accounts.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig, create_schema=False)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session, hmac_hasher, password_hasher)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher
    app.dependency_overrides[get_mail_service] = lambda: mail_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
