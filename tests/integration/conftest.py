import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.seed import seed_reference_data, seed_super_admin
from src.adapter.services.identity_provider import LocalIdentityProvider
from src.adapter.services.tenant_store import SqlAlchemyTenantStore
from src.depends import get_session
from tests.integration.helpers import SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD, sign_in

# Cheap hashes keep the suite fast
ApplicationConfig.BCRYPT_ROUNDS = 4


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
        await seed_reference_data(SqlAlchemyTenantStore(session), ApplicationConfig)
        await seed_super_admin(
            SqlAlchemyTenantStore(session),
            LocalIdentityProvider(session),
            SUPER_ADMIN_EMAIL,
            SUPER_ADMIN_PASSWORD,
        )
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_headers(client):
    return await sign_in(client, SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD)
