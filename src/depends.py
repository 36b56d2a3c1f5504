from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.identity_provider import LocalIdentityProvider
from src.adapter.services.tenant_store import SqlAlchemyTenantStore
from src.api.error import ClientError
from src.app.services.identity_provider import IdentityProvider
from src.app.services.tenant_store import TenantStore
from src.domain.entities import RoleName
from src.domain.errors import NOT_SUPER_ADMIN

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_tenant_store(session: AsyncSession = Depends(get_session)) -> TenantStore:
    return SqlAlchemyTenantStore(session)


async def get_identity_provider(
    session: AsyncSession = Depends(get_session),
) -> IdentityProvider:
    return LocalIdentityProvider(session)


async def get_current_principal(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    identity: IdentityProvider = Depends(get_identity_provider),
) -> UUID:
    """
    Dependency to extract and validate the session token from the
    Authorization header.

    Returns:
        Authenticated principal ID

    Raises:
        ClientError: 401 if the token is missing, invalid, expired or signed out
    """
    if credentials is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Missing bearer token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    principal_id = await identity.validate_session(credentials.credentials)
    if principal_id is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return principal_id


async def require_super_admin(
    principal_id: UUID = Depends(get_current_principal),
    store: TenantStore = Depends(get_tenant_store),
) -> UUID:
    """Administrative routes: caller must hold a Super-admin membership"""
    async with store:
        memberships = await store.memberships.list_by_principal_id(principal_id)

    if not any(m.role_name == RoleName.super_admin for m in memberships):
        raise ClientError(
            Error(NOT_SUPER_ADMIN, "Super-admin access required"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return principal_id
