"""
Local Identity Provider

Stores principals next to the tenant data with bcrypt password hashes and
issues HS256 session tokens. Any external provider implementing
IdentityProvider can replace it.
"""

import logging
from typing import List, Optional
from uuid import UUID

import bcrypt
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.adapter.repositories.base import translate_errors
from src.api.utils.jwt import generate_jwt, verify_jwt
from src.app.services.identity_provider import IdentityProvider, PrincipalInfo
from src.domain.entities import Principal
from src.domain.errors import ALREADY_REGISTERED, INVALID_CREDENTIALS

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class LocalIdentityProvider(IdentityProvider):
    """IdentityProvider backed by the principals table"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get(self, principal_id: UUID) -> Optional[Principal]:
        stmt = select(Principal).where(Principal.id == principal_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _get_by_email(self, email: str) -> Optional[Principal]:
        stmt = select(Principal).where(Principal.email == normalize_email(email))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @translate_errors("identity.create_principal")
    async def create_principal(self, email: str, secret: str) -> Result[UUID]:
        if await self._get_by_email(email) is not None:
            return Return.err(Error(ALREADY_REGISTERED, "User already registered"))

        password_hash = bcrypt.hashpw(
            secret.encode("utf-8"), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
        )
        principal = Principal(
            email=normalize_email(email),
            password_hash=password_hash.decode("utf-8"),
        )
        self.session.add(principal)
        await self.session.commit()
        await self.session.refresh(principal)
        logger.info(f"Created principal {principal.id}")
        return Return.ok(principal.id)

    @translate_errors("identity.authenticate")
    async def authenticate(self, email: str, secret: str) -> Result[UUID]:
        principal = await self._get_by_email(email)

        # Always perform a hash check even if the principal is unknown
        if principal is None:
            bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS))
            return Return.err(Error(INVALID_CREDENTIALS, "Invalid email or password"))

        if not bcrypt.checkpw(secret.encode("utf-8"), principal.password_hash.encode("utf-8")):
            return Return.err(Error(INVALID_CREDENTIALS, "Invalid email or password"))

        return Return.ok(principal.id)

    @translate_errors("identity.delete_principal")
    async def delete_principal(self, principal_id: UUID) -> None:
        stmt = delete(Principal).where(Principal.id == principal_id)
        await self.session.execute(stmt)
        await self.session.commit()
        logger.info(f"Deleted principal {principal_id}")

    @translate_errors("identity.get_principal")
    async def get_principal(self, principal_id: UUID) -> Optional[PrincipalInfo]:
        principal = await self._get(principal_id)
        if principal is None:
            return None
        return PrincipalInfo(id=principal.id, email=principal.email)

    @translate_errors("identity.find_by_email")
    async def find_by_email(self, email: str) -> Optional[PrincipalInfo]:
        principal = await self._get_by_email(email)
        if principal is None:
            return None
        return PrincipalInfo(id=principal.id, email=principal.email)

    @translate_errors("identity.list_principals")
    async def list_principals(self) -> List[PrincipalInfo]:
        stmt = select(Principal).order_by(Principal.email)
        result = await self.session.execute(stmt)
        return [PrincipalInfo(id=p.id, email=p.email) for p in result.scalars().all()]

    @translate_errors("identity.issue_session")
    async def issue_session(self, principal_id: UUID) -> str:
        principal = await self._get(principal_id)
        if principal is None:
            raise ValueError(f"Unknown principal {principal_id}")
        return generate_jwt(principal.id, principal.session_version)

    @translate_errors("identity.validate_session")
    async def validate_session(self, token: str) -> Optional[UUID]:
        payload = verify_jwt(token)
        if payload is None:
            return None
        try:
            principal_id = UUID(payload["principal_id"])
        except (KeyError, ValueError):
            return None

        principal = await self._get(principal_id)
        if principal is None or payload.get("sv") != principal.session_version:
            return None
        return principal.id

    @translate_errors("identity.sign_out")
    async def sign_out(self, principal_id: UUID) -> None:
        principal = await self._get(principal_id)
        if principal is None:
            return
        principal.session_version += 1
        self.session.add(principal)
        await self.session.commit()
