"""
Identity Provider boundary.

Authenticates principals and issues/validates sessions. Business outcomes
(already registered, bad credentials) come back as Result errors;
infrastructure failures raise DependencyError.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from libs.result import Result


@dataclass(frozen=True)
class PrincipalInfo:
    """Public view of a principal"""

    id: UUID
    email: str


class IdentityProvider(ABC):
    @abstractmethod
    async def create_principal(self, email: str, secret: str) -> Result[UUID]:
        """Create a principal; ALREADY_REGISTERED if the email is taken"""
        pass

    @abstractmethod
    async def authenticate(self, email: str, secret: str) -> Result[UUID]:
        """Verify credentials; INVALID_CREDENTIALS on mismatch or unknown email"""
        pass

    @abstractmethod
    async def delete_principal(self, principal_id: UUID) -> None:
        """Delete a principal (saga compensation only)"""
        pass

    @abstractmethod
    async def get_principal(self, principal_id: UUID) -> Optional[PrincipalInfo]:
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[PrincipalInfo]:
        pass

    @abstractmethod
    async def list_principals(self) -> List[PrincipalInfo]:
        """All principals ordered by email"""
        pass

    @abstractmethod
    async def issue_session(self, principal_id: UUID) -> str:
        """Issue a session token for an authenticated principal"""
        pass

    @abstractmethod
    async def validate_session(self, token: str) -> Optional[UUID]:
        """Principal ID for a valid token, None otherwise"""
        pass

    @abstractmethod
    async def sign_out(self, principal_id: UUID) -> None:
        """Invalidate every session issued to the principal so far"""
        pass
