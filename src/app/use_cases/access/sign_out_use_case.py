from uuid import UUID

from libs.result import Result, Return
from src.app.services.identity_provider import IdentityProvider

from .dtos import SignOutResponse


class SignOutUseCase:
    """Invalidate every session of the principal"""

    def __init__(self, identity: IdentityProvider):
        self.identity = identity

    async def execute(self, principal_id: UUID) -> Result[SignOutResponse]:
        await self.identity.sign_out(principal_id)
        return Return.ok(SignOutResponse(status="signed_out"))
