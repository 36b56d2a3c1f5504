from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.profiles import ensure_profile
from src.app.services.tenant_store import TenantStore
from src.domain.base import utcnow

from .dtos import ProfileResponse


class UpdateProfileUseCase:
    """Edit the principal's display name; a blank name clears it"""

    def __init__(self, store: TenantStore):
        self.store = store

    async def execute(
        self, principal_id: UUID, full_name: Optional[str]
    ) -> Result[ProfileResponse]:
        async with self.store:
            profile, _ = await ensure_profile(self.store, principal_id)
            profile.full_name = full_name.strip() if full_name and full_name.strip() else None
            profile.updated_at = utcnow()
            profile = await self.store.profiles.update(profile)

        return Return.ok(
            ProfileResponse(
                principal_id=str(principal_id),
                full_name=profile.full_name,
                active_organization_id=(
                    str(profile.active_organization_id)
                    if profile.active_organization_id
                    else None
                ),
                last_active_at=profile.last_active_at,
            )
        )
