"""
Switch Active Tenant Use Case

Handles switching the principal's active tenant.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.profiles import ensure_profile
from src.app.services.tenant_store import TenantStore
from src.domain.base import utcnow
from src.domain.errors import NOT_A_MEMBER, ORGANIZATION_NOT_FOUND
from src.domain.rules import effective_block

from .dtos import SwitchTenantResponse

logger = logging.getLogger(__name__)


class SwitchTenantUseCase:
    """
    Use case for switching the active tenant.

    Business Rules:
    - Target organization must exist
    - Principal must hold a membership in the target, re-read at call time
      since it may have been removed after the tenant list was rendered
    - Blocked tenants can be selected; the access state reports the block
    - Updates profile.active_organization_id and last_active_at only
    """

    def __init__(self, store: TenantStore):
        self.store = store

    async def execute(
        self, principal_id: UUID, target_organization_id: UUID
    ) -> Result[SwitchTenantResponse]:
        """
        Execute switch tenant use case.

        Args:
            principal_id: Current authenticated principal
            target_organization_id: Organization to make active

        Returns:
            Result with the new active tenant, or Error
        """
        async with self.store:
            organization = await self.store.organizations.get_by_id(target_organization_id)
            if organization is None:
                return Return.err(Error(ORGANIZATION_NOT_FOUND, "Organization not found"))

            membership = await self.store.memberships.get_by_principal_and_organization(
                principal_id, target_organization_id
            )
            if membership is None:
                return Return.err(
                    Error(NOT_A_MEMBER, "Principal is not a member of the target organization")
                )

            profile, _ = await ensure_profile(self.store, principal_id)
            previous = profile.active_organization_id
            profile.active_organization_id = target_organization_id
            profile.last_active_at = utcnow()
            profile.updated_at = utcnow()
            await self.store.profiles.update(profile)

        logger.info(
            f"Principal {principal_id} switched tenant {previous} -> {target_organization_id}"
        )
        return Return.ok(
            SwitchTenantResponse(
                organization_id=str(organization.id),
                name=organization.name,
                role=membership.role_name.value,
                is_blocked=effective_block(membership, organization),
            )
        )
