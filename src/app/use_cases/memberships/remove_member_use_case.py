"""
Remove Member from Tenant Use Case

Handles removing (hard delete) members from a tenant.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.tenant_store import TenantStore
from src.domain.entities import RoleName
from src.domain.errors import MEMBERSHIP_NOT_FOUND, SUPER_ADMIN_PROTECTED

from .dtos import RemoveMemberResponse

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """
    Use case for removing members from a tenant.

    Business Rules:
    - Hard delete of the membership row
    - Super-admin memberships are rejected before any write
    - The principal's active-tenant reference is left untouched; the
      response reports whether it now dangles
    """

    def __init__(self, store: TenantStore):
        self.store = store

    async def execute(self, membership_id: UUID) -> Result[RemoveMemberResponse]:
        """
        Execute remove member use case.

        Args:
            membership_id: Membership to remove

        Returns:
            Result with RemoveMemberResponse DTO, or Error
        """
        async with self.store:
            membership = await self.store.memberships.get_by_id(membership_id)
            if membership is None:
                return Return.err(Error(MEMBERSHIP_NOT_FOUND, "Membership not found"))

            if membership.role_name == RoleName.super_admin:
                return Return.err(
                    Error(SUPER_ADMIN_PROTECTED, "Super-admin memberships cannot be removed")
                )

            await self.store.memberships.delete(membership.id)

            profile = await self.store.profiles.get_by_principal_id(membership.principal_id)
            was_active = (
                profile is not None
                and profile.active_organization_id == membership.organization_id
            )

        logger.info(
            f"Removed membership {membership.id} "
            f"(principal {membership.principal_id}, organization {membership.organization_id})"
        )
        return Return.ok(
            RemoveMemberResponse(
                status="removed",
                membership_id=str(membership.id),
                was_active_organization=was_active,
            )
        )
