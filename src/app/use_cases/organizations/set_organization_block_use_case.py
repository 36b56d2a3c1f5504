"""
Set Organization Block Use Case

Blocks or unblocks every member of a tenant with a single write.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.tenant_store import TenantStore
from src.domain.base import utcnow
from src.domain.errors import DEFAULT_ORGANIZATION_IMMUTABLE, ORGANIZATION_NOT_FOUND

from .dtos import OrganizationResponse, to_organization_response

logger = logging.getLogger(__name__)


class SetOrganizationBlockUseCase:
    """
    Flip the organization's block flag.

    Membership rows are not touched: effective block state is derived as
    membership block OR organization block. The default organization can
    never be blocked.
    """

    def __init__(self, store: TenantStore):
        self.store = store

    async def execute(
        self, organization_id: UUID, blocked: bool
    ) -> Result[OrganizationResponse]:
        async with self.store:
            organization = await self.store.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(Error(ORGANIZATION_NOT_FOUND, "Organization not found"))

            if organization.is_default and blocked:
                return Return.err(
                    Error(
                        DEFAULT_ORGANIZATION_IMMUTABLE,
                        "The default organization cannot be blocked",
                    )
                )

            organization.is_blocked = blocked
            organization.updated_at = utcnow()
            organization = await self.store.organizations.update(organization)

        logger.info(f"Organization {organization_id} blocked={blocked}")
        return Return.ok(to_organization_response(organization))
