"""
Add Member Use Case

Administrative single-write insert of an existing principal into a tenant.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.identity_provider import IdentityProvider
from src.app.services.memberships import insert_membership, load_membership_snapshot
from src.app.services.tenant_store import TenantStore
from src.domain.entities import AssignmentPath, RoleName
from src.domain.errors import INVALID_INPUT, ORGANIZATION_NOT_FOUND, PRINCIPAL_NOT_FOUND
from src.domain.rules import check_membership_insert

from .dtos import MembershipResponse, to_membership_response

logger = logging.getLogger(__name__)


class AddMemberUseCase:
    """
    Use case for adding an existing principal to an organization as Member.

    Business Rules:
    - Never creates principals: unknown email fails with PRINCIPAL_NOT_FOUND
    - Invariant checker guards duplicates and the seat limit
    - The seat check is best effort under concurrent adds; the storage
      unique index still rejects duplicates
    """

    def __init__(self, store: TenantStore, identity: IdentityProvider):
        self.store = store
        self.identity = identity

    async def execute(self, organization_id: UUID, email: str) -> Result[MembershipResponse]:
        """
        Execute add member use case.

        Args:
            organization_id: Target organization
            email: Email of an existing principal

        Returns:
            Result with MembershipResponse, or Error
        """
        if not email or not email.strip():
            return Return.err(Error(INVALID_INPUT, "email is required"))

        principal = await self.identity.find_by_email(email)
        if principal is None:
            return Return.err(Error(PRINCIPAL_NOT_FOUND, "User not found"))

        async with self.store:
            organization = await self.store.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(Error(ORGANIZATION_NOT_FOUND, "Organization not found"))

            snapshot = await load_membership_snapshot(self.store, principal.id, organization)
            allowed = check_membership_insert(
                principal.id,
                organization.id,
                RoleName.member,
                snapshot,
                path=AssignmentPath.self_service,
            )
            if allowed.is_err():
                return Return.err(allowed.error)

            inserted = await insert_membership(
                self.store, principal.id, organization.id, RoleName.member
            )
            if inserted.is_err():
                return Return.err(inserted.error)

        logger.info(f"Added principal {principal.id} to organization {organization_id}")
        return Return.ok(to_membership_response(inserted.value))
