from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.tenant_store import TenantStore
from src.domain.entities import RoleName
from src.domain.errors import MEMBERSHIP_NOT_FOUND, SUPER_ADMIN_PROTECTED

from .dtos import MembershipResponse, to_membership_response


class SetMembershipBlockUseCase:
    """Flip a membership's own block flag; Super-admin memberships are protected"""

    def __init__(self, store: TenantStore):
        self.store = store

    async def execute(
        self, membership_id: UUID, blocked: bool
    ) -> Result[MembershipResponse]:
        async with self.store:
            membership = await self.store.memberships.get_by_id(membership_id)
            if membership is None:
                return Return.err(Error(MEMBERSHIP_NOT_FOUND, "Membership not found"))

            if membership.role_name == RoleName.super_admin:
                return Return.err(
                    Error(SUPER_ADMIN_PROTECTED, "Super-admin memberships cannot be blocked")
                )

            membership.is_blocked = blocked
            membership = await self.store.memberships.update(membership)

        return Return.ok(to_membership_response(membership))
