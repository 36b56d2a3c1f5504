from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.tenant_store import TenantStore
from src.domain.entities import Membership, Organization, RoleName
from src.domain.errors import DUPLICATE_MEMBERSHIP, ROLE_NOT_FOUND, StoreConflictError
from src.domain.rules import MembershipSnapshot


async def load_membership_snapshot(
    store: TenantStore, principal_id: UUID, organization: Organization
) -> MembershipSnapshot:
    """Read the live state the invariant checker needs"""
    existing = await store.memberships.get_by_principal_and_organization(
        principal_id, organization.id
    )
    member_count = await store.memberships.count_by_organization_id(organization.id)

    seat_limit: Optional[int] = None
    if organization.subscription_plan_id is not None:
        plan = await store.plans.get_by_id(organization.subscription_plan_id)
        if plan is not None:
            seat_limit = plan.max_users

    return MembershipSnapshot(
        existing=[existing] if existing is not None else [],
        member_count=member_count,
        seat_limit=seat_limit,
        is_default_organization=organization.is_default,
    )


async def insert_membership(
    store: TenantStore, principal_id: UUID, organization_id: UUID, role_name: RoleName
) -> Result[Membership]:
    """
    Resolve the role row and insert the membership.

    A unique-index rejection (a racing insert that passed the checker too)
    is reported as DUPLICATE_MEMBERSHIP.
    """
    role = await store.roles.get_by_name(role_name)
    if role is None:
        return Return.err(Error(ROLE_NOT_FOUND, f"Role {role_name.value} not found"))

    try:
        membership = await store.memberships.create(
            Membership(
                principal_id=principal_id,
                organization_id=organization_id,
                role_id=role.id,
                role_name=role_name,
            )
        )
    except StoreConflictError:
        return Return.err(
            Error(
                DUPLICATE_MEMBERSHIP,
                "Principal is already a member of this organization",
            )
        )
    return Return.ok(membership)
