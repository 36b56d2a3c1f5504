"""
List Organizations Use Case

Administrative overview: every tenant with plan, seat usage, expiration and
member list.
"""

import logging
from typing import List, Optional

from libs.result import Result, Return
from src.app.services.identity_provider import IdentityProvider
from src.app.services.tenant_store import TenantStore
from src.domain.entities import Organization, SubscriptionPlan
from src.domain.errors import DependencyError
from src.domain.rules import display_name, is_subscription_expired

from .dtos import (
    MemberInfo,
    OrganizationListResponse,
    OrganizationOverview,
    PlanInfo,
    organization_fields,
)

logger = logging.getLogger(__name__)


class ListOrganizationsUseCase:
    """
    Builds one overview per organization, ordered by name.

    A plan that cannot be resolved leaves plan=None and is_expired=None for
    that organization only. Member emails that the identity provider cannot
    return are reported as None.
    """

    def __init__(self, store: TenantStore, identity: IdentityProvider):
        self.store = store
        self.identity = identity

    async def execute(self) -> Result[OrganizationListResponse]:
        async with self.store:
            organizations = await self.store.organizations.list_all()
            overviews = [await self._overview(org) for org in organizations]

        return Return.ok(OrganizationListResponse(organizations=overviews))

    async def _overview(self, organization: Organization) -> OrganizationOverview:
        plan = await self._plan(organization)
        memberships = await self.store.memberships.list_by_organization_id(organization.id)
        member_count = len(memberships)

        if organization.is_default:
            is_expired: Optional[bool] = False
            can_add_member = True
        elif plan is None:
            is_expired = None
            can_add_member = False
        else:
            is_expired = is_subscription_expired(organization)
            can_add_member = member_count < plan.max_users

        members: List[MemberInfo] = []
        for membership in memberships:
            email = await self._email(membership.principal_id)
            profile = await self.store.profiles.get_by_principal_id(membership.principal_id)
            members.append(
                MemberInfo(
                    membership_id=str(membership.id),
                    principal_id=str(membership.principal_id),
                    email=email,
                    display_name=(
                        display_name(email, profile)
                        if email
                        else (profile.full_name if profile and profile.full_name else "")
                    ),
                    role=membership.role_name.value,
                    is_blocked=membership.is_blocked,
                )
            )

        return OrganizationOverview(
            **organization_fields(organization),
            plan=(
                PlanInfo(
                    id=str(plan.id),
                    name=plan.name,
                    max_users=plan.max_users,
                    price=plan.price,
                    currency=plan.currency,
                )
                if plan
                else None
            ),
            member_count=member_count,
            is_expired=is_expired,
            can_add_member=can_add_member,
            members=members,
        )

    async def _plan(self, organization: Organization) -> Optional[SubscriptionPlan]:
        if organization.subscription_plan_id is None:
            return None
        try:
            return await self.store.plans.get_by_id(organization.subscription_plan_id)
        except DependencyError as exc:
            logger.warning(f"Plan lookup failed for organization {organization.id}: {exc}")
            return None

    async def _email(self, principal_id) -> Optional[str]:
        try:
            principal = await self.identity.get_principal(principal_id)
        except DependencyError as exc:
            logger.warning(f"Principal lookup failed for {principal_id}: {exc}")
            return None
        return principal.email if principal else None
