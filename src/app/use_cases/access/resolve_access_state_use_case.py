"""
Resolve Access State Use Case

Computes a principal's effective access from stored rows: active tenant,
role and block state there, subscription expiration, and every tenant the
principal belongs to.
"""

import logging
from typing import List, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.profiles import ensure_profile
from src.app.services.tenant_store import TenantStore
from src.domain.entities import Membership, Organization, RoleName
from src.domain.errors import DependencyError
from src.domain.rules import effective_block, is_subscription_expired

from .dtos import AccessStateResponse, TenantAccess

logger = logging.getLogger(__name__)


def build_tenant_access(
    membership: Membership, organization: Organization, expiration_known: bool
) -> TenantAccess:
    if organization.is_default:
        is_expired: Optional[bool] = False
    elif expiration_known:
        is_expired = is_subscription_expired(organization)
    else:
        is_expired = None

    return TenantAccess(
        organization_id=str(organization.id),
        name=organization.name,
        role=membership.role_name.value,
        is_default=organization.is_default,
        membership_blocked=membership.is_blocked,
        organization_blocked=organization.is_blocked,
        is_blocked=effective_block(membership, organization),
        is_expired=is_expired,
        subscription_end_date=organization.subscription_end_date,
    )


class ResolveAccessStateUseCase:
    """
    Read-only apart from the lazy profile ensure.

    Fault isolation over fail-fast: a tenant row that cannot be read is left
    out, and an unresolvable subscription plan degrades that tenant's
    expiration to unknown; neither fails the snapshot.
    """

    def __init__(self, store: TenantStore):
        self.store = store

    async def execute(self, principal_id: UUID) -> Result[AccessStateResponse]:
        """
        Execute resolve access state use case.

        Args:
            principal_id: Authenticated principal

        Returns:
            Result[AccessStateResponse]
        """
        async with self.store:
            profile, _ = await ensure_profile(self.store, principal_id)
            memberships = await self.store.memberships.list_by_principal_id(principal_id)

            entries: List[TenantAccess] = []
            for membership in memberships:
                entry = await self._resolve_entry(membership)
                if entry is not None:
                    entries.append(entry)

        active: Optional[TenantAccess] = None
        dangling: Optional[str] = None
        if profile.active_organization_id is not None:
            active_id = str(profile.active_organization_id)
            active = next((e for e in entries if e.organization_id == active_id), None)
            if active is None:
                dangling = active_id
                logger.warning(
                    f"Principal {principal_id} has active organization {active_id} "
                    "without a membership"
                )

        return Return.ok(
            AccessStateResponse(
                principal_id=str(principal_id),
                full_name=profile.full_name,
                active_organization=active,
                dangling_active_organization_id=dangling,
                is_super_admin=any(
                    m.role_name == RoleName.super_admin for m in memberships
                ),
                organizations=entries,
            )
        )

    async def _resolve_entry(self, membership: Membership) -> Optional[TenantAccess]:
        try:
            organization = await self.store.organizations.get_by_id(
                membership.organization_id
            )
        except DependencyError as exc:
            logger.warning(
                f"Skipping organization {membership.organization_id}: {exc}"
            )
            return None
        if organization is None:
            logger.warning(
                f"Membership {membership.id} references missing organization "
                f"{membership.organization_id}"
            )
            return None

        return build_tenant_access(
            membership, organization, await self._plan_resolves(organization)
        )

    async def _plan_resolves(self, organization: Organization) -> bool:
        if organization.subscription_plan_id is None:
            return False
        try:
            plan = await self.store.plans.get_by_id(organization.subscription_plan_id)
        except DependencyError as exc:
            logger.warning(f"Plan lookup failed for organization {organization.id}: {exc}")
            return False
        return plan is not None
