"""
Join Organization Use Case

Makes a principal a Member of an existing tenant, creating the principal
first when asked to. Runs as a compensable saga over the tenant store and
the identity provider.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.identity_provider import IdentityProvider
from src.app.services.memberships import insert_membership, load_membership_snapshot
from src.app.services.profiles import ensure_profile
from src.app.services.saga import Saga, SagaStep
from src.app.services.tenant_store import TenantStore
from src.domain.base import utcnow
from src.domain.entities import AssignmentPath, Membership, Organization, Profile, RoleName
from src.domain.errors import INVALID_INPUT, ORGANIZATION_NOT_FOUND
from src.domain.rules import check_membership_insert

from .create_organization_use_case import MIN_PASSWORD_LENGTH
from .dtos import JoinOrganizationCommand, OrganizationSummary, ProvisioningResponse

logger = logging.getLogger(__name__)


@dataclass
class JoinOrganizationContext:
    command: JoinOrganizationCommand
    organization: Optional[Organization] = None
    principal_id: Optional[UUID] = None
    principal_created: bool = False
    profile: Optional[Profile] = None
    profile_created: bool = False
    previous_active_organization_id: Optional[UUID] = None
    membership: Optional[Membership] = None


class JoinOrganizationUseCase:
    """
    Saga: principal becomes Member of an existing, non-default tenant.

    New principal:
    1. Create principal [delete principal]
    2. Create profile with the target pre-selected as active [delete profile]
    Existing principal:
    1. Authenticate (must succeed) [none]
    2. Ensure profile [delete profile if created]
    Then:
    3. Membership invariant check against live seat count [none]
    4. Insert Member membership [delete membership]
    5. Existing principal only: switch active tenant [restore previous value]
    """

    def __init__(self, store: TenantStore, identity: IdentityProvider):
        self.store = store
        self.identity = identity

    async def execute(
        self, command: JoinOrganizationCommand
    ) -> Result[ProvisioningResponse]:
        """
        Execute join organization use case.

        Args:
            command: JoinOrganizationCommand with target and credentials

        Returns:
            Result[ProvisioningResponse], or the failing step's Error with
            compensation outcomes in error.details
        """
        if not command.email.strip():
            return Return.err(Error(INVALID_INPUT, "email is required"))
        if command.new_principal and len(command.password) < MIN_PASSWORD_LENGTH:
            return Return.err(
                Error(
                    INVALID_INPUT,
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
                )
            )

        async with self.store:
            result = await Saga("join_organization", self._steps(command)).run(
                JoinOrganizationContext(command=command)
            )

        if result.is_err():
            return Return.err(result.error)

        ctx = result.value
        logger.info(
            f"Principal {ctx.principal_id} joined organization {ctx.organization.id}"
        )
        return Return.ok(
            ProvisioningResponse(
                principal_id=str(ctx.principal_id),
                principal_created=ctx.principal_created,
                organization=OrganizationSummary(
                    id=str(ctx.organization.id), name=ctx.organization.name
                ),
                membership_id=str(ctx.membership.id),
                role=ctx.membership.role_name.value,
            )
        )

    def _steps(self, command: JoinOrganizationCommand) -> List[SagaStep]:
        steps: List[SagaStep] = [SagaStep("load_organization", self._load_organization)]

        if command.new_principal:
            steps += [
                SagaStep(
                    "create_principal",
                    self._create_principal,
                    compensation=self._delete_principal,
                ),
                SagaStep(
                    "create_profile",
                    self._create_profile,
                    compensation=self._delete_profile,
                    compensate_if=lambda ctx: ctx.profile_created,
                ),
            ]
        else:
            steps += [
                SagaStep("authenticate", self._authenticate),
                SagaStep(
                    "ensure_profile",
                    self._ensure_profile,
                    compensation=self._delete_profile,
                    compensate_if=lambda ctx: ctx.profile_created,
                ),
            ]

        steps += [
            SagaStep("check_membership", self._check_membership),
            SagaStep(
                "insert_member_membership",
                self._insert_membership,
                compensation=self._delete_membership,
            ),
        ]

        if not command.new_principal:
            steps.append(
                SagaStep(
                    "set_active_organization",
                    self._set_active_organization,
                    compensation=self._restore_active_organization,
                )
            )
        return steps

    # Forward steps

    async def _load_organization(
        self, ctx: JoinOrganizationContext
    ) -> Result[Organization]:
        organization = await self.store.organizations.get_by_id(
            ctx.command.organization_id
        )
        if organization is None:
            return Return.err(Error(ORGANIZATION_NOT_FOUND, "Organization not found"))
        if organization.is_default:
            return Return.err(
                Error(INVALID_INPUT, "The default organization cannot be joined")
            )
        ctx.organization = organization
        return Return.ok(organization)

    async def _create_principal(self, ctx: JoinOrganizationContext) -> Result[UUID]:
        created = await self.identity.create_principal(
            ctx.command.email, ctx.command.password
        )
        if created.is_ok():
            ctx.principal_id = created.value
            ctx.principal_created = True
        return created

    async def _create_profile(self, ctx: JoinOrganizationContext) -> Result[Profile]:
        profile, created = await ensure_profile(
            self.store,
            ctx.principal_id,
            full_name=ctx.command.full_name,
            active_organization_id=ctx.organization.id,
        )
        ctx.profile = profile
        ctx.profile_created = created
        return Return.ok(profile)

    async def _authenticate(self, ctx: JoinOrganizationContext) -> Result[UUID]:
        signed_in = await self.identity.authenticate(
            ctx.command.email, ctx.command.password
        )
        if signed_in.is_ok():
            ctx.principal_id = signed_in.value
        return signed_in

    async def _ensure_profile(self, ctx: JoinOrganizationContext) -> Result[Profile]:
        profile, created = await ensure_profile(
            self.store, ctx.principal_id, full_name=ctx.command.full_name
        )
        ctx.profile = profile
        ctx.profile_created = created
        return Return.ok(profile)

    async def _check_membership(self, ctx: JoinOrganizationContext) -> Result[None]:
        snapshot = await load_membership_snapshot(
            self.store, ctx.principal_id, ctx.organization
        )
        return check_membership_insert(
            ctx.principal_id,
            ctx.organization.id,
            RoleName.member,
            snapshot,
            path=AssignmentPath.self_service,
        )

    async def _insert_membership(
        self, ctx: JoinOrganizationContext
    ) -> Result[Membership]:
        inserted = await insert_membership(
            self.store, ctx.principal_id, ctx.organization.id, RoleName.member
        )
        if inserted.is_ok():
            ctx.membership = inserted.value
        return inserted

    async def _set_active_organization(
        self, ctx: JoinOrganizationContext
    ) -> Result[Profile]:
        ctx.previous_active_organization_id = ctx.profile.active_organization_id
        ctx.profile.active_organization_id = ctx.organization.id
        ctx.profile.last_active_at = utcnow()
        ctx.profile.updated_at = utcnow()
        ctx.profile = await self.store.profiles.update(ctx.profile)
        return Return.ok(ctx.profile)

    # Compensations

    async def _delete_principal(self, ctx: JoinOrganizationContext) -> None:
        await self.identity.delete_principal(ctx.principal_id)

    async def _delete_profile(self, ctx: JoinOrganizationContext) -> None:
        await self.store.profiles.delete(ctx.profile.id)

    async def _delete_membership(self, ctx: JoinOrganizationContext) -> None:
        await self.store.memberships.delete(ctx.membership.id)

    async def _restore_active_organization(self, ctx: JoinOrganizationContext) -> None:
        ctx.profile.active_organization_id = ctx.previous_active_organization_id
        ctx.profile.updated_at = utcnow()
        await self.store.profiles.update(ctx.profile)
