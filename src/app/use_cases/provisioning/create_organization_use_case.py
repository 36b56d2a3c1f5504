"""
Create Organization Use Case

Registers a brand-new tenant and makes the (new or existing) principal its
Admin. The tenant store has no multi-row transactions, so the flow runs as a
compensable saga.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.identity_provider import IdentityProvider
from src.app.services.memberships import insert_membership, load_membership_snapshot
from src.app.services.profiles import ensure_profile
from src.app.services.saga import Saga, SagaStep
from src.app.services.tenant_store import TenantStore
from src.domain.base import utcnow
from src.domain.entities import (
    AssignmentPath,
    Membership,
    Organization,
    Profile,
    RoleName,
)
from src.domain.errors import (
    INVALID_CREDENTIALS,
    INVALID_INPUT,
    TENANT_ALREADY_EXISTS,
    StoreConflictError,
)
from src.domain.rules import check_membership_insert

from .dtos import CreateOrganizationCommand, OrganizationSummary, ProvisioningResponse

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


@dataclass
class CreateOrganizationContext:
    command: CreateOrganizationCommand
    principal_id: Optional[UUID] = None
    principal_created: bool = False
    profile: Optional[Profile] = None
    profile_created: bool = False
    previous_active_organization_id: Optional[UUID] = None
    organization: Optional[Organization] = None
    membership: Optional[Membership] = None


class CreateOrganizationUseCase:
    """
    Saga: principal becomes Admin of a brand-new tenant.

    Steps (compensation in brackets):
    1. Registration and tax numbers unused by any tenant [none]
    2. Sign in, or create the principal [delete principal if created]
    3. Ensure profile [delete profile if created]
    4. Create organization on the cheapest plan [delete organization]
    5. Point the profile's active tenant at it [restore previous value]
    6. Insert Admin membership [delete membership]
    """

    def __init__(self, store: TenantStore, identity: IdentityProvider):
        self.store = store
        self.identity = identity

    async def execute(
        self, command: CreateOrganizationCommand
    ) -> Result[ProvisioningResponse]:
        """
        Execute create organization use case.

        Args:
            command: CreateOrganizationCommand with organization and credentials

        Returns:
            Result[ProvisioningResponse], or the failing step's Error with
            compensation outcomes in error.details
        """
        error = self._validate(command)
        if error is not None:
            return Return.err(error)

        saga = Saga(
            "create_organization",
            [
                SagaStep("check_identifiers", self._check_identifiers),
                SagaStep(
                    "resolve_principal",
                    self._resolve_principal,
                    compensation=self._delete_principal,
                    compensate_if=lambda ctx: ctx.principal_created,
                ),
                SagaStep(
                    "ensure_profile",
                    self._ensure_profile,
                    compensation=self._delete_profile,
                    compensate_if=lambda ctx: ctx.profile_created,
                ),
                SagaStep(
                    "create_organization",
                    self._create_organization,
                    compensation=self._delete_organization,
                ),
                SagaStep(
                    "set_active_organization",
                    self._set_active_organization,
                    compensation=self._restore_active_organization,
                ),
                SagaStep(
                    "insert_admin_membership",
                    self._insert_membership,
                    compensation=self._delete_membership,
                ),
            ],
        )

        async with self.store:
            result = await saga.run(CreateOrganizationContext(command=command))

        if result.is_err():
            return Return.err(result.error)

        ctx = result.value
        logger.info(
            f"Organization {ctx.organization.id} created by principal {ctx.principal_id}"
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

    @staticmethod
    def _validate(command: CreateOrganizationCommand) -> Optional[Error]:
        for field_name in ("organization_name", "registration_number", "tax_number", "email"):
            if not getattr(command, field_name).strip():
                return Error(INVALID_INPUT, f"{field_name} is required")
        if len(command.password) < MIN_PASSWORD_LENGTH:
            return Error(
                INVALID_INPUT,
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            )
        return None

    # Forward steps

    async def _check_identifiers(self, ctx: CreateOrganizationContext) -> Result[None]:
        existing = await self.store.organizations.find_by_registration_or_tax_number(
            ctx.command.registration_number.strip(), ctx.command.tax_number.strip()
        )
        if existing:
            return Return.err(
                Error(
                    TENANT_ALREADY_EXISTS,
                    "An organization with this registration number or tax number already exists",
                )
            )
        return Return.ok(None)

    async def _resolve_principal(self, ctx: CreateOrganizationContext) -> Result[UUID]:
        command = ctx.command
        signed_in = await self.identity.authenticate(command.email, command.password)
        if signed_in.is_ok():
            ctx.principal_id = signed_in.value
            return signed_in
        if signed_in.error.code != INVALID_CREDENTIALS:
            return signed_in

        # Unknown email, or a known one with a different password; the
        # provider reports the latter as ALREADY_REGISTERED
        created = await self.identity.create_principal(command.email, command.password)
        if created.is_err():
            return created
        ctx.principal_id = created.value
        ctx.principal_created = True
        return created

    async def _ensure_profile(self, ctx: CreateOrganizationContext) -> Result[Profile]:
        profile, created = await ensure_profile(
            self.store, ctx.principal_id, full_name=ctx.command.full_name
        )
        ctx.profile = profile
        ctx.profile_created = created
        return Return.ok(profile)

    async def _create_organization(
        self, ctx: CreateOrganizationContext
    ) -> Result[Organization]:
        command = ctx.command
        plans = await self.store.plans.list_all()
        organization = Organization(
            name=command.organization_name.strip(),
            registration_number=command.registration_number.strip(),
            tax_number=command.tax_number.strip(),
            address=command.address or None,
            phone=command.phone or None,
            email=command.contact_email or None,
            is_default=False,
            subscription_plan_id=plans[0].id if plans else None,
        )
        try:
            ctx.organization = await self.store.organizations.create(organization)
        except StoreConflictError:
            # A concurrent request claimed the identifiers after the check
            return Return.err(
                Error(
                    TENANT_ALREADY_EXISTS,
                    "An organization with this registration number or tax number already exists",
                )
            )
        return Return.ok(ctx.organization)

    async def _set_active_organization(
        self, ctx: CreateOrganizationContext
    ) -> Result[Profile]:
        ctx.previous_active_organization_id = ctx.profile.active_organization_id
        ctx.profile.active_organization_id = ctx.organization.id
        ctx.profile.last_active_at = utcnow()
        ctx.profile.updated_at = utcnow()
        ctx.profile = await self.store.profiles.update(ctx.profile)
        return Return.ok(ctx.profile)

    async def _insert_membership(
        self, ctx: CreateOrganizationContext
    ) -> Result[Membership]:
        snapshot = await load_membership_snapshot(
            self.store, ctx.principal_id, ctx.organization
        )
        allowed = check_membership_insert(
            ctx.principal_id,
            ctx.organization.id,
            RoleName.admin,
            snapshot,
            path=AssignmentPath.organization_creation,
        )
        if allowed.is_err():
            return allowed

        inserted = await insert_membership(
            self.store, ctx.principal_id, ctx.organization.id, RoleName.admin
        )
        if inserted.is_ok():
            ctx.membership = inserted.value
        return inserted

    # Compensations

    async def _delete_principal(self, ctx: CreateOrganizationContext) -> None:
        await self.identity.delete_principal(ctx.principal_id)

    async def _delete_profile(self, ctx: CreateOrganizationContext) -> None:
        await self.store.profiles.delete(ctx.profile.id)

    async def _delete_organization(self, ctx: CreateOrganizationContext) -> None:
        await self.store.organizations.delete(ctx.organization.id)

    async def _restore_active_organization(self, ctx: CreateOrganizationContext) -> None:
        ctx.profile.active_organization_id = ctx.previous_active_organization_id
        ctx.profile.updated_at = utcnow()
        await self.store.profiles.update(ctx.profile)

    async def _delete_membership(self, ctx: CreateOrganizationContext) -> None:
        await self.store.memberships.delete(ctx.membership.id)
