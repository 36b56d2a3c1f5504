"""
Update Organization Use Case

Administrative edit of contact fields, plan, subscription window and block flag.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.tenant_store import TenantStore
from src.domain.base import to_naive_utc, utcnow
from src.domain.errors import (
    DEFAULT_ORGANIZATION_IMMUTABLE,
    INVALID_INPUT,
    INVALID_SUBSCRIPTION_WINDOW,
    ORGANIZATION_NOT_FOUND,
    SUBSCRIPTION_PLAN_NOT_FOUND,
)

from .dtos import OrganizationResponse, UpdateOrganizationCommand, to_organization_response

CONTACT_FIELDS = ("email", "address", "phone")


class UpdateOrganizationUseCase:
    """
    Use case for editing an organization.

    Business Rules:
    - Only fields present in the command are changed
    - Name cannot be blank
    - Subscription end must be after start when both are set
    - Plan must exist
    - The default organization cannot be blocked
    - Registration and tax numbers are immutable
    """

    def __init__(self, store: TenantStore):
        self.store = store

    async def execute(
        self, organization_id: UUID, command: UpdateOrganizationCommand
    ) -> Result[OrganizationResponse]:
        fields = command.model_fields_set

        if "name" in fields and not (command.name and command.name.strip()):
            return Return.err(Error(INVALID_INPUT, "name cannot be blank"))

        async with self.store:
            organization = await self.store.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(Error(ORGANIZATION_NOT_FOUND, "Organization not found"))

            start = organization.subscription_start_date
            end = organization.subscription_end_date
            if "subscription_start_date" in fields:
                start = (
                    to_naive_utc(command.subscription_start_date)
                    if command.subscription_start_date
                    else None
                )
            if "subscription_end_date" in fields:
                end = (
                    to_naive_utc(command.subscription_end_date)
                    if command.subscription_end_date
                    else None
                )
            if start is not None and end is not None and end <= start:
                return Return.err(
                    Error(
                        INVALID_SUBSCRIPTION_WINDOW,
                        "Subscription end date must be after start date",
                    )
                )

            if "is_blocked" in fields and command.is_blocked and organization.is_default:
                return Return.err(
                    Error(
                        DEFAULT_ORGANIZATION_IMMUTABLE,
                        "The default organization cannot be blocked",
                    )
                )

            if "subscription_plan_id" in fields and command.subscription_plan_id is not None:
                plan = await self.store.plans.get_by_id(command.subscription_plan_id)
                if plan is None:
                    return Return.err(
                        Error(SUBSCRIPTION_PLAN_NOT_FOUND, "Subscription plan not found")
                    )

            if "name" in fields:
                organization.name = command.name.strip()
            for field_name in CONTACT_FIELDS:
                if field_name in fields:
                    setattr(organization, field_name, getattr(command, field_name) or None)
            if "subscription_plan_id" in fields:
                organization.subscription_plan_id = command.subscription_plan_id
            if "is_blocked" in fields and command.is_blocked is not None:
                organization.is_blocked = command.is_blocked
            organization.subscription_start_date = start
            organization.subscription_end_date = end
            organization.updated_at = utcnow()

            organization = await self.store.organizations.update(organization)

        return Return.ok(to_organization_response(organization))
