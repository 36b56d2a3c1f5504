"""
Reference data seeding

Creates the role rows, the configured subscription plans and the single
default organization. Safe to run on every start-up.
"""

import logging

from src.app.services.identity_provider import IdentityProvider
from src.app.services.memberships import insert_membership
from src.app.services.profiles import ensure_profile
from src.app.services.tenant_store import TenantStore
from src.domain.entities import Organization, Role, RoleName, SubscriptionPlan

logger = logging.getLogger(__name__)


async def seed_reference_data(store: TenantStore, config) -> None:
    async with store:
        for role_name in RoleName:
            if await store.roles.get_by_name(role_name) is None:
                await store.roles.create(Role(name=role_name))
                logger.info(f"Seeded role {role_name.value}")

        for plan in config.SUBSCRIPTION_PLANS:
            if await store.plans.get_by_name(plan["name"]) is None:
                await store.plans.create(
                    SubscriptionPlan(
                        name=plan["name"],
                        max_users=plan["max_users"],
                        price=plan.get("price", 0),
                        currency=plan.get("currency", "USD"),
                    )
                )
                logger.info(f"Seeded subscription plan {plan['name']}")

        if await store.organizations.get_default() is None:
            default = config.DEFAULT_ORGANIZATION
            await store.organizations.create(
                Organization(
                    name=default["name"],
                    registration_number=default["registration_number"],
                    tax_number=default["tax_number"],
                    is_default=True,
                )
            )
            logger.info("Seeded default organization")


async def seed_super_admin(
    store: TenantStore, identity: IdentityProvider, email: str, password=None
) -> None:
    """
    Give the principal with this email a Super-admin membership in the
    default organization, creating the principal when a password is given.

    Super-admin is never assignable through the membership operations, so
    this is the only way the role enters the system.
    """
    principal = await identity.find_by_email(email)
    if principal is None:
        if not password:
            logger.warning(f"Super-admin {email} not found and no password configured")
            return
        created = await identity.create_principal(email, password)
        if created.is_err():
            logger.error(f"Could not create super-admin {email}: {created.error.message}")
            return
        principal_id = created.value
    else:
        principal_id = principal.id

    async with store:
        default = await store.organizations.get_default()
        if default is None:
            logger.error("Default organization missing, super-admin not seeded")
            return

        await ensure_profile(store, principal_id, active_organization_id=default.id)
        existing = await store.memberships.get_by_principal_and_organization(
            principal_id, default.id
        )
        if existing is not None:
            return

        inserted = await insert_membership(
            store, principal_id, default.id, RoleName.super_admin
        )
        if inserted.is_err():
            logger.error(f"Could not seed super-admin {email}: {inserted.error.message}")
            return
        logger.info(f"Seeded super-admin {email}")
