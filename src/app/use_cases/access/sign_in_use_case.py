"""
Sign In Use Case

Authenticates through the identity provider and lists the principal's
tenants so one can be selected.
"""

from libs.result import Error, Result, Return
from src.app.services.identity_provider import IdentityProvider
from src.app.services.profiles import ensure_profile
from src.app.services.tenant_store import TenantStore
from src.domain.errors import NO_MEMBERSHIPS

from .dtos import SignInResponse, TenantInfo


class SignInUseCase:
    """
    Use case for principal sign-in.

    Business Rules:
    - Credentials are verified by the identity provider
    - Principal must belong to at least one organization
    - Tenants are listed in membership order; the client selects one
      through the switch-tenant use case
    """

    def __init__(self, store: TenantStore, identity: IdentityProvider):
        self.store = store
        self.identity = identity

    async def execute(self, email: str, password: str) -> Result[SignInResponse]:
        authenticated = await self.identity.authenticate(email, password)
        if authenticated.is_err():
            return Return.err(authenticated.error)
        principal_id = authenticated.value

        async with self.store:
            memberships = await self.store.memberships.list_by_principal_id(principal_id)
            if not memberships:
                return Return.err(
                    Error(NO_MEMBERSHIPS, "You are not a member of any organization")
                )

            organizations = []
            for membership in memberships:
                organization = await self.store.organizations.get_by_id(
                    membership.organization_id
                )
                if organization is None:
                    continue
                organizations.append(
                    TenantInfo(
                        id=str(organization.id),
                        name=organization.name,
                        role=membership.role_name.value,
                    )
                )

            profile, _ = await ensure_profile(self.store, principal_id)

        access_token = await self.identity.issue_session(principal_id)

        return Return.ok(
            SignInResponse(
                access_token=access_token,
                principal_id=str(principal_id),
                active_organization_id=(
                    str(profile.active_organization_id)
                    if profile.active_organization_id
                    else None
                ),
                organizations=organizations,
            )
        )
