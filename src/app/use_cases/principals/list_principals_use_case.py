"""
List Principals Use Case

Administrative user list. Profiles are ensured for every principal on the
way, matching the lazy-profile rule.
"""

from libs.result import Result, Return
from src.app.services.identity_provider import IdentityProvider
from src.app.services.profiles import ensure_profile
from src.app.services.tenant_store import TenantStore
from src.domain.rules import display_name, effective_block

from .dtos import PrincipalListResponse, PrincipalMembership, PrincipalOverview


class ListPrincipalsUseCase:
    """Every principal with display name, active tenant and memberships"""

    def __init__(self, store: TenantStore, identity: IdentityProvider):
        self.store = store
        self.identity = identity

    async def execute(self) -> Result[PrincipalListResponse]:
        principals = await self.identity.list_principals()

        overviews = []
        async with self.store:
            for principal in principals:
                profile, _ = await ensure_profile(self.store, principal.id)
                memberships = await self.store.memberships.list_by_principal_id(principal.id)

                entries = []
                for membership in memberships:
                    organization = await self.store.organizations.get_by_id(
                        membership.organization_id
                    )
                    if organization is None:
                        continue
                    entries.append(
                        PrincipalMembership(
                            membership_id=str(membership.id),
                            organization_id=str(organization.id),
                            organization_name=organization.name,
                            role=membership.role_name.value,
                            is_blocked=effective_block(membership, organization),
                        )
                    )

                overviews.append(
                    PrincipalOverview(
                        id=str(principal.id),
                        email=principal.email,
                        display_name=display_name(principal.email, profile),
                        full_name=profile.full_name,
                        active_organization_id=(
                            str(profile.active_organization_id)
                            if profile.active_organization_id
                            else None
                        ),
                        last_active_at=profile.last_active_at,
                        memberships=entries,
                    )
                )

        overviews.sort(key=lambda p: p.display_name.lower())
        return Return.ok(PrincipalListResponse(principals=overviews))
