"""
List Joinable Organizations Use Case

Feeds the join form's tenant picker.
"""

from libs.result import Result, Return
from src.app.services.tenant_store import TenantStore

from .dtos import JoinableOrganizationsResponse, OrganizationSummary


class ListJoinableOrganizationsUseCase:
    """All non-default organizations, ordered by name"""

    def __init__(self, store: TenantStore):
        self.store = store

    async def execute(self) -> Result[JoinableOrganizationsResponse]:
        async with self.store:
            organizations = await self.store.organizations.list_non_default()

        return Return.ok(
            JoinableOrganizationsResponse(
                organizations=[
                    OrganizationSummary(id=str(org.id), name=org.name)
                    for org in organizations
                ]
            )
        )
