from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.membership_repository import MembershipRepository
from src.adapter.repositories.organization_repository import OrganizationRepository
from src.adapter.repositories.base import release
from src.adapter.repositories.profile_repository import ProfileRepository
from src.adapter.repositories.role_repository import RoleRepository
from src.adapter.repositories.subscription_plan_repository import SubscriptionPlanRepository
from src.app.services.tenant_store import TenantStore


class SqlAlchemyTenantStore(TenantStore):
    """SQLAlchemy implementation of TenantStore; each write commits on its own"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.profiles = ProfileRepository(self.session)
        self.organizations = OrganizationRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.roles = RoleRepository(self.session)
        self.plans = SubscriptionPlanRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Writes are already durable; drop any read-only transaction state
        await release(self.session)
