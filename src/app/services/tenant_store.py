from abc import ABC, abstractmethod

from src.app.repositories.membership_repository import IMembershipRepository
from src.app.repositories.organization_repository import IOrganizationRepository
from src.app.repositories.profile_repository import IProfileRepository
from src.app.repositories.role_repository import IRoleRepository
from src.app.repositories.subscription_plan_repository import ISubscriptionPlanRepository


class TenantStore(ABC):
    """
    Abstract Tenant Store - repository access without multi-row transactions.

    Every create/update/delete is atomic for its own row and durable once it
    returns. There is no commit or rollback: multi-step operations compensate
    explicitly (see Saga).
    """

    # Repository properties (initialized in __aenter__)
    profiles: IProfileRepository
    organizations: IOrganizationRepository
    memberships: IMembershipRepository
    roles: IRoleRepository
    plans: ISubscriptionPlanRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass
