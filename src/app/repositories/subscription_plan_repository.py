from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import SubscriptionPlan


class ISubscriptionPlanRepository(ABC):
    """Subscription plan repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, plan_id: UUID) -> Optional[SubscriptionPlan]:
        """Get plan by ID"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[SubscriptionPlan]:
        """Get plan by name"""
        pass

    @abstractmethod
    async def list_all(self) -> List[SubscriptionPlan]:
        """All plans ordered by price"""
        pass

    @abstractmethod
    async def create(self, plan: SubscriptionPlan) -> SubscriptionPlan:
        """Create a plan (seeding only)"""
        pass
