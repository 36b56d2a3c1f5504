from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.base import translate_errors
from src.app.repositories.subscription_plan_repository import ISubscriptionPlanRepository
from src.domain.entities import SubscriptionPlan


class SubscriptionPlanRepository(ISubscriptionPlanRepository):
    """Subscription plan repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_errors("plans.get_by_id")
    async def get_by_id(self, plan_id: UUID) -> Optional[SubscriptionPlan]:
        stmt = select(SubscriptionPlan).where(SubscriptionPlan.id == plan_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @translate_errors("plans.get_by_name")
    async def get_by_name(self, name: str) -> Optional[SubscriptionPlan]:
        stmt = select(SubscriptionPlan).where(SubscriptionPlan.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @translate_errors("plans.list_all")
    async def list_all(self) -> List[SubscriptionPlan]:
        stmt = select(SubscriptionPlan).order_by(SubscriptionPlan.price)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @translate_errors("plans.create")
    async def create(self, plan: SubscriptionPlan) -> SubscriptionPlan:
        self.session.add(plan)
        await self.session.commit()
        await self.session.refresh(plan)
        return plan
