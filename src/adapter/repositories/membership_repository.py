from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.base import translate_errors
from src.app.repositories.membership_repository import IMembershipRepository
from src.domain.entities import Membership


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_errors("memberships.get_by_id")
    async def get_by_id(self, membership_id: UUID) -> Optional[Membership]:
        """Get membership by ID"""
        stmt = select(Membership).where(Membership.id == membership_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @translate_errors("memberships.get_by_principal_and_organization")
    async def get_by_principal_and_organization(
        self, principal_id: UUID, organization_id: UUID
    ) -> Optional[Membership]:
        """Get membership by principal and organization"""
        stmt = select(Membership).where(
            Membership.principal_id == principal_id,
            Membership.organization_id == organization_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @translate_errors("memberships.list_by_principal_id")
    async def list_by_principal_id(self, principal_id: UUID) -> List[Membership]:
        """Get all memberships for a principal, oldest first"""
        stmt = (
            select(Membership)
            .where(Membership.principal_id == principal_id)
            .order_by(Membership.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @translate_errors("memberships.list_by_organization_id")
    async def list_by_organization_id(self, organization_id: UUID) -> List[Membership]:
        """Get all memberships for an organization, oldest first"""
        stmt = (
            select(Membership)
            .where(Membership.organization_id == organization_id)
            .order_by(Membership.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @translate_errors("memberships.count_by_organization_id")
    async def count_by_organization_id(self, organization_id: UUID) -> int:
        """Count memberships of an organization"""
        stmt = (
            select(func.count())
            .select_from(Membership)
            .where(Membership.organization_id == organization_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    @translate_errors("memberships.create")
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        self.session.add(membership)
        await self.session.commit()
        await self.session.refresh(membership)
        return membership

    @translate_errors("memberships.update")
    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        self.session.add(membership)
        await self.session.commit()
        await self.session.refresh(membership)
        return membership

    @translate_errors("memberships.delete")
    async def delete(self, membership_id: UUID) -> None:
        """Hard delete a membership"""
        stmt = delete(Membership).where(Membership.id == membership_id)
        await self.session.execute(stmt)
        await self.session.commit()
