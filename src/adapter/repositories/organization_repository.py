from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.base import translate_errors
from src.app.repositories.organization_repository import IOrganizationRepository
from src.domain.entities import Organization


class OrganizationRepository(IOrganizationRepository):
    """Organization repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_errors("organizations.get_by_id")
    async def get_by_id(self, organization_id: UUID) -> Optional[Organization]:
        """Get organization by ID"""
        stmt = select(Organization).where(Organization.id == organization_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @translate_errors("organizations.get_default")
    async def get_default(self) -> Optional[Organization]:
        stmt = select(Organization).where(Organization.is_default == True)  # noqa: E712
        result = await self.session.execute(stmt)
        return result.scalars().first()

    @translate_errors("organizations.find_by_registration_or_tax_number")
    async def find_by_registration_or_tax_number(
        self, registration_number: str, tax_number: str
    ) -> List[Organization]:
        stmt = select(Organization).where(
            or_(
                Organization.registration_number == registration_number,
                Organization.tax_number == tax_number,
            )
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @translate_errors("organizations.list_all")
    async def list_all(self) -> List[Organization]:
        stmt = select(Organization).order_by(Organization.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @translate_errors("organizations.list_non_default")
    async def list_non_default(self) -> List[Organization]:
        stmt = (
            select(Organization)
            .where(Organization.is_default == False)  # noqa: E712
            .order_by(Organization.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @translate_errors("organizations.create")
    async def create(self, organization: Organization) -> Organization:
        """Create a new organization"""
        self.session.add(organization)
        await self.session.commit()
        await self.session.refresh(organization)
        return organization

    @translate_errors("organizations.update")
    async def update(self, organization: Organization) -> Organization:
        """Update existing organization"""
        self.session.add(organization)
        await self.session.commit()
        await self.session.refresh(organization)
        return organization

    @translate_errors("organizations.delete")
    async def delete(self, organization_id: UUID) -> None:
        stmt = delete(Organization).where(Organization.id == organization_id)
        await self.session.execute(stmt)
        await self.session.commit()
