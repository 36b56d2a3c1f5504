from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.base import translate_errors
from src.app.repositories.profile_repository import IProfileRepository
from src.domain.entities import Profile


class ProfileRepository(IProfileRepository):
    """Profile repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_errors("profiles.get_by_principal_id")
    async def get_by_principal_id(self, principal_id: UUID) -> Optional[Profile]:
        """Get profile by principal ID"""
        stmt = select(Profile).where(Profile.principal_id == principal_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @translate_errors("profiles.create")
    async def create(self, profile: Profile) -> Profile:
        """Create a new profile"""
        self.session.add(profile)
        await self.session.commit()
        await self.session.refresh(profile)
        return profile

    @translate_errors("profiles.update")
    async def update(self, profile: Profile) -> Profile:
        """Update existing profile"""
        self.session.add(profile)
        await self.session.commit()
        await self.session.refresh(profile)
        return profile

    @translate_errors("profiles.delete")
    async def delete(self, profile_id: UUID) -> None:
        stmt = delete(Profile).where(Profile.id == profile_id)
        await self.session.execute(stmt)
        await self.session.commit()
