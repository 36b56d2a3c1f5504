from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Membership


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, membership_id: UUID) -> Optional[Membership]:
        """Get membership by ID"""
        pass

    @abstractmethod
    async def get_by_principal_and_organization(
        self, principal_id: UUID, organization_id: UUID
    ) -> Optional[Membership]:
        """Get membership by principal and organization"""
        pass

    @abstractmethod
    async def list_by_principal_id(self, principal_id: UUID) -> List[Membership]:
        """Get all memberships for a principal, oldest first"""
        pass

    @abstractmethod
    async def list_by_organization_id(self, organization_id: UUID) -> List[Membership]:
        """Get all memberships for an organization, oldest first"""
        pass

    @abstractmethod
    async def count_by_organization_id(self, organization_id: UUID) -> int:
        """Count memberships of an organization, block status irrelevant"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        pass

    @abstractmethod
    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        pass

    @abstractmethod
    async def delete(self, membership_id: UUID) -> None:
        """Hard delete a membership"""
        pass
