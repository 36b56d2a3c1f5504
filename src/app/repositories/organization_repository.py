from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Organization


class IOrganizationRepository(ABC):
    """Organization repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, organization_id: UUID) -> Optional[Organization]:
        """Get organization by ID"""
        pass

    @abstractmethod
    async def get_default(self) -> Optional[Organization]:
        """Get the organization marked is_default"""
        pass

    @abstractmethod
    async def find_by_registration_or_tax_number(
        self, registration_number: str, tax_number: str
    ) -> List[Organization]:
        """Organizations using either identifier"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Organization]:
        """All organizations ordered by name"""
        pass

    @abstractmethod
    async def list_non_default(self) -> List[Organization]:
        """All organizations except the default one, ordered by name"""
        pass

    @abstractmethod
    async def create(self, organization: Organization) -> Organization:
        """Create a new organization"""
        pass

    @abstractmethod
    async def update(self, organization: Organization) -> Organization:
        """Update existing organization"""
        pass

    @abstractmethod
    async def delete(self, organization_id: UUID) -> None:
        """Delete an organization (saga compensation only)"""
        pass
