from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Role, RoleName


class IRoleRepository(ABC):
    """Role repository interface - application layer"""

    @abstractmethod
    async def get_by_name(self, name: RoleName) -> Optional[Role]:
        """Get role row by name"""
        pass

    @abstractmethod
    async def create(self, role: Role) -> Role:
        """Create a role (seeding only)"""
        pass
