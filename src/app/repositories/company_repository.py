"""Company Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.company import Company


class CompanyRepository(ABC):
    """Repository interface for the owner's company profile"""

    @abstractmethod
    async def get_by_owner_id(self, owner_id: str) -> Optional[Company]:
        """
        Retrieve the owner's company profile

        Args:
            owner_id: Owning user

        Returns:
            Company if the owner has set one up, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, company: Company) -> Company:
        pass

    @abstractmethod
    async def update(self, company: Company) -> Company:
        pass
