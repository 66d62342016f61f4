"""Customer Repository Interface

Defines the contract for owner-scoped customer persistence.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain.customer import Customer


class CustomerRepository(ABC):
    """
    Repository interface for Customer persistence

    Every lookup takes the owner id; a customer of another owner is
    indistinguishable from a missing one.
    """

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        """
        Create a new customer

        Raises:
            IntegrityError: If (owner_id, email) already exists
        """
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: str, owner_id: str) -> Optional[Customer]:
        """
        Retrieve customer by ID within the owner's scope

        Args:
            customer_id: Customer ID
            owner_id: Owning user

        Returns:
            Customer if found and owned, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_email(self, owner_id: str, email: str) -> Optional[Customer]:
        pass

    @abstractmethod
    async def get_by_ids(self, owner_id: str, customer_ids: List[str]) -> List[Customer]:
        pass

    @abstractmethod
    async def list(
        self,
        owner_id: str,
        search: Optional[str] = None,
        is_active: Optional[bool] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> Tuple[List[Customer], int]:
        """
        List customers with optional search and pagination

        Args:
            owner_id: Owning user
            search: Case-insensitive substring of name, email or company
            is_active: Optional filter on activation flag
            limit: Page size
            offset: Rows to skip

        Returns:
            Tuple of (customers newest first, total matching count)
        """
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: str) -> List[Customer]:
        """All customers of an owner in creation order"""
        pass

    @abstractmethod
    async def count_active(self, owner_id: str) -> int:
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    async def delete(self, customer: Customer) -> None:
        pass
