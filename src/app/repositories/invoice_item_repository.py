"""Invoice Item Repository Interface"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice_item import InvoiceItem


class InvoiceItemRepository(ABC):
    """
    Repository interface for InvoiceItem persistence

    Items are only ever replaced as a whole set.
    """

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: str) -> List[InvoiceItem]:
        """
        Retrieve all items for an invoice ordered by their order field

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceItem
        """
        pass

    @abstractmethod
    async def create_many(self, items: List[InvoiceItem]) -> List[InvoiceItem]:
        pass

    @abstractmethod
    async def delete_by_invoice_id(self, invoice_id: str) -> int:
        """
        Delete every item of an invoice

        Returns:
            Number of deleted items
        """
        pass
