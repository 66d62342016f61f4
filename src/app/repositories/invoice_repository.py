"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional, List, Tuple
from src.domain.invoice import Invoice, InvoiceStatus


@dataclass
class InvoiceFilters:
    status: Optional[InvoiceStatus] = None
    customer_id: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    search: Optional[str] = None


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Provides owner-scoped access to invoice data.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice

        Raises:
            IntegrityError: If (owner_id, invoice_number) already exists
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: str, owner_id: str) -> Optional[Invoice]:
        """
        Retrieve invoice by ID within the owner's scope

        Args:
            invoice_id: Invoice ID
            owner_id: Owning user

        Returns:
            Invoice if found and owned, None otherwise
        """
        pass

    @abstractmethod
    async def list(
        self,
        owner_id: str,
        filters: InvoiceFilters,
        limit: int = 10,
        offset: int = 0,
    ) -> Tuple[List[Invoice], int]:
        """
        List invoices matching filters, newest first

        Args:
            owner_id: Owning user
            filters: Status, customer, issue-date range and free-text search
                     (case-insensitive over invoice number and customer name)
            limit: Page size
            offset: Rows to skip

        Returns:
            Tuple of (page of invoices, total matching count)
        """
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        pass

    @abstractmethod
    async def delete(self, invoice: Invoice) -> None:
        """Delete an invoice together with its items"""
        pass

    @abstractmethod
    async def get_last_invoice_number(self, owner_id: str, prefix: str) -> Optional[str]:
        """
        Invoice number of the owner's most recently created invoice with prefix

        Args:
            owner_id: Owning user
            prefix: Number prefix, e.g. "INV-2024-"

        Returns:
            Invoice number string, or None if the owner has none with prefix
        """
        pass

    @abstractmethod
    async def count_by_customer(self, customer_id: str) -> int:
        pass

    @abstractmethod
    async def count_by_template(self, template_id: str) -> int:
        pass

    @abstractmethod
    async def list_by_owner(
        self,
        owner_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Invoice]:
        """
        All invoices of an owner, optionally bounded by issue date (inclusive)

        Used by read-only analytics.
        """
        pass

    @abstractmethod
    async def list_recent(self, owner_id: str, limit: int = 5) -> List[Invoice]:
        pass
