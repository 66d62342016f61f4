"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import Optional, List, Tuple
from datetime import date
from sqlalchemy import delete, or_
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceFilters, InvoiceRepository
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Every read is filtered by owner_id; an invoice of another owner is
    indistinguishable from a missing one.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice
        """
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: str, owner_id: str) -> Optional[Invoice]:
        statement = (
            select(Invoice)
            .where(Invoice.id == invoice_id)
            .where(Invoice.owner_id == owner_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    def _filtered(self, statement, owner_id: str, filters: InvoiceFilters):
        statement = statement.where(Invoice.owner_id == owner_id)

        if filters.status:
            statement = statement.where(Invoice.status == filters.status)
        if filters.customer_id:
            statement = statement.where(Invoice.customer_id == filters.customer_id)
        if filters.start_date:
            statement = statement.where(Invoice.issue_date >= filters.start_date)
        if filters.end_date:
            statement = statement.where(Invoice.issue_date <= filters.end_date)
        if filters.search:
            # Literal substring match; % and _ in the search text are escaped
            statement = statement.join(Customer, Customer.id == Invoice.customer_id).where(
                or_(
                    Invoice.invoice_number.icontains(filters.search, autoescape=True),
                    Customer.name.icontains(filters.search, autoescape=True),
                )
            )

        return statement

    async def list(
        self,
        owner_id: str,
        filters: Optional[InvoiceFilters] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> Tuple[List[Invoice], int]:
        """
        Retrieve one page of an owner's invoices, newest first

        Returns:
            (invoices, total matching count)
        """
        filters = filters or InvoiceFilters()

        count_statement = self._filtered(
            select(func.count()).select_from(Invoice), owner_id, filters
        )
        total = (await self.session.execute(count_statement)).scalar_one()

        statement = (
            self._filtered(select(Invoice), owner_id, filters)
            .order_by(Invoice.created_at.desc(), Invoice.invoice_number.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all()), total

    async def update(self, invoice: Invoice) -> Invoice:
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def delete(self, invoice: Invoice) -> None:
        await self.session.execute(delete(InvoiceItem).where(InvoiceItem.invoice_id == invoice.id))
        await self.session.delete(invoice)
        await self.session.flush()

    async def get_last_invoice_number(self, owner_id: str, prefix: str) -> Optional[str]:
        """
        Invoice number of the owner's most recently created invoice with prefix

        Args:
            owner_id: Owning user
            prefix: e.g. "INV-2024-"

        Returns:
            Invoice number, or None when the owner has none with that prefix
        """
        statement = (
            select(Invoice.invoice_number)
            .where(Invoice.owner_id == owner_id)
            .where(Invoice.invoice_number.startswith(prefix, autoescape=True))
            .order_by(Invoice.created_at.desc(), Invoice.invoice_number.desc())
            .limit(1)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def count_by_customer(self, customer_id: str) -> int:
        statement = (
            select(func.count())
            .select_from(Invoice)
            .where(Invoice.customer_id == customer_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def count_by_template(self, template_id: str) -> int:
        statement = (
            select(func.count())
            .select_from(Invoice)
            .where(Invoice.template_id == template_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def list_by_owner(
        self,
        owner_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Invoice]:
        statement = select(Invoice).where(Invoice.owner_id == owner_id)

        if start_date:
            statement = statement.where(Invoice.issue_date >= start_date)
        if end_date:
            statement = statement.where(Invoice.issue_date <= end_date)

        statement = statement.order_by(Invoice.issue_date, Invoice.created_at)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_recent(self, owner_id: str, limit: int = 5) -> List[Invoice]:
        statement = (
            select(Invoice)
            .where(Invoice.owner_id == owner_id)
            .order_by(Invoice.created_at.desc(), Invoice.invoice_number.desc())
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
