"""GetTopCustomers Use Case"""

from typing import List

from libs.result import Result, Return, Error, ErrorKind
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from .aggregations import top_customers
from .dtos import TopCustomerDTO


class GetTopCustomers:
    """Top customers by paid revenue; ties keep customer creation order"""

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        customer_repo: CustomerRepository,
        default_limit: int = 10,
    ):
        self.invoice_repo = invoice_repo
        self.customer_repo = customer_repo
        self.default_limit = default_limit

    async def execute(self, owner_id: str, limit: int = None) -> Result[List[TopCustomerDTO]]:
        limit = self.default_limit if limit is None else limit
        if limit < 1:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="limit must be positive",
                    kind=ErrorKind.VALIDATION,
                )
            )

        customers = await self.customer_repo.list_by_owner(owner_id)
        invoices = await self.invoice_repo.list_by_owner(owner_id)

        return Return.ok([
            TopCustomerDTO(
                id=entry.customer.id,
                name=entry.customer.name,
                company=entry.customer.company,
                email=entry.customer.email,
                total_revenue=entry.total_revenue,
                invoice_count=entry.invoice_count,
            )
            for entry in top_customers(customers, invoices, limit)
        ])
