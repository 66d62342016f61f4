"""
List Invoices Use Case

Retrieves a filtered, paginated page of the owner's invoices.
"""
import math
from libs.result import Result, Return, Error, ErrorKind
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceFilters, InvoiceRepository
from .dtos import (
    InvoiceSummaryDTO,
    ListInvoicesQueryDTO,
    ListInvoicesResponseDTO,
    PaginationDTO,
)


class ListInvoices:
    """
    Use case: List invoices

    Filters by status, customer, issue-date range and free-text search over
    invoice number and customer name. Results are ordered newest first.
    """

    def __init__(self, invoice_repo: InvoiceRepository, customer_repo: CustomerRepository):
        self.invoice_repo = invoice_repo
        self.customer_repo = customer_repo

    async def execute(
        self, owner_id: str, query: ListInvoicesQueryDTO
    ) -> Result[ListInvoicesResponseDTO]:
        """
        List invoices for an owner.

        Args:
            owner_id: Authenticated owner
            query: Filters plus page (1-based) and limit

        Returns:
            Result[ListInvoicesResponseDTO]: Page of invoices with pagination metadata
        """
        if query.page < 1 or query.limit < 1:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="page and limit must be positive",
                    reason=f"page={query.page}, limit={query.limit}",
                    kind=ErrorKind.VALIDATION,
                )
            )

        filters = InvoiceFilters(
            status=query.status,
            customer_id=query.customer_id,
            start_date=query.start_date,
            end_date=query.end_date,
            search=query.search.strip() if query.search else None,
        )

        invoices, total = await self.invoice_repo.list(
            owner_id=owner_id,
            filters=filters,
            limit=query.limit,
            offset=(query.page - 1) * query.limit,
        )

        customer_ids = sorted({invoice.customer_id for invoice in invoices})
        customers = await self.customer_repo.get_by_ids(owner_id, customer_ids) if customer_ids else []
        names = {customer.id: customer.name for customer in customers}

        summaries = [
            InvoiceSummaryDTO(
                id=invoice.id,
                invoice_number=invoice.invoice_number,
                status=invoice.status.value if hasattr(invoice.status, "value") else invoice.status,
                issue_date=invoice.issue_date,
                due_date=invoice.due_date,
                customer_id=invoice.customer_id,
                customer_name=names.get(invoice.customer_id),
                total_amount=invoice.total_amount,
                created_at=invoice.created_at,
            )
            for invoice in invoices
        ]

        return Return.ok(
            ListInvoicesResponseDTO(
                invoices=summaries,
                pagination=PaginationDTO(
                    total=total,
                    page=query.page,
                    limit=query.limit,
                    total_pages=math.ceil(total / query.limit),
                ),
            )
        )
