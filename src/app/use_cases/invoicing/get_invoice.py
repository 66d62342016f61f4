"""GetInvoice Use Case

Retrieves one invoice with its items, customer and company.
"""

from libs.result import Result, Return, Error, ErrorKind
from src.app.repositories.company_repository import CompanyRepository
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from .dtos import InvoiceDetailDTO


class GetInvoice:
    """
    Use Case: Get invoice

    Invoices of other owners resolve as INVOICE_NOT_FOUND. Items are
    returned in their stored order.
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        customer_repo: CustomerRepository,
        company_repo: CompanyRepository,
    ):
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo
        self.customer_repo = customer_repo
        self.company_repo = company_repo

    async def execute(self, owner_id: str, invoice_id: str) -> Result[InvoiceDetailDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id, owner_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice {invoice_id} not found",
                        kind=ErrorKind.NOT_FOUND,
                    )
                )

            items = await self.item_repo.get_by_invoice_id(invoice.id)
            customer = await self.customer_repo.get_by_id(invoice.customer_id, owner_id)
            company = await self.company_repo.get_by_owner_id(owner_id)

            return Return.ok(InvoiceDetailDTO.from_entities(invoice, items, customer, company))

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_INVOICE_FAILED",
                    message="Failed to retrieve invoice",
                    reason=str(e),
                )
            )
