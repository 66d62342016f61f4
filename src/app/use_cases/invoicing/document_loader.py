"""Resolves an invoice into its render model"""

from dataclasses import dataclass

from libs.result import Result, Return, Error, ErrorKind
from src.app.repositories.company_repository import CompanyRepository
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.services.render_model import InvoiceRenderModel, build_render_model
from src.domain.customer import Customer
from src.domain.invoice import Invoice


@dataclass
class LoadedInvoiceDocument:
    invoice: Invoice
    customer: Customer
    model: InvoiceRenderModel


class InvoiceDocumentLoader:
    """
    Loads an owner's invoice with everything a document needs

    A document cannot be produced without both parties, so a missing
    customer or company profile is reported as INVOICE_NOT_RENDERABLE.
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        customer_repo: CustomerRepository,
        company_repo: CompanyRepository,
        currency_symbol: str = "$",
    ):
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo
        self.customer_repo = customer_repo
        self.company_repo = company_repo
        self.currency_symbol = currency_symbol

    async def load(self, owner_id: str, invoice_id: str) -> Result[LoadedInvoiceDocument]:
        invoice = await self.invoice_repo.get_by_id(invoice_id, owner_id)
        if not invoice:
            return Return.err(
                Error(
                    code="INVOICE_NOT_FOUND",
                    message=f"Invoice {invoice_id} not found",
                    kind=ErrorKind.NOT_FOUND,
                )
            )

        customer = await self.customer_repo.get_by_id(invoice.customer_id, owner_id)
        company = await self.company_repo.get_by_owner_id(owner_id)
        if not customer or not company:
            missing = "customer" if not customer else "company profile"
            return Return.err(
                Error(
                    code="INVOICE_NOT_RENDERABLE",
                    message=f"Invoice {invoice.invoice_number} cannot be rendered",
                    reason=f"Missing {missing}",
                    kind=ErrorKind.VALIDATION,
                )
            )

        items = await self.item_repo.get_by_invoice_id(invoice.id)
        model = build_render_model(invoice, items, customer, company, self.currency_symbol)
        return Return.ok(LoadedInvoiceDocument(invoice=invoice, customer=customer, model=model))
