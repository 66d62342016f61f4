"""DuplicateInvoice Use Case"""

import logging
from typing import Optional

from libs.result import Result, Return, Error, ErrorKind
from src.domain.base import utc_now
from src.app.services.audit_service import AuditService, record_best_effort
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.invoice import InvoiceStatus
from .create_invoice import CreateInvoice
from .dtos import CreateInvoiceCommandDTO, InvoiceDetailDTO
from .items import to_item_inputs

logger = logging.getLogger(__name__)


class DuplicateInvoice:
    """
    Use Case: Duplicate invoice

    Copies customer, items, tax/discount settings, notes, terms, footer and
    template into a new DRAFT invoice issued today. Numbering, pricing and
    persistence are delegated to CreateInvoice.
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        create_invoice: CreateInvoice,
        audit_service: Optional[AuditService] = None,
    ):
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo
        self.create_invoice = create_invoice
        self.audit_service = audit_service

    async def execute(self, owner_id: str, invoice_id: str) -> Result[InvoiceDetailDTO]:
        source = await self.invoice_repo.get_by_id(invoice_id, owner_id)
        if not source:
            return Return.err(
                Error(
                    code="INVOICE_NOT_FOUND",
                    message=f"Invoice {invoice_id} not found",
                    kind=ErrorKind.NOT_FOUND,
                )
            )

        items = await self.item_repo.get_by_invoice_id(source.id)

        command = CreateInvoiceCommandDTO(
            customer_id=source.customer_id,
            items=to_item_inputs(items),
            issue_date=utc_now().date(),
            status=InvoiceStatus.DRAFT,
            tax_rate=source.tax_rate,
            tax_name=source.tax_name,
            discount_type=source.discount_type,
            discount_value=source.discount_value,
            notes=source.notes,
            terms=source.terms,
            footer=source.footer,
            template_id=source.template_id,
        )

        result = await self.create_invoice.execute(owner_id, command)
        if result.is_err():
            return result

        duplicate = result.value
        logger.info(f"Duplicated invoice {source.invoice_number} as {duplicate.invoice_number}")
        await record_best_effort(
            self.audit_service,
            owner_id,
            "DUPLICATE",
            "invoice",
            duplicate.id,
            {"source_invoice_id": source.id},
        )
        return result
