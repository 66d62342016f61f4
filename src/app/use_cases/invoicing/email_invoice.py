"""EmailInvoice Use Case

Sends an invoice PDF to a recipient through the notification service.
"""

import logging
from typing import Optional

from libs.result import Result, Return, Error, ErrorKind
from src.app.services.document_renderer import DocumentRenderer
from src.app.services.notification_service import NotificationService
from .document_loader import InvoiceDocumentLoader
from .dtos import EmailInvoiceResponseDTO

logger = logging.getLogger(__name__)


class EmailInvoice:
    """
    Use Case: Email invoice

    Business Rules:
    1. Recipient defaults to the customer's email
    2. No recipient at all is a validation error
    3. A rendering failure is reported as an export error, before any delivery
    4. A rejected delivery is reported, never retried
    """

    def __init__(
        self,
        loader: InvoiceDocumentLoader,
        pdf_renderer: DocumentRenderer,
        notification_service: NotificationService,
    ):
        self.loader = loader
        self.pdf_renderer = pdf_renderer
        self.notification_service = notification_service

    async def execute(
        self, owner_id: str, invoice_id: str, recipient: Optional[str] = None
    ) -> Result[EmailInvoiceResponseDTO]:
        loaded = await self.loader.load(owner_id, invoice_id)
        if loaded.is_err():
            return Return.err(loaded.error)

        document = loaded.value
        to_address = recipient or document.customer.email
        if not to_address:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Customer has no email address and no recipient was given",
                    kind=ErrorKind.VALIDATION,
                )
            )

        invoice_number = document.invoice.invoice_number
        try:
            pdf = self.pdf_renderer.render(document.model)
        except Exception as e:
            logger.error(f"Failed to render invoice {invoice_number} for email: {e}")
            return Return.err(
                Error(
                    code="EXPORT_INVOICE_FAILED",
                    message="Failed to render invoice document",
                    reason=str(e),
                )
            )

        try:
            sent = await self.notification_service.send_invoice(to_address, invoice_number, pdf)
        except Exception as e:
            logger.error(f"Failed to deliver invoice {invoice_number}: {e}")
            sent = False

        if not sent:
            return Return.err(
                Error(
                    code="INVOICE_DELIVERY_FAILED",
                    message=f"Invoice {invoice_number} could not be delivered",
                    reason=f"Recipient {to_address}",
                )
            )

        logger.info(f"Emailed invoice {invoice_number} to {to_address}")
        return Return.ok(
            EmailInvoiceResponseDTO(
                invoice_id=document.invoice.id,
                invoice_number=invoice_number,
                recipient=to_address,
                sent=True,
            )
        )
