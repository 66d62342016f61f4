"""DeleteInvoice Use Case"""

import logging
from typing import Optional
from libs.result import Result, Return, Error, ErrorKind
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService, record_best_effort
from src.app.repositories.invoice_repository import InvoiceRepository

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete invoice

    Deletion is unconditional once ownership is verified and removes the
    invoice's items with it.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        audit_service: Optional[AuditService] = None,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.audit_service = audit_service

    async def execute(self, owner_id: str, invoice_id: str) -> Result[None]:
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

            invoice_number = invoice.invoice_number
            await self.invoice_repo.delete(invoice)
            await self.uow.commit()

            logger.info(f"Deleted invoice {invoice_number} for owner {owner_id}")
            await record_best_effort(
                self.audit_service,
                owner_id,
                "DELETE",
                "invoice",
                invoice_id,
                {"invoice_number": invoice_number},
            )

            return Return.ok(None)

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_INVOICE_FAILED",
                    message="Failed to delete invoice",
                    reason=str(e),
                )
            )
