"""DeleteTemplate Use Case"""

import logging
from libs.result import Result, Return, Error, ErrorKind
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_template_repository import InvoiceTemplateRepository
from .errors import template_not_found

logger = logging.getLogger(__name__)


class DeleteTemplate:
    """
    Use Case: Delete invoice template

    A template still referenced by an invoice cannot be deleted.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        template_repo: InvoiceTemplateRepository,
        invoice_repo: InvoiceRepository,
    ):
        self.uow = uow
        self.template_repo = template_repo
        self.invoice_repo = invoice_repo

    async def execute(self, owner_id: str, template_id: str) -> Result[None]:
        try:
            template = await self.template_repo.get_by_id(template_id, owner_id)
            if not template:
                return Return.err(template_not_found(template_id))

            invoice_count = await self.invoice_repo.count_by_template(template.id)
            if invoice_count > 0:
                return Return.err(
                    Error(
                        code="TEMPLATE_IN_USE",
                        message="Cannot delete a template used by existing invoices",
                        reason=f"{invoice_count} invoice(s) reference template {template_id}",
                        kind=ErrorKind.PRECONDITION_FAILED,
                    )
                )

            await self.template_repo.delete(template)
            await self.uow.commit()

            logger.info(f"Deleted invoice template {template_id} for owner {owner_id}")
            return Return.ok(None)

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_TEMPLATE_FAILED",
                    message="Failed to delete template",
                    reason=str(e),
                )
            )
