"""DeleteCustomer Use Case"""

import logging
from libs.result import Result, Return, Error, ErrorKind
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from .errors import customer_not_found

logger = logging.getLogger(__name__)


class DeleteCustomer:
    """
    Use Case: Delete customer

    A customer referenced by any invoice cannot be deleted; deactivate it
    instead.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        customer_repo: CustomerRepository,
        invoice_repo: InvoiceRepository,
    ):
        self.uow = uow
        self.customer_repo = customer_repo
        self.invoice_repo = invoice_repo

    async def execute(self, owner_id: str, customer_id: str) -> Result[None]:
        try:
            customer = await self.customer_repo.get_by_id(customer_id, owner_id)
            if not customer:
                return Return.err(customer_not_found(customer_id))

            invoice_count = await self.invoice_repo.count_by_customer(customer.id)
            if invoice_count > 0:
                return Return.err(
                    Error(
                        code="CUSTOMER_HAS_INVOICES",
                        message="Cannot delete customer with existing invoices. Deactivate instead.",
                        reason=f"{invoice_count} invoice(s) reference customer {customer_id}",
                        kind=ErrorKind.PRECONDITION_FAILED,
                    )
                )

            await self.customer_repo.delete(customer)
            await self.uow.commit()

            logger.info(f"Deleted customer {customer_id} for owner {owner_id}")
            return Return.ok(None)

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_CUSTOMER_FAILED",
                    message="Failed to delete customer",
                    reason=str(e),
                )
            )
