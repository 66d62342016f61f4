"""ToggleCustomerStatus Use Case"""

import logging
from libs.result import Result, Return, Error
from src.domain.base import utc_now
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from .dtos import CustomerDTO
from .errors import customer_not_found

logger = logging.getLogger(__name__)


class ToggleCustomerStatus:
    """Flips a customer between active and inactive"""

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, owner_id: str, customer_id: str) -> Result[CustomerDTO]:
        try:
            customer = await self.customer_repo.get_by_id(customer_id, owner_id)
            if not customer:
                return Return.err(customer_not_found(customer_id))

            customer.is_active = not customer.is_active
            customer.updated_at = utc_now()
            updated = await self.customer_repo.update(customer)
            await self.uow.commit()

            logger.info(f"Customer {customer_id} is now {'active' if updated.is_active else 'inactive'}")
            return Return.ok(CustomerDTO.from_entity(updated))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="TOGGLE_CUSTOMER_STATUS_FAILED",
                    message="Failed to toggle customer status",
                    reason=str(e),
                )
            )
