"""UpdateCustomer Use Case"""

import logging
from sqlalchemy.exc import IntegrityError

from libs.result import Result, Return, Error, ErrorKind
from src.domain.base import utc_now
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from .dtos import CustomerDTO, UpdateCustomerCommandDTO
from .errors import customer_not_found, email_exists

logger = logging.getLogger(__name__)


class UpdateCustomer:
    """
    Use Case: Update customer

    Present fields overwrite, absent fields are untouched. A changed email
    must stay unique within the owner's customers.
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(
        self, owner_id: str, customer_id: str, command: UpdateCustomerCommandDTO
    ) -> Result[CustomerDTO]:
        changes = command.model_dump(exclude_unset=True)

        if "name" in changes and not (changes["name"] or "").strip():
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Customer name cannot be empty",
                    kind=ErrorKind.VALIDATION,
                )
            )
        if "is_active" in changes and changes["is_active"] is None:
            del changes["is_active"]

        try:
            customer = await self.customer_repo.get_by_id(customer_id, owner_id)
            if not customer:
                return Return.err(customer_not_found(customer_id))

            new_email = changes.get("email")
            if new_email and new_email != customer.email:
                existing = await self.customer_repo.get_by_email(owner_id, new_email)
                if existing and existing.id != customer.id:
                    return Return.err(email_exists(new_email))

            for name, value in changes.items():
                setattr(customer, name, value)
            customer.updated_at = utc_now()

            updated = await self.customer_repo.update(customer)
            await self.uow.commit()

            logger.info(f"Updated customer {customer_id} ({', '.join(sorted(changes))})")
            return Return.ok(CustomerDTO.from_entity(updated))

        except IntegrityError:
            await self.uow.rollback()
            return Return.err(email_exists(changes.get("email") or ""))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_CUSTOMER_FAILED",
                    message="Failed to update customer",
                    reason=str(e),
                )
            )
