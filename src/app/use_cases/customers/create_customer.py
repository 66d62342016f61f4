"""CreateCustomer Use Case"""

import logging
from sqlalchemy.exc import IntegrityError

from libs.result import Result, Return, Error, ErrorKind
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer
from .dtos import CreateCustomerCommandDTO, CustomerDTO
from .errors import email_exists

logger = logging.getLogger(__name__)


class CreateCustomer:
    """
    Use Case: Create customer

    Business Rules:
    1. name is required
    2. email, when given, is unique within the owner's customers
    3. New customers are active
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, owner_id: str, command: CreateCustomerCommandDTO) -> Result[CustomerDTO]:
        if not command.name or not command.name.strip():
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Customer name is required",
                    kind=ErrorKind.VALIDATION,
                )
            )

        try:
            if command.email:
                existing = await self.customer_repo.get_by_email(owner_id, command.email)
                if existing:
                    return Return.err(email_exists(command.email))

            customer = await self.customer_repo.create(
                Customer(owner_id=owner_id, **command.model_dump())
            )
            await self.uow.commit()

            logger.info(f"Created customer {customer.id} for owner {owner_id}")
            return Return.ok(CustomerDTO.from_entity(customer))

        except IntegrityError:
            await self.uow.rollback()
            return Return.err(email_exists(command.email))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create customer for owner {owner_id}: {e}")
            return Return.err(
                Error(
                    code="CREATE_CUSTOMER_FAILED",
                    message="Failed to create customer",
                    reason=str(e),
                )
            )
