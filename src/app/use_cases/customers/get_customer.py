"""GetCustomer Use Case"""

from libs.result import Result, Return
from src.app.repositories.customer_repository import CustomerRepository
from .dtos import CustomerDTO
from .errors import customer_not_found


class GetCustomer:

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(self, owner_id: str, customer_id: str) -> Result[CustomerDTO]:
        customer = await self.customer_repo.get_by_id(customer_id, owner_id)
        if not customer:
            return Return.err(customer_not_found(customer_id))
        return Return.ok(CustomerDTO.from_entity(customer))
