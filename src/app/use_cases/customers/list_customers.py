"""ListCustomers Use Case"""

import math
from libs.result import Result, Return, Error, ErrorKind
from src.app.repositories.customer_repository import CustomerRepository
from .dtos import CustomerDTO, CustomerPaginationDTO, ListCustomersQueryDTO, ListCustomersResponseDTO


class ListCustomers:
    """
    Use case: List customers

    Search is a case-insensitive substring match over name, email and
    company. Newest customers first.
    """

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(
        self, owner_id: str, query: ListCustomersQueryDTO
    ) -> Result[ListCustomersResponseDTO]:
        if query.page < 1 or query.limit < 1:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="page and limit must be positive",
                    kind=ErrorKind.VALIDATION,
                )
            )

        customers, total = await self.customer_repo.list(
            owner_id=owner_id,
            search=query.search.strip() if query.search else None,
            is_active=query.is_active,
            limit=query.limit,
            offset=(query.page - 1) * query.limit,
        )

        return Return.ok(
            ListCustomersResponseDTO(
                customers=[CustomerDTO.from_entity(customer) for customer in customers],
                pagination=CustomerPaginationDTO(
                    total=total,
                    page=query.page,
                    limit=query.limit,
                    total_pages=math.ceil(total / query.limit),
                ),
            )
        )
