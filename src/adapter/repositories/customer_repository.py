"""SQLAlchemy Customer Repository Implementation"""

from typing import List, Optional, Tuple
from sqlalchemy import or_
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer


class SqlAlchemyCustomerRepository(CustomerRepository):
    """
    SQLAlchemy implementation of CustomerRepository

    All lookups are scoped to the owner.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def get_by_id(self, customer_id: str, owner_id: str) -> Optional[Customer]:
        statement = (
            select(Customer)
            .where(Customer.id == customer_id)
            .where(Customer.owner_id == owner_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_email(self, owner_id: str, email: str) -> Optional[Customer]:
        statement = (
            select(Customer)
            .where(Customer.owner_id == owner_id)
            .where(Customer.email == email)
        )
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def get_by_ids(self, owner_id: str, customer_ids: List[str]) -> List[Customer]:
        if not customer_ids:
            return []
        statement = (
            select(Customer)
            .where(Customer.owner_id == owner_id)
            .where(Customer.id.in_(customer_ids))
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    def _filtered(self, statement, owner_id: str, search: Optional[str], is_active: Optional[bool]):
        statement = statement.where(Customer.owner_id == owner_id)

        if is_active is not None:
            statement = statement.where(Customer.is_active == is_active)
        if search:
            statement = statement.where(
                or_(
                    Customer.name.icontains(search, autoescape=True),
                    Customer.email.icontains(search, autoescape=True),
                    Customer.company.icontains(search, autoescape=True),
                )
            )

        return statement

    async def list(
        self,
        owner_id: str,
        search: Optional[str] = None,
        is_active: Optional[bool] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> Tuple[List[Customer], int]:
        """
        Retrieve one page of customers, newest first

        Returns:
            (customers, total matching count)
        """
        count_statement = self._filtered(
            select(func.count()).select_from(Customer), owner_id, search, is_active
        )
        total = (await self.session.execute(count_statement)).scalar_one()

        statement = (
            self._filtered(select(Customer), owner_id, search, is_active)
            .order_by(Customer.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all()), total

    async def list_by_owner(self, owner_id: str) -> List[Customer]:
        statement = (
            select(Customer)
            .where(Customer.owner_id == owner_id)
            .order_by(Customer.created_at, Customer.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def count_active(self, owner_id: str) -> int:
        statement = (
            select(func.count())
            .select_from(Customer)
            .where(Customer.owner_id == owner_id)
            .where(Customer.is_active == True)  # noqa: E712
        )
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def update(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def delete(self, customer: Customer) -> None:
        await self.session.delete(customer)
        await self.session.flush()
