"""SQLAlchemy Invoice Template Repository Implementation"""

from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_template_repository import InvoiceTemplateRepository
from src.domain.invoice_template import InvoiceTemplate


class SqlAlchemyInvoiceTemplateRepository(InvoiceTemplateRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, template: InvoiceTemplate) -> InvoiceTemplate:
        self.session.add(template)
        await self.session.flush()
        await self.session.refresh(template)
        return template

    async def get_by_id(self, template_id: str, owner_id: str) -> Optional[InvoiceTemplate]:
        statement = (
            select(InvoiceTemplate)
            .where(InvoiceTemplate.id == template_id)
            .where(InvoiceTemplate.owner_id == owner_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_by_owner(self, owner_id: str) -> List[InvoiceTemplate]:
        statement = (
            select(InvoiceTemplate)
            .where(InvoiceTemplate.owner_id == owner_id)
            .order_by(InvoiceTemplate.created_at.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, template: InvoiceTemplate) -> InvoiceTemplate:
        self.session.add(template)
        await self.session.flush()
        await self.session.refresh(template)
        return template

    async def delete(self, template: InvoiceTemplate) -> None:
        await self.session.delete(template)
        await self.session.flush()
