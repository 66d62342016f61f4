"""SQLAlchemy implementation of InvoiceSequenceRepository

Counter rows are read with SELECT FOR UPDATE so concurrent invoice creation
for the same owner and year serializes on the row lock.
"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_sequence_repository import InvoiceSequenceRepository
from src.domain.invoice_sequence import InvoiceSequence


class SqlAlchemyInvoiceSequenceRepository(InvoiceSequenceRepository):
    """
    Features:
    - Pessimistic locking via SELECT FOR UPDATE (no-op on SQLite)
    - Unique (owner_id, year) constraint as the insert race backstop
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_for_update(self, owner_id: str, year: int) -> Optional[InvoiceSequence]:
        """
        Retrieve the counter row for (owner, year), locking it

        Returns:
            InvoiceSequence if one exists, None otherwise
        """
        stmt = (
            select(InvoiceSequence)
            .where(InvoiceSequence.owner_id == owner_id)
            .where(InvoiceSequence.year == year)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, sequence: InvoiceSequence) -> InvoiceSequence:
        self.session.add(sequence)
        await self.session.flush()
        await self.session.refresh(sequence)
        return sequence

    async def update(self, sequence: InvoiceSequence) -> InvoiceSequence:
        self.session.add(sequence)
        await self.session.flush()
        return sequence
