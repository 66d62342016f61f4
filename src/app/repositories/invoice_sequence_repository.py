"""Invoice Sequence Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.invoice_sequence import InvoiceSequence


class InvoiceSequenceRepository(ABC):
    """Repository interface for per-owner, per-year invoice counters"""

    @abstractmethod
    async def get_for_update(self, owner_id: str, year: int) -> Optional[InvoiceSequence]:
        """
        Retrieve the counter row with a row-level lock (SELECT FOR UPDATE)

        Args:
            owner_id: Owning user
            year: Calendar year

        Returns:
            InvoiceSequence if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, sequence: InvoiceSequence) -> InvoiceSequence:
        """
        Raises:
            IntegrityError: If a row for (owner_id, year) already exists
        """
        pass

    @abstractmethod
    async def update(self, sequence: InvoiceSequence) -> InvoiceSequence:
        pass
