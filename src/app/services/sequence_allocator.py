"""Invoice Number Allocator

Derives the next invoice number for an owner within a calendar year.
"""

import logging
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_sequence_repository import InvoiceSequenceRepository
from src.domain.invoice_sequence import InvoiceSequence

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "INV"


def number_prefix(year: int, prefix: str = DEFAULT_PREFIX) -> str:
    return f"{prefix}-{year}-"


def format_invoice_number(year: int, sequence: int, prefix: str = DEFAULT_PREFIX) -> str:
    """INV-{year}-{sequence}, sequence zero-padded to at least 3 digits"""
    return f"{number_prefix(year, prefix)}{sequence:03d}"


def parse_sequence(invoice_number: str) -> int:
    """Numeric suffix of an invoice number, 0 when it has none"""
    try:
        return int(invoice_number.rsplit("-", 1)[-1])
    except ValueError:
        return 0


class InvoiceNumberAllocator:
    """
    Allocates INV-YYYY-NNN numbers per owner and per year

    Allocation is a compare-and-increment on the (owner, year) counter row,
    read with SELECT FOR UPDATE so concurrent creates for the same owner
    serialize on the row lock. The row is seeded from the owner's most
    recently created invoice number for the year, so numbering continues
    from invoices that predate the counter. Must run inside the unit of
    work that inserts the invoice.
    """

    def __init__(
        self,
        sequence_repo: InvoiceSequenceRepository,
        invoice_repo: InvoiceRepository,
        prefix: str = DEFAULT_PREFIX,
    ):
        self.sequence_repo = sequence_repo
        self.invoice_repo = invoice_repo
        self.prefix = prefix

    async def allocate(self, owner_id: str, year: int) -> str:
        """
        Allocate the next invoice number

        Args:
            owner_id: Owning user
            year: Calendar year of the invoice

        Returns:
            Invoice number string

        Raises:
            IntegrityError: If another transaction created the counter row
                            concurrently
        """
        sequence = await self.sequence_repo.get_for_update(owner_id, year)

        if sequence is None:
            last_number = await self.invoice_repo.get_last_invoice_number(
                owner_id, number_prefix(year, self.prefix)
            )
            sequence = await self.sequence_repo.create(
                InvoiceSequence(
                    owner_id=owner_id,
                    year=year,
                    last_number=parse_sequence(last_number) if last_number else 0,
                )
            )

        sequence.last_number += 1
        await self.sequence_repo.update(sequence)

        invoice_number = format_invoice_number(year, sequence.last_number, self.prefix)
        logger.debug(f"Allocated invoice number {invoice_number} for owner {owner_id}")
        return invoice_number
