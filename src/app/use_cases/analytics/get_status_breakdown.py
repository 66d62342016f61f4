"""GetStatusBreakdown Use Case"""

from typing import List

from libs.result import Result, Return
from src.app.repositories.invoice_repository import InvoiceRepository
from .aggregations import status_breakdown
from .dtos import StatusBreakdownDTO


class GetStatusBreakdown:

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, owner_id: str) -> Result[List[StatusBreakdownDTO]]:
        invoices = await self.invoice_repo.list_by_owner(owner_id)
        return Return.ok([
            StatusBreakdownDTO(status=bucket.status.value, count=bucket.count, total_amount=bucket.total_amount)
            for bucket in status_breakdown(invoices)
        ])
