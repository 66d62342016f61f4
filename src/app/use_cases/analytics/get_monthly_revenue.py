"""GetMonthlyRevenue Use Case"""

from datetime import date
from typing import List, Optional

from libs.result import Result, Return
from src.domain.base import utc_now
from src.app.repositories.invoice_repository import InvoiceRepository
from .aggregations import monthly_revenue
from .dtos import MonthlyRevenueDTO


class GetMonthlyRevenue:

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, owner_id: str, year: Optional[int] = None) -> Result[List[MonthlyRevenueDTO]]:
        year = year or utc_now().year
        invoices = await self.invoice_repo.list_by_owner(
            owner_id, start_date=date(year, 1, 1), end_date=date(year, 12, 31)
        )
        return Return.ok([
            MonthlyRevenueDTO(
                month=bucket.month,
                month_name=bucket.month_name,
                total=bucket.total,
                paid=bucket.paid,
                pending=bucket.pending,
            )
            for bucket in monthly_revenue(invoices, year)
        ])
