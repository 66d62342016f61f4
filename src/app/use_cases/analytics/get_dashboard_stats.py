"""GetDashboardStats Use Case"""

from datetime import date
from typing import Optional

from libs.result import Result, Return, Error
from src.domain.base import utc_now
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from .aggregations import invoice_stats
from .dtos import DashboardStatsDTO, RecentInvoiceDTO

RECENT_INVOICES = 5


class GetDashboardStats:
    """
    Use Case: Dashboard statistics

    Counts and revenue cover invoices issued in the requested year (default
    current UTC year). Active customers and the most recent invoices are
    not year-bound.
    """

    def __init__(self, invoice_repo: InvoiceRepository, customer_repo: CustomerRepository):
        self.invoice_repo = invoice_repo
        self.customer_repo = customer_repo

    async def execute(self, owner_id: str, year: Optional[int] = None) -> Result[DashboardStatsDTO]:
        year = year or utc_now().year
        try:
            invoices = await self.invoice_repo.list_by_owner(
                owner_id, start_date=date(year, 1, 1), end_date=date(year, 12, 31)
            )
            stats = invoice_stats(invoices)
            customer_count = await self.customer_repo.count_active(owner_id)

            recent = await self.invoice_repo.list_recent(owner_id, limit=RECENT_INVOICES)
            customer_ids = sorted({invoice.customer_id for invoice in recent})
            customers = await self.customer_repo.get_by_ids(owner_id, customer_ids) if customer_ids else []
            names = {customer.id: customer.name for customer in customers}

            return Return.ok(
                DashboardStatsDTO(
                    year=year,
                    total_invoices=stats.total_invoices,
                    paid_invoices=stats.paid_invoices,
                    pending_invoices=stats.pending_invoices,
                    overdue_invoices=stats.overdue_invoices,
                    total_revenue=stats.total_revenue,
                    paid_revenue=stats.paid_revenue,
                    pending_revenue=stats.pending_revenue,
                    customer_count=customer_count,
                    recent_invoices=[
                        RecentInvoiceDTO(
                            id=invoice.id,
                            invoice_number=invoice.invoice_number,
                            status=invoice.status.value if hasattr(invoice.status, "value") else invoice.status,
                            issue_date=invoice.issue_date,
                            total_amount=invoice.total_amount,
                            customer_name=names.get(invoice.customer_id),
                            created_at=invoice.created_at,
                        )
                        for invoice in recent
                    ],
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="DASHBOARD_STATS_FAILED",
                    message="Failed to compute dashboard statistics",
                    reason=str(e),
                )
            )
