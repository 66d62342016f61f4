"""Analytics API Routes

Read-only rollups over the owner's invoices.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.analytics import (
    GetDashboardStats,
    GetMonthlyRevenue,
    GetStatusBreakdown,
    GetTopCustomers,
)
from src.app.use_cases.analytics.dtos import (
    DashboardStatsDTO,
    MonthlyRevenueDTO,
    StatusBreakdownDTO,
    TopCustomerDTO,
)
from src.adapter.repositories import SqlAlchemyCustomerRepository, SqlAlchemyInvoiceRepository
from src.depends import get_config, get_session
from src.api.error import ClientError
from src.api.identity import get_current_owner_id

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("/dashboard", response_model=DashboardStatsDTO)
async def get_dashboard_stats(
    year: Optional[int] = Query(default=None, ge=1900, le=9999),
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Dashboard statistics for a year (default: current year).

    Pending means SENT; pending revenue is total minus paid revenue.
    """
    use_case = GetDashboardStats(SqlAlchemyInvoiceRepository(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(owner_id, year)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/revenue/monthly", response_model=List[MonthlyRevenueDTO])
async def get_monthly_revenue(
    year: Optional[int] = Query(default=None, ge=1900, le=9999),
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    result = await GetMonthlyRevenue(SqlAlchemyInvoiceRepository(session)).execute(owner_id, year)
    return result.value


@router.get("/customers/top", response_model=List[TopCustomerDTO])
async def get_top_customers(
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    use_case = GetTopCustomers(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyCustomerRepository(session),
        default_limit=config.TOP_CUSTOMERS_LIMIT,
    )
    result = await use_case.execute(owner_id, limit)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/invoices/status", response_model=List[StatusBreakdownDTO])
async def get_status_breakdown(
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    result = await GetStatusBreakdown(SqlAlchemyInvoiceRepository(session)).execute(owner_id)
    return result.value
