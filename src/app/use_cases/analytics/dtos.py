"""Data Transfer Objects for Analytics Use Cases"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel


class RecentInvoiceDTO(BaseModel):
    id: str
    invoice_number: str
    status: str
    issue_date: date
    total_amount: Decimal
    customer_name: Optional[str] = None
    created_at: datetime


class DashboardStatsDTO(BaseModel):
    year: int
    total_invoices: int
    paid_invoices: int
    pending_invoices: int
    overdue_invoices: int
    total_revenue: Decimal
    paid_revenue: Decimal
    pending_revenue: Decimal
    customer_count: int
    recent_invoices: List[RecentInvoiceDTO]


class MonthlyRevenueDTO(BaseModel):
    month: int
    month_name: str
    total: Decimal
    paid: Decimal
    pending: Decimal


class TopCustomerDTO(BaseModel):
    id: str
    name: str
    company: Optional[str] = None
    email: Optional[str] = None
    total_revenue: Decimal
    invoice_count: int


class StatusBreakdownDTO(BaseModel):
    status: str
    count: int
    total_amount: Decimal
