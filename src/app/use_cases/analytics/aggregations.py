"""Invoice rollups

Pure functions over already-loaded invoices. Only total_amount, status,
issue_date and customer_id are read; stored totals are never recomputed.
"""

import calendar
from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Sequence

from src.domain.customer import Customer
from src.domain.invoice import Invoice, InvoiceStatus

ZERO = Decimal("0.00")


def _status(invoice: Invoice) -> InvoiceStatus:
    return InvoiceStatus(invoice.status)


def _amount(invoice: Invoice) -> Decimal:
    return Decimal(invoice.total_amount or 0)


@dataclass
class InvoiceStats:
    total_invoices: int
    paid_invoices: int
    pending_invoices: int
    overdue_invoices: int
    total_revenue: Decimal
    paid_revenue: Decimal

    @property
    def pending_revenue(self) -> Decimal:
        return self.total_revenue - self.paid_revenue


@dataclass
class MonthBucket:
    month: int
    month_name: str
    total: Decimal = ZERO
    paid: Decimal = ZERO
    pending: Decimal = ZERO


@dataclass
class CustomerRevenue:
    customer: Customer
    total_revenue: Decimal
    invoice_count: int


@dataclass
class StatusBucket:
    status: InvoiceStatus
    count: int
    total_amount: Decimal


def invoice_stats(invoices: Sequence[Invoice]) -> InvoiceStats:
    """Counts and revenue for a set of invoices; pending means SENT"""
    statuses = [_status(invoice) for invoice in invoices]
    return InvoiceStats(
        total_invoices=len(invoices),
        paid_invoices=statuses.count(InvoiceStatus.PAID),
        pending_invoices=statuses.count(InvoiceStatus.SENT),
        overdue_invoices=statuses.count(InvoiceStatus.OVERDUE),
        total_revenue=sum((_amount(invoice) for invoice in invoices), ZERO),
        paid_revenue=sum(
            (_amount(invoice) for invoice in invoices if _status(invoice) == InvoiceStatus.PAID),
            ZERO,
        ),
    )


def monthly_revenue(invoices: Sequence[Invoice], year: int) -> List[MonthBucket]:
    """
    Twelve buckets by issue month

    Every non-PAID invoice, cancelled ones included, counts as pending.
    Invoices issued outside ``year`` are ignored.
    """
    buckets = [MonthBucket(month=month, month_name=calendar.month_abbr[month]) for month in range(1, 13)]

    for invoice in invoices:
        if invoice.issue_date.year != year:
            continue
        bucket = buckets[invoice.issue_date.month - 1]
        amount = _amount(invoice)
        bucket.total += amount
        if _status(invoice) == InvoiceStatus.PAID:
            bucket.paid += amount
        else:
            bucket.pending += amount

    return buckets


def top_customers(
    customers: Sequence[Customer], invoices: Sequence[Invoice], limit: int = 10
) -> List[CustomerRevenue]:
    """
    Customers ranked by the sum of their PAID invoice totals

    Ties keep the order of ``customers`` (the sort is stable). Customers
    without paid invoices rank with zero revenue.
    """
    revenue: Dict[str, Decimal] = {customer.id: ZERO for customer in customers}
    counts: Dict[str, int] = {customer.id: 0 for customer in customers}

    for invoice in invoices:
        if _status(invoice) != InvoiceStatus.PAID or invoice.customer_id not in revenue:
            continue
        revenue[invoice.customer_id] += _amount(invoice)
        counts[invoice.customer_id] += 1

    ranked = sorted(customers, key=lambda customer: revenue[customer.id], reverse=True)
    return [
        CustomerRevenue(customer=customer, total_revenue=revenue[customer.id], invoice_count=counts[customer.id])
        for customer in ranked[:limit]
    ]


def status_breakdown(invoices: Sequence[Invoice]) -> List[StatusBucket]:
    """Count and summed total per status present, in lifecycle order"""
    grouped: "OrderedDict[InvoiceStatus, StatusBucket]" = OrderedDict()
    for status in InvoiceStatus:
        grouped[status] = StatusBucket(status=status, count=0, total_amount=ZERO)

    for invoice in invoices:
        bucket = grouped[_status(invoice)]
        bucket.count += 1
        bucket.total_amount += _amount(invoice)

    return [bucket for bucket in grouped.values() if bucket.count > 0]
