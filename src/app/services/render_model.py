"""Invoice Render Model

Format-agnostic representation of a fully resolved invoice. Built once from
the stored invoice totals and consumed by every document backend, so all
formats show the same numbers.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from src.domain.company import Company
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem


def format_money(value: Decimal, symbol: str = "$") -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_number(value: Decimal) -> str:
    """Plain decimal without trailing zeros or exponent (40.000000 -> 40)"""
    normalized = value.normalize()
    if normalized == normalized.to_integral_value():
        return f"{normalized.to_integral_value():f}"
    return f"{normalized:f}"


@dataclass(frozen=True)
class PartyBlock:
    heading: str
    name: str
    lines: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ItemRow:
    description: str
    quantity: Decimal
    unit_price: Decimal
    amount: Decimal
    quantity_display: str
    unit_price_display: str
    amount_display: str


@dataclass(frozen=True)
class TotalRow:
    label: str
    amount: Decimal
    display: str
    emphasis: bool = False


@dataclass(frozen=True)
class InvoiceRenderModel:
    title: str
    invoice_number: str
    currency_symbol: str
    metadata: Tuple[Tuple[str, str], ...]
    company: PartyBlock
    customer: PartyBlock
    items: Tuple[ItemRow, ...]
    totals: Tuple[TotalRow, ...]
    notes: Optional[str] = None
    terms: Optional[str] = None
    footer: Optional[str] = None
    item_headers: Tuple[str, ...] = field(default=("Description", "Quantity", "Unit Price", "Amount"))

    @property
    def total(self) -> TotalRow:
        return self.totals[-1]

    @property
    def file_stem(self) -> str:
        return f"invoice-{self.invoice_number}"


def _locality(city: Optional[str], state: Optional[str], zip_code: Optional[str]) -> Optional[str]:
    region = " ".join(part for part in (state, zip_code) if part)
    parts = [part for part in (city, region) if part]
    return ", ".join(parts) if parts else None


def _present(values: Sequence[Optional[str]]) -> Tuple[str, ...]:
    return tuple(value for value in values if value)


def _tax_label(invoice: Invoice, items: Sequence[InvoiceItem]) -> str:
    if any(item.tax_rate for item in items):
        return "Tax"
    base = invoice.tax_name or "Tax"
    if invoice.tax_rate:
        return f"{base} ({format_number(Decimal(invoice.tax_rate))}%)"
    return base


def build_render_model(
    invoice: Invoice,
    items: Sequence[InvoiceItem],
    customer: Customer,
    company: Company,
    currency_symbol: str = "$",
) -> InvoiceRenderModel:
    """
    Build the render model for an invoice

    Uses the totals stored on the invoice; nothing is recomputed here.

    Args:
        invoice: Persisted invoice
        items: Its items in display order
        customer: Resolved customer
        company: Resolved issuing company
        currency_symbol: Symbol prefixed to money values

    Returns:
        InvoiceRenderModel
    """
    def money(value) -> str:
        return format_money(Decimal(value), currency_symbol)

    metadata = [
        ("Invoice Number", invoice.invoice_number),
        ("Issue Date", invoice.issue_date.isoformat()),
    ]
    if invoice.due_date:
        metadata.append(("Due Date", invoice.due_date.isoformat()))
    status = invoice.status.value if hasattr(invoice.status, "value") else str(invoice.status)
    metadata.append(("Status", status))

    company_block = PartyBlock(
        heading="From",
        name=company.name,
        lines=_present([
            company.address,
            _locality(company.city, company.state, company.zip_code),
            company.country,
            company.email,
            company.phone,
        ]),
    )
    customer_block = PartyBlock(
        heading="Bill To",
        name=customer.name,
        lines=_present([
            customer.company,
            customer.address,
            _locality(customer.city, customer.state, customer.zip_code),
            customer.country,
            customer.email,
        ]),
    )

    rows = tuple(
        ItemRow(
            description=item.description,
            quantity=Decimal(item.quantity),
            unit_price=Decimal(item.unit_price),
            amount=Decimal(item.amount),
            quantity_display=format_number(Decimal(item.quantity)),
            unit_price_display=money(item.unit_price),
            amount_display=money(item.amount),
        )
        for item in items
    )

    totals = [TotalRow("Subtotal", Decimal(invoice.subtotal), money(invoice.subtotal))]
    if invoice.discount_amount and invoice.discount_amount > 0:
        discount = -Decimal(invoice.discount_amount)
        totals.append(TotalRow("Discount", discount, money(discount)))
    if invoice.tax_amount and invoice.tax_amount > 0:
        totals.append(
            TotalRow(_tax_label(invoice, items), Decimal(invoice.tax_amount), money(invoice.tax_amount))
        )
    totals.append(
        TotalRow("TOTAL", Decimal(invoice.total_amount), money(invoice.total_amount), emphasis=True)
    )

    return InvoiceRenderModel(
        title="INVOICE",
        invoice_number=invoice.invoice_number,
        currency_symbol=currency_symbol,
        metadata=tuple(metadata),
        company=company_block,
        customer=customer_block,
        items=rows,
        totals=tuple(totals),
        notes=invoice.notes,
        terms=invoice.terms,
        footer=invoice.footer,
    )
