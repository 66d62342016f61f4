"""Invoice Item Domain Entity

Tracks individual billable rows within an invoice.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Numeric, String, Integer
from src.domain.base import BaseModel, generate_uuid, timestamp_field


class InvoiceItem(BaseModel, table=True):
    """
    Invoice Item - Individual line item within an invoice

    Domain Rules:
    - Each item belongs to exactly one invoice
    - amount = quantity * unit_price (rounded to 2 places), always derived
    - tax_amount is only set when the item carries its own tax_rate
    - order is 1-based and defines display order
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        Index("ix_invoice_items_invoice_id", "invoice_id"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)

    invoice_id: str = Field(
        sa_column=Column(String, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    description: str = Field(
        sa_column=Column(String(500), nullable=False),
    )

    quantity: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
    )

    unit_price: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="quantity * unit_price"
    )

    tax_rate: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(9, 4), nullable=True),
        description="Item tax percentage; overrides the invoice-wide rate"
    )

    tax_amount: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 2), nullable=True),
    )

    discount: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Informational item discount; not applied by the pricing engine"
    )

    order: int = Field(
        sa_column=Column("order", Integer, nullable=False),
    )

    created_at: datetime = timestamp_field()
