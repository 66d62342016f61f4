"""Invoice Domain Entity

Billing document issued by an owner's company to one of the owner's customers.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Date, Text, UniqueConstraint
from src.domain.base import BaseModel, generate_uuid, timestamp_field


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    DRAFT = "DRAFT"
    SENT = "SENT"
    PAID = "PAID"
    OVERDUE = "OVERDUE"
    CANCELLED = "CANCELLED"


class DiscountType(str, Enum):
    """How discount_value is interpreted"""
    PERCENTAGE = "PERCENTAGE"
    FIXED = "FIXED"


class Invoice(BaseModel, table=True):
    """
    Invoice - Billing document for an owner's customer

    Domain Rules:
    - invoice_number is unique per owner (INV-YYYY-NNN, sequential per year)
    - subtotal, discount_amount, tax_amount and total_amount are derived by
      the pricing engine from the items; never set from client input
    - total_amount = subtotal - discount_amount + tax_amount
    - customer, company and template all belong to the same owner
    - Items are replaced wholesale on update; deleting cascades to items
    """

    __tablename__ = "invoices"
    __table_args__ = (
        UniqueConstraint("owner_id", "invoice_number", name="uq_invoices_owner_number"),
        Index("ix_invoices_owner_id", "owner_id"),
        Index("ix_invoices_status", "status"),
        Index("ix_invoices_customer_id", "customer_id"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique invoice identifier"
    )

    owner_id: str = Field(description="Owning user")

    company_id: str = Field(
        foreign_key="companies.id",
        description="Issuing company (owner's profile)"
    )

    customer_id: str = Field(
        foreign_key="customers.id",
        description="Billed customer"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Owner-scoped sequential number (e.g., INV-2024-001)"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.DRAFT,
        description="Invoice status"
    )

    issue_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Issue date; its year scopes the invoice number"
    )

    due_date: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
    )

    subtotal: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Sum of quantity * unit_price over all items"
    )

    tax_rate: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(9, 4), nullable=True),
        description="Invoice-wide tax percentage, used when no item carries its own rate"
    )

    tax_name: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
        description="Tax label shown on documents (e.g., VAT, GST)"
    )

    tax_amount: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(18, 2), nullable=False),
    )

    discount_type: Optional[DiscountType] = Field(default=None)

    discount_value: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Percentage or fixed amount depending on discount_type"
    )

    discount_amount: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(18, 2), nullable=False),
    )

    total_amount: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(18, 2), nullable=False),
    )

    notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    terms: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    footer: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    template_id: Optional[str] = Field(
        default=None,
        foreign_key="invoice_templates.id",
    )

    created_at: datetime = timestamp_field(description="Invoice creation timestamp")

    updated_at: datetime = timestamp_field(description="Last update timestamp")

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "3f1c2a9e-8b7d-4c11-9a0e-5d2b6f4e7a10",
                "owner_id": "user_123",
                "invoice_number": "INV-2024-001",
                "status": "DRAFT",
                "issue_date": "2024-03-01",
                "subtotal": "3000.00",
                "tax_rate": "10.0000",
                "tax_amount": "285.00",
                "discount_type": "PERCENTAGE",
                "discount_value": "5.000000",
                "discount_amount": "150.00",
                "total_amount": "3135.00",
            }
        }
