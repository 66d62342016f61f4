"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from src.domain.invoice import DiscountType, InvoiceStatus


class InvoiceItemRequestSchema(BaseModel):
    description: str = Field(..., min_length=1, max_length=500)
    quantity: Decimal = Field(..., ge=0, description="Must not be negative")
    unit_price: Decimal = Field(..., ge=0, description="Must not be negative")
    tax_rate: Optional[Decimal] = Field(default=None, ge=0, description="Item-level tax percentage")
    discount: Optional[Decimal] = Field(default=None, ge=0, description="Informational only")


class _PricingFields(BaseModel):
    tax_rate: Optional[Decimal] = Field(default=None, ge=0, description="Invoice-wide tax percentage")
    tax_name: Optional[str] = Field(default=None, max_length=50)
    discount_type: Optional[DiscountType] = None
    discount_value: Optional[Decimal] = Field(default=None, ge=0)


class CreateInvoiceRequestSchema(_PricingFields):
    """
    Request schema for creating an invoice

    Used for POST /invoices endpoint. Invoice number and totals are
    always derived server-side.
    """

    customer_id: str = Field(..., min_length=1)
    items: List[InvoiceItemRequestSchema] = Field(..., min_length=1)
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    status: Optional[InvoiceStatus] = None
    notes: Optional[str] = None
    terms: Optional[str] = None
    footer: Optional[str] = None
    template_id: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": "2b1f7d1e-8a61-4c1f-9a55-0d1f5e0c9a10",
                "items": [
                    {"description": "Consulting", "quantity": "40", "unit_price": "50.00"},
                    {"description": "Support plan", "quantity": "10", "unit_price": "100.00"},
                ],
                "tax_rate": "10",
                "discount_type": "PERCENTAGE",
                "discount_value": "5",
                "due_date": "2024-02-14",
            }
        }


class UpdateInvoiceRequestSchema(_PricingFields):
    """
    Request schema for PUT /invoices/{id}

    Only the fields present in the body are applied; an explicit null
    clears a nullable field.
    """

    customer_id: Optional[str] = Field(default=None, min_length=1)
    items: Optional[List[InvoiceItemRequestSchema]] = Field(default=None, min_length=1)
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    status: Optional[InvoiceStatus] = None
    notes: Optional[str] = None
    terms: Optional[str] = None
    footer: Optional[str] = None
    template_id: Optional[str] = None


class EmailInvoiceRequestSchema(BaseModel):
    recipient: Optional[str] = Field(default=None, description="Defaults to the customer's email")
