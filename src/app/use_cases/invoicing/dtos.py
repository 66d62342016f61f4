"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from src.domain.company import Company
from src.domain.customer import Customer
from src.domain.invoice import DiscountType, Invoice, InvoiceStatus
from src.domain.invoice_item import InvoiceItem


class InvoiceItemInputDTO(BaseModel):
    """One line item as supplied by the caller; amounts are always derived"""

    description: str
    quantity: Decimal
    unit_price: Decimal
    tax_rate: Optional[Decimal] = None
    discount: Optional[Decimal] = None


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    Used as input to CreateInvoice use case. Totals and the invoice
    number are never accepted from the caller.
    """

    customer_id: str = Field(..., description="Customer owned by the same owner")
    items: List[InvoiceItemInputDTO] = Field(default_factory=list)
    issue_date: Optional[date] = Field(default=None, description="Defaults to today (UTC)")
    due_date: Optional[date] = None
    status: Optional[InvoiceStatus] = Field(default=None, description="Defaults to DRAFT")
    tax_rate: Optional[Decimal] = Field(default=None, description="Invoice-wide tax percentage")
    tax_name: Optional[str] = None
    discount_type: Optional[DiscountType] = None
    discount_value: Optional[Decimal] = None
    notes: Optional[str] = None
    terms: Optional[str] = None
    footer: Optional[str] = None
    template_id: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": "cus_acme",
                "items": [
                    {"description": "Consulting", "quantity": "40", "unit_price": "50.00"},
                    {"description": "Support plan", "quantity": "10", "unit_price": "100.00"},
                ],
                "tax_rate": "10",
                "discount_type": "PERCENTAGE",
                "discount_value": "5",
            }
        }


class UpdateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for a partial invoice update

    A field that is present (even as null) replaces the stored value; an
    absent field leaves it unchanged. Presence is read from model_fields_set.
    items, when present, replaces the whole item set.
    """

    customer_id: Optional[str] = None
    items: Optional[List[InvoiceItemInputDTO]] = None
    issue_date: Optional[date] = None
    due_date: Optional[date] = None
    status: Optional[InvoiceStatus] = None
    tax_rate: Optional[Decimal] = None
    tax_name: Optional[str] = None
    discount_type: Optional[DiscountType] = None
    discount_value: Optional[Decimal] = None
    notes: Optional[str] = None
    terms: Optional[str] = None
    footer: Optional[str] = None
    template_id: Optional[str] = None


class ListInvoicesQueryDTO(BaseModel):
    status: Optional[InvoiceStatus] = None
    customer_id: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    search: Optional[str] = None
    page: int = 1
    limit: int = 10


class InvoiceItemDTO(BaseModel):
    id: str
    description: str
    quantity: Decimal
    unit_price: Decimal
    amount: Decimal
    tax_rate: Optional[Decimal] = None
    tax_amount: Optional[Decimal] = None
    discount: Optional[Decimal] = None
    order: int

    @classmethod
    def from_entity(cls, item: InvoiceItem) -> "InvoiceItemDTO":
        return cls(
            id=item.id,
            description=item.description,
            quantity=item.quantity,
            unit_price=item.unit_price,
            amount=item.amount,
            tax_rate=item.tax_rate,
            tax_amount=item.tax_amount,
            discount=item.discount,
            order=item.order,
        )


class CustomerSummaryDTO(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    company: Optional[str] = None

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerSummaryDTO":
        return cls(id=customer.id, name=customer.name, email=customer.email, company=customer.company)


class CompanySummaryDTO(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    @classmethod
    def from_entity(cls, company: Company) -> "CompanySummaryDTO":
        return cls(
            id=company.id,
            name=company.name,
            email=company.email,
            phone=company.phone,
            address=company.address,
        )


class InvoiceDetailDTO(BaseModel):
    """
    Response DTO for a fully joined invoice

    Returned by CreateInvoice, GetInvoice, UpdateInvoice and DuplicateInvoice.
    """

    id: str
    invoice_number: str
    status: str
    issue_date: date
    due_date: Optional[date] = None
    customer_id: str
    company_id: str
    template_id: Optional[str] = None
    subtotal: Decimal
    tax_rate: Optional[Decimal] = None
    tax_name: Optional[str] = None
    tax_amount: Decimal
    discount_type: Optional[str] = None
    discount_value: Optional[Decimal] = None
    discount_amount: Decimal
    total_amount: Decimal
    notes: Optional[str] = None
    terms: Optional[str] = None
    footer: Optional[str] = None
    items: List[InvoiceItemDTO] = Field(default_factory=list)
    customer: Optional[CustomerSummaryDTO] = None
    company: Optional[CompanySummaryDTO] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entities(
        cls,
        invoice: Invoice,
        items: List[InvoiceItem],
        customer: Optional[Customer],
        company: Optional[Company],
    ) -> "InvoiceDetailDTO":
        return cls(
            id=invoice.id,
            invoice_number=invoice.invoice_number,
            status=_enum_value(invoice.status),
            issue_date=invoice.issue_date,
            due_date=invoice.due_date,
            customer_id=invoice.customer_id,
            company_id=invoice.company_id,
            template_id=invoice.template_id,
            subtotal=invoice.subtotal,
            tax_rate=invoice.tax_rate,
            tax_name=invoice.tax_name,
            tax_amount=invoice.tax_amount,
            discount_type=_enum_value(invoice.discount_type) if invoice.discount_type else None,
            discount_value=invoice.discount_value,
            discount_amount=invoice.discount_amount,
            total_amount=invoice.total_amount,
            notes=invoice.notes,
            terms=invoice.terms,
            footer=invoice.footer,
            items=[InvoiceItemDTO.from_entity(item) for item in items],
            customer=CustomerSummaryDTO.from_entity(customer) if customer else None,
            company=CompanySummaryDTO.from_entity(company) if company else None,
            created_at=invoice.created_at,
            updated_at=invoice.updated_at,
        )


class InvoiceSummaryDTO(BaseModel):
    id: str
    invoice_number: str
    status: str
    issue_date: date
    due_date: Optional[date] = None
    customer_id: str
    customer_name: Optional[str] = None
    total_amount: Decimal
    created_at: datetime


class PaginationDTO(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int


class ListInvoicesResponseDTO(BaseModel):
    invoices: List[InvoiceSummaryDTO]
    pagination: PaginationDTO


class EmailInvoiceResponseDTO(BaseModel):
    invoice_id: str
    invoice_number: str
    recipient: str
    sent: bool


def _enum_value(value) -> str:
    return value.value if hasattr(value, "value") else str(value)
