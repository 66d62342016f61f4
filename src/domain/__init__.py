from .base import BaseModel, generate_uuid
from .company import Company
from .customer import Customer
from .invoice import Invoice, InvoiceStatus, DiscountType
from .invoice_item import InvoiceItem
from .invoice_sequence import InvoiceSequence
from .invoice_template import InvoiceTemplate

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Company",
    "Customer",
    "Invoice",
    "InvoiceStatus",
    "DiscountType",
    "InvoiceItem",
    "InvoiceSequence",
    "InvoiceTemplate",
]
