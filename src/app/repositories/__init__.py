from .company_repository import CompanyRepository
from .customer_repository import CustomerRepository
from .invoice_repository import InvoiceRepository, InvoiceFilters
from .invoice_item_repository import InvoiceItemRepository
from .invoice_sequence_repository import InvoiceSequenceRepository
from .invoice_template_repository import InvoiceTemplateRepository

__all__ = [
    "CompanyRepository",
    "CustomerRepository",
    "InvoiceRepository",
    "InvoiceFilters",
    "InvoiceItemRepository",
    "InvoiceSequenceRepository",
    "InvoiceTemplateRepository",
]
