from .company_repository import SqlAlchemyCompanyRepository
from .customer_repository import SqlAlchemyCustomerRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_item_repository import SqlAlchemyInvoiceItemRepository
from .invoice_sequence_repository import SqlAlchemyInvoiceSequenceRepository
from .invoice_template_repository import SqlAlchemyInvoiceTemplateRepository

__all__ = [
    "SqlAlchemyCompanyRepository",
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceItemRepository",
    "SqlAlchemyInvoiceSequenceRepository",
    "SqlAlchemyInvoiceTemplateRepository",
]
