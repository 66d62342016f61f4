from .create_invoice import CreateInvoice
from .get_invoice import GetInvoice
from .list_invoices import ListInvoices
from .update_invoice import UpdateInvoice
from .delete_invoice import DeleteInvoice
from .duplicate_invoice import DuplicateInvoice
from .document_loader import InvoiceDocumentLoader, LoadedInvoiceDocument
from .export_invoice import ExportInvoice
from .email_invoice import EmailInvoice

__all__ = [
    "CreateInvoice",
    "GetInvoice",
    "ListInvoices",
    "UpdateInvoice",
    "DeleteInvoice",
    "DuplicateInvoice",
    "InvoiceDocumentLoader",
    "LoadedInvoiceDocument",
    "ExportInvoice",
    "EmailInvoice",
]
