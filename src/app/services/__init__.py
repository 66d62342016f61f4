from .unit_of_work import UnitOfWork
from .notification_service import NotificationService
from .audit_service import AuditService
from .document_renderer import DocumentRenderer, DocumentFormat, RenderedDocument
from .render_model import InvoiceRenderModel, build_render_model
from .sequence_allocator import InvoiceNumberAllocator

__all__ = [
    "UnitOfWork",
    "NotificationService",
    "AuditService",
    "DocumentRenderer",
    "DocumentFormat",
    "RenderedDocument",
    "InvoiceRenderModel",
    "build_render_model",
    "InvoiceNumberAllocator",
]
