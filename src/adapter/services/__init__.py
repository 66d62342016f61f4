from .unit_of_work import SqlAlchemyUnitOfWork
from .notification_service import (
    LoggingNotificationService,
    WebhookNotificationService,
    CompositeNotificationService,
    create_notification_service,
)
from .audit_service import LoggingAuditService
from .pdf_renderer import ReportLabPdfRenderer
from .spreadsheet_renderer import OpenpyxlSpreadsheetRenderer
from .flow_document_renderer import DocxFlowDocumentRenderer

__all__ = [
    "SqlAlchemyUnitOfWork",
    "LoggingNotificationService",
    "WebhookNotificationService",
    "CompositeNotificationService",
    "create_notification_service",
    "LoggingAuditService",
    "ReportLabPdfRenderer",
    "OpenpyxlSpreadsheetRenderer",
    "DocxFlowDocumentRenderer",
]
