"""Unit tests for ExportInvoice and EmailInvoice use cases"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from libs.result import ErrorKind
from src.app.services.document_renderer import DocumentFormat, DocumentRenderer
from src.app.use_cases.invoicing.document_loader import InvoiceDocumentLoader
from src.app.use_cases.invoicing.email_invoice import EmailInvoice
from src.app.use_cases.invoicing.export_invoice import ExportInvoice
from tests.unit.use_cases.factories import (
    OWNER_ID,
    make_company,
    make_customer,
    make_invoice,
    make_item,
)


class StubRenderer(DocumentRenderer):
    def __init__(self, document_format, content=b"document"):
        self.format = document_format
        self.content = content
        self.models = []

    def render(self, model):
        self.models.append(model)
        return self.content


class FailingRenderer(DocumentRenderer):
    format = DocumentFormat.PDF

    def render(self, model):
        raise RuntimeError("font missing")


@pytest.fixture
def customer_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=make_customer())
    return repo


@pytest.fixture
def company_repo():
    repo = MagicMock()
    repo.get_by_owner_id = AsyncMock(return_value=make_company())
    return repo


@pytest.fixture
def loader(customer_repo, company_repo):
    invoice_repo = MagicMock()
    invoice_repo.get_by_id = AsyncMock(return_value=make_invoice())
    item_repo = MagicMock()
    item_repo.get_by_invoice_id = AsyncMock(return_value=[make_item(1, "10", "100"), make_item(2, "40", "50")])
    return InvoiceDocumentLoader(invoice_repo, item_repo, customer_repo, company_repo)


@pytest.mark.asyncio
class TestExportInvoice:

    async def test_renders_requested_format(self, loader):
        pdf = StubRenderer(DocumentFormat.PDF, b"%PDF-")
        xlsx = StubRenderer(DocumentFormat.SPREADSHEET, b"PK")

        result = await ExportInvoice(loader, [pdf, xlsx]).execute(OWNER_ID, "inv_1", "xlsx")

        assert result.is_ok()
        assert result.value.content == b"PK"
        assert result.value.filename == "invoice-INV-2024-001.xlsx"
        assert result.value.media_type.endswith("spreadsheetml.sheet")
        assert pdf.models == []
        assert xlsx.models[0].total.display == "$3,300.00"

    async def test_unsupported_format(self, loader):
        result = await ExportInvoice(loader, [StubRenderer(DocumentFormat.PDF)]).execute(
            OWNER_ID, "inv_1", "odt"
        )

        assert result.error.code == "UNSUPPORTED_FORMAT"
        assert result.error.kind == ErrorKind.VALIDATION

    async def test_known_format_without_renderer_is_unsupported(self, loader):
        result = await ExportInvoice(loader, [StubRenderer(DocumentFormat.PDF)]).execute(
            OWNER_ID, "inv_1", DocumentFormat.FLOW_DOCUMENT
        )

        assert result.error.code == "UNSUPPORTED_FORMAT"

    async def test_missing_company_is_not_renderable(self, loader, company_repo):
        company_repo.get_by_owner_id = AsyncMock(return_value=None)

        result = await ExportInvoice(loader, [StubRenderer(DocumentFormat.PDF)]).execute(
            OWNER_ID, "inv_1", "pdf"
        )

        assert result.error.code == "INVOICE_NOT_RENDERABLE"
        assert result.error.reason == "Missing company profile"

    async def test_renderer_failure(self, loader):
        result = await ExportInvoice(loader, [FailingRenderer()]).execute(OWNER_ID, "inv_1", "pdf")

        assert result.error.code == "EXPORT_INVOICE_FAILED"
        assert result.error.kind == ErrorKind.INTERNAL


@pytest.fixture
def notification_service():
    service = MagicMock()
    service.send_invoice = AsyncMock(return_value=True)
    return service


@pytest.mark.asyncio
class TestEmailInvoice:

    async def test_defaults_to_customer_email(self, loader, notification_service):
        pdf = StubRenderer(DocumentFormat.PDF, b"%PDF-1.4")

        result = await EmailInvoice(loader, pdf, notification_service).execute(OWNER_ID, "inv_1")

        assert result.is_ok()
        assert result.value.recipient == "billing@acme.test"
        assert result.value.sent is True
        notification_service.send_invoice.assert_awaited_once_with(
            "billing@acme.test", "INV-2024-001", b"%PDF-1.4"
        )

    async def test_explicit_recipient(self, loader, notification_service):
        pdf = StubRenderer(DocumentFormat.PDF)

        result = await EmailInvoice(loader, pdf, notification_service).execute(
            OWNER_ID, "inv_1", recipient="ap@acme.test"
        )

        assert result.value.recipient == "ap@acme.test"

    async def test_no_recipient_is_validation_error(self, loader, customer_repo, notification_service):
        customer_repo.get_by_id = AsyncMock(return_value=make_customer(email=None))

        result = await EmailInvoice(loader, StubRenderer(DocumentFormat.PDF), notification_service).execute(
            OWNER_ID, "inv_1"
        )

        assert result.error.kind == ErrorKind.VALIDATION
        notification_service.send_invoice.assert_not_called()

    async def test_rejected_delivery(self, loader, notification_service):
        notification_service.send_invoice = AsyncMock(return_value=False)

        result = await EmailInvoice(loader, StubRenderer(DocumentFormat.PDF), notification_service).execute(
            OWNER_ID, "inv_1"
        )

        assert result.error.code == "INVOICE_DELIVERY_FAILED"
        assert result.error.kind == ErrorKind.INTERNAL

    async def test_render_failure_is_not_a_delivery_failure(self, loader, notification_service):
        result = await EmailInvoice(loader, FailingRenderer(), notification_service).execute(OWNER_ID, "inv_1")

        assert result.error.code == "EXPORT_INVOICE_FAILED"
        assert result.error.kind == ErrorKind.INTERNAL
        notification_service.send_invoice.assert_not_called()
