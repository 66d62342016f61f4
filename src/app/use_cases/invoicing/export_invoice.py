"""ExportInvoice Use Case

Renders an invoice to one of the supported document formats.
"""

import logging
from typing import Iterable, Union

from libs.result import Result, Return, Error, ErrorKind
from src.app.services.document_renderer import DocumentFormat, DocumentRenderer, RenderedDocument
from .document_loader import InvoiceDocumentLoader

logger = logging.getLogger(__name__)


class ExportInvoice:
    """
    Use Case: Export invoice

    Every format is rendered from the same render model, built from the
    stored totals, so PDF, spreadsheet and flow document agree on every
    number.
    """

    def __init__(self, loader: InvoiceDocumentLoader, renderers: Iterable[DocumentRenderer]):
        self.loader = loader
        self.renderers = {renderer.format: renderer for renderer in renderers}

    async def execute(
        self, owner_id: str, invoice_id: str, document_format: Union[DocumentFormat, str]
    ) -> Result[RenderedDocument]:
        """
        Execute invoice export

        Args:
            owner_id: Authenticated owner
            invoice_id: Invoice to render
            document_format: DocumentFormat or its file extension ("pdf", "xlsx", "docx")

        Returns:
            Result[RenderedDocument]: Document bytes, filename and media type
        """
        try:
            renderer = self.renderers.get(DocumentFormat(document_format))
        except ValueError:
            renderer = None
        if renderer is None:
            return Return.err(
                Error(
                    code="UNSUPPORTED_FORMAT",
                    message=f"Unsupported export format: {document_format}",
                    kind=ErrorKind.VALIDATION,
                )
            )

        loaded = await self.loader.load(owner_id, invoice_id)
        if loaded.is_err():
            return Return.err(loaded.error)

        try:
            document = renderer.render_document(loaded.value.model)
        except Exception as e:
            logger.error(f"Failed to render invoice {invoice_id} as {renderer.format.value}: {e}")
            return Return.err(
                Error(
                    code="EXPORT_INVOICE_FAILED",
                    message="Failed to render invoice document",
                    reason=str(e),
                )
            )

        logger.info(f"Exported {document.filename} ({len(document.content)} bytes)")
        return Return.ok(document)
