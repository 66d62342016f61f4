"""Document Renderer Interface

Defines the contract for rendering an invoice render model to bytes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from src.app.services.render_model import InvoiceRenderModel


class DocumentFormat(str, Enum):
    PDF = "pdf"
    SPREADSHEET = "xlsx"
    FLOW_DOCUMENT = "docx"

    @property
    def media_type(self) -> str:
        return MEDIA_TYPES[self]


MEDIA_TYPES = {
    DocumentFormat.PDF: "application/pdf",
    DocumentFormat.SPREADSHEET: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    DocumentFormat.FLOW_DOCUMENT: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


@dataclass(frozen=True)
class RenderedDocument:
    content: bytes
    filename: str
    format: DocumentFormat

    @property
    def media_type(self) -> str:
        return self.format.media_type


class DocumentRenderer(ABC):
    """
    Service interface for one document encoding

    Implementations render from the render model only and never recompute
    totals.
    """

    format: DocumentFormat

    @abstractmethod
    def render(self, model: InvoiceRenderModel) -> bytes:
        """
        Render an invoice document

        Args:
            model: Fully resolved invoice render model

        Returns:
            Document as bytes
        """
        pass

    def render_document(self, model: InvoiceRenderModel) -> RenderedDocument:
        return RenderedDocument(
            content=self.render(model),
            filename=f"{model.file_stem}.{self.format.value}",
            format=self.format,
        )
