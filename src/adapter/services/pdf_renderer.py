"""ReportLab PDF Renderer Implementation

Renders the invoice render model to an A4 PDF using ReportLab platypus.
"""

from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.document_renderer import DocumentFormat, DocumentRenderer
from src.app.services.render_model import InvoiceRenderModel, PartyBlock

ITEM_COL_WIDTHS = [80 * mm, 25 * mm, 30 * mm, 35 * mm]
PRIMARY = colors.HexColor("#2C3E50")
MUTED = colors.HexColor("#7F8C8D")
GRID = colors.HexColor("#BDC3C7")


class ReportLabPdfRenderer(DocumentRenderer):
    """
    ReportLab implementation of DocumentRenderer

    Layout: title, company block, metadata, "Bill To" block, item table,
    totals, then notes, terms and footer. The item table splits across
    pages and repeats its header row on every page.
    """

    format = DocumentFormat.PDF

    def __init__(self, compress: bool = True):
        """
        Args:
            compress: Deflate page content streams. Disabled in tests so the
                      rendered text can be found in the raw bytes.
        """
        self.compress = compress

    def render(self, model: InvoiceRenderModel) -> bytes:
        """
        Render an invoice PDF

        Args:
            model: Fully resolved invoice render model

        Returns:
            PDF document as bytes
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=f"Invoice {model.invoice_number}",
            pageCompression=1 if self.compress else 0,
        )

        styles = getSampleStyleSheet()
        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=24,
            spaceAfter=10,
            textColor=PRIMARY,
        )
        heading_style = ParagraphStyle(
            "PartyHeading",
            parent=styles["Normal"],
            fontSize=10,
            fontName="Helvetica-Bold",
            spaceAfter=2,
        )
        normal_style = ParagraphStyle("NormalStyle", parent=styles["Normal"], fontSize=10)
        muted_style = ParagraphStyle(
            "MutedStyle",
            parent=styles["Normal"],
            fontSize=9,
            textColor=MUTED,
        )
        cell_style = ParagraphStyle("CellStyle", parent=styles["Normal"], fontSize=9)

        elements = [Paragraph(escape(model.title), title_style)]

        # Company block
        elements.extend(self._party(model.company, heading_style, normal_style, show_heading=False))
        elements.append(Spacer(1, 8 * mm))

        # Metadata
        metadata_table = Table(
            [[f"{label}:", value] for label, value in model.metadata],
            colWidths=[40 * mm, 100 * mm],
            hAlign="LEFT",
        )
        metadata_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("TEXTCOLOR", (0, 0), (0, -1), MUTED),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(metadata_table)
        elements.append(Spacer(1, 8 * mm))

        # Customer block
        elements.extend(self._party(model.customer, heading_style, normal_style))
        elements.append(Spacer(1, 8 * mm))

        # Items
        item_data = [list(model.item_headers)]
        for item in model.items:
            item_data.append(
                [
                    Paragraph(escape(item.description), cell_style),
                    item.quantity_display,
                    item.unit_price_display,
                    item.amount_display,
                ]
            )
        item_table = Table(item_data, colWidths=ITEM_COL_WIDTHS, repeatRows=1)
        item_table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("BACKGROUND", (0, 0), (-1, 0), PRIMARY),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 10),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    # Data rows
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("GRID", (0, 0), (-1, -1), 0.5, GRID),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, colors.HexColor("#F8F9F9")],
                    ),
                ]
            )
        )
        elements.append(item_table)
        elements.append(Spacer(1, 5 * mm))

        # Totals
        totals_table = Table(
            [["", "", f"{row.label}:", row.display] for row in model.totals],
            colWidths=ITEM_COL_WIDTHS,
        )
        total_row = len(model.totals) - 1
        totals_table.setStyle(
            TableStyle(
                [
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
                    ("FONTNAME", (2, total_row), (-1, total_row), "Helvetica-Bold"),
                    ("FONTSIZE", (2, total_row), (-1, total_row), 11),
                    ("LINEABOVE", (2, total_row), (-1, total_row), 1.5, PRIMARY),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(totals_table)

        # Notes, terms, footer
        for heading, text in (("Notes", model.notes), ("Terms", model.terms)):
            if text:
                elements.append(Spacer(1, 8 * mm))
                elements.append(Paragraph(heading, heading_style))
                elements.append(Paragraph(self._multiline(text), normal_style))
        if model.footer:
            elements.append(Spacer(1, 12 * mm))
            elements.append(Paragraph(self._multiline(model.footer), muted_style))

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes

    def _party(self, party: PartyBlock, heading_style, normal_style, show_heading: bool = True):
        elements = []
        if show_heading:
            elements.append(Paragraph(f"{escape(party.heading)}:", heading_style))
        elements.append(Paragraph(f"<b>{escape(party.name)}</b>", normal_style))
        for line in party.lines:
            elements.append(Paragraph(escape(line), normal_style))
        return elements

    @staticmethod
    def _multiline(text: str) -> str:
        return "<br/>".join(escape(line) for line in text.splitlines())
