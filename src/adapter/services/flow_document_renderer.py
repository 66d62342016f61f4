"""python-docx Flow Document Renderer Implementation"""

from io import BytesIO

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Cm, Pt

from src.app.services.document_renderer import DocumentFormat, DocumentRenderer
from src.app.services.render_model import InvoiceRenderModel, PartyBlock

ITEM_COL_WIDTHS = (Cm(8.5), Cm(2.5), Cm(3), Cm(3.5))


class DocxFlowDocumentRenderer(DocumentRenderer):
    """
    python-docx implementation of DocumentRenderer

    Headings for title, company, bill-to and items; one items table;
    right-aligned totals; notes, terms and footer as plain paragraphs.
    """

    format = DocumentFormat.FLOW_DOCUMENT

    def render(self, model: InvoiceRenderModel) -> bytes:
        document = Document()
        document.styles["Normal"].font.size = Pt(10)

        document.add_heading(model.title, level=0)
        for label, value in model.metadata:
            paragraph = document.add_paragraph()
            paragraph.add_run(f"{label}: ").bold = True
            paragraph.add_run(value)

        self._party(document, "Company Information", model.company)
        self._party(document, model.customer.heading, model.customer)

        document.add_heading("Items", level=1)
        table = document.add_table(rows=1, cols=len(model.item_headers))
        table.style = "Table Grid"
        for cell, header in zip(table.rows[0].cells, model.item_headers):
            cell.text = ""
            cell.paragraphs[0].add_run(header).bold = True

        for item in model.items:
            cells = table.add_row().cells
            values = (item.description, item.quantity_display, item.unit_price_display, item.amount_display)
            for index, (cell, value) in enumerate(zip(cells, values)):
                cell.text = value
                if index > 0:
                    cell.paragraphs[0].alignment = WD_ALIGN_PARAGRAPH.RIGHT

        for row in table.rows:
            for cell, width in zip(row.cells, ITEM_COL_WIDTHS):
                cell.width = width

        document.add_paragraph()
        for total in model.totals:
            paragraph = document.add_paragraph()
            paragraph.alignment = WD_ALIGN_PARAGRAPH.RIGHT
            run = paragraph.add_run(f"{total.label}: {total.display}")
            if total.emphasis:
                run.bold = True
                run.font.size = Pt(12)

        for heading, text in (("Notes", model.notes), ("Terms", model.terms)):
            if text:
                document.add_heading(heading, level=2)
                document.add_paragraph(text)
        if model.footer:
            footer = document.add_paragraph()
            footer.alignment = WD_ALIGN_PARAGRAPH.CENTER
            footer.add_run(model.footer).italic = True

        buffer = BytesIO()
        document.save(buffer)
        return buffer.getvalue()

    @staticmethod
    def _party(document, heading: str, party: PartyBlock) -> None:
        document.add_heading(heading, level=1)
        document.add_paragraph().add_run(party.name).bold = True
        for line in party.lines:
            document.add_paragraph(line)
