"""openpyxl Spreadsheet Renderer Implementation

Renders the invoice render model to a single-sheet XLSX workbook. Money
and quantity cells hold numbers with a number format, so spreadsheet tools
can recalculate them.
"""

from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill

from src.app.services.document_renderer import DocumentFormat, DocumentRenderer
from src.app.services.render_model import InvoiceRenderModel, PartyBlock

HEADER_FILL = PatternFill(start_color="2C3E50", end_color="2C3E50", fill_type="solid")
HEADER_FONT = Font(bold=True, color="FFFFFF")
BOLD = Font(bold=True)
QUANTITY_FORMAT = "#,##0.######"


def money_format(symbol: str) -> str:
    """Excel number format rendering 3135 as $3,135.00 and -150 as -$150.00"""
    return f'"{symbol}"#,##0.00;-"{symbol}"#,##0.00'


class OpenpyxlSpreadsheetRenderer(DocumentRenderer):
    """
    openpyxl implementation of DocumentRenderer

    Sheet "Invoice", top to bottom: title, metadata, company block, customer
    block, item header row, item rows, totals, notes and terms.
    """

    format = DocumentFormat.SPREADSHEET

    def render(self, model: InvoiceRenderModel) -> bytes:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = "Invoice"
        currency = money_format(model.currency_symbol)

        sheet.column_dimensions["A"].width = 45
        for column in ("B", "C", "D"):
            sheet.column_dimensions[column].width = 18

        sheet.append([model.title])
        sheet["A1"].font = Font(bold=True, size=18)
        sheet.append([])

        for label, value in model.metadata:
            sheet.append([label, value])
            sheet.cell(row=sheet.max_row, column=1).font = BOLD
        sheet.append([])

        self._party(sheet, model.company)
        self._party(sheet, model.customer)

        sheet.append(list(model.item_headers))
        for cell in sheet[sheet.max_row]:
            cell.fill = HEADER_FILL
            cell.font = HEADER_FONT
            cell.alignment = Alignment(horizontal="center")

        for item in model.items:
            sheet.append([item.description, item.quantity, item.unit_price, item.amount])
            row = sheet.max_row
            sheet.cell(row=row, column=2).number_format = QUANTITY_FORMAT
            sheet.cell(row=row, column=3).number_format = currency
            sheet.cell(row=row, column=4).number_format = currency
        sheet.append([])

        for total in model.totals:
            sheet.append([None, None, total.label, total.amount])
            row = sheet.max_row
            amount_cell = sheet.cell(row=row, column=4)
            amount_cell.number_format = currency
            if total.emphasis:
                sheet.cell(row=row, column=3).font = BOLD
                amount_cell.font = BOLD

        for heading, text in (("Notes", model.notes), ("Terms", model.terms), ("Footer", model.footer)):
            if text:
                sheet.append([])
                sheet.append([heading])
                sheet.cell(row=sheet.max_row, column=1).font = BOLD
                sheet.append([text])
                sheet.cell(row=sheet.max_row, column=1).alignment = Alignment(wrap_text=True, vertical="top")

        buffer = BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()

    @staticmethod
    def _party(sheet, party: PartyBlock) -> None:
        sheet.append([party.heading])
        sheet.cell(row=sheet.max_row, column=1).font = BOLD
        sheet.append([party.name])
        for line in party.lines:
            sheet.append([line])
        sheet.append([])
