"""Invoice API Routes

FastAPI routes for the invoice lifecycle, document export and delivery.
"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.invoice_request import (
    CreateInvoiceRequestSchema,
    EmailInvoiceRequestSchema,
    UpdateInvoiceRequestSchema,
)
from src.app.services.document_renderer import DocumentFormat
from src.domain.invoice import InvoiceStatus
from src.app.services.sequence_allocator import InvoiceNumberAllocator
from src.app.use_cases.invoicing import (
    CreateInvoice,
    DeleteInvoice,
    DuplicateInvoice,
    EmailInvoice,
    ExportInvoice,
    GetInvoice,
    InvoiceDocumentLoader,
    ListInvoices,
    UpdateInvoice,
)
from src.app.use_cases.invoicing.dtos import (
    CreateInvoiceCommandDTO,
    EmailInvoiceResponseDTO,
    InvoiceDetailDTO,
    ListInvoicesQueryDTO,
    ListInvoicesResponseDTO,
    UpdateInvoiceCommandDTO,
)
from src.adapter.repositories import (
    SqlAlchemyCompanyRepository,
    SqlAlchemyCustomerRepository,
    SqlAlchemyInvoiceItemRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyInvoiceSequenceRepository,
    SqlAlchemyInvoiceTemplateRepository,
)
from src.adapter.services import (
    DocxFlowDocumentRenderer,
    LoggingAuditService,
    OpenpyxlSpreadsheetRenderer,
    ReportLabPdfRenderer,
    SqlAlchemyUnitOfWork,
    create_notification_service,
)
from src.depends import get_config, get_session
from src.api.error import ClientError
from src.api.identity import get_current_owner_id

router = APIRouter(prefix="/invoices", tags=["Invoices"])

ERROR_EXAMPLE = {
    "application/json": {
        "example": {"error": {"code": "INVOICE_NOT_FOUND", "message": "Invoice 123 not found"}}
    }
}


def build_create_invoice(session: AsyncSession, config) -> CreateInvoice:
    invoice_repo = SqlAlchemyInvoiceRepository(session)
    return CreateInvoice(
        uow=SqlAlchemyUnitOfWork(session),
        invoice_repo=invoice_repo,
        item_repo=SqlAlchemyInvoiceItemRepository(session),
        customer_repo=SqlAlchemyCustomerRepository(session),
        company_repo=SqlAlchemyCompanyRepository(session),
        template_repo=SqlAlchemyInvoiceTemplateRepository(session),
        number_allocator=InvoiceNumberAllocator(
            SqlAlchemyInvoiceSequenceRepository(session),
            invoice_repo,
            prefix=config.INVOICE_NUMBER_PREFIX,
        ),
        audit_service=LoggingAuditService(),
    )


def build_document_loader(session: AsyncSession, config) -> InvoiceDocumentLoader:
    return InvoiceDocumentLoader(
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        item_repo=SqlAlchemyInvoiceItemRepository(session),
        customer_repo=SqlAlchemyCustomerRepository(session),
        company_repo=SqlAlchemyCompanyRepository(session),
        currency_symbol=config.CURRENCY_SYMBOL,
    )


@router.post(
    "",
    response_model=InvoiceDetailDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Validation error or missing company profile"},
        404: {"description": "Customer or template not found"},
        409: {"description": "Invoice number allocated concurrently; retry"},
    },
)
async def create_invoice(
    request: CreateInvoiceRequestSchema,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """
    Create an invoice.

    The invoice number (INV-YYYY-NNN) and all totals are derived
    server-side from the items, tax rate and discount.

    **Returns:**
    - 201: Invoice created with items, customer and company
    - 400: Invalid items or company profile not set up
    - 404: Customer or template not found
    - 409: Number conflict, safe to retry
    """
    command = CreateInvoiceCommandDTO(**request.model_dump())

    use_case = build_create_invoice(session, config)
    result = await use_case.execute(owner_id, command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("", response_model=ListInvoicesResponseDTO)
async def list_invoices(
    status_filter: Optional[InvoiceStatus] = Query(default=None, alias="status"),
    customer_id: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    search: Optional[str] = None,
    page: int = Query(default=1, ge=1),
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """
    List invoices, newest first.

    **Query parameters:**
    - `status`: DRAFT, SENT, PAID, OVERDUE or CANCELLED
    - `customer_id`: Only this customer's invoices
    - `start_date` / `end_date`: Issue date range, inclusive
    - `search`: Case-insensitive match on invoice number or customer name
    - `page` / `limit`: Pagination (defaults 1 / 10)
    """
    query = ListInvoicesQueryDTO(
        status=status_filter,
        customer_id=customer_id,
        start_date=start_date,
        end_date=end_date,
        search=search,
        page=page,
        limit=limit or config.DEFAULT_PAGE_SIZE,
    )

    use_case = ListInvoices(SqlAlchemyInvoiceRepository(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(owner_id, query)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{invoice_id}",
    response_model=InvoiceDetailDTO,
    responses={404: {"description": "Invoice not found", "content": ERROR_EXAMPLE}},
)
async def get_invoice(
    invoice_id: str,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = GetInvoice(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
        SqlAlchemyCustomerRepository(session),
        SqlAlchemyCompanyRepository(session),
    )
    result = await use_case.execute(owner_id, invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put(
    "/{invoice_id}",
    response_model=InvoiceDetailDTO,
    responses={404: {"description": "Invoice not found", "content": ERROR_EXAMPLE}},
)
async def update_invoice(
    invoice_id: str,
    request: UpdateInvoiceRequestSchema,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Partially update an invoice.

    Only fields present in the body are applied. `items`, when present,
    replaces every existing item. Totals are recomputed when items or any
    pricing field is present.
    """
    command = UpdateInvoiceCommandDTO(**request.model_dump(exclude_unset=True))

    use_case = UpdateInvoice(
        uow=SqlAlchemyUnitOfWork(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        item_repo=SqlAlchemyInvoiceItemRepository(session),
        customer_repo=SqlAlchemyCustomerRepository(session),
        company_repo=SqlAlchemyCompanyRepository(session),
        template_repo=SqlAlchemyInvoiceTemplateRepository(session),
        audit_service=LoggingAuditService(),
    )
    result = await use_case.execute(owner_id, invoice_id, command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete(
    "/{invoice_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Invoice not found", "content": ERROR_EXAMPLE}},
)
async def delete_invoice(
    invoice_id: str,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = DeleteInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        audit_service=LoggingAuditService(),
    )
    result = await use_case.execute(owner_id, invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{invoice_id}/duplicate",
    response_model=InvoiceDetailDTO,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"description": "Invoice not found", "content": ERROR_EXAMPLE}},
)
async def duplicate_invoice(
    invoice_id: str,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """Copy an invoice into a new DRAFT issued today, with a fresh number."""
    use_case = DuplicateInvoice(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
        build_create_invoice(session, config),
        audit_service=LoggingAuditService(),
    )
    result = await use_case.execute(owner_id, invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{invoice_id}/export/{document_format}",
    responses={
        200: {
            "content": {document_format.media_type: {} for document_format in DocumentFormat},
            "description": "Rendered invoice document",
        },
        400: {"description": "Unsupported format or invoice not renderable"},
        404: {"description": "Invoice not found", "content": ERROR_EXAMPLE},
    },
)
async def export_invoice(
    invoice_id: str,
    document_format: str,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """
    Download the invoice as `pdf`, `xlsx` or `docx`.

    All formats render the same stored totals.
    """
    use_case = ExportInvoice(
        build_document_loader(session, config),
        [ReportLabPdfRenderer(), OpenpyxlSpreadsheetRenderer(), DocxFlowDocumentRenderer()],
    )
    result = await use_case.execute(owner_id, invoice_id, document_format.lower())

    if result.is_err():
        raise ClientError(result.error)

    document = result.value
    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
    )


@router.post(
    "/{invoice_id}/email",
    response_model=EmailInvoiceResponseDTO,
    responses={
        400: {"description": "No recipient available"},
        404: {"description": "Invoice not found", "content": ERROR_EXAMPLE},
        500: {"description": "Delivery rejected"},
    },
)
async def email_invoice(
    invoice_id: str,
    request: Optional[EmailInvoiceRequestSchema] = None,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
    config=Depends(get_config),
):
    """Send the invoice PDF to `recipient`, or to the customer's email."""
    use_case = EmailInvoice(
        build_document_loader(session, config),
        ReportLabPdfRenderer(),
        create_notification_service(
            config.NOTIFICATION_WEBHOOK_URL, timeout=config.NOTIFICATION_TIMEOUT_SECONDS
        ),
    )
    result = await use_case.execute(owner_id, invoice_id, request.recipient if request else None)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
