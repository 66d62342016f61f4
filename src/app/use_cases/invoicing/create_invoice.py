"""CreateInvoice Use Case

Creates an invoice for one of the owner's customers, numbering and pricing it.
"""

import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError

from libs.result import Result, Return, Error, ErrorKind
from src.domain.base import utc_now
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService, record_best_effort
from src.app.services.sequence_allocator import InvoiceNumberAllocator
from src.app.repositories.company_repository import CompanyRepository
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.invoice_template_repository import InvoiceTemplateRepository
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.pricing import calculate_invoice_totals
from .dtos import CreateInvoiceCommandDTO, InvoiceDetailDTO
from .items import build_items, validate_items

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create invoice

    Business Rules:
    1. Owner must have a company profile
    2. Customer (and template, if given) must belong to the owner
    3. At least one item; no negative quantity or unit price
    4. Invoice number is allocated per owner and current UTC year (INV-YYYY-NNN)
    5. Totals come from the pricing engine, rounded only when persisted
    6. Status defaults to DRAFT

    Flow:
    1. Resolve company profile
    2. Resolve customer and template within the owner's scope
    3. Validate items
    4. Allocate invoice number
    5. Price and persist invoice + items
    6. Commit transaction
    7. Return joined invoice
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        customer_repo: CustomerRepository,
        company_repo: CompanyRepository,
        template_repo: InvoiceTemplateRepository,
        number_allocator: InvoiceNumberAllocator,
        audit_service: Optional[AuditService] = None,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo
        self.customer_repo = customer_repo
        self.company_repo = company_repo
        self.template_repo = template_repo
        self.number_allocator = number_allocator
        self.audit_service = audit_service

    async def execute(
        self, owner_id: str, command: CreateInvoiceCommandDTO
    ) -> Result[InvoiceDetailDTO]:
        """
        Execute invoice creation

        Args:
            owner_id: Authenticated owner
            command: CreateInvoiceCommandDTO with customer, items and modifiers

        Returns:
            Result[InvoiceDetailDTO]: Success with joined invoice or error
        """
        try:
            # Step 1: Company profile is a precondition
            company = await self.company_repo.get_by_owner_id(owner_id)
            if not company:
                return Return.err(
                    Error(
                        code="COMPANY_PROFILE_REQUIRED",
                        message="Please set up your company profile first",
                        reason=f"Owner {owner_id} has no company profile",
                        kind=ErrorKind.PRECONDITION_FAILED,
                    )
                )

            # Step 2: Customer and template must be the owner's
            customer = await self.customer_repo.get_by_id(command.customer_id, owner_id)
            if not customer:
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer {command.customer_id} not found",
                        kind=ErrorKind.NOT_FOUND,
                    )
                )

            if command.template_id:
                template = await self.template_repo.get_by_id(command.template_id, owner_id)
                if not template:
                    return Return.err(
                        Error(
                            code="TEMPLATE_NOT_FOUND",
                            message=f"Template {command.template_id} not found",
                            kind=ErrorKind.NOT_FOUND,
                        )
                    )

            # Step 3: Validate items
            validation_error = validate_items(command.items)
            if validation_error:
                return Return.err(validation_error)

            # Step 4: Allocate invoice number for the current year
            now = utc_now()
            issue_date = command.issue_date or now.date()
            invoice_number = await self.number_allocator.allocate(owner_id, now.year)

            # Step 5: Price and persist
            totals = calculate_invoice_totals(
                command.items,
                tax_rate=command.tax_rate,
                discount_type=command.discount_type,
                discount_value=command.discount_value,
            ).rounded()

            invoice = Invoice(
                owner_id=owner_id,
                company_id=company.id,
                customer_id=customer.id,
                invoice_number=invoice_number,
                status=command.status or InvoiceStatus.DRAFT,
                issue_date=issue_date,
                due_date=command.due_date,
                subtotal=totals.subtotal,
                tax_rate=command.tax_rate,
                tax_name=command.tax_name,
                tax_amount=totals.tax_amount,
                discount_type=command.discount_type,
                discount_value=command.discount_value,
                discount_amount=totals.discount_amount,
                total_amount=totals.total_amount,
                notes=command.notes,
                terms=command.terms,
                footer=command.footer,
                template_id=command.template_id,
            )

            created_invoice = await self.invoice_repo.create(invoice)
            created_items = await self.item_repo.create_many(
                build_items(created_invoice.id, command.items)
            )

            # Step 6: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Created invoice {created_invoice.invoice_number} for owner {owner_id}, "
                f"total {created_invoice.total_amount}"
            )
            await record_best_effort(
                self.audit_service,
                owner_id,
                "CREATE",
                "invoice",
                created_invoice.id,
                {"invoice_number": created_invoice.invoice_number},
            )

            # Step 7: Build response
            return Return.ok(
                InvoiceDetailDTO.from_entities(created_invoice, created_items, customer, company)
            )

        except IntegrityError as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="INVOICE_NUMBER_CONFLICT",
                    message="Invoice number was allocated concurrently, please retry",
                    reason=str(e.orig) if e.orig else str(e),
                    kind=ErrorKind.CONFLICT,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create invoice for owner {owner_id}: {e}")
            return Return.err(
                Error(
                    code="CREATE_INVOICE_FAILED",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )
