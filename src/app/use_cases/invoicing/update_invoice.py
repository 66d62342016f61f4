"""UpdateInvoice Use Case

Partially updates an invoice, replacing its items and re-pricing it when
needed.
"""

import logging
from typing import Optional

from libs.result import Result, Return, Error, ErrorKind
from src.domain.base import utc_now
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService, record_best_effort
from src.app.repositories.company_repository import CompanyRepository
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.invoice_template_repository import InvoiceTemplateRepository
from src.domain.pricing import calculate_invoice_totals
from .dtos import InvoiceDetailDTO, UpdateInvoiceCommandDTO
from .items import build_items, validate_items

logger = logging.getLogger(__name__)

PRICING_FIELDS = {"items", "tax_rate", "discount_type", "discount_value"}

# Cleared by an explicit null
NULLABLE_FIELDS = (
    "due_date",
    "tax_rate",
    "tax_name",
    "discount_type",
    "discount_value",
    "notes",
    "terms",
    "footer",
    "template_id",
)

# Ignored when sent as null
REQUIRED_FIELDS = ("status", "issue_date")


class UpdateInvoice:
    """
    Use Case: Update invoice

    Business Rules:
    1. Invoice must belong to the owner
    2. A changed customer or template must belong to the owner
    3. items, when present, wholly replaces the stored items
    4. Totals are recomputed when items or any pricing field is present,
       pricing the stored items when items are absent
    5. Invoice number and owner never change

    Flow:
    1. Load invoice
    2. Verify referenced customer / template
    3. Overwrite present fields
    4. Replace items
    5. Recompute totals
    6. Commit and return the joined invoice
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        customer_repo: CustomerRepository,
        company_repo: CompanyRepository,
        template_repo: InvoiceTemplateRepository,
        audit_service: Optional[AuditService] = None,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo
        self.customer_repo = customer_repo
        self.company_repo = company_repo
        self.template_repo = template_repo
        self.audit_service = audit_service

    async def execute(
        self, owner_id: str, invoice_id: str, command: UpdateInvoiceCommandDTO
    ) -> Result[InvoiceDetailDTO]:
        """
        Execute invoice update

        Args:
            owner_id: Authenticated owner
            invoice_id: Invoice to update
            command: Partial update; only fields present in the payload apply

        Returns:
            Result[InvoiceDetailDTO]: Success with joined invoice or error
        """
        present = command.model_fields_set

        try:
            # Step 1: Load invoice
            invoice = await self.invoice_repo.get_by_id(invoice_id, owner_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice {invoice_id} not found",
                        kind=ErrorKind.NOT_FOUND,
                    )
                )

            # Step 2: Referenced entities must be the owner's
            if "customer_id" in present and command.customer_id is not None:
                customer = await self.customer_repo.get_by_id(command.customer_id, owner_id)
                if not customer:
                    return Return.err(
                        Error(
                            code="CUSTOMER_NOT_FOUND",
                            message=f"Customer {command.customer_id} not found",
                            kind=ErrorKind.NOT_FOUND,
                        )
                    )
                invoice.customer_id = customer.id

            if "template_id" in present and command.template_id is not None:
                template = await self.template_repo.get_by_id(command.template_id, owner_id)
                if not template:
                    return Return.err(
                        Error(
                            code="TEMPLATE_NOT_FOUND",
                            message=f"Template {command.template_id} not found",
                            kind=ErrorKind.NOT_FOUND,
                        )
                    )

            if "items" in present:
                validation_error = validate_items(command.items)
                if validation_error:
                    return Return.err(validation_error)

            # Step 3: Overwrite present fields
            for name in NULLABLE_FIELDS:
                if name in present:
                    setattr(invoice, name, getattr(command, name))
            for name in REQUIRED_FIELDS:
                value = getattr(command, name)
                if name in present and value is not None:
                    setattr(invoice, name, value)

            # Step 4: Replace items
            if "items" in present:
                removed = await self.item_repo.delete_by_invoice_id(invoice.id)
                items = await self.item_repo.create_many(build_items(invoice.id, command.items))
                logger.debug(f"Replaced {removed} items with {len(items)} on invoice {invoice.id}")
            else:
                items = await self.item_repo.get_by_invoice_id(invoice.id)

            # Step 5: Recompute totals
            if present & PRICING_FIELDS:
                totals = calculate_invoice_totals(
                    items,
                    tax_rate=invoice.tax_rate,
                    discount_type=invoice.discount_type,
                    discount_value=invoice.discount_value,
                ).rounded()
                invoice.subtotal = totals.subtotal
                invoice.discount_amount = totals.discount_amount
                invoice.tax_amount = totals.tax_amount
                invoice.total_amount = totals.total_amount

            invoice.updated_at = utc_now()
            updated_invoice = await self.invoice_repo.update(invoice)

            # Step 6: Commit transaction
            await self.uow.commit()

            logger.info(f"Updated invoice {updated_invoice.invoice_number} for owner {owner_id}")
            await record_best_effort(
                self.audit_service,
                owner_id,
                "UPDATE",
                "invoice",
                updated_invoice.id,
                {"fields": sorted(present)},
            )

            customer = await self.customer_repo.get_by_id(updated_invoice.customer_id, owner_id)
            company = await self.company_repo.get_by_owner_id(owner_id)
            return Return.ok(
                InvoiceDetailDTO.from_entities(updated_invoice, items, customer, company)
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_INVOICE_FAILED",
                    message="Failed to update invoice",
                    reason=str(e),
                )
            )
