"""Unit tests for CreateInvoice use case

Tests cover:
- Numbering, pricing and persistence of a new invoice
- Company profile precondition
- Owner scoping of customer and template
- Item validation
- Rollback and conflict mapping on persistence failures
"""

import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import IntegrityError

from libs.result import ErrorKind
from src.app.use_cases.invoicing.create_invoice import CreateInvoice
from src.app.use_cases.invoicing.dtos import CreateInvoiceCommandDTO, InvoiceItemInputDTO
from src.domain.invoice import DiscountType, InvoiceStatus
from tests.unit.use_cases.factories import OWNER_ID, make_company, make_customer


def passthrough(entity):
    return entity


@pytest.fixture
def repos():
    invoice_repo = MagicMock()
    invoice_repo.create = AsyncMock(side_effect=passthrough)

    item_repo = MagicMock()
    item_repo.create_many = AsyncMock(side_effect=passthrough)

    customer_repo = MagicMock()
    customer_repo.get_by_id = AsyncMock(return_value=make_customer())

    company_repo = MagicMock()
    company_repo.get_by_owner_id = AsyncMock(return_value=make_company())

    template_repo = MagicMock()
    template_repo.get_by_id = AsyncMock(return_value=None)

    allocator = MagicMock()
    allocator.allocate = AsyncMock(return_value="INV-2024-001")

    return dict(
        invoice_repo=invoice_repo,
        item_repo=item_repo,
        customer_repo=customer_repo,
        company_repo=company_repo,
        template_repo=template_repo,
        number_allocator=allocator,
    )


@pytest.fixture
def use_case(mock_uow, repos, mock_audit_service):
    return CreateInvoice(uow=mock_uow, audit_service=mock_audit_service, **repos)


@pytest.fixture
def acme_command():
    return CreateInvoiceCommandDTO(
        customer_id="cus_1",
        issue_date=date(2024, 3, 1),
        items=[
            InvoiceItemInputDTO(description="Consulting", quantity=Decimal("40"), unit_price=Decimal("50")),
            InvoiceItemInputDTO(description="Support", quantity=Decimal("10"), unit_price=Decimal("100")),
        ],
        tax_rate=Decimal("10"),
        discount_type=DiscountType.PERCENTAGE,
        discount_value=Decimal("5"),
    )


@pytest.mark.asyncio
class TestCreateInvoiceSuccess:

    async def test_creates_priced_and_numbered_invoice(self, use_case, repos, mock_uow, acme_command):
        result = await use_case.execute(OWNER_ID, acme_command)

        assert result.is_ok()
        invoice = result.value
        assert invoice.invoice_number == "INV-2024-001"
        assert invoice.status == "DRAFT"
        assert invoice.subtotal == Decimal("3000.00")
        assert invoice.discount_amount == Decimal("150.00")
        assert invoice.tax_amount == Decimal("285.00")
        assert invoice.total_amount == Decimal("3135.00")
        assert invoice.customer.name == "Acme"
        assert invoice.company.name == "Northwind Studio"

        repos["number_allocator"].allocate.assert_awaited_once_with(OWNER_ID, datetime.now(timezone.utc).year)
        mock_uow.commit.assert_awaited_once()
        mock_uow.rollback.assert_not_called()

    async def test_items_get_amounts_and_order(self, use_case, acme_command):
        result = await use_case.execute(OWNER_ID, acme_command)

        items = result.value.items
        assert [item.order for item in items] == [1, 2]
        assert [item.amount for item in items] == [Decimal("2000.00"), Decimal("1000.00")]

    async def test_explicit_status_is_kept(self, use_case, acme_command):
        acme_command.status = InvoiceStatus.SENT

        result = await use_case.execute(OWNER_ID, acme_command)

        assert result.value.status == "SENT"

    async def test_audit_record_written(self, use_case, mock_audit_service, acme_command):
        result = await use_case.execute(OWNER_ID, acme_command)

        mock_audit_service.record.assert_awaited_once()
        args = mock_audit_service.record.await_args.args
        assert args[:4] == (OWNER_ID, "CREATE", "invoice", result.value.id)

    async def test_audit_failure_does_not_fail_create(self, use_case, mock_audit_service, acme_command):
        mock_audit_service.record = AsyncMock(side_effect=RuntimeError("audit store down"))

        result = await use_case.execute(OWNER_ID, acme_command)

        assert result.is_ok()


@pytest.mark.asyncio
class TestCreateInvoiceFailures:

    async def test_requires_company_profile(self, use_case, repos, mock_uow, acme_command):
        repos["company_repo"].get_by_owner_id = AsyncMock(return_value=None)

        result = await use_case.execute(OWNER_ID, acme_command)

        assert result.is_err()
        assert result.error.code == "COMPANY_PROFILE_REQUIRED"
        assert result.error.kind == ErrorKind.PRECONDITION_FAILED
        repos["number_allocator"].allocate.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_customer_of_other_owner_is_not_found(self, use_case, repos, acme_command):
        repos["customer_repo"].get_by_id = AsyncMock(return_value=None)

        result = await use_case.execute(OWNER_ID, acme_command)

        assert result.error.code == "CUSTOMER_NOT_FOUND"
        assert result.error.kind == ErrorKind.NOT_FOUND

    async def test_unknown_template_is_not_found(self, use_case, acme_command):
        acme_command.template_id = "tpl_other_owner"

        result = await use_case.execute(OWNER_ID, acme_command)

        assert result.error.code == "TEMPLATE_NOT_FOUND"

    async def test_empty_items_rejected(self, use_case, repos, acme_command):
        acme_command.items = []

        result = await use_case.execute(OWNER_ID, acme_command)

        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.kind == ErrorKind.VALIDATION
        repos["number_allocator"].allocate.assert_not_called()

    async def test_negative_quantity_rejected(self, use_case, acme_command):
        acme_command.items[1].quantity = Decimal("-1")

        result = await use_case.execute(OWNER_ID, acme_command)

        assert result.error.code == "VALIDATION_ERROR"
        assert "Item 2" in result.error.message

    async def test_number_conflict_rolls_back(self, use_case, repos, mock_uow, acme_command):
        repos["invoice_repo"].create = AsyncMock(
            side_effect=IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
        )

        result = await use_case.execute(OWNER_ID, acme_command)

        assert result.error.code == "INVOICE_NUMBER_CONFLICT"
        assert result.error.kind == ErrorKind.CONFLICT
        mock_uow.rollback.assert_awaited_once()
        mock_uow.commit.assert_not_called()

    async def test_unexpected_error_rolls_back(self, use_case, repos, mock_uow, acme_command):
        repos["item_repo"].create_many = AsyncMock(side_effect=Exception("Database error"))

        result = await use_case.execute(OWNER_ID, acme_command)

        assert result.error.code == "CREATE_INVOICE_FAILED"
        assert result.error.kind == ErrorKind.INTERNAL
        mock_uow.rollback.assert_awaited_once()
