"""Unit tests for UpdateInvoice use case"""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoicing.dtos import InvoiceItemInputDTO, UpdateInvoiceCommandDTO
from src.app.use_cases.invoicing.update_invoice import UpdateInvoice
from src.domain.invoice import DiscountType, InvoiceStatus
from tests.unit.use_cases.factories import (
    OWNER_ID,
    make_company,
    make_customer,
    make_invoice,
    make_item,
)


def passthrough(entity):
    return entity


@pytest.fixture
def invoice():
    return make_invoice(notes="Old notes")


@pytest.fixture
def stored_items():
    return [make_item(1, "10", "100"), make_item(2, "20", "50"), make_item(3, "1", "1000")]


@pytest.fixture
def repos(invoice, stored_items):
    invoice_repo = MagicMock()
    invoice_repo.get_by_id = AsyncMock(return_value=invoice)
    invoice_repo.update = AsyncMock(side_effect=passthrough)

    item_repo = MagicMock()
    item_repo.get_by_invoice_id = AsyncMock(return_value=stored_items)
    item_repo.delete_by_invoice_id = AsyncMock(return_value=len(stored_items))
    item_repo.create_many = AsyncMock(side_effect=passthrough)

    customer_repo = MagicMock()
    customer_repo.get_by_id = AsyncMock(return_value=make_customer())

    company_repo = MagicMock()
    company_repo.get_by_owner_id = AsyncMock(return_value=make_company())

    template_repo = MagicMock()
    template_repo.get_by_id = AsyncMock(return_value=None)

    return dict(
        invoice_repo=invoice_repo,
        item_repo=item_repo,
        customer_repo=customer_repo,
        company_repo=company_repo,
        template_repo=template_repo,
    )


@pytest.fixture
def use_case(mock_uow, repos):
    return UpdateInvoice(uow=mock_uow, **repos)


@pytest.mark.asyncio
class TestItemReplacement:

    async def test_three_items_replaced_by_one(self, use_case, repos, mock_uow):
        command = UpdateInvoiceCommandDTO(
            items=[InvoiceItemInputDTO(description="Retainer", quantity=Decimal("2"), unit_price=Decimal("250"))]
        )

        result = await use_case.execute(OWNER_ID, "inv_1", command)

        assert result.is_ok()
        assert len(result.value.items) == 1
        assert result.value.items[0].description == "Retainer"
        assert result.value.subtotal == Decimal("500.00")
        assert result.value.tax_amount == Decimal("50.00")
        assert result.value.total_amount == Decimal("550.00")
        repos["item_repo"].delete_by_invoice_id.assert_awaited_once_with("inv_1")
        repos["item_repo"].get_by_invoice_id.assert_not_called()
        mock_uow.commit.assert_awaited_once()

    async def test_invalid_items_leave_invoice_untouched(self, use_case, repos, mock_uow):
        command = UpdateInvoiceCommandDTO(
            items=[InvoiceItemInputDTO(description="  ", quantity=Decimal("1"), unit_price=Decimal("1"))]
        )

        result = await use_case.execute(OWNER_ID, "inv_1", command)

        assert result.error.code == "VALIDATION_ERROR"
        repos["item_repo"].delete_by_invoice_id.assert_not_called()
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestRecompute:

    async def test_pricing_field_reprices_stored_items(self, use_case, repos):
        command = UpdateInvoiceCommandDTO(
            discount_type=DiscountType.FIXED, discount_value=Decimal("100")
        )

        result = await use_case.execute(OWNER_ID, "inv_1", command)

        # stored items: 1000 + 1000 + 1000
        assert result.value.subtotal == Decimal("3000.00")
        assert result.value.discount_amount == Decimal("100.00")
        assert result.value.tax_amount == Decimal("290.00")
        assert result.value.total_amount == Decimal("3190.00")
        repos["item_repo"].delete_by_invoice_id.assert_not_called()

    async def test_explicit_null_tax_rate_clears_tax(self, use_case):
        command = UpdateInvoiceCommandDTO(tax_rate=None)

        result = await use_case.execute(OWNER_ID, "inv_1", command)

        assert result.value.tax_rate is None
        assert result.value.tax_amount == Decimal("0.00")
        assert result.value.total_amount == Decimal("3000.00")

    async def test_non_pricing_update_keeps_totals(self, use_case, invoice):
        command = UpdateInvoiceCommandDTO(notes="New notes", status=InvoiceStatus.SENT)

        result = await use_case.execute(OWNER_ID, "inv_1", command)

        assert result.value.notes == "New notes"
        assert result.value.status == "SENT"
        assert result.value.total_amount == Decimal("3300.00")

    async def test_absent_fields_are_untouched(self, use_case):
        command = UpdateInvoiceCommandDTO(due_date=date(2024, 4, 30))

        result = await use_case.execute(OWNER_ID, "inv_1", command)

        assert result.value.due_date == date(2024, 4, 30)
        assert result.value.notes == "Old notes"
        assert result.value.invoice_number == "INV-2024-001"


@pytest.mark.asyncio
class TestOwnership:

    async def test_invoice_of_other_owner_is_not_found(self, use_case, repos):
        repos["invoice_repo"].get_by_id = AsyncMock(return_value=None)

        result = await use_case.execute("owner_2", "inv_1", UpdateInvoiceCommandDTO(notes="x"))

        assert result.error.code == "INVOICE_NOT_FOUND"

    async def test_changed_customer_must_belong_to_owner(self, use_case, repos, mock_uow):
        repos["customer_repo"].get_by_id = AsyncMock(return_value=None)

        result = await use_case.execute(OWNER_ID, "inv_1", UpdateInvoiceCommandDTO(customer_id="cus_x"))

        assert result.error.code == "CUSTOMER_NOT_FOUND"
        mock_uow.commit.assert_not_called()

    async def test_changed_template_must_belong_to_owner(self, use_case):
        result = await use_case.execute(OWNER_ID, "inv_1", UpdateInvoiceCommandDTO(template_id="tpl_x"))

        assert result.error.code == "TEMPLATE_NOT_FOUND"

    async def test_persistence_failure_rolls_back(self, use_case, repos, mock_uow):
        repos["invoice_repo"].update = AsyncMock(side_effect=Exception("Database error"))

        result = await use_case.execute(OWNER_ID, "inv_1", UpdateInvoiceCommandDTO(notes="x"))

        assert result.error.code == "UPDATE_INVOICE_FAILED"
        mock_uow.rollback.assert_awaited_once()
