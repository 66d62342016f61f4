"""Unit tests for GetInvoice, ListInvoices and DeleteInvoice use cases"""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from libs.result import ErrorKind
from src.app.use_cases.invoicing.delete_invoice import DeleteInvoice
from src.app.use_cases.invoicing.dtos import ListInvoicesQueryDTO
from src.app.use_cases.invoicing.get_invoice import GetInvoice
from src.app.use_cases.invoicing.list_invoices import ListInvoices
from src.domain.invoice import InvoiceStatus
from tests.unit.use_cases.factories import (
    OWNER_ID,
    make_company,
    make_customer,
    make_invoice,
    make_item,
)


@pytest.fixture
def invoice_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=make_invoice())
    repo.delete = AsyncMock()
    return repo


@pytest.fixture
def customer_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=make_customer())
    repo.get_by_ids = AsyncMock(return_value=[make_customer()])
    return repo


@pytest.mark.asyncio
class TestGetInvoice:

    async def test_returns_joined_invoice(self, invoice_repo, customer_repo):
        item_repo = MagicMock()
        item_repo.get_by_invoice_id = AsyncMock(return_value=[make_item(1, "1", "10"), make_item(2, "2", "5")])
        company_repo = MagicMock()
        company_repo.get_by_owner_id = AsyncMock(return_value=make_company())

        result = await GetInvoice(invoice_repo, item_repo, customer_repo, company_repo).execute(OWNER_ID, "inv_1")

        assert result.is_ok()
        assert [item.order for item in result.value.items] == [1, 2]
        assert result.value.customer.id == "cus_1"
        invoice_repo.get_by_id.assert_awaited_once_with("inv_1", OWNER_ID)

    async def test_not_found(self, invoice_repo, customer_repo):
        invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetInvoice(invoice_repo, MagicMock(), customer_repo, MagicMock()).execute(
            "owner_2", "inv_1"
        )

        assert result.error.code == "INVOICE_NOT_FOUND"
        assert result.error.kind == ErrorKind.NOT_FOUND


@pytest.mark.asyncio
class TestListInvoices:

    async def test_page_with_customer_names(self, invoice_repo, customer_repo):
        invoices = [make_invoice(id=f"inv_{n}", invoice_number=f"INV-2024-00{n}") for n in (3, 2)]
        invoice_repo.list = AsyncMock(return_value=(invoices, 12))

        query = ListInvoicesQueryDTO(status=InvoiceStatus.DRAFT, search=" acme ", page=2, limit=5)
        result = await ListInvoices(invoice_repo, customer_repo).execute(OWNER_ID, query)

        assert result.is_ok()
        assert [summary.invoice_number for summary in result.value.invoices] == ["INV-2024-003", "INV-2024-002"]
        assert result.value.invoices[0].customer_name == "Acme"
        assert result.value.pagination.model_dump() == {"total": 12, "page": 2, "limit": 5, "total_pages": 3}

        kwargs = invoice_repo.list.await_args.kwargs
        assert kwargs["offset"] == 5
        assert kwargs["limit"] == 5
        assert kwargs["filters"].search == "acme"
        assert kwargs["filters"].status == InvoiceStatus.DRAFT

    async def test_date_range_passed_through(self, invoice_repo, customer_repo):
        invoice_repo.list = AsyncMock(return_value=([], 0))
        query = ListInvoicesQueryDTO(start_date=date(2024, 1, 1), end_date=date(2024, 1, 31))

        result = await ListInvoices(invoice_repo, customer_repo).execute(OWNER_ID, query)

        filters = invoice_repo.list.await_args.kwargs["filters"]
        assert (filters.start_date, filters.end_date) == (date(2024, 1, 1), date(2024, 1, 31))
        assert result.value.pagination.total_pages == 0
        customer_repo.get_by_ids.assert_not_called()

    async def test_invalid_page_rejected(self, invoice_repo, customer_repo):
        result = await ListInvoices(invoice_repo, customer_repo).execute(OWNER_ID, ListInvoicesQueryDTO(page=0))

        assert result.error.kind == ErrorKind.VALIDATION


@pytest.mark.asyncio
class TestDeleteInvoice:

    async def test_deletes_and_commits(self, invoice_repo, mock_uow, mock_audit_service):
        result = await DeleteInvoice(mock_uow, invoice_repo, mock_audit_service).execute(OWNER_ID, "inv_1")

        assert result.is_ok()
        invoice_repo.delete.assert_awaited_once()
        mock_uow.commit.assert_awaited_once()
        assert mock_audit_service.record.await_args.args[1] == "DELETE"

    async def test_not_found_for_other_owner(self, invoice_repo, mock_uow):
        invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await DeleteInvoice(mock_uow, invoice_repo).execute("owner_2", "inv_1")

        assert result.error.code == "INVOICE_NOT_FOUND"
        invoice_repo.delete.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_failure_rolls_back(self, invoice_repo, mock_uow):
        invoice_repo.delete = AsyncMock(side_effect=Exception("Database error"))

        result = await DeleteInvoice(mock_uow, invoice_repo).execute(OWNER_ID, "inv_1")

        assert result.error.code == "DELETE_INVOICE_FAILED"
        mock_uow.rollback.assert_awaited_once()
