"""Integration tests for Invoice API endpoints"""

import pytest
from datetime import datetime, timezone
from decimal import Decimal
from io import BytesIO

from httpx import AsyncClient
from openpyxl import load_workbook

from tests.integration.helpers import create_acme_invoice, invoice_number, owner, setup_owner


class TestInvoiceAPIIntegration:
    """Integration test suite for the invoice lifecycle over HTTP"""

    @pytest.mark.asyncio
    async def test_create_and_get_invoice(self, client: AsyncClient):
        customer_id = await setup_owner(client, "owner_a")

        created = await create_acme_invoice(client, "owner_a", customer_id)

        assert created["invoice_number"] == invoice_number(1)
        assert created["status"] == "DRAFT"
        assert Decimal(created["subtotal"]) == Decimal("3000")
        assert Decimal(created["discount_amount"]) == Decimal("150")
        assert Decimal(created["tax_amount"]) == Decimal("285")
        assert Decimal(created["total_amount"]) == Decimal("3135")

        response = await client.get(f"/api/invoices/{created['id']}", headers=owner("owner_a"))
        assert response.status_code == 200
        data = response.json()
        assert [item["description"] for item in data["items"]] == ["Consulting", "Support plan"]
        assert data["customer"]["name"] == "Acme Corp"
        assert data["company"]["name"] == "Northwind Studio"

    @pytest.mark.asyncio
    async def test_client_supplied_totals_are_ignored(self, client: AsyncClient):
        customer_id = await setup_owner(client, "owner_a")

        created = await create_acme_invoice(
            client, "owner_a", customer_id, total_amount="1.00", invoice_number="INV-1999-999"
        )

        assert created["invoice_number"] == invoice_number(1)
        assert Decimal(created["total_amount"]) == Decimal("3135")

    @pytest.mark.asyncio
    async def test_invoice_of_other_owner_is_not_found(self, client: AsyncClient):
        customer_id = await setup_owner(client, "owner_a")
        await setup_owner(client, "owner_b")
        created = await create_acme_invoice(client, "owner_a", customer_id)

        for method in ("get", "delete"):
            response = await getattr(client, method)(f"/api/invoices/{created['id']}", headers=owner("owner_b"))
            assert response.status_code == 404
            assert response.json()["error"]["code"] == "INVOICE_NOT_FOUND"

        response = await client.put(
            f"/api/invoices/{created['id']}", json={"notes": "x"}, headers=owner("owner_b")
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_missing_company_profile(self, client: AsyncClient):
        response = await client.post(
            "/api/customers", json={"name": "Acme Corp"}, headers=owner("owner_new")
        )
        customer_id = response.json()["id"]

        response = await client.post(
            "/api/invoices",
            json={"customer_id": customer_id, "items": [{"description": "x", "quantity": "1", "unit_price": "1"}]},
            headers=owner("owner_new"),
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "COMPANY_PROFILE_REQUIRED"

    @pytest.mark.asyncio
    async def test_invalid_items_rejected(self, client: AsyncClient):
        customer_id = await setup_owner(client, "owner_a")

        negative = await client.post(
            "/api/invoices",
            json={"customer_id": customer_id, "items": [{"description": "x", "quantity": "-1", "unit_price": "5"}]},
            headers=owner("owner_a"),
        )
        empty = await client.post(
            "/api/invoices", json={"customer_id": customer_id, "items": []}, headers=owner("owner_a")
        )

        assert negative.status_code == 400
        assert negative.json()["error"]["code"] == "VALIDATION_ERROR"
        assert empty.status_code == 400

    @pytest.mark.asyncio
    async def test_missing_owner_header_is_unauthenticated(self, client: AsyncClient):
        response = await client.get("/api/invoices")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHENTICATED"

    @pytest.mark.asyncio
    async def test_update_reprices_and_clears_fields(self, client: AsyncClient):
        customer_id = await setup_owner(client, "owner_a")
        created = await create_acme_invoice(client, "owner_a", customer_id, notes="Net 30")

        response = await client.put(
            f"/api/invoices/{created['id']}",
            json={"tax_rate": None, "notes": None, "status": "SENT"},
            headers=owner("owner_a"),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "SENT"
        assert data["notes"] is None
        assert data["tax_rate"] is None
        assert Decimal(data["tax_amount"]) == Decimal("0")
        assert Decimal(data["total_amount"]) == Decimal("2850")
        assert data["invoice_number"] == created["invoice_number"]

    @pytest.mark.asyncio
    async def test_list_filters_and_paginates(self, client: AsyncClient):
        customer_id = await setup_owner(client, "owner_a")
        for _ in range(3):
            await create_acme_invoice(client, "owner_a", customer_id)
        await create_acme_invoice(client, "owner_a", customer_id, status="PAID")

        page = await client.get("/api/invoices?page=2&limit=3", headers=owner("owner_a"))
        paid = await client.get("/api/invoices?status=PAID", headers=owner("owner_a"))
        search = await client.get("/api/invoices?search=acme", headers=owner("owner_a"))

        assert page.json()["pagination"] == {"total": 4, "page": 2, "limit": 3, "total_pages": 2}
        assert len(page.json()["invoices"]) == 1
        assert [invoice["invoice_number"] for invoice in paid.json()["invoices"]] == [invoice_number(4)]
        assert search.json()["pagination"]["total"] == 4
        assert search.json()["invoices"][0]["customer_name"] == "Acme Corp"

    @pytest.mark.asyncio
    async def test_duplicate_creates_new_draft(self, client: AsyncClient):
        customer_id = await setup_owner(client, "owner_a")
        source = await create_acme_invoice(client, "owner_a", customer_id, status="PAID", notes="Thanks")

        response = await client.post(f"/api/invoices/{source['id']}/duplicate", headers=owner("owner_a"))

        assert response.status_code == 201
        copy = response.json()
        assert copy["id"] != source["id"]
        assert copy["status"] == "DRAFT"
        assert copy["issue_date"] == datetime.now(timezone.utc).date().isoformat()
        assert copy["invoice_number"].startswith(f"INV-{datetime.now(timezone.utc).year}-")
        assert copy["invoice_number"] != source["invoice_number"]
        assert copy["total_amount"] == source["total_amount"]
        assert copy["notes"] == "Thanks"
        assert len(copy["items"]) == 2

    @pytest.mark.asyncio
    async def test_delete_invoice(self, client: AsyncClient):
        customer_id = await setup_owner(client, "owner_a")
        created = await create_acme_invoice(client, "owner_a", customer_id)

        response = await client.delete(f"/api/invoices/{created['id']}", headers=owner("owner_a"))
        assert response.status_code == 204

        response = await client.get(f"/api/invoices/{created['id']}", headers=owner("owner_a"))
        assert response.status_code == 404


class TestInvoiceDocumentsAPIIntegration:

    @pytest.mark.asyncio
    async def test_export_pdf(self, client: AsyncClient):
        customer_id = await setup_owner(client, "owner_a")
        created = await create_acme_invoice(client, "owner_a", customer_id)

        response = await client.get(f"/api/invoices/{created['id']}/export/pdf", headers=owner("owner_a"))

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert f'filename="invoice-{invoice_number(1)}.pdf"' in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")

    @pytest.mark.asyncio
    async def test_export_spreadsheet_matches_stored_total(self, client: AsyncClient):
        customer_id = await setup_owner(client, "owner_a")
        created = await create_acme_invoice(client, "owner_a", customer_id)

        response = await client.get(f"/api/invoices/{created['id']}/export/xlsx", headers=owner("owner_a"))

        assert response.status_code == 200
        sheet = load_workbook(BytesIO(response.content))["Invoice"]
        totals = [row[3].value for row in sheet.iter_rows(min_col=1, max_col=4) if row[2].value == "TOTAL"]
        assert totals == [3135]

    @pytest.mark.asyncio
    async def test_export_flow_document(self, client: AsyncClient):
        customer_id = await setup_owner(client, "owner_a")
        created = await create_acme_invoice(client, "owner_a", customer_id)

        response = await client.get(f"/api/invoices/{created['id']}/export/docx", headers=owner("owner_a"))

        assert response.status_code == 200
        assert response.headers["content-type"].endswith("wordprocessingml.document")

    @pytest.mark.asyncio
    async def test_export_unsupported_format(self, client: AsyncClient):
        customer_id = await setup_owner(client, "owner_a")
        created = await create_acme_invoice(client, "owner_a", customer_id)

        response = await client.get(f"/api/invoices/{created['id']}/export/odt", headers=owner("owner_a"))

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "UNSUPPORTED_FORMAT"

    @pytest.mark.asyncio
    async def test_email_defaults_to_customer_address(self, client: AsyncClient):
        customer_id = await setup_owner(client, "owner_a")
        created = await create_acme_invoice(client, "owner_a", customer_id)

        response = await client.post(f"/api/invoices/{created['id']}/email", headers=owner("owner_a"))

        assert response.status_code == 200
        assert response.json() == {
            "invoice_id": created["id"],
            "invoice_number": invoice_number(1),
            "recipient": "billing@acme.test",
            "sent": True,
        }

    @pytest.mark.asyncio
    async def test_email_without_any_recipient(self, client: AsyncClient):
        await client.post("/api/company", json={"name": "Northwind Studio"}, headers=owner("owner_a"))
        customer = await client.post("/api/customers", json={"name": "No Mail Ltd"}, headers=owner("owner_a"))
        created = await create_acme_invoice(client, "owner_a", customer.json()["id"])

        response = await client.post(f"/api/invoices/{created['id']}/email", headers=owner("owner_a"))
        explicit = await client.post(
            f"/api/invoices/{created['id']}/email", json={"recipient": "ap@nomail.test"}, headers=owner("owner_a")
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        assert explicit.status_code == 200
        assert explicit.json()["recipient"] == "ap@nomail.test"
