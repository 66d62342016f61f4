"""Request builders shared by API integration tests"""

from datetime import datetime, timezone

from httpx import AsyncClient

ACME_ITEMS = [
    {"description": "Consulting", "quantity": "40", "unit_price": "50.00"},
    {"description": "Support plan", "quantity": "10", "unit_price": "100.00"},
]


def invoice_number(sequence: int) -> str:
    """Number allocated in the current UTC year"""
    return f"INV-{datetime.now(timezone.utc).year}-{sequence:03d}"


def owner(owner_id: str) -> dict:
    return {"X-Owner-Id": owner_id}


async def setup_owner(client: AsyncClient, owner_id: str, customer_email: str = "billing@acme.test") -> str:
    """Company profile plus one customer; returns the customer id"""
    response = await client.post(
        "/api/company", json={"name": "Northwind Studio", "email": "hi@northwind.test"}, headers=owner(owner_id)
    )
    assert response.status_code == 201

    response = await client.post(
        "/api/customers", json={"name": "Acme Corp", "email": customer_email}, headers=owner(owner_id)
    )
    assert response.status_code == 201
    return response.json()["id"]


async def create_acme_invoice(client: AsyncClient, owner_id: str, customer_id: str, **overrides) -> dict:
    payload = {
        "customer_id": customer_id,
        "items": ACME_ITEMS,
        "issue_date": "2024-03-01",
        "tax_rate": "10",
        "discount_type": "PERCENTAGE",
        "discount_value": "5",
    }
    payload.update(overrides)
    response = await client.post("/api/invoices", json=payload, headers=owner(owner_id))
    assert response.status_code == 201, response.text
    return response.json()
