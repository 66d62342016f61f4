"""Unit tests for entity timestamps"""

import pytest
from sqlalchemy import DateTime

from src.domain.base import utc_now
from src.domain.company import Company
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from src.domain.invoice_template import InvoiceTemplate

TIMESTAMPED = [
    (Company, ("created_at", "updated_at")),
    (Customer, ("created_at", "updated_at")),
    (Invoice, ("created_at", "updated_at")),
    (InvoiceItem, ("created_at",)),
    (InvoiceTemplate, ("created_at", "updated_at")),
]


def test_utc_now_is_timezone_aware():
    assert utc_now().utcoffset() is not None


@pytest.mark.parametrize("entity, columns", TIMESTAMPED)
def test_timestamp_columns_store_timezone(entity, columns):
    table = entity.__table__
    for name in columns:
        column_type = table.c[name].type
        assert isinstance(column_type, DateTime)
        assert column_type.timezone is True


def test_default_timestamps_are_timezone_aware():
    company = Company(owner_id="owner-1", name="Studio")
    customer = Customer(owner_id="owner-1", name="Acme Corp")

    for value in (company.created_at, company.updated_at, customer.created_at, customer.updated_at):
        assert value.tzinfo is not None
