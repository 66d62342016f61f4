"""Line item validation and construction shared by invoicing use cases"""

from decimal import Decimal
from typing import List, Optional, Sequence

from libs.result import Error, ErrorKind
from src.domain.invoice_item import InvoiceItem
from src.domain.pricing import line_amount, line_tax
from .dtos import InvoiceItemInputDTO


def validate_items(items: Optional[Sequence[InvoiceItemInputDTO]]) -> Optional[Error]:
    """
    Check a replacement item set before it reaches the pricing engine

    Returns:
        Validation error for the first offending item, None when valid
    """
    if not items:
        return Error(
            code="VALIDATION_ERROR",
            message="Invoice must have at least one item",
            reason="Empty item list",
            kind=ErrorKind.VALIDATION,
        )

    for index, item in enumerate(items, start=1):
        if not item.description or not item.description.strip():
            return Error(
                code="VALIDATION_ERROR",
                message=f"Item {index}: description is required",
                reason="Blank description",
                kind=ErrorKind.VALIDATION,
            )
        if item.quantity < 0:
            return Error(
                code="VALIDATION_ERROR",
                message=f"Item {index}: quantity must not be negative",
                reason=f"quantity={item.quantity}",
                kind=ErrorKind.VALIDATION,
            )
        if item.unit_price < 0:
            return Error(
                code="VALIDATION_ERROR",
                message=f"Item {index}: unit price must not be negative",
                reason=f"unit_price={item.unit_price}",
                kind=ErrorKind.VALIDATION,
            )

    return None


def build_items(invoice_id: str, items: Sequence[InvoiceItemInputDTO]) -> List[InvoiceItem]:
    """Item entities with derived amounts and 1-based order"""
    return [
        InvoiceItem(
            invoice_id=invoice_id,
            description=item.description,
            quantity=Decimal(item.quantity),
            unit_price=Decimal(item.unit_price),
            amount=line_amount(item.quantity, item.unit_price),
            tax_rate=item.tax_rate,
            tax_amount=line_tax(item.quantity, item.unit_price, item.tax_rate),
            discount=item.discount,
            order=index,
        )
        for index, item in enumerate(items, start=1)
    ]


def to_item_inputs(items: Sequence[InvoiceItem]) -> List[InvoiceItemInputDTO]:
    """Copy stored items back into caller-style inputs"""
    return [
        InvoiceItemInputDTO(
            description=item.description,
            quantity=item.quantity,
            unit_price=item.unit_price,
            tax_rate=item.tax_rate,
            discount=item.discount,
        )
        for item in items
    ]
