"""Invoice Pricing Engine

Pure computation of subtotal, discount, tax and total for a list of line
items and invoice-level modifiers. No I/O, no rounding until the caller asks
for it, and no validation: every numeric input produces a result.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Protocol, Union

from src.domain.invoice import DiscountType

TWOPLACES = Decimal("0.01")
HUNDRED = Decimal("100")
ZERO = Decimal("0")

Number = Union[Decimal, int, str]


class PricedLine(Protocol):
    quantity: Decimal
    unit_price: Decimal
    tax_rate: Optional[Decimal]


def to_decimal(value: Optional[Number]) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(value: Decimal) -> Decimal:
    """Half-up rounding to 2 decimal places"""
    return value.quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def line_amount(quantity: Number, unit_price: Number) -> Decimal:
    """Rounded line amount as stored on an item"""
    return round_money(to_decimal(quantity) * to_decimal(unit_price))


def line_tax(quantity: Number, unit_price: Number, tax_rate: Optional[Number]) -> Optional[Decimal]:
    """Rounded item-level tax, or None when the item has no rate of its own"""
    if not tax_rate:
        return None
    return round_money(to_decimal(quantity) * to_decimal(unit_price) * to_decimal(tax_rate) / HUNDRED)


@dataclass(frozen=True)
class InvoiceTotals:
    subtotal: Decimal
    discount_amount: Decimal
    tax_amount: Decimal
    total_amount: Decimal

    @property
    def amount_after_discount(self) -> Decimal:
        return self.subtotal - self.discount_amount

    def rounded(self) -> "InvoiceTotals":
        """Totals as persisted and rendered (half-up, 2 dp)"""
        return InvoiceTotals(
            subtotal=round_money(self.subtotal),
            discount_amount=round_money(self.discount_amount),
            tax_amount=round_money(self.tax_amount),
            total_amount=round_money(self.total_amount),
        )


def calculate_invoice_totals(
    items: Iterable[PricedLine],
    tax_rate: Optional[Number] = None,
    discount_type: Optional[DiscountType] = None,
    discount_value: Optional[Number] = None,
) -> InvoiceTotals:
    """
    Compute invoice totals at full precision

    Item-level tax rates override the invoice-wide rate entirely: when any
    item contributes tax, the invoice rate is ignored. Invoice-level tax is
    charged on the discounted amount; item-level tax is not discounted.
    A fixed discount is not capped and may push the total below zero.

    Args:
        items: Line items exposing quantity, unit_price and tax_rate
        tax_rate: Invoice-wide tax percentage
        discount_type: PERCENTAGE of subtotal or FIXED amount
        discount_value: Percentage or amount, per discount_type

    Returns:
        InvoiceTotals, unrounded
    """
    subtotal = ZERO
    item_tax = ZERO

    for item in items:
        amount = to_decimal(item.quantity) * to_decimal(item.unit_price)
        subtotal += amount
        if item.tax_rate:
            item_tax += amount * to_decimal(item.tax_rate) / HUNDRED

    value = to_decimal(discount_value)
    if discount_type == DiscountType.PERCENTAGE:
        discount_amount = subtotal * value / HUNDRED
    elif discount_type == DiscountType.FIXED:
        discount_amount = value
    else:
        discount_amount = ZERO

    amount_after_discount = subtotal - discount_amount

    if item_tax > ZERO:
        tax_amount = item_tax
    else:
        tax_amount = amount_after_discount * to_decimal(tax_rate) / HUNDRED

    return InvoiceTotals(
        subtotal=subtotal,
        discount_amount=discount_amount,
        tax_amount=tax_amount,
        total_amount=amount_after_discount + tax_amount,
    )
