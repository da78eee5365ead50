"""Pseudo-invoice derivation for orders that carry only a total amount.

The platform's order list knows a single amount per order. The invoice panel
still shows line items, discount, tax and shipping, all derived here from the
order id and amount so the same order always yields the same invoice.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from backoffice.constant import INVOICE_SECOND_ITEMS
from backoffice.models import Record

TAX_RATE = Decimal("0.08")
DUE_DAYS = 30
ISSUE_TIME = "16:30:00"
_CENT = Decimal("0.01")
_ORDER_DATE_FORMATS = ("%d %b %Y", "%Y-%m-%d", "%d/%m/%Y")


@dataclass(frozen=True)
class InvoiceLine:
    line_no: int
    description: str
    quantity: int
    unit_price: Decimal
    total: Decimal


@dataclass(frozen=True)
class Invoice:
    invoice_id: str
    order_id: str
    issue_date: str
    issue_time: str
    due_date: str
    customer_name: str
    customer_email: str
    lines: list[InvoiceLine]
    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal


def money(value: Decimal | float | int | str) -> Decimal:
    """Round half-up to whole cents."""
    return Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP)


def order_number(order_id: str) -> int:
    digits = re.sub(r"[^0-9]", "", order_id)
    return int(digits) if digits and int(digits) > 0 else 1


def _padded_number(order_id: str) -> str:
    match = re.search(r"\d+", order_id)
    return match.group(0).zfill(3) if match else "001"


def _issue_date(raw: object, today: date) -> date:
    if isinstance(raw, str):
        for fmt in _ORDER_DATE_FORMATS:
            try:
                return datetime.strptime(raw.strip(), fmt).date()
            except ValueError:
                continue
    return today


def _amount(order: Record) -> Decimal:
    raw = order.value("amount")
    if isinstance(raw, str):
        raw = raw.replace("$", "").replace(",", "").strip() or "0"
    return money(raw if raw is not None else 0)


def invoice_lines(order: Record) -> list[InvoiceLine]:
    num = order_number(order.id)
    seed = num % 10
    amount = _amount(order)
    product = str(order.value("product") or "Item")

    if amount > 400 and seed % 2 == 0:
        first = money(amount * Decimal("0.7"))
        second = money(amount * Decimal("0.3"))
        key = "seed_divisible_by_3" if seed % 3 == 0 else "default"
        return [
            InvoiceLine(1, product, 1, first, first),
            InvoiceLine(2, INVOICE_SECOND_ITEMS[key], 1, second, second),
        ]
    if amount > 200 and seed % 3 == 0:
        return [InvoiceLine(1, product, 2, money(amount / 2), amount)]
    return [InvoiceLine(1, product, 1, amount, amount)]


def _shipping(amount: Decimal, num: int) -> Decimal:
    if amount > 500:
        return money((num % 5) + 10)
    if amount > 200:
        return money((num % 3) + 8)
    return money((num % 3) + 5)


def derive_invoice(order: Record, today: date | None = None) -> Invoice:
    """Build the deterministic invoice shown for an order."""
    num = order_number(order.id)
    lines = invoice_lines(order)
    subtotal = money(sum((line.total for line in lines), Decimal("0")))
    discount = money(subtotal * Decimal((num % 6) + 5) / 100)
    tax = money((subtotal - discount) * TAX_RATE)
    shipping = _shipping(_amount(order), num)
    total = money(subtotal - discount + tax + shipping)

    issued = _issue_date(order.value("order_date"), today or date.today())
    customer_name = str(order.value("customer_name") or "")
    email_local = re.sub(r"\s+", ".", customer_name.lower())
    padded = _padded_number(order.id)
    return Invoice(
        invoice_id=f"INV-2024-{padded}",
        order_id=f"ORD-2024-{padded}",
        issue_date=issued.isoformat(),
        issue_time=ISSUE_TIME,
        due_date=(issued + timedelta(days=DUE_DAYS)).isoformat(),
        customer_name=customer_name,
        customer_email=f"{email_local}@email.com",
        lines=lines,
        subtotal=subtotal,
        discount=discount,
        tax=tax,
        shipping=shipping,
        total=total,
    )


def product_lines(order: Record) -> list[Record]:
    """Invoice lines as sub-records whose liveness follows the order."""
    return [
        Record(
            id=f"{order.id}/{line.line_no}",
            status=order.status,
            fields={
                "product": line.description,
                "quantity": line.quantity,
                "unit_price": f"${line.unit_price:,.2f}",
                "total": f"${line.total:,.2f}",
            },
            parent_id=order.id,
        )
        for line in invoice_lines(order)
    ]
