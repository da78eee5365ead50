"""Rendering helpers for list rows, tab bars, page windows and detail panels."""

from __future__ import annotations

from rich.text import Text

from backoffice.constant import STATUS_STYLES
from backoffice.data import field_label, status_label
from backoffice.invoice import Invoice, derive_invoice, product_lines
from backoffice.models import ELLIPSIS, ListSpec, PageWindow, Record

_DEFAULT_BADGE = "bold #ffffff on #637381"
PANEL_ORDER = "order"
PANEL_PRODUCT = "product"
PANEL_SUMMARY = "summary"
PANEL_REFUND = "refund"
PANEL_INVOICE = "invoice"


def badge_style(status: str) -> str:
    """Return a consistent badge style for a record status."""
    return STATUS_STYLES.get(status, _DEFAULT_BADGE)


def format_status_badge(status: str) -> Text:
    return Text(f" {status_label(status)} ", style=badge_style(status))


def format_row_label(record: Record, spec: ListSpec) -> Text:
    """Render one list row: id, the screen's columns, then the status badge."""
    text = Text()
    text.append(record.id, style="bold")
    for column in spec.columns:
        value = record.value(column)
        text.append("  ")
        text.append("-" if value in (None, "") else str(value))
    text.append("  ")
    text.append_text(format_status_badge(record.status))
    return text


def format_tabs(spec: ListSpec, active_tab: str, counts: dict[str, int]) -> Text:
    """Render the tab bar, with a badge count per tab when known."""
    text = Text()
    for idx, tab in enumerate(spec.tabs):
        if idx > 0:
            text.append(" | ", style="dim")
        label = status_label(tab)
        if tab in counts:
            label = f"{label} ({counts[tab]})"
        style = "bold reverse" if tab == active_tab else ""
        text.append(label, style=style)
    return text


def format_page_window(window: PageWindow, current_page: int) -> Text:
    text = Text()
    for idx, item in enumerate(window):
        if idx > 0:
            text.append(" ")
        if item == ELLIPSIS:
            text.append("…", style="dim")
        elif item == current_page:
            text.append(f"[{item}]", style="bold reverse")
        else:
            text.append(str(item))
    return text


def _field_lines(text: Text, pairs: list[tuple[str, object]]) -> None:
    width = max((len(label) for label, _ in pairs), default=0)
    for label, value in pairs:
        text.append(f"{label.ljust(width)}  ", style="bold")
        text.append("-" if value in (None, "") else str(value))
        text.append("\n")


def format_record_detail(record: Record) -> Text:
    """Generic detail panel listing every field of a record."""
    text = Text()
    text.append(f"{record.id}  ", style="bold")
    text.append_text(format_status_badge(record.status))
    text.append("\n\n")
    _field_lines(text, [(field_label(name), value) for name, value in record.fields.items()])
    return text


def format_order_detail(order: Record) -> Text:
    text = format_record_detail(order)
    text.append("\nProducts\n", style="bold underline")
    for line in product_lines(order):
        text.append(f"  {line.value('quantity')} x {line.value('product')}  {line.value('total')}\n")
    text.append("\np product  u summary", style="dim")
    return text


def format_product_detail(line: Record) -> Text:
    text = Text()
    text.append(f"Product line {line.id}\n\n", style="bold")
    _field_lines(
        text,
        [
            ("Product", line.value("product")),
            ("Quantity", line.value("quantity")),
            ("Unit price", line.value("unit_price")),
            ("Total", line.value("total")),
        ],
    )
    return text


def _totals(text: Text, invoice: Invoice) -> None:
    _field_lines(
        text,
        [
            ("Subtotal", f"${invoice.subtotal:,.2f}"),
            ("Discount", f"-${invoice.discount:,.2f}"),
            ("Tax (8%)", f"${invoice.tax:,.2f}"),
            ("Shipping", f"${invoice.shipping:,.2f}"),
            ("Total", f"${invoice.total:,.2f}"),
        ],
    )


def format_order_summary(order: Record) -> Text:
    invoice = derive_invoice(order)
    text = Text()
    text.append(f"Order summary {order.id}\n\n", style="bold")
    _totals(text, invoice)
    text.append("\nr refund  i invoice", style="dim")
    return text


def format_refund_form(order: Record) -> Text:
    invoice = derive_invoice(order)
    text = Text()
    text.append(f"Refund {order.id}\n\n", style="bold")
    _field_lines(
        text,
        [
            ("Customer", invoice.customer_name),
            ("Payment", order.value("payment_method")),
            ("Refundable", f"${invoice.total:,.2f}"),
        ],
    )
    text.append("\nEnter refund with reason  Esc back", style="dim")
    return text


def format_invoice(invoice: Invoice) -> Text:
    text = Text()
    text.append(f"Invoice {invoice.invoice_id}\n\n", style="bold")
    _field_lines(
        text,
        [
            ("Order", invoice.order_id),
            ("Issued", f"{invoice.issue_date} {invoice.issue_time}"),
            ("Due", invoice.due_date),
            ("Bill to", invoice.customer_name),
            ("Email", invoice.customer_email),
        ],
    )
    text.append("\n")
    for line in invoice.lines:
        text.append(f"{line.line_no}. {line.description}  {line.quantity} x ${line.unit_price:,.2f}")
        text.append(f"  ${line.total:,.2f}\n")
    text.append("\n")
    _totals(text, invoice)
    text.append("\nShift+P print", style="dim")
    return text


def format_panel(record: Record, panel: str | None) -> Text:
    """Pick the detail renderer for a navigator entry's panel."""
    if panel == PANEL_ORDER:
        return format_order_detail(record)
    if panel == PANEL_PRODUCT:
        return format_product_detail(record)
    if panel == PANEL_SUMMARY:
        return format_order_summary(record)
    if panel == PANEL_REFUND:
        return format_refund_form(record)
    if panel == PANEL_INVOICE:
        return format_invoice(derive_invoice(record))
    return format_record_detail(record)
