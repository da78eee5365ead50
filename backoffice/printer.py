"""Thermal receipt printing of derived invoices."""

from __future__ import annotations

import os
from pathlib import Path

from backoffice.config import (
    PRINTER_FONT_PATH,
    PRINTER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
)
from backoffice.invoice import Invoice

_FONT_OVERRIDE_ENV = "BACKOFFICE_PRINTER_FONT_PATH"
_LINUX_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/noto/NotoSans-Regular.ttf",
    "/usr/share/fonts/liberation/LiberationSans-Regular.ttf",
)
_LINE_EXTRA_PX = 8
_RULE_HEIGHT_PX = 10
_TAIL_SPACER_PX = 60


def resolve_printer_font_path() -> str:
    """
    Resolve a printer font path.

    Resolution order:
    1. BACKOFFICE_PRINTER_FONT_PATH (if set)
    2. PRINTER_FONT_PATH
    3. Known Linux fallbacks
    """
    env_override = os.environ.get(_FONT_OVERRIDE_ENV, "").strip()
    candidates: list[str] = []
    if env_override:
        candidates.append(env_override)
    candidates.append(PRINTER_FONT_PATH)
    candidates.extend(_LINUX_FONT_FALLBACKS)

    seen: set[str] = set()
    for candidate in candidates:
        if not candidate or candidate in seen:
            continue
        seen.add(candidate)
        if Path(candidate).is_file():
            return candidate

    raise RuntimeError(
        f"No usable printer font found. Set {_FONT_OVERRIDE_ENV} to a valid .ttf/.otf file. "
        f"Tried: {', '.join(seen)}"
    )


def check_printer_dependencies() -> tuple[bool, str]:
    """Check whether printer dependencies are importable."""
    try:
        from escpos.printer import Usb  # noqa: F401
        from PIL import ImageFont

        ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)
    except Exception as exc:
        return (False, f"Printer unavailable: {exc}")
    return (True, "Printer ready")


def _pair_line(left: str, right: str, width_chars: int) -> str:
    gap = max(1, width_chars - len(left) - len(right))
    return f"{left}{' ' * gap}{right}"


def invoice_print_lines(invoice: Invoice, width_chars: int = 28) -> list[str]:
    """Plain text lines of an invoice receipt; an empty string marks a rule."""
    lines = [
        f"Invoice {invoice.invoice_id}",
        f"Order {invoice.order_id}",
        f"Issued {invoice.issue_date} {invoice.issue_time}",
        f"Due {invoice.due_date}",
        invoice.customer_name,
        "",
    ]
    for line in invoice.lines:
        lines.append(f"{line.quantity} x {line.description}")
        lines.append(_pair_line("", f"${line.total:,.2f}", width_chars))
    lines.append("")
    lines.append(_pair_line("Subtotal", f"${invoice.subtotal:,.2f}", width_chars))
    lines.append(_pair_line("Discount", f"-${invoice.discount:,.2f}", width_chars))
    lines.append(_pair_line("Tax", f"${invoice.tax:,.2f}", width_chars))
    lines.append(_pair_line("Shipping", f"${invoice.shipping:,.2f}", width_chars))
    lines.append(_pair_line("TOTAL", f"${invoice.total:,.2f}", width_chars))
    return lines


def _render_line(text: str, font: object) -> object:
    from PIL import Image, ImageDraw

    canvas_height = PRINTER_FONT_SIZE + _LINE_EXTRA_PX
    img = Image.new("1", (PRINTER_WIDTH_PX, canvas_height), color=1)
    draw = ImageDraw.Draw(img)

    bbox = draw.textbbox((0, 0), text, font=font)
    text_height = bbox[3] - bbox[1]
    # Offset by bbox top so descenders are not clipped.
    y = (canvas_height - text_height) // 2 - bbox[1]
    draw.text((PRINTER_LEFT_INDENT_PX, y), text, font=font, fill=0)
    return img


def _render_rule() -> object:
    from PIL import Image, ImageDraw

    img = Image.new("1", (PRINTER_WIDTH_PX, _RULE_HEIGHT_PX), color=1)
    draw = ImageDraw.Draw(img)
    middle = _RULE_HEIGHT_PX // 2
    draw.line((0, middle, PRINTER_WIDTH_PX - 1, middle), fill=0, width=2)
    return img


def _render_spacer(height_px: int) -> object:
    from PIL import Image

    return Image.new("1", (PRINTER_WIDTH_PX, max(1, height_px)), color=1)


def print_invoice(invoice: Invoice) -> None:
    """Print one invoice receipt and cut the paper."""
    try:
        from escpos.printer import Usb
        from PIL import ImageFont
    except Exception as exc:
        raise RuntimeError(f"Printer dependencies unavailable: {exc}") from exc

    printer = Usb(PRINTER_USB_VENDOR_ID, PRINTER_USB_PRODUCT_ID)
    font = ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)

    for line in invoice_print_lines(invoice):
        if not line:
            printer.image(_render_rule())
            continue
        printer.image(_render_line(line, font))

    printer.image(_render_spacer(_TAIL_SPACER_PX))
    printer.cut()
