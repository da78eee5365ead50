"""Runtime configuration defaults for the API, pagination, logging and printing."""

from __future__ import annotations

import os

API_BASE_URL = "http://localhost:3000/api/v1"
API_TIMEOUT_SECONDS = 10.0
_API_BASE_URL_ENV = "BACKOFFICE_API_BASE_URL"
_API_TOKEN_ENV = "BACKOFFICE_API_TOKEN"

# Page-window thresholds: compact on narrow terminals, full otherwise.
COMPACT_WINDOW_MAX = 5
FULL_WINDOW_MAX = 8
NARROW_WIDTH_COLUMNS = 100

# Deepest drill-down above the list itself.
MAX_VIEW_DEPTH = 3

DEBUG_LOG_PATH = "/tmp/backoffice-debug.log"
_DEBUG_LOG_ENV = "BACKOFFICE_DEBUG_LOG"

# Thermal printer used for invoices.
PRINTER_USB_VENDOR_ID = 0x28E9
PRINTER_USB_PRODUCT_ID = 0x0289
PRINTER_WIDTH_PX = 384
PRINTER_FONT_SIZE = 24
PRINTER_FONT_PATH = "/System/Library/Fonts/SFNS.ttf"
PRINTER_LEFT_INDENT_PX = 8


def api_base_url() -> str:
    return os.environ.get(_API_BASE_URL_ENV, "").strip() or API_BASE_URL


def api_token() -> str | None:
    token = os.environ.get(_API_TOKEN_ENV, "").strip()
    return token or None


def debug_log_path() -> str:
    return os.environ.get(_DEBUG_LOG_ENV, "").strip() or DEBUG_LOG_PATH


def api_enabled() -> bool:
    """Use the REST API for orders only when a base URL is configured."""
    return bool(os.environ.get(_API_BASE_URL_ENV, "").strip())
