"""Page-number windows for pagination controls."""

from __future__ import annotations

from backoffice.config import COMPACT_WINDOW_MAX, FULL_WINDOW_MAX, NARROW_WIDTH_COLUMNS
from backoffice.models import ELLIPSIS, PageWindow


def page_window(current_page: int, total_pages: int, max_visible: int) -> PageWindow:
    """Return the page buttons to show, with ellipsis markers for skipped runs.

    All pages are listed when they fit in ``max_visible``. Otherwise the first
    and last page are always shown, plus the neighbours of the current page.
    """
    total_pages = max(1, total_pages)
    current_page = min(max(1, current_page), total_pages)

    if total_pages <= max(1, max_visible):
        return list(range(1, total_pages + 1))

    pages: PageWindow = [1]
    if current_page > 3:
        pages.append(ELLIPSIS)

    start = max(2, current_page - 1)
    end = min(total_pages - 1, current_page + 1)
    pages.extend(range(start, end + 1))

    if current_page < total_pages - 2:
        pages.append(ELLIPSIS)
    pages.append(total_pages)
    return pages


def compact_window(current_page: int, total_pages: int) -> PageWindow:
    return page_window(current_page, total_pages, COMPACT_WINDOW_MAX)


def full_window(current_page: int, total_pages: int) -> PageWindow:
    return page_window(current_page, total_pages, FULL_WINDOW_MAX)


def window_for_width(current_page: int, total_pages: int, width: int) -> PageWindow:
    """Pick the compact window on narrow terminals and the full one otherwise."""
    if 0 < width < NARROW_WIDTH_COLUMNS:
        return compact_window(current_page, total_pages)
    return full_window(current_page, total_pages)
