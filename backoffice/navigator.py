"""Drill-down navigation from a list into detail panels and action forms."""

from __future__ import annotations

from collections.abc import Callable

from backoffice.config import MAX_VIEW_DEPTH
from backoffice.models import LIST_ENTRY, Record, ViewEntry, ViewKind


RecordCheck = Callable[[Record], bool]


class ViewStackNavigator:
    """Hold the views stacked above a list screen and resolve "back".

    The list itself is the permanent root. At most ``max_depth`` views sit
    above it; pushing onto a full stack replaces the top view instead of
    growing it. Views bound to a record that the liveness check rejects are
    never shown: navigation falls back to the list.
    """

    def __init__(self, record_exists: RecordCheck | None = None, max_depth: int = MAX_VIEW_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self._stack: list[ViewEntry] = []
        self._record_exists = record_exists
        self._max_depth = max_depth

    def current(self) -> ViewEntry:
        if not self._stack:
            return LIST_ENTRY
        return self._stack[-1]

    def depth(self) -> int:
        return len(self._stack)

    def entries(self) -> list[ViewEntry]:
        return [LIST_ENTRY, *self._stack]

    def is_at_list(self) -> bool:
        return not self._stack

    def push(self, kind: ViewKind, record: Record | None, panel: str | None = None) -> ViewEntry:
        if kind is ViewKind.LIST or not self._alive(record):
            return self.reset()

        entry = ViewEntry(kind, record, panel)
        if len(self._stack) >= self._max_depth:
            self._stack[-1] = entry
        else:
            self._stack.append(entry)
        return entry

    def replace_at(self, kind: ViewKind, record: Record | None, panel: str | None = None) -> ViewEntry:
        """Swap the current view for a sibling without growing the stack."""
        if kind is ViewKind.LIST or not self._alive(record):
            return self.reset()

        entry = ViewEntry(kind, record, panel)
        if self._stack:
            self._stack[-1] = entry
        else:
            self._stack.append(entry)
        return entry

    def pop(self) -> ViewEntry:
        if self._stack:
            self._stack.pop()
        return self.current()

    def close(self) -> ViewEntry:
        return self.pop()

    def reset(self) -> ViewEntry:
        self._stack.clear()
        return LIST_ENTRY

    def revalidate(self) -> ViewEntry:
        """Fall back to the list if any stacked view lost its record."""
        if any(not self._alive(entry.record) for entry in self._stack):
            return self.reset()
        return self.current()

    def _alive(self, record: Record | None) -> bool:
        if record is None or self._record_exists is None:
            return True
        return self._record_exists(record)
