"""Open action-menu / dropdown state for a list screen."""

from __future__ import annotations

from collections.abc import Callable

Unsubscribe = Callable[[], None]
Subscribe = Callable[[Callable[[], None]], Unsubscribe]


class MenuState:
    """Track which menu is open and dismiss it on outside interaction.

    ``subscribe`` registers a callback fired when the user interacts outside
    the open menu and returns the matching unsubscribe function. The
    subscription only lives while a menu is open.
    """

    def __init__(self, subscribe: Subscribe | None = None) -> None:
        self._subscribe = subscribe
        self._unsubscribe: Unsubscribe | None = None
        self.open_menu_id: str | None = None

    def is_open(self, menu_id: str | None = None) -> bool:
        if menu_id is None:
            return self.open_menu_id is not None
        return self.open_menu_id == menu_id

    def open(self, menu_id: str) -> None:
        if self.open_menu_id == menu_id:
            return
        self.close()
        self.open_menu_id = menu_id
        if self._subscribe is not None:
            self._unsubscribe = self._subscribe(self.close)

    def close(self) -> None:
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        self.open_menu_id = None
        if unsubscribe is not None:
            unsubscribe()

    def toggle(self, menu_id: str) -> None:
        if self.open_menu_id == menu_id:
            self.close()
        else:
            self.open(menu_id)
