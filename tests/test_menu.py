"""Tests for open-menu state."""

from __future__ import annotations

from collections.abc import Callable

from backoffice.menu import MenuState


class FakeListeners:
    def __init__(self) -> None:
        self.callbacks: list[Callable[[], None]] = []
        self.unsubscribed = 0

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        self.callbacks.append(callback)

        def unsubscribe() -> None:
            self.unsubscribed += 1
            self.callbacks.remove(callback)

        return unsubscribe

    def fire(self) -> None:
        for callback in list(self.callbacks):
            callback()


def test_open_and_close_manage_one_subscription() -> None:
    listeners = FakeListeners()
    menu = MenuState(listeners.subscribe)

    menu.open("row-1")
    assert menu.is_open("row-1")
    assert len(listeners.callbacks) == 1

    menu.close()
    assert not menu.is_open()
    assert listeners.callbacks == []
    assert listeners.unsubscribed == 1


def test_opening_another_menu_releases_the_first() -> None:
    listeners = FakeListeners()
    menu = MenuState(listeners.subscribe)

    menu.open("row-1")
    menu.open("row-2")
    assert menu.open_menu_id == "row-2"
    assert len(listeners.callbacks) == 1
    assert listeners.unsubscribed == 1


def test_outside_interaction_closes_menu() -> None:
    listeners = FakeListeners()
    menu = MenuState(listeners.subscribe)

    menu.open("status-filter")
    listeners.fire()
    assert menu.open_menu_id is None
    assert listeners.callbacks == []


def test_toggle_and_repeated_close() -> None:
    listeners = FakeListeners()
    menu = MenuState(listeners.subscribe)

    menu.toggle("row-1")
    assert menu.is_open("row-1")
    menu.toggle("row-1")
    assert not menu.is_open()
    menu.close()
    assert listeners.unsubscribed == 1


def test_reopening_same_menu_keeps_subscription() -> None:
    listeners = FakeListeners()
    menu = MenuState(listeners.subscribe)
    menu.open("row-1")
    menu.open("row-1")
    assert len(listeners.callbacks) == 1
    assert listeners.unsubscribed == 0


def test_works_without_subscribe() -> None:
    menu = MenuState()
    menu.open("row-1")
    assert menu.is_open()
    menu.close()
    assert not menu.is_open()
