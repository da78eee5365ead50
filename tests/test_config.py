"""Tests for environment overrides and logger naming."""

from __future__ import annotations

import logging

from textual.logging import TextualHandler

from backoffice import config
from backoffice import logger as logger_module
from backoffice.logger import get_logger, setup_debug_log


def test_api_defaults(monkeypatch) -> None:
    monkeypatch.delenv("BACKOFFICE_API_BASE_URL", raising=False)
    monkeypatch.delenv("BACKOFFICE_API_TOKEN", raising=False)
    assert config.api_base_url() == config.API_BASE_URL
    assert config.api_token() is None
    assert not config.api_enabled()


def test_api_overrides(monkeypatch) -> None:
    monkeypatch.setenv("BACKOFFICE_API_BASE_URL", "https://shop.example/api/v1")
    monkeypatch.setenv("BACKOFFICE_API_TOKEN", " abc ")
    assert config.api_base_url() == "https://shop.example/api/v1"
    assert config.api_token() == "abc"
    assert config.api_enabled()


def test_debug_log_override(monkeypatch, tmp_path) -> None:
    target = tmp_path / "debug.log"
    monkeypatch.setenv("BACKOFFICE_DEBUG_LOG", str(target))
    assert config.debug_log_path() == str(target)


def test_loggers_live_under_package_root() -> None:
    assert get_logger("backoffice.source").name == "backoffice.source"
    assert get_logger("worker").name == "backoffice.worker"


def test_unwritable_debug_log_attaches_console_handler_once(monkeypatch, tmp_path) -> None:
    root = logging.getLogger("backoffice")
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(logger_module, "_configured", False)
    monkeypatch.setattr(logger_module, "_log_path", None)
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    assert setup_debug_log(blocker / "debug.log") is None
    assert setup_debug_log() is None
    get_logger("worker")

    consoles = [handler for handler in root.handlers if isinstance(handler, TextualHandler)]
    assert len(consoles) == 1
    assert not any(isinstance(handler, logging.FileHandler) for handler in root.handlers)
