"""Debug log setup for the back-office app."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

from backoffice.config import debug_log_path

_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
_ROOT_NAME = "backoffice"

_configured = False
_log_path: Path | None = None


def setup_debug_log(log_file: str | Path | None = None) -> Path | None:
    """Attach the file and Textual console handlers to the package logger.

    Handlers are attached once per process. Returns the log file path, or
    None when the file cannot be opened.
    """
    global _configured, _log_path
    if _configured:
        return _log_path
    _configured = True

    root = logging.getLogger(_ROOT_NAME)
    root.setLevel(logging.DEBUG)
    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)

    console = TextualHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    path = Path(log_file or debug_log_path())
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as exc:
        root.warning("Debug log unavailable at %s: %s", path, exc)
        return None
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    _log_path = path
    return path


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package root, configuring handlers once."""
    setup_debug_log()
    if name == _ROOT_NAME or name.startswith(f"{_ROOT_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_NAME}.{name}")
