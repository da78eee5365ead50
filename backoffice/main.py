"""Entry point for the back-office Textual app."""

from __future__ import annotations

from backoffice.backoffice_app import BackOfficeApp
from backoffice.logger import setup_debug_log


def main() -> None:
    """Run the Textual application."""
    setup_debug_log()
    BackOfficeApp().run()


if __name__ == "__main__":
    main()
