"""Shared pytest fixtures for the list engine."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from backoffice.models import ListSpec, Record  # noqa: E402

CANCELLED_DAYS = {3, 7, 11}
# Source order is deliberately not chronological.
SOURCE_ORDER = [5, 12, 1, 16, 9, 3, 14, 7, 2, 11, 15, 6, 10, 13, 4, 8]


def make_record(day: int) -> Record:
    return Record(
        id=f"R{day:02d}",
        status="cancelled" if day in CANCELLED_DAYS else "completed",
        sort_key=f"2024-01-{day:02d}",
        fields={"customer_name": f"Customer {day}", "amount": f"${day * 10}"},
    )


@pytest.fixture
def spec() -> ListSpec:
    return ListSpec(
        name="test",
        title="Test Records",
        tabs=("all", "completed", "cancelled", "pending"),
        search_fields=("customer_name",),
        page_size=5,
        dropdown_field="status",
        dropdown_options=("completed", "cancelled", "pending"),
        columns=("customer_name", "amount"),
    )


@pytest.fixture
def records() -> list[Record]:
    return [make_record(day) for day in SOURCE_ORDER]
