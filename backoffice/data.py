"""Static seed records and list specs."""

from __future__ import annotations

from datetime import date, timedelta

from backoffice.constant import (
    API_DROPDOWN_PARAMS,
    BID_ROWS,
    GENERATED_WITHDRAWAL_COUNT,
    ORDER_ROWS,
    ROW_ACTIONS,
    SCREEN_CONFIG as _SCREEN_CONFIG_RAW,
    SCREEN_ORDER,
    TRANSACTION_ROWS,
    WALLET_ANCHOR_DATE,
    WALLET_BALANCES,
    WALLET_COUNT,
    WALLET_FIRST_NAMES,
    WALLET_LAST_NAMES,
    WITHDRAWAL_ANCHOR_DATE,
    WITHDRAWAL_ROWS,
    WITHDRAWAL_STATUS_CYCLE,
)
from backoffice.config import api_enabled
from backoffice.models import ListSpec, Record
from backoffice.source import HttpRecordSource, RecordSource, StaticRecordSource, map_api_order


SCREEN_SPECS: dict[str, ListSpec] = {
    name: ListSpec(
        name=name,
        title=str(raw["title"]),
        tabs=tuple(raw["tabs"]),  # type: ignore[arg-type]
        search_fields=tuple(raw["search_fields"]),  # type: ignore[arg-type]
        page_size=int(raw["page_size"]),  # type: ignore[arg-type]
        dropdown_field=raw.get("dropdown_field"),  # type: ignore[arg-type]
        dropdown_options=tuple(raw.get("dropdown_options", ())),  # type: ignore[arg-type]
        columns=tuple(raw.get("columns", ())),  # type: ignore[arg-type]
    )
    for name, raw in _SCREEN_CONFIG_RAW.items()
}


def spec_for(name: str) -> ListSpec:
    try:
        return SCREEN_SPECS[name]
    except KeyError:
        raise ValueError(f"Unknown list screen: {name}") from None


def field_label(name: str) -> str:
    """Human label for a record field name."""
    return name.replace("_", " ").title()


def status_label(status: str) -> str:
    return status.replace("_", " ").title() if status else "-"


def row_actions_for(screen: str) -> dict[str, tuple[str, str]]:
    return dict(ROW_ACTIONS.get(screen, {}))


def _record_from_row(row: dict[str, object], sort_field: str) -> Record:
    fields = {key: value for key, value in row.items() if key not in {"id", "status"}}
    return Record(id=str(row["id"]), status=str(row["status"]), sort_key=row.get(sort_field), fields=fields)


def order_records() -> list[Record]:
    return [_record_from_row(row, "order_date") for row in ORDER_ROWS]


def bid_records() -> list[Record]:
    records = []
    for row in BID_ROWS:
        record = _record_from_row(row, "date")
        placed_at = f"{row['date']} {row['time']}"
        records.append(
            Record(
                id=record.id,
                status=record.status,
                sort_key=placed_at,
                fields={**record.fields, "placed_at": placed_at},
            )
        )
    return records


def transaction_records() -> list[Record]:
    return [_record_from_row(row, "date") for row in TRANSACTION_ROWS]


def withdrawal_records() -> list[Record]:
    rows = list(WITHDRAWAL_ROWS)
    anchor = date.fromisoformat(WITHDRAWAL_ANCHOR_DATE)
    for idx in range(GENERATED_WITHDRAWAL_COUNT):
        num = len(WITHDRAWAL_ROWS) + idx + 1
        amount = 100 + (num * 137) % 1000
        fee = amount * 0.01
        rows.append(
            {
                "id": str(num),
                "request_id": f"WDR-2024-{num:03d}",
                "user_name": f"User {num}",
                "user_email": f"user{num}@email.com",
                "amount": f"${amount:,.2f}",
                "fee": f"${fee:,.2f}",
                "bank_name": "Chase Bank",
                "request_date": (anchor - timedelta(days=idx)).isoformat(),
                "status": WITHDRAWAL_STATUS_CYCLE[idx % len(WITHDRAWAL_STATUS_CYCLE)],
            }
        )
    return [_record_from_row(row, "request_date") for row in rows]


def wallet_records() -> list[Record]:
    anchor = date.fromisoformat(WALLET_ANCHOR_DATE)
    records = []
    for idx in range(WALLET_COUNT):
        first = WALLET_FIRST_NAMES[idx % len(WALLET_FIRST_NAMES)]
        last = WALLET_LAST_NAMES[idx % len(WALLET_LAST_NAMES)]
        last_transaction = (anchor - timedelta(days=idx % 30)).isoformat()
        records.append(
            Record(
                id=str(idx + 1),
                # Roughly one wallet in five is frozen.
                status="frozen" if idx % 5 == 0 else "active",
                sort_key=last_transaction,
                fields={
                    "user_id": f"USR-{idx + 1:03d}",
                    "user_name": f"{first} {last}",
                    "user_email": f"{first.lower()}.{last.lower()}@email.com",
                    "balance": WALLET_BALANCES[idx % len(WALLET_BALANCES)],
                    "last_transaction": last_transaction,
                },
            )
        )
    return records


_SEED_BUILDERS = {
    "orders": order_records,
    "bids": bid_records,
    "transactions": transaction_records,
    "withdrawals": withdrawal_records,
    "wallets": wallet_records,
}


def seed_sources() -> dict[str, StaticRecordSource]:
    """Fresh in-memory sources for every list screen."""
    return {name: StaticRecordSource(_SEED_BUILDERS[name]()) for name in SCREEN_ORDER}


def build_sources(use_api: bool | None = None) -> dict[str, RecordSource]:
    """Seeded sources, with orders read from the REST API when it is configured."""
    if use_api is None:
        use_api = api_enabled()
    sources: dict[str, RecordSource] = dict(seed_sources())
    if use_api:
        sources["orders"] = HttpRecordSource("orders", map_api_order, dropdown_param=API_DROPDOWN_PARAMS["orders"])
    return sources
