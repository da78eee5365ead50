"""Data sources feeding the list engine and the stale-safe record loader."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Protocol

import requests

from backoffice.config import API_TIMEOUT_SECONDS, api_base_url, api_token
from backoffice.models import FetchQuery, Record, RecordPage
from backoffice.query import total_pages_for

logger = logging.getLogger(__name__)

LOAD_IDLE = "idle"
LOAD_LOADING = "loading"
LOAD_READY = "ready"
LOAD_ERROR = "error"

RecordMapper = Callable[[dict[str, Any]], Record]


class DataSourceError(RuntimeError):
    """A fetch failed; surfaced to the screen as an error state."""


class RecordSource(Protocol):
    paginates: bool

    def fetch(self, query: FetchQuery) -> RecordPage: ...

    def update_status(self, record_id: str, status: str) -> Any: ...


class StaticRecordSource:
    """In-memory seeded records, returned unfiltered for local querying."""

    paginates = False

    def __init__(self, records: Iterable[Record]) -> None:
        self._records = list(records)

    def records(self) -> list[Record]:
        return list(self._records)

    def fetch(self, query: FetchQuery) -> RecordPage:
        records = self.records()
        return RecordPage(records=records, total=len(records), total_pages=1, page=1)

    def get(self, record_id: str) -> Record | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def update_status(self, record_id: str, status: str) -> Record | None:
        """Replace one record's status in place, keeping its position."""
        for idx, record in enumerate(self._records):
            if record.id == record_id:
                updated = record.with_status(status)
                self._records[idx] = updated
                return updated
        return None

    def remove(self, record_id: str) -> bool:
        before = len(self._records)
        self._records = [record for record in self._records if record.id != record_id]
        return len(self._records) != before


def map_api_order(raw: dict[str, Any]) -> Record:
    """Turn one order object of the REST API into a Record."""
    user = raw.get("user") or {}
    total_minor = raw.get("totalMinor") or "0"
    return Record(
        id=str(raw["id"]),
        status=str(raw.get("status", "")).lower(),
        sort_key=raw.get("createdAt"),
        fields={
            "order_number": raw.get("orderNumber", ""),
            "customer_email": user.get("email", ""),
            "payment_method": raw.get("paymentMethod", ""),
            "currency": raw.get("currency", ""),
            "amount": int(total_minor) / 100,
        },
    )


class HttpRecordSource:
    """Fetch one resource page by page from the platform REST API."""

    paginates = True

    def __init__(
        self,
        resource: str,
        mapper: RecordMapper,
        base_url: str | None = None,
        token: str | None = None,
        dropdown_param: str | None = None,
        timeout: float = API_TIMEOUT_SECONDS,
    ) -> None:
        self.resource = resource.strip("/")
        self.mapper = mapper
        self.base_url = (base_url or api_base_url()).rstrip("/")
        self.token = token if token is not None else api_token()
        self.dropdown_param = dropdown_param
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _params(self, query: FetchQuery) -> dict[str, Any]:
        filters = query.filters
        params: dict[str, Any] = {"page": query.page, "limit": query.page_size, "sort": filters.sort_order}
        if filters.active_tab != "all":
            params["status"] = filters.active_tab
        if self.dropdown_param and filters.dropdown_filter != "all":
            params[self.dropdown_param] = filters.dropdown_filter
        if filters.search_query.strip():
            params["search"] = filters.search_query.strip()
        return params

    def fetch(self, query: FetchQuery) -> RecordPage:
        url = f"{self.base_url}/{self.resource}"
        logger.debug("GET %s page=%s", url, query.page)
        try:
            response = requests.request(
                "GET", url, params=self._params(query), headers=self._headers(), timeout=self.timeout
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise DataSourceError(f"Fetching {self.resource} failed: {exc}") from exc
        except ValueError as exc:
            raise DataSourceError(f"Fetching {self.resource} returned invalid JSON") from exc
        return self._parse(payload, query)

    def update_status(self, record_id: str, status: str) -> None:
        url = f"{self.base_url}/{self.resource}/{record_id}/status"
        logger.debug("PATCH %s status=%s", url, status)
        try:
            response = requests.request(
                "PATCH", url, json={"status": status}, headers=self._headers(), timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise DataSourceError(f"Updating {self.resource} {record_id} failed: {exc}") from exc

    def _parse(self, payload: Any, query: FetchQuery) -> RecordPage:
        if not isinstance(payload, dict):
            raise DataSourceError(f"Unexpected response for {self.resource}")
        if payload.get("success") is False:
            raise DataSourceError(payload.get("message") or f"Fetching {self.resource} was rejected")

        body = payload.get("data")
        if not isinstance(body, dict) or not isinstance(body.get("data"), list):
            raise DataSourceError(f"Missing data list in {self.resource} response")

        try:
            records = [self.mapper(item) for item in body["data"]]
        except (KeyError, TypeError, ValueError) as exc:
            raise DataSourceError(f"Malformed {self.resource} record: {exc}") from exc

        pagination = body.get("pagination") or {}
        if not isinstance(pagination, dict):
            raise DataSourceError(f"Malformed pagination in {self.resource} response")
        try:
            total = int(pagination.get("total", len(records)))
            total_pages = int(pagination.get("totalPages") or total_pages_for(total, query.page_size))
            page = int(pagination.get("page", query.page))
        except (TypeError, ValueError) as exc:
            raise DataSourceError(f"Malformed pagination in {self.resource} response: {exc}") from exc
        return RecordPage(records=records, total=total, total_pages=max(1, total_pages), page=page)


@dataclass(frozen=True)
class LoadState:
    """Outcome of the newest fetch plus the last page that succeeded."""

    status: str = LOAD_IDLE
    page: RecordPage | None = None
    error: str | None = None


class RecordLoader:
    """Issue sequence-stamped fetches and accept only the newest response.

    ``begin`` stamps a request; ``complete``/``fail`` apply a response only
    when its stamp is still the newest, so a slow response for an old filter
    can never overwrite a fresher one. The previous successful page is kept
    while loading and after a failure.
    """

    def __init__(self, source: RecordSource) -> None:
        self.source = source
        self.state = LoadState()
        self._sequence = 0
        self._last_query: FetchQuery | None = None

    @property
    def last_query(self) -> FetchQuery | None:
        return self._last_query

    def begin(self, query: FetchQuery) -> int:
        self._sequence += 1
        self._last_query = query
        self.state = LoadState(status=LOAD_LOADING, page=self.state.page)
        return self._sequence

    def is_current(self, ticket: int) -> bool:
        return ticket == self._sequence

    def complete(self, ticket: int, page: RecordPage) -> bool:
        if not self.is_current(ticket):
            logger.debug("Dropping stale response ticket=%s newest=%s", ticket, self._sequence)
            return False
        self.state = LoadState(status=LOAD_READY, page=page)
        return True

    def fail(self, ticket: int, error: Exception | str) -> bool:
        if not self.is_current(ticket):
            logger.debug("Dropping stale failure ticket=%s newest=%s", ticket, self._sequence)
            return False
        logger.warning("Fetch failed: %s", error)
        self.state = LoadState(status=LOAD_ERROR, page=self.state.page, error=str(error))
        return True

    def fetch(self, ticket: int, query: FetchQuery) -> bool:
        """Run the source fetch for one ticket and record its outcome."""
        try:
            page = self.source.fetch(query)
        except DataSourceError as exc:
            return self.fail(ticket, exc)
        return self.complete(ticket, page)

    def load(self, query: FetchQuery) -> LoadState:
        ticket = self.begin(query)
        self.fetch(ticket, query)
        return self.state

    def retry(self) -> LoadState | None:
        if self._last_query is None:
            return None
        return self.load(self._last_query)
