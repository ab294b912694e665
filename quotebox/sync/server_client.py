"""HTTP client for the remote quote collection."""

from __future__ import annotations

import enum
import json
from typing import Any, Callable, Dict, List, Optional

import requests

from quotebox.errors import QuoteboxError
from quotebox.storage.models import Quote, now_ms

DEFAULT_SERVER_URL = "https://jsonplaceholder.typicode.com/posts"
DEFAULT_FETCH_LIMIT = 10
SERVER_CATEGORY = "Server"
UNTITLED = "Untitled"


class SyncFailure(enum.Enum):
    NETWORK_FAILURE = "network_failure"


class SyncError(QuoteboxError):
    """Raised when a request to the quote server fails."""

    def __init__(self, message: str, reason: SyncFailure = SyncFailure.NETWORK_FAILURE) -> None:
        super().__init__(message)
        self.reason = reason


def map_remote_record(record: Any, timestamp: int) -> Quote:
    """Maps a server record to a Quote: title, then body, then "Untitled"."""

    text = UNTITLED
    if isinstance(record, dict):
        for field in ("title", "body"):
            value = record.get(field)
            # same rule as Quote.from_dict, otherwise the stored list would not load back
            if isinstance(value, str) and value.strip():
                text = value
                break
    return Quote(text=text, category=SERVER_CATEGORY, timestamp=timestamp)


class QuoteServerClient:
    """Small helper around the quote server's REST endpoint (GET and POST on one URL)."""

    def __init__(
        self,
        url: str = DEFAULT_SERVER_URL,
        timeout: int = 10,
        fetch_limit: int = DEFAULT_FETCH_LIMIT,
        dry_run: bool = False,
        debug: bool = False,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        if not url:
            raise ValueError("Server URL is required")

        self.url = url
        self.timeout = timeout
        self.fetch_limit = fetch_limit
        self.dry_run = dry_run
        self.debug = debug
        self.clock = clock
        self._session = requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    def fetch_remote(self) -> List[Quote]:
        """Downloads the remote snapshot and maps it to quotes.

        Every mapped quote gets category "Server" and a fresh timestamp; the
        server's own update time is not used.

        Returns:
            List of quotes (empty in dry-run mode).
        Raises:
            SyncError: on transport errors, non-2xx status or a body that is
                not a JSON array.
        """

        if self.dry_run:
            print(f"[dry-run] Would fetch quotes from {self.url}")
            return []

        try:
            response = self._session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise SyncError(f"Quote server request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise SyncError(f"Quote server returned invalid JSON: {exc}") from exc

        if not isinstance(data, list):
            raise SyncError("Quote server returned unexpected payload (expected a list)")

        if self.debug:
            print(f"[debug] fetched {len(data)} records from server")

        records = data[: self.fetch_limit] if self.fetch_limit and self.fetch_limit > 0 else data
        stamp = self.clock()
        return [map_remote_record(record, stamp) for record in records]

    def push_local(self, quote: Quote) -> Optional[Dict[str, Any]]:
        """Sends a single quote to the server.

        Returns:
            The decoded response body (or None when there is none or in dry-run mode).
        Raises:
            SyncError: when the server rejects the request.
        """

        payload = quote.to_dict()

        if self.dry_run:
            print("[dry-run] Would post quote:")
            print(json.dumps(payload, ensure_ascii=False, indent=2))
            return None

        try:
            response = self._session.post(self.url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise SyncError(f"Quote server request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError:
            data = None

        if self.debug:
            print("[debug] posted to server:", json.dumps(data, ensure_ascii=False))
        return data
