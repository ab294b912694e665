"""QuoteStore — owner of the quote collection and the UI state caches."""

from __future__ import annotations

import json
from typing import Any, Callable, List, Optional

from quotebox.storage.backends import MemoryStorage, StorageError
from quotebox.storage.models import Quote, now_ms

QUOTES_KEY = "quotes"
SELECTED_CATEGORY_KEY = "selectedCategory"
LAST_QUOTE_KEY = "lastQuote"

ALL_CATEGORIES = "all"

SEED_QUOTES = (
    ("The only limit to our realization of tomorrow is our doubts of today.", "Motivation"),
    ("Life is what happens when you're busy making other plans.", "Life"),
    (
        "Success is not final, failure is not fatal: it is the courage to continue that counts.",
        "Success",
    ),
)


def seed_quotes(clock: Callable[[], int] = now_ms) -> List[Quote]:
    stamp = clock()
    return [Quote(text=text, category=category, timestamp=stamp) for text, category in SEED_QUOTES]


def unique_categories(quotes: List[Quote]) -> List[str]:
    """Возвращает список категорий без повторов (в порядке первого появления)."""

    seen: List[str] = []
    for quote in quotes:
        if quote.category not in seen:
            seen.append(quote.category)
    return seen


class QuoteStore:
    """Holds the in-memory quote list and persists it through a storage backend.

    `storage` is durable (quotes, selected category); `session` is scoped to
    the current session (last shown quote).
    """

    def __init__(
        self,
        storage: Any,
        session: Optional[Any] = None,
        clock: Callable[[], int] = now_ms,
        debug: bool = False,
    ) -> None:
        self.storage = storage
        self.session = session if session is not None else MemoryStorage()
        self.clock = clock
        self.debug = debug
        self._quotes: List[Quote] = []

    @property
    def quotes(self) -> List[Quote]:
        return list(self._quotes)

    def load(self) -> List[Quote]:
        """Restores the collection; falls back to the seed quotes, never raises."""

        try:
            raw = self.storage.get(QUOTES_KEY)
        except StorageError as exc:
            print(f"Не удалось прочитать хранилище: {exc}")
            raw = None

        quotes = self._parse_quotes(raw) if raw is not None else None
        if quotes is None:
            if self.debug:
                print("[debug] no valid stored quotes, using seed collection")
            quotes = seed_quotes(self.clock)

        self._quotes = quotes
        return self.quotes

    def _parse_quotes(self, raw: str) -> Optional[List[Quote]]:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            return None
        if not isinstance(data, list):
            return None
        try:
            return [Quote.from_dict(item) for item in data]
        except ValueError:
            return None

    def save(self, quotes: List[Quote]) -> None:
        payload = json.dumps([q.to_dict() for q in quotes], ensure_ascii=False)
        self.storage.set(QUOTES_KEY, payload)
        self._quotes = list(quotes)

    def add(self, quote: Quote) -> None:
        self.save(self._quotes + [quote])

    def unique_categories(self, quotes: Optional[List[Quote]] = None) -> List[str]:
        return unique_categories(self._quotes if quotes is None else quotes)

    def remember_selected_category(self, name: str) -> None:
        self.storage.set(SELECTED_CATEGORY_KEY, name)

    def last_selected_category(self) -> str:
        try:
            value = self.storage.get(SELECTED_CATEGORY_KEY)
        except StorageError:
            value = None
        return value or ALL_CATEGORIES

    def remember_last_shown(self, quote: Quote) -> None:
        self.session.set(LAST_QUOTE_KEY, json.dumps(quote.to_dict(), ensure_ascii=False))

    def last_shown(self) -> Optional[Quote]:
        raw = self.session.get(LAST_QUOTE_KEY)
        if not raw:
            return None
        try:
            return Quote.from_dict(json.loads(raw))
        except (json.JSONDecodeError, ValueError):
            return None
