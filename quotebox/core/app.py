"""QuoteApp — user actions of the quote widget on top of the store, selector and sync engine."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from quotebox.core.selection import QuoteSelector
from quotebox.errors import QuoteboxError
from quotebox.storage.backends import StorageError
from quotebox.storage.models import Quote
from quotebox.storage.store import ALL_CATEGORIES, QuoteStore
from quotebox.sync.engine import SyncEngine, SyncOutcome
from quotebox.transfer.json_io import QuoteImportError, import_from, read_import, write_export


class ValidationError(QuoteboxError):
    """Raised when required user input is missing."""


def validate_new_quote(text: Optional[str], category: Optional[str]) -> Tuple[str, str]:
    text = (text or "").strip()
    category = (category or "").strip()
    if not text or not category:
        raise ValidationError("Please enter both quote and category.")
    return text, category


class QuoteApp:
    def __init__(
        self,
        store: QuoteStore,
        notifier: Any,
        selector: Optional[QuoteSelector] = None,
        server_client: Optional[Any] = None,
        debug: bool = False,
    ) -> None:
        self.store = store
        self.notifier = notifier
        self.selector = selector or QuoteSelector(store)
        self.debug = debug
        self.sync_engine: Optional[SyncEngine] = None
        if server_client is not None:
            self.sync_engine = SyncEngine(
                store,
                server_client,
                notifier,
                on_change=self.refresh_display,
                debug=debug,
            )

    def start(self) -> Optional[Quote]:
        """Загружает коллекцию и показывает последнюю просмотренную цитату, если она есть."""

        self.store.load()
        return self.selector.show_last()

    def categories(self) -> List[str]:
        return [ALL_CATEGORIES] + self.store.unique_categories()

    def show_random_quote(self, category: Optional[str] = None) -> Optional[Quote]:
        try:
            return self.selector.show_random(category)
        except StorageError as err:
            self.notifier.alert(f"Failed to save selection: {err}")
            return None

    def refresh_display(self) -> None:
        self.show_random_quote(self.store.last_selected_category())

    def add_quote(self, text: Optional[str], category: Optional[str]) -> Optional[Quote]:
        try:
            text, category = validate_new_quote(text, category)
        except ValidationError as err:
            self.notifier.alert(str(err))
            return None

        quote = Quote.create(text, category, timestamp=self.store.clock())
        try:
            self.store.add(quote)
        except StorageError as err:
            self.notifier.alert(f"Failed to save quote: {err}")
            return None

        # Local copy stays even if the server rejects it.
        if self.sync_engine is not None:
            self.sync_engine.push(quote)

        self.notifier.alert("Quote added successfully!")
        return quote

    def export_quotes(self, path: Union[str, Path]) -> Optional[Path]:
        try:
            target = write_export(path, self.store.quotes)
        except OSError as err:
            self.notifier.alert(f"Failed to export quotes: {err}")
            return None
        self.notifier.notify(f"Exported {len(self.store.quotes)} quotes to {target}")
        return target

    def import_quotes(self, source: Union[str, Path, bytes]) -> Optional[List[Quote]]:
        """Appends quotes from a file path (or raw bytes) to the collection."""

        try:
            if isinstance(source, bytes):
                imported = import_from(source)
            else:
                imported = read_import(source)
        except QuoteImportError as err:
            self.notifier.alert(str(err))
            return None
        except OSError as err:
            self.notifier.alert(f"Failed to import quotes: {err}")
            return None

        try:
            self.store.save(self.store.quotes + imported)
        except StorageError as err:
            self.notifier.alert(f"Failed to import quotes: {err}")
            return None

        if self.debug:
            print(f"[debug] imported {len(imported)} quotes, categories: {self.categories()}")
        self.notifier.notify("Quotes imported successfully!")
        return imported

    def sync_now(self) -> Optional[SyncOutcome]:
        if self.sync_engine is None:
            self.notifier.notify("Server sync is disabled.")
            return None
        return self.sync_engine.sync_once()
