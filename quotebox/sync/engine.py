"""Reconciliation of the local collection with the server snapshot."""

from __future__ import annotations

import enum
import threading
from typing import Any, Callable, List, Optional, Tuple

from quotebox.storage.backends import StorageError
from quotebox.storage.models import Quote
from quotebox.storage.store import QuoteStore
from quotebox.sync.server_client import SyncError

MSG_UPDATED = "Quotes updated from server."
MSG_UP_TO_DATE = "Quotes are already up to date."
MSG_NOTHING_FETCHED = "No quotes received from server."
MSG_FAILED = "Failed to sync with server."


class SyncOutcome(enum.Enum):
    UPDATED = "updated"
    UP_TO_DATE = "up_to_date"
    NOTHING_FETCHED = "nothing_fetched"
    FAILED = "failed"
    SKIPPED = "skipped"


def merge(local: List[Quote], remote: List[Quote]) -> Tuple[List[Quote], bool]:
    """Сливает серверные цитаты с локальными, сопоставляя их по тексту.

    Remote quote without a local match is appended. A matched local quote is
    replaced when the remote one is newer OR has a different category, so a
    category change wins even with an older timestamp.
    """

    merged = list(local)
    changed = False

    for incoming in remote:
        index = next((i for i, q in enumerate(merged) if q.text == incoming.text), None)
        if index is None:
            merged.append(incoming)
            changed = True
            continue

        current = merged[index]
        if incoming.timestamp > current.timestamp or incoming.category != current.category:
            merged[index] = incoming
            changed = True

    return merged, changed


class SyncEngine:
    """Runs one fetch-merge cycle at a time against a QuoteStore."""

    def __init__(
        self,
        store: QuoteStore,
        client: Any,
        notifier: Any,
        on_change: Optional[Callable[[], None]] = None,
        debug: bool = False,
    ) -> None:
        self.store = store
        self.client = client
        self.notifier = notifier
        self.on_change = on_change
        self.debug = debug
        self._in_progress = threading.Lock()

    def sync_once(self) -> SyncOutcome:
        if not self._in_progress.acquire(blocking=False):
            if self.debug:
                print("[debug] sync already in progress, skipping")
            return SyncOutcome.SKIPPED

        try:
            return self._run_cycle()
        finally:
            self._in_progress.release()

    def _run_cycle(self) -> SyncOutcome:
        try:
            remote = self.client.fetch_remote()
        except SyncError as err:
            print(f"Ошибка синхронизации: {err}")
            self.notifier.notify(MSG_FAILED)
            return SyncOutcome.FAILED

        if not remote:
            self.notifier.notify(MSG_NOTHING_FETCHED)
            return SyncOutcome.NOTHING_FETCHED

        # Merge against the collection as it is now, not as it was before the fetch.
        merged, changed = merge(self.store.quotes, remote)
        if not changed:
            self.notifier.notify(MSG_UP_TO_DATE)
            return SyncOutcome.UP_TO_DATE

        try:
            self.store.save(merged)
        except StorageError as err:
            print(f"Не удалось сохранить цитаты: {err}")
            self.notifier.notify(MSG_FAILED)
            return SyncOutcome.FAILED

        if self.debug:
            print(f"[debug] merged {len(remote)} remote quotes, collection size {len(merged)}")
        if self.on_change is not None:
            self.on_change()
        self.notifier.notify(MSG_UPDATED)
        return SyncOutcome.UPDATED

    def push(self, quote: Quote) -> bool:
        """Отправляет новую цитату на сервер; локальная запись при ошибке остаётся."""

        try:
            self.client.push_local(quote)
        except SyncError as err:
            print(f"Ошибка отправки цитаты: {err}")
            self.notifier.notify("Failed to post new quote to server.")
            return False
        return True
