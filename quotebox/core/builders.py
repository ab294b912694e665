import os
from typing import Any, Dict, Optional, Tuple

from quotebox.core.app import QuoteApp
from quotebox.core.notify import ConsoleNotifier
from quotebox.core.selection import QuoteSelector
from quotebox.storage.backends import JsonFileStorage, MemoryStorage
from quotebox.storage.store import QuoteStore
from quotebox.sync.server_client import DEFAULT_FETCH_LIMIT, DEFAULT_SERVER_URL, QuoteServerClient

DEFAULT_STORAGE_PATH = '~/.quotebox/storage.json'


def build_store(config: Dict[str, Any], debug: bool = False) -> QuoteStore:
    storage_cfg = config.get('storage') or {}
    storage = JsonFileStorage(storage_cfg.get('path') or DEFAULT_STORAGE_PATH)
    return QuoteStore(storage, session=MemoryStorage(), debug=debug)


def build_server_client(
    config: Optional[Dict[str, Any]], debug: bool = False
) -> Tuple[Optional[QuoteServerClient], bool]:
    config = config or {}

    enabled = config.get('enabled', True)
    if not enabled:
        return None, False

    url = os.getenv('QUOTEBOX_SERVER_URL') or config.get('url') or DEFAULT_SERVER_URL

    client = QuoteServerClient(
        url=url,
        timeout=config.get('timeout', 10),
        fetch_limit=int(config.get('fetch_limit', DEFAULT_FETCH_LIMIT)),
        dry_run=bool(config.get('dry_run', False)),
        debug=bool(debug),
    )
    return client, True


def build_app(config: Dict[str, Any], debug: bool = False) -> QuoteApp:
    store = build_store(config, debug=debug)
    server_client, _ = build_server_client(config.get('server'), debug=debug)
    return QuoteApp(
        store,
        ConsoleNotifier(),
        selector=QuoteSelector(store),
        server_client=server_client,
        debug=debug,
    )
