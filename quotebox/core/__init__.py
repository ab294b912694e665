"""Core helpers for quotebox: config, builders, selection, app, runner."""
from .config import load_config
from .builders import build_app, build_server_client, build_store
from .notify import ConsoleNotifier
from .selection import (
    NO_QUOTES_MESSAGE,
    EmptySelection,
    QuoteSelector,
    filter_quotes,
    format_quote,
    pick_random,
)
from .app import QuoteApp, ValidationError
from .runner import main as run_main, run_sync_loop

__all__ = [
    "load_config",
    "build_app",
    "build_server_client",
    "build_store",
    "ConsoleNotifier",
    "NO_QUOTES_MESSAGE",
    "EmptySelection",
    "QuoteSelector",
    "filter_quotes",
    "format_quote",
    "pick_random",
    "QuoteApp",
    "ValidationError",
    "run_main",
    "run_sync_loop",
]
