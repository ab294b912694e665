"""Synchronization with the remote quote server."""

from .engine import SyncEngine, SyncOutcome, merge
from .server_client import QuoteServerClient, SyncError, SyncFailure, map_remote_record

__all__ = [
    "QuoteServerClient",
    "SyncEngine",
    "SyncError",
    "SyncFailure",
    "SyncOutcome",
    "map_remote_record",
    "merge",
]
