"""Local persistence of the quote collection."""

from .backends import JsonFileStorage, MemoryStorage, StorageError
from .models import Quote, now_ms
from .store import ALL_CATEGORIES, QuoteStore, seed_quotes, unique_categories

__all__ = [
    "ALL_CATEGORIES",
    "JsonFileStorage",
    "MemoryStorage",
    "Quote",
    "QuoteStore",
    "StorageError",
    "now_ms",
    "seed_quotes",
    "unique_categories",
]
