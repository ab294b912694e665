"""Key/value storage backends for the quote store.

Both backends keep string values, the same contract browser storage offers:
`JsonFileStorage` survives restarts, `MemoryStorage` lives for one session.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional, Union

from quotebox.errors import QuoteboxError


class StorageError(QuoteboxError):
    """Raised when the storage backend cannot be read or written."""


class MemoryStorage:
    """Session-scoped storage: values are gone once the process exits."""

    def __init__(self) -> None:
        self._values: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFileStorage:
    """Durable storage backed by a single JSON object file.

    The file is re-read on every access so that separate processes sharing
    the same path see each other's writes; writes go through a temporary
    file and `Path.replace` so a crash never leaves a half-written file.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path).expanduser()

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot read storage file {self.path}: {exc}") from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            # Corrupted file: treat as empty, the next write replaces it.
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, values: Dict[str, str]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as handle:
                json.dump(values, handle, ensure_ascii=False, indent=2)
            tmp_path.replace(self.path)
        except OSError as exc:
            raise StorageError(f"Cannot write storage file {self.path}: {exc}") from exc

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        values = self._read_all()
        values[key] = value
        self._write_all(values)
