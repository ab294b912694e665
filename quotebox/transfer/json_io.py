"""JSON export/import of the quote collection."""

from __future__ import annotations

import enum
import json
from pathlib import Path
from typing import List, Union

from quotebox.errors import QuoteboxError
from quotebox.storage.models import Quote

EXPORT_FILENAME = "quotes.json"


class ImportFailure(enum.Enum):
    MALFORMED_JSON = "malformed_json"
    WRONG_SHAPE = "wrong_shape"


class QuoteImportError(QuoteboxError):
    """Raised when an import file cannot be turned into quotes."""

    def __init__(self, reason: ImportFailure, message: str) -> None:
        super().__init__(message)
        self.reason = reason


def export_all(quotes: List[Quote]) -> bytes:
    """Serializes the collection as a pretty-printed JSON array."""

    payload = [q.to_dict() for q in quotes]
    return json.dumps(payload, ensure_ascii=False, indent=2).encode("utf-8")


def import_from(data: Union[bytes, str]) -> List[Quote]:
    """Parses exported bytes back into quotes.

    Every element must be a `{text, category, timestamp}` object; a single
    bad element rejects the whole file.

    Raises:
        QuoteImportError: MALFORMED_JSON when the content is not JSON,
            WRONG_SHAPE when it is not an array of quote objects.
    """

    try:
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        parsed = json.loads(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise QuoteImportError(ImportFailure.MALFORMED_JSON, f"Failed to import quotes: {exc}") from exc

    if not isinstance(parsed, list):
        raise QuoteImportError(ImportFailure.WRONG_SHAPE, "Invalid file format.")

    quotes = []
    for index, item in enumerate(parsed):
        try:
            quotes.append(Quote.from_dict(item))
        except ValueError as exc:
            raise QuoteImportError(
                ImportFailure.WRONG_SHAPE,
                f"Invalid file format: item {index}: {exc}",
            ) from exc
    return quotes


def write_export(path: Union[str, Path], quotes: List[Quote]) -> Path:
    target = Path(path).expanduser()
    if target.is_dir():
        target = target / EXPORT_FILENAME
    target.write_bytes(export_all(quotes))
    return target


def read_import(path: Union[str, Path]) -> List[Quote]:
    return import_from(Path(path).expanduser().read_bytes())
