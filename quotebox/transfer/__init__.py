"""Import/export of quotes as JSON documents."""

from .json_io import (
    EXPORT_FILENAME,
    ImportFailure,
    QuoteImportError,
    export_all,
    import_from,
    read_import,
    write_export,
)

__all__ = [
    "EXPORT_FILENAME",
    "ImportFailure",
    "QuoteImportError",
    "export_all",
    "import_from",
    "read_import",
    "write_export",
]
