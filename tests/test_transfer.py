import json

import pytest

from quotebox.storage.models import Quote
from quotebox.transfer.json_io import (
    EXPORT_FILENAME,
    ImportFailure,
    QuoteImportError,
    export_all,
    import_from,
    read_import,
    write_export,
)

QUOTES = [Quote("A", "X", 100), Quote("Ёлка", "Праздник", 200)]


def test_export_is_pretty_printed_array():
    data = export_all(QUOTES)
    text = data.decode("utf-8")

    assert text.startswith("[\n  {")
    assert json.loads(text) == [q.to_dict() for q in QUOTES]


def test_export_then_import_round_trip():
    assert import_from(export_all(QUOTES)) == QUOTES


def test_import_malformed_json():
    with pytest.raises(QuoteImportError) as info:
        import_from(b"{oops")
    assert info.value.reason is ImportFailure.MALFORMED_JSON


def test_import_object_is_wrong_shape():
    with pytest.raises(QuoteImportError) as info:
        import_from(b'{"not":"an array"}')
    assert info.value.reason is ImportFailure.WRONG_SHAPE


def test_import_rejects_whole_file_on_bad_element():
    payload = json.dumps([{"text": "A", "category": "X", "timestamp": 1}, {"text": "B"}])

    with pytest.raises(QuoteImportError) as info:
        import_from(payload)
    assert info.value.reason is ImportFailure.WRONG_SHAPE
    assert "item 1" in str(info.value)


def test_write_export_into_directory_uses_default_name(tmp_path):
    target = write_export(tmp_path, QUOTES)

    assert target == tmp_path / EXPORT_FILENAME
    assert read_import(target) == QUOTES
