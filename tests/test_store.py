import json

import pytest

from quotebox.storage.backends import JsonFileStorage, MemoryStorage, StorageError
from quotebox.storage.models import Quote
from quotebox.storage.store import ALL_CATEGORIES, QuoteStore, unique_categories


def _store(tmp_path, clock=lambda: 1000):
    return QuoteStore(JsonFileStorage(tmp_path / "storage.json"), session=MemoryStorage(), clock=clock)


def test_load_seeds_three_quotes_when_storage_empty(tmp_path):
    store = _store(tmp_path, clock=lambda: 42)

    quotes = store.load()

    assert len(quotes) == 3
    assert {q.category for q in quotes} == {"Motivation", "Life", "Success"}
    assert all(q.timestamp == 42 for q in quotes)


def test_load_seeds_when_stored_value_is_garbage(tmp_path):
    storage = JsonFileStorage(tmp_path / "storage.json")
    storage.set("quotes", "{not json")
    store = QuoteStore(storage)

    assert len(store.load()) == 3


def test_load_seeds_when_stored_value_is_not_a_list(tmp_path):
    storage = JsonFileStorage(tmp_path / "storage.json")
    storage.set("quotes", json.dumps({"text": "A"}))
    store = QuoteStore(storage)

    assert len(store.load()) == 3


class BrokenStorage(MemoryStorage):
    def get(self, key):
        raise StorageError("disk gone")


def test_load_does_not_raise_on_storage_error():
    store = QuoteStore(BrokenStorage())

    assert len(store.load()) == 3


def test_save_is_visible_to_next_load(tmp_path):
    store = _store(tmp_path)
    store.save([Quote("A", "X", 100), Quote("B", "Y", 200)])

    reloaded = _store(tmp_path).load()

    assert reloaded == [Quote("A", "X", 100), Quote("B", "Y", 200)]


def test_corrupted_file_is_treated_as_empty(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("]]]", encoding="utf-8")
    storage = JsonFileStorage(path)

    assert storage.get("quotes") is None
    storage.set("selectedCategory", "Life")
    assert storage.get("selectedCategory") == "Life"


def test_unique_categories_no_duplicates():
    quotes = [Quote("A", "X", 1), Quote("B", "Y", 1), Quote("C", "X", 1)]

    assert sorted(unique_categories(quotes)) == ["X", "Y"]


def test_selected_category_defaults_to_all(tmp_path):
    store = _store(tmp_path)

    assert store.last_selected_category() == ALL_CATEGORIES
    store.remember_selected_category("Life")
    assert _store(tmp_path).last_selected_category() == "Life"


def test_last_shown_is_session_scoped(tmp_path):
    store = _store(tmp_path)
    assert store.last_shown() is None

    store.remember_selected_category("X")
    store.remember_last_shown(Quote("A", "X", 5))
    assert store.last_shown() == Quote("A", "X", 5)

    # a new session shares the durable file but not the session storage
    assert _store(tmp_path).last_shown() is None
    assert "lastQuote" not in json.loads((tmp_path / "storage.json").read_text(encoding="utf-8"))


def test_quotes_property_returns_copy(tmp_path):
    store = _store(tmp_path)
    store.load()

    store.quotes.append(Quote("Z", "Z", 1))

    assert len(store.quotes) == 3


@pytest.mark.parametrize(
    "record",
    [
        "text",
        {"text": "", "category": "X", "timestamp": 1},
        {"text": "A", "timestamp": 1},
        {"text": "A", "category": "X", "timestamp": "soon"},
        {"text": "A", "category": "X", "timestamp": True},
    ],
)
def test_quote_from_dict_rejects_bad_records(record):
    with pytest.raises(ValueError):
        Quote.from_dict(record)
