"""Tests for deck snapshot persistence."""
import json

import pytest

from flashdeck.config import Config
from flashdeck.services import JSONFileStore

KEY = Config.STORAGE_KEY


@pytest.fixture(params=["memory", "file"])
def store(request, memory_store, file_store):
    return memory_store if request.param == "memory" else file_store


def test_save_and_load(store, sample_cards):
    assert store.save(KEY, sample_cards) is True

    assert store.load(KEY) == sample_cards


def test_load_missing_key(store):
    assert store.load(KEY) == []


def test_empty_save_keeps_previous_snapshot(store, sample_cards):
    store.save(KEY, sample_cards)

    assert store.save(KEY, []) is False
    assert store.load(KEY) == sample_cards


def test_clear(store, sample_cards):
    store.save(KEY, sample_cards)

    assert store.clear(KEY) is True
    assert store.load(KEY) == []
    assert KEY not in store
    assert store.clear(KEY) is True


def test_file_store_layout(file_store, sample_cards):
    file_store.save(KEY, sample_cards[:1])

    with open(file_store.path, encoding="utf-8") as f:
        data = json.load(f)

    assert data == {
        KEY: [{"id": 0, "kanji": "日", "phonetic": "にち", "meaning": "sun", "example": "日曜日"}]
    }


def test_file_store_keeps_other_keys(file_store, sample_cards):
    file_store.save("other", sample_cards)
    file_store.save(KEY, sample_cards[:1])
    file_store.clear(KEY)

    assert file_store.load("other") == sample_cards


def test_file_store_survives_corrupt_file(tmp_path, sample_cards):
    path = tmp_path / "storage.json"
    path.write_text("{not json", encoding="utf-8")
    store = JSONFileStore(str(path))

    assert store.load(KEY) == []
    assert store.save(KEY, sample_cards)
    assert JSONFileStore(str(path)).load(KEY) == sample_cards


def test_broken_entries_are_skipped(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text(
        json.dumps({KEY: [{"kanji": "no id"}, {"id": 4, "kanji": "雨", "meaning": "rain"}]}),
        encoding="utf-8",
    )

    cards = JSONFileStore(str(path)).load(KEY)

    assert len(cards) == 1
    assert cards[0].id == 4
    assert cards[0].phonetic == ""


def test_non_list_value_loads_empty(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({KEY: "oops"}), encoding="utf-8")

    assert JSONFileStore(str(path)).load(KEY) == []
