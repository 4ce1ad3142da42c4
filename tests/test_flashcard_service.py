"""Tests for the import / navigate / persist flow."""
import asyncio

import pytest

from flashdeck.config import Config
from flashdeck.services import (
    DeckState,
    FlashcardService,
    MalformedFileError,
    SourceFile,
    UnsupportedFormatError,
)

KEY = Config.STORAGE_KEY


def csv_source(data, name="words.csv"):
    return SourceFile(name=name, mime_type="text/csv", data=data)


def test_import_loads_and_persists(service, memory_store, sample_csv, sample_cards):
    cards = service.import_file(csv_source(sample_csv))

    assert cards == sample_cards
    assert service.navigator.state is DeckState.BROWSING
    assert memory_store.load(KEY) == sample_cards


def test_import_replaces_deck_and_resets_cursor(service, sample_csv):
    service.import_file(csv_source(sample_csv))
    service.navigator.next()
    service.navigator.toggle_reveal()

    service.import_file(csv_source("h\n山,やま,mountain,\n".encode("utf-8")))

    assert [card.kanji for card in service.cards] == ["山"]
    assert service.navigator.cursor == 0
    assert service.navigator.revealed is False


@pytest.mark.parametrize(
    "source, error",
    [
        (SourceFile(name="notes.txt", mime_type="text/plain", data=b"x"), UnsupportedFormatError),
        (SourceFile(name="broken.csv", data=b"h\n\xff\xfe"), MalformedFileError),
        (SourceFile(name="broken.xlsx", data=b"not a zip"), MalformedFileError),
    ],
)
def test_failed_import_leaves_state_untouched(service, memory_store, sample_csv, source, error):
    service.import_file(csv_source(sample_csv))
    service.navigator.next()
    service.navigator.toggle_reveal()
    before = service.cards

    with pytest.raises(error):
        service.import_file(source)

    assert service.cards == before
    assert service.navigator.cursor == 1
    assert service.navigator.revealed is True
    assert memory_store.load(KEY) == before


def test_empty_import_keeps_stored_snapshot(service, memory_store, sample_csv, sample_cards):
    service.import_file(csv_source(sample_csv))

    service.import_file(csv_source(b"kanji,phonetic,meaning,example\n"))

    assert service.navigator.is_empty
    assert memory_store.load(KEY) == sample_cards


def test_clear_removes_snapshot(service, memory_store, sample_csv):
    service.import_file(csv_source(sample_csv))

    service.clear()

    assert service.navigator.is_empty
    assert KEY not in memory_store


def test_restore(memory_store, sample_cards):
    memory_store.save(KEY, sample_cards)
    service = FlashcardService(store=memory_store)

    assert service.restore() == 3
    assert service.navigator.current == sample_cards[0]


def test_restore_without_snapshot(service):
    assert service.restore() == 0
    assert service.navigator.is_empty


def test_restore_from_file_store(file_store, sample_csv, sample_cards):
    FlashcardService(store=file_store).import_file(csv_source(sample_csv))

    service = FlashcardService(store=file_store)
    service.restore()

    assert service.cards == sample_cards


def test_import_file_async(service, sample_csv, sample_cards):
    cards = asyncio.run(service.import_file_async(csv_source(sample_csv)))

    assert cards == sample_cards
    assert service.navigator.count == 3


def test_import_file_async_propagates_errors(service):
    with pytest.raises(UnsupportedFormatError):
        asyncio.run(service.import_file_async(SourceFile(name="a.doc", data=b"")))
