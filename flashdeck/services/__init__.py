"""Services layer for business logic separation."""

from .errors import FlashcardError, MalformedFileError, UnsupportedFormatError
from .ingest import FileFormat, SourceFile, classify, ingest, is_supported
from .parsers import parse_delimited, parse_spreadsheet, rows_to_cards, workbook_engine
from .navigator import DeckNavigator, DeckState
from .storage import BaseDeckStore, JSONFileStore, MemoryStore
from .flashcard_service import FlashcardService

__all__ = [
    "FlashcardError",
    "MalformedFileError",
    "UnsupportedFormatError",
    "FileFormat",
    "SourceFile",
    "classify",
    "ingest",
    "is_supported",
    "parse_delimited",
    "parse_spreadsheet",
    "rows_to_cards",
    "workbook_engine",
    "DeckNavigator",
    "DeckState",
    "BaseDeckStore",
    "JSONFileStore",
    "MemoryStore",
    "FlashcardService",
]
