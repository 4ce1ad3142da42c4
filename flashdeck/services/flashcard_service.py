"""
Flashcard Service - import, navigation and persistence in one place.

Separates the study flow from the UI layer:
- imports replace the deck only when parsing fully succeeds
- every successful import is written through to the store
- clearing removes both the in-memory deck and the stored snapshot
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from ..config import Config
from ..models import FlashCard
from .ingest import SourceFile, ingest
from .navigator import DeckNavigator
from .storage import BaseDeckStore, JSONFileStore

logger = logging.getLogger(__name__)


class FlashcardService:
    """
    Service owning the deck navigator and its persisted snapshot.

    Usage:
        service = FlashcardService()
        service.restore()
        service.import_file(SourceFile.from_path("words.csv"))
        service.navigator.next()
    """

    # A single worker keeps file reads strictly one at a time
    _executor = ThreadPoolExecutor(max_workers=1)

    def __init__(
        self,
        store: Optional[BaseDeckStore] = None,
        key: Optional[str] = None,
        navigator: Optional[DeckNavigator] = None,
    ):
        """
        Initialize the service.

        Args:
            store: Snapshot store (defaults to the JSON file store)
            key: Storage key (defaults to Config.STORAGE_KEY)
            navigator: Navigator to drive (a new one by default)
        """
        self.store = store if store is not None else JSONFileStore()
        self.key = key or Config.STORAGE_KEY
        self.navigator = navigator or DeckNavigator()

    @property
    def cards(self) -> List[FlashCard]:
        return self.navigator.cards

    def restore(self) -> int:
        """
        Load the persisted deck, if any.

        Returns:
            Number of cards restored
        """
        cards = self.store.load(self.key)
        if cards:
            self.navigator.load(cards)
            logger.info("Restored %d card(s) from storage", len(cards))
        return len(cards)

    def _apply(self, cards: List[FlashCard]) -> List[FlashCard]:
        self.navigator.load(cards)
        if not self.store.save(self.key, cards):
            logger.debug("Deck snapshot not written (%d card(s))", len(cards))
        return cards

    def import_file(self, source: SourceFile) -> List[FlashCard]:
        """
        Import a file and replace the current deck.

        Args:
            source: File to import

        Returns:
            The new deck

        Raises:
            UnsupportedFormatError: Unknown format, state untouched
            MalformedFileError: Unreadable file, state untouched
        """
        return self._apply(ingest(source))

    async def import_file_async(self, source: SourceFile) -> List[FlashCard]:
        """
        Import a file with parsing off the event loop.

        Raises the same errors as ``import_file``.
        """
        loop = asyncio.get_event_loop()
        cards = await loop.run_in_executor(self._executor, ingest, source)
        return self._apply(cards)

    def clear(self) -> None:
        """Empty the deck and remove the stored snapshot."""
        self.navigator.clear()
        if not self.store.clear(self.key):
            logger.warning("Could not remove stored deck %r", self.key)
        logger.info("Deck cleared")
