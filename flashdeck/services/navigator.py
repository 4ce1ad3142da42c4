"""
Deck navigator - cursor and reveal state over the loaded deck.

States:
    EMPTY     no cards; only ``load`` with a non-empty deck leaves it
    BROWSING  cursor points at a card; next/previous/clear are available

Every cursor move hides the meaning panel again.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional, Sequence

from ..models import FlashCard

logger = logging.getLogger(__name__)


class DeckState(Enum):
    """Navigator states."""
    EMPTY = "empty"
    BROWSING = "browsing"


class DeckNavigator:
    """
    Holds the ordered deck, a zero-based cursor and the reveal flag.

    Usage:
        nav = DeckNavigator()
        nav.load(cards)
        nav.toggle_reveal()
        nav.next()      # hides the meaning again
    """

    def __init__(self, cards: Optional[Sequence[FlashCard]] = None):
        self._cards: List[FlashCard] = list(cards or [])
        self._cursor: int = 0
        self._revealed: bool = False
        self._change_callbacks: List[Callable[[], None]] = []

    @property
    def cards(self) -> List[FlashCard]:
        """Copy of the deck."""
        return list(self._cards)

    @property
    def count(self) -> int:
        return len(self._cards)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def revealed(self) -> bool:
        return self._revealed

    @property
    def is_empty(self) -> bool:
        return not self._cards

    @property
    def state(self) -> DeckState:
        return DeckState.EMPTY if self.is_empty else DeckState.BROWSING

    @property
    def current(self) -> Optional[FlashCard]:
        """Card under the cursor, None when the deck is empty."""
        if self.is_empty:
            return None
        return self._cards[self._cursor]

    @property
    def has_next(self) -> bool:
        return self._cursor < len(self._cards) - 1

    @property
    def has_previous(self) -> bool:
        return self._cursor > 0

    @property
    def position_label(self) -> str:
        """Human readable position, e.g. ``Card 3 / 10``."""
        if self.is_empty:
            return ""
        return f"Card {self._cursor + 1} / {len(self._cards)}"

    def on_change(self, callback: Callable[[], None]) -> None:
        """
        Register a callback for state changes.

        Args:
            callback: Called with no arguments after every change
        """
        self._change_callbacks.append(callback)

    def _notify_change(self) -> None:
        for callback in self._change_callbacks:
            callback()

    def load(self, cards: Sequence[FlashCard]) -> None:
        """Replace the deck and go back to the first card."""
        self._cards = list(cards)
        self._cursor = 0
        self._revealed = False
        logger.debug("Deck loaded with %d card(s)", len(self._cards))
        self._notify_change()

    def next(self) -> bool:
        """
        Move to the next card.

        Returns:
            True if the cursor moved, False on the last card
        """
        if not self.has_next:
            return False
        self._cursor += 1
        self._revealed = False
        self._notify_change()
        return True

    def previous(self) -> bool:
        """
        Move to the previous card.

        Returns:
            True if the cursor moved, False on the first card
        """
        if not self.has_previous:
            return False
        self._cursor -= 1
        self._revealed = False
        self._notify_change()
        return True

    def clear(self) -> None:
        """Drop every card."""
        self._cards = []
        self._cursor = 0
        self._revealed = False
        self._notify_change()

    def toggle_reveal(self) -> bool:
        """
        Show or hide the meaning of the current card.

        Returns:
            The new reveal state
        """
        if self.is_empty:
            return False
        self._revealed = not self._revealed
        self._notify_change()
        return self._revealed

    def hide(self) -> None:
        """Force the meaning panel closed."""
        if self._revealed:
            self._revealed = False
            self._notify_change()
