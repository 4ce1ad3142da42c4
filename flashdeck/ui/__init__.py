"""UI components for FlashDeck."""

from .flashcards import FlashcardView
from .keyboard import KEY_BINDINGS, handle_key

__all__ = [
    'FlashcardView',
    'KEY_BINDINGS',
    'handle_key',
]
