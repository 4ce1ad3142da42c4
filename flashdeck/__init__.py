"""FlashDeck - Vocabulary Flashcard Viewer"""

__version__ = "1.0.0"
__author__ = "FlashDeck Team"

from .config import Config, SettingsManager
from .models import FlashCard
from .services import DeckNavigator, FlashcardService, SourceFile

__all__ = [
    'Config',
    'SettingsManager',
    'FlashCard',
    'DeckNavigator',
    'FlashcardService',
    'SourceFile',
]
