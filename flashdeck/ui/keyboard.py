"""Keyboard shortcuts for the flashcard view."""

from typing import Dict, Optional

from ..services.navigator import DeckNavigator

# Flet key name -> navigator method
KEY_BINDINGS: Dict[str, str] = {
    "Arrow Left": "previous",
    "Arrow Right": "next",
    " ": "toggle_reveal",
    "Space": "toggle_reveal",
    "Enter": "toggle_reveal",
    "Escape": "hide",
}

SHORTCUT_HINT = "← → switch card  |  Space show meaning  |  Esc hide"


def action_for_key(key: str) -> Optional[str]:
    """Get the navigator action bound to a key, if any."""
    return KEY_BINDINGS.get(key)


def handle_key(navigator: DeckNavigator, key: str) -> bool:
    """
    Apply the shortcut bound to ``key``.

    Shortcuts are ignored while the deck is empty.

    Returns:
        True if the key is bound and an action ran
    """
    action = action_for_key(key)
    if action is None or navigator.is_empty:
        return False
    getattr(navigator, action)()
    return True
