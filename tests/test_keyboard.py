"""Tests for keyboard shortcuts."""
import pytest

from flashdeck.services import DeckNavigator
from flashdeck.ui.keyboard import action_for_key, handle_key


@pytest.mark.parametrize(
    "key, action",
    [
        ("Arrow Left", "previous"),
        ("Arrow Right", "next"),
        (" ", "toggle_reveal"),
        ("Enter", "toggle_reveal"),
        ("Escape", "hide"),
        ("A", None),
    ],
)
def test_action_for_key(key, action):
    assert action_for_key(key) == action


def test_handle_key_drives_navigator(sample_cards):
    nav = DeckNavigator(sample_cards)

    assert handle_key(nav, "Arrow Right")
    assert nav.cursor == 1
    handle_key(nav, "Enter")
    assert nav.revealed
    handle_key(nav, "Escape")
    assert not nav.revealed
    handle_key(nav, " ")
    handle_key(nav, "Arrow Left")
    assert nav.cursor == 0
    assert not nav.revealed


def test_handle_key_ignores_unbound_and_empty_deck():
    nav = DeckNavigator()

    assert not handle_key(nav, "Arrow Right")
    assert not handle_key(nav, "Q")
