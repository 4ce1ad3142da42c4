"""
FlashDeck: Vocabulary Flashcard Viewer
--------------------------------------

Flet entry point. Usage:

    python main_ui.py [vocabulary.csv | vocabulary.xlsx]

A file given on the command line replaces the saved deck at startup.
"""

import logging
import sys
import traceback
from pathlib import Path
from typing import Optional

# Ensure project root is on sys.path for absolute imports
_ROOT = Path(__file__).resolve().parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import flet as ft

from flashdeck.config import Config, SettingsManager
from flashdeck.services import FlashcardService, JSONFileStore
from flashdeck.ui import FlashcardView
from flashdeck.utils import setup_logger

logger = logging.getLogger("flashdeck.app")


class FlashDeckApp:
    """Main application controller."""

    def __init__(self, page: ft.Page, initial_file: Optional[str] = None) -> None:
        """
        Initialize the application.

        Args:
            page: Flet page instance
            initial_file: Optional file to import right away
        """
        self.page = page
        self.settings = SettingsManager()
        self._setup_page()

        self.service = FlashcardService(store=JSONFileStore(self.settings.get("STORAGE_FILE")))
        restored = self.service.restore()
        if restored:
            logger.info("Resuming saved deck (%d cards)", restored)

        self.view = FlashcardView(self.page, self.service, on_toggle_theme=self._toggle_theme)
        self.page.on_keyboard_event = self.view.on_keyboard
        # File drops deliver the dropped path in e.data
        self.page.on_drop = self.view.on_file_drop
        self.page.add(self.view.container)

        if initial_file:
            self.view.open_path(initial_file)

    def _setup_page(self) -> None:
        """Configure page settings and theme."""
        self.page.title = Config.APP_TITLE
        self.page.theme_mode = (
            ft.ThemeMode.DARK if self.settings.get("THEME_MODE") == "dark" else ft.ThemeMode.LIGHT
        )
        self.page.theme = ft.Theme(
            color_scheme_seed="#4F46E5",
            font_family="Inter, Roboto, Segoe UI, sans-serif",
        )
        self.page.padding = 0
        self.page.spacing = 0
        self.page.window.min_width = Config.WINDOW_MIN_WIDTH
        self.page.window.min_height = Config.WINDOW_MIN_HEIGHT
        self.page.window.width = self.settings.get("WINDOW_WIDTH", Config.WINDOW_WIDTH)
        self.page.window.height = self.settings.get("WINDOW_HEIGHT", Config.WINDOW_HEIGHT)

    def _toggle_theme(self) -> None:
        """Switch between light and dark mode and remember the choice."""
        theme = "light" if self.settings.get("THEME_MODE") == "dark" else "dark"
        self.settings.set("THEME_MODE", theme)
        self.page.theme_mode = ft.ThemeMode.DARK if theme == "dark" else ft.ThemeMode.LIGHT
        self.page.update()


def main(page: ft.Page) -> None:
    """
    Main entry point for Flet application.

    Args:
        page: Flet page instance
    """
    setup_logger("flashdeck", SettingsManager().get("LOG_LEVEL"))
    initial_file = sys.argv[1] if len(sys.argv) > 1 else None

    try:
        FlashDeckApp(page, initial_file)
    except Exception:
        error_text = traceback.format_exc()
        logger.error("UI failed to start\n%s", error_text)
        page.add(
            ft.Container(
                content=ft.Column(
                    controls=[
                        ft.Text("UI failed to start", size=20, weight=ft.FontWeight.BOLD, color=ft.Colors.RED_400),
                        ft.Container(
                            content=ft.Text(error_text, size=11, selectable=True),
                            padding=10,
                            bgcolor=ft.Colors.with_opacity(0.08, ft.Colors.BLACK),
                            border_radius=8,
                        ),
                    ],
                    spacing=10,
                ),
                padding=20,
            )
        )
        page.update()


def run() -> None:
    """Console entry point."""
    ft.run(main)


if __name__ == "__main__":
    run()
