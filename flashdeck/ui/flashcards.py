"""
Flashcard View - Import and Study Screen
----------------------------------------

Shows a drop/browse zone while no deck is loaded, then one card at a
time with a reveal-on-demand meaning panel, navigation buttons and
keyboard shortcuts.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional

import flet as ft

from flashdeck.config import Config
from flashdeck.models import FlashCard
from flashdeck.services import (
    FlashcardError,
    FlashcardService,
    SourceFile,
    UnsupportedFormatError,
    is_supported,
)
from flashdeck.ui.keyboard import SHORTCUT_HINT, handle_key

logger = logging.getLogger(__name__)


# =============================================================================
# DESIGN TOKENS
# =============================================================================
class DesignTokens:
    """Centralized design tokens for consistent styling."""
    # Colors - light indigo theme
    BG_PAGE = "#EEF2FF"
    BG_CARD = "#FFFFFF"
    BG_PHONETIC = "#F3F4F6"
    BG_MEANING = "#EEF2FF"
    BG_EXAMPLE = "#FAF5FF"

    TEXT_PRIMARY = "#111827"
    TEXT_SECONDARY = "#4B5563"
    TEXT_MUTED = "#6B7280"

    ACCENT_PRIMARY = "#4F46E5"
    ACCENT_PRIMARY_HOVER = "#4338CA"
    ACCENT_EXAMPLE = "#9333EA"
    ACCENT_NEUTRAL = "#4B5563"
    ACCENT_NEUTRAL_HOVER = "#374151"
    ACCENT_DANGER = "#DC2626"
    ACCENT_DANGER_HOVER = "#B91C1C"

    BORDER_IDLE = "#D1D5DB"

    # Spacing
    SPACING_SM = 8
    SPACING_MD = 16
    SPACING_LG = 32

    # Border radius
    RADIUS_MD = 12
    RADIUS_LG = 16

    FONT_MONO = "JetBrains Mono, Consolas, Monaco, monospace"

    CARD_WIDTH = 500
    KANJI_SIZE = 120


def _button_style(color: str, hover: str) -> ft.ButtonStyle:
    return ft.ButtonStyle(
        color=ft.Colors.WHITE,
        bgcolor={
            ft.ControlState.DEFAULT: color,
            ft.ControlState.HOVERED: hover,
            ft.ControlState.DISABLED: ft.Colors.with_opacity(0.5, color),
        },
        padding=ft.Padding.symmetric(horizontal=24, vertical=12),
        shape=ft.RoundedRectangleBorder(radius=DesignTokens.RADIUS_MD),
    )


class FlashcardView:
    """
    Single-screen flashcard viewer.

    Renders from the service's navigator and re-renders whenever the
    navigator reports a change.
    """

    NO_LOCAL_PATH_MESSAGE = "Only files on this computer can be opened. Run FlashDeck as a desktop app."

    def __init__(
        self,
        page: ft.Page,
        service: Optional[FlashcardService] = None,
        on_toggle_theme: Optional[Callable[[], None]] = None,
    ) -> None:
        """
        Initialize the view.

        Args:
            page: Flet page instance for updates
            service: Flashcard service (a file-backed one by default)
            on_toggle_theme: Called by the light/dark button, hidden if None
        """
        self.page = page
        self.service = service or FlashcardService()
        self.navigator = self.service.navigator
        self._on_toggle_theme = on_toggle_theme
        self._is_importing: bool = False

        self._file_picker = ft.FilePicker()
        self.page.services.append(self._file_picker)

        self._container = ft.Container(expand=True, bgcolor=DesignTokens.BG_PAGE)
        self.navigator.on_change(self.refresh)
        self.refresh()

    @property
    def container(self) -> ft.Container:
        """Get the main container for this view."""
        return self._container

    def refresh(self) -> None:
        """Rebuild the content for the current navigator state."""
        if self.navigator.is_empty:
            body = self._build_empty_state()
        else:
            body = self._build_study_state()

        if self._on_toggle_theme is None:
            self._container.content = body
        else:
            self._container.content = ft.Column(
                controls=[self._build_toolbar(), body],
                spacing=0,
                expand=True,
            )
        self.page.update()

    def _build_toolbar(self) -> ft.Control:
        return ft.Row(
            controls=[
                ft.IconButton(
                    icon=ft.Icons.BRIGHTNESS_6_OUTLINED,
                    icon_color=DesignTokens.TEXT_MUTED,
                    tooltip="Toggle light/dark theme",
                    on_click=lambda _: self._on_toggle_theme(),
                ),
            ],
            alignment=ft.MainAxisAlignment.END,
        )

    # -------------------------------------------------------------------------
    # Empty state
    # -------------------------------------------------------------------------

    def _build_empty_state(self) -> ft.Control:
        drop_zone = ft.Container(
            content=ft.Column(
                controls=[
                    ft.Icon(ft.Icons.TABLE_CHART_OUTLINED, size=64, color=ft.Colors.GREY_400),
                    ft.Text(
                        "Drop a CSV or Excel file here",
                        size=20,
                        weight=ft.FontWeight.W_600,
                        color=DesignTokens.TEXT_PRIMARY,
                    ),
                    ft.Text("Or click to choose a file", color=DesignTokens.TEXT_SECONDARY),
                    ft.Text(
                        "Columns: " + ", ".join(Config.COLUMNS),
                        size=12,
                        color=DesignTokens.TEXT_MUTED,
                    ),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=DesignTokens.SPACING_MD,
            ),
            padding=DesignTokens.SPACING_LG,
            border=ft.border.all(2, DesignTokens.BORDER_IDLE),
            border_radius=DesignTokens.RADIUS_MD,
            bgcolor=DesignTokens.BG_CARD,
            on_click=self._on_browse_click,
            ink=True,
        )

        return ft.Column(
            controls=[
                ft.Text(
                    f"🎯 {Config.APP_TITLE}",
                    size=36,
                    weight=ft.FontWeight.BOLD,
                    color=DesignTokens.TEXT_PRIMARY,
                ),
                ft.Text(
                    "Import a vocabulary list to start studying",
                    size=16,
                    color=DesignTokens.TEXT_SECONDARY,
                ),
                ft.Container(content=drop_zone, width=DesignTokens.CARD_WIDTH + 100),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            alignment=ft.MainAxisAlignment.CENTER,
            spacing=DesignTokens.SPACING_MD,
            expand=True,
        )

    # -------------------------------------------------------------------------
    # Study state
    # -------------------------------------------------------------------------

    def _build_study_state(self) -> ft.Control:
        card = self.navigator.current

        header = ft.Column(
            controls=[
                ft.Text(
                    "📚 Vocabulary",
                    size=36,
                    weight=ft.FontWeight.BOLD,
                    color=DesignTokens.TEXT_PRIMARY,
                ),
                ft.Text(self.navigator.position_label, size=20, color=DesignTokens.TEXT_SECONDARY),
                ft.Text(SHORTCUT_HINT, size=11, color=DesignTokens.TEXT_MUTED),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            spacing=DesignTokens.SPACING_SM,
        )

        card_body: List[ft.Control] = [
            ft.Text(
                card.kanji,
                size=DesignTokens.KANJI_SIZE,
                weight=ft.FontWeight.W_900,
                color=DesignTokens.ACCENT_PRIMARY,
                text_align=ft.TextAlign.CENTER,
            ),
        ]
        if self.navigator.revealed:
            card_body.extend(self._build_meaning_panels(card))
            card_body.append(
                ft.ElevatedButton(
                    content=ft.Text("👆 Tap to hide", size=20, weight=ft.FontWeight.BOLD),
                    style=_button_style(DesignTokens.ACCENT_NEUTRAL, DesignTokens.ACCENT_NEUTRAL_HOVER),
                    on_click=lambda _: self.navigator.toggle_reveal(),
                )
            )
        else:
            card_body.append(
                ft.ElevatedButton(
                    content=ft.Text("👆 Tap to show meaning", size=20, weight=ft.FontWeight.BOLD),
                    style=_button_style(DesignTokens.ACCENT_PRIMARY, DesignTokens.ACCENT_PRIMARY_HOVER),
                    on_click=lambda _: self.navigator.toggle_reveal(),
                )
            )

        card_container = ft.Container(
            content=ft.Column(
                controls=card_body,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=DesignTokens.SPACING_LG,
                scroll=ft.ScrollMode.AUTO,
            ),
            width=DesignTokens.CARD_WIDTH,
            padding=DesignTokens.SPACING_LG,
            bgcolor=DesignTokens.BG_CARD,
            border_radius=DesignTokens.RADIUS_LG,
            shadow=ft.BoxShadow(
                blur_radius=16,
                color=ft.Colors.with_opacity(0.15, ft.Colors.BLACK),
                offset=ft.Offset(0, 4),
            ),
        )

        navigation = ft.Row(
            controls=[
                ft.ElevatedButton(
                    content=ft.Text("← Previous"),
                    style=_button_style(DesignTokens.ACCENT_NEUTRAL, DesignTokens.ACCENT_NEUTRAL_HOVER),
                    disabled=not self.navigator.has_previous,
                    on_click=lambda _: self.navigator.previous(),
                ),
                ft.ElevatedButton(
                    content=ft.Text("🗑️ Clear all"),
                    style=_button_style(DesignTokens.ACCENT_DANGER, DesignTokens.ACCENT_DANGER_HOVER),
                    on_click=lambda _: self.service.clear(),
                ),
                ft.ElevatedButton(
                    content=ft.Text("Next →"),
                    style=_button_style(DesignTokens.ACCENT_NEUTRAL, DesignTokens.ACCENT_NEUTRAL_HOVER),
                    disabled=not self.navigator.has_next,
                    on_click=lambda _: self.navigator.next(),
                ),
            ],
            alignment=ft.MainAxisAlignment.CENTER,
            spacing=DesignTokens.SPACING_MD,
        )

        return ft.Column(
            controls=[
                header,
                ft.Container(content=card_container, expand=True, alignment=ft.Alignment(0, 0)),
                ft.Container(content=navigation, padding=ft.Padding.only(bottom=DesignTokens.SPACING_LG)),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            expand=True,
        )

    def _build_meaning_panels(self, card: FlashCard) -> List[ft.Control]:
        """Phonetic, meaning and example panels; empty fields are skipped."""
        panels: List[ft.Control] = []
        if card.phonetic:
            panels.append(
                ft.Container(
                    content=ft.Text(
                        card.phonetic,
                        size=32,
                        color=DesignTokens.TEXT_SECONDARY,
                        font_family=DesignTokens.FONT_MONO,
                    ),
                    bgcolor=DesignTokens.BG_PHONETIC,
                    padding=ft.Padding.symmetric(horizontal=32, vertical=16),
                    border_radius=DesignTokens.RADIUS_LG,
                )
            )
        if card.meaning:
            panels.append(self._labelled_panel("Meaning:", card.meaning, DesignTokens.ACCENT_PRIMARY,
                                               DesignTokens.BG_MEANING, size=32))
        if card.example:
            panels.append(self._labelled_panel("Example:", card.example, DesignTokens.ACCENT_EXAMPLE,
                                               DesignTokens.BG_EXAMPLE, size=22))
        return panels

    def _labelled_panel(self, label: str, value: str, accent: str, bgcolor: str, size: int) -> ft.Container:
        return ft.Container(
            content=ft.Column(
                controls=[
                    ft.Text(label, size=20, weight=ft.FontWeight.BOLD, color=accent),
                    ft.Text(value, size=size, weight=ft.FontWeight.W_600, color=DesignTokens.TEXT_PRIMARY),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=DesignTokens.SPACING_SM,
            ),
            bgcolor=bgcolor,
            padding=DesignTokens.SPACING_LG,
            border_radius=DesignTokens.RADIUS_LG,
            width=DesignTokens.CARD_WIDTH,
        )

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def on_keyboard(self, e: ft.KeyboardEvent) -> None:
        """Route a key press to the navigator."""
        handle_key(self.navigator, e.key)

    def _on_browse_click(self, e: ft.ControlEvent) -> None:
        self.page.run_task(self._pick_file)

    async def _pick_file(self) -> None:
        """Open the file picker and import the chosen file."""
        files = await self._file_picker.pick_files(
            dialog_title="Choose a vocabulary file",
            file_type=ft.FilePickerFileType.CUSTOM,
            allowed_extensions=list(Config.SUPPORTED_EXTENSIONS),
            allow_multiple=False,
        )
        if not files:
            return
        await self.open_picked(files[0].name, files[0].path)

    async def open_picked(self, name: str, path: Optional[str]) -> None:
        """
        Import a file chosen in the picker.

        Only local files can be read; a picker result without a path
        (browser sessions) is reported instead of failing as malformed.
        """
        if not path:
            logger.warning("Picked file %s has no local path", name)
            self._show_error_dialog("Cannot open file", self.NO_LOCAL_PATH_MESSAGE)
            return
        await self.import_source(SourceFile.from_path(path))

    def on_file_drop(self, e) -> None:
        """Handle a file dropped on the window; ``e.data`` is its path."""
        if e.data:
            self.open_path(e.data)

    def open_path(self, path: str) -> None:
        """Import a file given by path (command line or dropped file)."""
        source = SourceFile.from_path(Path(path))
        if not is_supported(source.name, source.mime_type):
            self._show_error_dialog("Unsupported file", UnsupportedFormatError.default_message)
            return
        self.page.run_task(self.import_source, source)

    async def import_source(self, source: SourceFile) -> None:
        """
        Import a file and report failures in a blocking dialog.

        Only one import runs at a time; the deck is left untouched on error.
        """
        if self._is_importing:
            return
        if not is_supported(source.name, source.mime_type):
            self._show_error_dialog("Unsupported file", UnsupportedFormatError.default_message)
            return

        self._is_importing = True
        try:
            cards = await self.service.import_file_async(source)
            if cards:
                self._show_snackbar(f"Loaded {len(cards)} card(s) from {source.name}")
            else:
                self._show_snackbar(f"No usable rows found in {source.name}", error=True)
        except FlashcardError as e:
            logger.error("Import of %s failed: %s", source.name, e, exc_info=True)
            self._show_error_dialog("Import failed", e.message)
        finally:
            self._is_importing = False

    # -------------------------------------------------------------------------
    # Notifications
    # -------------------------------------------------------------------------

    def _show_error_dialog(self, title: str, message: str) -> None:
        """Show a blocking error dialog."""
        def close_dialog(e):
            dialog.open = False
            self.page.update()
            if dialog in self.page.overlay:
                self.page.overlay.remove(dialog)
            self.page.update()

        dialog = ft.AlertDialog(
            modal=True,
            title=ft.Row(
                controls=[
                    ft.Icon(ft.Icons.ERROR_OUTLINE, color=DesignTokens.ACCENT_DANGER, size=28),
                    ft.Text(title, weight=ft.FontWeight.W_700, size=18),
                ],
                spacing=12,
            ),
            content=ft.Text(message, size=14, color=DesignTokens.TEXT_SECONDARY),
            actions=[
                ft.ElevatedButton(
                    content=ft.Text("OK"),
                    on_click=close_dialog,
                    style=_button_style(DesignTokens.ACCENT_DANGER, DesignTokens.ACCENT_DANGER_HOVER),
                ),
            ],
            actions_alignment=ft.MainAxisAlignment.END,
        )

        self.page.overlay.append(dialog)
        dialog.open = True
        self.page.update()

    def _show_snackbar(self, message: str, error: bool = False) -> None:
        """Show a short non-blocking notification."""
        snackbar = ft.SnackBar(
            content=ft.Row(
                controls=[
                    ft.Icon(
                        ft.Icons.ERROR_OUTLINE if error else ft.Icons.CHECK_CIRCLE_OUTLINE,
                        color=ft.Colors.WHITE,
                        size=20,
                    ),
                    ft.Text(message, color=ft.Colors.WHITE, size=14),
                ],
                spacing=12,
            ),
            bgcolor=DesignTokens.ACCENT_DANGER if error else DesignTokens.ACCENT_PRIMARY,
            duration=3000,
        )
        # Clean up old snackbars
        for ctrl in list(self.page.overlay):
            if isinstance(ctrl, ft.SnackBar):
                self.page.overlay.remove(ctrl)
        self.page.overlay.append(snackbar)
        snackbar.open = True
        self.page.update()
