"""Global settings and configuration."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load from project root
_env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(_env_path)


@dataclass
class Config:
    """Application-wide configuration."""

    APP_TITLE: str = "FlashDeck"

    # Single-deck model: one fixed storage slot for the whole application
    STORAGE_KEY: str = "flashcards"

    # Accepted input formats
    EXCEL_MIME_TYPES: tuple = (
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "application/vnd.ms-excel",
    )
    CSV_MIME_TYPE: str = "text/csv"
    EXCEL_EXTENSIONS: tuple = (".xlsx", ".xls")
    CSV_EXTENSIONS: tuple = (".csv",)
    SUPPORTED_EXTENSIONS: tuple = ("xlsx", "xls", "csv")

    # Column order expected in imported files
    COLUMNS: tuple = ("kanji", "phonetic", "meaning", "example")

    # Window
    WINDOW_WIDTH: int = 900
    WINDOW_HEIGHT: int = 800
    WINDOW_MIN_WIDTH: int = 600
    WINDOW_MIN_HEIGHT: int = 600

    LOG_LEVEL: str = "INFO"

    # Cross-platform paths using pathlib
    # BASE_DIR is the project root (parent of flashdeck/)
    BASE_DIR: Path = Path(__file__).parent.parent.parent.resolve()

    DATA_DIR: str = os.environ.get("FLASHDECK_DATA_DIR", str(BASE_DIR / "data"))
    STORAGE_FILE: str = str(Path(DATA_DIR) / "storage.json")
    SETTINGS_FILE: str = str(Path(DATA_DIR) / "settings.json")
