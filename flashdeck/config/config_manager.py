"""User preferences stored in settings.json, with environment overrides."""

import copy
import json
import logging
import os
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .settings import Config

_env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(_env_path)

logger = logging.getLogger(__name__)


class SettingsManager:
    """
    Preferences the user can change from the app, kept in a JSON file.

    Lookup order for ``get``:
        1. ``FLASHDECK_<KEY>`` environment variable (never written to disk)
        2. value saved in the settings file
        3. ``DEFAULTS``

    Usage:
        settings = SettingsManager()
        if settings.get("THEME_MODE") == "dark": ...
        settings.set("THEME_MODE", "light")
    """

    _instance: Optional["SettingsManager"] = None
    _lock: Lock = Lock()

    ENV_PREFIX: str = "FLASHDECK_"

    DEFAULTS: Dict[str, Any] = {
        "THEME_MODE": "light",
        "WINDOW_WIDTH": Config.WINDOW_WIDTH,
        "WINDOW_HEIGHT": Config.WINDOW_HEIGHT,
        "STORAGE_FILE": Config.STORAGE_FILE,
        "LOG_LEVEL": "INFO",
    }

    def __new__(cls, settings_file: Optional[str] = None) -> "SettingsManager":
        """One manager per process."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._initialized = False
                    cls._instance = instance
        return cls._instance

    def __init__(self, settings_file: Optional[str] = None) -> None:
        """
        Args:
            settings_file: Path to the settings JSON file
                          (defaults to Config.SETTINGS_FILE).
        """
        if getattr(self, "_initialized", False):
            return

        self._settings_file = Path(settings_file or Config.SETTINGS_FILE)
        self._file_lock = Lock()
        self._saved: Dict[str, Any] = self._read_file()
        self._overrides: Dict[str, Any] = self._read_environment()
        self._initialized = True

    def _read_file(self) -> Dict[str, Any]:
        if not self._settings_file.exists():
            return {}
        try:
            with open(self._settings_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load settings file %s: %s", self._settings_file, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Settings file %s is not a JSON object, ignoring it", self._settings_file)
            return {}
        return {key: value for key, value in data.items() if key in self.DEFAULTS}

    def _read_environment(self) -> Dict[str, Any]:
        overrides = {}
        for key, default in self.DEFAULTS.items():
            raw = os.environ.get(self.ENV_PREFIX + key)
            if raw is None:
                continue
            if isinstance(default, int):
                try:
                    overrides[key] = int(raw)
                except ValueError:
                    logger.warning("Ignoring %s%s=%r: not an integer", self.ENV_PREFIX, key, raw)
            else:
                overrides[key] = raw
        return overrides

    def _write_file(self) -> None:
        with self._file_lock:
            try:
                self._settings_file.parent.mkdir(parents=True, exist_ok=True)
                with open(self._settings_file, "w", encoding="utf-8") as f:
                    json.dump(self._saved, f, indent=2, ensure_ascii=False)
            except OSError as e:
                logger.warning("Could not save settings file %s: %s", self._settings_file, e)

    def get(self, key: str, default: Any = None) -> Any:
        """Effective value of a setting (copy for mutable values)."""
        if key in self._overrides:
            value = self._overrides[key]
        elif key in self._saved:
            value = self._saved[key]
        else:
            value = self.DEFAULTS.get(key, default)
        return copy.deepcopy(value) if isinstance(value, (dict, list)) else value

    def set(self, key: str, value: Any) -> None:
        """
        Save a preference chosen in the app.

        An environment override for the same key is dropped for the rest
        of the session so the new choice takes effect.
        """
        self._saved[key] = value
        self._overrides.pop(key, None)
        self._write_file()

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the current manager. Useful for testing."""
        with cls._lock:
            cls._instance = None
