"""
Persistence bridge - keeps a snapshot of the deck in a key-value store.

The deck is stored as a flat JSON array of cards under a single key.
Backends can be swapped without touching navigation logic.
"""

import json
import logging
import os
import uuid
from abc import ABC, abstractmethod
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List, Optional, Sequence

from ..config import Config
from ..models import FlashCard

logger = logging.getLogger(__name__)


def _decode_cards(key: str, raw: Any) -> List[FlashCard]:
    """Turn a stored JSON value back into cards, skipping broken entries."""
    if not isinstance(raw, list):
        logger.warning("Ignoring stored value for %r: expected a list", key)
        return []

    cards = []
    for entry in raw:
        try:
            cards.append(FlashCard.from_dict(entry))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("Skipping stored card %r: %s", entry, e)
    return cards


class BaseDeckStore(ABC):
    """
    Abstract key-value store for deck snapshots.

    ``save`` only overwrites when there is something to store, so an
    empty import never wipes a previously saved deck; ``clear`` is the
    only way to remove it.
    """

    def save(self, key: str, cards: Sequence[FlashCard]) -> bool:
        """
        Store the deck under ``key``.

        Returns:
            True if the stored value was written
        """
        if not cards:
            return False
        return self._write(key, [card.to_dict() for card in cards])

    def load(self, key: str) -> List[FlashCard]:
        """Get the stored deck, or an empty list if there is none."""
        raw = self._read(key)
        if raw is None:
            return []
        return _decode_cards(key, raw)

    @abstractmethod
    def clear(self, key: str) -> bool:
        """Remove the stored value. Returns True on success."""
        pass

    @abstractmethod
    def _read(self, key: str) -> Optional[Any]:
        """Return the raw stored value or None."""
        pass

    @abstractmethod
    def _write(self, key: str, value: List[Dict[str, Any]]) -> bool:
        """Replace the raw stored value."""
        pass


class MemoryStore(BaseDeckStore):
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self):
        self._values: Dict[str, List[Dict[str, Any]]] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def clear(self, key: str) -> bool:
        self._values.pop(key, None)
        return True

    def _read(self, key: str) -> Optional[Any]:
        value = self._values.get(key)
        return json.loads(json.dumps(value)) if value is not None else None

    def _write(self, key: str, value: List[Dict[str, Any]]) -> bool:
        self._values[key] = json.loads(json.dumps(value))
        return True


class JSONFileStore(BaseDeckStore):
    """
    JSON file store, the desktop counterpart of browser local storage.

    The file holds one object mapping keys to stored values. Every write
    rewrites the whole file through a temp file + rename.
    """

    def __init__(self, path: Optional[str] = None):
        """
        Initialize the file store.

        Args:
            path: Path to the JSON file (defaults to Config.STORAGE_FILE)
        """
        self.path = Path(path or Config.STORAGE_FILE)
        self._lock = Lock()

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._load_all()

    def _load_all(self) -> Dict[str, Any]:
        """Read the whole file (caller must hold lock)."""
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read storage file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s is not a JSON object, ignoring it", self.path)
            return {}
        return data

    def _save_all(self, data: Dict[str, Any]) -> bool:
        """Write the whole file atomically (caller must hold lock)."""
        temp_file = self.path.with_name(f"{self.path.name}.{uuid.uuid4().hex[:8]}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_file, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(temp_file, self.path)
            return True
        except OSError as e:
            logger.warning("Could not write storage file %s: %s", self.path, e)
            if temp_file.exists():
                temp_file.unlink()
            return False

    def clear(self, key: str) -> bool:
        with self._lock:
            data = self._load_all()
            if key not in data:
                return True
            del data[key]
            return self._save_all(data)

    def _read(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._load_all().get(key)

    def _write(self, key: str, value: List[Dict[str, Any]]) -> bool:
        with self._lock:
            data = self._load_all()
            data[key] = value
            return self._save_all(data)
