"""Data models for FlashDeck."""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class FlashCard:
    """One vocabulary entry shown as a card."""

    # Row index within the imported file (header excluded)
    id: int
    kanji: str
    phonetic: str
    meaning: str
    example: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted snapshot shape."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlashCard":
        """
        Build a card from a persisted snapshot entry.

        Missing text fields become empty strings.

        Raises:
            KeyError: If the entry has no id
            ValueError: If the id is not an integer
        """
        return cls(
            id=int(data["id"]),
            kanji=str(data.get("kanji") or ""),
            phonetic=str(data.get("phonetic") or ""),
            meaning=str(data.get("meaning") or ""),
            example=str(data.get("example") or ""),
        )

    @property
    def is_valid(self) -> bool:
        """A card needs both a kanji and a meaning to be studied."""
        return bool(self.kanji.strip()) and bool(self.meaning.strip())
