import io
import os
import sys

import pandas as pd
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flashdeck.config import SettingsManager
from flashdeck.models import FlashCard
from flashdeck.services import FlashcardService, JSONFileStore, MemoryStore

HEADER = ["kanji", "phonetic", "meaning", "example"]


def make_xlsx(rows):
    """Build workbook bytes whose first sheet holds ``rows`` verbatim."""
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        pd.DataFrame(rows).to_excel(writer, sheet_name="Words", header=False, index=False)
    return buffer.getvalue()


@pytest.fixture
def sample_csv():
    return (
        "kanji,phonetic,meaning,example\n"
        "日,にち,sun,日曜日\n"
        "月,げつ,moon,月曜日\n"
        "火,か,fire,火曜日\n"
    ).encode("utf-8")


@pytest.fixture
def sample_cards():
    return [
        FlashCard(id=0, kanji="日", phonetic="にち", meaning="sun", example="日曜日"),
        FlashCard(id=1, kanji="月", phonetic="げつ", meaning="moon", example="月曜日"),
        FlashCard(id=2, kanji="火", phonetic="か", meaning="fire", example="火曜日"),
    ]


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def file_store(tmp_path):
    return JSONFileStore(str(tmp_path / "storage.json"))


@pytest.fixture
def service(memory_store):
    return FlashcardService(store=memory_store)


@pytest.fixture
def settings(tmp_path, monkeypatch):
    for key in SettingsManager.DEFAULTS:
        monkeypatch.delenv(SettingsManager.ENV_PREFIX + key, raising=False)
    SettingsManager.reset_instance()
    manager = SettingsManager(str(tmp_path / "settings.json"))
    yield manager
    SettingsManager.reset_instance()
