"""Tests for the persistent settings manager."""
import json

from flashdeck.config import Config, SettingsManager


def start_manager(path):
    """Simulate a fresh app start against the same settings file."""
    SettingsManager.reset_instance()
    return SettingsManager(str(path))


def test_defaults_without_file(settings, tmp_path):
    assert settings.get("THEME_MODE") == "light"
    assert settings.get("STORAGE_FILE") == Config.STORAGE_FILE
    assert settings.get("MISSING", "fallback") == "fallback"
    assert not (tmp_path / "settings.json").exists()


def test_set_persists_across_starts(settings, tmp_path):
    settings.set("THEME_MODE", "dark")

    reloaded = start_manager(tmp_path / "settings.json")

    assert reloaded.get("THEME_MODE") == "dark"


def test_singleton(settings):
    assert SettingsManager() is settings


def test_environment_override_wins_on_later_starts(settings, tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    settings.set("THEME_MODE", "dark")
    assert start_manager(path).get("LOG_LEVEL") == "INFO"

    monkeypatch.setenv("FLASHDECK_LOG_LEVEL", "DEBUG")
    second = start_manager(path)

    assert second.get("LOG_LEVEL") == "DEBUG"
    assert "LOG_LEVEL" not in json.loads(path.read_text(encoding="utf-8"))


def test_environment_override_is_not_written(settings, tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setenv("FLASHDECK_WINDOW_WIDTH", "1200")
    manager = start_manager(path)

    manager.set("THEME_MODE", "dark")

    assert manager.get("WINDOW_WIDTH") == 1200
    assert json.loads(path.read_text(encoding="utf-8")) == {"THEME_MODE": "dark"}


def test_invalid_integer_override_is_ignored(settings, tmp_path, monkeypatch):
    monkeypatch.setenv("FLASHDECK_WINDOW_HEIGHT", "tall")

    manager = start_manager(tmp_path / "settings.json")

    assert manager.get("WINDOW_HEIGHT") == Config.WINDOW_HEIGHT


def test_set_replaces_environment_override(settings, tmp_path, monkeypatch):
    monkeypatch.setenv("FLASHDECK_THEME_MODE", "dark")
    manager = start_manager(tmp_path / "settings.json")

    manager.set("THEME_MODE", "light")

    assert manager.get("THEME_MODE") == "light"


def test_corrupt_or_foreign_settings_file(settings, tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{broken", encoding="utf-8")
    assert start_manager(path).get("THEME_MODE") == "light"

    path.write_text(json.dumps({"THEME_MODE": "dark", "UNKNOWN": 1}), encoding="utf-8")
    manager = start_manager(path)
    assert manager.get("THEME_MODE") == "dark"
    assert manager.get("UNKNOWN") is None
