from pathlib import Path

from src.infrastructure.config import DEFAULT_API_URL, get_settings


def test_defaults(monkeypatch):
    for name in ("NOTES_API_URL", "NOTES_STORAGE_DIR", "NOTES_STORAGE_DISABLED", "NOTES_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.api_url == DEFAULT_API_URL
    assert settings.storage_dir == Path("~/.notes_client").expanduser()
    assert settings.log_level == "WARNING"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("NOTES_API_URL", "https://notes.example.com/api")
    monkeypatch.setenv("NOTES_STORAGE_DIR", str(tmp_path))
    monkeypatch.setenv("NOTES_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.api_url == "https://notes.example.com/api"
    assert settings.storage_dir == tmp_path
    assert settings.log_level == "DEBUG"


def test_storage_disabled(monkeypatch):
    monkeypatch.setenv("NOTES_STORAGE_DISABLED", "1")
    assert get_settings().storage_dir is None
