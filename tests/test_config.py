from types import SimpleNamespace

import pytest

from app import config


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.setattr(config, "st", None)
    for name in ("MESSCUT_STORAGE", "MESSCUT_STORAGE_KEY", "MESSCUT_BASE_URL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = config.load_settings()
    assert settings == config.Settings(storage="file", storage_key="messcut_data", base_url=config.DEFAULT_BASE_URL)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MESSCUT_STORAGE", " Browser ")
    monkeypatch.setenv("MESSCUT_STORAGE_KEY", "messcut_test")
    monkeypatch.setenv("MESSCUT_BASE_URL", "https://cuts.example.com/")
    settings = config.load_settings()
    assert settings.storage == "browser"
    assert settings.storage_key == "messcut_test"
    assert settings.base_url == "https://cuts.example.com"


def test_secrets_win_over_environment(monkeypatch):
    monkeypatch.setenv("MESSCUT_STORAGE", "file")
    monkeypatch.setattr(config, "st", SimpleNamespace(secrets={"messcut": {"storage": "memory"}}))
    assert config.load_settings().storage == "memory"


def test_unknown_backend_raises(monkeypatch):
    monkeypatch.setenv("MESSCUT_STORAGE", "sqlite")
    with pytest.raises(config.MessCutConfigError) as excinfo:
        config.load_settings()
    assert "sqlite" in str(excinfo.value)
