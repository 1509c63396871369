import pytest

from src.infrastructure import config
from src.infrastructure.config import Settings


@pytest.fixture(autouse=True)
def env_only(monkeypatch):
    monkeypatch.setattr(config, "_HAS_STREAMLIT", False)
    for name in ("DIAGNOSIS_DELAY_SECONDS", "RESET_TOKEN_TTL_HOURS", "APP_URL", "CREDENTIALS_FILE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings()
    assert settings.diagnosis_delay_seconds == 0.0
    assert settings.reset_token_ttl_hours == 24
    assert settings.app_url == "http://localhost:8501"
    assert settings.credentials_path == ".streamlit/users.json"


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("DIAGNOSIS_DELAY_SECONDS", "1.5")
    monkeypatch.setenv("RESET_TOKEN_TTL_HOURS", "2")
    monkeypatch.setenv("APP_URL", "https://sympcare.example")

    settings = Settings()
    assert settings.diagnosis_delay_seconds == 1.5
    assert settings.reset_token_ttl_hours == 2
    assert settings.app_url == "https://sympcare.example"


@pytest.mark.parametrize("raw,expected", [("abc", 0.0), ("-3", 0.0)])
def test_bad_delay_falls_back_to_zero(monkeypatch, raw, expected):
    monkeypatch.setenv("DIAGNOSIS_DELAY_SECONDS", raw)
    assert Settings().diagnosis_delay_seconds == expected


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_bad_ttl_falls_back_to_default(monkeypatch, raw):
    monkeypatch.setenv("RESET_TOKEN_TTL_HOURS", raw)
    assert Settings().reset_token_ttl_hours == 24


def test_credentials_path_from_environment(monkeypatch):
    monkeypatch.setenv("CREDENTIALS_FILE", "/srv/sympcare/users.json")
    assert Settings().credentials_path == "/srv/sympcare/users.json"
