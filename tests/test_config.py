from __future__ import annotations

import pytest

from app.core.config import DEFAULT_GROQ_MODEL_ID, DEFAULT_SITE_ORIGIN, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "PORT",
        "APP_ENV",
        "NODE_ENV",
        "GROQ_API_KEY",
        "GROQ_MODEL_ID",
        "AI_CHAT_TIMEOUT_SECONDS",
        "SITE_ORIGIN",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("app.core.config.load_dotenv", lambda: False)


def test_load_settings_defaults() -> None:
    settings = load_settings()

    assert settings.port == 3000
    assert settings.environment == "development"
    assert not settings.is_production
    assert settings.groq_api_key == ""
    assert settings.groq_model_id == DEFAULT_GROQ_MODEL_ID
    assert settings.ai_chat_timeout_seconds == 8.0
    assert settings.site_origin == DEFAULT_SITE_ORIGIN


def test_load_settings_reads_node_env_and_app_env_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NODE_ENV", "production")
    assert load_settings().is_production

    monkeypatch.setenv("APP_ENV", "development")
    assert not load_settings().is_production


def test_load_settings_rejects_unknown_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NODE_ENV", "staging")

    with pytest.raises(ValueError, match="NODE_ENV"):
        load_settings()


def test_load_settings_ignores_invalid_numbers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "not-a-port")
    monkeypatch.setenv("AI_CHAT_TIMEOUT_SECONDS", "-1")

    settings = load_settings()

    assert settings.port == 3000
    assert settings.ai_chat_timeout_seconds == 8.0


def test_load_settings_parses_timeout_and_origin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AI_CHAT_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("SITE_ORIGIN", "https://example.com/")

    settings = load_settings()

    assert settings.ai_chat_timeout_seconds == 2.5
    assert settings.site_origin == "https://example.com"
