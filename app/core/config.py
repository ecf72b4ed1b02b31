from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_GROQ_API_URL = "https://api.groq.com/openai/v1/chat/completions"
DEFAULT_GROQ_MODEL_ID = "llama-3.1-8b-instant"
DEFAULT_SITE_ORIGIN = "https://arunregmi.com.np"

ENVIRONMENTS = ("development", "production")


def _get_int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        parsed = float(value)
    except ValueError:
        return default
    if parsed <= 0:
        return default
    return parsed


def _get_environment() -> str:
    value = (os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "development").strip().lower()
    if value not in ENVIRONMENTS:
        raise ValueError(f"APP_ENV/NODE_ENV must be one of {', '.join(ENVIRONMENTS)}: {value}")
    return value


@dataclass(frozen=True)
class Settings:
    port: int
    host: str
    environment: str
    log_level: str
    groq_api_key: str
    groq_api_url: str
    groq_model_id: str
    ai_chat_timeout_seconds: float
    site_origin: str
    static_dir: Path

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        port=_get_int_env("PORT", 3000),
        host=os.getenv("HOST", "0.0.0.0"),
        environment=_get_environment(),
        log_level=os.getenv("LOG_LEVEL", "info"),
        groq_api_key=os.getenv("GROQ_API_KEY", "").strip(),
        groq_api_url=os.getenv("GROQ_API_URL", DEFAULT_GROQ_API_URL),
        groq_model_id=os.getenv("GROQ_MODEL_ID", DEFAULT_GROQ_MODEL_ID),
        ai_chat_timeout_seconds=_get_float_env("AI_CHAT_TIMEOUT_SECONDS", 8.0),
        site_origin=os.getenv("SITE_ORIGIN", DEFAULT_SITE_ORIGIN).rstrip("/"),
        static_dir=Path(os.getenv("STATIC_DIR", "public")).resolve(),
    )
