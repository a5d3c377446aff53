from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    database_url: str
    google_client_id: str
    google_client_secret: str
    google_issuer_url: str
    host_url: str
    oidc_timeout_seconds: float
    open_library_api_base: str
    open_library_timeout_seconds: float
    telegram_bot_token: str
    bot_database_url: str
    log_level: str
    api_host: str
    api_port: int


def get_settings() -> Settings:
    database_url = _env("DATABASE_URL", "")
    return Settings(
        database_url=database_url,
        google_client_id=_env("GOOGLE_CLIENT_ID", ""),
        google_client_secret=_env("GOOGLE_CLIENT_SECRET", ""),
        google_issuer_url=_env("GOOGLE_ISSUER_URL", "https://accounts.google.com"),
        host_url=_env("HOST_URL", "http://localhost:8000"),
        oidc_timeout_seconds=float(_env("OIDC_TIMEOUT_SECONDS", "10")),
        open_library_api_base=_env("OPEN_LIBRARY_API_BASE", "https://openlibrary.org"),
        open_library_timeout_seconds=float(_env("OPEN_LIBRARY_TIMEOUT_SECONDS", "10")),
        telegram_bot_token=_env("TELEGRAM_BOT_TOKEN", ""),
        bot_database_url=_env("BOT_DATABASE_URL", "") or database_url,
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        api_host=_env("API_HOST", "0.0.0.0"),
        api_port=int(_env("API_PORT", "8000")),
    )
