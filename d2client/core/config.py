"""
Centralised client settings loaded from environment / .env file.
"""
from __future__ import annotations

from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load .env from project root (two levels up from this file)
_ENV_PATH = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(_ENV_PATH)


class Settings(BaseSettings):
    # ── Server ───────────────────────────────────────────
    dhis2_base_url: str = "http://localhost:8080"
    dhis2_api_version: int | None = None
    dhis2_username: str = "admin"
    dhis2_password: str = "district"

    # ── Client ───────────────────────────────────────────
    http_timeout: float = 30.0
    log_level: str = "INFO"

    @property
    def api_url(self) -> str:
        base = f"{self.dhis2_base_url.rstrip('/')}/api"
        if self.dhis2_api_version:
            return f"{base}/{self.dhis2_api_version}"
        return base

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()
