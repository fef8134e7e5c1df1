from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file explicitly
ENV_FILE_NAME = ".env"
env_path = Path(__file__).parent.parent.parent / ENV_FILE_NAME
load_dotenv(env_path, override=False)


class Settings(BaseSettings):
    APP_LOCALE: str = "en"
    FALLBACK_LOCALE: Optional[str] = "en"  # None disables fallback
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/translatable.db"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False

    @field_validator("FALLBACK_LOCALE", mode="before")
    @classmethod
    def parse_fallback_locale(cls, v):  # type: ignore
        # An empty value in the environment means "no fallback"
        if v is None:
            return None
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("APP_LOCALE", mode="before")
    @classmethod
    def parse_app_locale(cls, v):  # type: ignore
        if not v:
            return "en"
        return str(v).strip()

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def parse_log_level(cls, v):  # type: ignore
        return str(v or "INFO").upper()

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings(
    APP_LOCALE=os.getenv("APP_LOCALE", "en"),
    FALLBACK_LOCALE=os.getenv("FALLBACK_LOCALE", "en"),
    DATABASE_URL=os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./data/translatable.db"),
    LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
    LOG_TO_FILE=os.getenv("LOG_TO_FILE", "false"),
)
