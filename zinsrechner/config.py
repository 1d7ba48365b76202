from __future__ import annotations

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ZINSRECHNER_",
        extra="ignore",
    )

    # Frontend dev servers allowed to call /api/*
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    LOCALE: str = "de"  # de|en
    LOG_LEVEL: str = "INFO"

    # Scenario the form opens with
    DEFAULT_INITIAL_CAPITAL: float = 10000.0
    DEFAULT_MONTHLY_CONTRIBUTION: float = 250.0
    DEFAULT_YEARS: int = 30
    DEFAULT_INTEREST_RATE: float = 8.6

    @property
    def locale(self) -> str:
        locale = (self.LOCALE or "de").strip().lower()
        return locale if locale in ("de", "en") else "de"

    @property
    def log_level(self) -> str:
        return (self.LOG_LEVEL or "INFO").strip().upper()


def load_settings() -> Settings:
    return Settings()
