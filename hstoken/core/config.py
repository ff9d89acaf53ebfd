from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "hstoken"
    app_version: str = "0.1.0"
    token_secret_key: str = "secret"
    token_expires_minutes: int = 15
    token_verify_exp: bool = True
    token_leeway_seconds: int = 0


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
