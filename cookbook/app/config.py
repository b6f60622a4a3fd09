from __future__ import annotations

from functools import lru_cache

from pydantic import AnyUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=False,
        extra="ignore",
    )

    SUPABASE_URL: AnyUrl
    SUPABASE_SERVICE_ROLE_KEY: str
    APP_ENV: str = "local"
    FRONTEND_CORS_ORIGINS: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
    )

    # Admin access
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = Field(min_length=1)
    AUTH_SECRET_KEY: str = Field(min_length=1)
    AUTH_TOKEN_TTL_MINUTES: int = Field(default=720, ge=1)

    # Bootstrap
    RUN_MIGRATIONS: bool = True
    SEED_SAMPLE_CONTENT: bool = True

    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8000


@lru_cache
def get_settings() -> Settings:
    return Settings()
