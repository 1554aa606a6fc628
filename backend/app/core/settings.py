from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    DATABASE_URL: str | None = None
    log_level: str | int | None = Field(
        default=None, description="Python logging level"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def _empty_database_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            s = v.strip()
            if s == "":
                return None
            return s
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _norm_log_level(cls, v: Any) -> Any:
        if v is None:
            return None
        s = str(v).strip()
        if s == "":
            return None
        if s.isdigit():
            return int(s)
        return s.upper()


settings = Settings()


__all__ = ["Settings", "settings"]
