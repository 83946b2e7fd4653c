# src/neighborfit/adapters/config.py
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # -----------------------------
    # Matching
    # -----------------------------
    MATCH_LIMIT: int = Field(default=10)

    # If true, bad catalog entries (no job hubs) are logged and skipped
    # instead of failing the whole matching run.
    SKIP_INVALID_NEIGHBORHOODS: bool = Field(default=True)

    # -----------------------------
    # Catalog
    # -----------------------------
    SEED_CATALOG: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_prefix="NEIGHBORFIT_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("MATCH_LIMIT", mode="before")
    @classmethod
    def _limit_positive(cls, v: Any) -> Any:
        n = int(v)
        if n <= 0:
            raise ValueError("MATCH_LIMIT must be > 0")
        return n

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return str(v).strip().upper()


config = AppConfig()
