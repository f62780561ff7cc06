"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Process settings only; store activation settings are read through
      ConfigurationProvider (core/configuration.py)
    - get_settings() is cached (lru_cache): single instance per process
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from B2B_GATE_* environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="B2B_GATE_", case_sensitive=False,
    )

    # Catalog snapshot consumed by the CLI and the HTTP service
    snapshot_path: str = "catalog_snapshot.json"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
