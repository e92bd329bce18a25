"""Runtime configuration for the barangay console alert service."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration values mapped from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Barangay Console Alerts"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Backend liveness probe used when a connection error is re-checked
    api_base_url: str = "http://localhost:5000"
    health_check_path: str = "/api/health-check"
    health_check_timeout: float = Field(5.0, gt=0)

    # Gap after which a failed data refresh is still considered stale
    data_stale_minutes: int = Field(15, gt=0)

    # JSON file standing in for the browser's local storage; in-memory when unset
    storage_path: Optional[str] = None

    @property
    def health_check_url(self) -> str:
        return self.api_base_url.rstrip("/") + "/" + self.health_check_path.lstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()
