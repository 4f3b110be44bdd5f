"""Configuration loaded from the environment (and ``.env``) via pydantic-settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE = "https://api.rollbar.com/api/1"
DEFAULT_TIMEOUT = 30.0  # seconds


class Settings(BaseSettings):
    """All rollbar-cli configuration. Every field reads ``ROLLBAR_<NAME>``."""

    model_config = SettingsConfigDict(
        env_prefix="ROLLBAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "rollbar-cli"

    # --- Rollbar API ---
    read_token: str = Field(default="", description="Project access token with read scope")
    api_base: str = Field(default=DEFAULT_API_BASE, description="Rollbar REST API base URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Request timeout (seconds)")

    # --- Logging ---
    log_level: str = Field(default="WARNING", description="Log level")
    log_format: str = Field(
        default="console",
        description="Log format: 'console' for humans, 'json' for machines",
    )

    @property
    def masked_token(self) -> str:
        """Token with everything but the last four characters hidden."""
        if not self.read_token:
            return "(not set)"
        if len(self.read_token) <= 4:
            return "*" * len(self.read_token)
        return "*" * (len(self.read_token) - 4) + self.read_token[-4:]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once on first use."""
    return Settings()
