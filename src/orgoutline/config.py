"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `ORGOUTLINE_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """orgoutline settings.

    All fields are environment-configurable. Prefix is `ORGOUTLINE_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="ORGOUTLINE_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")

    # Source loading
    source_encoding: str = Field(default="utf-8")
    max_source_mb: int = Field(default=50, ge=1, le=1024)

    @property
    def max_source_bytes(self) -> int:
        return self.max_source_mb * 1024 * 1024


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("ORGOUTLINE_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
