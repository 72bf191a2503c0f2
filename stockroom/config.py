"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden with a STOCKROOM_-prefixed environment variable
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: the demo session runs with no environment at all
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STOCKROOM_", env_file=".env", case_sensitive=False,
    )

    # Demo session
    seed_demo_data: bool = True
    echo_diagnostics: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"

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
