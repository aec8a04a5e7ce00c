"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - api_prefix is empty or starts with "/", and never ends with one

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box locally
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # API
    api_prefix: str = "/api/v1"
    cors_origins: list[str] = ["http://localhost:5173"]

    @field_validator("api_prefix", mode="before")
    @classmethod
    def normalize_api_prefix(cls, v: str) -> str:
        """Accept "api/v1/" and friends; routers expect "/api/v1"."""
        if isinstance(v, str):
            v = v.strip("/")
            return f"/{v}" if v else ""
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
