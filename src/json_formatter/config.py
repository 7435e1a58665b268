"""Configuration for the JSON Formatter service."""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from JSON_FORMATTER_* environment variables."""

    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="JSON_FORMATTER_")

    host: str = "127.0.0.1"
    port: int = 2022
    log_level: str = "INFO"

    default_indent: int = Field(default=2, ge=1, le=8)
    max_upload_bytes: int = Field(default=10 * 1024 * 1024, gt=0)
    expand_depth: int = Field(default=2, ge=0)

    history_enabled: bool = True
    # None keeps history in memory for the lifetime of the process
    history_path: Optional[str] = None

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])


@lru_cache
def get_settings() -> Settings:
    return Settings()
