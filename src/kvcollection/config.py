"""Configuration using Pydantic settings.

Configuration is loaded from:
1. Environment variables (KVCOLLECTION_* prefix)
2. .env file in current directory
3. Default values
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class KvCollectionConfig(BaseSettings):
    """Configuration for the kvcollection CLI.

    Environment variables are prefixed with KVCOLLECTION_.
    """

    model_config = SettingsConfigDict(
        env_prefix="KVCOLLECTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False
    log_level: str = "WARNING"

    # JSON output; 0 means compact
    json_indent: int = Field(default=2, ge=0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            msg = f"Invalid log level: {v}. Must be one of {valid_levels}"
            raise ValueError(msg)
        return upper

    @property
    def effective_log_level(self) -> int:
        """Numeric log level, DEBUG when debug mode is on."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache
def get_config() -> KvCollectionConfig:
    """Get the global configuration.

    Configuration is cached after first load.
    """
    return KvCollectionConfig()


def clear_config_cache() -> None:
    """Clear the configuration cache (for testing)."""
    get_config.cache_clear()
