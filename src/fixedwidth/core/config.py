"""Decoder configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class CacheConfig(BaseSettings):
    """Resolved-schema cache configuration."""

    model_config = {"env_prefix": "FIXEDWIDTH_CACHE_"}

    enabled: bool = True


class LoggingConfig(BaseSettings):
    """structlog output configuration."""

    model_config = {"env_prefix": "FIXEDWIDTH_LOG_"}

    level: str = "WARNING"
    json_output: bool = False  # JSON lines instead of console rendering


class AppSettings(BaseSettings):
    """Root settings aggregating all sub-configs."""

    model_config = {"env_prefix": "FIXEDWIDTH_"}

    cache: CacheConfig = Field(default_factory=CacheConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
