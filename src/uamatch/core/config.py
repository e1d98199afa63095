"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class RedisConfig(BaseSettings):
    """Redis cache configuration."""

    model_config = {"env_prefix": "UAMATCH_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0


class PatternCacheConfig(BaseSettings):
    """Pattern cache key layout."""

    model_config = {"env_prefix": "UAMATCH_CACHE_"}

    namespace: str = "uamatch"
    version: str | None = None  # None: read "browscap.version" from the cache


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "UAMATCH_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    redis: RedisConfig = RedisConfig()
    cache: PatternCacheConfig = PatternCacheConfig()
