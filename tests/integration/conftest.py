"""Integration test fixtures — a real Redis server."""

from __future__ import annotations

import os

import pytest
import redis

from uamatch.core.config import AppSettings, PatternCacheConfig, RedisConfig

# Default Redis endpoint
REDIS_HOST = os.environ.get("UAMATCH_REDIS_HOST", "localhost")
REDIS_PORT = int(os.environ.get("UAMATCH_REDIS_PORT", "6379"))
REDIS_DB = 15
NAMESPACE = "uamatch-inttest"


def _redis_available() -> bool:
    """Check if Redis is reachable."""
    try:
        return bool(redis.Redis(host=REDIS_HOST, port=REDIS_PORT, db=REDIS_DB).ping())
    except Exception:
        return False


skip_no_redis = pytest.mark.skipif(
    not _redis_available(),
    reason="Redis not available",
)


@pytest.fixture
def redis_settings():
    """Settings pointing at the integration database, flushed afterwards."""
    settings = AppSettings(
        redis=RedisConfig(host=REDIS_HOST, port=REDIS_PORT, db=REDIS_DB),
        cache=PatternCacheConfig(namespace=NAMESPACE),
    )
    yield settings
    client = redis.Redis(host=REDIS_HOST, port=REDIS_PORT, db=REDIS_DB)
    for key in client.scan_iter(f"{NAMESPACE}:*"):
        client.delete(key)
