"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from uamatch.core.config import AppSettings
from uamatch.patterns.hashing import PatternHasher, SubKeyDeriver
from uamatch.patterns.retriever import PatternRetriever
from uamatch.persistence.pattern_cache import PatternCache
from uamatch.persistence.redis_backend import RedisCacheBackend


def create_persistence(settings: AppSettings | None = None):
    """Create wired-up persistence backends from application settings.

    Returns:
        Tuple of (cache_backend, pattern_cache).
    """
    if settings is None:
        settings = AppSettings()

    backend = RedisCacheBackend(
        host=settings.redis.host,
        port=settings.redis.port,
        db=settings.redis.db,
    )

    pattern_cache = PatternCache(
        backend,
        namespace=settings.cache.namespace,
        version=settings.cache.version,
    )

    return backend, pattern_cache


def create_pattern_retriever(settings: AppSettings | None = None) -> PatternRetriever:
    """Create a PatternRetriever reading from the configured Redis cache."""
    _, pattern_cache = create_persistence(settings)
    return PatternRetriever(
        prefix_generator=PatternHasher(),
        shard_key_deriver=SubKeyDeriver(),
        cache=pattern_cache,
    )
