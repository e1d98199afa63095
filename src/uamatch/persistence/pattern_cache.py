"""Versioned cache facade over an ICacheBackend.

Values are wrapped in a JSON envelope tagged with the cache format version.
Scoped keys additionally carry the data version, so caches built from
different pattern sets never mix.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from uamatch.core.protocols import ICacheBackend

logger = logging.getLogger(__name__)

CACHE_FORMAT_VERSION = "2.0b"
VERSION_KEY = "browscap.version"


class PatternCache:
    """IPatternCache storing JSON envelopes in a Redis-compatible backend."""

    def __init__(self, backend: ICacheBackend, namespace: str = "uamatch",
                 version: str | None = None) -> None:
        self._backend = backend
        self._namespace = namespace
        self._version = version
        self._version_loaded = version is not None

    @property
    def version(self) -> str | None:
        """Data version, read from the cache at most once when not given."""
        if not self._version_loaded:
            self._version_loaded = True
            content, success = self.fetch(VERSION_KEY, scoped=False)
            if success and isinstance(content, (str, int)):
                self._version = str(content)
        return self._version

    def set_version(self, version: str) -> None:
        """Persist ``version`` and scope subsequent keys with it."""
        self.store(VERSION_KEY, version, scoped=False)
        self._version = version
        self._version_loaded = True

    def _key(self, key: str, scoped: bool) -> str:
        if scoped:
            version = self.version
            if version is not None:
                key = f"{key}.{version}"
        return f"{self._namespace}:{key}"

    def exists(self, key: str, scoped: bool = True) -> bool:
        return self._backend.exists(self._key(key, scoped))

    def fetch(self, key: str, scoped: bool = True) -> tuple[Any, bool]:
        """Return ``(content, success)``; missing or broken data is not an error."""
        full_key = self._key(key, scoped)
        raw = self._backend.get(full_key)
        if raw is None:
            return None, False

        try:
            envelope = json.loads(raw)
        except ValueError:
            logger.debug("cache key %r does not hold valid JSON", full_key)
            return None, False

        if not isinstance(envelope, dict) or "content" not in envelope:
            logger.debug("cache key %r has no content envelope", full_key)
            return None, False

        if envelope.get("cacheVersion") != CACHE_FORMAT_VERSION:
            logger.debug(
                "cache key %r has format version %r, expected %r",
                full_key, envelope.get("cacheVersion"), CACHE_FORMAT_VERSION,
            )
            return None, False

        return envelope["content"], True

    def store(self, key: str, content: Any, scoped: bool = True) -> None:
        envelope = {"cacheVersion": CACHE_FORMAT_VERSION, "content": content}
        self._backend.set(self._key(key, scoped), json.dumps(envelope))

    def delete(self, key: str, scoped: bool = True) -> None:
        self._backend.delete(self._key(key, scoped))
