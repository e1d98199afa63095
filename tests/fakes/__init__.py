"""Shared test doubles — re-export memory backend and scripted collaborators."""

from __future__ import annotations

from uamatch.persistence.memory_backend import MemoryCacheBackend
from tests.fakes.collaborators import (
    CountingBackend,
    FETCH_FAILS,
    IdentityShardKeyDeriver,
    RaisingPatternCache,
    RecordingPatternCache,
    StubPrefixGenerator,
)

__all__ = [
    "CountingBackend",
    "FETCH_FAILS",
    "IdentityShardKeyDeriver",
    "MemoryCacheBackend",
    "RaisingPatternCache",
    "RecordingPatternCache",
    "StubPrefixGenerator",
]
