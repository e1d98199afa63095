"""uamatch exception hierarchy."""

from __future__ import annotations


class UAMatchError(Exception):
    """Base exception for all uamatch errors."""


class CacheError(UAMatchError):
    """Cache backend operation failed."""


class MalformedBucketError(UAMatchError):
    """A stored pattern bucket does not have the expected shape."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"cache key {key!r} holds a malformed bucket: {reason}")


class ConfigurationError(UAMatchError):
    """Settings cannot be turned into working components."""
