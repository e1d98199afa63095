"""Protocol interfaces for all uamatch abstractions.

Collaborators are wired by constructor injection and typed against these
Protocols: structural typing, no inheritance required, easy to swap for
fakes in tests.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Pattern lookup collaborators
# ---------------------------------------------------------------------------

@runtime_checkable
class IPrefixGenerator(Protocol):
    """Turns a user agent into candidate prefixes, most specific first."""

    def generate(self, user_agent: str, variants: bool = False) -> list[str]: ...


@runtime_checkable
class IShardKeyDeriver(Protocol):
    """Maps a prefix to the shard key of the cache entry that holds it."""

    def derive(self, prefix: str) -> str: ...


@runtime_checkable
class IPatternCache(Protocol):
    """Versioned cache facade holding the pattern shards."""

    def exists(self, key: str, scoped: bool = True) -> bool: ...

    def fetch(self, key: str, scoped: bool = True) -> tuple[Any, bool]: ...

    def store(self, key: str, content: Any, scoped: bool = True) -> None: ...

    def delete(self, key: str, scoped: bool = True) -> None: ...


@runtime_checkable
class IPatternSource(Protocol):
    """Streams candidate pattern data for a user agent."""

    def get_patterns(self, user_agent: str) -> Any: ...


# ---------------------------------------------------------------------------
# Persistence: Cache Backend
# ---------------------------------------------------------------------------

@runtime_checkable
class ICacheBackend(Protocol):
    """Redis-compatible cache interface."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def exists(self, key: str) -> bool: ...

    def delete(self, key: str) -> None: ...
