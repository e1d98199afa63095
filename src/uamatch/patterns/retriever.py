"""Candidate pattern retrieval from the sharded pattern cache."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from uamatch.core.exceptions import MalformedBucketError
from uamatch.core.protocols import IPatternCache, IPrefixGenerator, IShardKeyDeriver
from uamatch.core.types import CacheKey, PatternData, Prefix, UserAgent
from uamatch.patterns.bucket import split_entry, validate_bucket
from uamatch.patterns.hashing import DEFAULT_PREFIX

PATTERN_KEY_PREFIX = "browscap.patterns."

#: Last element of every result stream.
END_OF_PATTERNS = ""


class PatternRetriever:
    """Streams the stored pattern data that could match a user agent.

    Prefixes from the generator are probed in the order given, then the
    default bucket. Missing, unreadable or malformed shards are skipped with
    a debug record. Cache exceptions propagate to the caller.
    """

    def __init__(
        self,
        *,
        prefix_generator: IPrefixGenerator,
        shard_key_deriver: IShardKeyDeriver,
        cache: IPatternCache,
        logger: logging.Logger | None = None,
    ) -> None:
        self._prefixes = prefix_generator
        self._subkeys = shard_key_deriver
        self._cache = cache
        self._log = logger if logger is not None else logging.getLogger(__name__)

    def get_patterns(self, user_agent: UserAgent) -> Iterator[PatternData]:
        """Yield pattern data for ``user_agent``, ending with ``""``.

        This is a generator: shards are fetched only as the consumer asks
        for more, so stopping early leaves the remaining shards untouched.
        """
        starts: list[Prefix] = list(self._prefixes.generate(user_agent, True))
        starts.append(DEFAULT_PREFIX)

        for start in starts:
            key: CacheKey = PATTERN_KEY_PREFIX + self._subkeys.derive(start)

            if not self._cache.exists(key, True):
                self._log.debug('cache key "%s" not found', key)
                continue

            value, success = self._cache.fetch(key, True)
            if not success:
                self._log.debug('cache key "%s" not found', key)
                continue

            try:
                bucket = validate_bucket(key, value)
            except MalformedBucketError as exc:
                self._log.debug("skipping bucket: %s", exc)
                continue

            for entry in bucket:
                stored_prefix, payload = split_entry(entry)
                if stored_prefix == start:
                    yield payload

        yield END_OF_PATTERNS
