"""Builds the sharded pattern buckets read by PatternRetriever."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable

from uamatch.core.types import Bucket, Prefix, ShardKey
from uamatch.patterns.bucket import SEPARATOR, format_entry
from uamatch.patterns.hashing import DEFAULT_PREFIX, PatternHasher, SubKeyDeriver
from uamatch.patterns.retriever import PATTERN_KEY_PREFIX
from uamatch.persistence.pattern_cache import PatternCache

logger = logging.getLogger(__name__)

# Ini sections that describe the data set rather than a browser.
SKIPPED_SECTIONS = frozenset({"GJK_Browscap_Version", "DefaultProperties"})


class PatternShardWriter:
    """Groups patterns by prefix and stores one bucket per shard key."""

    def __init__(self, cache: PatternCache, hasher: PatternHasher | None = None,
                 subkeys: SubKeyDeriver | None = None) -> None:
        self._cache = cache
        self._hasher = hasher or PatternHasher()
        self._subkeys = subkeys or SubKeyDeriver()

    def build_buckets(self, patterns: Iterable[str]) -> dict[ShardKey, Bucket]:
        """Return shard key -> bucket entries for ``patterns``.

        Entries carry ``<length>\\t<pattern>[\\t<pattern>...]`` as payload,
        one entry per (prefix, length), longest patterns first.
        """
        grouped: dict[Prefix, dict[int, list[str]]] = defaultdict(lambda: defaultdict(list))

        for raw in patterns:
            pattern = raw.strip()
            if not pattern or pattern in SKIPPED_SECTIONS:
                continue

            length = self._hasher.pattern_length(pattern)
            if length == 0:
                prefix = DEFAULT_PREFIX
            else:
                prefix = self._hasher.hash_for_pattern(pattern)
            if pattern not in grouped[prefix][length]:
                grouped[prefix][length].append(pattern)

        buckets: dict[ShardKey, Bucket] = defaultdict(list)
        for prefix in sorted(grouped):
            by_length = grouped[prefix]
            for length in sorted(by_length, reverse=True):
                payload = SEPARATOR.join([str(length), *by_length[length]])
                buckets[self._subkeys.derive(prefix)].append(format_entry(prefix, payload))

        return dict(buckets)

    def write(self, patterns: Iterable[str], version: str | None = None) -> dict[ShardKey, int]:
        """Store all shards for ``patterns`` and drop shards left empty.

        Returns the number of entries written per shard key.
        """
        if version is not None:
            self._cache.set_version(version)

        buckets = self.build_buckets(patterns)
        for subkey, entries in buckets.items():
            self._cache.store(PATTERN_KEY_PREFIX + subkey, entries)
        for subkey in SubKeyDeriver.all_subkeys():
            if subkey not in buckets:
                self._cache.delete(PATTERN_KEY_PREFIX + subkey)

        logger.info(
            "wrote %d pattern entries into %d shards",
            sum(len(b) for b in buckets.values()), len(buckets),
        )
        return {subkey: len(entries) for subkey, entries in buckets.items()}
