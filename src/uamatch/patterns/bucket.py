"""Bucket entry encoding shared with whatever populates the pattern cache.

Each entry of a shard is ``<prefix>\\t<payload>``. Only the first tab
separates; the payload may contain further tabs.
"""

from __future__ import annotations

from typing import Any

from uamatch.core.exceptions import MalformedBucketError

SEPARATOR = "\t"

# Characters stripped from both ends of a payload.
TRIM_CHARS = " \t\n\r\0\x0b"


def format_entry(prefix: str, payload: str) -> str:
    return f"{prefix}{SEPARATOR}{payload}"


def split_entry(entry: str) -> tuple[str, str]:
    """Split an entry at its first tab into (prefix, trimmed payload)."""
    prefix, payload = entry.split(SEPARATOR, 1)
    return prefix, payload.strip(TRIM_CHARS)


def validate_bucket(key: str, value: Any) -> list[str]:
    """Return ``value`` as a bucket or raise MalformedBucketError.

    A bucket must be a non-empty list whose every entry is a string holding
    the tab separator and a non-empty trimmed payload, so an empty string
    is never yielded before the end of the stream. One bad entry rejects
    the whole bucket.
    """
    if not isinstance(value, list):
        raise MalformedBucketError(key, f"expected a list, got {type(value).__name__}")
    if not value:
        raise MalformedBucketError(key, "bucket is empty")

    for position, entry in enumerate(value):
        if not isinstance(entry, str):
            raise MalformedBucketError(
                key, f"entry {position} is {type(entry).__name__}, not str"
            )
        if SEPARATOR not in entry:
            raise MalformedBucketError(key, f"entry {position} has no tab separator")
        if not split_entry(entry)[1]:
            raise MalformedBucketError(key, f"entry {position} has an empty payload")

    return value
