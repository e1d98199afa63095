"""Prefix hashing and shard key derivation for the pattern cache.

A prefix is the MD5 hex digest of the leading literal part of a user agent
(or of a stored pattern). Patterns are filed under the hash of everything
before their first wildcard, so a user agent can find them by hashing each
of its own leading slices, longest first.
"""

from __future__ import annotations

import hashlib
import re

#: Catch-all bucket, probed after every generated prefix.
DEFAULT_PREFIX = "z" * 32

#: Only this many leading bytes take part in hashing.
HASH_WINDOW = 32

_LEADING_LITERAL = re.compile(rb"^([^.*?\s\\]+).*$")
_HEX_DIGITS = "0123456789abcdef"


def _md5(data: bytes) -> str:
    return hashlib.md5(data).hexdigest()


EMPTY_HASH = _md5(b"")


class PatternHasher:
    """IPrefixGenerator computing MD5 prefixes from the leading literal run."""

    def generate(self, user_agent: str, variants: bool = False) -> list[str]:
        """Return candidate prefixes for ``user_agent``.

        With ``variants`` the list holds one hash per leading slice of the
        literal run, longest first, and ends with the hash of the empty
        string so patterns starting with a wildcard are found too. Without
        it the list holds the single hash of the whole run.
        """
        run = self._leading_literal(user_agent)
        if run is None:
            return [EMPTY_HASH]

        if not variants:
            return [_md5(run)]

        starts = [_md5(run[:i]) for i in range(len(run), 0, -1)]
        starts.append(EMPTY_HASH)
        return starts

    def hash_for_pattern(self, pattern: str) -> str:
        """Hash a stored pattern the way it will be looked up."""
        run = self._leading_literal(pattern)
        return EMPTY_HASH if run is None else _md5(run)

    @staticmethod
    def pattern_length(pattern: str) -> int:
        """Length of a pattern ignoring its ``*`` wildcards."""
        return len(pattern.replace("*", ""))

    @staticmethod
    def _leading_literal(value: str) -> bytes | None:
        window = value.encode("utf-8")[:HASH_WINDOW]
        match = _LEADING_LITERAL.match(window)
        if match is None:
            return None
        return match.group(1)


class SubKeyDeriver:
    """IShardKeyDeriver using the first two characters of the prefix."""

    def derive(self, prefix: str) -> str:
        if len(prefix) < 2:
            raise ValueError(f"prefix too short to derive a shard key: {prefix!r}")
        return prefix[:2]

    @staticmethod
    def all_subkeys() -> list[str]:
        """Every shard key a hex prefix or DEFAULT_PREFIX can produce."""
        keys = [a + b for a in _HEX_DIGITS for b in _HEX_DIGITS]
        keys.append(DEFAULT_PREFIX[:2])
        return keys
