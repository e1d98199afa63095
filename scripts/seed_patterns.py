"""Seed the Redis pattern cache from a plain pattern list.

The input holds one pattern per line; blank lines and lines starting with
``#`` or ``;`` are ignored, and ini section headers (``[Mozilla/5.0*]``)
are unwrapped.

Usage:
    python scripts/seed_patterns.py patterns.txt --version 6000040
"""

from __future__ import annotations

import argparse
from pathlib import Path

from uamatch.core.config import AppSettings
from uamatch.core.logging import configure_logging
from uamatch.persistence import create_persistence
from uamatch.persistence.pattern_cache import PatternCache
from uamatch.persistence.pattern_writer import PatternShardWriter


def load_patterns(path: Path) -> list[str]:
    """Read patterns from ``path``, unwrapping ``[section]`` headers."""
    patterns: list[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line[0] in "#;":
            continue
        if line.startswith("[") and line.endswith("]"):
            line = line[1:-1]
        patterns.append(line)
    return patterns


def seed_patterns(cache: PatternCache, patterns: list[str], version: str | None = None) -> dict[str, int]:
    """Write all pattern shards and return entry counts per shard."""
    counts = PatternShardWriter(cache).write(patterns, version=version)
    print(f"  Seeded {sum(counts.values())} entries into {len(counts)} shards")
    return counts


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the uamatch pattern cache")
    parser.add_argument("patterns", type=Path, help="File with one pattern per line")
    parser.add_argument("--version", default=None, help="Data version used to scope shard keys")
    parser.add_argument("--redis-host", default=None, help="Redis host (overrides UAMATCH_REDIS_HOST)")
    parser.add_argument("--redis-port", type=int, default=None, help="Redis port")
    parser.add_argument("--redis-db", type=int, default=None, help="Redis database number")
    args = parser.parse_args()

    settings = AppSettings()
    if args.redis_host:
        settings.redis.host = args.redis_host
    if args.redis_port is not None:
        settings.redis.port = args.redis_port
    if args.redis_db is not None:
        settings.redis.db = args.redis_db
    configure_logging(settings)

    _, cache = create_persistence(settings)

    print("Loading patterns...")
    patterns = load_patterns(args.patterns)
    print(f"  Loaded {len(patterns)} patterns")

    print("Seeding cache...")
    seed_patterns(cache, patterns, version=args.version)

    print("Done!")


if __name__ == "__main__":
    main()
