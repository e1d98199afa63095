"""Type aliases used across uamatch."""

from __future__ import annotations

UserAgent = str
Prefix = str
ShardKey = str
CacheKey = str
BucketEntry = str
Bucket = list[BucketEntry]
PatternData = str
