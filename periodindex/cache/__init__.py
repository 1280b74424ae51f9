"""Gap-aware request cache for period-keyed data."""

from periodindex.cache.requestcache import (
    Cache,
    CacheHit,
    CacheMiss,
    CacheConflictError,
    missing_pieces,
)

__all__ = [
    "Cache",
    "CacheHit",
    "CacheMiss",
    "CacheConflictError",
    "missing_pieces",
]
