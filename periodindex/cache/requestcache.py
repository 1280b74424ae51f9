"""Gap-Aware Request Cache
------------------------

Remembers which keys have been requested (resolved) and the data found for
them, and for a new request answers either:

  - CacheHit(data):  every requested key is resolved; data holds all cached
                     values whose keys lie between the smallest and largest
                     requested key
  - CacheMiss(gaps): the maximal runs of requested keys not yet resolved,
                     in ascending order

The cache never fetches anything. The caller fetches each gap, feeds the
result back with add(), and calls get() again:

    >>> cache = Cache.empty()
    >>> request = {1, 2, 3, 4}
    >>> cache.get(request)
    CacheMiss(gaps=[{1, 2, 3, 4}])
    >>> cache.add({1, 2, 3, 4}, {2: "b", 3: "c"})
    >>> cache.get(request)
    CacheHit(data={2: 'b', 3: 'c'})

A resolved key need not have data: "asked, nothing there" is remembered too.

Keys can be any ordered, hashable values (periods of one kind, or raw
monotonic indexes). There is no eviction and no internal locking; callers
sharing a cache across threads must serialize add() against get().
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Hashable, Iterable, List, Mapping, Optional, Set, TypeVar

import pandas as pd

from periodindex.utils.config import check_conflict_policy, get_cache_conflict_policy

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class CacheConflictError(ValueError):
    """New data for a key differs from the value already cached."""

    def __init__(self, key: Any, old: Any, new: Any):
        self.key = key
        self.old = old
        self.new = new
        super().__init__(
            f"Got new data for {key}: {new!r} different from data already in the cache {old!r}"
        )


@dataclass
class CacheHit(Generic[K, T]):
    """Every requested key is resolved. Data is sorted by key."""

    data: Dict[K, T] = field(default_factory=dict)

    @property
    def is_hit(self) -> bool:
        return True

    def to_series(self, name: Optional[str] = None) -> pd.Series:
        """Hit data as a pandas Series indexed by key."""
        return pd.Series(list(self.data.values()), index=list(self.data.keys()), name=name, dtype=object)


@dataclass
class CacheMiss(Generic[K]):
    """Some requested keys are unresolved. Gaps are maximal runs, ascending."""

    gaps: List[Set[K]] = field(default_factory=list)

    @property
    def is_hit(self) -> bool:
        return False


def missing_pieces(request: Iterable[K], requests: Set[K]) -> List[Set[K]]:
    """
    Maximal runs of requested keys not present in `requests`.

    Scans the request in ascending order. A run grows while keys are
    unresolved and closes at the first resolved key or at the end of the
    request. If the request itself is contiguous, every run is contiguous.
    No attempt is made to merge runs to reduce the number of fetches.

    Args:
        request: Keys being asked for
        requests: Keys already resolved

    Returns:
        List of gaps (sets of keys), in ascending order

    Example:
        >>> missing_pieces(range(1, 11), {2, 3, 7, 8})
        [{1}, {4, 5, 6}, {9, 10}]
    """
    gaps: List[Set[K]] = []
    current: Set[K] = set()

    for key in sorted(set(request)):
        if key not in requests:
            current.add(key)
        elif current:
            gaps.append(current)
            current = set()

    if current:
        gaps.append(current)

    return gaps


class Cache(Generic[K, T]):
    """
    Request/response cache keyed by period (or any ordered key).

    Args:
        on_conflict: What add() does when a key already holds a different
            value:
              - "overwrite": replace it silently (default)
              - "keep":      keep the cached value, drop the new one
              - "raise":     raise CacheConflictError, leaving the cache unchanged
            Defaults to PERIODINDEX_CACHE_CONFLICT, or "overwrite" if unset.
    """

    def __init__(self, on_conflict: Optional[str] = None):
        if on_conflict is None:
            on_conflict = get_cache_conflict_policy()
        self.on_conflict = check_conflict_policy(on_conflict)
        self._data: Dict[K, T] = {}
        self._requests: Set[K] = set()

    @classmethod
    def empty(cls, on_conflict: Optional[str] = None) -> "Cache[K, T]":
        """Cache with no resolved keys and no data."""
        return cls(on_conflict=on_conflict)

    # ---- Read side ----

    def get(self, request: Iterable[K]):
        """
        Answer a request from the cache.

        Args:
            request: Keys being asked for (any iterable; duplicates ignored)

        Returns:
            CacheHit with all cached data in [min(request), max(request)] when
            every requested key is resolved, otherwise CacheMiss with the gaps
        """
        request = set(request)
        if not request:
            return CacheHit({})

        if self._requests.issuperset(request):
            lo, hi = min(request), max(request)
            data = {k: self._data[k] for k in sorted(self._data) if lo <= k <= hi}
            logger.debug(f"Cache hit: {len(request)} keys, {len(data)} values")
            return CacheHit(data)

        gaps = missing_pieces(request, self._requests)
        logger.debug(f"Cache miss: {len(request)} keys, {len(gaps)} gaps")
        return CacheMiss(gaps)

    @property
    def requests(self) -> frozenset:
        """Resolved keys (read-only view)."""
        return frozenset(self._requests)

    @property
    def data(self) -> Dict[K, T]:
        """Cached data sorted by key (a copy)."""
        return {k: self._data[k] for k in sorted(self._data)}

    def __len__(self):
        return len(self._data)

    def __contains__(self, key) -> bool:
        return key in self._requests

    # ---- Write side ----

    def add(self, request_range: Iterable[K], data: Mapping[K, T]) -> None:
        """
        Record a fetched request and its data.

        Every key of request_range becomes resolved, whether or not data has a
        value for it. Keys of data are resolved as well. Calling add twice with
        the same arguments leaves the cache unchanged the second time.

        Raises:
            CacheConflictError: Under the "raise" policy, if any key already
                holds a different value (nothing is recorded in that case)
        """
        request_range = set(request_range)
        data = dict(data)

        if self.on_conflict == "raise":
            for key, value in data.items():
                if key in self._data and self._data[key] != value:
                    raise CacheConflictError(key, self._data[key], value)

        self._requests.update(request_range)
        # Keys that came back with data are resolved even if outside request_range
        self._requests.update(data)

        for key, value in data.items():
            if key in self._data and self._data[key] != value:
                if self.on_conflict == "keep":
                    logger.warning(
                        f"Keeping cached value for {key}: {self._data[key]!r}, dropping {value!r}"
                    )
                    continue
                logger.debug(f"Overwriting cached value for {key}: {self._data[key]!r} -> {value!r}")
            self._data[key] = value

    def __repr__(self):
        return (
            f"Cache(on_conflict={self.on_conflict!r}, "
            f"requests={len(self._requests)}, data={len(self._data)})"
        )


__all__ = [
    "Cache",
    "CacheHit",
    "CacheMiss",
    "CacheConflictError",
    "missing_pieces",
]
