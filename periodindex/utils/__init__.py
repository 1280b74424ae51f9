"""Shared utilities for the periodindex package."""

from periodindex.utils.config import (
    CONFLICT_POLICIES,
    check_conflict_policy,
    get_cache_conflict_policy,
    get_default_week_start,
)

__all__ = [
    # Configuration
    "CONFLICT_POLICIES",
    "check_conflict_policy",
    "get_cache_conflict_policy",
    "get_default_week_start",
]
