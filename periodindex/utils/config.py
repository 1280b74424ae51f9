"""Environment configuration.

Settings are read from the environment on every call, so tests and
long-running processes pick up changes without reloading the package.

Variables:
    PERIODINDEX_CACHE_CONFLICT:     default Cache conflict policy
                                    ("overwrite", "keep" or "raise")
    PERIODINDEX_DEFAULT_WEEK_START: default Week start day (e.g. "Sunday")
"""

import os

CACHE_CONFLICT_ENV = "PERIODINDEX_CACHE_CONFLICT"
DEFAULT_WEEK_START_ENV = "PERIODINDEX_DEFAULT_WEEK_START"

CONFLICT_POLICIES = ("overwrite", "keep", "raise")


def check_conflict_policy(policy: str) -> str:
    """Validate and normalize a conflict policy name."""
    policy_norm = str(policy).strip().lower()
    if policy_norm not in CONFLICT_POLICIES:
        raise ValueError(
            f"Unknown cache conflict policy: {policy!r}. "
            f"Use one of: {', '.join(CONFLICT_POLICIES)}"
        )
    return policy_norm


def get_cache_conflict_policy() -> str:
    """
    Default conflict policy for new caches.

    Returns:
        PERIODINDEX_CACHE_CONFLICT if set, otherwise "overwrite"

    Raises:
        ValueError: If the environment holds an unknown policy
    """
    value = os.environ.get(CACHE_CONFLICT_ENV)
    if not value:
        return "overwrite"
    return check_conflict_policy(value)


def get_default_week_start() -> str:
    """Default week start day name (PERIODINDEX_DEFAULT_WEEK_START or "Monday")."""
    value = os.environ.get(DEFAULT_WEEK_START_ENV)
    if not value or not value.strip():
        return "Monday"
    return value.strip()


__all__ = [
    "CACHE_CONFLICT_ENV",
    "DEFAULT_WEEK_START_ENV",
    "CONFLICT_POLICIES",
    "check_conflict_policy",
    "get_cache_conflict_policy",
    "get_default_week_start",
]
