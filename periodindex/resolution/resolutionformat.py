"""Kind Registry and Erased Formatting
------------------------------------

Maps a kind tag (the value of a period kind's name(), e.g. "Day" or
"Minutes[Length:5]") to the class implementing it, so a bare
(tag, monotonic index) pair can be formatted or rebuilt without knowing the
concrete kind in advance.

Each period-kind module registers its classes at import time.

Examples:
    >>> format_erased_resolution("Day", 738156)
    'Day:2021-01-01'

    >>> format_erased_resolution("Minutes[Length:60]", 447072)
    'Hour:2021-01-01 00:00 => 2021-01-01 00:59'

    >>> resolution_for("Month").from_monotonic(24252)
    Month(24252)
"""

import logging
from typing import Callable, Dict, Optional, Tuple, Type

logger = logging.getLogger(__name__)

# tag -> (class, display label)
_REGISTRY: Dict[str, Tuple[type, str]] = {}


def register_resolution(cls: type, label: Optional[str] = None) -> None:
    """
    Register a period kind under its kind tag.

    Registering the same class again only updates its display label.

    Args:
        cls: Concrete period kind (TimeResolution subclass)
        label: Display label used by format_erased_resolution
            (defaults to the kind tag)

    Raises:
        ValueError: If a different class is already registered under the tag
    """
    tag = cls.kind_name()
    existing = _REGISTRY.get(tag)
    if existing is not None and existing[0] is not cls:
        raise ValueError(
            f"Kind tag {tag!r} is already registered to {existing[0].__name__}"
        )
    if existing is not None and label is None:
        return
    _REGISTRY[tag] = (cls, label or tag)
    logger.debug(f"Registered period kind {tag!r} as {label or tag!r}")


def resolution_for(tag: str) -> Type:
    """
    Look up a registered period kind.

    Raises:
        KeyError: If no kind is registered under the tag
    """
    try:
        return _REGISTRY[tag][0]
    except KeyError:
        raise KeyError(f"Unknown period kind: {tag!r}") from None


def registered_resolutions() -> Dict[str, Type]:
    """Snapshot of tag -> class for every registered kind."""
    return {tag: entry[0] for tag, entry in _REGISTRY.items()}


def format_erased_resolution(
    tag: str,
    index: int,
    handle_unknown: Optional[Callable[[str, int], str]] = None,
) -> str:
    """
    Format a (kind tag, monotonic index) pair as '{label}:{period}'.

    Args:
        tag: Kind tag
        index: Monotonic index within that kind
        handle_unknown: Called with (tag, index) for unregistered tags

    Returns:
        Display string

    Raises:
        KeyError: If the tag is unknown and no handle_unknown is given
    """
    entry = _REGISTRY.get(tag)
    if entry is None:
        if handle_unknown is not None:
            return handle_unknown(tag, index)
        raise KeyError(f"Unknown period kind: {tag!r}")
    cls, label = entry
    return f"{label}:{cls.from_monotonic(index)}"


def parse_resolution(tag: str, text: str):
    """Parse text as a period of the kind registered under tag."""
    return resolution_for(tag).parse(text)


__all__ = [
    "register_resolution",
    "resolution_for",
    "registered_resolutions",
    "format_erased_resolution",
    "parse_resolution",
]
