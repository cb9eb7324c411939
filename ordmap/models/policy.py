"""
ElementPolicy and comparators: the caller-supplied behavior of a map.
"""

import copy
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

# compare(a, b) < 0 if a sorts before b, 0 if equal, > 0 if after.
Comparator = Callable[[Any, Any], int]
CloneFunc = Callable[[Any], Any]
ReleaseFunc = Callable[[Any], None]


def natural_order(a: Any, b: Any) -> int:
    """Three-way comparison for keys supporting ``<``."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def reverse_order(a: Any, b: Any) -> int:
    return natural_order(b, a)


def _identity(element: Any) -> Any:
    return element


def _no_release(element: Any) -> None:
    return None


@dataclass(frozen=True)
class ElementPolicy:
    """
    Clone and release functions for keys and data.

    A clone function returns an independently owned copy of its argument,
    or None when the copy could not be made (raising MemoryError is treated
    the same way). A release function disposes of a value the map owned.

    Attributes:
        clone_key: Produces the map's own copy of a key.
        clone_data: Produces the map's own copy of a data element.
        release_key: Disposes of a key the map owned.
        release_data: Disposes of a data element the map owned.
    """

    clone_key: CloneFunc
    clone_data: CloneFunc
    release_key: ReleaseFunc
    release_data: ReleaseFunc

    @classmethod
    def by_reference(cls) -> "ElementPolicy":
        """Policy for immutable values: store them as-is, release nothing."""
        return cls(
            clone_key=_identity,
            clone_data=_identity,
            release_key=_no_release,
            release_data=_no_release,
        )

    @classmethod
    def deep(cls) -> "ElementPolicy":
        """Policy storing deep copies of mutable keys and data."""
        return cls(
            clone_key=copy.deepcopy,
            clone_data=copy.deepcopy,
            release_key=_no_release,
            release_data=_no_release,
        )

    def missing(self) -> list[str]:
        """Names of the functions that are None."""
        return [
            name
            for name in ("clone_key", "clone_data", "release_key", "release_data")
            if getattr(self, name) is None
        ]
