"""
Procedural surface over OrderedMap.

Every function accepts None in place of the map and answers with the
documented value for an absent map instead of raising.
"""

import logging
from typing import Any

from ordmap.models.exceptions import NullArgumentError
from ordmap.models.policy import CloneFunc, Comparator, ElementPolicy, ReleaseFunc
from ordmap.models.result import MapResult
from ordmap.models.sortedcontainers import OrderedMap

logger = logging.getLogger(__name__)


def map_create(
    clone_data: CloneFunc,
    clone_key: CloneFunc,
    release_data: ReleaseFunc,
    release_key: ReleaseFunc,
    compare: Comparator,
) -> OrderedMap | None:
    """
    Create an empty map.

    Args:
        clone_data: Copies a data element, returning None on failure.
        clone_key: Copies a key, returning None on failure.
        release_data: Disposes of a data element owned by the map.
        release_key: Disposes of a key owned by the map.
        compare: Three-way comparator over keys.

    Returns:
        The new map, or None if any function is missing or allocation failed.
    """
    policy = ElementPolicy(
        clone_key=clone_key,
        clone_data=clone_data,
        release_key=release_key,
        release_data=release_data,
    )
    try:
        m = OrderedMap(policy, compare)
    except NullArgumentError as e:
        logger.warning(f"map_create rejected: {e}")
        return None
    except MemoryError:
        logger.warning("map_create failed: out of memory")
        return None
    logger.debug("Created map")
    return m


def map_destroy(m: OrderedMap | None) -> None:
    if m is None:
        return
    m.destroy()


def map_copy(m: OrderedMap | None) -> OrderedMap | None:
    if m is None:
        return None
    return m.copy()


def map_size(m: OrderedMap | None) -> int:
    """Number of entries, or -1 for an absent map."""
    if m is None:
        return -1
    return m.size()


def map_contains(m: OrderedMap | None, key: Any) -> bool:
    if m is None:
        return False
    return m.contains(key)


def map_put(m: OrderedMap | None, key: Any, data: Any) -> MapResult:
    if m is None:
        return MapResult.NULL_ARGUMENT
    return m.put(key, data)


def map_get(m: OrderedMap | None, key: Any) -> Any | None:
    if m is None:
        return None
    return m.get(key)


def map_remove(m: OrderedMap | None, key: Any) -> MapResult:
    if m is None:
        return MapResult.NULL_ARGUMENT
    return m.remove(key)


def map_first(m: OrderedMap | None) -> Any | None:
    if m is None:
        return None
    return m.first()


def map_next(m: OrderedMap | None) -> Any | None:
    if m is None:
        return None
    return m.next()


def map_clear(m: OrderedMap | None) -> MapResult:
    if m is None:
        return MapResult.NULL_ARGUMENT
    return m.clear()
