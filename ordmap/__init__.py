"""
Generic ordered key-data map.

This package provides a sorted map whose key and data handling is supplied
by the caller:
- put(key, data) - insert, or replace the data of an existing key
- get(key) / contains(key) - lookup
- remove(key) - delete one entry
- first() / next() - cursor iteration in ascending key order
- copy() / clear() / destroy() - whole-map operations
"""

from ordmap.models import (
    Cursor,
    ElementPolicy,
    ItemNotFoundError,
    MapDestroyedError,
    MapError,
    MapResult,
    NullArgumentError,
    OrderedMap,
    OutOfMemoryError,
    natural_order,
    reverse_order,
)
from ordmap.api import (
    map_clear,
    map_contains,
    map_copy,
    map_create,
    map_destroy,
    map_first,
    map_get,
    map_next,
    map_put,
    map_remove,
    map_size,
)

__all__ = [
    "OrderedMap",
    "Cursor",
    "ElementPolicy",
    "MapResult",
    "MapError",
    "NullArgumentError",
    "OutOfMemoryError",
    "ItemNotFoundError",
    "MapDestroyedError",
    "natural_order",
    "reverse_order",
    "map_create",
    "map_destroy",
    "map_copy",
    "map_size",
    "map_contains",
    "map_put",
    "map_get",
    "map_remove",
    "map_first",
    "map_next",
    "map_clear",
]
