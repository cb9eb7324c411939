"""
Data models for the ordered map.
"""

from ordmap.models.result import MapResult
from ordmap.models.exceptions import (
    ItemNotFoundError,
    MapDestroyedError,
    MapError,
    NullArgumentError,
    OutOfMemoryError,
)
from ordmap.models.policy import Comparator, ElementPolicy, natural_order, reverse_order
from ordmap.models.entry import Entry
from ordmap.models.cursor import Cursor
from ordmap.models.sortedcontainers import OrderedMap

__all__ = [
    "MapResult",
    "MapError",
    "NullArgumentError",
    "OutOfMemoryError",
    "ItemNotFoundError",
    "MapDestroyedError",
    "Comparator",
    "ElementPolicy",
    "natural_order",
    "reverse_order",
    "Entry",
    "Cursor",
    "OrderedMap",
]
