"""
MapResult - outcome of the container's mutating operations.
"""

from enum import IntEnum


class MapResult(IntEnum):
    """Outcome reported by put, remove and clear."""

    SUCCESS = 0
    NULL_ARGUMENT = 1  # A required argument was None
    OUT_OF_MEMORY = 2  # A clone failed; the container is unchanged
    ITEM_NOT_FOUND = 3  # The key is not in the map; the container is unchanged

    def is_success(self) -> bool:
        return self == MapResult.SUCCESS
