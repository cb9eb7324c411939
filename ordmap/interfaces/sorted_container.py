"""
SortedContainer abstract base class for ordered key-data containers.
"""

from abc import abstractmethod
from typing import Any

from ordmap.interfaces.range_iterable import RangeIterable
from ordmap.models.result import MapResult


class SortedContainer(RangeIterable):
    """
    Abstract base class for ordered key-data containers.

    Keys are unique and kept in ascending order under the container's
    comparator. Mutating operations report their outcome as a MapResult
    instead of raising.

    Implementations:
    - OrderedMap: singly linked chain anchored by a sentinel, O(N) lookup
    """

    @abstractmethod
    def put(self, key: Any, data: Any) -> MapResult:
        """
        Insert a key with its data, or replace the data of an existing key.

        Args:
            key: The key to insert/update.
            data: The data to associate with the key.

        Returns:
            SUCCESS, NULL_ARGUMENT or OUT_OF_MEMORY.
        """
        pass

    @abstractmethod
    def get(self, key: Any) -> Any | None:
        """
        Retrieve the stored data for a given key.

        Args:
            key: The key to look up.

        Returns:
            The stored data (not a copy) if found, None otherwise.
        """
        pass

    @abstractmethod
    def remove(self, key: Any) -> MapResult:
        """
        Remove a key and its data.

        Args:
            key: The key to remove.

        Returns:
            SUCCESS, NULL_ARGUMENT or ITEM_NOT_FOUND.
        """
        pass

    @abstractmethod
    def contains(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise (including a None key).
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of entries.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def clear(self) -> MapResult:
        """Release every entry, keeping the container usable."""
        pass

    @abstractmethod
    def copy(self) -> "SortedContainer | None":
        """Return a deep copy, or None if a clone failed."""
        pass

    @abstractmethod
    def first(self) -> Any | None:
        """Move the container's cursor to the smallest key and return it."""
        pass

    @abstractmethod
    def next(self) -> Any | None:
        """Advance the container's cursor and return the key it lands on."""
        pass
