"""
RangeIterable protocol for containers that iterate their entries in key order.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class RangeIterable(ABC):
    """
    Protocol for data structures that support iteration over a range of keys.

    Implementations must support:
    - Full iteration via __iter__ (keys, in ascending order)
    - Range-bounded iteration over (key, data) pairs via iterator(start, end)
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all keys in ascending order."""
        pass

    @abstractmethod
    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        """
        Return an iterator over key-data pairs in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.

        Returns:
            Iterator yielding (key, data) tuples in ascending key order.
        """
        pass
