"""
Cursor - forward-only position in an OrderedMap's chain.
"""

from typing import TYPE_CHECKING, Any

from ordmap.models.entry import Entry

if TYPE_CHECKING:
    from ordmap.models.sortedcontainers.ordered_map import OrderedMap


class Cursor:
    """
    Single forward-only iteration position over an OrderedMap.

    The cursor records the map's generation when it is positioned. Every
    mutation of the map bumps the generation, after which the cursor is
    invalid: next() returns None until first() is called again. The cursor
    never owns the entry it points at.
    """

    def __init__(self, owner: "OrderedMap") -> None:
        self._owner = owner
        self._entry: Entry | None = None
        self._generation = -1

    @property
    def is_valid(self) -> bool:
        return self._entry is not None and self._generation == self._owner.generation

    def reset(self) -> None:
        """Unset the cursor."""
        self._entry = None
        self._generation = -1

    def first(self) -> Any | None:
        """
        Position the cursor at the smallest key.

        Returns:
            The smallest key (not a copy), or None if the map is empty. An
            empty map leaves the cursor unset.
        """
        head = self._owner.head.next
        if head is None:
            self.reset()
            return None
        self._entry = head
        self._generation = self._owner.generation
        return head.key

    def next(self) -> Any | None:
        """
        Advance to the following key.

        Returns:
            The next key, or None if the cursor is unset, was invalidated by a
            mutation, or already sits on the last entry. Reaching the end does
            not move the cursor, so repeated calls keep returning None.
        """
        if not self.is_valid:
            self.reset()
            return None
        successor = self._entry.next
        if successor is None:
            return None
        self._entry = successor
        return successor.key

    def __repr__(self) -> str:
        position = repr(self._entry.key) if self.is_valid else "unset"
        return f"Cursor({position})"
