"""
OrderedMap - sorted key-data map over a singly linked chain.

Lookup is a linear scan that stops as soon as the target's position is
known, so every operation is O(N) in the worst case.
"""

import logging
from collections.abc import Iterator
from typing import Any

from ordmap.interfaces.sorted_container import SortedContainer
from ordmap.models.cursor import Cursor
from ordmap.models.entry import Entry
from ordmap.models.exceptions import MapDestroyedError, MapError, NullArgumentError
from ordmap.models.policy import CloneFunc, Comparator, ElementPolicy, natural_order
from ordmap.models.result import MapResult

logger = logging.getLogger(__name__)


class OrderedMap(SortedContainer):
    """
    Ordered map whose keys and data are owned copies made by an ElementPolicy.

    Properties maintained:
    1. Entries after the sentinel have strictly increasing keys under the
       comparator (a comparison of 0 means the same key)
    2. The entry count always equals the number of entries after the sentinel
    3. Every stored key and data element is a clone owned by the map and is
       released exactly once through the policy
    4. Any successful mutation invalidates the cursor and every outstanding
       iterator

    Failed operations leave the map exactly as it was before the call.
    """

    def __init__(self, policy: ElementPolicy, compare: Comparator = natural_order) -> None:
        """
        Initialize an empty map.

        Args:
            policy: Clone and release functions for keys and data.
            compare: Three-way comparator over keys.

        Raises:
            NullArgumentError: If the policy, any of its functions, or the
                comparator is None.
        """
        if policy is None:
            raise NullArgumentError("element policy is required")
        missing = policy.missing()
        if missing:
            raise NullArgumentError(f"element policy is missing {', '.join(missing)}")
        if compare is None:
            raise NullArgumentError("comparator is required")

        self._policy = policy
        self._compare = compare
        self._head: Entry | None = Entry.sentinel()
        self._size: int = 0
        self._generation: int = 0
        self._cursor = Cursor(self)

    @property
    def policy(self) -> ElementPolicy:
        return self._policy

    @property
    def comparator(self) -> Comparator:
        return self._compare

    @property
    def head(self) -> Entry:
        """The sentinel anchoring the chain."""
        self._check_alive()
        return self._head

    @property
    def generation(self) -> int:
        """Mutation counter; cursors positioned under an older value are stale."""
        return self._generation

    @property
    def is_destroyed(self) -> bool:
        return self._head is None

    def size(self) -> int:
        self._check_alive()
        return self._size

    def contains(self, key: Any) -> bool:
        if key is None:
            return False
        found, _ = self._find_prev(key)
        return found

    def get(self, key: Any) -> Any | None:
        if key is None:
            return None
        found, prev = self._find_prev(key)
        return prev.next.data if found else None

    def put(self, key: Any, data: Any) -> MapResult:
        """
        Insert or update. O(N)

        An existing key keeps its stored clone; only its data is replaced. The
        new data is cloned before the old one is released, so a failed clone
        leaves the previous data in place.
        """
        if key is None or data is None:
            return MapResult.NULL_ARGUMENT

        found, prev = self._find_prev(key)
        if found:
            entry = prev.next
            new_data = self._clone(self._policy.clone_data, data)
            if new_data is None:
                logger.warning(f"clone_data failed updating {entry.key!r}; previous data kept")
                return MapResult.OUT_OF_MEMORY
            old_data = entry.data
            entry.data = new_data
            self._invalidate()
            self._policy.release_data(old_data)
            return MapResult.SUCCESS

        entry = self._create_entry(key, data)
        if entry is None:
            return MapResult.OUT_OF_MEMORY
        entry.link_after(prev)
        self._size += 1
        self._invalidate()
        return MapResult.SUCCESS

    def remove(self, key: Any) -> MapResult:
        """Unlink the entry for ``key`` and release its key and data. O(N)"""
        if key is None:
            return MapResult.NULL_ARGUMENT

        found, prev = self._find_prev(key)
        if not found:
            return MapResult.ITEM_NOT_FOUND

        removed = prev.unlink_next()
        self._size -= 1
        self._invalidate()
        self._release_entry(removed)
        return MapResult.SUCCESS

    def clear(self) -> MapResult:
        """Release every entry; the sentinel and policy stay in place."""
        chain = self.head.next
        count = self._size
        self._head.next = None
        self._size = 0
        self._invalidate()
        self._release_chain(chain)
        logger.debug(f"Cleared {count} entries")
        return MapResult.SUCCESS

    def destroy(self) -> None:
        """Clear the map and drop its sentinel. Calling it again is a no-op."""
        if self._head is None:
            return
        self.clear()
        self._head = None
        self._cursor.reset()
        logger.debug("Destroyed map")

    def copy(self) -> "OrderedMap | None":
        """
        Deep copy sharing this map's policy and comparator.

        Entries are cloned in chain order onto the tail of the new chain, so
        nothing is re-sorted. If any clone fails the partial copy is destroyed
        and None is returned. On success the cursors of both maps are
        invalidated.

        Returns:
            The new map, or None if a clone failed.
        """
        source = self.head.next
        duplicate = OrderedMap(self._policy, self._compare)
        tail = duplicate._head

        try:
            while source is not None:
                entry = self._create_entry(source.key, source.data)
                if entry is None:
                    logger.warning(
                        f"Copy aborted after {duplicate._size} of {self._size} entries; "
                        "releasing partial copy"
                    )
                    duplicate.destroy()
                    return None
                tail.next = entry
                tail = entry
                duplicate._size += 1
                source = source.next
        except Exception:
            duplicate.destroy()
            raise

        self._invalidate()
        duplicate._invalidate()
        logger.debug(f"Copied map with {duplicate._size} entries")
        return duplicate

    def first(self) -> Any | None:
        self._check_alive()
        return self._cursor.first()

    def next(self) -> Any | None:
        self._check_alive()
        return self._cursor.next()

    def cursor(self) -> Cursor:
        """Return a new cursor, independent of the one used by first()/next()."""
        self._check_alive()
        return Cursor(self)

    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        return _RangeIterator(self, start, end)

    def keys(self) -> list[Any]:
        return [key for key, _ in self.iterator()]

    def values(self) -> list[Any]:
        return [data for _, data in self.iterator()]

    def items(self) -> list[tuple[Any, Any]]:
        return list(self.iterator())

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self.iterator())

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self.size() > 0

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __getitem__(self, key: Any) -> Any:
        if key is None:
            raise KeyError(key)
        found, prev = self._find_prev(key)
        if not found:
            raise KeyError(key)
        return prev.next.data

    def __setitem__(self, key: Any, data: Any) -> None:
        MapError.raise_for(self.put(key, data))

    def __delitem__(self, key: Any) -> None:
        result = self.remove(key)
        if result == MapResult.ITEM_NOT_FOUND:
            raise KeyError(key)
        MapError.raise_for(result)

    def __copy__(self) -> "OrderedMap":
        duplicate = self.copy()
        if duplicate is None:
            MapError.raise_for(MapResult.OUT_OF_MEMORY)
        return duplicate

    def __enter__(self) -> "OrderedMap":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.destroy()

    def __repr__(self) -> str:
        if self._head is None:
            return "OrderedMap(<destroyed>)"
        pairs = ", ".join(f"{key!r}: {data!r}" for key, data in self.iterator())
        return f"OrderedMap({{{pairs}}})"

    def _find_prev(self, key: Any) -> tuple[bool, Entry]:
        """
        Locate ``key`` or the point where it would be inserted.

        Returns:
            (found, prev) where prev is the entry just before the match if
            found, otherwise the entry after which ``key`` keeps the chain
            sorted (the sentinel for the smallest key, the tail for the
            largest).
        """
        prev = self.head
        while prev.next is not None:
            result = self._compare(key, prev.next.key)
            if result == 0:
                return True, prev
            if result < 0:
                return False, prev
            prev = prev.next
        return False, prev

    def _clone(self, clone: CloneFunc, element: Any) -> Any | None:
        """Run a clone function; None stands for a failed allocation."""
        try:
            return clone(element)
        except MemoryError:
            return None

    def _create_entry(self, key: Any, data: Any) -> Entry | None:
        """Clone a key-data pair into a detached entry, or None on failure."""
        new_key = self._clone(self._policy.clone_key, key)
        if new_key is None:
            logger.warning(f"clone_key failed for {key!r}")
            return None

        try:
            new_data = self._clone(self._policy.clone_data, data)
        except Exception:
            self._policy.release_key(new_key)
            raise
        if new_data is None:
            logger.warning(f"clone_data failed for {key!r}; releasing cloned key")
            self._policy.release_key(new_key)
            return None

        return Entry(key=new_key, data=new_data)

    def _release_entry(self, entry: Entry) -> None:
        self._policy.release_data(entry.data)
        self._policy.release_key(entry.key)
        entry.key = None
        entry.data = None

    def _release_chain(self, entry: Entry | None) -> None:
        while entry is not None:
            following = entry.next
            entry.next = None
            self._release_entry(entry)
            entry = following

    def _check_alive(self) -> None:
        if self._head is None:
            raise MapDestroyedError("map has been destroyed")

    def _invalidate(self) -> None:
        self._generation += 1
        self._cursor.reset()


class _RangeIterator(Iterator[tuple[Any, Any]]):
    """Iterator over the (key, data) pairs of an OrderedMap within [start, end)."""

    def __init__(self, owner: OrderedMap, start: Any | None, end: Any | None) -> None:
        self._owner = owner
        self._generation = owner.generation
        self._end = end
        self._entry = owner.head.next

        # Skip entries below start
        while (
            start is not None
            and self._entry is not None
            and owner.comparator(self._entry.key, start) < 0
        ):
            self._entry = self._entry.next

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self

    def __next__(self) -> tuple[Any, Any]:
        if self._owner.is_destroyed or self._owner.generation != self._generation:
            raise RuntimeError("OrderedMap changed during iteration")

        entry = self._entry
        if entry is None:
            raise StopIteration

        # Check end bound
        if self._end is not None and self._owner.comparator(entry.key, self._end) >= 0:
            self._entry = None
            raise StopIteration

        self._entry = entry.next
        return entry.key, entry.data
