"""
Entry - a link of the ordered chain.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Entry:
    """
    Node in the ordered chain.

    The entry owns its key and data (clones made at insertion time) and its
    successor. The sentinel at the head of a chain is an Entry with no key
    and no data.
    """

    key: Any = None
    data: Any = None
    next: "Entry | None" = None

    @classmethod
    def sentinel(cls) -> "Entry":
        return cls()

    def unlink_next(self) -> "Entry":
        """Detach and return the successor, splicing its own successor in."""
        removed = self.next
        self.next = removed.next
        removed.next = None
        return removed

    def link_after(self, prev: "Entry") -> None:
        """Splice this entry immediately after ``prev``."""
        self.next = prev.next
        prev.next = self
