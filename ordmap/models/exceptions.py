"""
Custom exceptions for the ordered map.
"""

from ordmap.models.result import MapResult


class MapError(Exception):
    """
    Base error carrying the MapResult it stands for.

    Result-returning operations never raise these; they are raised by the
    Python protocol methods (``m[k] = v``, ``copy.copy(m)``) and by the
    constructor, which have no return channel for a MapResult.
    """

    result: MapResult = MapResult.SUCCESS

    def __init__(self, message: str | None = None):
        super().__init__(message or self.result.name.lower().replace("_", " "))

    @classmethod
    def raise_for(cls, result: MapResult) -> None:
        """
        Raise the error matching a non-success result.

        Args:
            result: Outcome returned by a container operation.

        Raises:
            NullArgumentError, OutOfMemoryError or ItemNotFoundError.
        """
        if result == MapResult.SUCCESS:
            return
        for error_cls in (NullArgumentError, OutOfMemoryError, ItemNotFoundError):
            if error_cls.result == result:
                raise error_cls()
        raise cls(f"unexpected result {result!r}")


class NullArgumentError(MapError, ValueError):
    """Raised when a required argument is None."""

    result = MapResult.NULL_ARGUMENT


class OutOfMemoryError(MapError, MemoryError):
    """Raised when cloning a key or data element failed."""

    result = MapResult.OUT_OF_MEMORY


class ItemNotFoundError(MapError, KeyError):
    """Raised when a key is not present in the map."""

    result = MapResult.ITEM_NOT_FOUND


class MapDestroyedError(RuntimeError):
    """Raised when a destroyed map is used."""
