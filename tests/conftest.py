"""
Shared pytest fixtures for ordered map tests.
"""

import copy

import pytest

from ordmap.models import ElementPolicy, OrderedMap


class TrackingPolicy:
    """
    Element policy recording every clone and release.

    Attributes:
        clone_budget: Number of clones (keys and data together) allowed
            before clones start failing. None means unlimited.
        fail_data: Fail every data clone.
        raise_memory_error: Fail by raising MemoryError instead of
            returning None.
    """

    def __init__(self) -> None:
        self.cloned_keys: list = []
        self.cloned_data: list = []
        self.released_keys: list = []
        self.released_data: list = []
        self.clone_budget: int | None = None
        self.fail_data = False
        self.raise_memory_error = False

    def policy(self) -> ElementPolicy:
        return ElementPolicy(
            clone_key=self.clone_key,
            clone_data=self.clone_data,
            release_key=self.release_key,
            release_data=self.release_data,
        )

    @property
    def outstanding_keys(self) -> int:
        return len(self.cloned_keys) - len(self.released_keys)

    @property
    def outstanding_data(self) -> int:
        return len(self.cloned_data) - len(self.released_data)

    def clone_key(self, key):
        if not self._allow():
            return self._fail()
        clone = copy.deepcopy(key)
        self.cloned_keys.append(clone)
        return clone

    def clone_data(self, data):
        if self.fail_data or not self._allow():
            return self._fail()
        clone = copy.deepcopy(data)
        self.cloned_data.append(clone)
        return clone

    def release_key(self, key) -> None:
        self.released_keys.append(key)

    def release_data(self, data) -> None:
        self.released_data.append(data)

    def _allow(self) -> bool:
        if self.clone_budget is None:
            return True
        if self.clone_budget <= 0:
            return False
        self.clone_budget -= 1
        return True

    def _fail(self):
        if self.raise_memory_error:
            raise MemoryError("simulated allocation failure")
        return None


@pytest.fixture
def tracking():
    """Provide a fresh TrackingPolicy."""
    return TrackingPolicy()


@pytest.fixture
def tracked_map(tracking):
    """Provide an empty map whose clones and releases are recorded."""
    return OrderedMap(tracking.policy())


@pytest.fixture
def int_map():
    """Provide an empty map storing immutable keys and data as-is."""
    return OrderedMap(ElementPolicy.by_reference())


@pytest.fixture
def populated_map(tracked_map):
    """Provide a tracked map holding 1..5 mapped to lists of letters."""
    for key, data in [(3, ["c"]), (1, ["a"]), (5, ["e"]), (2, ["b"]), (4, ["d"])]:
        tracked_map.put(key, data)
    return tracked_map
