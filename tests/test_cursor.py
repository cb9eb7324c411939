"""
Tests for cursor iteration, iterator invalidation and range iteration.
"""

import pytest

from ordmap.models import Cursor, MapResult


def walk(m):
    """Collect keys through first()/next()."""
    keys = []
    key = m.first()
    while key is not None:
        keys.append(key)
        key = m.next()
    return keys


class TestFirstNext:
    """Tests for the map's built-in cursor."""

    def test_iteration_order(self, int_map):
        """Test first/next walk keys in ascending order."""
        int_map.put(3, "c")
        int_map.put(1, "a")
        int_map.put(2, "b")

        assert int_map.first() == 1
        assert int_map.next() == 2
        assert int_map.next() == 3
        assert int_map.next() is None
        assert int_map.size() == 3

    def test_next_at_end_stays_at_end(self, int_map):
        """Test next keeps returning None at the end without wrapping."""
        int_map.put(1, "a")

        assert int_map.first() == 1
        assert int_map.next() is None
        assert int_map.next() is None

    def test_next_without_first(self, int_map):
        """Test next on an unset cursor returns None."""
        int_map.put(1, "a")

        assert int_map.next() is None

    def test_first_restarts(self, int_map):
        """Test a second first() repositions the single cursor."""
        int_map.put(1, "a")
        int_map.put(2, "b")

        int_map.first()
        int_map.next()
        assert int_map.first() == 1
        assert int_map.next() == 2

    def test_returns_stored_key(self, tracked_map, tracking):
        """Test first returns the map's own key."""
        tracked_map.put((1,), ["a"])

        assert tracked_map.first() is tracking.cloned_keys[0]


class TestInvalidation:
    """Tests for cursor invalidation after mutations."""

    @pytest.fixture
    def positioned(self, populated_map):
        assert populated_map.first() == 1
        return populated_map

    def test_put_new_key(self, positioned):
        """Test inserting invalidates the cursor."""
        assert positioned.put(10, ["j"]) == MapResult.SUCCESS
        assert positioned.next() is None

    def test_put_existing_key(self, positioned):
        """Test updating data invalidates the cursor."""
        assert positioned.put(1, ["z"]) == MapResult.SUCCESS
        assert positioned.next() is None

    def test_put_before_cursor(self, positioned):
        """Test invalidation does not depend on the mutation site."""
        positioned.next()
        positioned.next()
        assert positioned.put(0, ["0"]) == MapResult.SUCCESS
        assert positioned.next() is None

    def test_remove(self, positioned):
        """Test removing invalidates the cursor."""
        assert positioned.remove(5) == MapResult.SUCCESS
        assert positioned.next() is None

    def test_failed_remove_keeps_cursor(self, positioned):
        """Test a remove of an absent key leaves the cursor alone."""
        assert positioned.remove(42) == MapResult.ITEM_NOT_FOUND
        assert positioned.next() == 2

    def test_clear(self, positioned):
        """Test clearing invalidates the cursor."""
        positioned.clear()
        assert positioned.next() is None

    def test_copy_invalidates_both(self, positioned):
        """Test a successful copy invalidates the source and the copy."""
        duplicate = positioned.copy()

        assert positioned.next() is None
        assert duplicate.next() is None

    def test_resume_after_first(self, positioned):
        """Test first() resumes iteration after a mutation."""
        positioned.remove(1)

        assert walk(positioned) == [2, 3, 4, 5]


class TestExternalCursor:
    """Tests for cursors handed out by cursor()."""

    def test_independent_positions(self, populated_map):
        """Test separate cursors advance independently."""
        a = populated_map.cursor()
        b = populated_map.cursor()

        assert isinstance(a, Cursor)
        assert a.first() == 1
        assert a.next() == 2
        assert b.first() == 1
        assert a.next() == 3
        assert populated_map.next() is None

    def test_invalidated_by_mutation(self, populated_map):
        """Test a mutation invalidates every outstanding cursor."""
        cursor = populated_map.cursor()
        cursor.first()
        assert cursor.is_valid

        populated_map.put(6, ["f"])

        assert not cursor.is_valid
        assert cursor.next() is None
        assert cursor.first() == 1

    def test_empty_map(self, int_map):
        """Test a cursor over an empty map stays unset."""
        cursor = int_map.cursor()

        assert cursor.first() is None
        assert cursor.next() is None
        assert repr(cursor) == "Cursor(unset)"


class TestRangeIteration:
    """Tests for Python iteration over the map."""

    def test_iteration(self, int_map):
        """Test sorted iteration."""
        int_map.put("c", "3")
        int_map.put("a", "1")
        int_map.put("b", "2")

        assert list(int_map) == ["a", "b", "c"]
        assert [k for k, v in int_map.iterator()] == ["a", "b", "c"]

    def test_range_iteration(self, int_map):
        """Test range iteration."""
        for i in range(10):
            int_map.put(f"key{i:02d}", f"value{i}")

        # Range [key03, key07)
        result = list(int_map.iterator("key03", "key07"))
        keys = [k for k, v in result]
        assert keys == ["key03", "key04", "key05", "key06"]

    def test_open_ranges(self, int_map):
        """Test ranges bounded on one side only."""
        for i in range(5):
            int_map.put(i, i)

        assert [k for k, _ in int_map.iterator(start=3)] == [3, 4]
        assert [k for k, _ in int_map.iterator(end=2)] == [0, 1]
        assert list(int_map.iterator(start=10)) == []

    def test_does_not_touch_cursor(self, populated_map):
        """Test Python iteration leaves the built-in cursor in place."""
        populated_map.first()
        list(populated_map)

        assert populated_map.next() == 2

    def test_mutation_during_iteration(self, int_map):
        """Test mutating the map while iterating raises."""
        int_map.put(1, "a")
        int_map.put(2, "b")

        it = iter(int_map)
        assert next(it) == 1
        int_map.put(3, "c")
        with pytest.raises(RuntimeError):
            next(it)
