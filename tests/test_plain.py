"""
Tests for nonempty.plain - the plain-sequence primitives.

Tests cover:
- Bounded take/drop
- Stable comparator and key sorts
- Order-preserving dedup
- Truncating zip
- Grouping into key -> list
- Shuffling a copy
"""

from nonempty import plain
from nonempty.ordering import Ordering, compare_natural


class TestTakeDrop:
    """Test bounded take and drop."""

    def test_take_within_bounds(self):
        """take returns the first n items."""
        assert plain.take([1, 2, 3], 2) == [1, 2]

    def test_take_past_end(self):
        """take past the end returns everything."""
        assert plain.take([1, 2], 5) == [1, 2]

    def test_take_negative(self):
        """Negative take is empty."""
        assert plain.take([1, 2], -1) == []

    def test_drop_within_bounds(self):
        """drop skips the first n items."""
        assert plain.drop([1, 2, 3], 1) == [2, 3]

    def test_drop_past_end(self):
        """drop past the end is empty."""
        assert plain.drop([1, 2], 5) == []

    def test_drop_negative(self):
        """Negative drop keeps everything."""
        assert plain.drop([1, 2], -3) == [1, 2]

    def test_accepts_iterators(self):
        """Iterators work as input."""
        assert plain.take(iter(range(10)), 3) == [0, 1, 2]


class TestSort:
    """Test comparator and key sorts."""

    def test_sort_with_comparator(self):
        """Ordering comparators sort ascending."""
        assert plain.sort_with([3, 1, 2], compare_natural) == [1, 2, 3]

    def test_sort_with_int_comparator(self):
        """cmp-style int comparators work too."""
        assert plain.sort_with([3, 1, 2], lambda a, b: b - a) == [3, 2, 1]

    def test_sort_with_is_stable(self):
        """Equal elements keep their relative order."""
        pairs = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]

        def by_first(left, right):
            return Ordering.of(left[0] - right[0])

        assert plain.sort_with(pairs, by_first) == [(0, "b"), (0, "d"), (1, "a"), (1, "c")]

    def test_sort_by_reverse_is_stable(self):
        """Reversed key sort keeps ties in input order."""
        words = ["bb", "a", "cc", "d"]
        assert plain.sort_by(words, len, reverse=True) == ["bb", "cc", "a", "d"]


class TestUnique:
    """Test order-preserving dedup."""

    def test_keeps_first_occurrence(self):
        """Later duplicates are dropped."""
        assert plain.unique([3, 1, 3, 2, 1]) == [3, 1, 2]

    def test_unique_by(self):
        """unique_by compares keys."""
        assert plain.unique_by(["apple", "avocado", "banana"], lambda w: w[0]) == ["apple", "banana"]

    def test_unhashable_items(self):
        """Dicts and lists are compared by equality."""
        items = [{"a": 1}, [1], {"a": 1}, [1], {"a": 2}]
        assert plain.unique(items) == [{"a": 1}, [1], {"a": 2}]

    def test_tuple_holding_lists(self):
        """A tuple with list members falls back to equality."""
        assert plain.unique([([1],), 1, ([1],)]) == [([1],), 1]


class TestZipAndGroup:
    """Test zip, grouping and append."""

    def test_zip_truncates(self):
        """zip stops at the shorter input."""
        assert plain.zip_truncating([1, 2, 3], "ab") == [(1, "a"), (2, "b")]

    def test_zip_empty(self):
        """Zipping with an empty input is empty."""
        assert plain.zip_truncating([], [1]) == []

    def test_group_into_keeps_appearance_order(self):
        """Lists and keys follow appearance order."""
        groups = plain.group_into([1, 2, 3, 4, 5], lambda n: n % 2)
        assert groups == {1: [1, 3, 5], 0: [2, 4]}
        assert list(groups) == [1, 0]

    def test_append(self):
        """append concatenates any iterables."""
        assert plain.append((1, 2), [3]) == [1, 2, 3]


class TestShuffled:
    """Test shuffling a copy."""

    def test_returns_copy(self):
        """The source shuffles a copy, never the input."""
        class Reverser:
            def shuffle(self, items):
                items.reverse()

        items = [1, 2, 3]
        assert plain.shuffled(items, Reverser()) == [3, 2, 1]
        assert items == [1, 2, 3]
