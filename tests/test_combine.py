"""
Tests for nonempty.combine module.

Tests cover:
- append / append_list / prepend
- Truncating zip and map2
- strict_zip: LengthMismatchError exactly on differing lengths
- unzip as the inverse of pairing
"""

import pytest

from nonempty.combine import append, append_list, map2, prepend, strict_zip, unzip, zip
from nonempty.core.errors import LengthMismatchError
from nonempty.core.result import Err, Ok
from nonempty.sequence import new, single, to_plain


class TestAppend:
    """Test append, append_list and prepend."""

    def test_append(self):
        """append(NES(1,[2,3,4]), NES(5,[6,7])) -> NES(1,[2,3,4,5,6,7])."""
        assert append(new(1, [2, 3, 4]), new(5, [6, 7])) == new(1, [2, 3, 4, 5, 6, 7])

    def test_append_singletons(self):
        """Two singletons make a pair."""
        assert append(single(1), single(2)) == new(1, [2])

    def test_append_list(self, one_to_four):
        """A plain list extends the tail."""
        assert append_list(one_to_four, [5, 6]) == new(1, [2, 3, 4, 5, 6])

    def test_append_empty_list(self, one_to_four):
        """Appending an empty list is a no-op."""
        assert append_list(one_to_four, []) == one_to_four

    def test_append_leaves_operands_unchanged(self, one_to_four):
        """Operands are not modified."""
        other = new(9, [8])
        append(one_to_four, other)
        assert to_plain(one_to_four) == [1, 2, 3, 4]
        assert to_plain(other) == [9, 8]

    def test_prepend(self, one_to_four):
        """prepend puts the element first."""
        assert prepend(one_to_four, 0) == new(0, [1, 2, 3, 4])

    def test_prepend_singleton(self):
        """prepend onto a singleton."""
        assert prepend(single("b"), "a") == new("a", ["b"])


class TestZip:
    """Test truncating zip and map2."""

    def test_equal_lengths(self):
        """Equal lengths pair everything."""
        assert zip(new(1, [2]), new("a", ["b"])) == new((1, "a"), [(2, "b")])

    def test_truncates_longer_left(self, one_to_four):
        """A longer left side is cut."""
        assert zip(one_to_four, new("a", ["b"])) == new((1, "a"), [(2, "b")])

    def test_truncates_longer_right(self, one_to_four):
        """A longer right side is cut."""
        assert zip(single("x"), one_to_four) == single(("x", 1))

    @pytest.mark.parametrize("left_len,right_len", [(1, 1), (1, 3), (4, 2), (3, 3)])
    def test_length_is_minimum(self, left_len, right_len):
        """Result length is the shorter length."""
        left = new(0, range(1, left_len))
        right = new(0, range(1, right_len))
        assert len(zip(left, right)) == min(left_len, right_len)
        assert len(map2(left, right, lambda a, b: a + b)) == min(left_len, right_len)

    def test_map2(self):
        """map2 combines pairwise and truncates."""
        assert map2(new(1, [2, 3]), new(10, [20]), lambda a, b: a + b) == new(11, [22])


class TestStrictZip:
    """Test strict_zip."""

    def test_mismatch(self):
        """strict_zip(NES(1,[2]), NES("a",[])) -> LengthMismatch."""
        result = strict_zip(new(1, [2]), single("a"))
        assert result.is_err()
        assert isinstance(result.error, LengthMismatchError)
        assert (result.error.left_length, result.error.right_length) == (2, 1)

    def test_mismatch_is_a_value(self):
        """The mismatch is returned, not raised."""
        match strict_zip(single(1), new(1, [2, 3])):
            case Err(LengthMismatchError() as error):
                assert error.right_length == 3
            case _:
                pytest.fail("expected a length mismatch")

    @pytest.mark.parametrize("size", [1, 2, 5])
    def test_equal_lengths_match_zip(self, size):
        """Equal lengths agree with zip."""
        left = new(0, range(1, size))
        right = new("a", ["b"] * (size - 1))
        assert strict_zip(left, right) == Ok(zip(left, right))


class TestUnzip:
    """Test unzip."""

    def test_unzip(self):
        """unzip splits pairs into two sequences."""
        pairs = new((1, "a"), [(2, "b"), (3, "c")])
        assert unzip(pairs) == (new(1, [2, 3]), new("a", ["b", "c"]))

    def test_unzip_singleton(self):
        """A single pair unzips to two singletons."""
        assert unzip(single((True, None))) == (single(True), single(None))

    def test_unzip_inverts_zip(self, one_to_four):
        """unzip undoes zip on equal lengths."""
        other = new("a", ["b", "c", "d"])
        assert unzip(zip(one_to_four, other)) == (one_to_four, other)
