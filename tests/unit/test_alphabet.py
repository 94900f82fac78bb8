"""Unit tests for the ordered alphabet.

Tests cover:
- Construction and serialized ordering
- Rank lookup and comparisons
- In-place reorderings and their inverse laws
- Contract violations
"""

import pytest

from mlpwords.core.alphabet import OrderedAlphabet
from mlpwords.exceptions import InvalidAlphabetError, LetterOutOfRangeError


def _is_permutation(alphabet: OrderedAlphabet) -> bool:
    return sorted(alphabet.order) == list(range(alphabet.size))


class TestConstruction:
    """Tests for building alphabets."""

    def test_identity_ordering(self):
        alphabet = OrderedAlphabet("a", 4)
        assert alphabet.current_ordering() == "abcd"
        assert alphabet.order == (0, 1, 2, 3)

    def test_explicit_order(self):
        # ranks indexed by letter: a->2, b->0, c->1
        alphabet = OrderedAlphabet("a", 3, order=[2, 0, 1])
        assert alphabet.current_ordering() == "bca"

    def test_from_ordering(self):
        alphabet = OrderedAlphabet.from_ordering("3012")
        assert alphabet.first == "0"
        assert alphabet.size == 4
        assert alphabet.current_ordering() == "3012"
        assert alphabet.rank("3") == 0
        assert alphabet.rank("2") == 3

    def test_display(self):
        alphabet = OrderedAlphabet.identity("a", 3)
        assert alphabet.display() == "[OrderedAlphabet] abc"
        assert str(alphabet) == "[OrderedAlphabet] abc"

    def test_single_letter_alphabet(self):
        alphabet = OrderedAlphabet("x", 1)
        alphabet.rotate_left()
        alphabet.reverse_around_rank12()
        assert alphabet.current_ordering() == "x"

    @pytest.mark.parametrize("first,size", [("a", 0), ("a", -1), ("ab", 2), ("", 2)])
    def test_invalid_construction(self, first, size):
        with pytest.raises(InvalidAlphabetError):
            OrderedAlphabet(first, size)

    def test_letters_past_character_range(self):
        with pytest.raises(InvalidAlphabetError):
            OrderedAlphabet(chr(0x10FFFF), 2)

    @pytest.mark.parametrize("ordering", ["", "aac", "abd"])
    def test_from_ordering_rejects_non_consecutive(self, ordering):
        with pytest.raises(InvalidAlphabetError):
            OrderedAlphabet.from_ordering(ordering)

    def test_set_order_rejects_non_permutation(self):
        alphabet = OrderedAlphabet("a", 3)
        with pytest.raises(InvalidAlphabetError):
            alphabet.set_order([0, 0, 1])
        with pytest.raises(InvalidAlphabetError):
            alphabet.set_order([0, 1])
        assert alphabet.current_ordering() == "abc"


class TestComparisons:
    """Tests for rank lookup and letter comparisons."""

    def test_rank_and_letter_are_inverse(self):
        alphabet = OrderedAlphabet.from_ordering("cadb")
        for rank in range(4):
            assert alphabet.rank(alphabet.letter(rank)) == rank
        assert alphabet.letter(0) == "c"

    def test_comparisons_follow_current_order(self):
        alphabet = OrderedAlphabet.from_ordering("ba")
        assert alphabet.less_than("b", "a")
        assert alphabet.less_or_equal("b", "a")
        assert alphabet.less_or_equal("a", "a")
        assert not alphabet.less_than("a", "a")
        assert not alphabet.less_or_equal("a", "b")

    def test_equal_is_letter_identity(self):
        alphabet = OrderedAlphabet("a", 2)
        assert alphabet.equal("a", "a")
        assert not alphabet.equal("a", "b")

    def test_rank_outside_alphabet(self):
        alphabet = OrderedAlphabet("a", 3)
        with pytest.raises(LetterOutOfRangeError, match="outside the alphabet"):
            alphabet.rank("z")

    def test_letter_of_invalid_rank(self):
        alphabet = OrderedAlphabet("a", 3)
        with pytest.raises(InvalidAlphabetError):
            alphabet.letter(3)


class TestReordering:
    """Tests for in-place reorderings."""

    def test_rotate_left(self):
        alphabet = OrderedAlphabet("a", 4)
        alphabet.rotate_left()
        assert alphabet.current_ordering() == "bcda"

    def test_rotate_left_then_right(self):
        alphabet = OrderedAlphabet("a", 4)
        alphabet.rotate_left()
        alphabet.rotate_right()
        assert alphabet.current_ordering() == "abcd"

    def test_rotate_right(self):
        alphabet = OrderedAlphabet("a", 4)
        alphabet.rotate_right()
        assert alphabet.current_ordering() == "dabc"
        alphabet.rotate_left()
        assert alphabet.current_ordering() == "abcd"

    def test_reverse_order(self):
        alphabet = OrderedAlphabet("a", 4)
        alphabet.reverse_order()
        assert alphabet.current_ordering() == "dcba"
        alphabet.reverse_order()
        assert alphabet.current_ordering() == "abcd"

    def test_reverse_around_rank12(self):
        alphabet = OrderedAlphabet("a", 5)
        alphabet.reverse_around_rank12()
        assert alphabet.current_ordering() == "dcbae"
        alphabet.reverse_around_rank12()
        assert alphabet.current_ordering() == "abcde"

    def test_reverse_around_rank12_swaps_ranks_1_and_2(self):
        alphabet = OrderedAlphabet.from_ordering("3012")
        a1, a2 = alphabet.letter(1), alphabet.letter(2)
        alphabet.reverse_around_rank12()
        assert alphabet.letter(1) == a2
        assert alphabet.letter(2) == a1

    def test_full_rotation_restores_order(self):
        alphabet = OrderedAlphabet.from_ordering("cabd")
        for _ in range(4):
            alphabet.rotate_right()
        assert alphabet.current_ordering() == "cabd"

    @pytest.mark.parametrize("size", [1, 2, 3, 4, 7])
    def test_reorderings_keep_a_permutation(self, size):
        alphabet = OrderedAlphabet("a", size)
        operations = [
            alphabet.rotate_left,
            alphabet.reverse_around_rank12,
            alphabet.rotate_right,
            alphabet.reverse_order,
            alphabet.reverse_around_rank12,
            alphabet.rotate_right,
        ]
        for _ in range(3):
            for operation in operations:
                operation()
                assert _is_permutation(alphabet)
                assert alphabet.is_valid()
                assert sorted(alphabet.current_ordering()) == sorted(
                    chr(ord("a") + k) for k in range(size)
                )

    def test_copy_is_independent(self):
        alphabet = OrderedAlphabet("a", 3)
        clone = alphabet.copy()
        clone.rotate_left()
        assert alphabet.current_ordering() == "abc"
        assert clone.current_ordering() == "bca"
