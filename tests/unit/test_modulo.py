"""Unit tests for cyclic index arithmetic."""

import pytest

from mlpwords.core.modulo import CyclicIndexer
from mlpwords.exceptions import EmptyWordError


class TestCyclicIndexer:
    """Tests for CyclicIndexer class."""

    def test_next_wraps(self):
        mc = CyclicIndexer(4)
        assert mc.next(0) == 1
        assert mc.next(3) == 0

    def test_previous_wraps(self):
        mc = CyclicIndexer(4)
        assert mc.previous(0) == 3
        assert mc.previous(2) == 1

    def test_cast_reduces_any_integer(self):
        mc = CyclicIndexer(5)
        assert mc.cast(7) == 2
        assert mc.cast(-1) == 4
        assert mc.cast(5) == 0

    def test_advance(self):
        mc = CyclicIndexer(5)
        assert mc.advance(3, 4) == 2
        assert mc.advance(0, 10) == 0

    def test_distance_is_wrap_aware(self):
        mc = CyclicIndexer(8)
        assert mc.distance(2, 5) == 3
        assert mc.distance(6, 1) == 3
        assert mc.distance(4, 4) == 0

    def test_results_stay_in_range(self):
        mc = CyclicIndexer(3)
        for i in range(3):
            for k in range(-6, 7):
                assert 0 <= mc.advance(i, k) < 3
            assert 0 <= mc.next(i) < 3

    def test_single_letter_word(self):
        mc = CyclicIndexer(1)
        assert mc.next(0) == 0
        assert mc.distance(0, 0) == 0

    @pytest.mark.parametrize("modulus", [0, -3])
    def test_non_positive_modulus_rejected(self, modulus):
        with pytest.raises(EmptyWordError):
            CyclicIndexer(modulus)
