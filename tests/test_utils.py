from math import isqrt
from random import Random

import pytest

from quadint import is_squarefree, random_squarefree
from quadint.utils import round_div_ties_away_from_zero


def brute_squarefree(n: int) -> bool:
    n = abs(n)
    return n != 0 and all(n % (p * p) for p in range(2, isqrt(n) + 1))


class TestSquarefree:
    """Tests for is_squarefree and random_squarefree"""

    def test_is_squarefree(self):
        """Agrees with trial division"""
        for n in range(-500, 500):
            assert is_squarefree(n) == brute_squarefree(n)

    def test_units(self):
        """-1 and 1 have no prime factors"""
        assert is_squarefree(1)
        assert is_squarefree(-1)
        assert not is_squarefree(0)

    def test_random_squarefree(self):
        """Random radicands are squarefree and within the bound"""
        rng = Random(42)
        seen = set()
        for _ in range(200):
            d = random_squarefree(30, rng)
            assert 1 <= abs(d) <= 30
            assert d != 1
            assert brute_squarefree(d)
            seen.add(d < 0)

        assert seen == {True, False}

    def test_gaussian_radicand(self):
        """-1 is drawn too, and is the only choice for bound 1"""
        rng = Random(7)
        assert random_squarefree(1, rng) == -1
        assert -1 in {random_squarefree(3, rng) for _ in range(200)}

    def test_random_squarefree_bound(self):
        """There is nothing to pick below 1"""
        with pytest.raises(ValueError):
            random_squarefree(0)


class TestRounding:
    """Tests for round_div_ties_away_from_zero"""

    @pytest.mark.parametrize("a, b, expected", [(5, 2, 3), (-5, 2, -3), (4, 3, 1), (-4, 3, -1),
                                                (7, 7, 1), (0, 5, 0), (1, 3, 0), (-2, 3, -1)])
    def test_round(self, a, b, expected):
        """Nearest integer, ties away from zero"""
        assert round_div_ties_away_from_zero(a, b) == expected

    def test_bad_divisor(self):
        """The divisor must be positive"""
        with pytest.raises(ValueError):
            round_div_ties_away_from_zero(1, 0)
