from functools import cache
from random import Random
from typing import Optional

from sympy import factorint

from quadint.errors import CoordinateOverflowError

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_RANDOM = Random()


def check_int32(value: int, what: str) -> int:
    """Return value unchanged, or raise if it does not fit a signed 32-bit coordinate."""
    if value < INT32_MIN or value > INT32_MAX:
        raise CoordinateOverflowError(f"{what} {value} exceeds the signed 32-bit coordinate range")

    return value


def check_int64(value: int, what: str) -> int:
    """Return value unchanged, or raise if it does not fit a signed 64-bit result."""
    if value < INT64_MIN or value > INT64_MAX:
        raise CoordinateOverflowError(f"{what} {value} exceeds the signed 64-bit range")

    return value


@cache
def is_squarefree(n: int) -> bool:
    """
    True iff no prime divides n more than once.

    Zero is not squarefree; -1 and 1 are (they have no prime factors at all).
    """
    if n == 0:
        return False

    return all(e == 1 for e in factorint(abs(n)).values())


def random_squarefree(bound: int, rng: Optional[Random] = None) -> int:
    """
    Pick a random squarefree integer d with |d| <= bound and a random sign, -1 included.

    d = 1 is never returned since Q(sqrt 1) collapses to Q, so the result is always usable
    as a quadratic ring radicand.

    Raises:
        ValueError: If bound < 1.
    """
    if bound < 1:
        raise ValueError("bound must be at least 1")

    rng = rng or _RANDOM
    while True:
        d = rng.randint(1, bound)
        if rng.random() < 0.5:
            d = -d

        if d != 1 and is_squarefree(d):
            return d


def round_div_ties_away_from_zero(a: int, b: int) -> int:
    """Round a/b to nearest integer; ties go away from zero. b must be > 0."""
    if b <= 0:
        raise ValueError("b must be > 0")

    if a >= 0:
        return (a + (b // 2)) // b

    # a < 0
    return -((-a + (b // 2)) // b)
