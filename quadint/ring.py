from dataclasses import dataclass, field
from math import sqrt

from quadint.errors import InvalidRingError
from quadint.utils import INT64_MAX, INT64_MIN, is_squarefree


# TODO: Once Py3.9 support has been dropped, add slots=True
# @dataclass(frozen=True, slots=True)
@dataclass(frozen=True)
class QuadraticRing:
    """
    The ring of algebraic integers of Q(sqrt(radicand)).

    The radicand must be squarefree, nonzero and not 1. When radicand ≡ 1 (mod 4) the ring
    contains "half-integers" (a + b*sqrt(d))/2 with a, b both odd; otherwise it is exactly
    Z[sqrt(d)].

    Two rings are equal iff their radicands are equal.
    """
    radicand: int
    is_imaginary: bool = field(init=False, compare=False)
    has_half_integers: bool = field(init=False, compare=False)

    def __post_init__(self) -> None:
        d = self.radicand
        if isinstance(d, bool) or not isinstance(d, int):
            raise InvalidRingError(f"radicand must be an int, not {type(d).__name__}")

        if d < INT64_MIN or d > INT64_MAX:
            raise InvalidRingError(f"radicand {d} exceeds the signed 64-bit range")

        if d == 0:
            raise InvalidRingError("0 is not valid for the radicand")

        if d == 1:
            raise InvalidRingError("Q(sqrt(1)) is just Q, not a quadratic field")

        if not is_squarefree(d):
            raise InvalidRingError(f"squarefree integer required for the radicand, {d} is not squarefree")

        # Frozen dataclass: derived fields have to go through object.__setattr__
        object.__setattr__(self, "is_imaginary", d < 0)
        object.__setattr__(self, "has_half_integers", d % 4 == 1)

    def is_purely_real(self) -> bool:
        """True iff every number in the ring is a real number."""
        return self.radicand > 0

    @property
    def abs_radicand(self) -> int:
        return abs(self.radicand)

    @property
    def radicand_sqrt(self) -> float:
        """sqrt(|d|), only for numeric approximations."""
        return sqrt(abs(self.radicand))

    def discriminant(self) -> int:
        """The field discriminant: d if d ≡ 1 (mod 4), else 4d."""
        if self.has_half_integers:
            return self.radicand

        return 4 * self.radicand

    def __repr__(self) -> str:
        return f"QuadraticRing({self.radicand})"
