from fractions import Fraction
from math import atan2, ceil, floor, hypot, sqrt, trunc
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from quadint.quad import quadint
    from quadint.ring import QuadraticRing


class QuadIntError(Exception):
    """Base class for every failure raised by quadint."""


class InvalidRingError(QuadIntError, ValueError):
    """The radicand can't define a quadratic ring (zero, 1, or not squarefree)."""


class InvalidCoordinatesError(QuadIntError, ValueError):
    """The coordinates don't describe an algebraic integer of the given ring."""


class CoordinateOverflowError(QuadIntError, OverflowError):
    """A coordinate or invariant fell outside of its fixed-width range."""


class UnsupportedDomainError(QuadIntError, ValueError):
    """The operation is not defined for the ring the operand lives in."""


class ParseError(QuadIntError, ValueError):
    """Text could not be read as a quadratic integer."""


class NonEuclideanDomainError(QuadIntError, ArithmeticError):
    """Euclidean descent failed: the remainder norm did not decrease."""

    def __init__(self, message: str, a: Any, b: Any) -> None:
        super().__init__(message)
        self.operands = (a, b)


class AlgebraicDegreeOverflowError(QuadIntError, ArithmeticError):
    """
    The exact result exists, but lives in an extension of higher degree than this type supports.

    Recoverable: the caller may redo the computation in a quartic ring.

    Attributes:
        required_degree: The algebraic degree the result needs (4 for any two quadratic rings).
        max_degree: The largest degree the raising type can represent.
        operands: The numbers that caused the overflow.
    """

    def __init__(self, message: str, required_degree: int, *operands: Any, max_degree: int = 2) -> None:
        super().__init__(message)
        self.required_degree = required_degree
        self.max_degree = max_degree
        self.operands = operands


class NotDivisibleError(QuadIntError, ArithmeticError):
    """
    Exact division has no integral result in the working ring.

    The exact quotient p + r*sqrt(d) is carried as fractions, so a caller can still
    round to nearby ring elements.

    Attributes:
        fractions: (p, r), the rational and surd coefficients of the exact quotient.
        ring: The ring the quotient was computed in.
        dividend: The number being divided.
        divisor: The number it was divided by.
    """

    def __init__(self,
                 fractions: tuple[Fraction, Fraction],
                 ring: "QuadraticRing",
                 dividend: "quadint",
                 divisor: "quadint",
                 message: Optional[str] = None) -> None:
        if message is None:
            message = f"{dividend!r} is not divisible by {divisor!r}"

        super().__init__(message)
        self.fractions = fractions
        self.ring = ring
        self.dividend = dividend
        self.divisor = divisor

    @property
    def real(self) -> float:
        """Numeric real part of the inexact quotient."""
        p, r = self.fractions
        if self.ring.radicand > 0:
            return float(p) + float(r) * sqrt(self.ring.radicand)

        return float(p)

    @property
    def imag(self) -> float:
        """Numeric imaginary part of the inexact quotient."""
        _, r = self.fractions
        if self.ring.radicand < 0:
            return float(r) * sqrt(-self.ring.radicand)

        return 0.0

    def __abs__(self) -> float:
        return hypot(self.real, self.imag)

    def angle(self) -> float:
        """Argument of the inexact quotient in the complex plane."""
        return atan2(self.imag, self.real)

    def _rounded(self, method: Any) -> "quadint":
        p, r = self.fractions
        return type(self.dividend)._make(2 * int(method(p)), 2 * int(method(r)), self.ring)

    def round_towards_zero(self) -> "quadint":
        """The ring element obtained by truncating both coefficients toward zero."""
        return self._rounded(trunc)

    def round_away_from_zero(self) -> "quadint":
        """The ring element obtained by pushing both non-integral coefficients away from zero."""
        return self._rounded(lambda f: ceil(f) if f > 0 else floor(f))
