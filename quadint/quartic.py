import logging
from fractions import Fraction
from math import cos, hypot, pi, sin
from typing import ClassVar, Iterator, Optional, Union

from sympy import Matrix

from quadint.errors import AlgebraicDegreeOverflowError, UnsupportedDomainError
from quadint.quad import quadint

logger = logging.getLogger(__name__)

QUARTIC_OP_TYPES = Union["quarticint", int]


class quarticint:
    """
    Element a + b*z + c*z^2 + d*z^3 of Z[z], where z is a primitive root of unity of degree 4.

    Subclasses pin down z through:
        ORDER:     z = exp(2*pi*i / ORDER)
        REDUCTION: z^4 = REDUCTION[0] + REDUCTION[1]*z + REDUCTION[2]*z^2 + REDUCTION[3]*z^3
        SUBRINGS:  radicand d -> coordinates of sqrt(d), for every quadratic sub-ring
                   that converts to and from quadint
    """

    __slots__ = ("a", "b", "c", "d")

    a: int
    b: int
    c: int
    d: int

    ORDER: ClassVar[int] = 0
    SYMBOL: ClassVar[str] = "z"
    REDUCTION: ClassVar[tuple[int, int, int, int]] = (0, 0, 0, 0)
    SUBRINGS: ClassVar[dict[int, tuple[int, int, int, int]]] = {}

    def __init__(self, a: int = 0, b: int = 0, c: int = 0, d: int = 0) -> None:
        self.a, self.b, self.c, self.d = int(a), int(b), int(c), int(d)

    @classmethod
    def _from_obj(cls, n: QUARTIC_OP_TYPES) -> "quarticint":
        if isinstance(n, int):
            return cls(n, 0, 0, 0)

        if isinstance(n, cls):
            return n

        return NotImplemented

    def __iter__(self) -> Iterator[int]:
        return iter((self.a, self.b, self.c, self.d))

    def __add__(self, other: QUARTIC_OP_TYPES) -> "quarticint":
        o = self._from_obj(other)
        if o is NotImplemented:
            return NotImplemented

        return type(self)(self.a + o.a, self.b + o.b, self.c + o.c, self.d + o.d)

    def __radd__(self, other: int) -> "quarticint":
        return self.__add__(other)

    def __sub__(self, other: QUARTIC_OP_TYPES) -> "quarticint":
        o = self._from_obj(other)
        if o is NotImplemented:
            return NotImplemented

        return type(self)(self.a - o.a, self.b - o.b, self.c - o.c, self.d - o.d)

    def __rsub__(self, other: int) -> "quarticint":
        return self.__neg__().__add__(other)

    def __neg__(self) -> "quarticint":
        return type(self)(-self.a, -self.b, -self.c, -self.d)

    def __mul__(self, other: QUARTIC_OP_TYPES) -> "quarticint":
        o = self._from_obj(other)
        if o is NotImplemented:
            return NotImplemented

        x, y = tuple(self), tuple(o)
        prod = [0] * 7
        for i in range(4):
            for j in range(4):
                prod[i + j] += x[i] * y[j]

        # Fold z^6, z^5, z^4 back down using the minimal polynomial of z
        for k in range(6, 3, -1):
            top = prod[k]
            prod[k] = 0
            for j, r in enumerate(self.REDUCTION):
                prod[k - 4 + j] += top * r

        return type(self)(*prod[:4])

    def __rmul__(self, other: int) -> "quarticint":
        return self.__mul__(other)

    def __bool__(self) -> bool:
        return (self.a | self.b | self.c | self.d) != 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, int):
            return (self.a, self.b, self.c, self.d) == (other, 0, 0, 0)

        if type(other) is not type(self):
            return False

        return tuple(self) == tuple(other)

    def __hash__(self) -> int:
        if not (self.b or self.c or self.d):
            return hash(self.a)

        return hash((type(self).__name__, self.a, self.b, self.c, self.d))

    def __repr__(self) -> str:
        terms: list[str] = []
        for k, coeff in enumerate(self):
            if coeff == 0:
                continue

            sym = "" if k == 0 else (self.SYMBOL if k == 1 else f"{self.SYMBOL}^{k}")
            mag = -coeff if coeff < 0 else coeff
            body = str(mag) if not sym else (sym if mag == 1 else f"{mag}{sym}")
            if not terms:
                terms.append(f"-{body}" if coeff < 0 else body)
            else:
                terms.append(f"- {body}" if coeff < 0 else f"+ {body}")

        return " ".join(terms) if terms else "0"

    @property
    def real(self) -> float:
        return sum(coeff * cos(2 * pi * k / self.ORDER) for k, coeff in enumerate(self))

    @property
    def imag(self) -> float:
        return sum(coeff * sin(2 * pi * k / self.ORDER) for k, coeff in enumerate(self))

    def __abs__(self) -> float:
        return hypot(self.real, self.imag)

    def algebraic_degree(self) -> int:
        """
        Degree of the minimal polynomial over Q: 0, 1, 2 or 4.

        x has degree at most 2 iff 1, x, x^2 are linearly dependent over Q.
        """
        if not self:
            return 0

        if not (self.b or self.c or self.d):
            return 1

        rank = Matrix([[1, 0, 0, 0], list(self), list(self * self)]).rank()
        return 2 if rank == 2 else 4

    def _coefficients_over(self, root: tuple[int, int, int, int]) -> Optional[tuple[Fraction, Fraction]]:
        """Find rationals (u, v) with self == u + v*root, if they exist."""
        x = tuple(self)
        j = next(k for k in range(1, 4) if root[k] != 0)
        v = Fraction(x[j], root[j])
        if any(x[k] != v * root[k] for k in range(1, 4)):
            return None

        return x[0] - v * root[0], v

    def to_quadratic(self) -> quadint:
        """
        Convert to a quadint, if this number lies in a supported quadratic sub-ring.

        Raises:
            AlgebraicDegreeOverflowError: If the number has algebraic degree 4.
            UnsupportedDomainError: If the number lies in a quadratic sub-ring this class
                doesn't convert.

        Returns:
            quadint: The same number as a quadratic integer.
        """
        if not (self.b or self.c or self.d):
            return quadint(self.a, 0, next(iter(self.SUBRINGS), -1))

        for radicand, root in self.SUBRINGS.items():
            found = self._coefficients_over(root)
            if found is None:
                continue

            u, v = found
            A, B = 2 * u, 2 * v
            if A.denominator == 1 and B.denominator == 1:
                return quadint(A.numerator, B.numerator, radicand, 2)

        degree = self.algebraic_degree()
        logger.debug("%r of degree %d has no quadratic counterpart in %s", self, degree, type(self).__name__)
        if degree > 2:
            raise AlgebraicDegreeOverflowError(f"{self!r} is a number of algebraic degree {degree}",
                                               degree, self, max_degree=2)

        raise UnsupportedDomainError(f"{self!r} lies in a quadratic ring {type(self).__name__} doesn't convert")

    @classmethod
    def from_quadratic(cls, x: quadint) -> "quarticint":
        """
        Embed a quadint. Rational integers always convert; otherwise the ring must be one of SUBRINGS.

        Raises:
            UnsupportedDomainError: If x's ring isn't a sub-ring of this one.
        """
        if x.B == 0:
            return cls(x.reg_part, 0, 0, 0)

        root = cls.SUBRINGS.get(x.ring.radicand)
        if root is None:
            raise UnsupportedDomainError(f"Q(sqrt({x.ring.radicand})) is not supported for this conversion to "
                                         f"{cls.__name__}")

        # x = (A + B*sqrt(d))/2
        A, B = x.components2()
        twice = [B * r for r in root]
        twice[0] += A
        if any(t & 1 for t in twice):
            raise ArithmeticError("Non-integral embedding; parity constraint violated")

        return cls(*(t // 2 for t in twice))


class zeta8int(quarticint):
    """Element of Z[zeta_8], zeta_8 = (1 + i)/sqrt(2). zeta_8^2 = i."""

    __slots__ = ()

    ORDER = 8
    SYMBOL = "zeta8"
    REDUCTION = (-1, 0, 0, 0)
    SUBRINGS = {
        -1: (0, 0, 1, 0),   # i = z^2
        2: (0, 1, 0, -1),   # sqrt(2) = z - z^3
        -2: (0, 1, 0, 1),   # sqrt(-2) = z + z^3
    }


class zeta12int(quarticint):
    """Element of Z[zeta_12], zeta_12 = (sqrt(3) + i)/2. zeta_12^3 = i."""

    __slots__ = ()

    ORDER = 12
    SYMBOL = "zeta12"
    REDUCTION = (-1, 0, 1, 0)
    SUBRINGS = {
        -1: (0, 0, 0, 1),   # i = z^3
        3: (0, 2, 0, -1),   # sqrt(3) = 2z - z^3
        -3: (-1, 0, 2, 0),  # sqrt(-3) = 2z^2 - 1
    }
