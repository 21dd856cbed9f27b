from quadint.errors import (
    AlgebraicDegreeOverflowError,
    CoordinateOverflowError,
    InvalidCoordinatesError,
    InvalidRingError,
    NonEuclideanDomainError,
    NotDivisibleError,
    ParseError,
    QuadIntError,
    UnsupportedDomainError,
)
from quadint.fmt import (
    FormatOptions,
    min_poly_string,
    ring_to_filename,
    ring_to_string,
    to_ascii,
    to_html,
    to_string,
    to_tex,
)
from quadint.parse import parse
from quadint.quad import gcd, min_poly_coeffs, norm, quadint, trace
from quadint.quartic import quarticint, zeta8int, zeta12int
from quadint.ring import QuadraticRing
from quadint.utils import is_squarefree, random_squarefree

__all__ = [
    "AlgebraicDegreeOverflowError",
    "CoordinateOverflowError",
    "FormatOptions",
    "InvalidCoordinatesError",
    "InvalidRingError",
    "NonEuclideanDomainError",
    "NotDivisibleError",
    "ParseError",
    "QuadIntError",
    "QuadraticRing",
    "UnsupportedDomainError",
    "gcd",
    "is_squarefree",
    "min_poly_coeffs",
    "min_poly_string",
    "norm",
    "parse",
    "quadint",
    "quarticint",
    "random_squarefree",
    "ring_to_filename",
    "ring_to_string",
    "to_ascii",
    "to_html",
    "to_string",
    "to_tex",
    "trace",
    "zeta12int",
    "zeta8int",
]
