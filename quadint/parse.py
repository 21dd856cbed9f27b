import logging
import re
from typing import Optional

from quadint.errors import InvalidCoordinatesError, InvalidRingError, ParseError
from quadint.quad import RING_TYPES, as_ring, quadint

logger = logging.getLogger(__name__)

_HALF = re.compile(r"^\((?P<inner>.*)\)/2$")
_BINOMIAL = re.compile(r"""
    ^
    (?:(?P<a>[+-]?\d+)(?=[+-]|$))?          # regular part
    (?:
        (?P<sign>[+-]?)(?P<b>\d*)
        (?:sqrt\((?P<d>[+-]?\d+)\)|(?P<i>i))  # surd part
    )?
    $
""", re.VERBOSE)


def parse(text: str, ring: Optional[RING_TYPES] = None) -> quadint:
    """
    Read a quadratic integer written the way to_ascii() writes it.

    Accepted forms include "7", "-3i", "1 - 2sqrt(-5)", "(1 + sqrt(5))/2" and "2*sqrt(3)".
    The Unicode minus and square root signs are accepted too.

    Args:
        text: The text to read.
        ring: Optional ring (or radicand) hint. Required for nothing, but a rational integer
            is placed in this ring, and a radicand in the text must agree with it.

    Raises:
        ParseError: If the text is malformed, names a radicand that conflicts with the
            hint, or doesn't describe an algebraic integer.

    Returns:
        quadint: The parsed number.
    """
    hint = as_ring(ring) if ring is not None else None

    s = re.sub(r"\s+", "", text).replace("−", "-").replace("√", "sqrt").replace("*", "")
    denom = 1
    half = _HALF.match(s)
    if half:
        s = half.group("inner")
        denom = 2

    m = _BINOMIAL.match(s)
    if not s or m is None or (m.group("a") is None and m.group("b") is None
                              and m.group("d") is None and m.group("i") is None):
        raise ParseError(f"{text!r} is not a quadratic integer")

    a = int(m.group("a") or 0)
    b = 0
    radicand: Optional[int] = None
    if m.group("d") is not None or m.group("i") is not None:
        if m.group("a") is not None and not m.group("sign"):
            raise ParseError(f"{text!r} is missing a sign between its terms")

        b = int(m.group("b") or 1)
        if m.group("sign") == "-":
            b = -b
        radicand = -1 if m.group("i") is not None else int(m.group("d"))

    if radicand is not None and hint is not None and hint.radicand != radicand:
        raise ParseError(f"{text!r} has radicand {radicand}, which conflicts with the ring hint {hint.radicand}")

    try:
        if radicand is None:
            return quadint(a, b, hint if hint is not None else -1, denom)
        return quadint(a, b, radicand, denom)
    except (InvalidCoordinatesError, InvalidRingError) as e:
        logger.debug("parsed %r but it is not an algebraic integer: %s", text, e)
        raise ParseError(f"{text!r} is not a quadratic integer: {e}") from e
