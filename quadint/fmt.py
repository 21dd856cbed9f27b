"""
Human readable renderings of quadratic integers and their rings.

Four styles are supported: "plain" (Unicode), "ascii", "tex" and "html". Preferences such
as blackboard bold ring symbols are passed in explicitly through FormatOptions, there is no
module level state.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Optional

if TYPE_CHECKING:
    from quadint.quad import quadint
    from quadint.ring import QuadraticRing

STYLES = Literal["plain", "ascii", "tex", "html"]

MINUS_SIGN = "−"
SQRT_SYMBOL = "√"


# TODO: Once Py3.9 support has been dropped, add slots=True
# @dataclass(frozen=True, slots=True)
@dataclass(frozen=True)
class FormatOptions:
    """
    Rendering preferences.

    Attributes:
        blackboard_bold: Use blackboard bold Z and Q in TeX and HTML ring names.
        theta_notation: Write numbers of half-integer rings as m + n*theta
            (omega for d = -3, phi for d = 5) instead of (a + b*sqrt(d))/2.
    """
    blackboard_bold: bool = False
    theta_notation: bool = False


DEFAULT_OPTIONS = FormatOptions()


@dataclass(frozen=True)
class _Style:
    minus: str
    imag_unit: str
    surd: str  # format string taking the radicand
    coeff_sep: str
    half: str  # format string taking the numerator expression
    letters: dict[int, str]
    theta: str


_STYLES: dict[str, _Style] = {
    "plain": _Style(MINUS_SIGN, "i", SQRT_SYMBOL + "({})", "", "({})/2",
                    {-3: "ω", 5: "φ"}, "θ"),
    "ascii": _Style("-", "i", "sqrt({})", "", "({})/2",
                    {-3: "omega", 5: "phi"}, "theta"),
    "tex": _Style("-", "i", "\\sqrt{{{}}}", " ", "\\frac{{{}}}{{2}}",
                  {-3: "\\omega", 5: "\\phi"}, "\\theta"),
    "html": _Style("&minus;", "<i>i</i>", "&radic;({})", "", "({})/2",
                   {-3: "&omega;", 5: "&phi;"}, "&theta;"),
}


def _style(style: str) -> _Style:
    try:
        return _STYLES[style]
    except KeyError:
        raise ValueError(f"unknown style {style!r}, expected one of {sorted(_STYLES)}") from None


def _binomial(a: int, b: int, symbol: str, st: _Style) -> str:
    """a + b*symbol, dropping zero terms and unit coefficients."""
    if b == 0:
        return str(a).replace("-", st.minus)

    mag = -b if b < 0 else b
    term = symbol if mag == 1 else f"{mag}{st.coeff_sep}{symbol}"

    if a == 0:
        return f"{st.minus}{term}" if b < 0 else term

    sign = st.minus if b < 0 else "+"
    return f"{str(a).replace('-', st.minus)} {sign} {term}"


def _surd_symbol(radicand: int, st: _Style) -> str:
    if radicand == -1:
        return st.imag_unit

    return st.surd.format(str(radicand).replace("-", st.minus))


def format_quadint(x: "quadint", style: STYLES = "plain", options: Optional[FormatOptions] = None) -> str:
    """Render x in the given style."""
    st = _style(style)
    opts = options or DEFAULT_OPTIONS
    d = x.ring.radicand

    if opts.theta_notation and x.ring.has_half_integers and x.B != 0:
        A, B = x.components2()
        if d == -3:
            # omega = (-1 + sqrt(-3))/2, so A = 2m - n
            return _binomial((A + B) // 2, B, st.letters[d], st)

        return _binomial((A - B) // 2, B, st.letters.get(d, st.theta), st)

    core = _binomial(x.reg_part, x.surd_part, _surd_symbol(d, st), st)
    if x.denominator == 2:
        return st.half.format(core)

    return core


def to_string(x: "quadint", options: Optional[FormatOptions] = None) -> str:
    """Unicode rendering, e.g. 3 − 2√(−5)."""
    return format_quadint(x, "plain", options)


def to_ascii(x: "quadint", options: Optional[FormatOptions] = None) -> str:
    """ASCII rendering, e.g. 3 - 2sqrt(-5). This is also what parse() reads back."""
    return format_quadint(x, "ascii", options)


def to_tex(x: "quadint", options: Optional[FormatOptions] = None) -> str:
    """TeX rendering, e.g. 3 - 2 \\sqrt{-5}."""
    return format_quadint(x, "tex", options)


def to_html(x: "quadint", options: Optional[FormatOptions] = None) -> str:
    """HTML rendering, e.g. 3 &minus; 2&radic;(&minus;5)."""
    return format_quadint(x, "html", options)


def min_poly_string(x: "quadint", style: STYLES = "plain") -> str:
    """The minimal polynomial of x in the variable x, e.g. x^2 - 2x + 6."""
    st = _style(style)
    c0, c1, c2 = x.min_poly_coeffs()

    if c2 == 0:
        if c0 == 0:
            text = "x"
        else:
            text = f"x - {-c0}" if c0 < 0 else f"x + {c0}"
    else:
        text = "x^2"
        if c1 == -1:
            text += " - x"
        elif c1 == 1:
            text += " + x"
        elif c1 < 0:
            text += f" - {-c1}x"
        elif c1 > 0:
            text += f" + {c1}x"

        text += f" - {-c0}" if c0 < 0 else f" + {c0}"

    if style == "plain":
        return text.replace("^2", "²").replace("-", st.minus)

    if style == "html":
        return text.replace("x", "<i>x</i>").replace("^2", "<sup>2</sup>").replace("-", st.minus)

    return text


def ring_to_string(ring: "QuadraticRing", style: STYLES = "plain", options: Optional[FormatOptions] = None) -> str:
    """Render the ring's name, e.g. Z[i], Z[sqrt(2)] or O_(Q(sqrt(-7)))."""
    st = _style(style)
    opts = options or DEFAULT_OPTIONS
    d = ring.radicand

    if style == "tex":
        z, q = ("\\mathbb Z", "\\mathbb Q") if opts.blackboard_bold else ("\\mathbf Z", "\\mathbf Q")
    elif style == "html":
        z, q = ("&#x2124;", "&#x211A;") if opts.blackboard_bold else ("<b>Z</b>", "<b>Q</b>")
    else:
        z, q = "Z", "Q"

    if d == -1:
        return f"{z}[{st.imag_unit}]"

    if d in st.letters:
        return f"{z}[{st.letters[d]}]"

    surd = st.surd.format(str(d).replace("-", st.minus))
    if ring.has_half_integers:
        if style == "tex":
            return f"\\mathcal O_{{{q}({surd})}}"
        if style == "html":
            return f"<i>O</i><sub>{q}({surd})</sub>"
        return f"O_({q}({surd}))"

    return f"{z}[{surd}]"


def ring_to_ascii(ring: "QuadraticRing") -> str:
    return ring_to_string(ring, "ascii")


def ring_to_filename(ring: "QuadraticRing") -> str:
    """A short token safe to use in file names, e.g. ZI, ZPHI, OQI7, Z10."""
    d = ring.radicand
    special = {-3: "ZW", -1: "ZI", 5: "ZPHI"}
    if d in special:
        return special[d]

    prefix = "OQ" if ring.has_half_integers else "Z"
    if d < 0:
        prefix += "I"

    return f"{prefix}{abs(d)}"
