import pytest
import sympy

from quadint import (
    AlgebraicDegreeOverflowError,
    UnsupportedDomainError,
    quadint as qi,
    quarticint,
    zeta8int,
    zeta12int,
)


class gaussianonlyint(zeta8int):
    """Z[zeta_8] that only converts through Z[i], leaving sqrt(2) and sqrt(-2) unsupported"""

    __slots__ = ()

    SUBRINGS = {-1: (0, 0, 1, 0)}


def to_sympy(x: quarticint) -> sympy.Expr:
    z = sympy.exp(2 * sympy.pi * sympy.I / x.ORDER)
    return sum(coeff * z ** k for k, coeff in enumerate(x))


class QuarticTests:
    """Support methods for testing quarticint"""

    def setup_method(self, _):
        """Setup some test data"""
        self.z8 = zeta8int(0, 1, 0, 0)
        self.z12 = zeta12int(0, 1, 0, 0)

    @staticmethod
    def assert_equal(res: sympy.Expr, res_int: quarticint):
        """Validate the quarticint is equal to the validation object, and that it is still backed by integers"""
        assert sympy.simplify(sympy.expand_complex(res - to_sympy(res_int))) == 0

        for coeff in res_int:
            assert isinstance(coeff, int)


class TestArithmetic(QuarticTests):
    """Tests for +, - and *"""

    def test_powers_of_zeta8(self):
        """zeta_8^2 = i and zeta_8^4 = -1"""
        i = self.z8 * self.z8
        assert i == zeta8int(0, 0, 1, 0)
        assert i * i == -1
        assert i * i * i * i == 1

    def test_powers_of_zeta12(self):
        """zeta_12^3 = i and zeta_12^6 = -1"""
        i = self.z12 * self.z12 * self.z12
        assert i == zeta12int(0, 0, 0, 1)
        assert i * i == -1

    def test_mul(self):
        """Products agree with sympy"""
        x, y = zeta8int(1, 2, -3, 4), zeta8int(-2, 0, 5, 1)
        self.assert_equal(to_sympy(x) * to_sympy(y), x * y)

        x, y = zeta12int(3, -1, 2, 2), zeta12int(0, 4, -1, 1)
        self.assert_equal(to_sympy(x) * to_sympy(y), x * y)

    def test_add_sub(self):
        """Coordinate-wise sums, with ints on either side"""
        x = zeta8int(1, 2, 3, 4)
        assert x + zeta8int(1, 1, 1, 1) == zeta8int(2, 3, 4, 5)
        assert x - 1 == zeta8int(0, 2, 3, 4)
        assert 1 - x == zeta8int(0, -2, -3, -4)
        assert 2 + x == zeta8int(3, 2, 3, 4)
        assert 3 * x == zeta8int(3, 6, 9, 12)
        assert -x == zeta8int(-1, -2, -3, -4)

    def test_mixed_classes(self):
        """zeta_8 and zeta_12 numbers don't mix"""
        with pytest.raises(TypeError):
            self.z8 + self.z12

        assert self.z8 != zeta12int(0, 1, 0, 0)

    def test_numeric(self):
        """Numeric real and imaginary parts"""
        assert self.z8.real == pytest.approx(2 ** 0.5 / 2)
        assert self.z8.imag == pytest.approx(2 ** 0.5 / 2)
        assert self.z12.real == pytest.approx(3 ** 0.5 / 2)
        assert self.z12.imag == pytest.approx(0.5)
        assert abs(zeta8int(3, 0, 4, 0)) == pytest.approx(5.0)

    def test_hash(self):
        """Equal numbers hash equal, rationals hash like ints"""
        assert hash(zeta8int(5)) == hash(5)
        assert len({zeta8int(1, 2, 3, 4), zeta8int(1, 2, 3, 4)}) == 1

    def test_repr(self):
        """ASCII rendering"""
        assert repr(zeta8int(1, -1, 0, 2)) == "1 - zeta8 + 2zeta8^3"
        assert repr(zeta12int(0, 0, -3, 0)) == "-3zeta12^2"
        assert repr(zeta8int()) == "0"


class TestDegree(QuarticTests):
    """Tests for algebraic_degree"""

    @pytest.mark.parametrize("x, degree", [
        (zeta8int(), 0),
        (zeta8int(-4), 1),
        (zeta8int(0, 0, 1, 0), 2),
        (zeta8int(0, 1, 0, -1), 2),
        (zeta8int(3, 1, 0, 1), 2),
        (zeta8int(0, 1, 0, 0), 4),
        (zeta8int(1, 1, 0, 0), 4),
        (zeta12int(-1, 0, 2, 0), 2),
        (zeta12int(0, 1, 0, 0), 4),
    ])
    def test_degree(self, x, degree):
        """Degree agrees with the sympy minimal polynomial"""
        assert x.algebraic_degree() == degree

        if degree:
            t = sympy.Symbol("t")
            assert sympy.degree(sympy.minimal_polynomial(to_sympy(x), t), t) == degree


class TestToQuadratic(QuarticTests):
    """Tests for to_quadratic"""

    @pytest.mark.parametrize("x, expected", [
        (zeta8int(0, 0, 1, 0), qi(0, 1, -1)),
        (zeta8int(0, 1, 0, -1), qi(0, 1, 2)),
        (zeta8int(0, 1, 0, 1), qi(0, 1, -2)),
        (zeta8int(3, -2, 0, 2), qi(3, -2, 2)),
        (zeta8int(7), qi(7, 0, 2)),
        (zeta12int(0, 0, 0, 1), qi(0, 1, -1)),
        (zeta12int(0, 2, 0, -1), qi(0, 1, 3)),
        (zeta12int(-1, 0, 2, 0), qi(0, 1, -3)),
        (zeta12int(-1, 0, 1, 0), qi.omega(0, 1)),
    ])
    def test_supported(self, x, expected):
        """Numbers of supported sub-rings convert exactly"""
        res = x.to_quadratic()
        assert res == expected
        assert res.ring == expected.ring or res.algebraic_degree() < 2

    def test_degree_four(self):
        """zeta_8 itself is not a quadratic number"""
        with pytest.raises(AlgebraicDegreeOverflowError) as e:
            self.z8.to_quadratic()

        assert e.value.required_degree == 4
        assert e.value.operands == (self.z8,)

        with pytest.raises(AlgebraicDegreeOverflowError):
            zeta12int(1, 1, 0, 0).to_quadratic()

    def test_unsupported_subring(self):
        """A quadratic number of a sub-ring the class doesn't convert"""
        x = gaussianonlyint(0, 1, 0, -1)
        assert x.algebraic_degree() == 2

        with pytest.raises(UnsupportedDomainError):
            x.to_quadratic()

        assert gaussianonlyint(0, 0, 1, 0).to_quadratic() == qi(0, 1, -1)


class TestFromQuadratic(QuarticTests):
    """Tests for from_quadratic"""

    def test_embed(self):
        """Supported sub-rings embed"""
        assert zeta8int.from_quadratic(qi(3, -2, 2)) == zeta8int(3, -2, 0, 2)
        assert zeta8int.from_quadratic(qi(0, 1, -1)) == zeta8int(0, 0, 1, 0)
        assert zeta12int.from_quadratic(qi.omega(0, 1)) == zeta12int(-1, 0, 1, 0)

    def test_rationals(self):
        """Rational integers embed from any ring"""
        assert zeta8int.from_quadratic(qi(4, 0, -5)) == 4
        assert zeta12int.from_quadratic(qi(-9, 0, 7)) == -9

    def test_round_trip(self):
        """quadint -> quarticint -> quadint"""
        for cls in (zeta8int, zeta12int):
            for d in cls.SUBRINGS:
                for a in range(-3, 4):
                    for b in range(-3, 4):
                        x = qi(a, b, d)
                        assert cls.from_quadratic(x).to_quadratic() == x

        for a in range(-5, 6, 2):
            for b in range(-5, 6, 2):
                x = qi(a, b, -3, 2)
                assert zeta12int.from_quadratic(x).to_quadratic() == x

    def test_value_preserved(self):
        """The embedding is the same complex number"""
        for x in (qi(3, -2, 2), qi(1, 1, -2), qi(5, 3, -3, 2), qi(-2, 1, 3)):
            cls = zeta8int if x.ring.radicand in zeta8int.SUBRINGS else zeta12int
            y = cls.from_quadratic(x)
            assert y.real == pytest.approx(x.real)
            assert y.imag == pytest.approx(x.imag)

    def test_unsupported(self):
        """Rings that are not sub-rings are rejected"""
        with pytest.raises(UnsupportedDomainError):
            zeta8int.from_quadratic(qi.sqrt(-5))

        with pytest.raises(UnsupportedDomainError):
            zeta12int.from_quadratic(qi.sqrt(2))

        with pytest.raises(UnsupportedDomainError):
            gaussianonlyint.from_quadratic(qi.sqrt(2))
