import pytest

from quadint import FormatOptions, ParseError, QuadraticRing, parse, quadint as qi, to_ascii, to_string


class TestParse:
    """Tests for parse"""

    @pytest.mark.parametrize("text, expected", [
        ("7", qi(7, 0, -1)),
        ("-3i", qi(0, -3, -1)),
        ("i", qi(0, 1, -1)),
        ("-i", qi(0, -1, -1)),
        ("-1 + 2sqrt(-5)", qi(-1, 2, -5)),
        ("(1 + sqrt(5))/2", qi(1, 1, 5, 2)),
        ("(-1 - 3sqrt(-7))/2", qi(-1, -3, -7, 2)),
        ("2*sqrt(3)", qi(0, 2, 3)),
        ("  4 -  sqrt(2) ", qi(4, -1, 2)),
        ("(4 + 2sqrt(3))/2", qi(2, 1, 3)),
    ])
    def test_forms(self, text, expected):
        """Accepted spellings"""
        res = parse(text)
        assert res == expected
        assert res.ring == expected.ring or res.algebraic_degree() < 2

    def test_unicode(self):
        """The Unicode minus and root signs are accepted"""
        assert parse("3 − 2√(−5)") == qi(3, -2, -5)

    def test_ring_hint(self):
        """Rationals are placed in the hinted ring"""
        assert parse("7").ring == QuadraticRing(-1)
        assert parse("7", 3).ring == QuadraticRing(3)
        assert parse("-7", QuadraticRing(-2)).ring == QuadraticRing(-2)
        assert parse("1 + sqrt(3)", 3) == qi(1, 1, 3)

    def test_round_trip(self):
        """parse reads back what to_ascii writes"""
        values = [qi(-1, 2, -5), qi(1, 1, 5, 2), qi(0, -3, -1), qi(12, 0, 7), qi(-5, 7, -7, 2), qi(0, 1, 2)]
        for x in values:
            assert parse(to_ascii(x), x.ring) == x
            assert parse(to_string(x), x.ring) == x

    @pytest.mark.parametrize("text", ["", "abc", "1 +", "sqrt()", "1 + 2 + 3", "2sqrt(3)i", "(1 + sqrt(5))"])
    def test_malformed(self, text):
        """Malformed text"""
        with pytest.raises(ParseError):
            parse(text)

    def test_conflicting_ring(self):
        """A radicand that disagrees with the ring hint"""
        with pytest.raises(ParseError):
            parse("1 + sqrt(3)", 2)

    def test_not_an_integer(self):
        """Well formed text that doesn't describe an algebraic integer"""
        with pytest.raises(ParseError):
            parse("(1 + sqrt(3))/2")

        with pytest.raises(ParseError):
            parse("sqrt(4)")

    def test_theta_is_not_parsed(self):
        """Only the canonical ASCII form is read back"""
        with pytest.raises(ParseError):
            parse(to_ascii(qi.phi(1, 1), FormatOptions(theta_notation=True)))

    def test_is_value_error(self):
        """ParseError can be caught as a ValueError"""
        with pytest.raises(ValueError):
            parse("x")
