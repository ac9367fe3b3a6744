import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from shamir_recover.errors import ZeroDenominatorError
from shamir_recover.fraction import ZERO, Fraction, gcd

ints = st.integers(min_value=-(10**6), max_value=10**6)
nonzero = ints.filter(lambda v: v != 0)
fractions = st.builds(Fraction, ints, nonzero)


def test_gcd_basics():
    assert gcd(12, 18) == 6
    assert gcd(-12, 18) == 6
    assert gcd(7, 0) == 7
    assert gcd(0, 7) == 7
    assert gcd(0, 0) == 0


@given(a=ints, b=ints)
def test_gcd_matches_math_gcd(a, b):
    assert gcd(a, b) == math.gcd(a, b)


def test_construction_normalises_sign_and_terms():
    f = Fraction(6, -8)
    assert (f.numerator, f.denominator) == (-3, 4)
    assert Fraction(-6, -8) == Fraction(3, 4)
    assert Fraction(0, -5) == ZERO
    assert Fraction(5).denominator == 1


def test_zero_denominator_is_rejected():
    with pytest.raises(ZeroDenominatorError):
        Fraction(1, 0)
    with pytest.raises(ZeroDivisionError):
        Fraction(0, 0)


@given(num=ints)
def test_any_zero_denominator_is_rejected(num):
    with pytest.raises(ZeroDenominatorError):
        Fraction(num, 0)


@given(f=fractions)
def test_stored_in_lowest_terms(f):
    assert f.denominator > 0
    assert gcd(f.numerator, f.denominator) == 1


@given(a=fractions, b=fractions)
def test_add_matches_float_approximation(a, b):
    result = Fraction.add(a, b)
    assert result.denominator > 0
    assert gcd(result.numerator, result.denominator) == 1
    expected = a.numerator / a.denominator + b.numerator / b.denominator
    assert math.isclose(float(result), expected, rel_tol=1e-9, abs_tol=1e-9)


@given(a=fractions, b=fractions)
def test_multiply_matches_float_approximation(a, b):
    result = Fraction.multiply(a, b)
    assert result.denominator > 0
    assert gcd(result.numerator, result.denominator) == 1
    expected = (a.numerator / a.denominator) * (b.numerator / b.denominator)
    assert math.isclose(float(result), expected, rel_tol=1e-9, abs_tol=1e-9)


def test_operators_accept_ints():
    half = Fraction(1, 2)
    assert half + half == Fraction(1)
    assert half + 1 == Fraction(3, 2)
    assert 2 * half == Fraction(1)
    assert half * 3 == Fraction(3, 2)


def test_operators_reject_other_types():
    with pytest.raises(TypeError):
        Fraction(1, 2) + 0.5
    with pytest.raises(TypeError):
        Fraction(1, 2) * "2"


def test_fraction_is_immutable():
    f = Fraction(1, 3)
    with pytest.raises(AttributeError):
        f.numerator = 2


def test_large_values_stay_exact():
    big = 2**521 - 1
    f = Fraction(big * 3, 3)
    assert f.is_integer()
    assert int(f) == big
    assert Fraction.add(Fraction(1, big), Fraction(-1, big)) == ZERO


def test_int_and_str():
    assert str(Fraction(4, 2)) == "2"
    assert str(Fraction(-1, 3)) == "-1/3"
    with pytest.raises(ValueError):
        int(Fraction(1, 3))


def test_non_integer_components_are_rejected():
    with pytest.raises(TypeError):
        Fraction(0.5, 1)
    with pytest.raises(TypeError):
        Fraction(1, "2")
