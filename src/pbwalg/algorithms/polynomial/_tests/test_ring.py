from fractions import Fraction

import pytest
import sympy as sp
from sympy.polys.domains import GF, QQ, ZZ

from pbwalg.algorithms.polynomial.ring import coefficient_ring
from pbwalg.algorithms.utils.exceptions import UnsupportedRingOperation


def test_named_rings():
    assert coefficient_ring("QQ").domain == QQ
    assert coefficient_ring("ZZ").domain == ZZ
    assert coefficient_ring(QQ) == coefficient_ring("QQ")
    with pytest.raises(ValueError):
        coefficient_ring("RR")


def test_rational_conversion():
    K = coefficient_ring(QQ)
    half = K.convert(Fraction(1, 2))
    assert K.to_sympy(half) == sp.Rational(1, 2)
    assert K.convert(sp.Rational(1, 2)) == half
    assert K.to_str(half) == "1/2"
    assert K.is_one(half + half)
    assert K.is_zero(half - half)


def test_division_over_field():
    K = coefficient_ring(QQ)
    assert K.has_division
    assert K.div(K.convert(3), K.convert(6)) == K.convert(Fraction(1, 2))
    with pytest.raises(ZeroDivisionError):
        K.div(K.one, K.zero)


def test_integers_have_no_division():
    K = coefficient_ring(ZZ)
    assert not K.has_division
    with pytest.raises(UnsupportedRingOperation):
        K.div(K.convert(4), K.convert(2))
    with pytest.raises(UnsupportedRingOperation):
        K.require_division("Left reduction")


def test_finite_field_inverse():
    K = coefficient_ring(GF(7))
    half = K.convert(sp.Rational(1, 2))
    assert K.is_one(half * K.convert(2))
    assert K.is_one(K.inv(K.convert(3)) * K.convert(3))
