from fractions import Fraction

import pytest
import sympy as sp
from sympy.polys.domains import QQ, ZZ

from pbwalg.algebra.base import pbw_algebra
from pbwalg.algorithms.utils.exceptions import (MismatchedAlgebra,
                                                UnsupportedRingOperation)

X, Y, Z = sp.symbols("x y z")
RELATIONS = [[0, X*Y, X*Z], [0, 0, Y*Z + 1], [0, 0, 0]]


@pytest.fixture
def algebra():
    return pbw_algebra(QQ, ["x", "y", "z"], RELATIONS, "deglex")


def test_printing(algebra):
    R, (x, y, z) = algebra
    assert str(R.zero()) == "0"
    assert str(R.one()) == "1"
    assert str(R(-2)) == "-2"
    assert str(x + y) == "x + y"
    assert str(z*y) == "y*z + 1"
    assert str(-x) == "-x"
    assert str(x/2) == "1/2*x"
    assert str(3*x**2 - y) == "3*x**2 - y"
    assert str(x**2*y - 1) == "x**2*y - 1"


def test_to_sympy(algebra):
    R, (x, y, z) = algebra
    xs, ys, zs = sp.symbols("x y z", commutative=False)
    assert (y*z).to_sympy() == ys*zs
    assert (z*y).to_sympy() == ys*zs + 1
    assert (2*x**2).to_sympy() == 2*xs**2


def test_iteration(algebra):
    R, (x, y, z) = algebra
    p = -((x*z*y)**4 - 1)
    assert R.from_terms(p.coefficients(), p.exponent_vectors()) == p
    assert sum(p.terms()) == p
    assert sum(m * c for c, m in zip(p.coefficients(), p.monomials())) == p
    assert len(p) == len(p.exponent_vectors())
    assert dict(p.iter_terms()) == {e: R.coefficient_ring.convert(c)
                                    for e, c in zip(p.exponent_vectors(), p.coefficients())}


def test_leading_data(algebra):
    R, (x, y, z) = algebra
    p = 2*x**2*y + z + 5
    assert p.leading_exponent() == (2, 1, 0)
    assert p.leading_coefficient() == 2
    assert p.leading_monomial() == x**2*y
    assert p.leading_term() == 2*x**2*y
    assert p.tail() == z + 5
    assert p.constant_coefficient() == 5
    assert p.total_degree() == 3
    assert R.zero().total_degree() == -1
    with pytest.raises(ValueError):
        R.zero().leading_exponent()


def test_builder(algebra):
    R, (x, y, z) = algebra
    ctx = R.build_ctx()
    ctx.push_term(2, [1, 0, 0]).push_term(-2, (1, 0, 0)).push_term(1, (0, 0, 1))
    assert ctx.finish() == z
    assert ctx.finish().is_zero()


def test_associativity(algebra):
    R, (x, y, z) = algebra
    elements = [x + 2*z, y*z - x**2, z**2*y + 1, x*y*z, z - y]
    for a in elements:
        for b in elements:
            for c in elements:
                assert (a*b)*c == a*(b*c)


def test_powers(algebra):
    R, (x, y, z) = algebra
    assert x**0 == 1
    assert (z*y)**2 == (z*y)*(z*y)
    assert (z + y)**3 == (z + y)*(z + y)*(z + y)
    with pytest.raises(ValueError):
        x**-1


def test_scalars(algebra):
    R, (x, y, z) = algebra
    assert x*Fraction(1, 2) == x/2
    assert 2 == R(2)
    assert R(2) != x
    assert (x + 1) - 1 == x
    assert 1 - x == -(x - 1)
    assert len({x*y, y*x, x*y + 0}) == 1
    assert (z*y).is_one() is False
    assert R.one().is_one()
    assert R(7).is_constant()


def test_integer_coefficients_have_no_division():
    R, (x, y, z) = pbw_algebra(ZZ, ["x", "y", "z"], RELATIONS)
    assert z*y == y*z + 1
    with pytest.raises(UnsupportedRingOperation):
        x / 2


def test_mixing_algebras(algebra):
    R, (x, y, z) = algebra
    S, (u, v, w) = pbw_algebra(QQ, ["x", "y", "z"], RELATIONS)
    with pytest.raises(MismatchedAlgebra):
        x + u
    with pytest.raises(MismatchedAlgebra):
        x * u
    with pytest.raises(MismatchedAlgebra):
        R(u)
    assert x != u
