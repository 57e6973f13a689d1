import pytest
import sympy as sp

from pbwalg.algebra.base import pbw_algebra, weyl_algebra
from pbwalg.algebra.ideal import (Sidedness, left_ideal, right_ideal,
                                  two_sided_ideal)
from pbwalg.algorithms.utils.exceptions import SidednessMismatch

X, Y, Z = sp.symbols("x y z")


@pytest.fixture
def central_x():
    # x is central, z*y = y*z + 1
    return pbw_algebra("QQ", ["x", "y", "z"], [[0, X*Y, X*Z], [0, 0, Y*Z + 1], [0, 0, 0]])


@pytest.fixture
def solvable():
    return pbw_algebra("QQ", ["x", "y", "z"],
                       [[0, X*Y + Y, X*Z + Z + Y], [0, 0, Y*Z], [0, 0, 0]], "lex")


def test_product_of_left_and_right_ideals(solvable):
    R, (x, y, z) = solvable
    e1, e2 = y*z, x*y*z
    I = two_sided_ideal([e1*e2])
    P = left_ideal([e1]) * right_ideal([e2])
    assert P.sidedness is Sidedness.TWO_SIDED
    assert I == P
    Q = two_sided_ideal([e1]) * right_ideal([e2])
    assert I <= Q
    assert I != Q


def test_powers(central_x):
    R, (x, y, z) = central_x
    I = two_sided_ideal([x])
    assert I**1 is I
    assert (I**0).is_one()
    assert I**2 == two_sided_ideal([x**2])
    assert I**4 == (I**2)**2
    assert I**4 != I**2
    with pytest.raises(ValueError):
        I**-1


def test_mixed_products(central_x):
    R, (x, y, z) = central_x
    P = left_ideal([y]) * two_sided_ideal([x])
    assert P.sidedness is Sidedness.TWO_SIDED
    assert P == two_sided_ideal([y*x])
    assert x*z in two_sided_ideal([z]) * two_sided_ideal([x])


def test_products_need_compatible_sidedness():
    R, (x, y, dx, dy) = weyl_algebra("QQ", ["x", "y"])
    with pytest.raises(SidednessMismatch):
        left_ideal([dx]) * left_ideal([dy])
    with pytest.raises(SidednessMismatch):
        right_ideal([dx]) * right_ideal([dy])
    with pytest.raises(SidednessMismatch):
        right_ideal([dx]) * left_ideal([dy])
    with pytest.raises(SidednessMismatch):
        left_ideal([dx])**2


def test_product_is_associative(central_x):
    R, (x, y, z) = central_x
    L, T, Q = left_ideal([y]), two_sided_ideal([x]), right_ideal([z])
    assert (L*T)*Q == L*(T*Q)
    assert (T*T)*T == T*(T*T)
