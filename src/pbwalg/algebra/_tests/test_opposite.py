import pytest
import sympy as sp

from pbwalg.algebra.base import pbw_algebra, weyl_algebra
from pbwalg.algebra.ideal import Sidedness, left_ideal, right_ideal
from pbwalg.algebra.opposite import inv, opposite_algebra
from pbwalg.algorithms.utils.exceptions import MismatchedAlgebra


@pytest.fixture
def weyl():
    return weyl_algebra("QQ", ["x", "y"])


def test_opposite_algebra(weyl):
    R, (x, y, dx, dy) = weyl
    opR, M = opposite_algebra(R)
    assert opR.symbols == ("dy", "dx", "y", "x")
    assert R.opposite() is opR
    assert opR.opposite() is R
    assert M.domain is R
    assert M.codomain is opR
    assert M(x).parent is opR


def test_map_reverses_products(weyl):
    R, (x, y, dx, dy) = weyl
    opR, M = opposite_algebra(R)
    assert M(dy*dx*x*y) == M(y)*M(x)*M(dx)*M(dy)
    gens = R.gens()
    for a in gens + [x*dx + y, dy**2 - 1]:
        for b in gens + [x*dx + y, dy**2 - 1]:
            assert M(a*b) == M(b)*M(a)


def test_inverse(weyl):
    R, (x, y, dx, dy) = weyl
    opR, M = opposite_algebra(R)
    assert inv(M)(M(x)) == x
    assert (~M)(M(dx*x + y)) == dx*x + y
    assert inv(M).codomain is R
    assert M(3) == opR(3)
    assert M([x, dx]) == [M(x), M(dx)]
    with pytest.raises(MismatchedAlgebra):
        M(M(x))


def test_opposite_of_general_algebra():
    X, Y, Z = sp.symbols("x y z")
    R, (x, y, z) = pbw_algebra("QQ", ["x", "y", "z"],
                               [[0, X*Y + Y, X*Z + Z + Y], [0, 0, Y*Z], [0, 0, 0]], "lex")
    opR, M = opposite_algebra(R)
    elements = [x + z, y*z, x*y - z, z**2]
    for a in elements:
        for b in elements:
            assert M(a*b) == M(b)*M(a)
            for c in elements:
                assert (M(a)*M(b))*M(c) == M(a)*(M(b)*M(c))


def test_map_on_ideals(weyl):
    R, (x, y, dx, dy) = weyl
    opR, M = opposite_algebra(R)
    g = [x*dy + 1, dx**2]
    I = left_ideal(g)
    image = M(I)
    assert image.base_ring is opR
    assert image.sidedness is Sidedness.RIGHT
    assert image == right_ideal(M(g))
    assert inv(M)(image) is I
    with pytest.raises(MismatchedAlgebra):
        M(image)
