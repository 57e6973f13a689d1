import pytest
from sympy.polys.domains import ZZ

from pbwalg.algebra.base import weyl_algebra
from pbwalg.algorithms.groebner.reduction import _Reducer, left_normal_form
from pbwalg.algorithms.utils.exceptions import UnsupportedRingOperation


@pytest.fixture
def weyl():
    return weyl_algebra("QQ", ["x", "y"])


def test_left_multiples_reduce_to_zero(weyl):
    R, (x, y, dx, dy) = weyl
    assert left_normal_form(y*dy, [dy]).is_zero()
    assert left_normal_form((x**2 + dx)*dy, [dy]).is_zero()


def test_right_multiples_leave_remainder(weyl):
    R, (x, y, dx, dy) = weyl
    # dy*y = y*dy + 1
    assert left_normal_form(dy*y, [dy]) == 1
    assert left_normal_form(dy*y**2, [dy]) == 2*y


def test_partial_reduction_keeps_tail(weyl):
    R, (x, y, dx, dy) = weyl
    f = x**3 + y*dx
    assert left_normal_form(f, [dx, y]) == x**3
    assert left_normal_form(f, [dx, y], full=False) == f


def test_empty_basis_and_zero(weyl):
    R, (x, y, dx, dy) = weyl
    assert left_normal_form(x + dy, []) == x + dy
    assert left_normal_form(R.zero(), [dx]).is_zero()
    assert left_normal_form(x, [R.zero()]) == x


def test_reducer_append(weyl):
    R, (x, y, dx, dy) = weyl
    reducer = _Reducer([dx])
    assert reducer.divisor((0, 1, 0, 0)) == -1
    reducer.append(y)
    assert reducer.divisor((0, 1, 0, 0)) == 1
    assert reducer.reduce(y*dx + x) == x


def test_reduction_needs_a_field():
    R, (x, dx) = weyl_algebra(ZZ, ["x"])
    with pytest.raises(UnsupportedRingOperation):
        left_normal_form(x*dx, [dx])
