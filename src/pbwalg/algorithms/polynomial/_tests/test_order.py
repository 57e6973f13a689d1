import pytest

from pbwalg.algorithms.polynomial.order import (deglex, degrevlex, lex,
                                                matrix_order, monomial_order)
from pbwalg.algorithms.utils.config import ORDER_KEY_CACHE_SIZE


def test_lex_compares_leftmost_exponent_first():
    order = lex(2)
    assert order.compare((1, 0), (0, 5)) == 1
    assert order.compare((0, 5), (1, 0)) == -1
    assert order.compare((2, 3), (2, 3)) == 0


def test_deglex_compares_degree_first():
    order = deglex(2)
    assert order.compare((0, 2), (1, 0)) == 1
    assert order.compare((1, 1), (0, 2)) == 1
    assert order.leading([(0, 1), (1, 0), (0, 0)]) == (1, 0)


def test_degrevlex_differs_from_deglex():
    xz, y2 = (1, 0, 1), (0, 2, 0)
    assert deglex(3).compare(xz, y2) == 1
    assert degrevlex(3).compare(xz, y2) == -1


def test_one_is_smallest():
    for order in (lex(3), deglex(3), degrevlex(3)):
        for e in [(1, 0, 0), (0, 1, 0), (0, 0, 1), (2, 1, 0)]:
            assert order.compare((0, 0, 0), e) == -1


def test_sort_desc():
    order = deglex(2)
    assert order.sort_desc([(0, 0), (1, 0), (0, 2), (1, 1)]) == [(1, 1), (0, 2), (1, 0), (0, 0)]


def test_key_cache_is_bounded():
    order = deglex(2)
    assert order._keys.cache_info().maxsize == ORDER_KEY_CACHE_SIZE
    order.cache_clear()
    order.sort_desc([(0, 0), (1, 0), (0, 2)])
    assert order._keys.cache_info().currsize == 3
    order.cache_clear()
    assert order._keys.cache_info().currsize == 0
    assert order.compare((0, 2), (1, 0)) == 1


def test_matrix_order_validation():
    order = matrix_order([[1, 1], [0, 1]])
    assert order.compare((0, 1), (1, 0)) == 1

    with pytest.raises(ValueError):
        matrix_order([[1, 1], [1, 1]])
    with pytest.raises(ValueError):
        matrix_order([[-1, 0], [0, 1]])
    with pytest.raises(ValueError):
        matrix_order([[1, 0, 0], [0, 1, 0]])


def test_monomial_order_resolution():
    assert monomial_order("deglex", 3).name == "deglex"
    assert monomial_order("LEX", 2) == lex(2)
    assert monomial_order([[1, 0], [0, 1]], 2) == lex(2)

    with pytest.raises(ValueError):
        monomial_order("revlex", 2)
    with pytest.raises(ValueError):
        monomial_order(lex(2), 3)


def test_reversed_order_matches_reversed_exponents():
    order = deglex(3)
    rev = order.reversed()
    monomials = [(1, 0, 2), (0, 3, 0), (2, 1, 0), (0, 0, 3), (1, 1, 1)]
    for a in monomials:
        for b in monomials:
            assert rev.compare(a[::-1], b[::-1]) == order.compare(a, b)


def test_elimination_block():
    order = deglex(2).with_elimination_block(1)
    assert order.nvars == 3
    assert order.compare((0, 0, 1), (5, 5, 0)) == 1
    # marker-free monomials keep the base order
    assert order.compare((1, 0, 0), (0, 1, 0)) == deglex(2).compare((1, 0), (0, 1))
    with pytest.raises(ValueError):
        deglex(2).with_elimination_block(0)
