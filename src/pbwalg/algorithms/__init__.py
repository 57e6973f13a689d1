""" Public API for the :mod:`~pbwalg.algorithms` package.
"""

from .polynomial.order import _MonomialOrder as MonomialOrder
from .polynomial.order import (degrevlex, deglex, lex, matrix_order,
                               monomial_order)
from .polynomial.ring import _CoefficientRing as CoefficientRing
from .polynomial.ring import coefficient_ring

__all__ = [
    "MonomialOrder",
    "CoefficientRing",
    "coefficient_ring",
    "lex",
    "deglex",
    "degrevlex",
    "matrix_order",
    "monomial_order",
]
