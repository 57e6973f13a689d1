"""Noncommutative PBW algebras, normal forms and one-/two-sided ideals.

>>> from pbwalg import weyl_algebra, left_ideal
>>> R, (x, y, dx, dy) = weyl_algebra("QQ", ["x", "y"])
>>> y*dy in left_ideal([dy])
True
"""

from .algebra import (ElementBuilder, OppositeMap, PBWAlgebra, PBWElement,
                      PBWIdeal, Sidedness, intersect, inv, left_ideal,
                      opposite_algebra, pbw_algebra, right_ideal,
                      two_sided_ideal, weyl_algebra)
from .algorithms import (CoefficientRing, MonomialOrder, coefficient_ring,
                         deglex, degrevlex, lex, matrix_order, monomial_order)
from .algorithms.groebner.config import _CompletionConfig as CompletionConfig
from .algorithms.utils.exceptions import (CompletionLimitError,
                                          InconsistentRelations, InvalidIndex,
                                          MismatchedAlgebra, PBWError,
                                          SidednessMismatch,
                                          UnsupportedRingOperation)

__all__ = [
    "PBWAlgebra",
    "PBWElement",
    "ElementBuilder",
    "PBWIdeal",
    "Sidedness",
    "OppositeMap",
    "pbw_algebra",
    "weyl_algebra",
    "opposite_algebra",
    "inv",
    "left_ideal",
    "right_ideal",
    "two_sided_ideal",
    "intersect",
    "CoefficientRing",
    "CompletionConfig",
    "MonomialOrder",
    "coefficient_ring",
    "lex",
    "deglex",
    "degrevlex",
    "matrix_order",
    "monomial_order",
    "PBWError",
    "InconsistentRelations",
    "MismatchedAlgebra",
    "SidednessMismatch",
    "UnsupportedRingOperation",
    "InvalidIndex",
    "CompletionLimitError",
]
