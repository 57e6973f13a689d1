"""Public API for the :mod:`~pbwalg.algebra` package.

This module re-exports the most frequently used classes so that users can
simply write::

>>> from pbwalg.algebra import weyl_algebra, left_ideal
"""

from .base import PBWAlgebra, pbw_algebra, weyl_algebra
from .element import ElementBuilder, PBWElement
from .ideal import (PBWIdeal, Sidedness, intersect, left_ideal, right_ideal,
                    two_sided_ideal)
from .opposite import OppositeMap, inv, opposite_algebra

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
]
