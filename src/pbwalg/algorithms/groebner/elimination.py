"""
pbwalg.algorithms.groebner.elimination
======================================

Intersection of left ideals by elimination of a central marker.

For left ideals ``I`` and ``J`` of ``A`` consider ``A[t]`` with ``t``
central and an order eliminating ``t``. Then
``I ∩ J = (t*I + (1 - t)*J) ∩ A``, and the marker-free part of a left
Groebner basis of ``t*I + (1 - t)*J`` generates the intersection.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from pbwalg.algebra.element import _PBWElement
from pbwalg.algorithms.groebner.completion import left_groebner
from pbwalg.algorithms.groebner.config import _CompletionConfig
from pbwalg.utils.log_config import logger


def _embed(f: _PBWElement, target) -> _PBWElement:
    pad = (0,) * (target.ngens - f.parent.ngens)
    return _PBWElement(target, {e + pad: c for e, c in f._coeffs.items()})


def _project(f: _PBWElement, target) -> _PBWElement:
    n = target.ngens
    return _PBWElement(target, {e[:n]: c for e, c in f._coeffs.items()})


def left_intersection(algebra, first: Sequence[_PBWElement], second: Sequence[_PBWElement],
                      config: Optional[_CompletionConfig] = None) -> List[_PBWElement]:
    """Left Groebner basis of ``A*first ∩ A*second``.

    Parameters
    ----------
    algebra : PBWAlgebra
        Algebra containing both generating sets.
    first, second : sequence of PBWElement
        Left generating sets of the two ideals.
    config : CompletionConfig, optional
        Passed to the completion in the extended algebra.
    """
    first = [f for f in first if not f.is_zero()]
    second = [g for g in second if not g.is_zero()]
    if not first or not second:
        return []

    ext = algebra._with_markers(1)
    n = algebra.ngens
    t = ext.gen(n)
    gens = [t * _embed(f, ext) for f in first]
    gens += [(1 - t) * _embed(g, ext) for g in second]

    basis = left_groebner(gens, config)
    out = [_project(g, algebra) for g in basis if g._leading()[0][n] == 0]
    logger.debug(f"Intersection: {len(basis)} elements in extension, {len(out)} marker-free")
    return out
