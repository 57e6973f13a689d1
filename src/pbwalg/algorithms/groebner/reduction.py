"""
pbwalg.algorithms.groebner.reduction
====================================

Left reduction of PBW elements against a generating set.

A term ``c * x^e`` is reducible by ``g`` when the leading exponent of ``g``
divides ``e`` componentwise; the reducer is the left multiple
``x^(e - lm(g)) * g``, whose leading exponent is exactly ``e`` in a PBW
algebra.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from pbwalg.algebra.element import _PBWElement
from pbwalg.algorithms.polynomial.monomial import (_find_divisor, _leads_block,
                                                   _sub, _to_array)


class _Reducer:
    """Generating set prepared for repeated left reductions.

    Parameters
    ----------
    basis : sequence of PBWElement
        Nonzero elements of a common algebra.
    """

    def __init__(self, basis: Sequence[_PBWElement]):
        self.basis = list(basis)
        self._leads = [g._leading() for g in self.basis]
        n = self.basis[0].parent.ngens if self.basis else 0
        self._block = _leads_block([e for e, _ in self._leads], n)

    def append(self, g: _PBWElement) -> None:
        lead = g._leading()
        self.basis.append(g)
        self._leads.append(lead)
        row = np.asarray([lead[0]], dtype=np.int64)
        if self._block.shape[0] == 0:
            self._block = np.ascontiguousarray(row)
        else:
            self._block = np.ascontiguousarray(np.vstack((self._block, row)))

    def divisor(self, exps) -> int:
        if not self.basis:
            return -1
        return int(_find_divisor(self._block, _to_array(exps)))

    def reduce(self, f: _PBWElement, full: bool = True) -> _PBWElement:
        """Left normal form of *f*.

        With ``full=False`` only the leading term is reduced repeatedly and the
        remaining terms are returned untouched.
        """
        A = f.parent
        ring = A.coefficient_ring
        order = A.order
        zero = ring.zero
        one = ring.one

        p = dict(f._coeffs)
        out = {}
        while p:
            e = order.leading(p)
            c = p[e]
            idx = self.divisor(e)
            if idx < 0:
                if not full:
                    out.update(p)
                    break
                out[e] = c
                del p[e]
                continue

            g = self.basis[idx]
            ge = self._leads[idx][0]
            t = A._mul_terms({_sub(e, ge): one}, g._coeffs).finish()._coeffs
            q = ring.div(c, t[e])
            for te, tv in t.items():
                v = p.get(te, zero) - q * tv
                if v:
                    p[te] = v
                else:
                    p.pop(te, None)
        return _PBWElement(A, out)


def left_normal_form(f: _PBWElement, basis: Sequence[_PBWElement], full: bool = True) -> _PBWElement:
    """Reduce *f* by left multiples of *basis* until no term is reducible.

    Parameters
    ----------
    f : PBWElement
        Element to reduce.
    basis : sequence of PBWElement
        Reducers; zero elements are ignored.
    full : bool, default=True
        Reduce every term, not only the leading one.

    Returns
    -------
    PBWElement
        Remainder. When *basis* is a left Groebner basis the remainder is
        zero exactly when *f* lies in the left ideal it generates.

    Raises
    ------
    UnsupportedRingOperation
        If reduction is attempted over a coefficient ring without division.
    """
    if f.is_zero():
        return f
    basis = [g for g in basis if not g.is_zero()]
    if not basis:
        return f
    f.parent.coefficient_ring.require_division("Left reduction")
    return _Reducer(basis).reduce(f, full=full)
