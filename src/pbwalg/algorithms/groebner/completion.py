"""
pbwalg.algorithms.groebner.completion
=====================================

Buchberger-style completion of generating sets in PBW algebras.

* :func:`left_groebner` saturates a generating set under left S-polynomials
  until left reduction against it is confluent (a left Groebner basis).
* :func:`two_sided_groebner` additionally closes the left basis under right
  multiplication by the generators. The result generates the two-sided
  ideal as a left ideal, so left reduction decides membership.

Right ideals are not handled here; they are completed as left ideals of the
opposite algebra.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from pbwalg.algebra.element import _PBWElement
from pbwalg.algorithms.groebner.config import (DEFAULT_COMPLETION,
                                               _CompletionConfig)
from pbwalg.algorithms.groebner.reduction import _Reducer
from pbwalg.algorithms.polynomial.monomial import (_divides, _find_divisor,
                                                   _lcm, _leads_block, _sub,
                                                   _to_array)
from pbwalg.algorithms.utils.exceptions import (CompletionLimitError,
                                                MismatchedAlgebra)
from pbwalg.utils.log_config import logger


def _common_parent(gens: Sequence[_PBWElement]):
    parent = None
    for g in gens:
        if parent is None:
            parent = g.parent
        elif g.parent is not parent:
            raise MismatchedAlgebra("Generators belong to different algebras.")
    return parent


def _monic(g: _PBWElement) -> _PBWElement:
    ring = g.parent.coefficient_ring
    return g._scale(ring.inv(g._leading()[1]))


def left_spoly(f: _PBWElement, g: _PBWElement) -> _PBWElement:
    """Left S-polynomial of two nonzero elements.

    Both are multiplied on the left by monomials so that their leading
    exponents reach ``lcm(lm(f), lm(g))``, then combined to cancel the
    leading term.
    """
    A = f.parent
    one = A.coefficient_ring.one
    ef, eg = f._leading()[0], g._leading()[0]
    w = _lcm(ef, eg)
    a = A._mul_terms({_sub(w, ef): one}, f._coeffs).finish()
    b = A._mul_terms({_sub(w, eg): one}, g._coeffs).finish()
    return a._scale(b._coeffs[w]) - b._scale(a._coeffs[w])


def interreduce(basis: Sequence[_PBWElement]) -> List[_PBWElement]:
    """Reduced form of a left Groebner basis.

    Drops elements whose leading exponent is divisible by another's,
    tail-reduces the rest against each other, makes them monic and sorts
    them by decreasing leading monomial.
    """
    basis = [g for g in basis if not g.is_zero()]
    if not basis:
        return []
    A = basis[0].parent
    order = A.order

    minimal: List[_PBWElement] = []
    for g in sorted(basis, key=lambda h: order.key(h._leading()[0])):
        lead = g._leading()[0]
        block = _leads_block([h._leading()[0] for h in minimal], A.ngens)
        if minimal and _find_divisor(block, _to_array(lead)) >= 0:
            continue
        minimal.append(g)

    reduced = []
    for i, g in enumerate(minimal):
        others = minimal[:i] + minimal[i + 1:]
        h = _Reducer(others).reduce(g) if others else g
        reduced.append(_monic(h))
    return sorted(reduced, key=lambda h: order.key(h._leading()[0]), reverse=True)


def _chain_redundant(i: int, j: int, w, leads, pending: set) -> bool:
    """Buchberger's chain criterion for the pair ``(i, j)`` with lcm *w*."""
    for k, lk in enumerate(leads):
        if k == i or k == j:
            continue
        if not _divides(lk, w):
            continue
        if (min(i, k), max(i, k)) not in pending and (min(j, k), max(j, k)) not in pending:
            return True
    return False


class _Budget:
    """Count of reductions shared by every stage of one completion run."""

    def __init__(self, limit: Optional[int]):
        self.limit = limit
        self.spent = 0

    def spend(self) -> None:
        self.spent += 1
        if self.limit is not None and self.spent > self.limit:
            raise CompletionLimitError(f"Completion exceeded {self.limit} S-polynomial reductions.")


def left_groebner(gens: Sequence[_PBWElement], config: Optional[_CompletionConfig] = None) -> List[_PBWElement]:
    """Left Groebner basis of the left ideal generated by *gens*.

    Parameters
    ----------
    gens : sequence of PBWElement
        Generators, all from the same algebra.
    config : CompletionConfig, optional
        Strategy switches and optional work budget.

    Returns
    -------
    list of PBWElement
        Completed generating set (reduced unless ``config.interreduce`` is
        off). ``[]`` for the zero ideal, ``[1]`` for the unit ideal.

    Raises
    ------
    UnsupportedRingOperation
        Over a coefficient ring without division.
    CompletionLimitError
        If a budget in *config* is exhausted.
    """
    config = config or DEFAULT_COMPLETION
    return _left_groebner(gens, config, _Budget(config.max_pairs))


def _left_groebner(gens: Sequence[_PBWElement], config: _CompletionConfig, budget: _Budget) -> List[_PBWElement]:
    A = _common_parent(gens)
    gens = [g for g in gens if not g.is_zero()]
    if not gens:
        return []
    A.coefficient_ring.require_division("Ideal completion")

    if any(g.is_constant() for g in gens):
        return [A.one()]

    basis: List[_PBWElement] = []
    for g in gens:
        g = _monic(g)
        if g not in basis:
            basis.append(g)

    reducer = _Reducer(basis)
    basis = reducer.basis
    leads = [g._leading()[0] for g in basis]
    pending = {(i, j) for j in range(len(basis)) for i in range(j)}
    start = budget.spent

    while pending:
        # normal selection strategy: smallest lcm first
        i, j = min(pending, key=lambda p: (A.order.key(_lcm(leads[p[0]], leads[p[1]])), p))
        pending.discard((i, j))
        w = _lcm(leads[i], leads[j])
        if config.use_chain_criterion and _chain_redundant(i, j, w, leads, pending):
            continue

        budget.spend()
        h = reducer.reduce(left_spoly(basis[i], basis[j]))
        if h.is_zero():
            continue
        if h.is_constant():
            logger.debug("Completion reached the unit ideal")
            return [A.one()]

        h = _monic(h)
        reducer.append(h)
        leads.append(h._leading()[0])
        m = len(basis) - 1
        pending.update((k, m) for k in range(m))
        if config.max_basis_size is not None and len(basis) > config.max_basis_size:
            raise CompletionLimitError(f"Generating set grew beyond {config.max_basis_size} elements.")
        logger.debug(f"Left completion: basis size {len(basis)}, {len(pending)} pairs pending")

    logger.debug(f"Left completion finished after {budget.spent - start} reductions, {len(basis)} elements")
    return interreduce(basis) if config.interreduce else basis


def two_sided_groebner(gens: Sequence[_PBWElement], config: Optional[_CompletionConfig] = None) -> List[_PBWElement]:
    """Completed generating set of the two-sided ideal generated by *gens*.

    The returned set is a left Groebner basis that is closed under right
    multiplication by every generator of the algebra, hence it generates
    the two-sided ideal already as a left ideal. ``config.max_pairs`` bounds
    the whole run: S-polynomial reductions of every round and reductions of
    right multiples are counted together.
    """
    config = config or DEFAULT_COMPLETION
    budget = _Budget(config.max_pairs)
    A = _common_parent(gens)
    basis = _left_groebner(gens, config, budget)
    if not basis:
        return []
    xs = A.gens()
    checked = set()
    rounds = 0
    while True:
        fresh = []
        reducer = _Reducer(basis)
        for g in basis:
            if g in checked:
                continue
            checked.add(g)
            for x in xs:
                budget.spend()
                h = reducer.reduce(g * x)
                if not h.is_zero():
                    fresh.append(h)
        if not fresh:
            logger.debug(f"Two-sided completion closed after {rounds} rounds, {len(basis)} elements")
            return basis
        rounds += 1
        basis = _left_groebner(basis + fresh, config, budget)
