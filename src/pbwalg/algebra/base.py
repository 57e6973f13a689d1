"""
pbwalg.algebra.base
===================

PBW algebras: finitely many generators subject to one swap relation
``x_j * x_i = P_ij`` per pair ``i < j``, where ``P_ij`` is a combination of
ordered monomials whose leading monomial is ``x_i * x_j``.

Elements are stored on the ordered (PBW) basis. The multiplication engine
rewrites the concatenation of two ordered monomials at its single adjacent
inversion and recurses; results are memoised per algebra.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from functools import lru_cache
from typing import Dict, List, Optional, Sequence, Tuple

import sympy as sp

from pbwalg.algebra.element import _ElementBuilder, _PBWElement
from pbwalg.algorithms.polynomial.monomial import (_add, _bump,
                                                   _first_nonzero,
                                                   _last_nonzero, _one,
                                                   _unit)
from pbwalg.algorithms.polynomial.order import _MonomialOrder, monomial_order
from pbwalg.algorithms.polynomial.ring import (_CoefficientRing,
                                               coefficient_ring)
from pbwalg.algorithms.utils.config import (CHECK_RELATIONS, DEFAULT_ORDER,
                                            PRODUCT_CACHE_SIZE)
from pbwalg.algorithms.utils.exceptions import (InconsistentRelations,
                                                InvalidIndex,
                                                MismatchedAlgebra)
from pbwalg.utils.log_config import logger

Exponents = Tuple[int, ...]
Terms = Dict[Exponents, object]


class _PBWAlgebra:
    """Noncommutative algebra with a Poincare-Birkhoff-Witt basis.

    Parameters
    ----------
    ring : CoefficientRing or sympy domain or str
        Coefficient ring (``QQ``, ``ZZ``, ``GF(p)``, ...).
    symbols : sequence of str
        Generator names; used for display only.
    relations : sequence of sequences or mapping
        Either an ``n x n`` matrix whose entry ``[i][j]`` (``i < j``) is the
        right hand side of ``x_j * x_i``, or a mapping ``{(i, j): entry}``
        where missing pairs commute. Entries are sympy expressions in
        commutative symbols named like the generators, numbers, or
        ``{exponent_tuple: coefficient}`` dicts.
    order : str or MonomialOrder, default="deglex"
        Term order on exponent vectors.
    check : bool, default=True
        Validate leading monomials and the overlap condition on every
        triple of generators. With ``check=False`` construction always
        succeeds but associativity of the resulting product is the
        caller's responsibility.

    Raises
    ------
    InconsistentRelations
        If ``check`` is enabled and the relations are not consistent.
    ValueError
        If the order does not match the number of generators.
    """

    def __init__(self, ring, symbols: Sequence[str], relations, order=DEFAULT_ORDER, check: bool = CHECK_RELATIONS):
        symbols = tuple(str(s) for s in symbols)
        if not symbols:
            raise ValueError("A PBW algebra needs at least one generator.")
        ring = coefficient_ring(ring)
        n = len(symbols)
        order = monomial_order(order, n)
        parsed = _parse_relations(ring, symbols, relations)
        self._setup(ring, symbols, parsed, order, bool(check))

        if check:
            self._check_relations()
        logger.info(
            f"PBW algebra over {ring} with {n} generators, order {order.name}, "
            f"relations {'checked' if check else 'NOT checked'}"
        )

    @classmethod
    def _from_parsed(cls, ring: _CoefficientRing, symbols, relations: Dict[Tuple[int, int], Terms],
                     order: _MonomialOrder, checked: bool) -> "_PBWAlgebra":
        """Build an algebra from relations already in internal form, without validation."""
        obj = cls.__new__(cls)
        obj._setup(ring, tuple(symbols), relations, order, checked)
        return obj

    def _setup(self, ring, symbols, relations, order, checked) -> None:
        self._ring = ring
        self._symbols = symbols
        self._ngens = len(symbols)
        self._order = order
        self._relations = relations
        self._checked = checked
        self._products = lru_cache(maxsize=PRODUCT_CACHE_SIZE)(self._rewrite_junction)
        self._lock = threading.Lock()
        self._opposite: Optional[_PBWAlgebra] = None
        self._markers: Dict[int, _PBWAlgebra] = {}

    @property
    def ngens(self) -> int:
        return self._ngens

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self._symbols

    @property
    def coefficient_ring(self) -> _CoefficientRing:
        return self._ring

    @property
    def order(self) -> _MonomialOrder:
        return self._order

    @property
    def is_checked(self) -> bool:
        """Whether the relations passed the construction-time check."""
        return self._checked

    def gens(self) -> List[_PBWElement]:
        return [self.gen(i) for i in range(self._ngens)]

    def gen(self, i: int) -> _PBWElement:
        """Generator ``x_i`` (0-based)."""
        if not isinstance(i, int) or not 0 <= i < self._ngens:
            raise InvalidIndex(f"Generator index {i} out of range [0, {self._ngens - 1}].")
        return _PBWElement(self, {_unit(i, self._ngens): self._ring.one})

    def __getitem__(self, i: int) -> _PBWElement:
        return self.gen(i)

    def zero(self) -> _PBWElement:
        return _PBWElement(self, {})

    def one(self) -> _PBWElement:
        return _PBWElement(self, {_one(self._ngens): self._ring.one})

    def monomial(self, exps: Sequence[int]) -> _PBWElement:
        """Ordered monomial ``x_0^e_0 * ... * x_{n-1}^e_{n-1}``."""
        return _PBWElement(self, {self._check_exponents(exps): self._ring.one})

    def build_ctx(self) -> _ElementBuilder:
        """Term accumulator producing an element of this algebra."""
        return _ElementBuilder(self)

    def from_terms(self, coeffs: Sequence, exps: Sequence[Sequence[int]]) -> _PBWElement:
        """Element ``sum(c * x^e)`` from parallel coefficient and exponent lists."""
        coeffs, exps = list(coeffs), list(exps)
        if len(coeffs) != len(exps):
            raise ValueError(f"Got {len(coeffs)} coefficients but {len(exps)} exponent vectors.")
        ctx = self.build_ctx()
        for c, e in zip(coeffs, exps):
            ctx.push_term(c, e)
        return ctx.finish()

    def __call__(self, value=None, exps=None) -> _PBWElement:
        if exps is not None:
            return self.from_terms(value, exps)
        if value is None:
            return self.zero()
        if isinstance(value, _PBWElement):
            if value.parent is not self:
                raise MismatchedAlgebra("Element belongs to a different algebra.")
            return value
        c = self._ring.convert(value)
        if not c:
            return self.zero()
        return _PBWElement(self, {_one(self._ngens): c})

    def relation(self, i: int, j: int) -> _PBWElement:
        """Right hand side of ``x_j * x_i`` for ``i < j``."""
        if not (0 <= i < j < self._ngens):
            raise InvalidIndex(f"Relation index ({i}, {j}) must satisfy 0 <= i < j < {self._ngens}.")
        return _PBWElement(self, dict(self._relations[(i, j)]))

    def opposite(self) -> "_PBWAlgebra":
        """Opposite algebra, built once and shared."""
        with self._lock:
            if self._opposite is None:
                from pbwalg.algebra.opposite import _build_opposite  # avoid circular import
                op = _build_opposite(self)
                op._opposite = self
                self._opposite = op
            return self._opposite

    def _with_markers(self, k: int = 1) -> "_PBWAlgebra":
        """Extension by *k* central marker generators placed after the others.

        The markers come with an elimination order: every monomial containing a
        marker is larger than every marker-free monomial.
        """
        with self._lock:
            ext = self._markers.get(k)
            if ext is None:
                n = self._ngens
                m = n + k
                rels = {}
                for (i, j), terms in self._relations.items():
                    rels[(i, j)] = {e + (0,) * k: c for e, c in terms.items()}
                for j in range(n, m):
                    for i in range(j):
                        rels[(i, j)] = {_add(_unit(i, m), _unit(j, m)): self._ring.one}
                symbols = self._symbols + tuple(f"_t{j}" for j in range(k))
                ext = _PBWAlgebra._from_parsed(self._ring, symbols, rels,
                                               self._order.with_elimination_block(k), self._checked)
                logger.debug(f"Built elimination extension with {k} marker(s) of {self!r}")
                self._markers[k] = ext
            return ext

    def _check_exponents(self, exps: Sequence[int]) -> Exponents:
        try:
            exps = tuple(int(e) for e in exps)
        except TypeError:
            raise InvalidIndex(f"Exponent vector must be a sequence of ints, got {exps!r}.") from None
        if len(exps) != self._ngens:
            raise InvalidIndex(f"Exponent vector length {len(exps)} must match number of generators {self._ngens}.")
        if any(e < 0 for e in exps):
            raise InvalidIndex(f"Exponents must be non-negative, got {exps}.")
        return exps

    def _mul_monomials(self, a: Exponents, b: Exponents) -> Terms:
        """Product of two ordered monomials as ``{exponents: coefficient}``.

        The returned mapping may be shared with the memo and must not be
        mutated by callers.
        """
        hi = _last_nonzero(a)
        lo = _first_nonzero(b)
        if hi <= lo:
            return {_add(a, b): self._ring.one}
        return self._products(a, b, hi, lo)

    def _rewrite_junction(self, a: Exponents, b: Exponents, hi: int, lo: int) -> Terms:
        # a * b = a' * (x_hi * x_lo) * b' with x_hi * x_lo = P[lo, hi]
        a_rest = _bump(a, hi, -1)
        b_rest = _bump(b, lo, -1)
        zero = self._ring.zero
        acc: Terms = {}
        for t, c in self._relations[(lo, hi)].items():
            for t2, c2 in self._mul_monomials(t, b_rest).items():
                c12 = c * c2
                for t3, c3 in self._mul_monomials(a_rest, t2).items():
                    acc[t3] = acc.get(t3, zero) + c12 * c3
        return {e: c for e, c in acc.items() if c}

    def cache_clear(self) -> None:
        """Drop memoised monomial products; results are recomputed on demand."""
        self._products.cache_clear()

    def _mul_terms(self, left: Terms, right: Terms, ctx: Optional[_ElementBuilder] = None) -> _ElementBuilder:
        """Accumulate the bilinear product of two term mappings into *ctx*."""
        if ctx is None:
            ctx = _ElementBuilder(self)
        for e1, c1 in left.items():
            for e2, c2 in right.items():
                c12 = c1 * c2
                for e, c in self._mul_monomials(e1, e2).items():
                    ctx._push_raw(c12 * c, e)
        return ctx

    def _check_relations(self) -> None:
        n = self._ngens
        one = self._ring.one
        for (i, j), terms in sorted(self._relations.items()):
            target = _add(_unit(i, n), _unit(j, n))
            if not terms or self._order.leading(terms) != target:
                msg = (f"Relation {self._symbols[j]}*{self._symbols[i]} must have leading monomial "
                       f"{self._symbols[i]}*{self._symbols[j]} under {self._order.name}.")
                logger.warning(msg)
                raise InconsistentRelations(msg, (i, j))

        for k in range(n):
            xk = {_unit(k, n): one}
            for j in range(k):
                xj = {_unit(j, n): one}
                for i in range(j):
                    xi = {_unit(i, n): one}
                    left = self._mul_terms(self._mul_terms(xk, xj).finish()._coeffs, xi).finish()
                    right = self._mul_terms(xk, self._mul_terms(xj, xi).finish()._coeffs).finish()
                    if left != right:
                        names = "*".join(self._symbols[t] for t in (k, j, i))
                        msg = (f"Relations are not consistent: ({names}) reduces to {left} when the "
                               f"left pair is rewritten first but to {right} otherwise.")
                        logger.warning(msg)
                        raise InconsistentRelations(msg, (i, j, k))

    def __eq__(self, other) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __str__(self) -> str:
        return (f"PBW algebra over {self._ring} in {', '.join(self._symbols)} "
                f"with {len(self._relations)} relations ({self._order.name})")

    def __repr__(self) -> str:
        return f"PBWAlgebra({self._ngens} gens, {self._ring}, {self._order.name})"


def _parse_relations(ring: _CoefficientRing, symbols: Tuple[str, ...], relations) -> Dict[Tuple[int, int], Terms]:
    n = len(symbols)
    comm = [sp.Symbol(s) for s in symbols]
    pairs = {}
    if isinstance(relations, Mapping):
        for key, entry in relations.items():
            i, j = key
            if not (0 <= i < j < n):
                raise InvalidIndex(f"Relation key ({i}, {j}) must satisfy 0 <= i < j < {n}.")
            pairs[(i, j)] = entry
        for j in range(n):
            for i in range(j):
                pairs.setdefault((i, j), {_add(_unit(i, n), _unit(j, n)): 1})
    else:
        rows = list(relations)
        if len(rows) != n or any(len(row) != n for row in rows):
            raise ValueError(f"Relation matrix must be {n} x {n}.")
        for j in range(n):
            for i in range(j):
                pairs[(i, j)] = rows[i][j]

    return {key: _relation_terms(ring, comm, n, entry) for key, entry in pairs.items()}


def _relation_terms(ring: _CoefficientRing, comm, n: int, entry) -> Terms:
    if isinstance(entry, _PBWElement):
        if entry.parent.ngens != n:
            raise ValueError("Relation entry lives in an algebra with a different number of generators.")
        raw = entry.parent.coefficient_ring
        return {e: ring.convert(raw.to_sympy(c)) for e, c in entry._coeffs.items()}
    if isinstance(entry, Mapping):
        out = {}
        for e, c in entry.items():
            e = tuple(int(x) for x in e)
            if len(e) != n or any(x < 0 for x in e):
                raise InvalidIndex(f"Invalid exponent vector {e} in relation.")
            c = ring.convert(c)
            if c:
                out[e] = out.get(e, ring.zero) + c
        return {e: c for e, c in out.items() if c}
    poly = sp.Poly(sp.sympify(entry), *comm, domain=ring.domain)
    return {tuple(e): ring.convert(c) for e, c in poly.terms() if c}


PBWAlgebra = _PBWAlgebra


def pbw_algebra(ring, symbols: Sequence[str], relations, order=DEFAULT_ORDER, check: bool = CHECK_RELATIONS):
    """Build a PBW algebra and return it together with its generators.

    Examples
    --------
    >>> import sympy as sp
    >>> x, y, z = sp.symbols("x y z")
    >>> R, (x, y, z) = pbw_algebra("QQ", ["x", "y", "z"],
    ...                            [[0, x*y, x*z], [0, 0, y*z + 1], [0, 0, 0]])
    >>> str(z*y)
    'y*z + 1'
    """
    algebra = _PBWAlgebra(ring, symbols, relations, order=order, check=check)
    return algebra, algebra.gens()


def weyl_algebra(ring, names: Sequence[str], order=DEFAULT_ORDER):
    """Weyl algebra in ``x_1..x_n, dx_1..dx_n`` with ``dx_i*x_i = x_i*dx_i + 1``.

    Returns
    -------
    tuple
        ``(algebra, [x_1, ..., x_n, dx_1, ..., dx_n])``.
    """
    names = [str(s) for s in names]
    n = len(names)
    if n == 0:
        raise ValueError("Weyl algebra needs at least one variable.")
    symbols = names + ["d" + s for s in names]
    m = 2 * n
    relations = {}
    for i in range(n):
        e = _add(_unit(i, m), _unit(n + i, m))
        relations[(i, n + i)] = {e: 1, _one(m): 1}
    algebra = _PBWAlgebra(ring, symbols, relations, order=order, check=True)
    return algebra, algebra.gens()
