"""
pbwalg.algorithms.polynomial.order
==================================

Admissible term orders on exponent vectors.

Every order is stored as an integer weight matrix: two exponent vectors are
compared through the vectors ``M @ a`` and ``M @ b``, lexicographically.
Lexicographic, degree-lexicographic and degree-reverse-lexicographic orders
are special matrices, and so are the derived orders used by the opposite
algebra (columns reversed) and by elimination (an extra leading block).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Sequence, Tuple, Union

import sympy as sp

from pbwalg.algorithms.utils.config import ORDER_KEY_CACHE_SIZE

Exponents = Tuple[int, ...]


class _MonomialOrder:
    """Weight-matrix term order on exponent vectors of fixed length.

    Parameters
    ----------
    rows : sequence of sequence of int
        Square integer matrix. Row ``k`` is the ``k``-th weight vector.
    name : str, default="matrix"
        Display name; informational only.
    check : bool, default=True
        Verify that the matrix defines an admissible order: full rank and
        the first nonzero entry of every column positive (so that ``1`` is
        the smallest monomial and the order is a well-order).

    Raises
    ------
    ValueError
        If the matrix is empty, not square or not admissible.
    """

    def __init__(self, rows: Sequence[Sequence[int]], name: str = "matrix", check: bool = True):
        rows = tuple(tuple(int(w) for w in row) for row in rows)
        if not rows:
            raise ValueError("A term order needs at least one generator.")
        n = len(rows[0])
        if any(len(row) != n for row in rows) or len(rows) != n:
            raise ValueError(f"Weight matrix must be square, got {len(rows)} rows of length {n}.")
        if check:
            _validate_admissible(rows)

        self._rows = rows
        self._nvars = n
        self._name = name
        # sparse rows keep key evaluation cheap for lex-like matrices
        self._sparse = tuple(
            tuple((i, w) for i, w in enumerate(row) if w != 0) for row in rows
        )
        self._keys = lru_cache(maxsize=ORDER_KEY_CACHE_SIZE)(self._weigh)

    @property
    def nvars(self) -> int:
        return self._nvars

    @property
    def name(self) -> str:
        return self._name

    @property
    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        return self._rows

    def key(self, exps: Exponents) -> Tuple[int, ...]:
        """Sort key of *exps*: larger keys are larger monomials."""
        return self._keys(exps)

    def _weigh(self, exps: Exponents) -> Tuple[int, ...]:
        return tuple(sum(w * exps[i] for i, w in row) for row in self._sparse)

    def cache_clear(self) -> None:
        """Drop memoised sort keys."""
        self._keys.cache_clear()

    def compare(self, a: Exponents, b: Exponents) -> int:
        """Return ``-1``, ``0`` or ``1`` as *a* is smaller, equal or larger than *b*."""
        ka, kb = self.key(a), self.key(b)
        if ka < kb:
            return -1
        if ka > kb:
            return 1
        return 0

    def leading(self, monomials: Iterable[Exponents]) -> Exponents:
        """Return the largest exponent vector of a non-empty iterable."""
        return max(monomials, key=self.key)

    def sort_desc(self, monomials: Iterable[Exponents]) -> list:
        """Return *monomials* sorted from largest to smallest."""
        return sorted(monomials, key=self.key, reverse=True)

    def reversed(self) -> "_MonomialOrder":
        """Order induced on reversed exponent vectors.

        ``self.reversed().key(a[::-1]) == self.key(a)``; used to transport an
        order to the opposite algebra, whose generators are indexed backwards.
        """
        rows = [row[::-1] for row in self._rows]
        return _MonomialOrder(rows, name=f"{self._name}(reversed)", check=False)

    def with_elimination_block(self, k: int) -> "_MonomialOrder":
        """Extend the order by *k* trailing variables eliminated first.

        Any monomial with a positive total degree in the new variables is
        larger than every monomial free of them. Ties inside the block are
        broken by the base order, then lexicographically in the block.
        """
        if k < 1:
            raise ValueError("Elimination block needs at least one variable.")
        n = self._nvars
        rows = [[0] * n + [1] * k]
        rows += [list(row) + [0] * k for row in self._rows]
        for j in range(k - 1):
            row = [0] * (n + k)
            row[n + j] = 1
            rows.append(row)
        return _MonomialOrder(rows, name=f"{self._name}+elim({k})", check=False)

    def __eq__(self, other) -> bool:
        if not isinstance(other, _MonomialOrder):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"MonomialOrder({self._name!r}, nvars={self._nvars})"


def _validate_admissible(rows) -> None:
    n = len(rows)
    if sp.Matrix(rows).rank() != n:
        raise ValueError("Weight matrix must have full rank to define a total order.")
    for j in range(n):
        for row in rows:
            if row[j] != 0:
                if row[j] < 0:
                    raise ValueError(
                        f"Column {j} of the weight matrix starts with a negative entry; "
                        "the order would not be a well-order."
                    )
                break


def lex(n: int) -> _MonomialOrder:
    """Lexicographic order, ``x_0 > x_1 > ... > x_{n-1}``."""
    rows = [[1 if i == j else 0 for j in range(n)] for i in range(n)]
    return _MonomialOrder(rows, name="lex", check=False)


def deglex(n: int) -> _MonomialOrder:
    """Total degree first, ties broken lexicographically."""
    rows = [[1] * n]
    rows += [[1 if i == j else 0 for j in range(n)] for i in range(n - 1)]
    return _MonomialOrder(rows, name="deglex", check=False)


def degrevlex(n: int) -> _MonomialOrder:
    """Total degree first, ties broken by the smallest last exponent."""
    rows = [[1] * n]
    for i in range(n - 1, 0, -1):
        rows.append([-1 if j == i else 0 for j in range(n)])
    return _MonomialOrder(rows, name="degrevlex", check=False)


def matrix_order(rows: Sequence[Sequence[int]], name: str = "matrix") -> _MonomialOrder:
    """User supplied weight-matrix order, checked for admissibility."""
    return _MonomialOrder(rows, name=name, check=True)


_NAMED_ORDERS = {
    "lex": lex,
    "deglex": deglex,
    "degrevlex": degrevlex,
}


def monomial_order(spec: Union[str, _MonomialOrder, Sequence[Sequence[int]]], n: int) -> _MonomialOrder:
    """Resolve an order given by name, matrix or instance for *n* generators.

    Parameters
    ----------
    spec : str or MonomialOrder or sequence of sequence of int
        Order name (``"lex"``, ``"deglex"``, ``"degrevlex"``), an existing
        order, or a weight matrix.
    n : int
        Number of generators of the algebra the order is meant for.

    Raises
    ------
    ValueError
        If the name is unknown or the order is built for a different number
        of generators.
    """
    if isinstance(spec, str):
        try:
            factory = _NAMED_ORDERS[spec.lower()]
        except KeyError:
            raise ValueError(
                f"Unknown term order {spec!r}; expected one of {sorted(_NAMED_ORDERS)}."
            ) from None
        return factory(n)
    order = spec if isinstance(spec, _MonomialOrder) else matrix_order(spec)
    if order.nvars != n:
        raise ValueError(
            f"Term order is defined for {order.nvars} generators, algebra has {n}."
        )
    return order
