"""
pbwalg.algorithms.polynomial.monomial
=====================================

Helpers for exponent vectors of ordered (PBW) monomials.

Monomials are plain tuples of non-negative ints so that they can be used as
dictionary keys. Bulk divisibility searches against a whole generating set
go through Numba kernels working on a 2-D ``int64`` block of leading
exponents.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
from numba import njit

from pbwalg.algorithms.utils.config import FASTMATH

Exponents = Tuple[int, ...]


@njit(fastmath=FASTMATH, cache=True)
def _find_divisor(leads: np.ndarray, exps: np.ndarray) -> int:
    """Index of the first row of *leads* dividing *exps*, or ``-1``.

    Parameters
    ----------
    leads : numpy.ndarray
        ``(n_basis, n_vars)`` block of leading exponents.
    exps : numpy.ndarray
        Exponent vector to be divided.
    """
    n_rows, n_vars = leads.shape
    for i in range(n_rows):
        ok = True
        for k in range(n_vars):
            if leads[i, k] > exps[k]:
                ok = False
                break
        if ok:
            return i
    return -1


def _to_array(exps: Exponents) -> np.ndarray:
    return np.asarray(exps, dtype=np.int64)


def _leads_block(monomials: Sequence[Exponents], n_vars: int) -> np.ndarray:
    """Stack exponent tuples into a contiguous ``int64`` block."""
    if not monomials:
        return np.zeros((0, n_vars), dtype=np.int64)
    return np.ascontiguousarray(np.array(monomials, dtype=np.int64).reshape(len(monomials), n_vars))


def _divides(a: Exponents, b: Exponents) -> bool:
    return all(x <= y for x, y in zip(a, b))


def _add(a: Exponents, b: Exponents) -> Exponents:
    return tuple(x + y for x, y in zip(a, b))


def _sub(a: Exponents, b: Exponents) -> Exponents:
    return tuple(x - y for x, y in zip(a, b))


def _lcm(a: Exponents, b: Exponents) -> Exponents:
    return tuple(x if x >= y else y for x, y in zip(a, b))


def _unit(i: int, n: int) -> Exponents:
    return tuple(1 if k == i else 0 for k in range(n))


def _one(n: int) -> Exponents:
    return (0,) * n


def _first_nonzero(exps: Exponents) -> int:
    """Smallest generator index occurring in *exps*, ``len(exps)`` for ``1``."""
    for k, e in enumerate(exps):
        if e:
            return k
    return len(exps)


def _last_nonzero(exps: Exponents) -> int:
    """Largest generator index occurring in *exps*, ``-1`` for ``1``."""
    for k in range(len(exps) - 1, -1, -1):
        if exps[k]:
            return k
    return -1


def _bump(exps: Exponents, i: int, delta: int) -> Exponents:
    out = list(exps)
    out[i] += delta
    return tuple(out)
