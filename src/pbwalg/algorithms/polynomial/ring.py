"""
pbwalg.algorithms.polynomial.ring
=================================

Capability wrapper around a sympy domain used as coefficient ring.

Coefficients are stored as raw domain elements (``PythonMPQ``/``mpq`` for
``QQ``, ``int``/``mpz`` for ``ZZ``, ...) and combined with the native
operators; the wrapper only centralises conversion, zero tests, display and
the optional exact division.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Union

import sympy as sp
from sympy.polys.domains import QQ, ZZ
from sympy.polys.domains.domain import Domain

from pbwalg.algorithms.utils.exceptions import UnsupportedRingOperation


class _CoefficientRing:
    """Exact commutative coefficient ring backed by a sympy domain.

    Parameters
    ----------
    domain : sympy.polys.domains.domain.Domain
        The underlying domain, e.g. ``QQ``, ``ZZ`` or ``GF(p)``.
    """

    def __init__(self, domain: Domain):
        if not isinstance(domain, Domain):
            raise TypeError(f"Expected a sympy domain, got {type(domain).__name__}.")
        self._domain = domain
        self.zero = domain.zero
        self.one = domain.one

    @property
    def domain(self) -> Domain:
        return self._domain

    @property
    def has_division(self) -> bool:
        """Whether exact division by every nonzero element is available."""
        return bool(self._domain.is_Field)

    def convert(self, value: Any):
        """Convert a Python or sympy number into a domain element."""
        K = self._domain
        if isinstance(value, Fraction):
            value = sp.Rational(value.numerator, value.denominator)
        if isinstance(value, sp.Rational) and not isinstance(value, sp.Integer):
            if K.is_Field:
                return K.quo(K.convert(value.p), K.convert(value.q))
            return K.convert(value)
        return K.convert(value)

    def is_zero(self, a) -> bool:
        return not a

    def is_one(self, a) -> bool:
        return a == self.one

    def require_division(self, what: str = "this operation") -> None:
        """Raise unless the ring is a field."""
        if not self.has_division:
            raise UnsupportedRingOperation(
                f"{what} needs exact division, which the coefficient ring {self} does not provide."
            )

    def div(self, a, b):
        """Exact quotient ``a / b``."""
        self.require_division("Coefficient division")
        if not b:
            raise ZeroDivisionError("Division by zero coefficient.")
        return self._domain.quo(a, b)

    def inv(self, a):
        return self.div(self.one, a)

    def to_sympy(self, a):
        return self._domain.to_sympy(a)

    def to_str(self, a) -> str:
        return str(self._domain.to_sympy(a))

    def __eq__(self, other) -> bool:
        if not isinstance(other, _CoefficientRing):
            return NotImplemented
        return self._domain == other._domain

    def __hash__(self) -> int:
        return hash(self._domain)

    def __str__(self) -> str:
        return str(self._domain)

    def __repr__(self) -> str:
        return f"CoefficientRing({self._domain})"


_NAMED_DOMAINS = {"QQ": QQ, "ZZ": ZZ}


def coefficient_ring(ring: Union[_CoefficientRing, Domain, str]) -> _CoefficientRing:
    """Normalise a ring argument into a :class:`_CoefficientRing`."""
    if isinstance(ring, _CoefficientRing):
        return ring
    if isinstance(ring, str):
        try:
            ring = _NAMED_DOMAINS[ring]
        except KeyError:
            raise ValueError(f"Unknown coefficient ring {ring!r}; expected one of {sorted(_NAMED_DOMAINS)}.") from None
    return _CoefficientRing(ring)
