"""
pbwalg.algebra.element
======================

Elements of a PBW algebra stored as sparse ``{exponents: coefficient}``
dictionaries on the ordered monomial basis, plus the term accumulator used
to assemble them.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

import sympy as sp
from sympy.polys.polyerrors import CoercionFailed

from pbwalg.algorithms.utils.exceptions import MismatchedAlgebra

Exponents = Tuple[int, ...]


class _ElementBuilder:
    """Write-only accumulator of ``(coefficient, exponents)`` contributions.

    Terms are summed as they arrive; :meth:`finish` drops cancelled terms and
    returns the element, after which the builder is empty and can be reused.
    """

    def __init__(self, parent):
        self._parent = parent
        self._terms: Dict[Exponents, object] = {}

    def push_term(self, coeff, exps) -> "_ElementBuilder":
        """Add ``coeff * x^exps``; exponents are validated, coefficients converted."""
        e = self._parent._check_exponents(exps)
        self._push_raw(self._parent.coefficient_ring.convert(coeff), e)
        return self

    def _push_raw(self, coeff, exps: Exponents) -> None:
        if coeff:
            terms = self._terms
            if exps in terms:
                terms[exps] = terms[exps] + coeff
            else:
                terms[exps] = coeff

    def finish(self) -> "_PBWElement":
        terms = {e: c for e, c in self._terms.items() if c}
        self._terms = {}
        return _PBWElement(self._parent, terms)


class _PBWElement:
    """Element of a PBW algebra.

    Every stored coefficient is nonzero and every key is the exponent vector
    of an ordered monomial ``x_0^e_0 * ... * x_{n-1}^e_{n-1}``. Instances are
    immutable; arithmetic always returns new elements.

    Create elements through their algebra (``A.gens()``, ``A(3)``,
    ``A.from_terms(...)``, ``A.build_ctx()``) rather than directly.
    """

    __slots__ = ("_parent", "_coeffs")

    def __init__(self, parent, coeffs: Dict[Exponents, object]):
        self._parent = parent
        self._coeffs = coeffs

    @property
    def parent(self):
        return self._parent

    def _ring(self):
        return self._parent.coefficient_ring

    def _coerce(self, other):
        if isinstance(other, _PBWElement):
            if other._parent is not self._parent:
                raise MismatchedAlgebra("Cannot combine elements of different algebras.")
            return other
        try:
            c = self._ring().convert(other)
        except (CoercionFailed, TypeError, ValueError):
            return None
        if not c:
            return _PBWElement(self._parent, {})
        return _PBWElement(self._parent, {(0,) * self._parent.ngens: c})

    def _scalar(self, other):
        """Coefficient-ring element for *other*, or ``None`` if *other* is not a scalar."""
        if isinstance(other, _PBWElement):
            return None
        try:
            return self._ring().convert(other)
        except (CoercionFailed, TypeError, ValueError):
            return None

    def _scale(self, c) -> "_PBWElement":
        if not c:
            return _PBWElement(self._parent, {})
        return _PBWElement(self._parent, {e: v * c for e, v in self._coeffs.items() if v * c})

    def _leading(self) -> Tuple[Exponents, object]:
        e = self._parent.order.leading(self._coeffs)
        return e, self._coeffs[e]

    def __len__(self) -> int:
        """Number of terms."""
        return len(self._coeffs)

    def __add__(self, other) -> "_PBWElement":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        result = dict(self._coeffs)
        for e, c in other._coeffs.items():
            v = result.get(e)
            if v is None:
                result[e] = c
            else:
                v = v + c
                if v:
                    result[e] = v
                else:
                    del result[e]
        return _PBWElement(self._parent, result)

    def __radd__(self, other) -> "_PBWElement":
        return self.__add__(other)

    def __neg__(self) -> "_PBWElement":
        return _PBWElement(self._parent, {e: -c for e, c in self._coeffs.items()})

    def __sub__(self, other) -> "_PBWElement":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.__add__(-other)

    def __rsub__(self, other) -> "_PBWElement":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.__add__(-self)

    def __mul__(self, other) -> "_PBWElement":
        c = self._scalar(other)
        if c is not None:
            return self._scale(c)
        if not isinstance(other, _PBWElement):
            return NotImplemented
        if other._parent is not self._parent:
            raise MismatchedAlgebra("Cannot multiply elements of different algebras.")
        if not self._coeffs or not other._coeffs:
            return _PBWElement(self._parent, {})
        return self._parent._mul_terms(self._coeffs, other._coeffs).finish()

    def __rmul__(self, other) -> "_PBWElement":
        # scalars are central
        c = self._scalar(other)
        if c is None:
            return NotImplemented
        return self._scale(c)

    def __truediv__(self, other) -> "_PBWElement":
        c = self._scalar(other)
        if c is None:
            return NotImplemented
        return self._scale(self._ring().inv(c))

    def __pow__(self, exponent: int) -> "_PBWElement":
        if not isinstance(exponent, int) or exponent < 0:
            raise ValueError("Exponent must be a non-negative integer")
        result = self._parent.one()
        base = self
        while exponent > 0:
            if exponent % 2 == 1:
                result = result * base
            exponent //= 2
            if exponent:
                base = base * base
        return result

    def __eq__(self, other) -> bool:
        if isinstance(other, _PBWElement):
            return self._parent is other._parent and self._coeffs == other._coeffs
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._coeffs == other._coeffs

    def __ne__(self, other) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __hash__(self) -> int:
        return hash((id(self._parent), frozenset(self._coeffs.items())))

    def is_zero(self) -> bool:
        return not self._coeffs

    def is_one(self) -> bool:
        one = (0,) * self._parent.ngens
        return len(self._coeffs) == 1 and self._coeffs.get(one) == self._ring().one

    def is_constant(self) -> bool:
        return not self._coeffs or set(self._coeffs) == {(0,) * self._parent.ngens}

    def total_degree(self) -> int:
        """Maximum total degree of the terms, ``-1`` for zero."""
        return max((sum(e) for e in self._coeffs), default=-1)

    def exponent_vectors(self) -> List[Exponents]:
        """Exponent vectors in decreasing term order."""
        return self._parent.order.sort_desc(self._coeffs)

    def coefficients(self) -> List[sp.Expr]:
        """Coefficients (as sympy numbers) in decreasing term order."""
        ring = self._ring()
        return [ring.to_sympy(self._coeffs[e]) for e in self.exponent_vectors()]

    def monomials(self) -> List["_PBWElement"]:
        """Monic monomials in decreasing term order."""
        one = self._ring().one
        return [_PBWElement(self._parent, {e: one}) for e in self.exponent_vectors()]

    def terms(self) -> List["_PBWElement"]:
        """Single-term elements in decreasing term order."""
        return [_PBWElement(self._parent, {e: self._coeffs[e]}) for e in self.exponent_vectors()]

    def iter_terms(self) -> Iterator[Tuple[Exponents, object]]:
        """Yield raw ``(exponents, coefficient)`` pairs in storage order."""
        yield from self._coeffs.items()

    def leading_exponent(self) -> Exponents:
        if not self._coeffs:
            raise ValueError("Zero element has no leading term.")
        return self._leading()[0]

    def leading_coefficient(self) -> sp.Expr:
        if not self._coeffs:
            return self._ring().to_sympy(self._ring().zero)
        return self._ring().to_sympy(self._leading()[1])

    def leading_monomial(self) -> "_PBWElement":
        e = self.leading_exponent()
        return _PBWElement(self._parent, {e: self._ring().one})

    def leading_term(self) -> "_PBWElement":
        if not self._coeffs:
            return self
        e, c = self._leading()
        return _PBWElement(self._parent, {e: c})

    def tail(self) -> "_PBWElement":
        """Element minus its leading term."""
        if not self._coeffs:
            return self
        e = self._leading()[0]
        return _PBWElement(self._parent, {k: v for k, v in self._coeffs.items() if k != e})

    def constant_coefficient(self) -> sp.Expr:
        ring = self._ring()
        return ring.to_sympy(self._coeffs.get((0,) * self._parent.ngens, ring.zero))

    def to_sympy(self) -> sp.Expr:
        """Expression in noncommutative sympy symbols, factors in generator order."""
        gens = [sp.Symbol(s, commutative=False) for s in self._parent.symbols]
        ring = self._ring()
        terms = []
        for e in self.exponent_vectors():
            factors = [g ** k for g, k in zip(gens, e) if k]
            terms.append(ring.to_sympy(self._coeffs[e]) * sp.Mul(*factors))
        return sp.Add(*terms)

    def _monomial_str(self, exps: Exponents) -> str:
        parts = []
        for name, k in zip(self._parent.symbols, exps):
            if k == 1:
                parts.append(name)
            elif k > 1:
                parts.append(f"{name}**{k}")
        return "*".join(parts)

    def __str__(self) -> str:
        if not self._coeffs:
            return "0"
        ring = self._ring()
        terms = []
        for e in self.exponent_vectors():
            coeff_str = ring.to_str(self._coeffs[e])
            var_str = self._monomial_str(e)
            if not var_str:
                terms.append(coeff_str)
            elif coeff_str == "1":
                terms.append(var_str)
            elif coeff_str == "-1":
                terms.append(f"-{var_str}")
            else:
                terms.append(f"{coeff_str}*{var_str}")
        return " + ".join(terms).replace(" + -", " - ")

    def __repr__(self) -> str:
        return f"PBWElement({self}, {len(self._coeffs)} terms)"


PBWElement = _PBWElement
ElementBuilder = _ElementBuilder
