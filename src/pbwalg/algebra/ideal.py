"""
pbwalg.algebra.ideal
====================

Left, right and two-sided ideals of PBW algebras.

Only left ideals are completed natively. Two-sided ideals are completed to a
left Groebner basis closed under right multiplication by the generators, and
right ideals are sent to left ideals of the opposite algebra and back.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence

from pbwalg.algebra.base import _PBWAlgebra
from pbwalg.algebra.element import _PBWElement
from pbwalg.algebra.opposite import _reverse
from pbwalg.algorithms.groebner.completion import (left_groebner,
                                                   two_sided_groebner)
from pbwalg.algorithms.groebner.config import _CompletionConfig
from pbwalg.algorithms.groebner.elimination import left_intersection
from pbwalg.algorithms.groebner.reduction import left_normal_form
from pbwalg.algorithms.utils.core import _OnceCell
from pbwalg.algorithms.utils.exceptions import (InvalidIndex,
                                                MismatchedAlgebra,
                                                SidednessMismatch)
from pbwalg.utils.log_config import logger


class Sidedness(Enum):
    LEFT = "left"
    RIGHT = "right"
    TWO_SIDED = "two-sided"

    @property
    def flipped(self) -> "Sidedness":
        """Sidedness seen through the opposite algebra."""
        if self is Sidedness.LEFT:
            return Sidedness.RIGHT
        if self is Sidedness.RIGHT:
            return Sidedness.LEFT
        return self


class _PBWIdeal:
    """Ideal of a PBW algebra given by generators and a sidedness.

    The generators are kept as given. The completed generating set used for
    reduction is computed on first use and cached; derived ideals (sums,
    products, intersections) start with an empty cache.

    Parameters
    ----------
    algebra : PBWAlgebra
        Owning algebra.
    gens : sequence
        Generators; scalars are converted into the algebra.
    sidedness : Sidedness
        Fixed classification of the ideal.
    config : CompletionConfig, optional
        Options and budget for completion, inherited by derived ideals.
    """

    def __init__(self, algebra, gens: Sequence, sidedness: Sidedness, config: Optional[_CompletionConfig] = None):
        if not isinstance(sidedness, Sidedness):
            sidedness = Sidedness(sidedness)
        self._algebra = algebra
        self._gens = tuple(algebra(g) for g in gens)
        self._side = sidedness
        self._config = config
        self._basis = _OnceCell()
        self._op = _OnceCell()

    @property
    def base_ring(self):
        return self._algebra

    @property
    def sidedness(self) -> Sidedness:
        return self._side

    @property
    def ngens(self) -> int:
        return len(self._gens)

    def gens(self) -> List[_PBWElement]:
        return list(self._gens)

    def __getitem__(self, k: int) -> _PBWElement:
        if not isinstance(k, int) or not 0 <= k < len(self._gens):
            raise InvalidIndex(f"Generator index {k} out of range for an ideal with {len(self._gens)} generators.")
        return self._gens[k]

    def _derive(self, gens, sidedness: Sidedness) -> "_PBWIdeal":
        return _PBWIdeal(self._algebra, gens, sidedness, self._config)

    def _check_same_algebra(self, other: "_PBWIdeal") -> None:
        if other._algebra is not self._algebra:
            raise MismatchedAlgebra("Ideals belong to different algebras.")

    def _transport(self) -> "_PBWIdeal":
        """Image in the opposite algebra (left and right swapped)."""
        def build():
            op = self._algebra.opposite()
            image = _PBWIdeal(op, [_reverse(g, op) for g in self._gens], self._side.flipped, self._config)
            image._op.get_or_compute(lambda: self)
            return image
        return self._op.get_or_compute(build)

    def _complete(self) -> List[_PBWElement]:
        gens = [g for g in self._gens if not g.is_zero()]
        if self._side is Sidedness.LEFT:
            basis = left_groebner(gens, self._config)
        elif self._side is Sidedness.TWO_SIDED:
            basis = two_sided_groebner(gens, self._config)
        else:
            basis = [_reverse(g, self._algebra) for g in self._transport().groebner_basis()]
        logger.info(f"Completed {self._side.value} ideal: {len(gens)} generators -> {len(basis)} basis elements")
        return basis

    def groebner_basis(self) -> List[_PBWElement]:
        """Completed generating set (computed once, then cached).

        For left and two-sided ideals it is a reduced left Groebner basis; for
        right ideals it is the image of the left basis of the transported
        ideal, i.e. a right Groebner basis.
        """
        return list(self._basis.get_or_compute(self._complete))

    def _left_generators(self) -> List[_PBWElement]:
        """Generators of ``A * I`` as a left ideal."""
        if self._side is Sidedness.LEFT:
            return list(self._gens)
        if self._side is Sidedness.TWO_SIDED:
            return self.groebner_basis()
        return self.as_two_sided()._left_generators()

    def _right_generators(self) -> List[_PBWElement]:
        """Generators of ``I * A`` as a right ideal."""
        if self._side is Sidedness.RIGHT:
            return list(self._gens)
        if self._side is Sidedness.TWO_SIDED:
            return [_reverse(g, self._algebra) for g in self._transport().groebner_basis()]
        return self.as_two_sided()._right_generators()

    def as_two_sided(self) -> "_PBWIdeal":
        """Two-sided ideal generated by the same generators."""
        if self._side is Sidedness.TWO_SIDED:
            return self
        return self._derive(self._gens, Sidedness.TWO_SIDED)

    def normal_form(self, f) -> _PBWElement:
        """Remainder of *f* modulo the completed generating set."""
        f = self._algebra(f)
        if self._side is Sidedness.RIGHT:
            op_ideal = self._transport()
            r = left_normal_form(_reverse(f, op_ideal.base_ring), op_ideal.groebner_basis())
            return _reverse(r, self._algebra)
        return left_normal_form(f, self.groebner_basis())

    def __contains__(self, f) -> bool:
        return self.normal_form(f).is_zero()

    def is_zero(self) -> bool:
        return all(g.is_zero() for g in self._gens)

    def is_one(self) -> bool:
        """Whether the ideal is the whole algebra."""
        return any(g.is_constant() and not g.is_zero() for g in self.groebner_basis())

    def issubset(self, other: "_PBWIdeal") -> bool:
        """Set inclusion ``self ⊆ other``, for any combination of sidedness."""
        self._check_same_algebra(other)
        if other._side is Sidedness.TWO_SIDED:
            gens = self._gens
        elif other._side is Sidedness.LEFT:
            gens = self._left_generators()
        else:
            gens = self._right_generators()
        return all(g in other for g in gens)

    def __le__(self, other: "_PBWIdeal") -> bool:
        return self.issubset(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, _PBWIdeal):
            return NotImplemented
        if other._algebra is not self._algebra:
            return False
        return self.issubset(other) and other.issubset(self)

    def __ne__(self, other) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    __hash__ = None

    def __add__(self, other: "_PBWIdeal") -> "_PBWIdeal":
        if not isinstance(other, _PBWIdeal):
            return NotImplemented
        self._check_same_algebra(other)
        if other._side is not self._side:
            raise SidednessMismatch(
                f"Cannot add a {self._side.value} ideal and a {other._side.value} ideal; "
                "convert explicitly with as_two_sided()."
            )
        return self._derive(self._gens + other._gens, self._side)

    def __mul__(self, other: "_PBWIdeal") -> "_PBWIdeal":
        """Product ideal.

        The left factor must be closed under left multiplication (left or
        two-sided) and the right factor under right multiplication (right or
        two-sided). Then ``I*J = A*L*R*A`` for left generators ``L`` of ``I``
        and right generators ``R`` of ``J``, a two-sided ideal.
        """
        if not isinstance(other, _PBWIdeal):
            return NotImplemented
        self._check_same_algebra(other)
        if self._side is Sidedness.RIGHT or other._side is Sidedness.LEFT:
            raise SidednessMismatch(
                f"Product of a {self._side.value} ideal by a {other._side.value} ideal "
                "is not finitely generated by products of generators."
            )
        left = [g for g in self._left_generators() if not g.is_zero()]
        right = [h for h in other._right_generators() if not h.is_zero()]
        gens = [g * h for g in left for h in right]
        logger.debug(f"Ideal product: {len(left)} x {len(right)} generator products")
        return self._derive(gens, Sidedness.TWO_SIDED)

    def __pow__(self, k: int) -> "_PBWIdeal":
        if not isinstance(k, int) or k < 0:
            raise ValueError("Exponent must be a non-negative integer")
        if k == 0:
            return self._derive([self._algebra.one()], self._side)
        result = self
        for _ in range(k - 1):
            result = result * self
        return result

    def intersect(self, *others: "_PBWIdeal") -> "_PBWIdeal":
        result = self
        for other in others:
            result = result._intersect(other)
        return result

    def _intersect(self, other: "_PBWIdeal") -> "_PBWIdeal":
        self._check_same_algebra(other)
        if other._side is not self._side:
            raise SidednessMismatch(
                f"Cannot intersect a {self._side.value} ideal with a {other._side.value} ideal."
            )
        A = self._algebra
        if self._side is Sidedness.LEFT:
            gens = left_intersection(A, self._gens, other._gens, self._config)
        elif self._side is Sidedness.TWO_SIDED:
            gens = left_intersection(A, self.groebner_basis(), other.groebner_basis(), self._config)
        else:
            a, b = self._transport(), other._transport()
            op_gens = left_intersection(a.base_ring, a.gens(), b.gens(), self._config)
            gens = [_reverse(g, A) for g in op_gens]
        return self._derive(gens, self._side)

    def __str__(self) -> str:
        return f"{self._side.value} ideal generated by ({', '.join(str(g) for g in self._gens)})"

    def __repr__(self) -> str:
        return f"PBWIdeal({self._side.value}, {len(self._gens)} gens, {self._algebra!r})"


def _ideal(side: Sidedness, algebra_or_gens, gens, config) -> _PBWIdeal:
    if gens is None:
        if isinstance(algebra_or_gens, _PBWAlgebra):
            raise ValueError("Missing generators: pass them after the algebra, or pass the generators alone.")
        gens = list(algebra_or_gens)
        elements = [g for g in gens if isinstance(g, _PBWElement)]
        if not elements:
            raise ValueError("Cannot infer the algebra of an ideal without element generators; pass it explicitly.")
        algebra = elements[0].parent
    else:
        algebra = algebra_or_gens
    return _PBWIdeal(algebra, gens, side, config)


def left_ideal(algebra_or_gens, gens=None, config: Optional[_CompletionConfig] = None) -> _PBWIdeal:
    """Left ideal ``A*g_1 + ... + A*g_k``; call as ``left_ideal(A, gens)`` or ``left_ideal(gens)``."""
    return _ideal(Sidedness.LEFT, algebra_or_gens, gens, config)


def right_ideal(algebra_or_gens, gens=None, config: Optional[_CompletionConfig] = None) -> _PBWIdeal:
    """Right ideal ``g_1*A + ... + g_k*A``."""
    return _ideal(Sidedness.RIGHT, algebra_or_gens, gens, config)


def two_sided_ideal(algebra_or_gens, gens=None, config: Optional[_CompletionConfig] = None) -> _PBWIdeal:
    """Two-sided ideal ``A*g_1*A + ... + A*g_k*A``."""
    return _ideal(Sidedness.TWO_SIDED, algebra_or_gens, gens, config)


def intersect(ideal: _PBWIdeal, *others: _PBWIdeal) -> _PBWIdeal:
    """Intersection of one or more ideals of equal sidedness.

    A single ideal is returned unchanged.
    """
    return ideal.intersect(*others)


PBWIdeal = _PBWIdeal
