"""
pbwalg.algebra.opposite
=======================

Opposite algebra ``A_op`` (product ``a . b := b * a``) and the
anti-isomorphism ``M : A -> A_op``.

``A_op`` lists the generators of ``A`` in reverse order, so that the image
of the ordered monomial ``x_0^e_0 ... x_{n-1}^e_{n-1}`` is again an ordered
monomial and ``M`` simply reverses exponent vectors. Right ideals of ``A``
are handled as left ideals of ``A_op`` through this map.
"""

from __future__ import annotations

from pbwalg.algebra.element import _PBWElement
from pbwalg.algorithms.utils.exceptions import MismatchedAlgebra
from pbwalg.utils.log_config import logger


def _build_opposite(algebra):
    """Construct the opposite of *algebra* (use :meth:`PBWAlgebra.opposite`)."""
    n = algebra.ngens
    relations = {}
    for (i, j), terms in algebra._relations.items():
        # y_l . y_k = M(x_i) . M(x_j) = M(x_j * x_i) with k = n-1-j < l = n-1-i
        relations[(n - 1 - j, n - 1 - i)] = {e[::-1]: c for e, c in terms.items()}
    op = type(algebra)._from_parsed(
        algebra.coefficient_ring,
        algebra.symbols[::-1],
        relations,
        algebra.order.reversed(),
        algebra.is_checked,
    )
    logger.debug(f"Built opposite algebra of {algebra!r}")
    return op


class _OppositeMap:
    """Anti-isomorphism between an algebra and its opposite.

    ``M(a * b) == M(b) * M(a)`` and ``M`` is the identity on generator names.
    Calling the map on an ideal transports it as well, swapping left and right.

    Parameters
    ----------
    domain : PBWAlgebra
        Source algebra.
    """

    def __init__(self, domain):
        self._domain = domain
        self._codomain = domain.opposite()

    @property
    def domain(self):
        return self._domain

    @property
    def codomain(self):
        return self._codomain

    def inverse(self) -> "_OppositeMap":
        """The map back from the opposite algebra (``codomain.opposite() is domain``)."""
        return _OppositeMap(self._codomain)

    def __invert__(self) -> "_OppositeMap":
        return self.inverse()

    def __call__(self, x):
        from pbwalg.algebra.ideal import _PBWIdeal  # avoid circular import

        if isinstance(x, _PBWIdeal):
            if x.base_ring is not self._domain:
                raise MismatchedAlgebra("Ideal does not belong to the domain of this map.")
            return x._transport()
        if isinstance(x, _PBWElement):
            if x.parent is not self._domain:
                raise MismatchedAlgebra("Element does not belong to the domain of this map.")
            return _reverse(x, self._codomain)
        if isinstance(x, (list, tuple)):
            return type(x)(self(y) for y in x)
        return self._codomain(x)

    def __repr__(self) -> str:
        return f"OppositeMap({self._domain!r} -> {self._codomain!r})"


def _reverse(element, target) -> _PBWElement:
    return _PBWElement(target, {e[::-1]: c for e, c in element._coeffs.items()})


def opposite_algebra(algebra):
    """Return ``(A_op, M)`` for a PBW algebra ``A``."""
    m = _OppositeMap(algebra)
    return m.codomain, m


def inv(m: _OppositeMap) -> _OppositeMap:
    """Inverse of an opposite-algebra map."""
    return m.inverse()


OppositeMap = _OppositeMap
