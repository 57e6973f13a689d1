""" Public API for the :mod:`~pbwalg.algorithms.groebner` package.
"""

from .completion import (interreduce, left_groebner, left_spoly,
                         two_sided_groebner)
from .config import _CompletionConfig as CompletionConfig
from .elimination import left_intersection
from .reduction import left_normal_form

__all__ = [
    "CompletionConfig",
    "interreduce",
    "left_groebner",
    "left_intersection",
    "left_normal_form",
    "left_spoly",
    "two_sided_groebner",
]
