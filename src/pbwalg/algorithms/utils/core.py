"""Shared helpers for lazily computed, cached values.
"""

import threading
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class _OnceCell(Generic[T]):
    """Single-assignment cache cell.

    The first call to :meth:`get_or_compute` runs the factory under a lock and
    stores its result; later calls return the stored value. Concurrent
    callers wait for the first computation instead of repeating it.
    """

    __slots__ = ("_value", "_set", "_lock")

    def __init__(self):
        self._value: Optional[T] = None
        self._set = False
        self._lock = threading.Lock()

    def is_set(self) -> bool:
        return self._set

    def get(self, default: Any = None) -> Any:
        """Get the stored value, or *default* when nothing was computed yet."""
        return self._value if self._set else default

    def get_or_compute(self, factory: Callable[[], T]) -> T:
        if self._set:
            return self._value
        with self._lock:
            if not self._set:
                self._value = factory()
                self._set = True
        return self._value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({'set' if self._set else 'empty'})"
