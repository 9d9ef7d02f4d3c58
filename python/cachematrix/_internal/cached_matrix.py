from __future__ import annotations

import threading
from typing import Any

import numpy as np

from .coercion import as_matrix, as_result


class CachedMatrix:
    """A matrix paired with a memoized inverse.

    The inverse slot is either empty or holds the inverse of the current
    value; replacing the value always empties it, even when the new matrix
    equals the old one. Writes to the slot are trusted: nothing checks that
    an inverse handed to ``set_cached_inverse`` actually belongs to the value.

    Stored arrays are private read-only copies, so the only way to change
    the value is ``set_value``.
    """

    def __init__(self, initial: Any) -> None:
        self._value: np.ndarray = as_matrix(initial)
        self._cached_inverse: np.ndarray | None = None
        self._version = 0
        self._lock = threading.RLock()

    def set_value(self, new_value: Any) -> None:
        value = as_matrix(new_value)
        with self._lock:
            self._value = value
            self._cached_inverse = None
            self._version += 1

    def get_value(self) -> np.ndarray:
        with self._lock:
            return self._value

    def set_cached_inverse(self, inverse: Any) -> None:
        inv = as_result(inverse)
        with self._lock:
            self._cached_inverse = inv

    def get_cached_inverse(self) -> np.ndarray | None:
        with self._lock:
            return self._cached_inverse

    def has_cached_inverse(self) -> bool:
        return self.get_cached_inverse() is not None

    @property
    def value(self) -> np.ndarray:
        return self.get_value()

    @value.setter
    def value(self, new_value: Any) -> None:
        self.set_value(new_value)

    @property
    def version(self) -> int:
        # Payload epoch; bumped by every set_value.
        return self._version

    @property
    def shape(self) -> tuple[int, int]:
        rows, cols = self.get_value().shape
        return (int(rows), int(cols))

    def rows(self) -> int:
        return self.shape[0]

    def cols(self) -> int:
        return self.shape[1]

    @property
    def lock(self) -> Any:
        """Re-entrant lock guarding both slots.

        Hold it to make a read-check-write sequence atomic with respect to
        other threads sharing this instance.
        """
        return self._lock

    # Names used by the original makeCacheMatrix API.
    set = set_value
    get = get_value
    setinverse = set_cached_inverse
    getinverse = get_cached_inverse

    def __repr__(self) -> str:
        state = "cached" if self._cached_inverse is not None else "empty"
        return f"CachedMatrix(shape={self.shape}, version={self._version}, inverse={state})"


def make_cache_matrix(x: Any) -> CachedMatrix:
    """Lower-case convenience factory that returns a CachedMatrix."""
    return CachedMatrix(x)
