from __future__ import annotations

import time
from typing import Any

import numpy as np

from . import observability as _observability
from . import runtime as _runtime
from .cached_matrix import CachedMatrix
from .inverter import Inverter, resolve_inverter

_OP = "cache_solve"


def cache_solve(
    cm: CachedMatrix,
    *,
    inverter: Inverter | None = None,
    runtime: _runtime.Runtime | None = None,
    observability: _observability.CacheObservability | None = None,
    **options: Any,
) -> np.ndarray:
    """Return the inverse of ``cm``, computing it only on a cache miss.

    On a hit the stored inverse is returned as-is and the notification sink
    is told ("getting cached data"). On a miss the current value is handed to
    the inverter together with ``options`` (passed through untouched) and the
    result is stored before it is returned.

    The check-compute-store sequence runs under ``cm.lock``, so concurrent
    callers sharing one instance trigger at most one inversion per value.

    Inverter failures propagate unchanged and nothing is cached; the next
    call retries.
    """

    if not isinstance(cm, CachedMatrix):
        raise TypeError(f"cache_solve expects a CachedMatrix; got {type(cm).__name__}")

    rt = runtime if runtime is not None else _runtime.default_instance()
    obs = observability if observability is not None else _observability.default_instance()
    invert = resolve_inverter(inverter, rt.inverter())

    with cm.lock:
        inverse = cm.get_cached_inverse()
        if inverse is not None:
            rt.notify(_OP, cm)
            obs.record(_OP, _observability.HIT, cm, reason="inverse already cached")
            return inverse

        data = cm.get_value()
        start = time.perf_counter()
        try:
            inverse = invert(data, **options)
            cm.set_cached_inverse(inverse)
        except Exception as exc:
            obs.record(
                _OP,
                _observability.ERROR,
                cm,
                reason=f"{type(exc).__name__}: {exc}",
                elapsed=time.perf_counter() - start,
            )
            raise
        elapsed = time.perf_counter() - start

        obs.record(
            _OP,
            _observability.MISS,
            cm,
            reason="no cached inverse for current value",
            elapsed=elapsed,
        )
        return cm.get_cached_inverse()
