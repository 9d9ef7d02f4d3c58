"""Matrix inverse caching.

``CachedMatrix`` holds one matrix and, once computed, its inverse;
``cache_solve`` returns that inverse, inverting only when nothing valid is
cached. Replacing the matrix with ``set_value`` discards the cached inverse.
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _dist_version
from typing import Any

from ._internal import observability as _observability
from ._internal import runtime as _runtime_mod
from ._internal.cached_matrix import CachedMatrix, make_cache_matrix
from ._internal.errors import CacheMatrixError, ShapeError, SingularMatrixError
from ._internal.inverter import Inverter, numpy_inverter
from ._internal.runtime import CacheEvent, NotificationSink, silent_sink, warning_sink
from ._internal.solve import cache_solve
from ._internal.warnings import CacheMatrixCacheHitWarning, CacheMatrixWarning

try:
    __version__ = _dist_version("cachematrix")
except PackageNotFoundError:
    __version__ = "unknown"

_runtime = _runtime_mod.default_instance()


def set_inverter(inverter: Inverter | None) -> None:
    """Set the inverter cache_solve uses when none is passed explicitly.

    ``None`` restores :func:`numpy_inverter`.
    """
    _runtime.set_inverter(inverter)


def get_inverter() -> Inverter:
    return _runtime.inverter()


def set_notification_sink(sink: NotificationSink | None) -> None:
    """Route cache-hit notifications to ``sink``.

    ``None`` restores the default, which is chosen by the
    ``CACHEMATRIX_NOTIFY`` environment variable (``warn`` or ``silent``).
    """
    _runtime.set_notification_sink(sink)


def get_notification_sink() -> NotificationSink:
    return _runtime.notification_sink()


def last_cache_trace(event: str | None = None) -> dict[str, Any] | None:
    """Return the latest cache_solve record, optionally for one event kind.

    ``event`` is one of ``"hit"``, ``"miss"`` or ``"error"``.
    """
    return _observability.default_instance().last(event)


def cache_stats() -> dict[str, int]:
    return _observability.default_instance().stats()


def clear_cache_traces() -> None:
    _observability.default_instance().clear()


__all__ = [
    "CachedMatrix",
    "make_cache_matrix",
    "cache_solve",
    "numpy_inverter",
    "Inverter",
    "CacheEvent",
    "NotificationSink",
    "warning_sink",
    "silent_sink",
    "set_inverter",
    "get_inverter",
    "set_notification_sink",
    "get_notification_sink",
    "last_cache_trace",
    "cache_stats",
    "clear_cache_traces",
    "CacheMatrixError",
    "SingularMatrixError",
    "ShapeError",
    "CacheMatrixWarning",
    "CacheMatrixCacheHitWarning",
]
