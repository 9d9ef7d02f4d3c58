from __future__ import annotations

import os
import warnings
from dataclasses import dataclass
from typing import Any, Callable

from .inverter import Inverter, numpy_inverter, resolve_inverter
from .warnings import CacheMatrixCacheHitWarning, CacheMatrixWarning

CACHE_HIT_MESSAGE = "getting cached data"

_NOTIFY_MODES = ("warn", "silent")


@dataclass(frozen=True)
class CacheEvent:
    """Payload handed to the notification sink on a cache hit."""

    op: str
    message: str
    shape: tuple[int, int]
    version: int


NotificationSink = Callable[[CacheEvent], None]


def warning_sink(event: CacheEvent) -> None:
    # warning_sink -> Runtime.notify -> cache_solve -> caller
    warnings.warn(event.message, CacheMatrixCacheHitWarning, stacklevel=4)


def silent_sink(event: CacheEvent) -> None:
    return None


class Runtime:
    def __init__(
        self,
        *,
        default_inverter: Inverter = numpy_inverter,
        env_var: str = "CACHEMATRIX_NOTIFY",
    ) -> None:
        self._default_inverter = default_inverter
        self._env_var = env_var
        self._inverter: Inverter = default_inverter
        self._sink: NotificationSink | None = None
        self._default_sink: NotificationSink | None = None

    def default_sink(self) -> NotificationSink:
        """Sink selected by the environment, resolved once per Runtime.

        Unknown values fall back to ``warn`` so a typo never turns a cache hit
        into an error.
        """

        if self._default_sink is not None:
            return self._default_sink

        mode = os.environ.get(self._env_var, "warn").strip().lower() or "warn"
        if mode not in _NOTIFY_MODES:
            warnings.warn(
                f"{self._env_var} must be one of {', '.join(_NOTIFY_MODES)}; got {mode!r}, using 'warn'",
                CacheMatrixWarning,
                stacklevel=2,
            )
            mode = "warn"
        self._default_sink = silent_sink if mode == "silent" else warning_sink
        return self._default_sink

    def notification_sink(self) -> NotificationSink:
        if self._sink is not None:
            return self._sink
        return self.default_sink()

    def set_notification_sink(self, sink: NotificationSink | None) -> None:
        if sink is not None and not callable(sink):
            raise TypeError("notification sink must be callable as sink(event)")
        self._sink = sink

    def inverter(self) -> Inverter:
        return self._inverter

    def set_inverter(self, inverter: Inverter | None) -> None:
        self._inverter = resolve_inverter(inverter, self._default_inverter)

    def notify(self, op: str, cached: Any) -> None:
        event = CacheEvent(
            op=op,
            message=CACHE_HIT_MESSAGE,
            shape=tuple(cached.shape),
            version=int(cached.version),
        )
        self.notification_sink()(event)


_default_runtime = Runtime()


def default_instance() -> Runtime:
    return _default_runtime
