from __future__ import annotations

import threading
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple


HIT = "hit"
MISS = "miss"
ERROR = "error"


@dataclass
class CacheRecord:
    op: str
    event: str
    reason: str
    trace_tag: str
    shape: Tuple[int, int] | None
    version: int
    elapsed: float | None
    timestamp: float


def _shape(obj: Any) -> Tuple[int, int] | None:
    try:
        shape_attr = getattr(obj, "shape", None)
        if isinstance(shape_attr, tuple) and len(shape_attr) == 2:
            return int(shape_attr[0]), int(shape_attr[1])
    except (TypeError, ValueError):
        pass
    return None


class CacheObservability:
    """In-memory record of cache_solve outcomes.

    Keeps the latest record overall and per event kind, plus running
    counters. Nothing is persisted.
    """

    def __init__(self) -> None:
        self._counter = 0
        self._last: dict[str, dict[str, Any]] = {}
        self._stats: Dict[str, int] = {HIT: 0, MISS: 0, ERROR: 0, "inverter_calls": 0}
        self._lock = threading.Lock()

    def clear(self) -> None:
        with self._lock:
            self._last.clear()
            self._counter = 0
            for key in self._stats:
                self._stats[key] = 0

    def _record(self, record: CacheRecord) -> dict[str, Any]:
        payload = asdict(record)
        self._last["__latest__"] = payload
        self._last[record.event] = payload
        return payload

    def record(
        self,
        op: str,
        event: str,
        cached: Any,
        *,
        reason: str,
        elapsed: float | None = None,
    ) -> dict[str, Any]:
        if event not in (HIT, MISS, ERROR):
            raise ValueError(f"unknown cache event {event!r}")

        with self._lock:
            self._counter += 1
            self._stats[event] += 1
            if event != HIT:
                self._stats["inverter_calls"] += 1

            record = CacheRecord(
                op=op,
                event=event,
                reason=reason,
                trace_tag=f"{op}:{self._counter}",
                shape=_shape(cached),
                version=int(getattr(cached, "version", 0)),
                elapsed=elapsed,
                timestamp=time.time(),
            )
            return self._record(record)

    def last(self, event: str | None = None) -> dict[str, Any] | None:
        key = event or "__latest__"
        with self._lock:
            payload = self._last.get(key)
        if payload is None:
            return None
        return dict(payload)

    def stats(self) -> dict[str, int]:
        with self._lock:
            return dict(self._stats)


_default_observability = CacheObservability()


def default_instance() -> CacheObservability:
    return _default_observability
