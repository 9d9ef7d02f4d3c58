from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def coerce_sequence_rows(candidate: Any) -> list[list[Any]]:
    if not is_sequence_like(candidate):
        raise TypeError(
            "Matrix data must be provided as a nested sequence or a NumPy array."
        )
    rows = [list(row) if is_sequence_like(row) or isinstance(row, np.ndarray) else row for row in candidate]
    if not rows:
        raise ValueError("Matrix data must not be empty.")
    cols: int | None = None
    for row in rows:
        if not isinstance(row, list):
            raise TypeError("Each matrix row must be a sequence of entries.")
        if cols is None:
            cols = len(row)
        elif len(row) != cols:
            raise ValueError("Matrix data must be rectangular (all rows the same length).")
    if not cols:
        raise ValueError("Matrix rows must not be empty.")
    return rows


def as_matrix(candidate: Any) -> np.ndarray:
    """Return a private, read-only 2D numeric array for ``candidate``.

    NumPy arrays (and anything exposing ``__array__``) go straight through
    ``np.array``; plain nested sequences are validated row by row first so the
    error messages name the actual problem instead of NumPy's ragged-array
    complaint.
    """

    if isinstance(candidate, np.ndarray) or hasattr(candidate, "__array__"):
        array = np.array(candidate, copy=True)
    else:
        array = np.array(coerce_sequence_rows(candidate))

    if array.ndim != 2:
        raise ValueError(f"Matrix input must be 2D; got {array.ndim}D.")
    if array.size == 0:
        raise ValueError("Matrix data must not be empty.")
    if array.dtype.kind not in "biufc":
        raise TypeError(f"Matrix entries must be numeric; got dtype {array.dtype}.")

    array.setflags(write=False)
    return array


def is_square(array: np.ndarray) -> bool:
    return array.ndim == 2 and array.shape[0] == array.shape[1]


def as_result(candidate: Any) -> np.ndarray:
    """Return a private, read-only copy of an inverter result.

    Unlike :func:`as_matrix` this accepts any non-empty numeric array, since
    solving against a vector right-hand side yields a 1D solution.
    """

    array = np.array(candidate, copy=True)
    if array.ndim == 0:
        raise ValueError("Inverter result must be an array, not a scalar.")
    if array.size == 0:
        raise ValueError("Inverter result must not be empty.")
    if array.dtype.kind not in "biufc":
        raise TypeError(f"Inverter result must be numeric; got dtype {array.dtype}.")

    array.setflags(write=False)
    return array
