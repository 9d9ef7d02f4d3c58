from __future__ import annotations

from typing import Any, Callable

import numpy as np

from .coercion import is_square
from .errors import ShapeError, SingularMatrixError

Inverter = Callable[..., Any]


def numpy_inverter(
    matrix: np.ndarray,
    *,
    b: Any = None,
    tol: float | None = None,
    dtype: Any = None,
) -> np.ndarray:
    """Invert ``matrix`` with NumPy's LAPACK-backed routines.

    Options:
    - ``b``: right-hand side; when given the result is ``inv(matrix) @ b``,
      computed with ``numpy.linalg.solve`` rather than an explicit inverse.
    - ``tol``: reciprocal condition number threshold. Matrices whose
      ``1 / cond`` falls below it are rejected as numerically singular.
    - ``dtype``: dtype of the returned array.

    Raises:
        ShapeError: If ``matrix`` is not a square 2D array.
        SingularMatrixError: If ``matrix`` has no (numerically stable) inverse.
    """

    a = np.asarray(matrix)
    if not is_square(a):
        raise ShapeError(f"inversion requires a square matrix; got shape {a.shape}")

    if tol is not None:
        with np.errstate(divide="ignore", invalid="ignore"):
            rcond = 1.0 / np.linalg.cond(a)
        if not np.isfinite(rcond) or rcond < tol:
            raise SingularMatrixError(
                f"matrix is numerically singular: reciprocal condition number {rcond:.3g} < {tol:.3g}"
            )

    try:
        if b is None:
            result = np.linalg.inv(a)
        else:
            result = np.linalg.solve(a, np.asarray(b))
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(f"matrix of shape {a.shape} is singular") from exc

    if dtype is not None:
        result = result.astype(dtype)
    return result


def resolve_inverter(inverter: Inverter | None, default: Inverter) -> Inverter:
    if inverter is None:
        return default
    if not callable(inverter):
        raise TypeError("inverter must be callable as inverter(matrix, **options)")
    return inverter
