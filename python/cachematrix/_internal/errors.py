from __future__ import annotations

import numpy as np


class CacheMatrixError(Exception):
    """Base class for errors raised while inverting a cached matrix."""


class SingularMatrixError(CacheMatrixError, np.linalg.LinAlgError):
    """The source matrix has no inverse."""


class ShapeError(CacheMatrixError, ValueError):
    """The source matrix is not square, so inversion is undefined."""
