"""Warning categories raised by cachematrix.

Cache hits are reported as CacheMatrixCacheHitWarning by default; filter on
CacheMatrixWarning to silence everything this package emits.
"""


class CacheMatrixWarning(UserWarning):
    """Base warning category for all cachematrix user-facing warnings."""


class CacheMatrixCacheHitWarning(CacheMatrixWarning):
    """Emitted when cache_solve returns a previously computed inverse."""
