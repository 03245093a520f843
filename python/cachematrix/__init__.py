"""Matrix container that memoizes its inverse until the matrix changes."""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _dist_version

try:
    __version__ = _dist_version("cachematrix")
except PackageNotFoundError:  # pragma: no cover - running from an uninstalled checkout
    __version__ = "unknown"

from .cached_matrix import CachedMatrix
from ._internal.linalg_cache import CACHE_HIT_MESSAGE, cache_solve, solve
from ._internal.runtime import cache_notices_enabled, set_cache_notices
from ._internal.warnings import CacheMatrixWarning, CachedInverseNotice


def make_cache_matrix(x=None) -> CachedMatrix:
    """Wrap ``x`` in a fresh CachedMatrix with an empty inverse cache."""
    return CachedMatrix(x)


__all__ = [
    "CACHE_HIT_MESSAGE",
    "CacheMatrixWarning",
    "CachedInverseNotice",
    "CachedMatrix",
    "cache_notices_enabled",
    "cache_solve",
    "make_cache_matrix",
    "set_cache_notices",
    "solve",
]
