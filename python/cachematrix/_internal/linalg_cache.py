from __future__ import annotations

import warnings
from typing import Any, Callable

import numpy as np

from .runtime import cache_notices_enabled
from .warnings import CachedInverseNotice

CACHE_HIT_MESSAGE = "Getting cached inverse matrix"


def solve(a: Any, b: Any = None) -> np.ndarray:
    """Invert ``a``, or solve ``a @ x = b`` when ``b`` is given.

    Singular or non-square input raises ``numpy.linalg.LinAlgError``.
    """
    if b is None:
        return np.linalg.inv(np.asarray(a))
    return np.linalg.solve(np.asarray(a), np.asarray(b))


def cache_solve(
    cm: Any,
    *args: Any,
    solver: Callable[..., Any] | None = None,
    **kwargs: Any,
) -> Any:
    """Compute or retrieve the cached inverse of ``cm``.

    Extra positional and keyword arguments are forwarded verbatim to
    ``solver`` (``solve`` by default) on a cache miss. ``solve`` takes a
    single optional right-hand side, so keywords only apply to a custom
    ``solver``. Errors raised by the solver propagate unchanged and leave
    the cache empty.

    A hit checks ``CACHEMATRIX_CACHE_NOTICES`` before returning, so an
    invalid value there raises ``ValueError`` on hits while misses succeed.
    """
    inv = cm.get_cached_inverse()
    if inv is not None:
        if cache_notices_enabled():
            warnings.warn(CACHE_HIT_MESSAGE, CachedInverseNotice, stacklevel=2)
        return inv

    routine = solve if solver is None else solver
    inv = routine(cm.get_value(), *args, **kwargs)
    cm.set_cached_inverse(inv)
    return inv
