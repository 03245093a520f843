from __future__ import annotations

from typing import Any

import numpy as np


class CachedMatrix:
    """A matrix value paired with a one-entry cache of its inverse.

    Writing a new value through ``set_value`` always drops the cached
    inverse, so a present cache entry is the inverse of the current value.
    ``set_cached_inverse`` is public for ``cache_solve``; the stored matrix is
    not checked against the value, and storing anything other than the true
    inverse breaks that guarantee.
    """

    def __init__(self, value: Any = None):
        if value is None:
            value = np.full((1, 1), np.nan)
        self._value = value
        self._cached_inverse: Any = None

    def set_value(self, new_matrix: Any) -> None:
        self._value = new_matrix
        self._cached_inverse = None

    def get_value(self) -> Any:
        return self._value

    def set_cached_inverse(self, inverse: Any) -> None:
        self._cached_inverse = inverse

    def get_cached_inverse(self) -> Any:
        return self._cached_inverse

    def has_cached_inverse(self) -> bool:
        return self._cached_inverse is not None

    def invalidate(self) -> None:
        """Drop the cached inverse, keeping the current value."""
        self._cached_inverse = None

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        if copy is False:
            value = self._value
            if not isinstance(value, np.ndarray) or (
                dtype is not None and np.dtype(dtype) != value.dtype
            ):
                raise ValueError(
                    "Unable to avoid a copy while converting CachedMatrix to an array."
                )
            return value
        arr = np.asarray(self._value, dtype=dtype)
        if copy:
            arr = arr.copy()
        return arr

    def __repr__(self) -> str:
        shape = getattr(self._value, "shape", None)
        if shape is None:
            shape = np.shape(self._value)
        state = "cached" if self.has_cached_inverse() else "empty"
        return f"CachedMatrix(shape={tuple(shape)}, inverse={state})"
