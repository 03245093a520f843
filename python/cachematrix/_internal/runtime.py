from __future__ import annotations

import os

_ENV_VAR = "CACHEMATRIX_CACHE_NOTICES"
_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})

_notices_override: bool | None = None


def set_cache_notices(enabled: bool | None) -> None:
    """Enable or disable cache-hit notices process-wide.

    Passing None drops the override so the environment variable applies again.
    """
    global _notices_override
    _notices_override = None if enabled is None else bool(enabled)


def cache_notices_enabled() -> bool:
    if _notices_override is not None:
        return _notices_override

    env = os.environ.get(_ENV_VAR)
    if env is None or not env.strip():
        return True

    token = env.strip().lower()
    if token in _TRUTHY:
        return True
    if token in _FALSY:
        return False
    raise ValueError(
        f"{_ENV_VAR} must be one of {sorted(_TRUTHY | _FALSY)}, got {env!r}"
    )
