from __future__ import annotations

import os as _os

DEBUG_PY_TRACE_ENV = "VNM_DEBUG_PY_TRACE"

_TRUTHY = {"1", "true", "yes", "on"}


def envvar_value_by_name(name: str) -> str | None:
    """Get the current value of an env var by name, or None if missing."""
    return _os.environ.get(name)


def debug_py_trace_enabled() -> bool:
    """True when failures should also show the Python traceback."""
    value = envvar_value_by_name(DEBUG_PY_TRACE_ENV)
    return value is not None and value.strip().lower() in _TRUTHY


def set_debug_py_trace(enabled: bool) -> None:
    if enabled:
        _os.environ[DEBUG_PY_TRACE_ENV] = "1"
    else:
        _os.environ.pop(DEBUG_PY_TRACE_ENV, None)
