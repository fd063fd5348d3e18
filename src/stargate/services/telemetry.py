"""Telemetry — @traced timing for service operations.

Near-zero overhead when disabled (single ContextVar.get per call).
When enabled via --verbose, each traced call records its wall time in
``ServiceResult.meta["telemetry"]`` and logs a ``span.complete`` event.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from contextvars import ContextVar
from typing import ParamSpec, TypeVar

import structlog

from stargate.services.result import ServiceResult

_verbose_enabled: ContextVar[bool] = ContextVar("_verbose_enabled", default=False)

log = structlog.get_logger("stargate.telemetry")


def enable_telemetry() -> None:
    _verbose_enabled.set(True)


def disable_telemetry() -> None:
    _verbose_enabled.set(False)


def telemetry_enabled() -> bool:
    return _verbose_enabled.get()


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Decorator: time a service method and merge timing into ServiceResult.meta.

    Non-ServiceResult return values pass through untouched.
    """

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _verbose_enabled.get():
            return func(*args, **kwargs)

        start = time.perf_counter()
        result = func(*args, **kwargs)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)

        if not isinstance(result, ServiceResult):
            return result
        log.debug("span.complete", span_name=func.__name__, duration_ms=duration_ms, ok=result.ok)
        span = {"name": func.__name__, "duration_ms": duration_ms}
        meta = {**(result.meta or {}), "telemetry": span}
        return result.model_copy(update={"meta": meta})  # type: ignore[return-value]

    return wrapper
