"""Operation timing: the ``@traced`` decorator.

Near-zero overhead when disabled (single ContextVar.get per call).
When enabled via --verbose, each traced service call is timed, logged as
a ``span.complete`` structlog event with the operation bound into the
log context, and its duration is added to ``ServiceResult.meta``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from contextvars import ContextVar
from typing import ParamSpec, TypeVar

import structlog

from eden.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("_telemetry_enabled", default=False)

_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Decorator: time a service method and attach the duration to its result."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        log = structlog.get_logger("eden.telemetry")
        start = time.perf_counter()
        with structlog.contextvars.bound_contextvars(span=func.__qualname__):
            try:
                result = func(*args, **kwargs)
            except Exception:
                log.debug("span.complete", duration_ms=_elapsed_ms(start), ok=False)
                raise
            duration_ms = _elapsed_ms(start)
            ok = result.ok if isinstance(result, ServiceResult) else True
            log.debug("span.complete", duration_ms=duration_ms, ok=ok)

        if isinstance(result, ServiceResult):
            telemetry = {"span": func.__qualname__, "duration_ms": duration_ms}
            meta = {**(result.meta or {}), "telemetry": telemetry}
            result = result.model_copy(update={"meta": meta})  # type: ignore[assignment]
        return result

    return wrapper


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


def enable_telemetry() -> None:
    """Enable timing (called by the CLI context when --verbose)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
