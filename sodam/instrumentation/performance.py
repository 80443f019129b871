"""
Explicit performance marking

Operations opt in with ``@performance_log``. Each call is timed; calls taking
``SLOW_CALL_THRESHOLD_MS`` or longer are logged as warnings, the rest at
debug level. Arguments and results are never looked at.
"""
import functools
import inspect
import time
from typing import Any, Callable, TypeVar

from sodam.core.logging import get_logger
from sodam.instrumentation.metrics import record_duration
from sodam.instrumentation.rendering import run_best_effort

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

SLOW_CALL_THRESHOLD_MS = 1000

_PERFORMANCE_MARK = "__performance_tracked__"

_clock = time.perf_counter


def is_performance_tracked(func: Any) -> bool:
    """True if the callable was marked with ``performance_log``"""
    return bool(getattr(func, _PERFORMANCE_MARK, False))


def declaring_type_name(func: Callable[..., Any]) -> str:
    """Full name of the type declaring ``func``, or its module for plain functions"""
    owner = func.__qualname__.rpartition(".")[0]
    if owner:
        return f"{func.__module__}.{owner}"
    return func.__module__


def _report(class_name: str, method: str, started_at: float) -> None:
    elapsed = max(_clock() - started_at, 0.0)
    elapsed_ms = int(elapsed * 1000)

    record_duration(f"{class_name}.{method}", elapsed)

    if elapsed_ms >= SLOW_CALL_THRESHOLD_MS:
        logger.warning(
            "performance warning",
            class_name=class_name,
            method=method,
            elapsed_ms=elapsed_ms
        )
    else:
        logger.debug(
            "performance measured",
            class_name=class_name,
            method=method,
            elapsed_ms=elapsed_ms
        )


def performance_log(func: F) -> F:
    """
    Mark an operation for performance tracking

    Usable as a decorator or called directly on a callable at wiring time.
    Marking twice is a no-op.

    Args:
        func: Function or coroutine function to time

    Returns:
        Wrapper with the same signature and result
    """
    if is_performance_tracked(func):
        return func

    class_name = declaring_type_name(func)
    method = func.__name__

    if inspect.iscoroutinefunction(func):
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            started_at = _clock()
            try:
                return await func(*args, **kwargs)
            finally:
                run_best_effort(_report, class_name, method, started_at)

        wrapper = async_wrapper
    else:
        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            started_at = _clock()
            try:
                return func(*args, **kwargs)
            finally:
                run_best_effort(_report, class_name, method, started_at)

        wrapper = sync_wrapper

    setattr(wrapper, _PERFORMANCE_MARK, True)
    return wrapper
