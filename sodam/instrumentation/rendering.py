"""
Best-effort rendering of call arguments and results for log records
"""
import sys
from typing import Any, Callable, Dict, Tuple

MAX_RENDER_LENGTH = 1000


def safe_render(value: Any, max_length: int = MAX_RENDER_LENGTH) -> str:
    """
    Render a value with repr(), never raising

    Args:
        value: Anything passed to or returned from an intercepted call
        max_length: Longer renderings are cut and suffixed with "..."

    Returns:
        The rendering, or a placeholder when repr() fails
    """
    try:
        text = repr(value)
    except Exception:
        return f"<unrepresentable {type(value).__name__}>"
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text


def render_arguments(
    args: Tuple[Any, ...],
    kwargs: Dict[str, Any],
    max_length: int = MAX_RENDER_LENGTH
) -> str:
    """Render positional and keyword arguments as ``[a, b, key=c]``"""
    parts = [safe_render(arg, max_length) for arg in args]
    parts.extend(f"{key}={safe_render(val, max_length)}" for key, val in kwargs.items())
    text = "[" + ", ".join(parts) + "]"
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text


def run_best_effort(action: Callable[..., Any], *args: Any) -> None:
    """
    Run a logging or metrics side effect, never raising

    A failing sink must not replace the result or exception of the call
    being instrumented, so the failure is written to stderr instead.
    """
    try:
        action(*args)
    except Exception as e:
        print(
            f"instrumentation sink failed: {type(e).__name__}: {safe_render(e)}",
            file=sys.stderr
        )
