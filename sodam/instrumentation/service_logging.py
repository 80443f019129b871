"""
Logging of every call into the service layer

``ServiceLoggingInterceptor.instrument`` is applied to each service while the
container is assembled. Objects whose class lives under the service namespace
get every public method wrapped; anything else is returned untouched.
"""
import functools
import inspect
import time
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, Tuple, TypeVar

from sodam.core.logging import get_logger
from sodam.instrumentation.metrics import record_service_call
from sodam.instrumentation.rendering import (
    MAX_RENDER_LENGTH,
    render_arguments,
    run_best_effort,
    safe_render,
)

logger = get_logger(__name__)

T = TypeVar("T")

SERVICE_NAMESPACE = "sodam.services"

_SERVICE_LOGGED_MARK = "__service_logged__"


@dataclass(frozen=True)
class InterceptedCall:
    """One intercepted invocation; lives only for the duration of the call"""
    call_id: str
    class_name: str
    method_name: str
    arguments: str
    started_at: float

    def elapsed_ms(self) -> int:
        return int(max(time.perf_counter() - self.started_at, 0.0) * 1000)


class ServiceLoggingInterceptor:
    """
    Wraps service calls with entry, outcome and elapsed-time logs

    Every wrapped call emits exactly one "service call started", one
    "service call completed" or "service call failed", and one
    "service call elapsed" record. Failures are re-raised as-is.
    """

    def __init__(
        self,
        namespace: str = SERVICE_NAMESPACE,
        max_render_length: int = MAX_RENDER_LENGTH
    ):
        self.namespace = namespace
        self.max_render_length = max_render_length

    def matches(self, target: Any) -> bool:
        """True if the target (class or instance) belongs to the service namespace"""
        cls = target if inspect.isclass(target) else type(target)
        module = getattr(cls, "__module__", None) or ""
        return module == self.namespace or module.startswith(self.namespace + ".")

    def instrument(self, service: T) -> T:
        """
        Wrap the public methods of a service instance in place

        Args:
            service: Object built by the container

        Returns:
            The same object
        """
        if not self.matches(service):
            return service

        wrapped = []
        for name, declaring_class in _public_methods(type(service)):
            method = getattr(service, name)
            setattr(service, name, self.wrap(method, class_name=declaring_class.__name__))
            wrapped.append(name)

        logger.debug(
            "service instrumented",
            service=type(service).__name__,
            methods=wrapped
        )
        return service

    def wrap(self, func: Callable[..., Any], class_name: Optional[str] = None) -> Callable[..., Any]:
        """
        Wrap a single callable

        Args:
            func: Function, bound method or coroutine function
            class_name: Declaring type simple name; derived from the
                qualified name when omitted

        Returns:
            Wrapper with the same result and failure behaviour
        """
        if getattr(func, _SERVICE_LOGGED_MARK, False):
            return func

        class_name = class_name or _owner_name(func)
        method_name = func.__name__

        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                call = self._start(class_name, method_name, args, kwargs)
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    run_best_effort(self._failed, call, e)
                    raise
                else:
                    run_best_effort(self._completed, call, result)
                    return result
                finally:
                    run_best_effort(self._finished, call)

            wrapper = async_wrapper
        else:
            @functools.wraps(func)
            def sync_wrapper(*args, **kwargs):
                call = self._start(class_name, method_name, args, kwargs)
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    run_best_effort(self._failed, call, e)
                    raise
                else:
                    run_best_effort(self._completed, call, result)
                    return result
                finally:
                    run_best_effort(self._finished, call)

            wrapper = sync_wrapper

        setattr(wrapper, _SERVICE_LOGGED_MARK, True)
        return wrapper

    def _start(
        self,
        class_name: str,
        method_name: str,
        args: Tuple[Any, ...],
        kwargs: Dict[str, Any]
    ) -> InterceptedCall:
        call = InterceptedCall(
            call_id=uuid.uuid4().hex[:12],
            class_name=class_name,
            method_name=method_name,
            arguments=render_arguments(args, kwargs, self.max_render_length),
            started_at=time.perf_counter(),
        )
        run_best_effort(self._started, call)
        return call

    def _started(self, call: InterceptedCall) -> None:
        logger.info(
            "service call started",
            call_id=call.call_id,
            class_name=call.class_name,
            method=call.method_name,
            arguments=call.arguments
        )

    def _completed(self, call: InterceptedCall, result: Any) -> None:
        record_service_call(call.class_name, call.method_name, "success")
        logger.info(
            "service call completed",
            call_id=call.call_id,
            class_name=call.class_name,
            method=call.method_name,
            result=safe_render(result, self.max_render_length)
        )

    def _failed(self, call: InterceptedCall, error: Exception) -> None:
        record_service_call(call.class_name, call.method_name, "error")
        logger.error(
            "service call failed",
            call_id=call.call_id,
            class_name=call.class_name,
            method=call.method_name,
            error=_error_message(error),
            error_type=type(error).__name__,
            exc_info=True
        )

    def _finished(self, call: InterceptedCall) -> None:
        logger.info(
            "service call elapsed",
            call_id=call.call_id,
            class_name=call.class_name,
            method=call.method_name,
            elapsed_ms=call.elapsed_ms()
        )


def _public_methods(cls: type) -> Iterator[Tuple[str, type]]:
    """Yield (name, declaring class) for public instance methods of ``cls``"""
    for name in dir(cls):
        if name.startswith("_"):
            continue
        for klass in cls.__mro__:
            if klass is object or name not in vars(klass):
                continue
            if inspect.isfunction(vars(klass)[name]):
                yield name, klass
            break


def _owner_name(func: Callable[..., Any]) -> str:
    owner = getattr(func, "__qualname__", "").rpartition(".")[0]
    return owner.rpartition(".")[2] if owner else getattr(func, "__module__", "")


def _error_message(error: Exception) -> str:
    try:
        return str(error)
    except Exception:
        return f"<unrepresentable {type(error).__name__}>"
