"""Span decorator for storage use cases.

Spans carry the collection, file name and conflict policy of the call, read
from the bound arguments (positional or keyword). Upload DTOs contribute the
client-suggested name and, for URL uploads, only the source host.
"""

import inspect
from collections.abc import Callable
from enum import Enum
from functools import wraps
from typing import Any
from urllib.parse import urlsplit

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

# Bound parameter names recorded as storage.<name>
_RECORDED_ARGS = frozenset({"collection", "name", "resource", "policy"})


def _attribute_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _record_arguments(span: trace.Span, arguments: dict[str, Any]) -> None:
    for key, value in arguments.items():
        if value is None:
            continue
        if key in _RECORDED_ARGS:
            span.set_attribute(f"storage.{key}", _attribute_value(value))
        elif key == "kind" and hasattr(value, "media_type"):
            span.set_attribute("storage.media_type", value.media_type.value)
        elif key == "upload":
            suggested = getattr(value, "suggested_name", None)
            if suggested:
                span.set_attribute("storage.suggested_name", suggested)
            source_url = getattr(value, "source_url", None)
            if source_url:
                # Host only; query strings may carry tokens
                span.set_attribute("storage.source_host", urlsplit(source_url).netloc)


def traced(
    operation_name: str | None = None,
    attributes: dict | None = None,
) -> Callable:
    """Wrap a coroutine function in a span.

    Args:
        operation_name: Span name (defaults to module.funcname).
        attributes: Static attributes set on every span.

    Raises:
        TypeError: If the decorated function is not a coroutine function.
    """

    def decorator(func: Callable) -> Callable:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"traced only wraps coroutine functions, got {func!r}")
        tracer = trace.get_tracer(__name__)
        span_name = operation_name or f"{func.__module__}.{func.__name__}"
        signature = inspect.signature(func)

        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(span_name) as span:
                for key, value in (attributes or {}).items():
                    span.set_attribute(key, value)
                if span.is_recording():
                    bound = signature.bind_partial(*args, **kwargs)
                    _record_arguments(span, dict(bound.arguments))
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    span.record_exception(e)
                    raise
                span.set_status(Status(StatusCode.OK))
                return result

        return wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span (no-op when not recording)."""
    span = trace.get_current_span()
    if span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)
